"""
product_bundle and product_decorator tests
"""

import pytest

from product import Product
from product_bundle import Item, ProductBundle
from product_decorator import BasicProduct, ExtendedWarranty, GiftWrap, ProductDecorator


class TestProductBundle:
    """Composite aggregation"""

    def test_item(self):
        item = Item(10.0, "Item 1")
        assert item.price() == 10.0
        assert item.description() == "Item 1"

    def test_bundle_of_two(self):
        bundle = ProductBundle("Bundle 1")
        bundle.add_product(Item(10.0, "Item 1"))
        bundle.add_product(Item(20.0, "Item 2"))
        assert bundle.price() == pytest.approx(30.0)

    def test_nested_bundle(self):
        inner = ProductBundle("Bundle 1")
        inner.add_product(Item(10.0, "Item 1"))
        inner.add_product(Item(20.0, "Item 2"))
        outer = ProductBundle("Bundle 2")
        outer.add_product(inner)
        outer.add_product(Item(30.0, "Item 3"))

        assert outer.price() == pytest.approx(60.0)
        assert outer.description() == "Bundle 2 [Bundle 1 [Item 1, Item 2], Item 3]"

    def test_empty_bundle(self):
        bundle = ProductBundle("Empty")
        assert bundle.price() == 0.0
        assert bundle.description() == "Empty []"

    def test_insertion_order(self):
        bundle = ProductBundle("B")
        bundle.add_product(Item(1.0, "b"))
        bundle.add_product(Item(1.0, "a"))
        assert bundle.description() == "B [b, a]"

    def test_get_products_is_a_copy(self):
        bundle = ProductBundle("B")
        bundle.add_product(Item(1.0, "a"))
        bundle.get_products().clear()
        assert len(bundle.get_products()) == 1


class TestProductDecorator:
    """Decorator chaining"""

    def test_basic_product(self):
        product = BasicProduct("Gaming Laptop", 1000.00)
        assert product.price() == 1000.00
        assert product.description() == "Gaming Laptop"

    def test_gift_wrap_then_warranty(self):
        product = ExtendedWarranty(GiftWrap(BasicProduct("Gaming Laptop", 1000.00)))
        assert product.price() == pytest.approx(1110.00)

        description = product.description()
        assert "Gift Wrap" in description
        assert "Extended Warranty" in description
        assert description.index("Gift Wrap") < description.index("Extended Warranty")

    def test_wrap_order_reflected_in_description(self):
        product = GiftWrap(ExtendedWarranty(BasicProduct("Phone", 500.0)))
        assert product.description() == "Phone + Extended Warranty + Gift Wrap"
        assert product.price() == pytest.approx(610.0)

    def test_deep_nesting(self):
        product: Product = BasicProduct("Pen", 1.0)
        for _ in range(5):
            product = GiftWrap(product)
        assert product.price() == pytest.approx(51.0)
        assert product.description().count("Gift Wrap") == 5

    def test_decorating_a_bundle(self):
        bundle = ProductBundle("Set")
        bundle.add_product(Item(10.0, "Mug"))
        wrapped = GiftWrap(bundle)
        assert wrapped.price() == pytest.approx(20.0)
        assert wrapped.description() == "Set [Mug] + Gift Wrap"

    def test_bare_decorator_passes_through(self):
        product = ProductDecorator(BasicProduct("Pen", 1.0))
        assert product.description() == "Pen"
        assert product.price() == pytest.approx(1.0)
