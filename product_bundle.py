"""
Product Bundle
==============

Core Design: Items and nested bundles priced through one interface.

Design Patterns & Strategies Used:
1. Composite Pattern - Bundles hold items or other bundles

Features:
- Bundle price is the sum of its children
- Bundle description lists its children in insertion order
- Arbitrary nesting
"""

from typing import List

from product import Product


class Item(Product):
    """Leaf product"""

    def __init__(self, price: float, description: str):
        self._price = price
        self._description = description

    def price(self) -> float:
        return self._price

    def description(self) -> str:
        return self._description


class ProductBundle(Product):
    """Composite product"""

    def __init__(self, description: str):
        self._description = description
        self._products: List[Product] = []

    def add_product(self, product: Product):
        """Add child product; a bundle must never contain itself"""
        self._products.append(product)

    def get_products(self) -> List[Product]:
        return list(self._products)

    def price(self) -> float:
        return sum((product.price() for product in self._products), 0.0)

    def description(self) -> str:
        children = ", ".join(product.description() for product in self._products)
        return f"{self._description} [{children}]"


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("PRODUCT BUNDLE DEMONSTRATION")
    print("=" * 60)
    print()

    item1 = Item(10.0, "Item 1")
    item2 = Item(20.0, "Item 2")
    item3 = Item(30.0, "Item 3")

    print("1. Bundle of two items:")
    bundle1 = ProductBundle("Bundle 1")
    bundle1.add_product(item1)
    bundle1.add_product(item2)
    print(f"Description: {bundle1.description()}")
    print(f"Total Price: {bundle1.price():.2f}")
    print()

    print("2. Bundle containing a bundle:")
    bundle2 = ProductBundle("Bundle 2")
    bundle2.add_product(bundle1)
    bundle2.add_product(item3)
    print(f"Description: {bundle2.description()}")
    print(f"Total Price: {bundle2.price():.2f}")
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Composite Pattern - Items and nested bundles")
    print("=" * 60)


if __name__ == "__main__":
    main()
