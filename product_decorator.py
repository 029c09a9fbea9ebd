"""
Product Decorator
=================

Core Design: Add-ons (gift wrap, extended warranty) layered over a product.

Design Patterns & Strategies Used:
1. Decorator Pattern - Each add-on wraps one inner product

Features:
- Nest add-ons to any depth
- Inner product priced first, each layer adds its own cost
"""

from product import Product


class BasicProduct(Product):
    """Concrete Component - plain product"""

    def __init__(self, description: str, price: float):
        self._description = description
        self._price = price

    def description(self) -> str:
        return self._description

    def price(self) -> float:
        return self._price


class ProductDecorator(Product):
    """Base decorator - holds one inner product"""

    extra_cost = 0.0
    label = ""

    def __init__(self, product: Product):
        self._product = product

    def description(self) -> str:
        if not self.label:
            return self._product.description()
        return f"{self._product.description()} + {self.label}"

    def price(self) -> float:
        return self._product.price() + self.extra_cost


class GiftWrap(ProductDecorator):
    """Concrete Decorator - gift wrapping"""

    extra_cost = 10.00
    label = "Gift Wrap"


class ExtendedWarranty(ProductDecorator):
    """Concrete Decorator - extended warranty"""

    extra_cost = 100.00
    label = "Extended Warranty"


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("PRODUCT DECORATOR DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Basic product:")
    my_order: Product = BasicProduct("Gaming Laptop", 1000.00)
    print(f"{my_order.description()}: ${my_order.price():.2f}")
    print()

    print("2. Adding gift wrap:")
    my_order = GiftWrap(my_order)
    print(f"{my_order.description()}: ${my_order.price():.2f}")
    print()

    print("3. Adding extended warranty:")
    my_order = ExtendedWarranty(my_order)
    print(f"Final Description: {my_order.description()}")
    print(f"Total Price: ${my_order.price():.2f}")
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Decorator Pattern - Gift wrap and warranty add-ons")
    print("=" * 60)


if __name__ == "__main__":
    main()
