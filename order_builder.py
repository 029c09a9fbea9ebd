"""
Order Builder
=============

Core Design: Step-by-step construction of an immutable order.

Design Patterns & Strategies Used:
1. Builder Pattern - Fluent setters on a staging object, build() snapshots it
2. Value Object - Frozen order, never mutated after construction

Features:
- Chained setters in any order
- Unset fields default to empty/false
- Builder can be reused without affecting built orders
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Order:
    """Immutable order"""
    product: str = ""
    size: str = ""
    gift_wrapped: bool = False
    color: str = ""
    bank_offer_applicable: bool = False
    prime_delivery: bool = False

    @staticmethod
    def builder() -> 'OrderBuilder':
        return OrderBuilder()

    def __str__(self) -> str:
        return (f"Order(product='{self.product}', size='{self.size}', "
                f"gift_wrapped={self.gift_wrapped}, color='{self.color}', "
                f"bank_offer_applicable={self.bank_offer_applicable}, "
                f"prime_delivery={self.prime_delivery})")


class OrderBuilder:
    """Staging object for Order"""

    def __init__(self):
        self._product = ""
        self._size = ""
        self._gift_wrapped = False
        self._color = ""
        self._bank_offer_applicable = False
        self._prime_delivery = False

    def product(self, product: str) -> 'OrderBuilder':
        self._product = product
        return self

    def size(self, size: str) -> 'OrderBuilder':
        self._size = size
        return self

    def gift_wrapped(self, gift_wrapped: bool) -> 'OrderBuilder':
        self._gift_wrapped = gift_wrapped
        return self

    def color(self, color: str) -> 'OrderBuilder':
        self._color = color
        return self

    def bank_offer_applicable(self, bank_offer_applicable: bool) -> 'OrderBuilder':
        self._bank_offer_applicable = bank_offer_applicable
        return self

    def prime_delivery(self, prime_delivery: bool) -> 'OrderBuilder':
        self._prime_delivery = prime_delivery
        return self

    def build(self) -> Order:
        """Snapshot the staged values"""
        return Order(
            product=self._product,
            size=self._size,
            gift_wrapped=self._gift_wrapped,
            color=self._color,
            bank_offer_applicable=self._bank_offer_applicable,
            prime_delivery=self._prime_delivery
        )


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("ORDER BUILDER DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Building a fully specified order:")
    order = (Order.builder()
             .product("Gaming Laptop")
             .size("15-inch")
             .gift_wrapped(True)
             .color("Space Grey")
             .bank_offer_applicable(False)
             .prime_delivery(True)
             .build())
    print(f"Product: {order}")
    print()

    print("2. Building with defaults:")
    print(f"Product: {Order.builder().product('Mouse').build()}")
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Builder Pattern - Fluent order construction")
    print("2. Value Object - Immutable order")
    print("=" * 60)


if __name__ == "__main__":
    main()
