"""
Discount Strategy
=================

Core Design: Shopping cart that delegates discount computation to a pluggable
strategy.

Design Patterns & Strategies Used:
1. Strategy Pattern - Different discount algorithms (Loyalty, Seasonal)

Features:
- Loyalty discount (5% off)
- Seasonal discount (10% off)
- Swap the discount at runtime
"""

from abc import ABC, abstractmethod


class DiscountStrategy(ABC):
    """Discount strategy interface"""

    @abstractmethod
    def apply_discount(self, amount: float) -> float:
        pass

    @abstractmethod
    def get_name(self) -> str:
        pass


class LoyaltyDiscountStrategy(DiscountStrategy):
    """Discount for loyal customers"""

    factor = 0.95

    def apply_discount(self, amount: float) -> float:
        return amount * self.factor

    def get_name(self) -> str:
        return "Loyalty"


class SeasonalDiscountStrategy(DiscountStrategy):
    """Seasonal sale discount"""

    factor = 0.90

    def apply_discount(self, amount: float) -> float:
        return amount * self.factor

    def get_name(self) -> str:
        return "Seasonal"


class ShoppingCart:
    """Context holding the current discount strategy"""

    def __init__(self, discount_strategy: DiscountStrategy):
        self.discount_strategy = discount_strategy

    def set_discount_strategy(self, strategy: DiscountStrategy):
        """Set discount strategy"""
        self.discount_strategy = strategy

    def checkout(self, price: float) -> float:
        """Get discounted price"""
        return self.discount_strategy.apply_discount(price)


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("DISCOUNT STRATEGY DEMONSTRATION")
    print("=" * 60)
    print()

    cart = ShoppingCart(LoyaltyDiscountStrategy())

    print("1. Checkout with loyalty discount:")
    print(f"Discounted price: ${cart.checkout(100.0):.2f}")
    print()

    print("2. Switching to seasonal discount:")
    cart.set_discount_strategy(SeasonalDiscountStrategy())
    print(f"Strategy: {cart.discount_strategy.get_name()}")
    print(f"Discounted price: ${cart.checkout(100.0):.2f}")
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Strategy Pattern - Loyalty and seasonal discounts")
    print("=" * 60)


if __name__ == "__main__":
    main()
