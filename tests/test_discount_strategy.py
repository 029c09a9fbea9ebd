"""
discount_strategy tests
"""

import pytest

from discount_strategy import (
    LoyaltyDiscountStrategy,
    SeasonalDiscountStrategy,
    ShoppingCart,
)


class TestDiscountStrategies:
    """Discount factors"""

    @pytest.mark.parametrize("amount", [0.0, 1.0, 100.0, 2499.99])
    def test_loyalty_discount(self, amount):
        assert LoyaltyDiscountStrategy().apply_discount(amount) == pytest.approx(amount * 0.95)

    @pytest.mark.parametrize("amount", [0.0, 1.0, 100.0, 2499.99])
    def test_seasonal_discount(self, amount):
        assert SeasonalDiscountStrategy().apply_discount(amount) == pytest.approx(amount * 0.90)


class TestShoppingCart:
    """Cart delegates to its strategy"""

    def test_checkout_uses_strategy(self):
        cart = ShoppingCart(LoyaltyDiscountStrategy())
        assert cart.checkout(100.0) == pytest.approx(95.0)

    def test_switch_strategy(self):
        cart = ShoppingCart(LoyaltyDiscountStrategy())
        cart.set_discount_strategy(SeasonalDiscountStrategy())
        assert cart.checkout(100.0) == pytest.approx(90.0)
        assert cart.discount_strategy.get_name() == "Seasonal"
