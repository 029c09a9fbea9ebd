"""
Order Facade
============

Core Design: One call places an order across inventory, shipping and payment.

Design Patterns & Strategies Used:
1. Facade Pattern - Single entry point over three subsystems
2. Dependency Injection - Subsystems can be swapped for stubs

Features:
- Strict sequence: inventory, shipping, payment
- Simulated subsystem latency that can be cancelled
- Cancellation aborts the remaining steps and is reported to the caller
- No rollback of steps that already ran
"""

import threading
from typing import Callable, Optional
from uuid import uuid4

from product import Product
from product_decorator import BasicProduct, GiftWrap


class OrderInterruptedError(Exception):
    """Raised when order placement is cancelled mid-sequence"""

    def __init__(self, step: str):
        super().__init__(f"Order placement interrupted during {step}")
        self.step = step


# ==================== SUBSYSTEMS ====================

class Inventory:
    """Inventory subsystem"""

    def update_inventory(self, description: str):
        print(f"[Inventory] Updating inventory for {description}")


class Shipping:
    """Shipping subsystem"""

    def arrange_for_shipping(self, description: str):
        print(f"[Shipping] Arranging shipping for {description}")


class Payment:
    """Payment subsystem"""

    def process_payment(self, amount: float):
        print(f"[Payment] Processing payment of {amount:.2f}")


# ==================== FACADE PATTERN ====================

class OrderFacade:
    """Facade over inventory, shipping and payment"""

    def __init__(self, inventory: Optional[Inventory] = None,
                 shipping: Optional[Shipping] = None,
                 payment: Optional[Payment] = None,
                 step_delay: float = 2.0,
                 cancel_event: Optional[threading.Event] = None):
        self.inventory = inventory or Inventory()
        self.shipping = shipping or Shipping()
        self.payment = payment or Payment()
        self.step_delay = step_delay
        self._owns_event = cancel_event is None
        self.cancel_event = cancel_event or threading.Event()

    def cancel(self):
        """Interrupt the order currently being placed"""
        self.cancel_event.set()

    def place_order(self, product: Product) -> str:
        """Place order, returns order id"""
        description = product.description()
        print(f"Now processing: {description}")

        self._run_step("inventory", lambda: self.inventory.update_inventory(description))
        self._run_step("shipping", lambda: self.shipping.arrange_for_shipping(description))
        self._run_step("payment", lambda: self.payment.process_payment(product.price()))

        order_id = str(uuid4())
        print(f"Order {order_id} is successfully placed!")
        return order_id

    def _run_step(self, step: str, action: Callable[[], None]):
        """Wait out simulated latency, then call the subsystem"""
        if self.cancel_event.wait(self.step_delay):
            # An injected event belongs to the caller and stays set
            if self._owns_event:
                self.cancel_event.clear()
            raise OrderInterruptedError(step)
        action()


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("ORDER FACADE DEMONSTRATION")
    print("=" * 60)
    print()

    my_laptop = GiftWrap(BasicProduct("MacBook Pro", 2000.00))
    facade = OrderFacade(step_delay=0.5)

    print("1. Placing an order:")
    facade.place_order(my_laptop)
    print()

    print("2. Cancelling an order mid-way:")
    timer = threading.Timer(0.7, facade.cancel)
    timer.start()
    try:
        facade.place_order(my_laptop)
    except OrderInterruptedError as e:
        print(f"[Error] {e}")
    finally:
        timer.cancel()
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Facade Pattern - One call over three subsystems")
    print("2. Dependency Injection - Swappable subsystems")
    print("=" * 60)


if __name__ == "__main__":
    main()
