"""
Payment Gateway
===============

Core Design: One payment gateway shared by the whole process.

Design Patterns & Strategies Used:
1. Singleton Pattern - Lazy, lock-guarded single instance

Features:
- Instance created on first access from any thread
- Every caller gets the identical gateway
"""

from singleton import LazySingleton


class PaymentGateway(LazySingleton):
    """Process-wide payment gateway"""

    def __init__(self):
        print("[PaymentGateway] Initializing one instance ...")
        self.processed_count = 0

    def process_payment(self, order_id: str, amount: float) -> bool:
        """Process payment for an order"""
        print(f"[PaymentGateway] Processing the amount of {amount:.2f} "
              f"against the order id {order_id}")
        self.processed_count += 1
        return True


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("SINGLETON PAYMENT GATEWAY DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Getting the first instance:")
    gateway1 = PaymentGateway.instance()
    gateway1.process_payment("ORD123", 250.00)
    print()

    print("2. Getting another instance:")
    gateway2 = PaymentGateway.instance()
    gateway2.process_payment("ORD456", 100.50)
    print()

    print("3. Verifying identity:")
    if gateway1 is gateway2:
        print("SUCCESS: Both variables point to the same instance.")
    else:
        print("FAILURE: Multiple instances were created.")
    print(f"Instance 1 id: {id(gateway1)}")
    print(f"Instance 2 id: {id(gateway2)}")
    print(f"Payments processed: {gateway1.processed_count}")
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Singleton Pattern - Lazy, thread-safe single instance")
    print("=" * 60)


if __name__ == "__main__":
    main()
