"""
Payment Adapter
===============

Core Design: Two legacy payment SDKs with incompatible APIs behind one
payment processor interface.

Design Patterns & Strategies Used:
1. Adapter Pattern - Translate pay() into each SDK's own call
2. Singleton Pattern - Each legacy SDK exists once per process

Features:
- Paypal and PhonePe behind a common pay(amount)
- Legacy clients created lazily on first payment
"""

from abc import ABC, abstractmethod

from singleton import LazySingleton


# ==================== LEGACY SDKs ====================

class Paypal(LazySingleton):
    """Legacy Paypal client"""

    def __init__(self):
        print("[Paypal] Initializing one Paypal instance ...")

    def paypal_payment(self, amount: float):
        print(f"[Paypal] Payment of {amount:.2f} has been paid by Paypal!")


class PhonePe(LazySingleton):
    """Legacy PhonePe client"""

    def __init__(self):
        print("[PhonePe] Initializing one PhonePe instance ...")

    def pay_via_phonepe(self, amount: float):
        print(f"[PhonePe] Payment of {amount:.2f} has been paid by PhonePe!")


# ==================== ADAPTER PATTERN ====================

class PaymentProcessor(ABC):
    """Target interface"""

    @abstractmethod
    def pay(self, amount: float) -> bool:
        pass


class PaypalAdapter(PaymentProcessor):
    """Adapts Paypal to PaymentProcessor"""

    def pay(self, amount: float) -> bool:
        Paypal.instance().paypal_payment(amount)
        return True


class PhonePeAdapter(PaymentProcessor):
    """Adapts PhonePe to PaymentProcessor"""

    def pay(self, amount: float) -> bool:
        PhonePe.instance().pay_via_phonepe(amount)
        return True


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("PAYMENT ADAPTER DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Paying through PhonePe:")
    processor: PaymentProcessor = PhonePeAdapter()
    processor.pay(5000)
    print()

    print("2. Paying through Paypal:")
    processor = PaypalAdapter()
    processor.pay(6000)
    print()

    print("3. Second Paypal payment reuses the client:")
    PaypalAdapter().pay(750)
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Adapter Pattern - Common pay() over legacy SDKs")
    print("2. Singleton Pattern - One client per SDK")
    print("=" * 60)


if __name__ == "__main__":
    main()
