"""
Notification Factory
====================

Core Design: Create order notifications from a string key.

Design Patterns & Strategies Used:
1. Factory Pattern - Key to constructor lookup
2. Strategy Pattern - Interchangeable notification channels (Email, SMS)

Features:
- Case-insensitive keys
- Unsupported channels yield None instead of raising
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, List, Optional


class NotificationType(Enum):
    EMAIL = "EMAIL"
    SMS = "SMS"


class Notification(ABC):
    """Notification channel interface"""

    @abstractmethod
    def notify_user(self, message: str) -> str:
        pass

    @abstractmethod
    def get_type(self) -> NotificationType:
        pass


class EmailNotification(Notification):
    """Email notification"""

    def notify_user(self, message: str) -> str:
        line = f"[Email] Sending an email notification: {message}"
        print(line)
        return line

    def get_type(self) -> NotificationType:
        return NotificationType.EMAIL


class SMSNotification(Notification):
    """SMS notification"""

    def notify_user(self, message: str) -> str:
        line = f"[SMS] Sending an SMS notification: {message}"
        print(line)
        return line

    def get_type(self) -> NotificationType:
        return NotificationType.SMS


class NotificationFactory:
    """Factory for creating notifications"""

    _creators: Dict[str, Callable[[], Notification]] = {
        NotificationType.EMAIL.value: EmailNotification,
        NotificationType.SMS.value: SMSNotification
    }

    @staticmethod
    def create_notification(key: str) -> Optional[Notification]:
        """Create notification for key, None if unsupported"""
        if not key:
            return None
        creator = NotificationFactory._creators.get(key.strip().upper())
        if creator is None:
            return None
        return creator()

    @staticmethod
    def supported_types() -> List[str]:
        return list(NotificationFactory._creators)


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("NOTIFICATION FACTORY DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Email notification:")
    email = NotificationFactory.create_notification("EMAIL")
    if email is not None:
        email.notify_user("Your order has been shipped!")
    print()

    print("2. SMS notification:")
    sms = NotificationFactory.create_notification("SMS")
    if sms is not None:
        sms.notify_user("Your package will be delivered today.")
    print()

    print("3. Unsupported type:")
    unknown = NotificationFactory.create_notification("PUSH")
    if unknown is None:
        print("Notification type 'PUSH' is not supported yet.")
        print(f"Supported: {', '.join(NotificationFactory.supported_types())}")
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Factory Pattern - Create notifications by key")
    print("2. Strategy Pattern - Email and SMS channels")
    print("=" * 60)


if __name__ == "__main__":
    main()
