from abc import ABC, abstractmethod


class Product(ABC):
    """Anything with a price and a description"""

    @abstractmethod
    def price(self) -> float:
        pass

    @abstractmethod
    def description(self) -> str:
        pass
