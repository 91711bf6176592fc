from abc import ABC, abstractmethod
from decimal import Decimal


class BaseRateTable(ABC):
    """Exchange rates quoted against a single base currency."""

    base_currency: str = "USD"

    @abstractmethod
    def get_rate(self, currency_code: str) -> Decimal:
        pass

    @abstractmethod
    def is_supported(self, currency_code: str) -> bool:
        pass

    @property
    @abstractmethod
    def currencies(self) -> tuple[str, ...]:
        pass
