"""
Domain errors raised by the converter.
Both are caller-input errors; nothing is retried or recovered.
"""

from decimal import Decimal
from typing import Iterable


class ConversionError(ValueError):
    """Base class for rejected conversion requests."""


class InvalidCurrency(ConversionError):

    def __init__(self, currency_code: str, supported_currencies: Iterable[str]):
        self.currency_code = currency_code
        self.supported_currencies = tuple(supported_currencies)
        super().__init__(
            f"Unsupported currency: {currency_code}. "
            f"Supported currencies: {', '.join(self.supported_currencies)}"
        )


class NegativeAmount(ConversionError):

    def __init__(self, amount: Decimal):
        self.amount = amount
        super().__init__(f"Amount cannot be negative: {amount}")
