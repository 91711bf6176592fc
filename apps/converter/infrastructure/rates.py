"""
Static rate table.
Rates are fixed at import time; nothing loads or refreshes them.
"""

from decimal import Decimal
from types import MappingProxyType

from apps.converter.domain.exceptions import InvalidCurrency
from apps.converter.domain.interfaces import BaseRateTable


# Rates relative to USD
EXCHANGE_RATES = MappingProxyType({
    "USD": Decimal("1.00"),
    "EUR": Decimal("0.92"),
    "GBP": Decimal("0.79"),
    "JPY": Decimal("149.50"),
    "CAD": Decimal("1.36"),
})


class StaticRateTable(BaseRateTable):
    """
    Read-only rate table backed by EXCHANGE_RATES.
    Lookups are exact: codes are neither upper-cased nor trimmed.
    """

    def __init__(self, rates=EXCHANGE_RATES):
        self._rates = rates

    def get_rate(self, currency_code: str) -> Decimal:
        """
        Return the base-relative rate for a currency.

        Raises:
            InvalidCurrency: if the code is not in the table
        """
        if not self.is_supported(currency_code):
            raise InvalidCurrency(currency_code, self.currencies)
        return self._rates[currency_code]

    def is_supported(self, currency_code: str) -> bool:
        try:
            return currency_code in self._rates
        except TypeError:
            # unhashable input
            return False

    @property
    def currencies(self) -> tuple[str, ...]:
        return tuple(self._rates)
