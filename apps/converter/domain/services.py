"""
Domain services - Core conversion logic.
Every conversion goes through the base currency of the rate table.
"""

import logging
from decimal import Context, Decimal, ROUND_HALF_UP

from apps.converter.domain.exceptions import InvalidCurrency, NegativeAmount
from apps.converter.domain.interfaces import BaseRateTable
from apps.converter.infrastructure.rates import StaticRateTable

logger = logging.getLogger(__name__)

BASE_AMOUNT_QUANTUM = Decimal("0.0001")
RESULT_QUANTUM = Decimal("0.01")

# Explicit contexts so callers' thread-local decimal settings never leak in
MIN_PRECISION = 60


def _to_decimal(value) -> Decimal:
    if isinstance(value, bool):
        raise TypeError("conversion from bool to Decimal is not supported")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _context_for(amount: Decimal) -> Context:
    # enough digits to hold the whole quotient plus its 4 decimal places
    return Context(prec=max(MIN_PRECISION, amount.adjusted() + 40), rounding=ROUND_HALF_UP)


class CurrencyConverter:
    """
    Converts amounts between the currencies of a rate table.

    Conversion is two-stage:
    1. amount / rate[from], rounded half-up to 4 decimal places
    2. that base amount * rate[to], rounded half-up to 2 decimal places

    Both roundings are observable at the cent level and are kept as is.
    """

    def __init__(self, rate_table: BaseRateTable | None = None):
        self.rate_table = rate_table if rate_table is not None else StaticRateTable()

    @property
    def supported_currencies(self) -> tuple[str, ...]:
        return self.rate_table.currencies

    def is_supported_currency(self, currency_code: str) -> bool:
        return self.rate_table.is_supported(currency_code)

    def convert(self, amount, from_currency: str, to_currency: str) -> Decimal:
        """
        Convert an amount from one currency to another.

        Args:
            amount: Non-negative amount (Decimal, int or str)
            from_currency: Source currency code, e.g. "USD"
            to_currency: Target currency code, e.g. "EUR"

        Returns:
            Converted amount as Decimal with exactly 2 decimal places

        Raises:
            InvalidCurrency: if either currency is not supported
            NegativeAmount: if the amount is below zero

        Example:
            >>> CurrencyConverter().convert(Decimal("100"), "USD", "EUR")
            Decimal('92.00')
        """
        self._validate_currency(from_currency)
        self._validate_currency(to_currency)

        amount = _to_decimal(amount)
        if amount < 0:
            logger.warning("Rejected negative amount %s for %s/%s", amount, from_currency, to_currency)
            raise NegativeAmount(amount)
        # -0 would otherwise come out as -0.00
        amount = amount.copy_abs()
        context = _context_for(amount)

        amount_in_base = context.divide(
            amount, self.rate_table.get_rate(from_currency)
        ).quantize(BASE_AMOUNT_QUANTUM, rounding=ROUND_HALF_UP, context=context)

        result = context.multiply(
            amount_in_base, self.rate_table.get_rate(to_currency)
        ).quantize(RESULT_QUANTUM, rounding=ROUND_HALF_UP, context=context)

        logger.debug(
            "Converted %s %s -> %s %s (base %s %s)",
            amount, from_currency, result, to_currency,
            amount_in_base, self.rate_table.base_currency,
        )
        return result

    def _validate_currency(self, currency_code: str) -> None:
        if not self.is_supported_currency(currency_code):
            logger.warning("Rejected unsupported currency %r", currency_code)
            raise InvalidCurrency(currency_code, self.supported_currencies)


default_converter = CurrencyConverter()


def convert(amount, from_currency: str, to_currency: str) -> Decimal:
    """Convert using the built-in static rate table."""
    return default_converter.convert(amount, from_currency, to_currency)


def is_supported_currency(currency_code: str) -> bool:
    return default_converter.is_supported_currency(currency_code)
