import pytest
from decimal import Decimal

from apps.converter.domain.exceptions import InvalidCurrency
from apps.converter.domain.interfaces import BaseRateTable
from apps.converter.infrastructure.rates import EXCHANGE_RATES, StaticRateTable


@pytest.fixture
def table():
    return StaticRateTable()


class TestStaticRateTable:
    """Tests for the built-in rate table."""

    def test_is_rate_table(self, table):
        assert isinstance(table, BaseRateTable)

    def test_rates(self, table):
        """
        Test the configured rates relative to USD.
        """
        assert table.get_rate("USD") == Decimal("1.00")
        assert table.get_rate("EUR") == Decimal("0.92")
        assert table.get_rate("GBP") == Decimal("0.79")
        assert table.get_rate("JPY") == Decimal("149.50")
        assert table.get_rate("CAD") == Decimal("1.36")

    def test_base_currency_comes_from_interface(self):
        assert "base_currency" not in vars(StaticRateTable)
        assert StaticRateTable.base_currency == BaseRateTable.base_currency == "USD"

    def test_base_currency_rate_is_one(self, table):
        assert table.base_currency == "USD"
        assert table.get_rate(table.base_currency) == 1

    def test_currencies(self, table):
        assert table.currencies == ("USD", "EUR", "GBP", "JPY", "CAD")

    def test_rates_are_decimal(self):
        assert all(isinstance(rate, Decimal) for rate in EXCHANGE_RATES.values())

    def test_get_rate_unknown_currency(self, table):
        with pytest.raises(InvalidCurrency) as exc_info:
            table.get_rate("XXX")

        assert exc_info.value.currency_code == "XXX"

    def test_table_is_read_only(self):
        """
        Test that the module-level table cannot be modified.
        """
        with pytest.raises(TypeError):
            EXCHANGE_RATES["USD"] = Decimal("2")
        with pytest.raises(TypeError):
            del EXCHANGE_RATES["EUR"]

        assert EXCHANGE_RATES["USD"] == Decimal("1.00")

    def test_is_supported(self, table):
        assert table.is_supported("JPY") is True
        assert table.is_supported("jpy") is False
        assert table.is_supported({}) is False
