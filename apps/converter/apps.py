from decimal import Decimal

from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


class ConverterConfig(AppConfig):
    name = "apps.converter"
    verbose_name = "Currency Converter"

    def ready(self):
        from apps.converter.infrastructure.rates import StaticRateTable

        table = StaticRateTable()
        base = getattr(settings, "BASE_CURRENCY", table.base_currency)

        if base != table.base_currency:
            raise ImproperlyConfigured(
                f"BASE_CURRENCY is '{base}' but the rate table is quoted against '{table.base_currency}'"
            )
        if not table.is_supported(base) or table.get_rate(base) != Decimal("1"):
            raise ImproperlyConfigured(f"Rate table must quote the base currency '{base}' at exactly 1")
