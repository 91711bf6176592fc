"""
Demonstration driver.
Runs a fixed set of conversions and prints one line per result.
"""

import os
import sys
from decimal import Decimal
from typing import TextIO

from apps.converter.application.dto import ConversionRequestDTO, ConversionResultDTO
from apps.converter.domain.services import CurrencyConverter

DEMO_CONVERSIONS = (
    ConversionRequestDTO(source_currency="USD", target_currency="EUR", amount=Decimal("100")),
    ConversionRequestDTO(source_currency="GBP", target_currency="JPY", amount=Decimal("50")),
    ConversionRequestDTO(source_currency="JPY", target_currency="CAD", amount=Decimal("1000")),
)


def run_conversion(converter: CurrencyConverter, request: ConversionRequestDTO) -> ConversionResultDTO:
    converted = converter.convert(request.amount, request.source_currency, request.target_currency)
    return ConversionResultDTO(
        source_currency=request.source_currency,
        target_currency=request.target_currency,
        amount=request.amount,
        converted_amount=converted,
    )


def run_demo(converter: CurrencyConverter | None = None, stdout: TextIO | None = None) -> list[ConversionResultDTO]:
    """
    Print the demo conversions.

    Conversion errors are not caught: a bad request ends the run.

    Returns:
        The results, in the order they were printed
    """
    converter = converter or CurrencyConverter()
    stdout = stdout or sys.stdout

    stdout.write("=== Currency Converter Demo ===\n\n")

    results = []
    for request in DEMO_CONVERSIONS:
        result = run_conversion(converter, request)
        stdout.write(f"{result}\n")
        results.append(result)

    stdout.write("\nConversions complete.\n")
    return results


def main():
    """Console script entry point."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "core.settings")
    import django

    django.setup()
    run_demo()


if __name__ == "__main__":
    main()
