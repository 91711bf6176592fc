"""
Data Transfer Objects for the application layer.
DTOs keep the demo driver independent of the converter's call signature.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ConversionRequestDTO:
    """Request DTO for currency conversion."""
    source_currency: str
    target_currency: str
    amount: Decimal


@dataclass(frozen=True)
class ConversionResultDTO:
    """Result DTO for currency conversion."""
    source_currency: str
    target_currency: str
    amount: Decimal
    converted_amount: Decimal

    def __str__(self):
        return f"{self.amount} {self.source_currency} = {self.converted_amount} {self.target_currency}"
