import dataclasses

import pytest
from decimal import Decimal

from apps.converter.application.dto import ConversionRequestDTO, ConversionResultDTO


class TestDataTransferObjects:
    """Tests for DTOs - mainly structure validation."""

    def test_conversion_request_dto(self):
        """Test ConversionRequestDTO structure."""
        dto = ConversionRequestDTO(
            source_currency="USD",
            target_currency="EUR",
            amount=Decimal("100")
        )

        assert dto.source_currency == "USD"
        assert dto.target_currency == "EUR"
        assert dto.amount == Decimal("100")

    def test_conversion_result_dto_str(self):
        """Test that results render as '<amount> <from> = <result> <to>'."""
        dto = ConversionResultDTO(
            source_currency="GBP",
            target_currency="JPY",
            amount=Decimal("50"),
            converted_amount=Decimal("9462.02")
        )

        assert str(dto) == "50 GBP = 9462.02 JPY"

    def test_dtos_are_frozen(self):
        dto = ConversionRequestDTO(source_currency="USD", target_currency="EUR", amount=Decimal("1"))

        with pytest.raises(dataclasses.FrozenInstanceError):
            dto.amount = Decimal("2")
