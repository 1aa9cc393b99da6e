"""
Tests for number, currency and date formatting.
"""

from datetime import date, datetime
from decimal import Decimal

from apps.core.formatting_utils import (
    format_currency,
    format_datetime,
    format_number,
    format_short_date,
)


class TestFormatNumber:
    """Test format_number."""

    def test_indonesian_separators(self):
        assert format_number(1234567.5, decimal_places=2, locale="id") == "1.234.567,50"

    def test_english_separators(self):
        assert format_number(1234567.5, decimal_places=2, locale="en") == "1,234,567.50"

    def test_without_grouping(self):
        formatted = format_number(
            Decimal("25000"), decimal_places=0, use_grouping=False, locale="id"
        )
        assert formatted == "25000"

    def test_small_and_negative_numbers(self):
        assert format_number(999, locale="id") == "999"
        assert format_number(-1500, decimal_places=2, locale="id") == "-1.500,00"


class TestFormatCurrency:
    """Test format_currency."""

    def test_rupiah(self):
        assert format_currency(25000) == "Rp 25.000,00"
        assert format_currency(Decimal("1250000.50")) == "Rp 1.250.000,50"

    def test_zero(self):
        assert format_currency(0) == "Rp 0,00"

    def test_negative(self):
        assert format_currency(-1500) == "-Rp 1.500,00"

    def test_other_currency(self):
        assert format_currency(Decimal("12.5"), currency="USD", locale="en") == "$ 12.50"


class TestFormatDatetime:
    """Test format_datetime."""

    def test_indonesian_month_names(self):
        assert format_datetime(datetime(2024, 1, 5, 14, 30)) == "5 Januari 2024, 14:30"
        assert format_datetime(datetime(2024, 8, 17, 9, 5)) == "17 Agustus 2024, 09:05"

    def test_english(self):
        assert format_datetime(datetime(2024, 1, 5, 14, 30), locale="en") == "Jan 05, 2024, 14:30"


class TestFormatShortDate:
    """Test format_short_date."""

    def test_indonesian_abbreviations(self):
        assert format_short_date(date(2024, 8, 17)) == "17 Agu"
        assert format_short_date(date(2024, 5, 1)) == "1 Mei"
        assert format_short_date(date(2024, 12, 25)) == "25 Des"

    def test_english(self):
        assert format_short_date(date(2024, 8, 17), locale="en") == "Aug 17"
