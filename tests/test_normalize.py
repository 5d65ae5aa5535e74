"""
Tests for Arabic/Western digit normalisation.
"""

import pytest

from egnumbers.core.normalize import (
    contains_arabic_digits,
    extract_digits,
    to_arabic_digits,
    to_western_digits,
)


class TestToWesternDigits:
    """Tests for to_western_digits."""

    def test_arabic_indic_digits(self):
        """Arabic-Indic digits convert to ASCII."""
        assert to_western_digits("٠١٢٣٤٥٦٧٨٩") == "0123456789"

    def test_eastern_arabic_digits(self):
        """Persian digits convert to ASCII."""
        assert to_western_digits("۰۱۲۳۴۵۶۷۸۹") == "0123456789"

    def test_mixed_input_keeps_other_characters(self):
        """Only digits and numeric separators change."""
        assert to_western_digits("رقم ٤١١١-1111") == "رقم 4111-1111"

    def test_arabic_separators(self):
        """Decimal, thousands and percent signs convert."""
        assert to_western_digits("١٬٥٠٠٫٧٥٪") == "1,500.75%"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value):
        """Empty input gives an empty string."""
        assert to_western_digits(value) == ""


class TestToArabicDigits:
    """Tests for to_arabic_digits."""

    def test_string(self):
        """ASCII digits render as Arabic-Indic."""
        assert to_arabic_digits("2024") == "٢٠٢٤"

    def test_int(self):
        """Integers are accepted."""
        assert to_arabic_digits(1990) == "١٩٩٠"

    def test_none(self):
        """None gives an empty string."""
        assert to_arabic_digits(None) == ""

    def test_reverses_western_conversion(self):
        """Arabic -> Western -> Arabic is stable for digit strings."""
        arabic = "٣٠٤٠٢٢٩٢١٠١٢٣٦"
        assert to_arabic_digits(to_western_digits(arabic)) == arabic


class TestExtractDigits:
    """Tests for extract_digits."""

    def test_drops_everything_else(self):
        """Separators, letters and spaces are removed."""
        assert extract_digits("ID: 2900-1010 1000/15") == "29001010100015"

    def test_converts_before_extracting(self):
        """Arabic digits are kept after conversion."""
        assert extract_digits("٢٩٠ - ٠١") == "29001"

    @pytest.mark.parametrize("value", [None, "", "abc"])
    def test_no_digits(self, value):
        """No digits gives an empty string."""
        assert extract_digits(value) == ""


class TestContainsArabicDigits:
    """Tests for contains_arabic_digits."""

    def test_detects_arabic(self):
        """Arabic-Indic and Persian digits are detected."""
        assert contains_arabic_digits("card ٤١١١") is True
        assert contains_arabic_digits("۵") is True

    def test_western_only(self):
        """ASCII digits are not Arabic."""
        assert contains_arabic_digits("4111") is False

    def test_empty(self):
        """Empty input contains nothing."""
        assert contains_arabic_digits("") is False
