"""
Tests for the Egyptian mobile phone number validator.

Tests focus on:
- Normalisation of local, international and formatted input
- Carrier and service type lookup by prefix
- Failure reasons and validator options
- Display formats
- Batch reporting, settings integration and helpers
"""

import logging
import random

import pytest

from egnumbers.config import PhoneSettings, Settings
from egnumbers.phone import (
    PhoneFailureReason,
    PhoneNumberInfo,
    PhoneNumberValidator,
    are_same_number,
    carrier_for_prefix,
    format_phone_number,
    generate_sample_numbers,
    is_from_carrier,
    is_valid_phone_number,
    normalize_phone_number,
    prefixes_for_carrier,
    supported_carriers,
    validate_phone_number,
)

VODAFONE = "01012345678"


# =============================================================================
# NORMALISATION
# =============================================================================

class TestNormalization:
    """Tests for the accepted input shapes."""

    @pytest.mark.parametrize("value", [
        "01012345678",
        "+201012345678",
        "00201012345678",
        "201012345678",
        "010 1234 5678",
        "010-1234-5678",
        "(010) 1234.5678",
        "+20 10 1234 5678",
        "  01012345678  ",
        "٠١٠١٢٣٤٥٦٧٨",
        "+٢٠١٠١٢٣٤٥٦٧٨",
    ])
    def test_forms_normalise_to_local(self, value):
        """Every accepted shape ends up as 01XXXXXXXXX."""
        info = validate_phone_number(value)
        assert info.is_valid is True
        assert info.number == VODAFONE
        assert info.carrier == "Vodafone"

    def test_cleaned_number_recorded(self):
        """Separators and Arabic digits are gone from cleaned_number."""
        info = validate_phone_number("+٢٠ ١٠ ١٢٣٤-٥٦٧٨")
        assert info.raw_input == "+٢٠ ١٠ ١٢٣٤-٥٦٧٨"
        assert info.cleaned_number == "+201012345678"

    def test_without_leading_zero_is_opt_in(self):
        """1XXXXXXXXX is a length error unless explicitly accepted."""
        assert validate_phone_number("1012345678").failure_reason == PhoneFailureReason.INVALID_LENGTH
        info = validate_phone_number("1012345678", accept_without_leading_zero=True)
        assert info.is_valid is True
        assert info.number == VODAFONE

    def test_integer_input(self):
        """An int loses its leading zero, so it needs the same option."""
        assert validate_phone_number(1012345678, accept_without_leading_zero=True).number == VODAFONE

    def test_auto_fix_incomplete(self):
        """A 10-digit 01 number is completed with a trailing zero."""
        assert validate_phone_number("0101234567").failure_reason == PhoneFailureReason.INVALID_LENGTH
        info = validate_phone_number("0101234567", auto_fix_incomplete=True)
        assert info.is_valid is True
        assert info.number == "01012345670"

    def test_twenty_prefix_needs_twelve_digits(self):
        """Only a 12-digit 20... number is read as international."""
        assert validate_phone_number("201012345678").is_valid is True
        assert validate_phone_number("20101234567").is_valid is False

    def test_normalize_method(self):
        """normalize works on already cleaned strings."""
        validator = PhoneNumberValidator()
        assert validator.normalize("+201112345678") == "01112345678"
        assert validator.normalize("+2012") is None
        assert validator.normalize("+441012345678") is None
        assert validator.normalize("02012345678") is None


# =============================================================================
# CARRIERS
# =============================================================================

class TestCarriers:
    """Tests for carrier and service type lookup."""

    @pytest.mark.parametrize("number,carrier,service", [
        ("01001234567", "Vodafone", "Mobile"),
        ("01091234567", "Vodafone", "Mobile"),
        ("01101234567", "Orange", "Mobile"),
        ("01131234567", "Orange", "Mobile"),
        ("01141234567", "Etisalat", "Mobile"),
        ("01191234567", "Etisalat", "Mobile"),
        ("01221234567", "Orange", "Mobile"),
        ("01551234567", "WE (Telecom Egypt)", "Fixed & Mobile"),
        ("01911234567", "Banking Services", "Value Added Service"),
        ("01951234567", "E-Payment Services (Fawry)", "Value Added Service"),
    ])
    def test_prefix_table(self, number, carrier, service):
        """The first four digits choose carrier and service type."""
        info = validate_phone_number(number)
        assert info.is_valid is True
        assert info.prefix == number[:4]
        assert info.carrier == carrier
        assert info.service_type == service

    def test_arabic_names(self):
        """Carrier and service type have Arabic names."""
        info = validate_phone_number("01551234567")
        assert info.carrier_arabic == "وي (المصرية للاتصالات)"
        assert info.service_type_arabic == "أرضي ومحمول"
        assert info.message("ar") == "رقم وي (المصرية للاتصالات) صالح."

    def test_unknown_prefix_lenient(self):
        """Prefixes outside the table are valid with an unknown carrier."""
        info = validate_phone_number("01312345678")
        assert info.is_valid is True
        assert info.carrier == "Unknown Carrier"
        assert info.carrier_arabic == "مشغل غير معروف"
        assert info.service_type == "Mobile"
        assert info.message_english == "Valid Egyptian mobile number (carrier unknown)."

    def test_unknown_prefix_strict(self):
        """strict_carrier rejects prefixes outside the table."""
        info = validate_phone_number("01312345678", strict_carrier=True)
        assert info.is_valid is False
        assert info.failure_reason == PhoneFailureReason.UNKNOWN_CARRIER
        assert info.number == "01312345678"
        assert "0131" in info.message_english

    def test_carrier_helpers(self):
        """Prefix and carrier lookups in both directions."""
        assert carrier_for_prefix("0155") == "WE (Telecom Egypt)"
        assert carrier_for_prefix("0130") is None
        assert len(prefixes_for_carrier("orange")) == 14
        assert prefixes_for_carrier("Etisalat") == ["0114", "0115", "0116", "0117", "0118", "0119"]
        assert prefixes_for_carrier("Nobody") == []
        assert supported_carriers()[:4] == ["Vodafone", "Orange", "Etisalat", "WE (Telecom Egypt)"]
        assert len(supported_carriers()) == len(set(supported_carriers()))

    def test_is_from_carrier(self):
        """Carrier match is case-insensitive and requires a valid number."""
        assert is_from_carrier(VODAFONE, "vodafone") is True
        assert is_from_carrier(VODAFONE, "Orange") is False
        assert is_from_carrier("123", "Vodafone") is False


# =============================================================================
# FAILURES
# =============================================================================

class TestFailures:
    """Tests for failure reasons and messages."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty(self, value):
        """Empty input fails first."""
        info = validate_phone_number(value)
        assert info.failure_reason == PhoneFailureReason.NULL_OR_EMPTY
        assert info.message_arabic == "رقم الهاتف فارغ."

    @pytest.mark.parametrize("value", ["0101234567a", "phone", "010+12345678", "01012345678#"])
    def test_invalid_characters(self, value):
        """Letters and stray symbols are rejected, not dropped."""
        assert validate_phone_number(value).failure_reason == PhoneFailureReason.INVALID_CHARACTERS

    @pytest.mark.parametrize("value", ["+2010123", "+441012345678", "+201312345678", "0020101234567"])
    def test_invalid_international_format(self, value):
        """Bad +20 or 0020 forms report INVALID_FORMAT."""
        assert validate_phone_number(value).failure_reason == PhoneFailureReason.INVALID_FORMAT

    def test_invalid_length(self):
        """Wrong digit counts report the length."""
        info = validate_phone_number("010123456")
        assert info.failure_reason == PhoneFailureReason.INVALID_LENGTH
        assert "(9 digits)" in info.message_english

    def test_invalid_prefix(self):
        """Eleven digits not starting 01 are not mobile numbers."""
        info = validate_phone_number("02012345678")
        assert info.failure_reason == PhoneFailureReason.INVALID_PREFIX
        assert info.number == ""

    def test_special_services_disabled(self):
        """019X numbers can be switched off."""
        info = validate_phone_number("01951234567", allow_special_services=False)
        assert info.failure_reason == PhoneFailureReason.SPECIAL_SERVICE_DISABLED
        assert "0195" in info.message_english

    def test_international_disabled(self):
        """Without accept_international only local forms pass."""
        assert validate_phone_number("+201012345678", accept_international=False).failure_reason == \
            PhoneFailureReason.INVALID_FORMAT
        assert validate_phone_number("201012345678", accept_international=False).failure_reason == \
            PhoneFailureReason.INVALID_LENGTH

    def test_formatted_disabled(self):
        """Without accept_formatted separators are invalid characters."""
        info = validate_phone_number("010 1234 5678", accept_formatted=False)
        assert info.failure_reason == PhoneFailureReason.INVALID_CHARACTERS
        assert validate_phone_number(VODAFONE, accept_formatted=False).is_valid is True

    def test_arabic_digits_disabled(self):
        """Without accept_arabic_digits Arabic-Indic digits are invalid characters."""
        info = validate_phone_number("٠١٠١٢٣٤٥٦٧٨", accept_arabic_digits=False)
        assert info.failure_reason == PhoneFailureReason.INVALID_CHARACTERS


# =============================================================================
# FORMATTING
# =============================================================================

class TestFormatting:
    """Tests for display formats and serialisation."""

    def test_formats(self):
        """National, international and E.164 renderings."""
        info = validate_phone_number("+201012345678")
        assert info.national_format == "010 1234 5678"
        assert info.international_format == "+20 10 1234 5678"
        assert info.e164 == "+201012345678"
        assert info.number_arabic == "٠١٠١٢٣٤٥٦٧٨"
        assert info.last_four == "5678"

    def test_invalid_has_no_formats(self):
        """Numbers that did not normalise have empty formats."""
        info = validate_phone_number("123")
        assert info.national_format == ""
        assert info.international_format == ""
        assert info.e164 == ""
        assert info.last_four == ""
        assert info.is_complete() is False

    def test_is_complete(self):
        """A valid number with carrier and service type is complete."""
        assert validate_phone_number(VODAFONE).is_complete() is True
        assert PhoneNumberInfo(number=VODAFONE, is_valid=True).is_complete() is False

    def test_format_phone_number(self):
        """Invalid input is returned unchanged."""
        assert format_phone_number("+201012345678") == "010 1234 5678"
        assert format_phone_number(VODAFONE, international=True) == "+20 10 1234 5678"
        assert format_phone_number("abc") == "abc"
        assert format_phone_number(None) == ""

    def test_to_dict_and_str(self):
        """Serialised form and string rendering."""
        info = validate_phone_number(VODAFONE)
        data = info.to_dict()
        assert data["number"] == VODAFONE
        assert data["failure_reason"] == "NONE"
        assert data["carrier_arabic"] == "فودافون"
        assert data["international_format"] == "+20 10 1234 5678"
        assert str(info) == "Number: 01012345678, IsValid: True, Carrier: Vodafone"

    def test_normalize_and_compare_helpers(self):
        """Helpers built on validate_phone_number."""
        assert normalize_phone_number("0020 10 1234 5678") == VODAFONE
        assert normalize_phone_number("02012345678") is None
        assert is_valid_phone_number("1012345678", accept_without_leading_zero=True) is True
        assert are_same_number(VODAFONE, "+20 10 1234 5678") is True
        assert are_same_number(VODAFONE, "01012345679") is False
        assert are_same_number("abc", "abc") is False


# =============================================================================
# BATCH OPERATIONS
# =============================================================================

class TestBatchOperations:
    """Tests for the held batch and its reports."""

    BATCH = "01012345678, +201112345678;0020 12 2345 6789|abc\n01012345678"

    def test_from_string(self):
        """Commas, semicolons, pipes and newlines all separate numbers."""
        validator = PhoneNumberValidator.from_string(self.BATCH)
        assert len(validator) == 5
        assert validator.numbers[2] == "0020 12 2345 6789"

    def test_custom_separator(self):
        """Any other separator splits on itself only."""
        validator = PhoneNumberValidator.from_string("01012345678#01112345678", separator="#")
        assert validator.numbers == ["01012345678", "01112345678"]

    def test_summary(self):
        """Totals, success rate and carrier distribution."""
        summary = PhoneNumberValidator.from_string(self.BATCH).summary()
        assert summary["total"] == 5
        assert summary["valid"] == 4
        assert summary["invalid"] == 1
        assert summary["success_rate"] == pytest.approx(80.0)
        assert summary["carrier_distribution"] == {"Vodafone": 2, "Orange": 2}

    def test_empty_summary(self):
        """An empty batch has a zero success rate."""
        summary = PhoneNumberValidator().summary()
        assert summary["total"] == 0
        assert summary["success_rate"] == 0.0

    def test_valid_and_invalid_numbers(self):
        """The batch splits into valid and invalid results."""
        validator = PhoneNumberValidator.from_string(self.BATCH)
        assert len(validator.valid_numbers()) == 4
        assert [info.raw_input for info in validator.invalid_numbers()] == ["abc"]

    def test_group_by_carrier(self):
        """Valid numbers grouped by carrier."""
        groups = PhoneNumberValidator.from_string(self.BATCH).group_by_carrier()
        assert set(groups) == {"Vodafone", "Orange"}
        assert len(groups["Vodafone"]) == 2

    def test_export_valid(self):
        """Distinct valid numbers in local form."""
        validator = PhoneNumberValidator.from_string(self.BATCH)
        assert validator.export_valid() == "01012345678, 01112345678, 01223456789"
        assert validator.export_valid("\n").count("\n") == 2

    def test_add_remove_duplicates_and_clear(self):
        """Batch management keeps raw entries in order."""
        validator = PhoneNumberValidator([VODAFONE])
        validator.add(None)
        validator.add(VODAFONE)
        assert validator.add_many("01112345678;01223456789") == 2
        assert validator.add_many([None, "01551234567"]) == 1
        assert len(validator) == 5
        validator.remove_duplicates()
        assert validator.numbers == [VODAFONE, "01112345678", "01223456789", "01551234567"]
        validator.clear()
        assert len(validator) == 0

    def test_numbers_is_a_copy(self):
        """Mutating the returned list does not touch the batch."""
        validator = PhoneNumberValidator([VODAFONE])
        validator.numbers.append("x")
        assert len(validator) == 1


# =============================================================================
# SETTINGS, SAMPLES AND LOGGING
# =============================================================================

class TestSettingsIntegration:
    """Tests for from_settings, sample generation and logging."""

    def test_from_settings(self):
        """Every phone flag is taken from the settings section."""
        settings = Settings(phone=PhoneSettings(strict_carrier=True, allow_special_services=False))
        validator = PhoneNumberValidator.from_settings(settings, numbers=["01312345678"])
        assert validator.strict_carrier is True
        assert validator.allow_special_services is False
        assert validator.accept_international is True
        assert validator.validate_all()[0].failure_reason == PhoneFailureReason.UNKNOWN_CARRIER

    def test_from_settings_reads_environment(self, monkeypatch):
        """Without explicit settings the cached settings are used."""
        monkeypatch.setenv("EGNUMBERS_PHONE__ACCEPT_WITHOUT_LEADING_ZERO", "true")
        validator = PhoneNumberValidator.from_settings()
        assert validator.validate("1012345678").is_valid is True

    def test_generate_sample_numbers(self):
        """Samples use the carrier's prefixes and validate."""
        numbers = generate_sample_numbers("Etisalat", count=10, rng=random.Random(7))
        assert len(numbers) == 10
        for number in numbers:
            info = validate_phone_number(number)
            assert info.is_valid is True
            assert info.carrier == "Etisalat"

    def test_generate_sample_numbers_seeded(self):
        """The same seed gives the same samples; unknown carriers give none."""
        first = generate_sample_numbers("vodafone", count=3, rng=random.Random(1))
        second = generate_sample_numbers("vodafone", count=3, rng=random.Random(1))
        assert first == second
        assert generate_sample_numbers("Nobody") == []

    def test_full_number_never_logged(self, caplog):
        """Records carry only the last four digits."""
        with caplog.at_level(logging.DEBUG, logger="egnumbers.phone"):
            validate_phone_number(VODAFONE)
            validate_phone_number("01312345678", strict_carrier=True)

        assert len(caplog.records) == 2
        assert caplog.records[0].last_four == "5678"
        assert caplog.records[1].reason == "UNKNOWN_CARRIER"
        for record in caplog.records:
            assert record.identifier == "phone"
            assert VODAFONE not in str(record.__dict__)
            assert "01312345678" not in str(record.__dict__)
