"""
Tests for the Modulus-10 (Luhn) checksum engine.

Tests focus on:
- Lenient validation (sanitisation, malformed input)
- Strict checksum and check digit computation and their argument errors
- Test number generation
- Step-by-step trace consistency
"""

import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from egnumbers.core.checksum import (
    generate_test_number,
    is_digit_string,
    luhn_check_digit,
    luhn_checksum,
    luhn_trace,
    luhn_validate,
    sanitize_number,
)
from egnumbers.exceptions import ArgumentOutOfRangeError, InvalidArgumentError


# =============================================================================
# SANITISATION
# =============================================================================

class TestSanitizeNumber:
    """Tests for separator stripping."""

    def test_strips_spaces_and_dashes(self):
        """Spaces and dashes anywhere are removed."""
        assert sanitize_number(" 4111-1111 1111-1111 ") == "4111111111111111"

    def test_none_becomes_empty(self):
        """None sanitises to an empty string."""
        assert sanitize_number(None) == ""

    def test_other_characters_kept(self):
        """Letters and dots survive so the caller can reject them."""
        assert sanitize_number("4111.1111a") == "4111.1111a"

    def test_integer_input_converted(self):
        """Integer PANs are converted to their decimal string."""
        assert sanitize_number(4111111111111111) == "4111111111111111"

    def test_is_digit_string(self):
        """Only non-empty ASCII digit strings qualify."""
        assert is_digit_string("0123") is True
        assert is_digit_string("") is False
        assert is_digit_string("12a") is False
        assert is_digit_string("١٢٣") is False


# =============================================================================
# VALIDATION
# =============================================================================

class TestLuhnValidate:
    """Tests for luhn_validate."""

    def test_valid_visa_with_spaces(self):
        """Grouped Visa test number is valid."""
        assert luhn_validate("4111 1111 1111 1111") is True

    def test_last_digit_off_by_one(self):
        """Changing the check digit invalidates the number."""
        assert luhn_validate("4111111111111112") is False

    def test_valid_with_dashes(self):
        """Dashes are ignored."""
        assert luhn_validate("5555-5555-5555-4444") is True

    def test_classic_example(self):
        """The textbook example 79927398713 is valid."""
        assert luhn_validate("79927398713") is True

    @pytest.mark.parametrize("value", [None, "", "   ", "- -", "4111a11111111111", "4111.1111"])
    def test_malformed_input_is_invalid(self, value):
        """Empty or non-numeric input returns False rather than raising."""
        assert luhn_validate(value) is False

    def test_arabic_digits_are_not_digits(self):
        """Arabic-Indic digits must be normalised before validation."""
        assert luhn_validate("٤١١١١١١١١١١١١١١١") is False

    def test_all_zeros_is_valid(self):
        """All zeros sums to 0, which passes the arithmetic check."""
        assert luhn_validate("0000000000000000") is True

    def test_single_zero_is_valid(self):
        """A lone 0 is arithmetically valid."""
        assert luhn_validate("0") is True

    def test_transposition_detected(self):
        """Swapping two adjacent digits is caught."""
        assert luhn_validate("79927398713") is True
        assert luhn_validate("97927398713") is False

    def test_integer_input(self):
        """An int PAN validates like its string form."""
        assert luhn_validate(4111111111111111) is True
        assert luhn_validate(4111111111111112) is False
        assert luhn_validate(79927398713) is True

    def test_non_integer_numbers_are_invalid(self):
        """Floats and other objects return False rather than raising."""
        assert luhn_validate(12.5) is False
        assert luhn_validate(object()) is False


# =============================================================================
# CHECKSUM
# =============================================================================

class TestLuhnChecksum:
    """Tests for the strict luhn_checksum."""

    def test_valid_number_has_zero_checksum(self):
        """A valid number has checksum 0."""
        assert luhn_checksum("4111111111111111") == 0

    def test_checksum_with_wrong_check_digit(self):
        """Lowering the check digit by 3 leaves a checksum of 7."""
        assert luhn_checksum("79927398710") == 7

    def test_doubling_carry(self):
        """A doubled 9 contributes 9 (18 - 9)."""
        # "90": 0 undoubled, 9 doubled -> 18 -> 9
        assert luhn_checksum("90") == 9

    def test_checksum_idempotent(self):
        """Repeated calls with identical input agree."""
        assert luhn_checksum("1234567812345678") == luhn_checksum("1234567812345678")

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_raises(self, value):
        """Empty input raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            luhn_checksum(value)
        assert exc_info.value.parameter == "digits"

    @pytest.mark.parametrize("value", ["4111 1111", "4111-1111", "12ab", "١٢٣"])
    def test_non_digits_raise(self, value):
        """The strict entry point does not sanitise."""
        with pytest.raises(InvalidArgumentError):
            luhn_checksum(value)

    def test_error_is_value_error(self):
        """InvalidArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError):
            luhn_checksum("x")


# =============================================================================
# CHECK DIGIT
# =============================================================================

class TestLuhnCheckDigit:
    """Tests for luhn_check_digit."""

    def test_visa_check_digit(self):
        """411111111111111 needs check digit 1."""
        assert luhn_check_digit("411111111111111") == 1

    def test_classic_check_digit(self):
        """7992739871 needs check digit 3."""
        assert luhn_check_digit("7992739871") == 3

    def test_zero_check_digit(self):
        """A partial number whose checksum is already 0 gets check digit 0."""
        assert luhn_check_digit("0") == 0

    def test_sanitises_separators(self):
        """Spaces and dashes are stripped first."""
        assert luhn_check_digit("4111 1111-1111 111") == 1

    @pytest.mark.parametrize("partial", ["4111111111111", "5555555555554", "37828224631000", "123"])
    def test_appending_check_digit_validates(self, partial):
        """partial + check digit always passes validation."""
        assert luhn_validate(partial + str(luhn_check_digit(partial))) is True

    @pytest.mark.parametrize("value", [None, "", "  ", "--"])
    def test_empty_raises(self, value):
        """Empty input raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            luhn_check_digit(value)
        assert exc_info.value.parameter == "partial_number"

    def test_non_digit_raises(self):
        """Letters raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            luhn_check_digit("41a1")


# =============================================================================
# TEST NUMBER GENERATION
# =============================================================================

class TestGenerateTestNumber:
    """Tests for generate_test_number."""

    def test_default_length_and_prefix(self):
        """Default length is 16 and the prefix is preserved."""
        number = generate_test_number("507803")
        assert len(number) == 16
        assert number.startswith("507803")
        assert luhn_validate(number) is True

    @pytest.mark.parametrize("prefix,length", [("4", 13), ("34", 15), ("36", 14), ("62", 19), ("4", 3)])
    def test_generated_numbers_are_valid(self, prefix, length):
        """Every generated number validates."""
        number = generate_test_number(prefix, total_length=length)
        assert len(number) == length
        assert number.startswith(prefix)
        assert luhn_validate(number) is True

    def test_seeded_rng_is_deterministic(self):
        """Two RNGs with the same seed produce the same number."""
        first = generate_test_number("411111", rng=random.Random(42))
        second = generate_test_number("411111", rng=random.Random(42))
        assert first == second

    def test_prefix_whitespace_trimmed(self):
        """Surrounding whitespace on the prefix is ignored."""
        assert generate_test_number(" 4111 ", total_length=8).startswith("4111")

    @pytest.mark.parametrize("prefix", [None, "", "41a", "41 11"])
    def test_invalid_prefix_raises(self, prefix):
        """Empty or non-digit prefixes raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            generate_test_number(prefix)
        assert exc_info.value.parameter == "prefix"

    @pytest.mark.parametrize("length", [0, 5, 6, 7])
    def test_length_too_short_raises(self, length):
        """total_length must exceed the prefix length by at least 2."""
        with pytest.raises(ArgumentOutOfRangeError) as exc_info:
            generate_test_number("411111", total_length=length)
        assert exc_info.value.parameter == "total_length"
        assert exc_info.value.value == length

    def test_out_of_range_is_invalid_argument(self):
        """ArgumentOutOfRangeError is a kind of InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            generate_test_number("4111", total_length=5)

    def test_minimum_length_accepted(self):
        """Prefix + one filler + check digit is the shortest allowed."""
        assert len(generate_test_number("411111", total_length=8)) == 8


# =============================================================================
# TRACE
# =============================================================================

class TestLuhnTrace:
    """Tests for the per-digit trace."""

    def test_trace_of_classic_example(self):
        """79927398713 sums to 70 and is valid."""
        trace = luhn_trace("79927398713")
        assert trace.card_number == "79927398713"
        assert trace.total_sum == 70
        assert trace.is_valid is True
        assert trace.check_digit == 3
        assert len(trace) == 11

    def test_steps_ordered_left_to_right(self):
        """Steps are returned in position order."""
        trace = luhn_trace("4111 1111 1111 1111")
        assert [step.position for step in trace.steps] == list(range(16))

    def test_first_step_running_sum_equals_total(self):
        """The leftmost step carries the full sum."""
        trace = luhn_trace("4111111111111111")
        assert trace.steps[0].running_sum == trace.total_sum

    def test_last_step_is_undoubled_check_digit(self):
        """The check digit is never doubled."""
        trace = luhn_trace("79927398713")
        last = trace.steps[-1]
        assert last.doubled is False
        assert last.original_digit == 3
        assert last.processed_value == 3
        assert last.running_sum == 3

    def test_doubling_alternates_from_right(self):
        """Second from the right is doubled, and so on."""
        trace = luhn_trace("79927398713")
        doubled = [step.doubled for step in trace.steps]
        assert doubled == [i % 2 == 1 for i in range(11)]

    def test_carry_reduction(self):
        """A doubled 9 becomes 9, a doubled 7 becomes 5."""
        trace = luhn_trace("79927398713")
        by_position = {step.position: step for step in trace.steps}
        assert by_position[1].original_digit == 9
        assert by_position[1].processed_value == 9
        assert by_position[9].original_digit == 1
        assert by_position[9].processed_value == 2

    def test_processed_values_sum_to_total(self):
        """Processed values add up to total_sum."""
        trace = luhn_trace("5555555555554444")
        assert sum(step.processed_value for step in trace.steps) == trace.total_sum

    def test_trace_agrees_with_validate(self):
        """is_valid matches luhn_validate."""
        for number in ("4111111111111111", "4111111111111112", "378282246310005"):
            assert luhn_trace(number).is_valid == luhn_validate(number)

    def test_integer_input(self):
        """An int PAN is traced digit by digit."""
        trace = luhn_trace(4111111111111111)
        assert trace.card_number == "4111111111111111"
        assert trace.is_valid is True
        assert len(trace.steps) == 16

    @pytest.mark.parametrize("value", [None, "", "abc", "4111-11x1"])
    def test_malformed_input_gives_empty_trace(self, value):
        """Malformed input yields no steps and check_digit -1."""
        trace = luhn_trace(value)
        assert trace.steps == ()
        assert trace.total_sum == 0
        assert trace.is_valid is False
        assert trace.check_digit == -1

    def test_to_dict(self):
        """Serialised trace contains one dict per step."""
        data = luhn_trace("18").to_dict()
        assert data["card_number"] == "18"
        assert data["is_valid"] is True
        assert data["steps"][0] == {
            "position": 0,
            "original_digit": 1,
            "doubled": True,
            "processed_value": 2,
            "running_sum": 10,
        }


# =============================================================================
# ROUND TRIP AND CONCURRENCY
# =============================================================================

class TestRoundTrip:
    """Check digits and generated numbers across many random inputs."""

    def test_check_digit_round_trip_sweep(self):
        """partial + luhn_check_digit(partial) validates for lengths 1-30."""
        rng = random.Random(1234)
        for length in range(1, 31):
            for _ in range(20):
                partial = "".join(rng.choice("0123456789") for _ in range(length))
                number = partial + str(luhn_check_digit(partial))
                assert luhn_validate(number) is True, number
                assert luhn_checksum(number) == 0, number
                assert luhn_trace(number).is_valid is True, number

    def test_wrong_check_digit_always_fails(self):
        """Every other final digit fails validation."""
        rng = random.Random(99)
        for _ in range(50):
            partial = "".join(rng.choice("0123456789") for _ in range(15))
            check = luhn_check_digit(partial)
            for digit in range(10):
                if digit != check:
                    assert luhn_validate(partial + str(digit)) is False

    def test_generated_number_sweep(self):
        """Seeded generation is valid for every prefix and length combination."""
        rng = random.Random(2024)
        for length in range(8, 20):
            for prefix in ("4", "51", "507803", "62"):
                number = generate_test_number(prefix, total_length=length, rng=rng)
                assert len(number) == length
                assert number.startswith(prefix)
                assert luhn_validate(number) is True, number

    def test_concurrent_generation(self):
        """The shared random source is safe to use from many threads."""
        with ThreadPoolExecutor(max_workers=8) as executor:
            numbers = list(executor.map(lambda _: generate_test_number("507803"), range(200)))

        assert len(numbers) == 200
        for number in numbers:
            assert len(number) == 16
            assert number.startswith("507803")
            assert luhn_validate(number) is True
        # Nine random digits per number; repeats across 200 draws are vanishingly rare
        assert len(set(numbers)) > 190
