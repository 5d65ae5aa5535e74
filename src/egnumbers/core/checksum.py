"""
Modulus-10 (Luhn) checksum engine.

Validates, computes and generates check digits for payment card numbers
(PANs) as described in ISO/IEC 7812-1. The algorithm catches single-digit
typos and most adjacent transpositions; it is not a fraud or security check.

Two kinds of entry point:
- Lenient: ``luhn_validate`` and ``luhn_trace`` strip spaces and dashes
  themselves and never raise; malformed input is simply invalid.
- Strict: ``luhn_checksum`` expects pre-sanitized ASCII digits and raises
  ``InvalidArgumentError`` otherwise. ``luhn_check_digit`` and
  ``generate_test_number`` sanitize but raise on anything left over.

Arabic-Indic digits count as non-digits here; convert them with
``egnumbers.core.normalize.to_western_digits`` first.
"""

import logging
import random
import re
from typing import List, Optional, Union

from ..exceptions import ArgumentOutOfRangeError, InvalidArgumentError
from .constants import DEFAULT_TEST_CARD_LENGTH
from .types import LuhnStep, LuhnTrace

__all__ = [
    "sanitize_number",
    "is_digit_string",
    "luhn_validate",
    "luhn_checksum",
    "luhn_check_digit",
    "generate_test_number",
    "luhn_trace",
]

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")

# os.urandom-backed, safe to share between threads
_system_random = random.SystemRandom()


def sanitize_number(value: Optional[Union[str, int]]) -> str:
    """
    Strip spaces and dashes, then surrounding whitespace.

    None becomes ''. Anything that is not a string (an int PAN, say) is
    converted with ``str()`` first.
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    return value.replace(" ", "").replace("-", "").strip()


def is_digit_string(value: str) -> bool:
    """True for a non-empty string made only of ASCII digits."""
    return bool(value) and _DIGITS.fullmatch(value) is not None


def _reduce(digit: int, doubled: bool) -> int:
    # Doubling a digit and summing the two result digits equals subtracting 9
    if doubled:
        digit *= 2
        if digit > 9:
            digit -= 9
    return digit


def luhn_validate(card_number: Optional[Union[str, int]]) -> bool:
    """
    Validate a complete number (check digit included).

    Spaces and dashes are stripped. Returns False for None, empty or
    non-numeric input.

        >>> luhn_validate("4111 1111 1111 1111")
        True
        >>> luhn_validate("4111111111111112")
        False
    """
    sanitized = sanitize_number(card_number)
    if not is_digit_string(sanitized):
        return False
    return luhn_checksum(sanitized) == 0


def luhn_checksum(digits: str) -> int:
    """
    Compute the Modulus-10 checksum of a digit string, check digit included.

    Args:
        digits: ASCII digits only, no separators

    Returns:
        Checksum in 0-9; 0 means the number is valid

    Raises:
        InvalidArgumentError: if ``digits`` is None, empty or not all digits
    """
    if not digits:
        raise InvalidArgumentError("Digits string cannot be null or empty", parameter="digits")
    if not isinstance(digits, str) or not is_digit_string(digits):
        raise InvalidArgumentError("Input must contain digits only", parameter="digits")

    total = 0
    double = False

    # Right-to-left; the check digit itself is never doubled
    for char in reversed(digits):
        total += _reduce(ord(char) - 48, double)
        double = not double

    return total % 10


def luhn_check_digit(partial_number: Optional[str]) -> int:
    """
    Compute the check digit to append to ``partial_number``.

        >>> luhn_check_digit("411111111111111")
        1

    Raises:
        InvalidArgumentError: if the sanitized input is empty or not all digits
    """
    sanitized = sanitize_number(partial_number)
    if not sanitized:
        raise InvalidArgumentError(
            "Partial number cannot be null or empty", parameter="partial_number"
        )
    if not is_digit_string(sanitized):
        raise InvalidArgumentError(
            "Partial number must contain digits only", parameter="partial_number"
        )

    # A placeholder 0 puts every real digit on its final doubling parity
    checksum = luhn_checksum(sanitized + "0")
    return 0 if checksum == 0 else 10 - checksum


def generate_test_number(
    prefix: str,
    total_length: int = DEFAULT_TEST_CARD_LENGTH,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Generate a Luhn-valid number that starts with ``prefix``.

    For testing and development only: the result is arithmetically valid
    but does not correspond to any account.

    Args:
        prefix: IIN/BIN prefix, digits only (e.g. "507803" for Meeza)
        total_length: Length of the result including the check digit
        rng: Random source for the filler digits (defaults to a shared
            ``random.SystemRandom``)

    Raises:
        InvalidArgumentError: if ``prefix`` is empty or not all digits
        ArgumentOutOfRangeError: if ``total_length <= len(prefix) + 1``
    """
    sanitized = (prefix or "").strip()
    if not is_digit_string(sanitized):
        raise InvalidArgumentError("Prefix must be a non-empty digit-only string", parameter="prefix")

    if total_length <= len(sanitized) + 1:
        raise ArgumentOutOfRangeError(
            f"Total length ({total_length}) must exceed prefix length ({len(sanitized)}) by at least 2",
            parameter="total_length",
            value=total_length,
        )

    source = rng if rng is not None else _system_random
    fill_count = total_length - len(sanitized) - 1
    filler = "".join(str(source.randrange(10)) for _ in range(fill_count))

    partial = sanitized + filler
    number = partial + str(luhn_check_digit(partial))
    logger.debug(f"Generated test number for prefix {sanitized} ({total_length} digits)")
    return number


def luhn_trace(card_number: Optional[Union[str, int]]) -> LuhnTrace:
    """
    Return a per-digit breakdown of the Modulus-10 computation.

    Sanitizes like ``luhn_validate`` and never raises. Empty or non-numeric
    input yields a trace with no steps, ``is_valid=False`` and
    ``check_digit=-1``.
    """
    sanitized = sanitize_number(card_number)
    if not is_digit_string(sanitized):
        return LuhnTrace(card_number=sanitized, total_sum=0, is_valid=False, check_digit=-1)

    steps: List[LuhnStep] = []
    total = 0
    double = False

    for position in range(len(sanitized) - 1, -1, -1):
        original = ord(sanitized[position]) - 48
        processed = _reduce(original, double)
        total += processed
        steps.append(LuhnStep(
            position=position,
            original_digit=original,
            doubled=double,
            processed_value=processed,
            running_sum=total,
        ))
        double = not double

    steps.reverse()

    return LuhnTrace(
        card_number=sanitized,
        total_sum=total,
        is_valid=total % 10 == 0,
        check_digit=int(sanitized[-1]),
        steps=tuple(steps),
    )
