"""
Egyptian mobile phone number validator.

Accepted input shapes, all normalised to the 11-digit local form
``01XXXXXXXXX``:

    01012345678          local
    +201012345678        international with plus
    00201012345678       international with 00
    201012345678         international without plus (12 digits)
    1012345678           no leading zero (opt-in)

Spaces, dashes, dots and parentheses are accepted between digits, and
Arabic-Indic digits are converted first. The first four digits pick the
carrier from ``CARRIER_PREFIXES``.

Validation never raises for bad input: failures come back as a
``PhoneNumberInfo`` with ``is_valid=False`` and a message in both languages.

Usage:
    info = validate_phone_number("+20 10 1234 5678")
    info.number               # "01012345678"
    info.carrier              # "Vodafone"
    info.international_format # "+20 10 1234 5678"
"""

import random
import re
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from .core.constants import (
    CARRIER_NAMES,
    CARRIER_PREFIXES,
    MOBILE_NETWORK_DIGITS,
    PHONE_COUNTRY_CODE,
    PHONE_NUMBER_LENGTH,
    SERVICE_TYPE_NAMES,
    UNKNOWN_CARRIER,
)
from .core.normalize import to_arabic_digits, to_western_digits
from .logging import ContextLogger

__all__ = [
    "PhoneFailureReason",
    "PhoneNumberInfo",
    "PhoneNumberValidator",
    "validate_phone_number",
    "is_valid_phone_number",
    "normalize_phone_number",
    "format_phone_number",
    "are_same_number",
    "is_from_carrier",
    "carrier_for_prefix",
    "prefixes_for_carrier",
    "supported_carriers",
    "generate_sample_numbers",
]

PhoneInput = Union[str, int, None]

_FORMATTING = re.compile(r"[\s\-().]")
_SHAPE = re.compile(r"\+?[0-9]+")
_BATCH_SEPARATORS = re.compile(r"[,;|\r\n]+")


class PhoneFailureReason(Enum):
    """Why a phone number failed validation."""
    NONE = "NONE"
    NULL_OR_EMPTY = "NULL_OR_EMPTY"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_PREFIX = "INVALID_PREFIX"
    SPECIAL_SERVICE_DISABLED = "SPECIAL_SERVICE_DISABLED"
    UNKNOWN_CARRIER = "UNKNOWN_CARRIER"


def _service_type(prefix: str, carrier: str) -> str:
    if prefix.startswith("019"):
        return "Value Added Service"
    if carrier.startswith("WE"):
        return "Fixed & Mobile"
    return "Mobile"


@dataclass
class PhoneNumberInfo:
    """
    Result of validating one phone number.

    ``number`` holds the normalised local form when normalisation
    succeeded, even if a later check rejected it.
    """
    raw_input: str = ""
    cleaned_number: str = ""
    number: str = ""
    is_valid: bool = False
    failure_reason: PhoneFailureReason = PhoneFailureReason.NONE
    message_english: str = ""
    message_arabic: str = ""
    prefix: str = ""
    carrier: str = ""
    service_type: str = ""

    @property
    def carrier_arabic(self) -> str:
        return CARRIER_NAMES[self.carrier].arabic if self.carrier else ""

    @property
    def service_type_arabic(self) -> str:
        return SERVICE_TYPE_NAMES[self.service_type].arabic if self.service_type else ""

    @property
    def national_format(self) -> str:
        """``010 1234 5678``; empty unless the number normalised."""
        if len(self.number) != PHONE_NUMBER_LENGTH:
            return ""
        return f"{self.number[:3]} {self.number[3:7]} {self.number[7:]}"

    @property
    def international_format(self) -> str:
        """``+20 10 1234 5678``; empty unless the number normalised."""
        if len(self.number) != PHONE_NUMBER_LENGTH:
            return ""
        national = self.number[1:]
        return f"+{PHONE_COUNTRY_CODE} {national[:2]} {national[2:6]} {national[6:]}"

    @property
    def e164(self) -> str:
        """``+201012345678``; empty unless the number normalised."""
        if len(self.number) != PHONE_NUMBER_LENGTH:
            return ""
        return f"+{PHONE_COUNTRY_CODE}{self.number[1:]}"

    @property
    def number_arabic(self) -> str:
        return to_arabic_digits(self.number)

    @property
    def last_four(self) -> str:
        return self.number[-4:] if self.number else ""

    def is_complete(self) -> bool:
        """Valid, normalised and carrying a prefix, carrier and service type."""
        return (
            self.is_valid
            and len(self.number) == PHONE_NUMBER_LENGTH
            and len(self.prefix) == 4
            and bool(self.carrier)
            and bool(self.service_type)
        )

    def message(self, language: str = "en") -> str:
        return self.message_arabic if language.lower().startswith("ar") else self.message_english

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "is_valid": self.is_valid,
            "failure_reason": self.failure_reason.value,
            "message": self.message_english,
            "prefix": self.prefix,
            "carrier": self.carrier,
            "carrier_arabic": self.carrier_arabic,
            "service_type": self.service_type,
            "national_format": self.national_format,
            "international_format": self.international_format,
        }

    def __str__(self) -> str:
        return f"Number: {self.number}, IsValid: {self.is_valid}, Carrier: {self.carrier}"


def _split(text: str, separator: Optional[str] = None) -> List[str]:
    if not text:
        return []
    if separator is None or separator == ",":
        parts = _BATCH_SEPARATORS.split(text)
    else:
        parts = text.split(separator)
    return [part.strip() for part in parts if part.strip()]


class PhoneNumberValidator:
    """
    Validates single numbers and holds a batch for reporting.

    Args:
        numbers: Initial batch
        accept_international: Accept +20, 0020 and 20 prefixes
        accept_without_leading_zero: Accept ``1XXXXXXXXX`` (10 digits)
        accept_formatted: Accept spaces, dashes, dots and parentheses
        accept_arabic_digits: Convert Arabic-Indic digits first
        allow_special_services: Accept 019X service numbers
        auto_fix_incomplete: Complete 10-digit ``01...`` numbers with a trailing 0
        strict_carrier: Reject prefixes missing from the carrier table
    """

    def __init__(
        self,
        numbers: Optional[Iterable[PhoneInput]] = None,
        accept_international: bool = True,
        accept_without_leading_zero: bool = False,
        accept_formatted: bool = True,
        accept_arabic_digits: bool = True,
        allow_special_services: bool = True,
        auto_fix_incomplete: bool = False,
        strict_carrier: bool = False,
    ):
        self._numbers: List[str] = [str(n) for n in (numbers or []) if n is not None]
        self.accept_international = accept_international
        self.accept_without_leading_zero = accept_without_leading_zero
        self.accept_formatted = accept_formatted
        self.accept_arabic_digits = accept_arabic_digits
        self.allow_special_services = allow_special_services
        self.auto_fix_incomplete = auto_fix_incomplete
        self.strict_carrier = strict_carrier
        self._logger = ContextLogger(__name__, "phone", strict_carrier=strict_carrier)

    @classmethod
    def from_string(
        cls,
        text: str,
        separator: Optional[str] = None,
        **kwargs: Any,
    ) -> "PhoneNumberValidator":
        """Build a validator from a comma, semicolon, pipe or newline separated string."""
        return cls(_split(text, separator), **kwargs)

    @classmethod
    def from_settings(
        cls,
        settings=None,
        numbers: Optional[Iterable[PhoneInput]] = None,
    ) -> "PhoneNumberValidator":
        """Build a validator from ``Settings.phone`` (defaults to ``get_settings()``)."""
        if settings is None:
            from .config import get_settings
            settings = get_settings()

        return cls(numbers, **settings.phone.model_dump())

    # --- Batch management ---

    @property
    def numbers(self) -> List[str]:
        return list(self._numbers)

    def __len__(self) -> int:
        return len(self._numbers)

    def add(self, number: PhoneInput) -> None:
        if number is not None:
            self._numbers.append(str(number))

    def add_many(self, numbers: Union[str, Iterable[PhoneInput]]) -> int:
        """Add numbers from an iterable or a delimited string; returns how many were added."""
        before = len(self._numbers)
        if isinstance(numbers, str):
            self._numbers.extend(_split(numbers))
        else:
            for number in numbers:
                self.add(number)
        return len(self._numbers) - before

    def remove_duplicates(self) -> None:
        """Drop repeated raw entries, keeping first occurrences."""
        self._numbers = list(dict.fromkeys(self._numbers))

    def clear(self) -> None:
        self._numbers.clear()

    # --- Validation ---

    def normalize(self, cleaned: str) -> Optional[str]:
        """Map a digits-and-plus string to the local ``01XXXXXXXXX`` form, or None."""
        if self.accept_international:
            for prefix, total in (("+20", 13), ("0020", 14), ("20", 12)):
                if not cleaned.startswith(prefix):
                    continue
                if prefix == "20" and len(cleaned) != total:
                    # Only a 12-digit 20... number is read as international
                    break
                rest = cleaned[len(prefix):]
                if len(cleaned) == total and rest[0] == "1" and rest[1] in MOBILE_NETWORK_DIGITS:
                    return "0" + rest
                return None

        if cleaned.startswith("+"):
            return None

        if len(cleaned) == PHONE_NUMBER_LENGTH and cleaned.startswith("01"):
            return cleaned

        if (
            self.accept_without_leading_zero
            and len(cleaned) == PHONE_NUMBER_LENGTH - 1
            and cleaned.startswith("1")
            and cleaned[1] in MOBILE_NETWORK_DIGITS
        ):
            return "0" + cleaned

        if (
            self.auto_fix_incomplete
            and len(cleaned) == PHONE_NUMBER_LENGTH - 1
            and cleaned.startswith("01")
        ):
            return cleaned + "0"

        return None

    def validate(self, number: PhoneInput) -> PhoneNumberInfo:
        """Validate one number. Never raises for malformed input."""
        raw = "" if number is None else str(number)
        info = PhoneNumberInfo(raw_input=raw)

        if not raw.strip():
            return self._fail(
                info,
                PhoneFailureReason.NULL_OR_EMPTY,
                "Phone number is empty.",
                "رقم الهاتف فارغ.",
            )

        text = to_western_digits(raw) if self.accept_arabic_digits else raw
        if self.accept_formatted:
            text = _FORMATTING.sub("", text)
        text = text.strip()
        info.cleaned_number = text

        if not _SHAPE.fullmatch(text):
            return self._fail(
                info,
                PhoneFailureReason.INVALID_CHARACTERS,
                "Phone number may only contain digits, a leading + and separators.",
                "رقم الهاتف يجب أن يحتوي على أرقام فقط مع علامة + في البداية والفواصل.",
            )

        local = self.normalize(text)
        if local is None:
            return self._fail_shape(info, text)
        info.number = local

        prefix = local[:4]
        if prefix.startswith("019") and not self.allow_special_services:
            return self._fail(
                info,
                PhoneFailureReason.SPECIAL_SERVICE_DISABLED,
                f"Special service numbers ({prefix}) are not accepted.",
                f"أرقام الخدمات الخاصة ({prefix}) غير مقبولة.",
            )

        carrier = CARRIER_PREFIXES.get(prefix)
        if carrier is None and self.strict_carrier:
            return self._fail(
                info,
                PhoneFailureReason.UNKNOWN_CARRIER,
                f"Unknown carrier for prefix {prefix}.",
                f"مشغل غير معروف للبادئة {prefix}.",
            )

        info.is_valid = True
        info.prefix = prefix
        info.carrier = carrier or UNKNOWN_CARRIER
        info.service_type = _service_type(prefix, info.carrier) if carrier else "Mobile"
        if carrier:
            info.message_english = f"Valid {carrier} number."
            info.message_arabic = f"رقم {CARRIER_NAMES[carrier].arabic} صالح."
        else:
            info.message_english = "Valid Egyptian mobile number (carrier unknown)."
            info.message_arabic = "رقم محمول مصري صالح (المشغل غير معروف)."

        self._logger.debug("Phone validated", carrier=info.carrier, last_four=info.last_four)
        return info

    def _fail_shape(self, info: PhoneNumberInfo, text: str) -> PhoneNumberInfo:
        digits = text.lstrip("+")
        if text.startswith("+") or (self.accept_international and digits.startswith("0020")):
            return self._fail(
                info,
                PhoneFailureReason.INVALID_FORMAT,
                "Invalid international format. Expected +20 followed by a 10-digit mobile number.",
                "صيغة دولية غير صحيحة. المتوقع +20 متبوعاً برقم محمول من 10 أرقام.",
            )
        if len(digits) != PHONE_NUMBER_LENGTH:
            return self._fail(
                info,
                PhoneFailureReason.INVALID_LENGTH,
                f"Invalid length ({len(digits)} digits). Egyptian mobile numbers must be 11 digits.",
                f"طول غير صحيح ({len(digits)} رقم). أرقام المحمول المصرية يجب أن تتكون من 11 رقماً.",
            )
        return self._fail(
            info,
            PhoneFailureReason.INVALID_PREFIX,
            "Egyptian mobile numbers must start with 01.",
            "أرقام المحمول المصرية يجب أن تبدأ بـ 01.",
        )

    def _fail(
        self,
        info: PhoneNumberInfo,
        reason: PhoneFailureReason,
        english: str,
        arabic: str,
    ) -> PhoneNumberInfo:
        info.is_valid = False
        info.failure_reason = reason
        info.message_english = english
        info.message_arabic = arabic
        self._logger.debug("Phone rejected", reason=reason.value, last_four=info.last_four or None)
        return info

    def validate_all(self) -> List[PhoneNumberInfo]:
        results = [self.validate(number) for number in self._numbers]
        valid = sum(1 for info in results if info.is_valid)
        self._logger.debug("Validated phone batch", total=len(results), valid=valid)
        return results

    def valid_numbers(self) -> List[PhoneNumberInfo]:
        return [info for info in self.validate_all() if info.is_valid]

    def invalid_numbers(self) -> List[PhoneNumberInfo]:
        return [info for info in self.validate_all() if not info.is_valid]

    # --- Reporting ---

    def summary(self) -> Dict[str, Any]:
        """
        Counts for the held numbers: ``total``, ``valid``, ``invalid``,
        ``success_rate`` (percent) and ``carrier_distribution`` over valid numbers.
        """
        results = self.validate_all()
        valid = [info for info in results if info.is_valid]
        carriers: Dict[str, int] = defaultdict(int)
        for info in valid:
            carriers[info.carrier] += 1

        return {
            "total": len(results),
            "valid": len(valid),
            "invalid": len(results) - len(valid),
            "success_rate": len(valid) * 100.0 / len(results) if results else 0.0,
            "carrier_distribution": dict(carriers),
        }

    def group_by_carrier(self) -> Dict[str, List[PhoneNumberInfo]]:
        groups: Dict[str, List[PhoneNumberInfo]] = defaultdict(list)
        for info in self.valid_numbers():
            groups[info.carrier].append(info)
        return dict(groups)

    def export_valid(self, separator: str = ", ") -> str:
        """Join the distinct valid numbers in local form."""
        numbers = dict.fromkeys(info.number for info in self.valid_numbers())
        return separator.join(numbers)


# =============================================================================
# MODULE HELPERS
# =============================================================================

def validate_phone_number(number: PhoneInput, **options: Any) -> PhoneNumberInfo:
    """Validate one number; ``options`` are ``PhoneNumberValidator`` keyword arguments."""
    return PhoneNumberValidator(**options).validate(number)


def is_valid_phone_number(number: PhoneInput, **options: Any) -> bool:
    return validate_phone_number(number, **options).is_valid


def normalize_phone_number(number: PhoneInput, **options: Any) -> Optional[str]:
    """The local ``01XXXXXXXXX`` form of a valid number, else None."""
    info = validate_phone_number(number, **options)
    return info.number if info.is_valid else None


def format_phone_number(number: PhoneInput, international: bool = False) -> str:
    """Format a valid number for display; invalid input is returned unchanged."""
    info = validate_phone_number(number)
    if not info.is_valid:
        return "" if number is None else str(number)
    return info.international_format if international else info.national_format


def are_same_number(first: PhoneInput, second: PhoneInput) -> bool:
    """True when both numbers are valid and normalise to the same local form."""
    a = validate_phone_number(first)
    b = validate_phone_number(second)
    return a.is_valid and b.is_valid and a.number == b.number


def is_from_carrier(number: PhoneInput, carrier: str) -> bool:
    """Case-insensitive carrier check for a valid number."""
    info = validate_phone_number(number)
    return info.is_valid and info.carrier.casefold() == carrier.casefold()


def carrier_for_prefix(prefix: str) -> Optional[str]:
    """Carrier for a four-digit local prefix such as ``"0100"``."""
    return CARRIER_PREFIXES.get(prefix)


def prefixes_for_carrier(carrier: str) -> List[str]:
    needle = carrier.casefold()
    return [prefix for prefix, name in CARRIER_PREFIXES.items() if name.casefold() == needle]


def supported_carriers() -> List[str]:
    """Carriers in table order, without duplicates."""
    return list(dict.fromkeys(CARRIER_PREFIXES.values()))


def generate_sample_numbers(
    carrier: str,
    count: int = 5,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Random local numbers on the carrier's prefixes, for test data.

    Returns an empty list for unknown carriers.
    """
    prefixes = prefixes_for_carrier(carrier)
    if not prefixes:
        return []
    rng = rng or random.Random()
    return [
        f"{rng.choice(prefixes)}{rng.randint(1_000_000, 9_999_999)}"
        for _ in range(count)
    ]
