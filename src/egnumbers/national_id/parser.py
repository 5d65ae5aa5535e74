"""
Egyptian national ID parser.

Layout of the 14 digits::

    C YY MM DD GG S SSS X
    | |  |  |  |  |  |  +-- last digit: odd = male, even = female
    | |  |  |  |  |  +----- serial number (positions 10-12)
    | |  |  |  |  +-------- registration digit
    | |  |  |  +---------- governorate of birth
    | |  |  +------------- birth day
    | |  +---------------- birth month
    | +------------------- year within the century
    +--------------------- century (1 = 1800s, 2 = 1900s, 3 = 2000s)

Parsing never raises for bad input: failures come back as a
``NationalIdInfo`` with ``is_valid=False`` and a message in both languages.
"""

import calendar
import re
from collections import defaultdict
from datetime import date
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Union

from ..core.constants import CENTURY_DIGITS, GOVERNORATES, NATIONAL_ID_LENGTH, UNKNOWN_GOVERNORATE
from ..core.normalize import extract_digits
from ..core.types import LocalizedName
from ..logging import ContextLogger
from .info import NationalIdInfo, calculate_age

__all__ = [
    "NationalIdParser",
    "DateValidation",
    "parse_national_id",
    "parse_many",
    "split_national_ids",
    "is_valid_format",
    "extract_birth_date",
    "calculate_age_from_id",
    "is_leap_year_from_id",
    "validate_date",
    "validate_date_detailed",
    "is_valid_governorate",
    "supported_governorates",
]

NationalIdInput = Union[str, int]

# Separators accepted in delimited batches
_BATCH_SEPARATORS = re.compile(r"[,;|\r\n]+")


class DateValidation(NamedTuple):
    is_valid: bool
    error_message: str
    is_leap_year: bool
    days_in_month: int


def split_national_ids(text: str, separator: Optional[str] = None) -> List[str]:
    """
    Split a delimited string of IDs.

    Without ``separator`` (or with ``","``) any of ``, ; | CR LF`` separates
    entries. Blank entries are dropped.
    """
    if not text:
        return []
    if separator is None or separator == ",":
        parts = _BATCH_SEPARATORS.split(text)
    else:
        parts = text.split(separator)
    return [part.strip() for part in parts if part.strip()]


def _fail(info: NationalIdInfo, english: str, arabic: str) -> NationalIdInfo:
    info.is_valid = False
    info.error_message = english
    info.error_message_arabic = arabic
    return info


class NationalIdParser:
    """
    Parser for one or many Egyptian national IDs.

    Usage:
        parser = NationalIdParser(["29001010100015", "30512312101234"])
        for info in parser.valid_ids():
            print(info.summary_english)

        parser = NationalIdParser(auto_correct_invalid_days=True).set_age_range(18, 60)
        info = parser.parse("29002300100015")

    Args:
        national_ids: IDs to hold for batch operations
        strict_mode: Reject governorate codes missing from the table
        auto_correct_invalid_days: Clamp days past the month's end instead of failing
        reference_date: "Today" for age validation (defaults to the real date)
    """

    def __init__(
        self,
        national_ids: Optional[Iterable[NationalIdInput]] = None,
        strict_mode: bool = False,
        auto_correct_invalid_days: bool = False,
        reference_date: Optional[date] = None,
    ):
        self._national_ids: List[str] = [str(nid) for nid in (national_ids or [])]
        self.strict_mode = strict_mode
        self.auto_correct_invalid_days = auto_correct_invalid_days
        self.reference_date = reference_date
        self.validate_age = False
        self.min_age = 0
        self.max_age = 150
        self._logger = ContextLogger(
            __name__,
            "national_id",
            strict_mode=strict_mode,
            auto_correct_invalid_days=auto_correct_invalid_days,
        )

    @classmethod
    def from_string(
        cls,
        text: str,
        separator: Optional[str] = None,
        **kwargs: Any,
    ) -> "NationalIdParser":
        """Build a parser from a delimited string (see ``split_national_ids``)."""
        return cls(split_national_ids(text, separator), **kwargs)

    @classmethod
    def from_settings(
        cls,
        settings=None,
        national_ids: Optional[Iterable[NationalIdInput]] = None,
    ) -> "NationalIdParser":
        """Build a parser from ``Settings.national_id`` (defaults to ``get_settings()``)."""
        if settings is None:
            from ..config import get_settings
            settings = get_settings()

        options = settings.national_id
        parser = cls(
            national_ids,
            strict_mode=options.strict_mode,
            auto_correct_invalid_days=options.auto_correct_invalid_days,
        )
        if options.validate_age:
            parser.set_age_range(options.min_age, options.max_age)
        return parser

    # --- Configuration ---

    def set_age_range(self, min_age: int, max_age: int) -> "NationalIdParser":
        """Enable age validation; IDs whose age falls outside the range are invalid."""
        if min_age > max_age:
            raise ValueError(f"min_age ({min_age}) must not exceed max_age ({max_age})")
        self.validate_age = True
        self.min_age = min_age
        self.max_age = max_age
        return self

    def add(self, national_id: NationalIdInput) -> None:
        self._national_ids.append(str(national_id))

    def add_many(self, national_ids: Union[str, Iterable[NationalIdInput]]) -> None:
        """Add IDs from an iterable or from a delimited string."""
        if isinstance(national_ids, str):
            self._national_ids.extend(split_national_ids(national_ids))
        else:
            self._national_ids.extend(str(nid) for nid in national_ids)

    @property
    def national_ids(self) -> List[str]:
        return list(self._national_ids)

    def __len__(self) -> int:
        return len(self._national_ids)

    # --- Parsing ---

    def parse(self, national_id: Optional[NationalIdInput]) -> NationalIdInfo:
        """Parse a single ID. Never raises for malformed input."""
        cleaned = extract_digits(str(national_id)) if national_id is not None else ""
        info = NationalIdInfo(national_id=cleaned, reference_date=self.reference_date)

        if len(cleaned) != NATIONAL_ID_LENGTH:
            self._logger.debug("Rejected national ID", reason="length", length=len(cleaned))
            return _fail(
                info,
                "National ID must be exactly 14 digits.",
                "الرقم القومي يجب أن يتكون من 14 رقمًا بالضبط.",
            )

        century = CENTURY_DIGITS.get(cleaned[0])
        if century is None:
            self._logger.debug("Rejected national ID", reason="century")
            return _fail(
                info,
                "Invalid century digit in National ID. Must be 1, 2, or 3.",
                "رقم القرن في الرقم القومي غير صالح. يجب أن يكون 1 أو 2 أو 3.",
            )
        info.century = century

        year = century + int(cleaned[1:3])
        month = int(cleaned[3:5])
        day = int(cleaned[5:7])

        if not 1 <= month <= 12:
            self._logger.debug("Rejected national ID", reason="month")
            return _fail(
                info,
                f"Invalid birth month in National ID: {month}. Must be between 1 and 12.",
                f"شهر الميلاد في الرقم القومي غير صالح: {month}. يجب أن يكون بين 1 و 12.",
            )

        days_in_month = calendar.monthrange(year, month)[1]
        if not 1 <= day <= days_in_month:
            if not self.auto_correct_invalid_days:
                leap_note = " (leap year)" if calendar.isleap(year) else ""
                self._logger.debug("Rejected national ID", reason="day")
                return _fail(
                    info,
                    f"Invalid birth date in National ID: {day}/{month}/{year}. "
                    f"Month {month} has {days_in_month} days{leap_note}.",
                    f"تاريخ الميلاد في الرقم القومي غير صالح: {day}/{month}/{year}. "
                    f"الشهر {month} به {days_in_month} يومًا.",
                )
            day = days_in_month
            info.day_corrected = True

        governorate_code = cleaned[7:9]
        info.governorate_code = governorate_code
        governorate = GOVERNORATES.get(governorate_code)
        if governorate is None:
            if self.strict_mode:
                self._logger.debug("Rejected national ID", reason="governorate")
                return _fail(
                    info,
                    f"Unknown governorate code in National ID: {governorate_code}.",
                    f"كود المحافظة في الرقم القومي غير معروف: {governorate_code}.",
                )
            governorate = UNKNOWN_GOVERNORATE
        info.governorate = governorate

        male = int(cleaned[-1]) % 2 == 1
        info.gender = "Male" if male else "Female"
        info.gender_arabic = "ذكر" if male else "أنثى"
        info.serial_number = cleaned[10:13]

        info.year = year
        info.month = month
        info.day = day
        info.is_valid = True

        if self.validate_age:
            age = calculate_age(date(year, month, day), self.reference_date)
            if not self.min_age <= age <= self.max_age:
                self._logger.debug("Rejected national ID", reason="age", age=age)
                return _fail(
                    info,
                    f"Age {age} is outside valid range ({self.min_age}-{self.max_age}).",
                    f"العمر {age} خارج النطاق المسموح ({self.min_age}-{self.max_age}).",
                )

        return info

    def parse_all(self) -> List[NationalIdInfo]:
        results = [self.parse(nid) for nid in self._national_ids]
        valid = sum(1 for info in results if info.is_valid)
        self._logger.debug("Parsed national ID batch", total=len(results), valid=valid)
        return results

    def valid_ids(self) -> List[NationalIdInfo]:
        return [info for info in self.parse_all() if info.is_valid]

    def invalid_ids(self) -> List[NationalIdInfo]:
        return [info for info in self.parse_all() if not info.is_valid]

    # --- Analysis ---

    def statistics(self) -> Dict[str, Any]:
        """
        Summary counts for the held IDs.

        Always contains ``total``, ``valid``, ``invalid`` and ``success_rate``
        (percent). When any ID is valid, also ``governorate_distribution``,
        ``leap_year_distribution``, ``average_age``, ``min_age`` and ``max_age``.
        """
        results = self.parse_all()
        valid = [info for info in results if info.is_valid]

        stats: Dict[str, Any] = {
            "total": len(results),
            "valid": len(valid),
            "invalid": len(results) - len(valid),
            "success_rate": len(valid) * 100.0 / len(results) if results else 0.0,
        }

        if valid:
            governorates: Dict[str, int] = defaultdict(int)
            leap_years: Dict[str, int] = defaultdict(int)
            for info in valid:
                governorates[info.governorate_name_english] += 1
                leap_years[_leap_label(info)] += 1

            today = self.reference_date or date.today()
            ages = [info.age_on(today) for info in valid]

            stats["governorate_distribution"] = dict(governorates)
            stats["leap_year_distribution"] = dict(leap_years)
            stats["average_age"] = sum(ages) / len(ages)
            stats["min_age"] = min(ages)
            stats["max_age"] = max(ages)

        return stats

    def group_by_governorate(self) -> Dict[str, List[NationalIdInfo]]:
        groups: Dict[str, List[NationalIdInfo]] = defaultdict(list)
        for info in self.valid_ids():
            groups[info.governorate_name_english].append(info)
        return dict(groups)

    def group_by_leap_year(self) -> Dict[str, List[NationalIdInfo]]:
        groups: Dict[str, List[NationalIdInfo]] = defaultdict(list)
        for info in self.valid_ids():
            groups[_leap_label(info)].append(info)
        return dict(groups)

    def by_governorate(self, governorate: str) -> List[NationalIdInfo]:
        """Valid IDs whose governorate name (either language) contains ``governorate``."""
        needle = governorate.casefold()
        return [
            info for info in self.valid_ids()
            if needle in info.governorate_name_english.casefold()
            or governorate in info.governorate_name_arabic
        ]

    def born_in_leap_years(self) -> List[NationalIdInfo]:
        return [info for info in self.valid_ids() if info.is_leap_year]

    def corrected_dates(self) -> List[NationalIdInfo]:
        return [info for info in self.valid_ids() if info.day_corrected]


def _leap_label(info: NationalIdInfo) -> str:
    return "Leap Years" if info.is_leap_year else "Regular Years"


# =============================================================================
# MODULE HELPERS
# =============================================================================

def parse_national_id(
    national_id: Optional[NationalIdInput],
    strict_mode: bool = False,
    auto_correct_invalid_days: bool = False,
) -> NationalIdInfo:
    """Parse one ID with a throwaway parser."""
    parser = NationalIdParser(
        strict_mode=strict_mode,
        auto_correct_invalid_days=auto_correct_invalid_days,
    )
    return parser.parse(national_id)


def parse_many(
    national_ids: Union[str, Iterable[NationalIdInput]],
    auto_correct_invalid_days: bool = False,
) -> List[NationalIdInfo]:
    """Parse a delimited string or an iterable of IDs."""
    parser = NationalIdParser(auto_correct_invalid_days=auto_correct_invalid_days)
    parser.add_many(national_ids)
    return parser.parse_all()


def is_valid_format(national_id: Optional[str]) -> bool:
    """Quick shape check: 14 digits with a known century digit, no date checks."""
    if not national_id or not national_id.strip():
        return False
    cleaned = extract_digits(national_id)
    return len(cleaned) == NATIONAL_ID_LENGTH and cleaned[0] in CENTURY_DIGITS


def extract_birth_date(
    national_id: NationalIdInput,
    auto_correct_invalid_days: bool = False,
) -> Optional[date]:
    return parse_national_id(
        national_id, auto_correct_invalid_days=auto_correct_invalid_days
    ).birth_date


def calculate_age_from_id(
    national_id: NationalIdInput,
    today: Optional[date] = None,
) -> Optional[int]:
    birth = extract_birth_date(national_id)
    return calculate_age(birth, today) if birth else None


def is_leap_year_from_id(national_id: NationalIdInput) -> bool:
    info = parse_national_id(national_id)
    return info.is_valid and info.is_leap_year


def validate_date(year: int, month: int, day: int) -> bool:
    """Check a Gregorian date, honouring leap years."""
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= calendar.monthrange(year, month)[1]


def validate_date_detailed(year: int, month: int, day: int) -> DateValidation:
    """Like ``validate_date`` but explains the failure."""
    if not 1 <= month <= 12:
        return DateValidation(False, f"Invalid month: {month}. Must be between 1 and 12.", False, 0)

    is_leap = calendar.isleap(year)
    days_in_month = calendar.monthrange(year, month)[1]

    if not 1 <= day <= days_in_month:
        leap_note = " (leap year)" if is_leap else ""
        return DateValidation(
            False,
            f"Invalid day: {day}. Month {month} has {days_in_month} days{leap_note}.",
            is_leap,
            days_in_month,
        )

    return DateValidation(True, "", is_leap, days_in_month)


def is_valid_governorate(code: str) -> bool:
    return code in GOVERNORATES


def supported_governorates() -> Dict[str, LocalizedName]:
    """Copy of the governorate table, keyed by two-digit code."""
    return dict(GOVERNORATES)
