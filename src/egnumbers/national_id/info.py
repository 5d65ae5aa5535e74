"""
Parsed Egyptian national ID record.

``NationalIdInfo`` holds the fields decoded from the 14 digits and derives
everything else (names, age, generation, zodiac sign) on access from the
temporal classification engine.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from ..core.constants import DAY_NAMES, MONTH_NAMES, UNKNOWN_GOVERNORATE
from ..core.normalize import to_arabic_digits
from ..core.temporal import (
    get_age_group,
    get_century_name_arabic,
    get_century_name_english,
    get_generation,
    get_zodiac_sign,
)
from ..core.types import AgeGroup, Generation, LocalizedName, ZodiacSign

__all__ = [
    "NationalIdInfo",
    "calculate_age",
    "calculate_age_in_months",
]


def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
    """Completed years between ``birth_date`` and ``today``."""
    today = today or date.today()
    had_birthday = (today.month, today.day) >= (birth_date.month, birth_date.day)
    return today.year - birth_date.year - (0 if had_birthday else 1)


def calculate_age_in_months(birth_date: date, today: Optional[date] = None) -> int:
    """Completed months between ``birth_date`` and ``today``."""
    today = today or date.today()
    months = (today.year - birth_date.year) * 12 + today.month - birth_date.month
    if today.day < birth_date.day:
        months -= 1
    return months


@dataclass
class NationalIdInfo:
    """
    Result of parsing one national ID.

    Attributes:
        national_id: The cleaned digit string (may be shorter than 14 on failure)
        is_valid: True when every check passed
        error_message / error_message_arabic: Why parsing failed ("" when valid)
        year, month, day: Birth date parts (0 when not reached)
        century: Century start year from the first digit (1800, 1900, 2000)
        governorate_code: Two-digit place-of-birth code
        governorate: Governorate names
        gender / gender_arabic: From the parity of the last digit
        serial_number: Registration sequence digits
        day_corrected: True when an out-of-range day was clamped
        reference_date: Date the age properties are computed on (today when None)
    """
    national_id: str = ""
    is_valid: bool = False
    error_message: str = ""
    error_message_arabic: str = ""
    year: int = 0
    month: int = 0
    day: int = 0
    century: int = 0
    governorate_code: str = ""
    governorate: LocalizedName = field(default=UNKNOWN_GOVERNORATE)
    gender: str = ""
    gender_arabic: str = ""
    serial_number: str = ""
    day_corrected: bool = False
    reference_date: Optional[date] = field(default=None, repr=False)

    # --- Birth date ---

    @property
    def birth_date(self) -> Optional[date]:
        if self.is_valid and self.year > 0 and self.month > 0 and self.day > 0:
            return date(self.year, self.month, self.day)
        return None

    @property
    def birth_date_iso(self) -> str:
        return self.birth_date.isoformat() if self.birth_date else ""

    @property
    def is_leap_year(self) -> bool:
        return self.year > 0 and calendar.isleap(self.year)

    @property
    def days_in_month(self) -> int:
        if self.year > 0 and 1 <= self.month <= 12:
            return calendar.monthrange(self.year, self.month)[1]
        return 0

    @property
    def month_name_english(self) -> str:
        name = MONTH_NAMES.get(self.month)
        return name.english if name else ""

    @property
    def month_name_arabic(self) -> str:
        name = MONTH_NAMES.get(self.month)
        return name.arabic if name else ""

    @property
    def day_of_week_english(self) -> str:
        birth = self.birth_date
        return DAY_NAMES[birth.weekday()].english if birth else ""

    @property
    def day_of_week_arabic(self) -> str:
        birth = self.birth_date
        return DAY_NAMES[birth.weekday()].arabic if birth else ""

    @property
    def century_name_english(self) -> str:
        return get_century_name_english(self.century)

    @property
    def century_name_arabic(self) -> str:
        return get_century_name_arabic(self.century)

    # --- Age ---

    def _today(self) -> date:
        return self.reference_date or date.today()

    def age_on(self, today: date) -> Optional[int]:
        birth = self.birth_date
        return calculate_age(birth, today) if birth else None

    @property
    def age(self) -> int:
        """Age in completed years on the reference date (0 when the ID is invalid)."""
        return self.age_on(self._today()) or 0

    def age_in_months_on(self, today: date) -> Optional[int]:
        birth = self.birth_date
        return calculate_age_in_months(birth, today) if birth else None

    def age_in_days_on(self, today: date) -> Optional[int]:
        birth = self.birth_date
        return (today - birth).days if birth else None

    @property
    def age_in_months(self) -> int:
        return self.age_in_months_on(self._today()) or 0

    @property
    def age_in_days(self) -> int:
        return self.age_in_days_on(self._today()) or 0

    def age_group_on(self, today: date) -> Optional[AgeGroup]:
        age = self.age_on(today)
        return get_age_group(age) if age is not None else None

    @property
    def age_group(self) -> Optional[AgeGroup]:
        return self.age_group_on(self._today())

    @property
    def age_group_english(self) -> str:
        group = self.age_group
        return group.english if group else ""

    @property
    def age_group_arabic(self) -> str:
        group = self.age_group
        return group.arabic if group else ""

    # --- Classification ---

    @property
    def generation(self) -> Optional[Generation]:
        return get_generation(self.year) if self.year > 0 else None

    @property
    def generation_english(self) -> str:
        return self.generation.english if self.generation else ""

    @property
    def generation_arabic(self) -> str:
        return self.generation.arabic if self.generation else ""

    @property
    def zodiac_sign(self) -> Optional[ZodiacSign]:
        birth = self.birth_date
        return get_zodiac_sign(birth) if birth else None

    @property
    def zodiac_sign_english(self) -> str:
        return self.zodiac_sign.english if self.zodiac_sign else ""

    @property
    def zodiac_sign_arabic(self) -> str:
        return self.zodiac_sign.arabic if self.zodiac_sign else ""

    @property
    def zodiac_symbol(self) -> str:
        return self.zodiac_sign.symbol if self.zodiac_sign else ""

    # --- Identity ---

    @property
    def governorate_name_english(self) -> str:
        return self.governorate.english

    @property
    def governorate_name_arabic(self) -> str:
        return self.governorate.arabic

    @property
    def gender_symbol(self) -> str:
        return {"Male": "♂", "Female": "♀"}.get(self.gender, "")

    # --- Arabic renderings ---

    @property
    def national_id_arabic(self) -> str:
        return to_arabic_digits(self.national_id)

    @property
    def birth_date_arabic(self) -> str:
        birth = self.birth_date
        if not birth:
            return ""
        return f"{to_arabic_digits(birth.day)} {self.month_name_arabic} {to_arabic_digits(birth.year)}"

    # --- Summaries ---

    @property
    def summary_english(self) -> str:
        if not self.is_valid:
            return f"Invalid national ID: {self.error_message}"
        return (
            f"{self.gender}, born {self.birth_date_iso} in {self.governorate_name_english} "
            f"({self.generation_english}, {self.zodiac_sign_english})"
        )

    @property
    def summary_arabic(self) -> str:
        if not self.is_valid:
            return f"رقم قومي غير صالح: {self.error_message_arabic}"
        return (
            f"{self.gender_arabic}، مواليد {self.birth_date_arabic} في {self.governorate_name_arabic} "
            f"({self.generation_arabic}، {self.zodiac_sign_arabic})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: dict[str, Any] = {
            "national_id": self.national_id,
            "is_valid": self.is_valid,
            "error_message": self.error_message,
        }
        if not self.is_valid:
            return data

        data.update({
            "birth_date": self.birth_date_iso,
            "century": self.century,
            "century_name": self.century_name_english,
            "is_leap_year": self.is_leap_year,
            "governorate_code": self.governorate_code,
            "governorate": self.governorate_name_english,
            "gender": self.gender,
            "serial_number": self.serial_number,
            "age": self.age,
            "age_group": self.age_group_english,
            "generation": self.generation_english,
            "zodiac_sign": self.zodiac_sign_english,
            "day_corrected": self.day_corrected,
        })
        return data

    def __str__(self) -> str:
        return self.summary_english
