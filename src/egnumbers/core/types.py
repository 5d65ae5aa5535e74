"""
Core data types for the egnumbers checksum and classification engines.

This module defines the immutable records returned by the engines:
- LocalizedName: an Arabic/English label pair
- LuhnStep / LuhnTrace: per-digit breakdown of a Modulus-10 computation
- Generation, ZodiacSign, AgeGroup: range records used by the temporal classifiers
- IssuerInfo: a card issuer row used by the bank card analyser

All records are frozen dataclasses. Tables built from them in
``egnumbers.core.constants`` are created once at import and never mutated.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

__all__ = [
    "LocalizedName",
    "LuhnStep",
    "LuhnTrace",
    "Generation",
    "ZodiacSign",
    "AgeGroup",
    "IssuerInfo",
]


@dataclass(frozen=True)
class LocalizedName:
    """A label available in Arabic and English."""
    arabic: str
    english: str

    def in_language(self, language: str) -> str:
        """Return the label for ``"ar"`` or ``"en"`` (anything else means English)."""
        return self.arabic if language.lower().startswith("ar") else self.english


# =============================================================================
# CHECKSUM TRACE
# =============================================================================

@dataclass(frozen=True)
class LuhnStep:
    """
    Processing of a single digit during the Modulus-10 traversal.

    Attributes:
        position: Zero-based index into the sanitized number (left-to-right)
        original_digit: Digit value before processing (0-9)
        doubled: True if the digit sits on a doubling position
        processed_value: Value after doubling and carry reduction (0-9)
        running_sum: Cumulative sum from the rightmost digit up to and including this one
    """
    position: int
    original_digit: int
    doubled: bool
    processed_value: int
    running_sum: int

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        return {
            "position": self.position,
            "original_digit": self.original_digit,
            "doubled": self.doubled,
            "processed_value": self.processed_value,
            "running_sum": self.running_sum,
        }


@dataclass(frozen=True)
class LuhnTrace:
    """
    Complete step-by-step result of a Modulus-10 computation.

    ``steps`` are ordered by position (left-to-right) even though they are
    computed right-to-left, so the running sums decrease along the tuple
    and ``steps[0].running_sum`` equals ``total_sum``.
    """
    card_number: str
    total_sum: int
    is_valid: bool
    check_digit: int
    steps: Tuple[LuhnStep, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.steps)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        return {
            "card_number": self.card_number,
            "total_sum": self.total_sum,
            "is_valid": self.is_valid,
            "check_digit": self.check_digit,
            "steps": [step.to_dict() for step in self.steps],
        }


# =============================================================================
# CLASSIFICATION RECORDS
# =============================================================================

@dataclass(frozen=True)
class Generation:
    """A named generation with an inclusive birth-year range."""
    english: str
    arabic: str
    start_year: int
    end_year: int

    def __post_init__(self) -> None:
        if self.start_year > self.end_year:
            raise ValueError(
                f"Invalid generation {self.english!r}: "
                f"start_year={self.start_year} > end_year={self.end_year}"
            )

    def contains(self, year: int) -> bool:
        return self.start_year <= year <= self.end_year

    def matches_name(self, name: str) -> bool:
        """Case-insensitive match against either language's name."""
        folded = name.strip().casefold()
        return folded in (self.english.casefold(), self.arabic.casefold())

    @property
    def years(self) -> Tuple[int, int]:
        return (self.start_year, self.end_year)


@dataclass(frozen=True)
class ZodiacSign:
    """
    A zodiac sign with a (month, day) start and end, both inclusive.

    Signs whose start month is after their end month span the year boundary
    (Capricorn runs from December 22 to January 19).
    """
    english: str
    arabic: str
    symbol: str
    start_month: int
    start_day: int
    end_month: int
    end_day: int

    @property
    def wraps_year(self) -> bool:
        return self.start_month > self.end_month

    def matches(self, month: int, day: int) -> bool:
        """Check whether ``month``/``day`` falls inside this sign's range."""
        on_start = month == self.start_month and day >= self.start_day
        on_end = month == self.end_month and day <= self.end_day
        if on_start or on_end:
            return True

        if self.wraps_year:
            return month > self.start_month or month < self.end_month
        return self.start_month < month < self.end_month


@dataclass(frozen=True)
class AgeGroup:
    """
    A life-stage bucket covering ages in ``[min_age, max_age)``.

    ``max_age`` is None for the open-ended senior bucket; the invalid bucket
    for negative ages has ``min_age`` None.
    """
    english: str
    arabic: str
    min_age: Optional[int]
    max_age: Optional[int]

    def contains(self, age: int) -> bool:
        if self.min_age is not None and age < self.min_age:
            return False
        if self.max_age is not None and age >= self.max_age:
            return False
        return True


# =============================================================================
# CARD ISSUERS
# =============================================================================

@dataclass(frozen=True)
class IssuerInfo:
    """
    A card issuer keyed by its IIN (the first six digits of the PAN).

    The country fields default to Egypt, which is where every issuer in
    ``EGYPTIAN_ISSUERS`` is licensed.
    """
    iin: str
    name: LocalizedName
    network: str
    card_type: str
    card_category: str
    website: Optional[str] = None
    customer_service: Optional[str] = None
    supports_tokenization: bool = True
    cvv_length: int = 3
    valid_lengths: Tuple[int, ...] = (16,)
    country_code: str = "EG"
    country: LocalizedName = LocalizedName("مصر", "Egypt")
    currency_code: str = "EGP"
    is_egyptian: bool = True

    def matches(self, number: str) -> bool:
        return number.startswith(self.iin)

    def to_dict(self) -> dict[str, object]:
        return {
            "iin": self.iin,
            "issuer": self.name.english,
            "issuer_arabic": self.name.arabic,
            "network": self.network,
            "card_type": self.card_type,
            "card_category": self.card_category,
            "country_code": self.country_code,
            "currency_code": self.currency_code,
            "is_egyptian": self.is_egyptian,
            "supports_tokenization": self.supports_tokenization,
            "website": self.website,
            "customer_service": self.customer_service,
        }
