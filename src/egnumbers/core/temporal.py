"""
Temporal classification engine.

Resolves century, generation, zodiac sign and age group for a year, a
date or an age. Every classifier scans an ordered table and returns the
first match; when nothing matches it returns a defined fallback instead
of raising, so classification is total over all integer inputs.

Input plausibility (a birth year in the future, an age of 900) is the
caller's concern; nothing here range-checks its arguments.
"""

import logging
from datetime import date
from typing import Optional, Tuple

from .constants import (
    AGE_GROUPS,
    CENTURIES,
    GENERATION_FALLBACK_START_YEAR,
    GENERATIONS,
    INVALID_AGE_GROUP,
    UNKNOWN_NAME,
    ZODIAC_SIGNS,
    ZODIAC_WRAPAROUND_SIGN,
)
from .types import AgeGroup, Generation, LocalizedName, ZodiacSign

__all__ = [
    # Century
    "get_century",
    "get_century_name",
    "get_century_name_english",
    "get_century_name_arabic",
    # Generation
    "get_generation",
    "get_generation_english",
    "get_generation_arabic",
    "is_in_generation",
    "get_generation_years",
    # Zodiac
    "zodiac_sign_for",
    "get_zodiac_sign",
    # Age group
    "get_age_group",
    "get_age_group_english",
    "get_age_group_arabic",
]

logger = logging.getLogger(__name__)


# =============================================================================
# CENTURY
# =============================================================================

def get_century(year: int) -> int:
    """First year of the century containing ``year`` (1999 -> 1900)."""
    return (year // 100) * 100


def get_century_name(year: int) -> LocalizedName:
    """Century name for ``year``, or an "Unknown" label when it is not tabled."""
    return CENTURIES.get(get_century(year), UNKNOWN_NAME)


def get_century_name_english(century: int) -> str:
    """English name keyed by century start year (1900 -> "Twentieth")."""
    return CENTURIES.get(century, UNKNOWN_NAME).english


def get_century_name_arabic(century: int) -> str:
    """Arabic name keyed by century start year (1900 -> "العشرون")."""
    return CENTURIES.get(century, UNKNOWN_NAME).arabic


# =============================================================================
# GENERATION
# =============================================================================

def get_generation(birth_year: int) -> Generation:
    """
    Generation whose inclusive range contains ``birth_year``.

    Falls back to the most recent generation when no range matches.
    """
    for generation in GENERATIONS:
        if generation.contains(birth_year):
            return generation

    logger.debug(f"No generation range for {birth_year}, using {GENERATIONS[-1].english}")
    return GENERATIONS[-1]


def get_generation_english(birth_year: int) -> str:
    return get_generation(birth_year).english


def get_generation_arabic(birth_year: int) -> str:
    return get_generation(birth_year).arabic


def is_in_generation(birth_year: int, generation_name: str) -> bool:
    """Check ``birth_year`` against a generation name in either language."""
    return get_generation(birth_year).matches_name(generation_name)


def get_generation_years(
    generation_name: str,
    current_year: Optional[int] = None,
) -> Tuple[int, int]:
    """
    Reverse lookup: inclusive ``(start_year, end_year)`` for a generation name.

    Unknown names give ``(1900, current_year)``; ``current_year`` defaults
    to today's year.
    """
    for generation in GENERATIONS:
        if generation.matches_name(generation_name):
            return generation.years

    if current_year is None:
        current_year = date.today().year
    return (GENERATION_FALLBACK_START_YEAR, current_year)


# =============================================================================
# ZODIAC
# =============================================================================

def zodiac_sign_for(month: int, day: int) -> ZodiacSign:
    """
    Zodiac sign for a month/day pair.

    The first sign in table order whose range contains the date wins. The
    table tiles the whole year, but the wraparound sign is returned if a
    date somehow matches nothing.
    """
    for sign in ZODIAC_SIGNS:
        if sign.matches(month, day):
            return sign

    logger.debug(f"No zodiac range for {month}/{day}, using {ZODIAC_WRAPAROUND_SIGN.english}")
    return ZODIAC_WRAPAROUND_SIGN


def get_zodiac_sign(value: date) -> ZodiacSign:
    """Zodiac sign for a ``date`` (or ``datetime``)."""
    return zodiac_sign_for(value.month, value.day)


# =============================================================================
# AGE GROUP
# =============================================================================

def get_age_group(age: int) -> AgeGroup:
    """
    Life-stage bucket for ``age`` in whole years.

    Negative ages map to the "Invalid" bucket rather than raising.
    """
    if age < 0:
        return INVALID_AGE_GROUP

    for group in AGE_GROUPS:
        if group.max_age is None or age < group.max_age:
            return group

    return AGE_GROUPS[-1]


def get_age_group_english(age: int) -> str:
    return get_age_group(age).english


def get_age_group_arabic(age: int) -> str:
    return get_age_group(age).arabic
