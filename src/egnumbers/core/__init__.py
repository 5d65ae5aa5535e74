"""
egnumbers core engines.

Two independent, stateless engines:
- checksum: Modulus-10 (Luhn) validation, check digits, test numbers, traces
- temporal: century, generation, zodiac sign and age-group classification

Usage:
    from egnumbers.core import luhn_validate, get_generation

    luhn_validate("4111 1111 1111 1111")   # True
    get_generation(2000).english           # "Generation Z"
"""

from .types import (
    LocalizedName,
    LuhnStep,
    LuhnTrace,
    Generation,
    ZodiacSign,
    AgeGroup,
    IssuerInfo,
)

from .checksum import (
    sanitize_number,
    is_digit_string,
    luhn_validate,
    luhn_checksum,
    luhn_check_digit,
    generate_test_number,
    luhn_trace,
)

from .temporal import (
    get_century,
    get_century_name,
    get_century_name_english,
    get_century_name_arabic,
    get_generation,
    get_generation_english,
    get_generation_arabic,
    is_in_generation,
    get_generation_years,
    zodiac_sign_for,
    get_zodiac_sign,
    get_age_group,
    get_age_group_english,
    get_age_group_arabic,
)

from .normalize import (
    to_western_digits,
    to_arabic_digits,
    extract_digits,
    contains_arabic_digits,
)

__all__ = [
    # Types
    "LocalizedName",
    "LuhnStep",
    "LuhnTrace",
    "Generation",
    "ZodiacSign",
    "AgeGroup",
    "IssuerInfo",
    # Checksum engine
    "sanitize_number",
    "is_digit_string",
    "luhn_validate",
    "luhn_checksum",
    "luhn_check_digit",
    "generate_test_number",
    "luhn_trace",
    # Temporal engine
    "get_century",
    "get_century_name",
    "get_century_name_english",
    "get_century_name_arabic",
    "get_generation",
    "get_generation_english",
    "get_generation_arabic",
    "is_in_generation",
    "get_generation_years",
    "zodiac_sign_for",
    "get_zodiac_sign",
    "get_age_group",
    "get_age_group_english",
    "get_age_group_arabic",
    # Normalisation
    "to_western_digits",
    "to_arabic_digits",
    "extract_digits",
    "contains_arabic_digits",
]
