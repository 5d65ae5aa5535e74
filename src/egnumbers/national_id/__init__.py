"""
Egyptian national ID parsing.

Usage:
    from egnumbers.national_id import parse_national_id

    info = parse_national_id("29001010100015")
    info.birth_date          # date(1990, 1, 1)
    info.governorate_name_english   # "Cairo"
"""

from .info import (
    NationalIdInfo,
    calculate_age,
    calculate_age_in_months,
)

from .parser import (
    NationalIdParser,
    DateValidation,
    parse_national_id,
    parse_many,
    split_national_ids,
    is_valid_format,
    extract_birth_date,
    calculate_age_from_id,
    is_leap_year_from_id,
    validate_date,
    validate_date_detailed,
    is_valid_governorate,
    supported_governorates,
)

__all__ = [
    "NationalIdInfo",
    "calculate_age",
    "calculate_age_in_months",
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
