"""
egnumbers - Egyptian numeric identifier toolkit

This package provides:
- core: Luhn checksum engine and temporal classification (century,
  generation, zodiac sign, age group), plus Arabic digit normalisation
- national_id: Egyptian national ID parser
- bank_card: Payment card analyser with the Egyptian issuer table
- phone: Egyptian mobile number validator
"""

__version__ = "1.0.0"

from .exceptions import (
    EgNumbersError,
    InvalidArgumentError,
    ArgumentOutOfRangeError,
    ConfigurationError,
)
from .core import (
    luhn_validate,
    luhn_checksum,
    luhn_check_digit,
    generate_test_number,
    luhn_trace,
    get_century_name,
    get_generation,
    get_zodiac_sign,
    get_age_group,
)
from .national_id import NationalIdInfo, NationalIdParser, parse_national_id
from .bank_card import (
    BankCardAnalyzer,
    BankCardInfo,
    CardFailureReason,
    analyze_card,
    analyze_card_full,
    is_egyptian_card,
)
from .phone import PhoneNumberInfo, PhoneNumberValidator, validate_phone_number
