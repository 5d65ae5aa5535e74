"""
Digit normalisation between Arabic-Indic and Western numerals.

User input for Egyptian identifiers routinely mixes Arabic-Indic digits
(٠-٩), Eastern Arabic/Persian digits (۰-۹) and ASCII digits. The checksum
engine only accepts ASCII digits, so callers run input through here first.
"""

import re

__all__ = [
    "to_western_digits",
    "to_arabic_digits",
    "extract_digits",
    "contains_arabic_digits",
]

_ARABIC_INDIC = "٠١٢٣٤٥٦٧٨٩"
_EASTERN_ARABIC = "۰۱۲۳۴۵۶۷۸۹"
_WESTERN = "0123456789"

# Arabic decimal separator, thousands separator, percent sign
_ARABIC_SYMBOLS = "٫٬٪"
_WESTERN_SYMBOLS = ".,%"

_TO_WESTERN = str.maketrans(
    _ARABIC_INDIC + _EASTERN_ARABIC + _ARABIC_SYMBOLS,
    _WESTERN + _WESTERN + _WESTERN_SYMBOLS,
)
_TO_ARABIC = str.maketrans(_WESTERN + _WESTERN_SYMBOLS, _ARABIC_INDIC + _ARABIC_SYMBOLS)

_NON_DIGITS = re.compile(r"[^0-9]")
_ARABIC_DIGIT = re.compile(f"[{_ARABIC_INDIC}{_EASTERN_ARABIC}]")


def to_western_digits(text: str) -> str:
    """Convert Arabic-Indic and Eastern Arabic digits (and separators) to ASCII."""
    if not text:
        return ""
    return text.translate(_TO_WESTERN)


def to_arabic_digits(text) -> str:
    """
    Render ASCII digits as Arabic-Indic digits.

    Accepts ints for convenience, e.g. ``to_arabic_digits(1990) == "١٩٩٠"``.
    """
    if text is None:
        return ""
    return str(text).translate(_TO_ARABIC)


def extract_digits(text: str) -> str:
    """Return only the ASCII digits of ``text`` after converting Arabic digits."""
    if not text:
        return ""
    return _NON_DIGITS.sub("", to_western_digits(text))


def contains_arabic_digits(text: str) -> bool:
    return bool(text) and _ARABIC_DIGIT.search(text) is not None
