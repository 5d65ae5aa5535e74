"""
Bank card (PAN) analyser.

Runs a card number through a fixed chain of guards and reports the first
failure, or the enriched card details when every guard passes:

1. empty input                  -> NULL_OR_EMPTY
2. characters other than digits -> CONTAINS_NON_DIGITS
3. issuer lookup in the Egyptian issuer table, then network detection by
   IIN range (unknown networks accept 13-19 digits)
4. length not allowed           -> INVALID_LENGTH
5. Luhn check                   -> LUHN_CHECK_FAILED

``analyze_full`` adds optional expiry, CVV and cardholder-name checks on
top of the guard chain. Only masked numbers are ever written to the log.

Usage:
    analyzer = BankCardAnalyzer()
    info = analyzer.analyze("٥٠٧٨ ٠٣١٢ ٣٤٥٦ ٧٨٩٠")
    info.network           # "Meeza"
    info.issuer_name       # "National Bank of Egypt (NBE) - Meeza Debit"
    info.is_egyptian       # True

    info = analyzer.analyze_full("4111111111111111", expiry="12/29", cvv="123")
"""

import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from .core.checksum import is_digit_string, luhn_trace, luhn_validate, sanitize_number
from .core.constants import (
    CARD_CATEGORY_NAMES,
    CARD_NETWORK_NAMES,
    CARD_NETWORK_RANGES,
    CARD_TYPE_NAMES,
    CARDHOLDER_NAME_MAX_LENGTH,
    CARDHOLDER_NAME_MIN_LENGTH,
    EGYPTIAN_ISSUERS,
    EXPIRY_MAX_YEAR,
    EXPIRY_MIN_YEAR,
    TOKENIZING_NETWORKS,
    UNKNOWN_CARD_KIND,
    UNKNOWN_NETWORK,
    UNKNOWN_NETWORK_LENGTHS,
)
from .core.normalize import to_western_digits
from .core.types import IssuerInfo, LuhnTrace
from .logging import ContextLogger

__all__ = [
    "CardFailureReason",
    "BankCardInfo",
    "BankCardAnalyzer",
    "analyze_card",
    "analyze_card_full",
    "detect_network",
    "find_issuer_by_iin",
    "is_egyptian_card",
    "format_card_number",
    "mask_card_number",
    "parse_expiry",
]

DEFAULT_MASK_CHAR = "•"

CardInput = Union[str, int, None]

_EXPIRY_SEPARATORS = re.compile(r"[\s/\-]")
_CARDHOLDER_NAME = re.compile(r"[A-Za-z\s\-']+")


class CardFailureReason(Enum):
    """Why a card number failed analysis."""
    NONE = "NONE"
    NULL_OR_EMPTY = "NULL_OR_EMPTY"
    CONTAINS_NON_DIGITS = "CONTAINS_NON_DIGITS"
    INVALID_LENGTH = "INVALID_LENGTH"
    LUHN_CHECK_FAILED = "LUHN_CHECK_FAILED"
    INVALID_EXPIRY_DATE = "INVALID_EXPIRY_DATE"
    CARD_EXPIRED = "CARD_EXPIRED"
    INVALID_CVV = "INVALID_CVV"
    INVALID_CARDHOLDER_NAME = "INVALID_CARDHOLDER_NAME"


@dataclass
class BankCardInfo:
    """
    Result of analysing one card number.

    ``formatted_number``, ``masked_number`` and the notes are only filled in
    for cards that pass the guard chain. ``luhn_trace`` is only filled in
    when the analyser was asked for it. The expiry, CVV and cardholder-name
    fields stay None unless ``analyze_full`` was given that value.
    """
    raw_input: str = ""
    sanitized_number: str = ""
    is_valid: bool = False
    failure_reason: CardFailureReason = CardFailureReason.NONE
    message_english: str = ""
    message_arabic: str = ""
    iin: str = ""
    extended_iin: str = ""
    last_four: str = ""
    check_digit: Optional[int] = None
    network: str = UNKNOWN_NETWORK
    network_arabic: str = CARD_NETWORK_NAMES[UNKNOWN_NETWORK].arabic
    cvv_length: int = 3
    valid_lengths: Tuple[int, ...] = ()
    is_length_valid: bool = False
    is_luhn_valid: bool = False
    issuer: Optional[IssuerInfo] = None
    card_type: str = UNKNOWN_CARD_KIND
    card_category: str = UNKNOWN_CARD_KIND
    supports_tokenization: bool = False
    formatted_number: str = ""
    masked_number: str = ""
    notes_english: List[str] = field(default_factory=list)
    notes_arabic: List[str] = field(default_factory=list)
    luhn_trace: Optional[LuhnTrace] = field(default=None, repr=False)

    # Full analysis
    expiry_input: Optional[str] = None
    expiry_month: Optional[int] = None
    expiry_year: Optional[int] = None
    is_expiry_valid: Optional[bool] = None
    is_expired: Optional[bool] = None
    is_cvv_valid: Optional[bool] = None
    is_cardholder_name_valid: Optional[bool] = None

    @property
    def length(self) -> int:
        return len(self.sanitized_number)

    @property
    def is_egyptian(self) -> bool:
        return self.issuer is not None and self.issuer.is_egyptian

    @property
    def issuer_name(self) -> str:
        return self.issuer.name.english if self.issuer else ""

    @property
    def issuer_name_arabic(self) -> str:
        return self.issuer.name.arabic if self.issuer else ""

    @property
    def country_code(self) -> str:
        return self.issuer.country_code if self.issuer else ""

    @property
    def card_type_arabic(self) -> str:
        return CARD_TYPE_NAMES[self.card_type].arabic

    @property
    def card_category_arabic(self) -> str:
        return CARD_CATEGORY_NAMES[self.card_category].arabic

    def message(self, language: str = "en") -> str:
        return self.message_arabic if language.lower().startswith("ar") else self.message_english

    def notes(self, language: str = "en") -> List[str]:
        return self.notes_arabic if language.lower().startswith("ar") else self.notes_english

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization. Never includes the full number."""
        data: Dict[str, Any] = {
            "is_valid": self.is_valid,
            "failure_reason": self.failure_reason.value,
            "message": self.message_english,
            "network": self.network,
            "iin": self.iin,
            "last_four": self.last_four,
            "length": self.length,
            "cvv_length": self.cvv_length,
            "valid_lengths": list(self.valid_lengths),
            "masked_number": self.masked_number,
            "card_type": self.card_type,
            "card_category": self.card_category,
            "is_egyptian": self.is_egyptian,
            "supports_tokenization": self.supports_tokenization,
            "notes": list(self.notes_english),
        }
        if self.issuer is not None:
            data["issuer"] = self.issuer.to_dict()
        if self.expiry_input is not None:
            data["is_expiry_valid"] = self.is_expiry_valid
            data["is_expired"] = self.is_expired
        if self.is_cvv_valid is not None:
            data["is_cvv_valid"] = self.is_cvv_valid
        if self.is_cardholder_name_valid is not None:
            data["is_cardholder_name_valid"] = self.is_cardholder_name_valid
        if self.luhn_trace is not None:
            data["luhn_trace"] = self.luhn_trace.to_dict()
        return data


def _in_range(number: str, start: str, end: str) -> bool:
    """Compare the first len(start) digits of ``number`` against [start, end]."""
    if len(number) < len(start):
        return False
    if start == end:
        return number.startswith(start)

    prefix = int(number[:len(start)])
    # end is cut or padded with 9s to the width of start
    end = end[:len(start)] if len(end) >= len(start) else end.ljust(len(start), "9")
    return int(start) <= prefix <= int(end)


def find_issuer_by_iin(number: CardInput) -> Optional[IssuerInfo]:
    """
    Look up the Egyptian issuer for a PAN or an IIN.

    Spaces, dashes and Arabic-Indic digits are accepted. Returns None when
    no issuer's IIN prefixes the number.
    """
    digits = sanitize_number(to_western_digits("" if number is None else str(number)))
    if not is_digit_string(digits):
        return None
    for issuer in EGYPTIAN_ISSUERS:
        if issuer.matches(digits):
            return issuer
    return None


def detect_network(number: str) -> Tuple[str, Tuple[int, ...], int]:
    """
    Find the card network for a digit string.

    Known Egyptian issuers are matched first, then the global IIN ranges.

    Returns:
        (network name, allowed PAN lengths, CVV length). Unknown networks
        give ``("Unknown", (13..19), 3)``.
    """
    issuer = find_issuer_by_iin(number)
    if issuer is not None:
        return issuer.network, issuer.valid_lengths, issuer.cvv_length

    for start, end, network, lengths, cvv_length in CARD_NETWORK_RANGES:
        if _in_range(number, start, end):
            return network, lengths, cvv_length
    return UNKNOWN_NETWORK, UNKNOWN_NETWORK_LENGTHS, 3


def format_card_number(number: str) -> str:
    """Group digits for display: 4-6-5 (15), 4-6-4 (14), 4-5-4 (13), else fours."""
    length = len(number)
    if length in (14, 15):
        return f"{number[:4]} {number[4:10]} {number[10:]}"
    if length == 13:
        return f"{number[:4]} {number[4:9]} {number[9:]}"
    return " ".join(number[i:i + 4] for i in range(0, length, 4))


def mask_card_number(number: str, mask_char: str = DEFAULT_MASK_CHAR) -> str:
    """Keep the first four and last four digits, mask the rest, then group."""
    if len(number) <= 4:
        return number
    visible = min(4, len(number) - 4)
    masked = number[:visible] + mask_char * (len(number) - visible - 4) + number[-4:]
    return format_card_number(masked)


def _build_notes(info: BankCardInfo) -> None:
    if info.network == "Meeza":
        info.notes_english.append(
            "Meeza is Egypt's national payment card network, launched by the Central Bank of Egypt (CBE)."
        )
        info.notes_arabic.append("ميزة هي شبكة الدفع الوطنية المصرية، أطلقها البنك المركزي المصري.")

    if info.is_egyptian:
        info.notes_english.append(
            "This card was issued by an Egyptian bank licensed and regulated by the Central Bank of Egypt (CBE)."
        )
        info.notes_arabic.append("هذه البطاقة صادرة من بنك مصري مُرخَّص وخاضع لإشراف البنك المركزي المصري.")

    if info.supports_tokenization:
        info.notes_english.append(
            "This issuer supports card Tokenization per CBE regulations (2024-2025) "
            "and/or major network token schemes."
        )
        info.notes_arabic.append(
            "تدعم جهة الإصدار تقنية الترميز (Tokenization) وفق لوائح البنك المركزي المصري 2024-2025 "
            "و/أو مخططات الرمز المميز للشبكات الكبرى."
        )

    if info.card_type == "Prepaid":
        info.notes_english.append(
            "Prepaid cards may not be accepted at all merchants or for recurring transactions."
        )
        info.notes_arabic.append("البطاقات مدفوعة مسبقاً قد لا تُقبَل لدى جميع التجار أو في المعاملات المتكررة.")

    if info.network == "American Express":
        info.notes_english.append(
            "American Express cards use a 4-digit CID (Card Identification Number) "
            "instead of the standard 3-digit CVV."
        )
        info.notes_arabic.append(
            "بطاقات أمريكان إكسبريس تستخدم كود CID مكوّن من 4 أرقام بدلاً من CVV المعتاد المكوّن من 3 أرقام."
        )


def parse_expiry(expiry: str) -> Optional[Tuple[int, int]]:
    """
    Parse MM/YY, MM/YYYY, MMYY, MMYYYY (``/``, ``-`` or spaces between).

    Returns:
        (month, year) with a four-digit year in 2000-2099, or None when the
        value is not a valid expiry date.
    """
    clean = _EXPIRY_SEPARATORS.sub("", to_western_digits(expiry))
    if len(clean) not in (4, 6) or not is_digit_string(clean):
        return None

    month = int(clean[:2])
    year = int(clean[2:])
    if len(clean) == 4:
        year += 2000

    if not 1 <= month <= 12 or not EXPIRY_MIN_YEAR <= year <= EXPIRY_MAX_YEAR:
        return None
    return month, year


class BankCardAnalyzer:
    """
    Validates and enriches card numbers.

    Args:
        include_luhn_trace: Attach the per-digit Luhn trace to valid results
        mask_char: Character used to hide the middle digits
    """

    def __init__(
        self,
        include_luhn_trace: bool = False,
        mask_char: str = DEFAULT_MASK_CHAR,
    ):
        if len(mask_char) != 1:
            raise ValueError(f"mask_char must be a single character, got {mask_char!r}")
        self.include_luhn_trace = include_luhn_trace
        self.mask_char = mask_char
        self._logger = ContextLogger(__name__, "bank_card", mask_char=mask_char)

    @classmethod
    def from_settings(cls, settings=None) -> "BankCardAnalyzer":
        """Build an analyser from ``Settings.bank_card`` (defaults to ``get_settings()``)."""
        if settings is None:
            from .config import get_settings
            settings = get_settings()

        return cls(
            include_luhn_trace=settings.bank_card.include_luhn_trace,
            mask_char=settings.bank_card.mask_char,
        )

    def analyze(self, card_number: CardInput) -> BankCardInfo:
        """Analyse one card number. Never raises for malformed input."""
        info = self._analyze(card_number)
        self._log_result(info)
        return info

    def analyze_full(
        self,
        card_number: CardInput,
        expiry: Optional[str] = None,
        cvv: Optional[str] = None,
        cardholder_name: Optional[str] = None,
        today: Optional[date] = None,
    ) -> BankCardInfo:
        """
        Analyse a card number together with the optional card fields.

        Each field is only checked when given. A card that passes the guard
        chain is still invalid when its expiry cannot be parsed or has
        passed, when the CVV is not ``cvv_length`` digits, or when the
        cardholder name is not 2-26 Latin letters, spaces, hyphens or
        apostrophes. The first such failure becomes ``failure_reason``.

        Args:
            card_number: The PAN
            expiry: MM/YY or MM/YYYY, with ``/``, ``-``, spaces or nothing between
            cvv: CVV / CVC / CID digits
            cardholder_name: Name as printed on the card
            today: Date expiry is judged against (defaults to today)
        """
        info = self._analyze(card_number)
        failures: List[Tuple[CardFailureReason, str, str]] = []

        if expiry is not None:
            info.expiry_input = expiry
            parsed = parse_expiry(expiry)
            info.is_expiry_valid = parsed is not None
            if parsed is None:
                failures.append((
                    CardFailureReason.INVALID_EXPIRY_DATE,
                    "Expiry date must be MM/YY or MM/YYYY with a month from 01 to 12.",
                    "تاريخ الانتهاء يجب أن يكون بالصيغة MM/YY أو MM/YYYY بشهر من 01 إلى 12.",
                ))
            else:
                info.expiry_month, info.expiry_year = parsed
                now = today or date.today()
                # Valid through the last day of the expiry month
                info.is_expired = (info.expiry_year, info.expiry_month) < (now.year, now.month)
                if info.is_expired:
                    failures.append((
                        CardFailureReason.CARD_EXPIRED,
                        f"Card expired in {info.expiry_month:02d}/{info.expiry_year}.",
                        f"البطاقة منتهية الصلاحية منذ {info.expiry_month:02d}/{info.expiry_year}.",
                    ))

        if cvv is not None:
            clean_cvv = to_western_digits(str(cvv)).strip()
            info.is_cvv_valid = len(clean_cvv) == info.cvv_length and is_digit_string(clean_cvv)
            if not info.is_cvv_valid:
                failures.append((
                    CardFailureReason.INVALID_CVV,
                    f"CVV must be {info.cvv_length} digits for {info.network} cards.",
                    f"رمز CVV يجب أن يتكون من {info.cvv_length} أرقام لبطاقات {info.network_arabic}.",
                ))

        if cardholder_name is not None:
            name = cardholder_name.strip()
            info.is_cardholder_name_valid = (
                CARDHOLDER_NAME_MIN_LENGTH <= len(name) <= CARDHOLDER_NAME_MAX_LENGTH
                and _CARDHOLDER_NAME.fullmatch(name) is not None
            )
            if not info.is_cardholder_name_valid:
                failures.append((
                    CardFailureReason.INVALID_CARDHOLDER_NAME,
                    "Cardholder name must be 2-26 Latin letters, spaces, hyphens or apostrophes.",
                    "اسم حامل البطاقة يجب أن يتكون من 2 إلى 26 حرفاً لاتينياً أو مسافات أو شرطات أو فواصل عليا.",
                ))

        if info.is_valid and failures:
            reason, english, arabic = failures[0]
            info.is_valid = False
            info.failure_reason = reason
            info.message_english = english
            info.message_arabic = arabic

        self._log_result(info)
        return info

    def _analyze(self, card_number: CardInput) -> BankCardInfo:
        raw = "" if card_number is None else str(card_number)
        sanitized = sanitize_number(to_western_digits(raw))
        info = BankCardInfo(raw_input=raw, sanitized_number=sanitized)

        if not sanitized:
            return self._fail(
                info,
                CardFailureReason.NULL_OR_EMPTY,
                "Card number is null or empty.",
                "رقم البطاقة فارغ أو غير مُدخَل.",
            )

        if not is_digit_string(sanitized):
            return self._fail(
                info,
                CardFailureReason.CONTAINS_NON_DIGITS,
                "Card number must contain digits only (spaces and dashes are allowed).",
                "رقم البطاقة يجب أن يحتوي على أرقام فقط (المسافات والشرطات مسموح بها).",
            )

        info.check_digit = int(sanitized[-1])
        info.last_four = sanitized[-4:]
        info.iin = sanitized[:6]
        info.extended_iin = sanitized[:8] if len(sanitized) >= 8 else info.iin

        network, lengths, cvv_length = detect_network(sanitized)
        info.network = network
        info.network_arabic = CARD_NETWORK_NAMES[network].arabic
        info.valid_lengths = lengths
        info.cvv_length = cvv_length

        info.issuer = find_issuer_by_iin(sanitized)
        if info.issuer is not None:
            info.card_type = info.issuer.card_type
            info.card_category = info.issuer.card_category
            info.supports_tokenization = info.issuer.supports_tokenization
        else:
            info.supports_tokenization = network in TOKENIZING_NETWORKS

        info.is_length_valid = len(sanitized) in lengths
        if not info.is_length_valid:
            expected = ", ".join(str(n) for n in lengths)
            return self._fail(
                info,
                CardFailureReason.INVALID_LENGTH,
                f"Invalid PAN length {len(sanitized)}. Expected: {expected}.",
                f"طول الـ PAN {len(sanitized)} غير صحيح. المتوقع: {expected}.",
            )

        info.is_luhn_valid = luhn_validate(sanitized)
        if not info.is_luhn_valid:
            return self._fail(
                info,
                CardFailureReason.LUHN_CHECK_FAILED,
                "PAN failed the Luhn (Modulus-10) check digit verification.",
                "فشل الـ PAN في اختبار خوارزمية Luhn (Modulus-10) لرقم التحقق.",
            )

        info.is_valid = True
        info.message_english = f"Valid {network} card."
        info.message_arabic = f"بطاقة {info.network_arabic} صالحة."
        info.formatted_number = format_card_number(sanitized)
        info.masked_number = mask_card_number(sanitized, self.mask_char)
        if self.include_luhn_trace:
            info.luhn_trace = luhn_trace(sanitized)
        _build_notes(info)
        return info

    def _fail(
        self,
        info: BankCardInfo,
        reason: CardFailureReason,
        english: str,
        arabic: str,
    ) -> BankCardInfo:
        info.is_valid = False
        info.failure_reason = reason
        info.message_english = english
        info.message_arabic = arabic
        return info

    def _log_result(self, info: BankCardInfo) -> None:
        if info.is_valid:
            self._logger.debug(
                "Card analysed",
                masked_number=info.masked_number,
                network=info.network,
                egyptian=info.is_egyptian,
            )
        else:
            self._logger.debug(
                "Card rejected",
                reason=info.failure_reason.value,
                network=info.network,
                last_four=info.last_four or None,
            )


def analyze_card(card_number: CardInput, include_luhn_trace: bool = False) -> BankCardInfo:
    """Analyse one card number with default options."""
    return BankCardAnalyzer(include_luhn_trace=include_luhn_trace).analyze(card_number)


def analyze_card_full(
    card_number: CardInput,
    expiry: Optional[str] = None,
    cvv: Optional[str] = None,
    cardholder_name: Optional[str] = None,
    today: Optional[date] = None,
) -> BankCardInfo:
    """Run ``BankCardAnalyzer.analyze_full`` with default options."""
    return BankCardAnalyzer().analyze_full(
        card_number, expiry=expiry, cvv=cvv, cardholder_name=cardholder_name, today=today,
    )


def is_egyptian_card(card_number: CardInput) -> bool:
    """True when the number's IIN belongs to an Egyptian issuer."""
    issuer = find_issuer_by_iin(card_number)
    return issuer is not None and issuer.is_egyptian
