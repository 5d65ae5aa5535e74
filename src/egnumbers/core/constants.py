"""
Static lookup tables for egnumbers.

All tables are built once at import and treated as read-only. Import from
this module rather than redefining values.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from .types import AgeGroup, Generation, IssuerInfo, LocalizedName, ZodiacSign

__all__ = [
    # Calendar
    "CENTURIES",
    "UNKNOWN_NAME",
    "MONTH_NAMES",
    "DAY_NAMES",
    # National ID
    "NATIONAL_ID_LENGTH",
    "CENTURY_DIGITS",
    "GOVERNORATES",
    "UNKNOWN_GOVERNORATE",
    # Classification tables
    "GENERATIONS",
    "GENERATION_FALLBACK_START_YEAR",
    "ZODIAC_SIGNS",
    "ZODIAC_WRAPAROUND_SIGN",
    "INVALID_AGE_GROUP",
    "AGE_GROUPS",
    "AGE_CATEGORIES",
    # Bank cards
    "DEFAULT_TEST_CARD_LENGTH",
    "UNKNOWN_NETWORK_LENGTHS",
    "CARD_NETWORK_RANGES",
    "UNKNOWN_NETWORK",
    "CARD_NETWORK_NAMES",
    "EGYPTIAN_ISSUERS",
    "TOKENIZING_NETWORKS",
    "UNKNOWN_CARD_KIND",
    "CARD_TYPE_NAMES",
    "CARD_CATEGORY_NAMES",
    "CARDHOLDER_NAME_MIN_LENGTH",
    "CARDHOLDER_NAME_MAX_LENGTH",
    "EXPIRY_MIN_YEAR",
    "EXPIRY_MAX_YEAR",
    # Phone numbers
    "PHONE_NUMBER_LENGTH",
    "PHONE_COUNTRY_CODE",
    "MOBILE_NETWORK_DIGITS",
    "UNKNOWN_CARRIER",
    "CARRIER_PREFIXES",
    "CARRIER_NAMES",
    "SERVICE_TYPE_NAMES",
]

# --- CALENDAR ---

# Keyed by the first year of the century
CENTURIES: Mapping[int, LocalizedName] = MappingProxyType({
    1800: LocalizedName("التاسع عشر", "Nineteenth"),
    1900: LocalizedName("العشرون", "Twentieth"),
    2000: LocalizedName("الحادي والعشرون", "Twenty-first"),
})

UNKNOWN_NAME = LocalizedName("غير معروف", "Unknown")

MONTH_NAMES: Mapping[int, LocalizedName] = MappingProxyType({
    1: LocalizedName("يناير", "January"),
    2: LocalizedName("فبراير", "February"),
    3: LocalizedName("مارس", "March"),
    4: LocalizedName("أبريل", "April"),
    5: LocalizedName("مايو", "May"),
    6: LocalizedName("يونيو", "June"),
    7: LocalizedName("يوليو", "July"),
    8: LocalizedName("أغسطس", "August"),
    9: LocalizedName("سبتمبر", "September"),
    10: LocalizedName("أكتوبر", "October"),
    11: LocalizedName("نوفمبر", "November"),
    12: LocalizedName("ديسمبر", "December"),
})

# Keyed by date.weekday() (Monday == 0)
DAY_NAMES: Mapping[int, LocalizedName] = MappingProxyType({
    0: LocalizedName("الاثنين", "Monday"),
    1: LocalizedName("الثلاثاء", "Tuesday"),
    2: LocalizedName("الأربعاء", "Wednesday"),
    3: LocalizedName("الخميس", "Thursday"),
    4: LocalizedName("الجمعة", "Friday"),
    5: LocalizedName("السبت", "Saturday"),
    6: LocalizedName("الأحد", "Sunday"),
})

# --- NATIONAL ID ---

NATIONAL_ID_LENGTH = 14

CENTURY_DIGITS: Mapping[str, int] = MappingProxyType({
    "1": 1800,
    "2": 1900,
    "3": 2000,
})

GOVERNORATES: Mapping[str, LocalizedName] = MappingProxyType({
    "01": LocalizedName("القاهرة", "Cairo"),
    "02": LocalizedName("الإسكندرية", "Alexandria"),
    "03": LocalizedName("بورسعيد", "Port Said"),
    "04": LocalizedName("السويس", "Suez"),
    "11": LocalizedName("دمياط", "Damietta"),
    "12": LocalizedName("الدقهلية", "Dakahlia"),
    "13": LocalizedName("الشرقية", "Sharqia"),
    "14": LocalizedName("القليوبية", "Qalyubia"),
    "15": LocalizedName("كفر الشيخ", "Kafr El Sheikh"),
    "16": LocalizedName("الغربية", "Gharbia"),
    "17": LocalizedName("المنوفية", "Monufia"),
    "18": LocalizedName("البحيرة", "Beheira"),
    "19": LocalizedName("الإسماعيلية", "Ismailia"),
    "21": LocalizedName("الجيزة", "Giza"),
    "22": LocalizedName("بني سويف", "Beni Suef"),
    "23": LocalizedName("الفيوم", "Faiyum"),
    "24": LocalizedName("المنيا", "Minya"),
    "25": LocalizedName("أسيوط", "Assiut"),
    "26": LocalizedName("سوهاج", "Sohag"),
    "27": LocalizedName("قنا", "Qena"),
    "28": LocalizedName("أسوان", "Aswan"),
    "29": LocalizedName("الأقصر", "Luxor"),
    "31": LocalizedName("البحر الأحمر", "Red Sea"),
    "32": LocalizedName("الوادي الجديد", "New Valley"),
    "33": LocalizedName("مطروح", "Matrouh"),
    "34": LocalizedName("شمال سيناء", "North Sinai"),
    "35": LocalizedName("جنوب سيناء", "South Sinai"),
    "88": LocalizedName("خارج مصر", "Outside Egypt"),
})

UNKNOWN_GOVERNORATE = LocalizedName("غير معروف", "Unknown governorate")

# --- GENERATIONS ---

# Contiguous, ascending, inclusive on both ends. Years past the last entry
# fall back to the last entry.
GENERATIONS: Tuple[Generation, ...] = (
    Generation("Lost Generation", "الجيل الضائع", 1883, 1900),
    Generation("Greatest Generation", "الجيل الأعظم", 1901, 1927),
    Generation("Silent Generation", "الجيل الصامت", 1928, 1945),
    Generation("Baby Boomers", "جيل الطفرة السكانية", 1946, 1964),
    Generation("Generation X", "الجيل إكس", 1965, 1980),
    Generation("Millennials", "جيل الألفية", 1981, 1996),
    Generation("Generation Z", "جيل زد", 1997, 2012),
    Generation("Generation Alpha", "جيل ألفا", 2013, 2025),
)

# Start of the range returned for an unrecognised generation name
GENERATION_FALLBACK_START_YEAR = 1900

# --- ZODIAC ---

ZODIAC_SIGNS: Tuple[ZodiacSign, ...] = (
    ZodiacSign("Aries", "الحمل", "♈", 3, 21, 4, 19),
    ZodiacSign("Taurus", "الثور", "♉", 4, 20, 5, 20),
    ZodiacSign("Gemini", "الجوزاء", "♊", 5, 21, 6, 20),
    ZodiacSign("Cancer", "السرطان", "♋", 6, 21, 7, 22),
    ZodiacSign("Leo", "الأسد", "♌", 7, 23, 8, 22),
    ZodiacSign("Virgo", "العذراء", "♍", 8, 23, 9, 22),
    ZodiacSign("Libra", "الميزان", "♎", 9, 23, 10, 22),
    ZodiacSign("Scorpio", "العقرب", "♏", 10, 23, 11, 21),
    ZodiacSign("Sagittarius", "القوس", "♐", 11, 22, 12, 21),
    ZodiacSign("Capricorn", "الجدي", "♑", 12, 22, 1, 19),
    ZodiacSign("Aquarius", "الدلو", "♒", 1, 20, 2, 18),
    ZodiacSign("Pisces", "الحوت", "♓", 2, 19, 3, 20),
)

# The sign spanning the year boundary; returned when nothing else matches
ZODIAC_WRAPAROUND_SIGN: ZodiacSign = next(s for s in ZODIAC_SIGNS if s.english == "Capricorn")

# --- AGE GROUPS ---

INVALID_AGE_GROUP = AgeGroup("Invalid", "غير صالح", None, 0)

# Ascending, half-open [min_age, max_age); the last bucket is open-ended
AGE_GROUPS: Tuple[AgeGroup, ...] = (
    AgeGroup("Infant", "رضيع", 0, 1),
    AgeGroup("Toddler", "طفل صغير", 1, 3),
    AgeGroup("Child", "طفل", 3, 13),
    AgeGroup("Teenager", "مراهق", 13, 18),
    AgeGroup("Young Adult", "شاب", 18, 30),
    AgeGroup("Adult", "بالغ", 30, 60),
    AgeGroup("Senior", "مسن", 60, None),
)

# English label -> (min, max) for reporting; the senior bucket is capped at 120
AGE_CATEGORIES: Mapping[str, Tuple[int, int]] = MappingProxyType({
    group.english: (group.min_age, group.max_age if group.max_age is not None else 120)
    for group in AGE_GROUPS
})

# --- BANK CARDS ---

DEFAULT_TEST_CARD_LENGTH = 16

UNKNOWN_NETWORK_LENGTHS: Tuple[int, ...] = (13, 14, 15, 16, 17, 18, 19)

# (start, end, network, valid PAN lengths, CVV length), scanned in order.
# start/end are compared as numbers over the first len(start) digits.
# Discover's 622126-622925 must precede UnionPay's 62, and Meeza's
# 507800-507809 must precede Maestro's 50.
CARD_NETWORK_RANGES: Tuple[Tuple[str, str, str, Tuple[int, ...], int], ...] = (
    ("4", "4", "Visa", (13, 16, 19), 3),
    ("51", "55", "Mastercard", (16,), 3),
    ("2221", "2720", "Mastercard", (16,), 3),
    ("34", "34", "American Express", (15,), 4),
    ("37", "37", "American Express", (15,), 4),
    ("6011", "6011", "Discover", (16, 19), 3),
    ("622126", "622925", "Discover", (16, 19), 3),
    ("644", "649", "Discover", (16, 19), 3),
    ("65", "65", "Discover", (16, 19), 3),
    ("507800", "507809", "Meeza", (16,), 3),
    ("62", "62", "UnionPay", (16, 17, 18, 19), 3),
    ("3528", "3589", "JCB", (16, 17, 18, 19), 3),
    ("300", "305", "Diners Club", (14, 16, 17, 18, 19), 3),
    ("36", "36", "Diners Club", (14, 16, 17, 18, 19), 3),
    ("38", "39", "Diners Club", (14, 16, 17, 18, 19), 3),
    ("2200", "2204", "MIR", (16, 17, 18, 19), 3),
    ("50", "50", "Maestro", tuple(range(12, 20)), 3),
    ("56", "58", "Maestro", tuple(range(12, 20)), 3),
    ("6304", "6304", "Maestro", tuple(range(12, 20)), 3),
    ("6759", "6759", "Maestro", tuple(range(12, 20)), 3),
)

UNKNOWN_NETWORK = "Unknown"

CARD_NETWORK_NAMES: Mapping[str, LocalizedName] = MappingProxyType({
    "Visa": LocalizedName("فيزا", "Visa"),
    "Mastercard": LocalizedName("ماستر كارد", "Mastercard"),
    "American Express": LocalizedName("أمريكان إكسبريس", "American Express"),
    "Discover": LocalizedName("ديسكوفر", "Discover"),
    "Meeza": LocalizedName("ميزة", "Meeza"),
    "UnionPay": LocalizedName("يونيون باي", "UnionPay"),
    "JCB": LocalizedName("JCB", "JCB"),
    "Diners Club": LocalizedName("دايرز كلوب", "Diners Club"),
    "MIR": LocalizedName("مير", "MIR"),
    "Maestro": LocalizedName("مايسترو", "Maestro"),
    UNKNOWN_NETWORK: LocalizedName("غير معروف", "Unknown"),
})

# Scanned before CARD_NETWORK_RANGES; the first issuer whose IIN prefixes
# the PAN wins. Country, currency and region are Egypt for every row.
EGYPTIAN_ISSUERS: Tuple[IssuerInfo, ...] = (
    IssuerInfo(
        "507803", LocalizedName("البنك الأهلي المصري - ميزة خصم مباشر", "National Bank of Egypt (NBE) - Meeza Debit"),
        "Meeza", "Debit", "Classic", "https://www.nbe.com.eg", "19623",
    ),
    IssuerInfo(
        "428541", LocalizedName("البنك الأهلي المصري - فيزا كلاسيك خصم مباشر", "National Bank of Egypt (NBE) - Visa Classic Debit"),
        "Visa", "Debit", "Classic", "https://www.nbe.com.eg", "19623",
    ),
    IssuerInfo(
        "404906", LocalizedName("البنك الأهلي المصري - فيزا ذهبية ائتمان", "National Bank of Egypt (NBE) - Visa Gold Credit"),
        "Visa", "Credit", "Gold", "https://www.nbe.com.eg", "19623",
    ),
    IssuerInfo(
        "512345", LocalizedName("البنك الأهلي المصري - ماستركارد كلاسيك خصم مباشر", "National Bank of Egypt (NBE) - Mastercard Classic Debit"),
        "Mastercard", "Debit", "Classic", "https://www.nbe.com.eg", "19623",
    ),
    IssuerInfo(
        "524567", LocalizedName("البنك الأهلي المصري - ماستركارد بلاتينيوم ائتمان", "National Bank of Egypt (NBE) - Mastercard Platinum Credit"),
        "Mastercard", "Credit", "Platinum", "https://www.nbe.com.eg", "19623",
    ),
    IssuerInfo(
        "507800", LocalizedName("بنك مصر - ميزة خصم مباشر", "Banque Misr - Meeza Debit"),
        "Meeza", "Debit", "Classic", "https://www.banquemisr.com", "19888",
    ),
    IssuerInfo(
        "489737", LocalizedName("بنك مصر - فيزا كلاسيك خصم مباشر", "Banque Misr - Visa Classic Debit"),
        "Visa", "Debit", "Classic", "https://www.banquemisr.com", "19888",
    ),
    IssuerInfo(
        "522081", LocalizedName("بنك مصر - ماستركارد ورلد ائتمان", "Banque Misr - Mastercard World Credit"),
        "Mastercard", "Credit", "World", "https://www.banquemisr.com", "19888",
    ),
    IssuerInfo(
        "530123", LocalizedName("بنك مصر - ماستركارد تيتانيوم ائتمان", "Banque Misr - Mastercard Titanium Credit"),
        "Mastercard", "Credit", "Titanium", "https://www.banquemisr.com", "19888",
    ),
    IssuerInfo(
        "507806", LocalizedName("بنك القاهرة - ميزة خصم مباشر", "Banque du Caire - Meeza Debit"),
        "Meeza", "Debit", "Classic", "https://www.bcbe.com", "19819",
    ),
    IssuerInfo(
        "529948", LocalizedName("بنك القاهرة - ماستركارد كلاسيك خصم مباشر", "Banque du Caire - Mastercard Classic Debit"),
        "Mastercard", "Debit", "Classic", "https://www.bcbe.com", "19819",
    ),
    IssuerInfo(
        "413579", LocalizedName("بنك القاهرة - فيزا ذهبية ائتمان", "Banque du Caire - Visa Gold Credit"),
        "Visa", "Credit", "Gold", "https://www.bcbe.com", "19819",
    ),
    IssuerInfo(
        "507804", LocalizedName("البنك التجاري الدولي - ميزة خصم مباشر", "Commercial International Bank (CIB) - Meeza Debit"),
        "Meeza", "Debit", "Classic", "https://www.cibeg.com", "19666",
    ),
    IssuerInfo(
        "455676", LocalizedName("البنك التجاري الدولي - فيزا بلاتينيوم ائتمان", "Commercial International Bank (CIB) - Visa Platinum Credit"),
        "Visa", "Credit", "Platinum", "https://www.cibeg.com", "19666",
    ),
    IssuerInfo(
        "557368", LocalizedName("البنك التجاري الدولي - ماستركارد ذهبية ائتمان", "Commercial International Bank (CIB) - Mastercard Gold Credit"),
        "Mastercard", "Credit", "Gold", "https://www.cibeg.com", "19666",
    ),
    IssuerInfo(
        "540123", LocalizedName("البنك التجاري الدولي - ماستركارد ورلد إليت ائتمان", "Commercial International Bank (CIB) - Mastercard World Elite Credit"),
        "Mastercard", "Credit", "World Elite", "https://www.cibeg.com", "19666",
    ),
    IssuerInfo(
        "507805", LocalizedName("بنك قطر الوطني الأهلي - ميزة خصم مباشر", "QNB Al Ahli - Meeza Debit"),
        "Meeza", "Debit", "Classic", "https://www.qnbalahli.com", "19700",
    ),
    IssuerInfo(
        "431493", LocalizedName("بنك قطر الوطني الأهلي - فيزا إنفينيت ائتمان", "QNB Al Ahli - Visa Infinite Credit"),
        "Visa", "Credit", "Infinite", "https://www.qnbalahli.com", "19700",
    ),
    IssuerInfo(
        "525678", LocalizedName("بنك قطر الوطني الأهلي - ماستركارد بلاتينيوم ائتمان", "QNB Al Ahli - Mastercard Platinum Credit"),
        "Mastercard", "Credit", "Platinum", "https://www.qnbalahli.com", "19700",
    ),
    IssuerInfo(
        "507807", LocalizedName("البنك العربي الأفريقي الدولي - ميزة خصم مباشر", "Arab African International Bank (AAIB) - Meeza Debit"),
        "Meeza", "Debit", "Classic", "https://www.aaib.com", "16333",
    ),
    IssuerInfo(
        "552481", LocalizedName("البنك العربي الأفريقي الدولي - ماستركارد بلاتينيوم ائتمان", "Arab African International Bank (AAIB) - Mastercard Platinum Credit"),
        "Mastercard", "Credit", "Platinum", "https://www.aaib.com", "16333",
    ),
    IssuerInfo(
        "446789", LocalizedName("البنك العربي الأفريقي الدولي - فيزا سيجنتشر ائتمان", "Arab African International Bank (AAIB) - Visa Signature Credit"),
        "Visa", "Credit", "Signature", "https://www.aaib.com", "16333",
    ),
    IssuerInfo(
        "507801", LocalizedName("بنك الإسكندرية - ميزة خصم مباشر", "Bank of Alexandria - Meeza Debit"),
        "Meeza", "Debit", "Classic", "https://www.alexbank.com", "19033",
    ),
    IssuerInfo(
        "410441", LocalizedName("بنك الإسكندرية - فيزا كلاسيك خصم مباشر", "Bank of Alexandria - Visa Classic Debit"),
        "Visa", "Debit", "Classic", "https://www.alexbank.com", "19033",
    ),
    IssuerInfo(
        "531741", LocalizedName("بنك الإسكندرية - ماستركارد ستاندرد خصم مباشر", "Bank of Alexandria - Mastercard Standard Debit"),
        "Mastercard", "Debit", "Standard", "https://www.alexbank.com", "19033",
    ),
    IssuerInfo(
        "507802", LocalizedName("كريدي أجريكول مصر - ميزة خصم مباشر", "Crédit Agricole Egypt - Meeza Debit"),
        "Meeza", "Debit", "Classic", "https://www.ca-egypt.com", "19191",
    ),
    IssuerInfo(
        "412851", LocalizedName("كريدي أجريكول مصر - فيزا بلاتينيوم ائتمان", "Crédit Agricole Egypt - Visa Platinum Credit"),
        "Visa", "Credit", "Platinum", "https://www.ca-egypt.com", "19191",
    ),
    IssuerInfo(
        "545502", LocalizedName("كريدي أجريكول مصر - ماستركارد ذهبية ائتمان", "Crédit Agricole Egypt - Mastercard Gold Credit"),
        "Mastercard", "Credit", "Gold", "https://www.ca-egypt.com", "19191",
    ),
    IssuerInfo(
        "447710", LocalizedName("HSBC مصر - فيزا كلاسيك ائتمان", "HSBC Egypt - Visa Classic Credit"),
        "Visa", "Credit", "Classic", "https://www.hsbc.com.eg", "19007",
    ),
    IssuerInfo(
        "549876", LocalizedName("HSBC مصر - ماستركارد ورلد ائتمان", "HSBC Egypt - Mastercard World Credit"),
        "Mastercard", "Credit", "World", "https://www.hsbc.com.eg", "19007",
    ),
    IssuerInfo(
        "424632", LocalizedName("البنك العربي مصر - فيزا كلاسيك خصم مباشر", "Arab Bank Egypt - Visa Classic Debit"),
        "Visa", "Debit", "Classic", "https://www.arabbank.com.eg", "16911",
    ),
    IssuerInfo(
        "537890", LocalizedName("البنك العربي مصر - ماستركارد ذهبية ائتمان", "Arab Bank Egypt - Mastercard Gold Credit"),
        "Mastercard", "Credit", "Gold", "https://www.arabbank.com.eg", "16911",
    ),
    IssuerInfo(
        "456789", LocalizedName("البنك المصري الخليجي - فيزا كلاسيك خصم مباشر", "Egyptian Gulf Bank (EGB) - Visa Classic Debit"),
        "Visa", "Debit", "Classic", "https://www.egb.com.eg", "19595",
    ),
    IssuerInfo(
        "532456", LocalizedName("البنك المصري الخليجي - ماستركارد بلاتينيوم ائتمان", "Egyptian Gulf Bank (EGB) - Mastercard Platinum Credit"),
        "Mastercard", "Credit", "Platinum", "https://www.egb.com.eg", "19595",
    ),
    IssuerInfo(
        "438820", LocalizedName("المصرف المتحد - فيزا كلاسيك خصم مباشر", "United Bank - Visa Classic Debit"),
        "Visa", "Debit", "Classic", "https://www.united-bank.com.eg", "16222",
    ),
    IssuerInfo(
        "541234", LocalizedName("المصرف المتحد - ماستركارد ذهبية ائتمان", "United Bank - Mastercard Gold Credit"),
        "Mastercard", "Credit", "Gold", "https://www.united-bank.com.eg", "16222",
    ),
    IssuerInfo(
        "462210", LocalizedName("بنك قناة السويس - فيزا كلاسيك خصم مباشر", "Suez Canal Bank - Visa Classic Debit"),
        "Visa", "Debit", "Classic", "https://www.scbank.com.eg", "16247", supports_tokenization=False,
    ),
    IssuerInfo(
        "538901", LocalizedName("بنك قناة السويس - ماستركارد ستاندرد خصم مباشر", "Suez Canal Bank - Mastercard Standard Debit"),
        "Mastercard", "Debit", "Standard", "https://www.scbank.com.eg", "16247", supports_tokenization=False,
    ),
    IssuerInfo(
        "533254", LocalizedName("بنك الإسكان والتعمير - ماستركارد كلاسيك خصم مباشر", "Housing and Development Bank (HDB) - Mastercard Classic Debit"),
        "Mastercard", "Debit", "Classic", "https://www.hdb.com.eg", "19955", supports_tokenization=False,
    ),
    IssuerInfo(
        "408765", LocalizedName("بنك الإسكان والتعمير - فيزا كلاسيك خصم مباشر", "Housing and Development Bank (HDB) - Visa Classic Debit"),
        "Visa", "Debit", "Classic", "https://www.hdb.com.eg", "19955", supports_tokenization=False,
    ),
    IssuerInfo(
        "507809", LocalizedName("البنك الأهلي المتحد مصر - ميزة خصم مباشر", "Al Ahli United Bank Egypt (AUB) - Meeza Debit"),
        "Meeza", "Debit", "Classic", "https://www.aubegypt.com", "19330",
    ),
    IssuerInfo(
        "544606", LocalizedName("البنك الأهلي المتحد مصر - ماستركارد كلاسيك خصم مباشر", "Al Ahli United Bank Egypt (AUB) - Mastercard Classic Debit"),
        "Mastercard", "Debit", "Classic", "https://www.aubegypt.com", "19330",
    ),
    IssuerInfo(
        "540000", LocalizedName("بنك فيصل الإسلامي المصري - ماستركارد إسلامي خصم مباشر", "Faisal Islamic Bank of Egypt - Mastercard Islamic Debit"),
        "Mastercard", "Debit", "Classic", "https://www.faisalbank.com.eg", "19628",
    ),
    IssuerInfo(
        "410987", LocalizedName("بنك فيصل الإسلامي المصري - فيزا إسلامي ائتمان", "Faisal Islamic Bank of Egypt - Visa Islamic Credit"),
        "Visa", "Credit", "Gold", "https://www.faisalbank.com.eg", "19628",
    ),
    IssuerInfo(
        "507808", LocalizedName("بنك أبوظبي الإسلامي مصر - ميزة خصم مباشر", "Abu Dhabi Islamic Bank Egypt (ADIB) - Meeza Debit"),
        "Meeza", "Debit", "Classic", "https://www.adib.com.eg", "19977",
    ),
    IssuerInfo(
        "536789", LocalizedName("بنك أبوظبي الإسلامي مصر - ماستركارد إسلامي بلاتينيوم ائتمان", "Abu Dhabi Islamic Bank Egypt (ADIB) - Mastercard Islamic Platinum Credit"),
        "Mastercard", "Credit", "Platinum", "https://www.adib.com.eg", "19977",
    ),
    IssuerInfo(
        "543000", LocalizedName("بنك البركة مصر - ماستركارد إسلامي خصم مباشر", "Al Baraka Bank Egypt - Mastercard Islamic Debit"),
        "Mastercard", "Debit", "Classic", "https://www.albaraka-bank.com.eg", "16993",
    ),
    IssuerInfo(
        "426543", LocalizedName("بنك البركة مصر - فيزا إسلامي ذهبية ائتمان", "Al Baraka Bank Egypt - Visa Islamic Gold Credit"),
        "Visa", "Credit", "Gold", "https://www.albaraka-bank.com.eg", "16993",
    ),
    IssuerInfo(
        "539542", LocalizedName("فوري - ماستركارد بطاقة مدفوعة مسبقاً", "Fawry - Mastercard Prepaid Card"),
        "Mastercard", "Prepaid", "Classic", "https://www.fawry.com", "19350", supports_tokenization=False,
    ),
    IssuerInfo(
        "506789", LocalizedName("فوري - ميزة بطاقة مدفوعة مسبقاً", "Fawry - Meeza Prepaid Card"),
        "Meeza", "Prepaid", "Classic", "https://www.fawry.com", "19350", supports_tokenization=False,
    ),
    IssuerInfo(
        "508000", LocalizedName("باي موب - ماستركارد بطاقة مدفوعة مسبقاً", "Paymob - Mastercard Prepaid Card"),
        "Mastercard", "Prepaid", "Classic", "https://paymob.com", "19976",
    ),
    IssuerInfo(
        "509000", LocalizedName("ماني فلووز - فيزا بطاقة مدفوعة مسبقاً", "MoneyFellows - Visa Prepaid Card"),
        "Visa", "Prepaid", "Classic", "https://moneyfellows.com", "16060",
    ),
    IssuerInfo(
        "374000", LocalizedName("سيتي بنك مصر - أمريكان إكسبريس بلاتينيوم ائتمان", "Citi Egypt - American Express Platinum Credit"),
        "American Express", "Credit", "Platinum", "https://www.citi.com.eg", "19234", cvv_length=4, valid_lengths=(15,),
    ),
    IssuerInfo(
        "401234", LocalizedName("سيتي بنك مصر - فيزا إنفينيت ائتمان", "Citi Egypt - Visa Infinite Credit"),
        "Visa", "Credit", "Infinite", "https://www.citi.com.eg", "19234",
    ),
    IssuerInfo(
        "520000", LocalizedName("بنك أبوظبي الأول مصر - ماستركارد ورلد ائتمان", "First Abu Dhabi Bank Egypt (FAB) - Mastercard World Credit"),
        "Mastercard", "Credit", "World", "https://www.bankfab.com.eg", "16661",
    ),
    IssuerInfo(
        "423456", LocalizedName("بنك أبوظبي الأول مصر - فيزا سيجنتشر ائتمان", "First Abu Dhabi Bank Egypt (FAB) - Visa Signature Credit"),
        "Visa", "Credit", "Signature", "https://www.bankfab.com.eg", "16661",
    ),
    IssuerInfo(
        "535678", LocalizedName("بنك مشرق مصر - ماستركارد تيتانيوم ائتمان", "Mashreq Bank Egypt - Mastercard Titanium Credit"),
        "Mastercard", "Credit", "Titanium", "https://www.mashreqbank.com.eg", "19058",
    ),
    IssuerInfo(
        "526789", LocalizedName("بنك الكويت الوطني مصر - ماستركارد بلاتينيوم ائتمان", "National Bank of Kuwait (NBK) Egypt - Mastercard Platinum Credit"),
        "Mastercard", "Credit", "Platinum", "https://www.nbkegypt.com", "19871",
    ),
    IssuerInfo(
        "434567", LocalizedName("بنك الكويت الوطني مصر - فيزا ذهبية ائتمان", "National Bank of Kuwait (NBK) Egypt - Visa Gold Credit"),
        "Visa", "Credit", "Gold", "https://www.nbkegypt.com", "19871",
    ),
    IssuerInfo(
        "528901", LocalizedName("البنك الأهلي الكويتي مصر - ماستركارد كلاسيك ائتمان", "Al Ahli Bank of Kuwait (ABK) Egypt - Mastercard Classic Credit"),
        "Mastercard", "Credit", "Classic", "https://www.abkegypt.com", "19606",
    ),
    IssuerInfo(
        "530000", LocalizedName("بنك الإمارات دبي الوطني مصر - ماستركارد بلاتينيوم ائتمان", "Emirates NBD Egypt - Mastercard Platinum Credit"),
        "Mastercard", "Credit", "Platinum", "https://www.emiratesnbd.com.eg", "19991",
    ),
    IssuerInfo(
        "445678", LocalizedName("بنك الإمارات دبي الوطني مصر - فيزا إنفينيت ائتمان", "Emirates NBD Egypt - Visa Infinite Credit"),
        "Visa", "Credit", "Infinite", "https://www.emiratesnbd.com.eg", "19991",
    ),
)

# Networks whose global ranges take part in token schemes
TOKENIZING_NETWORKS = frozenset({"Visa", "Mastercard", "American Express", "UnionPay"})

UNKNOWN_CARD_KIND = "Unknown"

CARD_TYPE_NAMES: Mapping[str, LocalizedName] = MappingProxyType({
    "Credit": LocalizedName("ائتماني", "Credit"),
    "Debit": LocalizedName("خصم مباشر", "Debit"),
    "Prepaid": LocalizedName("مدفوع مسبقاً", "Prepaid"),
    "Virtual": LocalizedName("بطاقة افتراضية", "Virtual"),
    "Corporate": LocalizedName("مؤسسي", "Corporate"),
    "Government": LocalizedName("حكومي", "Government"),
    UNKNOWN_CARD_KIND: LocalizedName("غير معروف", "Unknown"),
})

CARD_CATEGORY_NAMES: Mapping[str, LocalizedName] = MappingProxyType({
    "Classic": LocalizedName("كلاسيك", "Classic"),
    "Standard": LocalizedName("ستاندرد", "Standard"),
    "Gold": LocalizedName("ذهبية", "Gold"),
    "Platinum": LocalizedName("بلاتينيوم", "Platinum"),
    "Titanium": LocalizedName("تيتانيوم", "Titanium"),
    "Signature": LocalizedName("سيجنتشر", "Signature"),
    "Infinite": LocalizedName("إنفينيت", "Infinite"),
    "Business": LocalizedName("أعمال", "Business"),
    "World": LocalizedName("ورلد", "World"),
    "World Elite": LocalizedName("ورلد إليت", "World Elite"),
    UNKNOWN_CARD_KIND: LocalizedName("غير معروف", "Unknown"),
})

# Cardholder name as embossed: Latin letters, spaces, hyphens, apostrophes
CARDHOLDER_NAME_MIN_LENGTH = 2
CARDHOLDER_NAME_MAX_LENGTH = 26
EXPIRY_MIN_YEAR = 2000
EXPIRY_MAX_YEAR = 2099

# --- PHONE NUMBERS ---

PHONE_NUMBER_LENGTH = 11
PHONE_COUNTRY_CODE = "20"

# Third digit of a local mobile number (01X...) that international forms may carry
MOBILE_NETWORK_DIGITS = frozenset("01245")

UNKNOWN_CARRIER = "Unknown Carrier"

# Four-digit local prefix -> carrier
CARRIER_PREFIXES: Mapping[str, str] = MappingProxyType({
    **{f"010{d}": "Vodafone" for d in range(10)},
    **{f"011{d}": "Orange" for d in range(4)},
    **{f"011{d}": "Etisalat" for d in range(4, 10)},
    **{f"012{d}": "Orange" for d in range(10)},
    **{f"015{d}": "WE (Telecom Egypt)" for d in range(10)},
    "0190": "Value Added Services",
    "0191": "Banking Services",
    "0192": "Banking Services",
    "0193": "E-Payment Services",
    "0194": "Special Services",
    "0195": "E-Payment Services (Fawry)",
    "0196": "Ride Hailing Services",
    "0197": "E-Commerce Services",
    "0198": "FinTech Services",
    "0199": "Government Services",
})

CARRIER_NAMES: Mapping[str, LocalizedName] = MappingProxyType({
    "Vodafone": LocalizedName("فودافون", "Vodafone"),
    "Orange": LocalizedName("أورنج", "Orange"),
    "Etisalat": LocalizedName("اتصالات", "Etisalat"),
    "WE (Telecom Egypt)": LocalizedName("وي (المصرية للاتصالات)", "WE (Telecom Egypt)"),
    "Value Added Services": LocalizedName("خدمات القيمة المضافة", "Value Added Services"),
    "Banking Services": LocalizedName("خدمات مصرفية", "Banking Services"),
    "E-Payment Services": LocalizedName("خدمات الدفع الإلكتروني", "E-Payment Services"),
    "Special Services": LocalizedName("خدمات خاصة", "Special Services"),
    "E-Payment Services (Fawry)": LocalizedName("خدمات الدفع الإلكتروني (فوري)", "E-Payment Services (Fawry)"),
    "Ride Hailing Services": LocalizedName("خدمات النقل التشاركي", "Ride Hailing Services"),
    "E-Commerce Services": LocalizedName("خدمات التجارة الإلكترونية", "E-Commerce Services"),
    "FinTech Services": LocalizedName("خدمات التكنولوجيا المالية", "FinTech Services"),
    "Government Services": LocalizedName("خدمات حكومية", "Government Services"),
    UNKNOWN_CARRIER: LocalizedName("مشغل غير معروف", "Unknown Carrier"),
})

SERVICE_TYPE_NAMES: Mapping[str, LocalizedName] = MappingProxyType({
    "Mobile": LocalizedName("محمول", "Mobile"),
    "Fixed & Mobile": LocalizedName("أرضي ومحمول", "Fixed & Mobile"),
    "Value Added Service": LocalizedName("خدمة قيمة مضافة", "Value Added Service"),
})
