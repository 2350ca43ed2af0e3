"""
Japanese numeral conversion for Suji.

Converts an integer in [0, 999,999,999,999,999] into its kanji, hiragana and
romaji forms. Large numbers are grouped in periods of four digits (万, 億, 兆);
each period head is either looked up in the sound change table or built from
its coefficient and unit, and the remainder is converted recursively.

Out-of-range input never raises: it yields the ``UNKNOWN`` sentinel triple.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from suji.settings import MAX_VALUE, MIN_VALUE, UNKNOWN_MARKER

logger = logging.getLogger(__name__)


# ============================================================================
# Value Objects
# ============================================================================

@dataclass(frozen=True)
class Reading:
    """An accepted reading other than the canonical one (e.g. し for 四)."""
    hiragana: str
    romaji: str


@dataclass(frozen=True)
class NumeralTriple:
    """
    Kanji, hiragana and romaji forms of one number.

    ``alternatives`` holds readings that are accepted as answers but never
    produced as canonical output.
    """
    value: int
    kanji: str
    hiragana: str
    romaji: str
    alternatives: Tuple[Reading, ...] = ()

    @property
    def is_unknown(self) -> bool:
        return self.kanji == UNKNOWN_MARKER

    def __add__(self, other: "NumeralTriple") -> "NumeralTriple":
        return NumeralTriple(
            value=self.value + other.value,
            kanji=self.kanji + other.kanji,
            hiragana=self.hiragana + other.hiragana,
            romaji=self.romaji + other.romaji,
        )


def unknown(value) -> NumeralTriple:
    """Build the sentinel triple for a value that cannot be converted."""
    return NumeralTriple(value, UNKNOWN_MARKER, UNKNOWN_MARKER, UNKNOWN_MARKER)


UNKNOWN = unknown(None)


def is_unknown(triple: NumeralTriple) -> bool:
    """Check a conversion result against the sentinel."""
    return triple.kanji == UNKNOWN_MARKER


def _triple(value: int, kanji: str, hiragana: str, romaji: str) -> NumeralTriple:
    return NumeralTriple(value, kanji, hiragana, romaji)


# ============================================================================
# Number Tables
# ============================================================================

# Directly tabulated numbers: the base case of the recursion
DIGIT_BAND: Mapping[int, NumeralTriple] = MappingProxyType({
    0: _triple(0, "零", "れい", "rei"),
    1: _triple(1, "一", "いち", "ichi"),
    2: _triple(2, "二", "に", "ni"),
    3: _triple(3, "三", "さん", "san"),
    4: _triple(4, "四", "よん", "yon"),
    5: _triple(5, "五", "ご", "go"),
    6: _triple(6, "六", "ろく", "roku"),
    7: _triple(7, "七", "なな", "nana"),
    8: _triple(8, "八", "はち", "hachi"),
    9: _triple(9, "九", "きゅう", "kyuu"),
    10: _triple(10, "十", "じゅう", "juu"),
    11: _triple(11, "十一", "じゅういち", "juuichi"),
    12: _triple(12, "十二", "じゅうに", "juuni"),
    13: _triple(13, "十三", "じゅうさん", "juusan"),
    14: _triple(14, "十四", "じゅうよん", "juuyon"),
    15: _triple(15, "十五", "じゅうご", "juugo"),
    16: _triple(16, "十六", "じゅうろく", "juuroku"),
    17: _triple(17, "十七", "じゅうなな", "juunana"),
    18: _triple(18, "十八", "じゅうはち", "juuhachi"),
    19: _triple(19, "十九", "じゅうきゅう", "juukyuu"),
    20: _triple(20, "二十", "にじゅう", "nijuu"),
    30: _triple(30, "三十", "さんじゅう", "sanjuu"),
    40: _triple(40, "四十", "よんじゅう", "yonjuu"),
    50: _triple(50, "五十", "ごじゅう", "gojuu"),
    60: _triple(60, "六十", "ろくじゅう", "rokujuu"),
    70: _triple(70, "七十", "ななじゅう", "nanajuu"),
    80: _triple(80, "八十", "はちじゅう", "hachijuu"),
    90: _triple(90, "九十", "きゅうじゅう", "kyuujuu"),
    100: _triple(100, "百", "ひゃく", "hyaku"),
})

# Alternative readings for some tabulated numbers (4 = し, 7 = しち, 9 = く)
ALTERNATIVE_READINGS: Mapping[int, Tuple[Reading, ...]] = MappingProxyType({
    4: (Reading("し", "shi"),),
    7: (Reading("しち", "shichi"),),
    9: (Reading("く", "ku"),),
    14: (Reading("じゅうし", "juushi"),),
    17: (Reading("じゅうしち", "juushichi"),),
    19: (Reading("じゅうく", "juuku"),),
})


@dataclass(frozen=True)
class MagnitudeUnit:
    """
    A grouping unit of the numeral system.

    ``period`` units (万, 億, 兆) take a whole four-digit coefficient; the
    others take a single digit. The tens unit has no glyph of its own: its
    heads are the tabulated decades.
    """
    scale: int
    kanji: str
    hiragana: str
    romaji: str
    period: bool = False

    @property
    def tabulated(self) -> bool:
        return not self.kanji


# Largest first
MAGNITUDE_UNITS: Tuple[MagnitudeUnit, ...] = (
    MagnitudeUnit(10 ** 12, "兆", "ちょう", "chou", period=True),
    MagnitudeUnit(10 ** 8, "億", "おく", "oku", period=True),
    MagnitudeUnit(10 ** 4, "万", "まん", "man", period=True),
    MagnitudeUnit(1000, "千", "せん", "sen"),
    MagnitudeUnit(100, "百", "ひゃく", "hyaku"),
    MagnitudeUnit(10, "", "", ""),
)

# Period heads that are not the plain concatenation of digit and unit,
# keyed by (unit scale, leading digit). A leading 一 is dropped before 百 and 千.
SOUND_CHANGES: Mapping[Tuple[int, int], NumeralTriple] = MappingProxyType({
    (100, 1): _triple(100, "百", "ひゃく", "hyaku"),
    (100, 3): _triple(300, "三百", "さんびゃく", "sanbyaku"),
    (100, 6): _triple(600, "六百", "ろっぴゃく", "roppyaku"),
    (100, 8): _triple(800, "八百", "はっぴゃく", "happyaku"),
    (1000, 1): _triple(1000, "千", "せん", "sen"),
    (1000, 3): _triple(3000, "三千", "さんぜん", "sanzen"),
    (1000, 8): _triple(8000, "八千", "はっせん", "hassen"),
})

# Whole numbers with an irregular standalone form
FIXED_POINTS: Mapping[int, NumeralTriple] = MappingProxyType({
    1_000_000: _triple(1_000_000, "百万", "ひゃくまん", "hyakuman"),
    1_000_000_000_000: _triple(1_000_000_000_000, "一兆", "いっちょう", "icchou"),
})


# ============================================================================
# Number to Kanji/Kana Conversion
# ============================================================================

def convert(value) -> NumeralTriple:
    """
    Convert a number to its kanji, hiragana and romaji forms.

    Args:
        value: Integer in [0, 999,999,999,999,999].

    Returns:
        The numeral triple, or the sentinel (every field "?") when the value
        is not an integer or lies outside the supported range.

    Example:
        >>> convert(5726).kanji
        '五千七百二十六'
        >>> convert(300).romaji
        'sanbyaku'
        >>> convert(-1).kanji
        '?'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        logger.debug(f"Not an integer: {value!r}")
        return unknown(value)
    if value < MIN_VALUE or value > MAX_VALUE:
        logger.debug(f"Out of range: {value}")
        return unknown(value)

    result = _convert(value)
    if result.is_unknown:
        logger.debug(f"No conversion for {value}")
        return unknown(value)
    return result


def _convert(value: int) -> NumeralTriple:
    """Recursive worker for :func:`convert`; ``value`` is already in range."""
    entry = DIGIT_BAND.get(value) or FIXED_POINTS.get(value)
    if entry is not None:
        return NumeralTriple(
            entry.value, entry.kanji, entry.hiragana, entry.romaji,
            ALTERNATIVE_READINGS.get(value, ()),
        )

    unit = _select_unit(value)
    if unit is None:
        return unknown(value)

    leading, remainder = divmod(value, unit.scale)
    head = _period_head(leading, unit)
    if head.is_unknown or remainder == 0:
        return head

    tail = _convert(remainder)
    if tail.is_unknown:
        return unknown(value)
    return head + tail


def _select_unit(value: int) -> Optional[MagnitudeUnit]:
    for unit in MAGNITUDE_UNITS:
        if value >= unit.scale:
            return unit
    return None


def _period_head(leading: int, unit: MagnitudeUnit) -> NumeralTriple:
    """
    Build the head of a period: the coefficient joined with its unit.

    Examples: (3, 百) -> 三百 さんびゃく, (25, 万) -> 二十五万 にじゅうごまん.
    """
    value = leading * unit.scale

    if unit.tabulated:
        return DIGIT_BAND.get(value) or unknown(value)

    if unit.period:
        coefficient = _convert(leading)
    else:
        changed = SOUND_CHANGES.get((unit.scale, leading))
        if changed is not None:
            return changed
        coefficient = DIGIT_BAND.get(leading) or unknown(leading)

    if coefficient.is_unknown:
        return unknown(value)
    return _triple(
        value,
        coefficient.kanji + unit.kanji,
        coefficient.hiragana + unit.hiragana,
        coefficient.romaji + unit.romaji,
    )


# ============================================================================
# Parse Number from Kanji
# ============================================================================

# Character to number class mapping
# 'jd' = Japanese digit, 'p' = power of ten
KANJI_NUMBER_CLASS = {
    '〇': ('jd', 0), '零': ('jd', 0),
    '一': ('jd', 1),
    '二': ('jd', 2),
    '三': ('jd', 3),
    '四': ('jd', 4),
    '五': ('jd', 5),
    '六': ('jd', 6),
    '七': ('jd', 7),
    '八': ('jd', 8),
    '九': ('jd', 9),
    '十': ('p', 1),
    '百': ('p', 2),
    '千': ('p', 3),
    '万': ('p', 4),
    '億': ('p', 8),
    '兆': ('p', 12),
}


class NotANumber(Exception):
    """Raised when a string cannot be parsed as a kanji numeral."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"'{text}' is not a number: {reason}")


def parse_kanji(text: str) -> int:
    """
    Parse a kanji numeral to an integer.

    Accepts the optional 一 before 十, 百 and 千 and 〇 for zero, so both
    千 and 一千 give 1000. Digit runs without units (五七) are rejected.

    Raises:
        NotANumber: If the string is not a well-formed kanji numeral.

    Example:
        >>> parse_kanji("一億二千三百四十五万六千七百八十九")
        123456789
        >>> parse_kanji("一千")
        1000
    """
    classes = []
    for char in text:
        if char not in KANJI_NUMBER_CLASS:
            raise NotANumber(text, f"Invalid character: {char}")
        classes.append(KANJI_NUMBER_CLASS[char])

    if not classes:
        raise NotANumber(text, "Empty string")

    return _parse_kanji_internal(text, classes, 0, len(classes))


def _parse_kanji_internal(text: str, classes, start: int, end: int) -> int:
    """Split on the largest power in the range and recurse on both sides."""
    if start >= end:
        return 0

    max_power = 0
    max_idx = None
    for i in range(start, end):
        cls, val = classes[i]
        if cls == 'p' and val > max_power:
            max_power = val
            max_idx = i

    if max_idx is None:
        if end - start > 1:
            raise NotANumber(text, "Digits without a unit")
        return classes[start][1]

    if max_idx == start:
        coefficient = 1
    else:
        coefficient = _parse_kanji_internal(text, classes, start, max_idx)

    # 十, 百 and 千 take one digit; 万, 億 and 兆 take a whole period
    limit = 10 if max_power < 4 else 10000
    if not 0 < coefficient < limit:
        raise NotANumber(text, f"Bad coefficient {coefficient} for {text[max_idx]}")

    power_value = 10 ** max_power
    remainder = _parse_kanji_internal(text, classes, max_idx + 1, end)
    if remainder >= power_value:
        raise NotANumber(text, f"Remainder {remainder} too large after {text[max_idx]}")

    return coefficient * power_value + remainder


# ============================================================================
# Utility Functions
# ============================================================================

def tabulated_values() -> Tuple[int, ...]:
    """All directly tabulated numbers (0-20, the decades and 100), sorted."""
    return tuple(sorted(DIGIT_BAND))


def supported_numbers() -> Tuple[int, ...]:
    """
    The fixed practice set 0-100: the tabulated numbers plus the compound
    numbers 21-99.
    """
    compound = [n for n in range(21, 100) if n not in DIGIT_BAND]
    return tuple(sorted([*DIGIT_BAND, *compound]))


def format_with_commas(value: int) -> str:
    """
    Format a number with thousands separators for display.

    Example:
        >>> format_with_commas(1234567)
        '1,234,567'
    """
    return f"{value:,}"
