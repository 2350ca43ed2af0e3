"""
Character handling and kana conversion for Suji.

Provides the kana tables and the normalisation applied to learner input
before it is compared with a numeral's readings: full-width alphanumerics
to ASCII, half-width katakana to full-width, dakuten joining, katakana to
hiragana and macron long vowels to doubled vowels.
"""

import re
from typing import Dict, Optional

# ============================================================================
# Kana Character Tables
# ============================================================================

# Sokuon (gemination marker)
SOKUON_CHARACTERS = {"sokuon": "っッ"}

# Small kana modifiers and long vowel marker
MODIFIER_CHARACTERS = {
    "+a": "ぁァ", "+i": "ぃィ", "+u": "ぅゥ", "+e": "ぇェ", "+o": "ぉォ",
    "+ya": "ゃャ", "+yu": "ゅュ", "+yo": "ょョ", "+wa": "ゎヮ",
    "long_vowel": "ー"
}

# Main kana table
KANA_CHARACTERS = {
    "a": "あア",     "i": "いイ",     "u": "うウ",     "e": "えエ",     "o": "おオ",
    "ka": "かカ",    "ki": "きキ",    "ku": "くク",    "ke": "けケ",    "ko": "こコ",
    "sa": "さサ",    "shi": "しシ",   "su": "すス",    "se": "せセ",    "so": "そソ",
    "ta": "たタ",    "chi": "ちチ",   "tsu": "つツ",   "te": "てテ",    "to": "とト",
    "na": "なナ",    "ni": "にニ",    "nu": "ぬヌ",    "ne": "ねネ",    "no": "のノ",
    "ha": "はハ",    "hi": "ひヒ",    "fu": "ふフ",    "he": "へヘ",    "ho": "ほホ",
    "ma": "まマ",    "mi": "みミ",    "mu": "むム",    "me": "めメ",    "mo": "もモ",
    "ya": "やヤ",                     "yu": "ゆユ",                     "yo": "よヨ",
    "ra": "らラ",    "ri": "りリ",    "ru": "るル",    "re": "れレ",    "ro": "ろロ",
    "wa": "わワ",    "wi": "ゐヰ",                     "we": "ゑヱ",    "wo": "をヲ",
    "n": "んン",
    # Voiced consonants (dakuten)
    "ga": "がガ",    "gi": "ぎギ",    "gu": "ぐグ",    "ge": "げゲ",    "go": "ごゴ",
    "za": "ざザ",    "ji": "じジ",    "zu": "ずズ",    "ze": "ぜゼ",    "zo": "ぞゾ",
    "da": "だダ",    "dji": "ぢヂ",   "dzu": "づヅ",   "de": "でデ",    "do": "どド",
    "ba": "ばバ",    "bi": "びビ",    "bu": "ぶブ",    "be": "べベ",    "bo": "ぼボ",
    "pa": "ぱパ",    "pi": "ぴピ",    "pu": "ぷプ",    "pe": "ぺペ",    "po": "ぽポ",
    "vu": "ゔヴ",
}

# Combined character table
ALL_CHARACTERS = {
    **SOKUON_CHARACTERS,
    **MODIFIER_CHARACTERS,
    **KANA_CHARACTERS
}

# Build character -> class mapping
CHAR_CLASS_HASH: Dict[str, str] = {}
for char_class, chars in ALL_CHARACTERS.items():
    for char in chars:
        CHAR_CLASS_HASH[char] = char_class


# ============================================================================
# Dakuten (Voicing) Tables
# ============================================================================

# Unvoiced -> voiced mappings
DAKUTEN_HASH = {
    "ka": "ga", "ki": "gi", "ku": "gu", "ke": "ge", "ko": "go",
    "sa": "za", "shi": "ji", "su": "zu", "se": "ze", "so": "zo",
    "ta": "da", "chi": "dji", "tsu": "dzu", "te": "de", "to": "do",
    "ha": "ba", "hi": "bi", "fu": "bu", "he": "be", "ho": "bo",
    "u": "vu",
}

# Unvoiced -> semi-voiced (handakuten) mappings
HANDAKUTEN_HASH = {
    "ha": "pa", "hi": "pi", "fu": "pu", "he": "pe", "ho": "po",
}


# ============================================================================
# Character Width Normalization
# ============================================================================

# Half-width to full-width kana mapping
HALF_WIDTH_KANA = "･ｦｧｨｩｪｫｬｭｮｯｰｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓﾔﾕﾖﾗﾘﾙﾚﾛﾜﾝﾞﾟ"
FULL_WIDTH_KANA = "・ヲァィゥェォャュョッーアイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミムメモヤユヨラリルレロワン゛゜"

# Full-width alphanumeric to half-width
ABNORMAL_CHARS = (
    "０１２３４５６７８９ａｂｃｄｅｆｇｈｉｊｋｌｍｎｏｐｑｒｓｔｕｖｗｘｙｚ"
    "ＡＢＣＤＥＦＧＨＩＪＫＬＭＮＯＰＱＲＳＴＵＶＷＸＹＺ－＇　"
    + HALF_WIDTH_KANA
)

NORMAL_CHARS = (
    "0123456789abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ-' "
    + FULL_WIDTH_KANA
)

_CHAR_NORM_MAP = dict(zip(ABNORMAL_CHARS, NORMAL_CHARS))

# Dakuten combining character mappings
DAKUTEN_JOIN = {}
for (cc, ccd) in DAKUTEN_HASH.items():
    kc = KANA_CHARACTERS.get(cc, "")
    kcd = KANA_CHARACTERS.get(ccd, "")
    for i, char in enumerate(kc):
        if i < len(kcd):
            DAKUTEN_JOIN[char + "゛"] = kcd[i]

for (cc, ccd) in HANDAKUTEN_HASH.items():
    kc = KANA_CHARACTERS.get(cc, "")
    kcd = KANA_CHARACTERS.get(ccd, "")
    for i, char in enumerate(kc):
        if i < len(kcd):
            DAKUTEN_JOIN[char + "゜"] = kcd[i]

# Long vowels written with a macron (Hepburn) or circumflex (Kunrei-shiki)
MACRON_VOWELS = {
    "ā": "aa", "ī": "ii", "ū": "uu", "ē": "ee", "ō": "ou",
    "â": "aa", "î": "ii", "û": "uu", "ê": "ee", "ô": "ou",
}

# ============================================================================
# Regular Expressions
# ============================================================================

KATAKANA_REGEX = r"[ァ-ヺヽヾー]"
HIRAGANA_REGEX = r"[ぁ-ゔゝゞー]"
NUMERAL_KANJI_REGEX = r"[〇零一二三四五六七八九十百千万億兆]"

_HIRAGANA_WORD = re.compile(rf"^{HIRAGANA_REGEX}+$")
_KATAKANA_WORD = re.compile(rf"^{KATAKANA_REGEX}+$")
_NUMERAL_KANJI_WORD = re.compile(rf"^{NUMERAL_KANJI_REGEX}+$")


def is_hiragana(word: str) -> bool:
    """Check if word consists entirely of hiragana."""
    return bool(word) and bool(_HIRAGANA_WORD.match(word))


def is_katakana(word: str) -> bool:
    """Check if word consists entirely of katakana."""
    return bool(word) and bool(_KATAKANA_WORD.match(word))


def is_kanji_numeral(word: str) -> bool:
    """Check if word is written only with numeral kanji."""
    return bool(word) and bool(_NUMERAL_KANJI_WORD.match(word))


# ============================================================================
# Text Normalization
# ============================================================================

def to_normal_char(char: str) -> Optional[str]:
    """
    Convert an abnormal character to its normal form.

    Full-width ASCII becomes half-width and half-width katakana becomes
    full-width.

    Returns:
        Normalized character or None if no normalization needed.
    """
    return _CHAR_NORM_MAP.get(char)


def simplify_ngrams(text: str, mapping: Dict[str, str]) -> str:
    """
    Apply n-gram replacements to text, longest patterns first.
    """
    if not mapping:
        return text

    patterns = sorted(mapping.keys(), key=len, reverse=True)
    result = text
    for pattern in patterns:
        result = result.replace(pattern, mapping[pattern])
    return result


def normalize(text: str) -> str:
    """
    Normalize text for comparison.

    - Converts full-width alphanumeric to half-width
    - Converts half-width kana to full-width
    - Combines dakuten/handakuten with base characters

    Args:
        text: Text to normalize.

    Returns:
        Normalized text.
    """
    result = []
    for char in text:
        normal = to_normal_char(char)
        result.append(normal if normal else char)
    return simplify_ngrams(''.join(result), DAKUTEN_JOIN)


# ============================================================================
# Kana Conversion
# ============================================================================

def as_hiragana(text: str) -> str:
    """
    Convert katakana to hiragana.

    Characters outside the kana tables (kanji, ASCII) are left alone.

    Example:
        >>> as_hiragana("ニジュウイチ")
        'にじゅういち'
    """
    result = []
    for char in text:
        normal = to_normal_char(char)
        if normal:
            char = normal

        char_class = CHAR_CLASS_HASH.get(char)
        if char_class:
            # Hiragana is the first character in the pair
            result.append(ALL_CHARACTERS[char_class][0])
        else:
            result.append(char)

    return ''.join(result)


def expand_macrons(text: str) -> str:
    """
    Spell macron or circumflex long vowels as doubled vowels.

    Example:
        >>> expand_macrons("jū")
        'juu'
        >>> expand_macrons("chō")
        'chou'
    """
    return simplify_ngrams(text, MACRON_VOWELS)
