"""
Suji: Japanese numeral practice engine.

Converts numbers to kanji, hiragana and romaji, checks learners' answers
against them and samples realistic practice numbers.

Example:
    >>> import suji
    >>> n = suji.convert(8000)
    >>> n.kanji, n.hiragana, n.romaji
    ('八千', 'はっせん', 'hassen')
    >>> suji.is_match("HASSEN", n)
    True
"""

from suji.matching import (
    check_answer,
    expand_variants,
    is_match,
    transliteration_match,
)
from suji.numbers import (
    UNKNOWN,
    NumeralTriple,
    Reading,
    convert,
    format_with_commas,
    is_unknown,
    supported_numbers,
    tabulated_values,
)
from suji.sampler import random_number, round_to_realistic, sample, sample_triple
from suji.settings import MAX_VALUE, MIN_VALUE, UNKNOWN_MARKER

__version__ = "0.1.0"

__all__ = [
    "MAX_VALUE",
    "MIN_VALUE",
    "UNKNOWN",
    "UNKNOWN_MARKER",
    "NumeralTriple",
    "Reading",
    "check_answer",
    "convert",
    "expand_variants",
    "format_with_commas",
    "is_match",
    "is_unknown",
    "random_number",
    "round_to_realistic",
    "sample",
    "sample_triple",
    "supported_numbers",
    "tabulated_values",
    "transliteration_match",
]
