"""
Answer checking for Suji.

A learner's answer is accepted when it equals the kanji or hiragana form of
the number, or when it is one of the accepted romaji spellings of a reading.
Romaji spellings are generated from the canonical romaji by a small set of
substitution rules (long/short vowels, palatalised consonants, doubled
moraic n), closed under repeated application.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence, Set

from suji import settings
from suji.characters import as_hiragana, expand_macrons, is_kanji_numeral, normalize
from suji.models import AnswerCheck, NumeralResult
from suji.numbers import NotANumber, NumeralTriple, Reading, parse_kanji

logger = logging.getLogger(__name__)

# Separators a learner may type inside romaji (spaces, hyphens, Hepburn n')
_ROMAJI_SEPARATORS = re.compile(r"[\s\-']+")


# ============================================================================
# Variant Rules
# ============================================================================

class VariantRule(ABC):
    """A substitution family producing alternative romaji spellings."""

    @abstractmethod
    def apply(self, text: str) -> Set[str]:
        """Return the spellings this rule derives from ``text``."""
        pass


class LongVowelRule(VariantRule):
    """
    Long/short vowel pair, e.g. uu <-> u.

    Every long form collapses to the short one. When the text holds no long
    form yet, every short vowel not followed by another vowel is lengthened.
    """

    def __init__(self, long: str, short: str):
        self.long = long
        self.short = short
        self._promote = re.compile(f"{re.escape(short)}(?![aeiou])")

    def apply(self, text: str) -> Set[str]:
        if self.long in text:
            return {text.replace(self.long, self.short)}
        if self.short in text:
            promoted = self._promote.sub(self.long, text)
            if promoted != text:
                return {promoted}
        return set()

    def __repr__(self):
        return f"LongVowelRule({self.long!r}, {self.short!r})"


class PalatalRule(VariantRule):
    """Palatalised/plain consonant pair, e.g. kyu <-> ku, in both directions."""

    def __init__(self, with_y: str, without_y: str):
        self.with_y = with_y
        self.without_y = without_y

    def apply(self, text: str) -> Set[str]:
        result = set()
        if self.with_y in text:
            result.add(text.replace(self.with_y, self.without_y))
        if self.without_y in text:
            result.add(text.replace(self.without_y, self.with_y))
        result.discard(text)
        return result

    def __repr__(self):
        return f"PalatalRule({self.with_y!r}, {self.without_y!r})"


class MoraicNasalRule(VariantRule):
    """ん before a labial or plosive written n or nn."""

    _single = re.compile(r"(?<!n)n(?=[bpmfv])")

    def apply(self, text: str) -> Set[str]:
        result = {
            self._single.sub("nn", text),
            text.replace("nn", "n"),
        }
        result.discard(text)
        return result

    def __repr__(self):
        return "MoraicNasalRule()"


LONG_VOWEL_PAIRS = (
    ("uu", "u"),
    ("ou", "o"),
    ("aa", "a"),
    ("ii", "i"),
    ("ee", "e"),
)

PALATAL_PAIRS = (
    ("jyu", "ju"),
    ("kyu", "ku"),
    ("syu", "su"),
    ("tyu", "tu"),
    ("nyu", "nu"),
    ("hyu", "hu"),
    ("myu", "mu"),
    ("ryu", "ru"),
    ("gyu", "gu"),
    ("zyu", "zu"),
    ("dyu", "du"),
    ("byu", "bu"),
    ("pyu", "pu"),
)

VARIANT_RULES: Sequence[VariantRule] = (
    *(LongVowelRule(long, short) for long, short in LONG_VOWEL_PAIRS),
    *(PalatalRule(with_y, without_y) for with_y, without_y in PALATAL_PAIRS),
    MoraicNasalRule(),
)


# ============================================================================
# Variant Expansion
# ============================================================================

def expand_variants(canonical: str,
                    rules: Iterable[VariantRule] = VARIANT_RULES,
                    max_rounds: Optional[int] = None) -> Set[str]:
    """
    Generate the romaji spellings considered equivalent to ``canonical``.

    Rules are applied to every newly produced spelling until nothing new
    appears or ``max_rounds`` rounds have run.

    Args:
        canonical: Canonical romaji, e.g. "juu".
        rules: Substitution rules to close over.
        max_rounds: Round cap; defaults to ``settings.VARIANT_MAX_ROUNDS``.

    Returns:
        Set of spellings, always including the normalised canonical form.

    Example:
        >>> sorted(expand_variants("juu"))[:4]
        ['ju', 'juu', 'jyu', 'jyuu']
    """
    if max_rounds is None:
        max_rounds = settings.VARIANT_MAX_ROUNDS
    rules = tuple(rules)

    canonical = canonical.strip().lower()
    variants = {canonical}
    frontier = {canonical}
    rounds = 0

    while frontier:
        if rounds >= max_rounds:
            logger.debug(f"Variant expansion of {canonical!r} stopped after "
                         f"{rounds} rounds with {len(variants)} spellings")
            break
        produced = set()
        for text in frontier:
            for rule in rules:
                produced |= rule.apply(text)
        frontier = produced - variants
        variants |= frontier
        rounds += 1

    return variants


# ============================================================================
# Matching
# ============================================================================

def normalize_answer(text) -> str:
    """Trim, lower-case, fold character widths and convert katakana to hiragana."""
    return as_hiragana(normalize(str(text)).strip().lower())


def normalize_romaji(text) -> str:
    """Trim, lower-case, spell out macrons and drop separators."""
    text = expand_macrons(normalize(str(text)).strip().lower())
    return _ROMAJI_SEPARATORS.sub("", text)


def transliteration_match(user_input, canonical: str) -> bool:
    """
    Check a romaji answer against the canonical romaji.

    Accepts the canonical spelling and every spelling produced by
    :func:`expand_variants`.

    Example:
        >>> transliteration_match("jyuu", "juu")
        True
        >>> transliteration_match("ichi", "nijuuichi")
        False
    """
    answer = normalize_romaji(user_input)
    canonical = canonical.strip().lower()

    if answer == canonical:
        return True
    return answer in expand_variants(canonical)


def _readings(triple: NumeralTriple):
    return (Reading(triple.hiragana, triple.romaji), *triple.alternatives)


def _same_kanji_number(answer: str, triple: NumeralTriple) -> bool:
    """Accept other well-formed kanji spellings of the value (一千, 〇)."""
    if not is_kanji_numeral(answer):
        return False
    try:
        return parse_kanji(answer) == triple.value
    except NotANumber as e:
        logger.debug(f"Kanji answer rejected: {e}")
        return False


def matched_form(user_input, triple: NumeralTriple) -> Optional[str]:
    """
    Name the form of ``triple`` the answer matched.

    Returns:
        "kanji", "hiragana", "romaji", or None when the answer is wrong.
    """
    if triple.is_unknown:
        return None

    answer = normalize_answer(user_input)
    if not answer:
        return None

    if answer == normalize_answer(triple.kanji) or _same_kanji_number(answer, triple):
        return "kanji"

    readings = _readings(triple)
    if any(answer == normalize_answer(r.hiragana) for r in readings):
        return "hiragana"
    if any(transliteration_match(user_input, r.romaji) for r in readings):
        return "romaji"
    return None


def is_match(user_input, triple: NumeralTriple) -> bool:
    """
    Check if a learner's answer matches any accepted form of the number.

    Example:
        >>> from suji.numbers import convert
        >>> is_match("にじゅういち", convert(21))
        True
        >>> is_match("nijyuichi", convert(21))
        True
        >>> is_match("ichi", convert(21))
        False
    """
    return matched_form(user_input, triple) is not None


def check_answer(user_input, triple: NumeralTriple) -> AnswerCheck:
    """Check an answer and describe the outcome for a presentation layer."""
    form = matched_form(user_input, triple)
    return AnswerCheck(
        answer=str(user_input),
        normalized=normalize_answer(user_input),
        correct=form is not None,
        matched_form=form,
        expected=NumeralResult.from_triple(triple),
    )
