"""
Tests for characters.py - kana conversion and input normalisation.
"""

from suji.characters import (
    as_hiragana,
    expand_macrons,
    is_hiragana,
    is_kanji_numeral,
    is_katakana,
    normalize,
    simplify_ngrams,
)


class TestNormalize:
    """Tests for width normalisation."""

    def test_full_width_ascii(self):
        assert normalize("ｈａｓｓｅｎ") == "hassen"
        assert normalize("ＨＡＳＳＥＮ") == "HASSEN"
        assert normalize("１２３") == "123"

    def test_half_width_kana(self):
        assert normalize("ﾊｯｾﾝ") == "ハッセン"

    def test_half_width_dakuten_joined(self):
        assert normalize("ｻﾝﾋﾞｬｸ") == "サンビャク"
        assert normalize("ﾛｯﾋﾟｬｸ") == "ロッピャク"

    def test_ascii_unchanged(self):
        assert normalize("sanbyaku") == "sanbyaku"

    def test_simplify_ngrams_longest_first(self):
        assert simplify_ngrams("abc", {"ab": "x", "abc": "y"}) == "y"
        assert simplify_ngrams("abc", {}) == "abc"


class TestKanaConversion:
    """Tests for as_hiragana."""

    def test_katakana(self):
        assert as_hiragana("ニジュウイチ") == "にじゅういち"
        assert as_hiragana("ハッピャク") == "はっぴゃく"

    def test_half_width(self):
        assert as_hiragana("ﾆ") == "に"

    def test_mixed(self):
        assert as_hiragana("三ゼン") == "三ぜん"
        assert as_hiragana("sen") == "sen"


class TestMacrons:
    """Tests for expand_macrons."""

    def test_hepburn(self):
        assert expand_macrons("jū") == "juu"
        assert expand_macrons("chō") == "chou"
        assert expand_macrons("ā") == "aa"

    def test_kunrei(self):
        assert expand_macrons("kyû") == "kyuu"
        assert expand_macrons("tyô") == "tyou"


class TestCharacterTests:
    """Tests for the character class predicates."""

    def test_is_hiragana(self):
        assert is_hiragana("さんびゃく")
        assert not is_hiragana("サン")
        assert not is_hiragana("")

    def test_is_katakana(self):
        assert is_katakana("サンビャク")
        assert not is_katakana("さん")

    def test_is_kanji_numeral(self):
        assert is_kanji_numeral("五千七百二十六")
        assert is_kanji_numeral("〇")
        assert not is_kanji_numeral("五千円")
        assert not is_kanji_numeral("5726")
        assert not is_kanji_numeral("")
