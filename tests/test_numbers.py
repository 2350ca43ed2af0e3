"""
Tests for numbers.py - kanji/hiragana/romaji conversion and kanji parsing.
"""

import pytest

from suji.numbers import (
    DIGIT_BAND,
    FIXED_POINTS,
    MAGNITUDE_UNITS,
    SOUND_CHANGES,
    UNKNOWN,
    NotANumber,
    NumeralTriple,
    Reading,
    convert,
    format_with_commas,
    is_unknown,
    parse_kanji,
    supported_numbers,
    tabulated_values,
)
from suji.settings import MAX_VALUE, UNKNOWN_MARKER


def forms(value):
    t = convert(value)
    return (t.kanji, t.hiragana, t.romaji)


class TestBasicNumbers:
    """Tests for directly tabulated numbers."""

    def test_zero(self):
        assert convert(0) == NumeralTriple(0, "零", "れい", "rei")

    def test_single_digits(self):
        assert forms(1) == ("一", "いち", "ichi")
        assert forms(4) == ("四", "よん", "yon")
        assert forms(7) == ("七", "なな", "nana")
        assert forms(9) == ("九", "きゅう", "kyuu")

    def test_teens(self):
        assert forms(10) == ("十", "じゅう", "juu")
        assert forms(11) == ("十一", "じゅういち", "juuichi")
        assert forms(19) == ("十九", "じゅうきゅう", "juukyuu")

    def test_decades(self):
        assert forms(20) == ("二十", "にじゅう", "nijuu")
        assert forms(30) == ("三十", "さんじゅう", "sanjuu")
        assert forms(50) == ("五十", "ごじゅう", "gojuu")
        assert forms(90) == ("九十", "きゅうじゅう", "kyuujuu")

    def test_hundred(self):
        assert forms(100) == ("百", "ひゃく", "hyaku")

    def test_tabulated_entries_returned_verbatim(self):
        for value, entry in DIGIT_BAND.items():
            result = convert(value)
            assert (result.kanji, result.hiragana, result.romaji) == \
                (entry.kanji, entry.hiragana, entry.romaji)

    def test_alternative_readings(self):
        assert convert(4).alternatives == (Reading("し", "shi"),)
        assert convert(7).alternatives == (Reading("しち", "shichi"),)
        assert convert(9).alternatives == (Reading("く", "ku"),)
        assert convert(19).alternatives == (Reading("じゅうく", "juuku"),)

    def test_alternatives_not_carried_into_compounds(self):
        assert convert(5).alternatives == ()
        assert convert(24).alternatives == ()
        assert convert(114).alternatives == ()


class TestCompoundNumbers:
    """Tests for 21-99, built from a decade and a digit."""

    def test_twenties(self):
        assert forms(21) == ("二十一", "にじゅういち", "nijuuichi")
        assert forms(29) == ("二十九", "にじゅうきゅう", "nijuukyuu")

    def test_compound_uses_canonical_digit_reading(self):
        assert forms(44) == ("四十四", "よんじゅうよん", "yonjuuyon")
        assert forms(77) == ("七十七", "ななじゅうなな", "nanajuunana")

    def test_all_compounds_start_with_their_decade(self):
        for value in range(21, 100):
            decade = DIGIT_BAND[value // 10 * 10]
            assert convert(value).kanji.startswith(decade.kanji)
            assert convert(value).romaji.startswith(decade.romaji)


class TestHundredsAndThousands:
    """Tests for the hundreds and thousands positions."""

    def test_hundred_and_one(self):
        # No connector between the period head and the remainder
        assert forms(101) == ("百一", "ひゃくいち", "hyakuichi")

    def test_hundreds_sound_changes(self):
        assert forms(300) == ("三百", "さんびゃく", "sanbyaku")
        assert forms(600) == ("六百", "ろっぴゃく", "roppyaku")
        assert forms(800) == ("八百", "はっぴゃく", "happyaku")

    def test_regular_hundreds(self):
        assert forms(200) == ("二百", "にひゃく", "nihyaku")
        assert forms(400) == ("四百", "よんひゃく", "yonhyaku")
        assert forms(900) == ("九百", "きゅうひゃく", "kyuuhyaku")

    def test_thousands(self):
        assert forms(1000) == ("千", "せん", "sen")
        assert forms(2000) == ("二千", "にせん", "nisen")
        assert forms(6000) == ("六千", "ろくせん", "rokusen")

    def test_thousands_sound_changes(self):
        assert forms(3000) == ("三千", "さんぜん", "sanzen")
        assert forms(8000) == ("八千", "はっせん", "hassen")

    def test_complex_numbers(self):
        assert forms(5726) == ("五千七百二十六", "ごせんななひゃくにじゅうろく",
                               "gosennanahyakunijuuroku")
        assert forms(2468) == ("二千四百六十八", "にせんよんひゃくろくじゅうはち",
                               "nisenyonhyakurokujuuhachi")
        assert forms(1001) == ("千一", "せんいち", "senichi")
        assert forms(3860) == ("三千八百六十", "さんぜんはっぴゃくろくじゅう",
                               "sanzenhappyakurokujuu")

    def test_sound_change_table_is_consulted(self):
        for (scale, digit), entry in SOUND_CHANGES.items():
            assert convert(scale * digit).hiragana == entry.hiragana


class TestLargeNumbers:
    """Tests for the four-digit periods 万, 億 and 兆."""

    def test_ten_thousands(self):
        assert forms(10000) == ("一万", "いちまん", "ichiman")
        assert forms(25000) == ("二万五千", "にまんごせん", "nimangosen")
        assert forms(10005) == ("一万五", "いちまんご", "ichimango")

    def test_period_coefficient_read_as_whole(self):
        assert forms(100000) == ("十万", "じゅうまん", "juuman")
        assert forms(1500000) == ("百五十万", "ひゃくごじゅうまん", "hyakugojuuman")
        assert forms(3000000) == ("三百万", "さんびゃくまん", "sanbyakuman")
        assert forms(10000000) == ("千万", "せんまん", "senman")

    def test_one_million_fixed_point(self):
        assert forms(1000000) == ("百万", "ひゃくまん", "hyakuman")

    def test_hundred_millions(self):
        assert forms(100000000) == ("一億", "いちおく", "ichioku")
        assert forms(100000010) == ("一億十", "いちおくじゅう", "ichiokujuu")
        assert convert(123456789).kanji == "一億二千三百四十五万六千七百八十九"

    def test_trillion_fixed_point(self):
        assert forms(10 ** 12) == ("一兆", "いっちょう", "icchou")

    def test_trillions(self):
        assert forms(2 * 10 ** 12) == ("二兆", "にちょう", "nichou")
        assert convert(5 * 10 ** 12 + 3000).kanji == "五兆三千"

    def test_largest_value(self):
        result = convert(MAX_VALUE)
        assert result.kanji == "九百九十九兆九千九百九十九億九千九百九十九万九千九百九十九"
        assert result.romaji.startswith("kyuuhyakukyuujuukyuuchou")
        assert result.romaji.endswith("kyuusenkyuuhyakukyuujuukyuu")

    def test_periods_are_base_ten_thousand(self):
        # 12,345,678 is 1234万5678, not 12 million 345 thousand
        assert convert(12345678).kanji == "千二百三十四万五千六百七十八"


class TestUnknown:
    """Tests for the sentinel returned on unconvertible input."""

    @pytest.mark.parametrize("value", [-1, -1000, MAX_VALUE + 1, 10 ** 15, 10 ** 20])
    def test_out_of_range(self, value):
        result = convert(value)
        assert result.is_unknown
        assert (result.kanji, result.hiragana, result.romaji) == (UNKNOWN_MARKER,) * 3
        assert result.value == value

    @pytest.mark.parametrize("value", [1.5, 10.0, "12", None, True, False])
    def test_not_an_integer(self, value):
        assert convert(value).is_unknown

    def test_sentinel_helpers(self):
        assert is_unknown(UNKNOWN)
        assert UNKNOWN.is_unknown
        assert not is_unknown(convert(1))


class TestProperties:
    """Domain-wide properties of the converter."""

    def test_small_range_total(self):
        for value in range(0, 20001):
            assert not convert(value).is_unknown, value

    def test_period_boundaries_total(self):
        for unit in MAGNITUDE_UNITS:
            for k in range(1, 10):
                for value in (unit.scale * k - 1, unit.scale * k, unit.scale * k + 1):
                    if value <= MAX_VALUE:
                        assert not convert(value).is_unknown, value

    def test_spread_values_total(self, spread_values):
        for value in spread_values:
            assert not convert(value).is_unknown, value

    def test_deterministic(self, spread_values):
        for value in spread_values[:100]:
            assert convert(value) == convert(value)

    def test_no_written_leading_one_before_hundred_or_thousand(self, spread_values):
        for value in [*range(0, 20001), *spread_values]:
            kanji = convert(value).kanji
            assert "一百" not in kanji
            assert "一千" not in kanji

    def test_kanji_round_trips_through_parser(self, spread_values):
        for value in [*range(0, 3001), *spread_values, *FIXED_POINTS]:
            assert parse_kanji(convert(value).kanji) == value

    def test_romaji_is_ascii(self, spread_values):
        for value in spread_values:
            assert convert(value).romaji.isascii()


class TestParseKanji:
    """Tests for parse_kanji."""

    def test_canonical_forms(self):
        assert parse_kanji("零") == 0
        assert parse_kanji("十") == 10
        assert parse_kanji("百一") == 101
        assert parse_kanji("五千七百二十六") == 5726

    def test_optional_leading_one(self):
        assert parse_kanji("一千") == 1000
        assert parse_kanji("一百") == 100
        assert parse_kanji("一千万") == 10000000

    def test_zero_glyph(self):
        assert parse_kanji("〇") == 0

    @pytest.mark.parametrize("text", [
        "",          # empty
        "5",         # arabic digits are not kanji numerals
        "五七",      # digits without a unit
        "十十",      # remainder too large
        "十五百",    # coefficient too large for 百
        "〇十",      # zero coefficient
        "一万一万",  # repeated period
    ])
    def test_malformed(self, text):
        with pytest.raises(NotANumber):
            parse_kanji(text)

    def test_error_message(self):
        with pytest.raises(NotANumber) as exc_info:
            parse_kanji("五x")
        assert exc_info.value.text == "五x"
        assert "Invalid character" in exc_info.value.reason


class TestUtilities:
    """Tests for the enumeration and display helpers."""

    def test_tabulated_values(self):
        values = tabulated_values()
        assert values == tuple(range(0, 21)) + (30, 40, 50, 60, 70, 80, 90, 100)

    def test_supported_numbers(self):
        assert supported_numbers() == tuple(range(0, 101))

    def test_format_with_commas(self):
        assert format_with_commas(0) == "0"
        assert format_with_commas(999) == "999"
        assert format_with_commas(1234567) == "1,234,567"

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            DIGIT_BAND[21] = NumeralTriple(21, "x", "x", "x")
