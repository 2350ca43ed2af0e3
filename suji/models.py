"""
Pydantic models for suji responses.

These give a presentation layer (a web page, an API endpoint) a serialisable
view of a converted number and of an answer check.

Usage:
    from suji import convert, check_answer
    from suji.models import NumeralResult

    NumeralResult.from_triple(convert(5726)).model_dump()
    check_answer("gosen", convert(5000)).model_dump_json()
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from suji.numbers import NumeralTriple, format_with_commas


class ReadingResult(BaseModel):
    """An alternative reading accepted as an answer."""
    hiragana: str = Field(..., description="Hiragana reading, e.g. 'し'")
    romaji: str = Field(..., description="Romaji reading, e.g. 'shi'")


class NumeralResult(BaseModel):
    """
    Pydantic model for one converted number.

    ``known`` is False for the unknown triple; its text fields are then "?".
    """
    number: Optional[int] = Field(None, description="Source number")
    formatted: str = Field("", description="Number with thousands separators")
    kanji: str = Field(..., description="Kanji numeral, e.g. '五千七百二十六'")
    hiragana: str = Field(..., description="Hiragana reading")
    romaji: str = Field(..., description="Canonical romaji reading")
    alternatives: List[ReadingResult] = Field(
        default_factory=list, description="Other accepted readings"
    )
    known: bool = Field(True, description="False if the number could not be converted")

    @classmethod
    def from_triple(cls, triple: NumeralTriple) -> "NumeralResult":
        """Create NumeralResult from a NumeralTriple."""
        value = triple.value
        if isinstance(value, bool) or not isinstance(value, int):
            value = None
        return cls(
            number=value,
            formatted=format_with_commas(value) if value is not None else "",
            kanji=triple.kanji,
            hiragana=triple.hiragana,
            romaji=triple.romaji,
            alternatives=[
                ReadingResult(hiragana=r.hiragana, romaji=r.romaji)
                for r in triple.alternatives
            ],
            known=not triple.is_unknown,
        )


class AnswerCheck(BaseModel):
    """Outcome of checking a learner's answer against a number."""
    answer: str = Field(..., description="Answer as typed")
    normalized: str = Field(..., description="Answer after normalisation")
    correct: bool = Field(..., description="True if the answer was accepted")
    matched_form: Optional[str] = Field(
        None, description="'kanji', 'hiragana' or 'romaji' when correct"
    )
    expected: NumeralResult = Field(..., description="The number being asked")
