"""Pydantic models for Furigana Fitter API requests and responses."""

from pydantic import BaseModel, Field
from typing import Literal


# ============================================================================
# Request Models
# ============================================================================


class FitRequest(BaseModel):
    """Request body for fitting furigana onto a conjugated word."""
    word: str = Field(..., max_length=100, description="Conjugated word as written, e.g. 行った")
    furigana: str = Field(..., max_length=500, description="Furigana of the dictionary form, e.g. [行|い]く")


class ParseRequest(BaseModel):
    """Request body for parsing bracketed furigana."""
    furigana: str = Field(..., max_length=500, description="Furigana in bracketed notation")


# ============================================================================
# Response Components
# ============================================================================


class SegmentModel(BaseModel):
    """Single segment of a parsed annotation."""
    type: Literal["kana", "kanji"] = Field(..., description="Segment kind")
    text: str = Field(..., description="Kana text or kanji literal")
    readings: list[str] = Field(default_factory=list, description="Readings of a kanji segment")


class FittingErrorDetail(BaseModel):
    """Error payload returned when the word does not fit the furigana."""
    error: Literal["furigana_differs", "word_too_long", "word_too_short"]
    message: str = Field(..., description="Human-readable description")


# ============================================================================
# Response Models
# ============================================================================


class FitResponse(BaseModel):
    """Response for /fit."""
    word: str = Field(..., description="Input conjugated word")
    furigana: str = Field(..., description="Furigana fitted onto the word")
    reading: str = Field(..., description="Reading of the word in hiragana")


class ParseResponse(BaseModel):
    """Response for /parse."""
    segments: list[SegmentModel]
    kanji: str = Field(..., description="Text with readings stripped")
    kana: str = Field(..., description="Text with kanji replaced by readings")
