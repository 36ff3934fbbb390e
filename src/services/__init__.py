"""Furigana fitter services module."""

from .errors import FittingError
from .fitting import (
    KanaUnit,
    KanjiUnit,
    ReadingUnit,
    break_up_furigana,
    fit_furigana,
    fit_units_onto_word,
    rebuild_segments,
)
from .furigana import (
    Kana,
    Kanji,
    Segment,
    encode_furigana,
    kana_str,
    kanji_str,
    parse_furigana,
)
from .irregular import IRREGULAR_VERBS, IrregularVerb, fit_irregular_verb

__all__ = [
    # Fitting
    "FittingError",
    "fit_furigana",
    "KanaUnit",
    "KanjiUnit",
    "ReadingUnit",
    "break_up_furigana",
    "fit_units_onto_word",
    "rebuild_segments",
    # Notation
    "Kana",
    "Kanji",
    "Segment",
    "encode_furigana",
    "kana_str",
    "kanji_str",
    "parse_furigana",
    # Irregular verbs
    "IRREGULAR_VERBS",
    "IrregularVerb",
    "fit_irregular_verb",
]
