"""Fit the furigana of a dictionary form onto a conjugated word.

The dictionary-form annotation is broken into single-reading units, which are
matched greedily against the conjugated word from left to right. Conjugation
only changes the trailing kana, so a final kana unit absorbs whatever is left
of the word. Kanji the word spells in kana fall back to their reading. The
matched units are then merged back into minimal annotation segments.

    >>> fit_furigana("行った", "[行|い]く")
    '[行|い]った'
    >>> fit_furigana("引っかかる", "[引|ひ]っ[掛|か]かる")
    '[引|ひ]っかかる'
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from services.errors import FittingError
from services.furigana import (
    Kana,
    Kanji,
    Segment,
    encode_furigana,
    kanji_str,
    parse_furigana,
)
from services.irregular import fit_irregular_verb

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KanaUnit:
    """Kana with no kanji attached."""

    text: str


@dataclass(frozen=True, slots=True)
class KanjiUnit:
    """One reading group: a kanji literal and its single reading."""

    literal: str
    reading: str


ReadingUnit = KanaUnit | KanjiUnit


# ============================================================================
# Decomposition
# ============================================================================


def break_up_furigana(segments: Iterable[Segment]) -> list[ReadingUnit]:
    """Flatten parsed segments into single-reading units.

    Kanji keep the grouping chosen by the notation, e.g. ``[今日|きょう]``
    stays one unit while ``[音楽|おん|がく]`` becomes two.
    """
    units: list[ReadingUnit] = []
    for segment in segments:
        match segment:
            case Kana(text=text):
                units.append(KanaUnit(text))
            case Kanji():
                units.extend(
                    KanjiUnit(literal=literal, reading=reading)
                    for literal, reading in segment.reading_groups()
                )
    return units


# ============================================================================
# Alignment
# ============================================================================


def fit_units_onto_word(
    units: list[ReadingUnit],
    word: str,
) -> list[ReadingUnit] | FittingError:
    """Match units against ``word`` left to right.

    Args:
        units: Units of the dictionary form, in order
        word: The conjugated word to fit

    Returns:
        The matched units (kanji written in kana become KanaUnit), or the
        reason the word does not fit.
    """
    remaining = word
    fitted: list[ReadingUnit] = []
    last_index = len(units) - 1

    for i, unit in enumerate(units):
        if not remaining:
            return FittingError.WORD_TOO_SHORT

        match unit:
            case KanjiUnit(literal=literal, reading=reading):
                if remaining.startswith(literal):
                    remaining = remaining[len(literal):]
                    fitted.append(unit)
                elif remaining.startswith(reading):
                    remaining = remaining[len(reading):]
                    fitted.append(KanaUnit(reading))
                else:
                    return FittingError.FURIGANA_DIFFERS

            case KanaUnit(text=text):
                # Only the trailing kana may differ from the dictionary form
                if i == last_index:
                    fitted.append(KanaUnit(remaining))
                    remaining = ""
                elif remaining.startswith(text):
                    remaining = remaining[len(text):]
                    fitted.append(unit)
                else:
                    return FittingError.FURIGANA_DIFFERS

    if remaining:
        return FittingError.WORD_TOO_LONG

    return fitted


# ============================================================================
# Rebuilding
# ============================================================================


def rebuild_segments(units: Iterable[ReadingUnit]) -> list[Segment]:
    """Merge adjacent units of the same kind into annotation segments.

    Neighbouring kana join into one run; neighbouring kanji join into one
    literal that keeps a reading per group.
    """
    segments: list[Segment] = []
    kana_run: str | None = None
    kanji_run: tuple[str, list[str]] | None = None

    for unit in units:
        match unit:
            case KanaUnit(text=text):
                if kanji_run is not None:
                    segments.append(Kanji(kanji_run[0], tuple(kanji_run[1])))
                    kanji_run = None
                kana_run = text if kana_run is None else kana_run + text

            case KanjiUnit(literal=literal, reading=reading):
                if kana_run is not None:
                    segments.append(Kana(kana_run))
                    kana_run = None
                if kanji_run is None:
                    kanji_run = (literal, [reading])
                else:
                    kanji_run = (kanji_run[0] + literal, kanji_run[1] + [reading])

    if kana_run is not None:
        segments.append(Kana(kana_run))
    if kanji_run is not None:
        segments.append(Kanji(kanji_run[0], tuple(kanji_run[1])))

    return segments


# ============================================================================
# Public API
# ============================================================================


def fit_furigana(word: str, raw_furigana: str) -> str | FittingError:
    """Re-annotate a conjugated word using its dictionary-form furigana.

    Args:
        word: The word as written, e.g. 行った
        raw_furigana: Furigana of the dictionary form, e.g. [行|い]く

    Returns:
        The annotation for ``word`` in bracketed notation, or a FittingError
        when the word cannot be a form of the annotated dictionary word.

    Examples:
        >>> fit_furigana("来た", "[来|く]る")
        '[来|き]た'
        >>> fit_furigana("音楽あ", "[音楽|おん|がく]")
        <FittingError.WORD_TOO_LONG: 'word_too_long'>
    """
    segments = parse_furigana(raw_furigana)

    irregular = fit_irregular_verb(word, kanji_str(segments))
    if irregular is not None:
        logger.debug("Fitted irregular verb %s -> %s", word, irregular)
        return irregular

    fitted = fit_units_onto_word(break_up_furigana(segments), word)
    if isinstance(fitted, FittingError):
        logger.debug("Cannot fit %s onto %s: %s", raw_furigana, word, fitted.name)
        return fitted

    return encode_furigana(rebuild_segments(fitted))
