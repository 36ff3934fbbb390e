"""Bracketed furigana notation.

Annotations are written as plain kana runs mixed with bracketed kanji groups:

    [行|い]く
    まき[散|ち]らす
    [音楽|おん|がく]

The first field inside the brackets is the kanji literal; the remaining
pipe-separated fields are its readings. A literal carrying one reading per
character is read character by character, otherwise the whole literal takes
the (joined) reading.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class Kana:
    """A run of text with no reading attached."""

    text: str


@dataclass(frozen=True, slots=True)
class Kanji:
    """A kanji literal with its ordered readings."""

    literal: str
    readings: tuple[str, ...]

    def reading_groups(self) -> list[tuple[str, str]]:
        """Split the literal into ``(kanji, reading)`` groups.

        Examples:
            >>> Kanji("音楽", ("おん", "がく")).reading_groups()
            [('音', 'おん'), ('楽', 'がく')]
            >>> Kanji("今日", ("きょう",)).reading_groups()
            [('今日', 'きょう')]
        """
        if len(self.readings) > 1 and len(self.readings) == len(self.literal):
            return list(zip(self.literal, self.readings))
        return [(self.literal, "".join(self.readings))]


Segment = Kana | Kanji


def _parse_bracket(text: str, start: int) -> tuple[Kanji, int] | None:
    """Parse a ``[literal|reading...]`` group opening at ``start``.

    Returns the segment and the index just past ``]``, or None when the
    bracket is not a well-formed group.
    """
    end = text.find("]", start + 1)
    if end == -1:
        return None

    body = text[start + 1:end]
    if "|" not in body or "[" in body:
        return None

    literal, *readings = body.split("|")
    return Kanji(literal=literal, readings=tuple(readings)), end + 1


def parse_furigana(text: str) -> list[Segment]:
    """Parse bracketed notation into segments.

    Malformed brackets are kept as plain text, so every string parses.

    Examples:
        >>> parse_furigana("[行|い]く")
        [Kanji(literal='行', readings=('い',)), Kana(text='く')]
    """
    segments: list[Segment] = []
    plain: list[str] = []
    i = 0

    while i < len(text):
        if text[i] == "[":
            parsed = _parse_bracket(text, i)
            if parsed is not None:
                if plain:
                    segments.append(Kana("".join(plain)))
                    plain = []
                segment, i = parsed
                segments.append(segment)
                continue
        plain.append(text[i])
        i += 1

    if plain:
        segments.append(Kana("".join(plain)))
    return segments


def kanji_str(segments: Iterable[Segment]) -> str:
    """Surface text of the annotation, readings stripped."""
    parts: list[str] = []
    for segment in segments:
        match segment:
            case Kana(text=text):
                parts.append(text)
            case Kanji(literal=literal):
                parts.append(literal)
    return "".join(parts)


def kana_str(segments: Iterable[Segment]) -> str:
    """Reading of the annotation, kanji replaced by their readings."""
    parts: list[str] = []
    for segment in segments:
        match segment:
            case Kana(text=text):
                parts.append(text)
            case Kanji(readings=readings):
                parts.append("".join(readings))
    return "".join(parts)


def encode_furigana(segments: Iterable[Segment]) -> str:
    """Serialize segments back to bracketed notation."""
    parts: list[str] = []
    for segment in segments:
        match segment:
            case Kana(text=text):
                parts.append(text)
            case Kanji(literal=literal, readings=()):
                parts.append(literal)
            case Kanji(literal=literal, readings=readings):
                parts.append(f"[{literal}|{'|'.join(readings)}]")
    return "".join(parts)
