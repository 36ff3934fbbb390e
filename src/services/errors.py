"""Failure kinds for fitting furigana onto a word."""

from enum import Enum


class FittingError(Enum):
    """Why a dictionary-form annotation could not be fitted onto a word.

    Returned as a value from ``fit_furigana``, never raised.
    """

    FURIGANA_DIFFERS = "furigana_differs"
    WORD_TOO_LONG = "word_too_long"
    WORD_TOO_SHORT = "word_too_short"

    @property
    def message(self) -> str:
        """Short user-facing sentence describing the mismatch."""
        return _MESSAGES[self]

    def __str__(self) -> str:
        return self.message


_MESSAGES = {
    FittingError.FURIGANA_DIFFERS: "The furigana differs from the provided word",
    FittingError.WORD_TOO_LONG: "The word is too long to fit the furigana",
    FittingError.WORD_TOO_SHORT: "The word is too short to fit the furigana",
}
