"""Irregular verbs whose stem reading changes under conjugation.

来る and 為る keep their kanji while the reading of that kanji moves between
く/き/こ and す/し/さ, so the reading cannot be recovered by aligning the
dictionary form against the conjugated word. They are fitted from a fixed
rule table instead.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IrregularVerb:
    """Rule table for one irregular verb, keyed by its dictionary form."""

    dictionary_form: str
    dictionary_furigana: str
    rules: tuple[tuple[str, str], ...]  # (word prefix, stem reading), first match wins
    default_reading: str

    @property
    def stem(self) -> str:
        return self.dictionary_form[0]

    def stem_reading(self, word: str) -> str:
        for prefix, reading in self.rules:
            if word.startswith(prefix):
                return reading
        return self.default_reading

    def fit(self, word: str) -> str:
        """Annotate any form of this verb. Never fails.

        Examples:
            >>> IRREGULAR_VERBS["来る"].fit("来た")
            '[来|き]た'
        """
        if word == self.dictionary_form:
            return self.dictionary_furigana
        return f"[{self.stem}|{self.stem_reading(word)}]{word[1:]}"


IRREGULAR_VERBS: dict[str, IrregularVerb] = {
    "来る": IrregularVerb(
        dictionary_form="来る",
        dictionary_furigana="[来|く]る",
        rules=(
            ("来ま", "き"),   # 来ます
            ("来て", "き"),   # 来て
            ("来た", "き"),   # 来た
        ),
        default_reading="こ",  # 来ない, 来い, 来られる
    ),
    "為る": IrregularVerb(
        dictionary_form="為る",
        dictionary_furigana="[為|す]る",
        rules=(
            ("為ま", "し"),   # 為ます
            ("為て", "し"),   # 為て
            ("為た", "し"),   # 為た
            ("為ろ", "し"),   # 為ろ
        ),
        default_reading="さ",  # 為れる, 為せる
    ),
}


def fit_irregular_verb(word: str, dictionary_form: str) -> str | None:
    """Fit ``word`` if ``dictionary_form`` is a known irregular verb.

    Returns None when the general alignment should be used instead.
    """
    verb = IRREGULAR_VERBS.get(dictionary_form)
    if verb is None:
        return None
    return verb.fit(word)
