"""
spaCy integration for pig-latin.

Provides a pipeline component that attaches Pig Latin translations to
docs and tokens.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("en")
    >>> nlp.add_pipe("pig_latin_translator")
    >>> doc = nlp("Hello world!")
    >>> doc._.pig_latin
    'Ellohay orldway!'
    >>> doc[0]._.pig_latin
    'Ellohay'
"""

import logging
from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from pig_latin.text._translator import PigLatinTranslator

__all__ = [
    "PigLatinComponent",
    "create_pig_latin_translator",
    "get_translator_pipe",
]

logger = logging.getLogger(__name__)


@Language.factory(
    "pig_latin_translator",
    default_config={"lemmas": True},
    assigns=["doc._.pig_latin", "token._.pig_latin", "token._.pig_latin_lemma"],
)
def create_pig_latin_translator(
    nlp: Language,
    name: str,
    lemmas: bool = True,
) -> "PigLatinComponent":
    """Create a Pig Latin translator pipeline component."""
    return PigLatinComponent(nlp, name, lemmas=lemmas)


class PigLatinComponent:
    """
    spaCy pipeline component for Pig Latin translation.

    Extensions:
        - Doc._.pig_latin: Full translated text.
        - Token._.pig_latin: Translated token text.
        - Token._.pig_latin_lemma: Translated lemma (None if lemmas=False).

    Punctuation and whitespace tokens translate to themselves.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        lemmas: bool = True,
    ) -> None:
        self.name = name
        self.lemmas = lemmas
        self._translator = PigLatinTranslator()

        for cls in (Doc, Token):
            if not cls.has_extension("pig_latin"):
                cls.set_extension("pig_latin", default=None)
                logger.debug("Registered %s._.pig_latin", cls.__name__)
        if not Token.has_extension("pig_latin_lemma"):
            Token.set_extension("pig_latin_lemma", default=None)
            logger.debug("Registered Token._.pig_latin_lemma")

    def __call__(self, doc: Doc) -> Doc:
        doc._.pig_latin = self._translator.translate(doc.text)

        for token in doc:
            token._.pig_latin = self._translator.translate(token.text)
            if self.lemmas:
                token._.pig_latin_lemma = self._translator.translate(token.lemma_)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "PigLatinComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "PigLatinComponent":
        return self


def get_translator_pipe(nlp: Language) -> Optional[PigLatinComponent]:
    """Get the Pig Latin translator component from a pipeline."""
    if "pig_latin_translator" in nlp.pipe_names:
        return nlp.get_pipe("pig_latin_translator")
    return None
