"""
Text-level Pig Latin translation.

Splits text into alternating word and separator spans, translates the
words and puts the separators back unchanged. Whitespace, layout and
punctuation survive translation exactly.

A word is a maximal run of characters that are neither ASCII punctuation
nor whitespace; a separator is a maximal run of characters that are.

Example:
    >>> from pig_latin.text import translate
    >>> translate("Hello world!")
    'Ellohay orldway!'

    >>> from pig_latin.text import PigLatinTranslator
    >>> translator = PigLatinTranslator()
    >>> translator.translate("Early-Adopters are ecstatic?")
    'Earlyhay-Adoptershay arehay ecstatichay?'
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from itertools import groupby
from typing import Iterator, Optional

from pig_latin.word._rules import translate_word

__all__ = [
    "PigLatinTranslator",
    "Span",
    "TranslationResult",
    "is_delimiter",
    "split_spans",
    "translate",
    "translate_detailed",
]

# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Span:
    """A word or separator run of the input, with its translation."""

    start: int
    end: int
    original: str
    translated: str
    is_word: bool


@dataclass
class TranslationResult:
    """Detailed result from translation."""

    original: str
    translated: str
    spans: list[Span] = field(default_factory=list)

    @property
    def words(self) -> list[Span]:
        """The word spans, in order."""
        return [span for span in self.spans if span.is_word]


# =============================================================================
# Tokenization
# =============================================================================

_PUNCTUATION = frozenset(string.punctuation)

# str.isspace() also accepts the ASCII information separators, which are
# not Unicode White_Space.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def is_delimiter(char: str) -> bool:
    """Check if character ends a word (ASCII punctuation or Unicode whitespace)."""
    return char in _PUNCTUATION or (char.isspace() and char not in _NOT_WHITESPACE)


def split_spans(text: str) -> Iterator[Span]:
    """
    Split text into maximal word and separator spans.

    Spans come out in order and are never empty. `translated` is left equal
    to `original`; the translator fills it in for words.

    Args:
        text: Arbitrary text

    Yields:
        Span for each run, with character offsets into `text`

    Example:
        >>> [s.original for s in split_spans("Hi, you!")]
        ['Hi', ', ', 'you', '!']
    """
    position = 0
    for delimited, chars in groupby(text, key=is_delimiter):
        chunk = "".join(chars)
        yield Span(
            start=position,
            end=position + len(chunk),
            original=chunk,
            translated=chunk,
            is_word=not delimited,
        )
        position += len(chunk)


# =============================================================================
# Main Translator Class
# =============================================================================


class PigLatinTranslator:
    """
    Translator from English to OTDoPL Pig Latin.

    Holds no state, so one instance can be shared freely, including across
    threads.

    Example:
        >>> translator = PigLatinTranslator()
        >>> translator.translate("This is pigs latin.")
        'Isthay ishay igspay atinlay.'
    """

    def translate(self, text: str) -> str:
        """
        Translate arbitrary English text into Pig Latin.

        Args:
            text: English text

        Returns:
            Translated text with all separators preserved
        """
        if not text:
            return text
        return "".join(
            translate_word(span.original) if span.is_word else span.original
            for span in split_spans(text)
        )

    def translate_word(self, word: str) -> str:
        """
        Translate a single word.

        See `pig_latin.word.translate_word`; input is not checked for
        delimiters.
        """
        return translate_word(word)

    def translate_detailed(self, text: str) -> TranslationResult:
        """
        Translate with the span-by-span breakdown.

        Args:
            text: English text

        Returns:
            TranslationResult with original, translated, and every span

        Example:
            >>> translator = PigLatinTranslator()
            >>> result = translator.translate_detailed("pigs!")
            >>> result.translated
            'igspay!'
            >>> result.words[0].translated
            'igspay'
        """
        spans = []
        for span in split_spans(text):
            if span.is_word:
                span.translated = translate_word(span.original)
            spans.append(span)
        return TranslationResult(
            original=text,
            translated="".join(span.translated for span in spans),
            spans=spans,
        )


# =============================================================================
# Module-level Convenience Functions
# =============================================================================

# Singleton instance for convenience functions
_default_translator: Optional[PigLatinTranslator] = None


def _get_default_translator() -> PigLatinTranslator:
    global _default_translator
    if _default_translator is None:
        _default_translator = PigLatinTranslator()
    return _default_translator


def translate(text: str) -> str:
    """
    Translate English text into Pig Latin.

    Convenience function that uses a shared translator instance.

    Args:
        text: English text

    Returns:
        Translated text

    Example:
        >>> translate("Question:")
        'Estionquay:'
    """
    return _get_default_translator().translate(text)


def translate_detailed(text: str) -> TranslationResult:
    """Translate text, returning the span-by-span breakdown."""
    return _get_default_translator().translate_detailed(text)
