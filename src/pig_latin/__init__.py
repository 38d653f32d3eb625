"""
pig-latin: English to Pig Latin translation.

Implements the One True Dialect of Pig Latin (OTDoPL): the general suffix
is "ay", vowel-initial words take "hay", and a "u" after "q" moves with
the consonants. Letter casing and all punctuation and whitespace are
preserved.

Basic usage:
    >>> from pig_latin import translate
    >>> translate("This is all quite easy, is it not?")
    'Isthay ishay allhay itequay easyhay, ishay ithay otnay?'

Single words:
    >>> from pig_latin import translate_word
    >>> translate_word("QUERY")
    'ERYQUAY'

Span-by-span breakdown:
    >>> from pig_latin import translate_detailed
    >>> [s.translated for s in translate_detailed("Hello world!").spans]
    ['Ellohay', ' ', 'orldway', '!']
"""

from pig_latin._casing import CharCase, apply_casing_like
from pig_latin.word import is_vowel, translate_word
from pig_latin.text import (
    PigLatinTranslator,
    Span,
    TranslationResult,
    is_delimiter,
    split_spans,
    translate,
    translate_detailed,
)

__version__ = "0.1.0"
__all__ = [
    "translate",
    "translate_word",
    "translate_detailed",
    "apply_casing_like",
    "CharCase",
    "PigLatinTranslator",
    "TranslationResult",
    "Span",
    "is_vowel",
    "is_delimiter",
    "split_spans",
]


# Lazy import for the spaCy component (only when spacy is installed)
def __getattr__(name: str):
    if name == "PigLatinComponent":
        try:
            from pig_latin.spacy import PigLatinComponent
            return PigLatinComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install pig-latin[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
