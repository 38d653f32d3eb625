"""
Text translation submodule.

Re-exports the tokenizer, the translator and its result types.
"""

from pig_latin.text._translator import (
    PigLatinTranslator,
    Span,
    TranslationResult,
    is_delimiter,
    split_spans,
    translate,
    translate_detailed,
)

__all__ = [
    "PigLatinTranslator",
    "Span",
    "TranslationResult",
    "is_delimiter",
    "split_spans",
    "translate",
    "translate_detailed",
]
