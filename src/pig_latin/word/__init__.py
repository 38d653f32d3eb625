"""
Single-word translation submodule.

Re-exports the word rules of the One True Dialect of Pig Latin (OTDoPL).
"""

from pig_latin.word._rules import (
    SUFFIX,
    VOWEL_SUFFIX,
    VOWELS,
    consonant_prefix_length,
    is_vowel,
    translate_word,
)

__all__ = [
    "SUFFIX",
    "VOWEL_SUFFIX",
    "VOWELS",
    "consonant_prefix_length",
    "is_vowel",
    "translate_word",
]
