"""
Word rules for the One True Dialect of Pig Latin (OTDoPL).

OTDoPL rules:
    - The general suffix is "ay": the consonants before the first vowel
      move to the end of the word, followed by "ay".
    - Words starting with a vowel keep their letters in place and take
      the suffix "hay".
    - A "u" directly after a "q" is treated as part of the consonant
      cluster ("quaint" → "aintquay").

Only a, e, i, o and u count as vowels; "y" is always a consonant.

Example:
    >>> from pig_latin.word import translate_word
    >>> translate_word("first")
    'irstfay'
    >>> translate_word("apple")
    'applehay'
    >>> translate_word("Query")
    'Eryquay'
"""

from __future__ import annotations

from pig_latin._casing import apply_casing_like

__all__ = [
    "SUFFIX",
    "VOWEL_SUFFIX",
    "VOWELS",
    "consonant_prefix_length",
    "is_vowel",
    "translate_word",
]

# =============================================================================
# Character Classification
# =============================================================================

VOWELS = frozenset("aeiouAEIOU")

SUFFIX = "ay"
VOWEL_SUFFIX = "hay"


def is_vowel(char: str) -> bool:
    """Check if character is an ASCII vowel (uncased)."""
    return char in VOWELS


def consonant_prefix_length(word: str) -> int:
    """
    Return the number of leading characters that move to the end of `word`.

    This is the run of non-vowels at the start of the word, extended by one
    when the run ends in "q" and the next character is "u".

    Args:
        word: A single word

    Returns:
        Length of the consonant prefix, 0 for vowel-initial words

    Example:
        >>> consonant_prefix_length("street")
        3
        >>> consonant_prefix_length("squeal")
        3
        >>> consonant_prefix_length("rhythm")
        6
    """
    cut = 0
    for char in word:
        if is_vowel(char):
            break
        cut += 1

    # qu digraph
    if 0 < cut < len(word) and word[cut - 1] in "qQ" and word[cut] in "uU":
        cut += 1
    return cut


# =============================================================================
# Word Translation
# =============================================================================


def translate_word(word: str) -> str:
    """
    Translate a single English word into Pig Latin.

    The input is assumed to be a single word: no whitespace and no ASCII
    punctuation. This is not checked, and the result for other input is
    unspecified; use `pig_latin.translate` for arbitrary text. An empty
    string translates to an empty string.

    Vowel-initial words keep their casing and get a lowercase "hay". For
    all other words the casing of the original is copied position by
    position onto the rearranged word, so the suffix follows the case of
    the word's last letter ("QUERY" → "ERYQUAY").

    Args:
        word: A single English word

    Returns:
        The word in Pig Latin

    Example:
        >>> translate_word("Rar")
        'Array'
        >>> translate_word("qUeRy")
        'eRyQuay'
    """
    if not word:
        return word
    if is_vowel(word[0]):
        return word + VOWEL_SUFFIX

    cut = consonant_prefix_length(word)
    translated = word[cut:] + word[:cut] + SUFFIX
    return apply_casing_like(translated, word)
