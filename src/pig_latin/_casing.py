"""
Casing transfer between strings.

Copies the per-position UPPER/lower pattern of one string onto another
string of possibly different length. Used to re-case translated words so
that "Query" comes out as "Eryquay" and "QUERY" as "ERYQUAY".

Pure Python, no external dependencies.
"""

from __future__ import annotations

from enum import Enum

__all__ = ["CharCase", "apply_casing_like"]


class CharCase(Enum):
    """Letter-case class of a single codepoint."""

    LOWER = "lower"
    UPPER = "upper"
    INDETERMINATE = "indeterminate"

    @classmethod
    def of(cls, char: str) -> "CharCase":
        """Classify `char` using Unicode case properties (not ASCII-only)."""
        if char.islower():
            return cls.LOWER
        if char.isupper():
            return cls.UPPER
        return cls.INDETERMINATE

    def apply(self, char: str) -> str:
        """
        Render `char` in this case.

        The result may be longer than one codepoint (ß → SS, ﬁ → FI).
        INDETERMINATE leaves the character untouched.
        """
        if self is CharCase.UPPER:
            return char.upper()
        if self is CharCase.LOWER:
            return char.lower()
        return char


def apply_casing_like(text: str, casing_of: str) -> str:
    """
    Transfer the sequence of upper/lower casing from one string to another.

    Walks `text` and `casing_of` in parallel. Each character of `text` is
    rendered in the case of the character at the same position in
    `casing_of`; digits, punctuation and other uncased characters leave
    the `text` character as it is. Once `casing_of` runs out, the last case
    seen keeps applying to the rest of `text`.

    Args:
        text: String whose content is kept
        casing_of: String whose casing pattern is copied

    Returns:
        `text` re-cased like `casing_of`

    Example:
        >>> apply_casing_like("fOObar", "BarBaz")
        'FooBar'
        >>> apply_casing_like("AbCd", "Ab")
        'Abcd'
        >>> apply_casing_like("Straße", "TROLOLOLO")
        'STRASSE'
    """
    # Case conversion can change the length of a character, so the result
    # is built fresh instead of being patched in place.
    result = []
    target = CharCase.INDETERMINATE
    for idx, char in enumerate(text):
        if idx < len(casing_of):
            target = CharCase.of(casing_of[idx])
        result.append(target.apply(char))
    return "".join(result)
