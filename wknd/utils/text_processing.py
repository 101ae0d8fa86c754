"""Text helpers for authored content values."""

from typing import Iterable, List, Optional

# Characters str.isspace() accepts that authored content keeps as visible text:
# no-break spaces and NEXT LINE (U+0085)
NON_BREAKING_WHITESPACE = frozenset("\u00a0\u2007\u202f\u0085")


def is_whitespace(char: str) -> bool:
    """
    Check whether a single character counts as whitespace in authored content.

    Separators, tabs, line breaks and the ASCII file/group/record/unit separators
    are whitespace; no-break spaces are not.

    Example:
        >>> is_whitespace(" "), is_whitespace("\\x1f"), is_whitespace("\\u00a0")
        (True, True, False)
    """
    return char.isspace() and char not in NON_BREAKING_WHITESPACE


def is_blank(text: Optional[str]) -> bool:
    """
    Check whether a text value is absent, empty, or whitespace only.

    A value made only of no-break spaces is not blank.

    Args:
        text: Text to check (None allowed)

    Returns:
        True if text is None or contains only whitespace

    Example:
        >>> is_blank(None), is_blank("  "), is_blank(" Jane "), is_blank("\\u00a0")
        (True, True, False, False)
    """
    return text is None or all(is_whitespace(char) for char in text)


def sorted_copy(values: Optional[Iterable[str]]) -> List[str]:
    """
    Return a new list with values sorted in ascending lexicographic order.

    Args:
        values: Text values (None treated as empty)

    Returns:
        New sorted list, never None
    """
    if values is None:
        return []
    return sorted(values)
