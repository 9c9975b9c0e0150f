"""String preprocessing applied before comparison.

These are the helpers every scorer shares:

- ``ascii_only`` drops code points outside the ASCII range.
- ``full_process`` lowercases, collapses every run of non-alphanumeric
  characters into a single space and trims the result.
- ``sort_tokens`` builds the whitespace-token-sorted form used by
  ``token_sort_ratio``.
- ``percent_round`` maps a ratio in [0, 1] onto the integer scale 0-100.

Lengths everywhere in fuzzyratio are counted in code points (``len(s)``).
"""

import math
import re
import unicodedata

_WHITESPACE = re.compile(r"\s+")


def ascii_only(s: str) -> str:
    """Remove all non-ASCII characters from ``s``.

    Example:
        >>> ascii_only("Camarões assados")
        'Camares assados'
    """
    return "".join(c for c in s if ord(c) < 128)


def _is_word_char(c: str) -> bool:
    # Combining marks belong to the word they modify (Indic vowel signs,
    # decomposed accents). Underscore is not alphanumeric.
    return c.isalnum() or unicodedata.category(c).startswith("M")


def full_process(s: str, strip_non_ascii: bool = False) -> str:
    """Normalize a string for comparison.

    Args:
        s: String to process
        strip_non_ascii: Remove non-ASCII characters before anything else

    Returns:
        The lowercased string where each run of non-alphanumeric characters
        (punctuation, emoji, whitespace) became a single space, with leading
        and trailing whitespace removed. Combining marks are kept with the
        letter they follow.

    Example:
        >>> full_process("  C'est la vie!  ")
        'c est la vie'
        >>> full_process("Ça va?", strip_non_ascii=True)
        'a va'
    """
    if strip_non_ascii:
        s = ascii_only(s)
    s = "".join(c if _is_word_char(c) else " " for c in s)
    return _WHITESPACE.sub(" ", s).lower().strip()


def sort_tokens(s: str, force_ascii: bool, full_process: bool = True) -> str:
    """Sort the whitespace-separated tokens of ``s`` by code point.

    Example:
        >>> sort_tokens("  whitespace  also works", force_ascii=False)
        'also whitespace works'
    """
    ts = _full_process(s) if full_process else s
    if force_ascii:
        ts = ascii_only(ts)
    return " ".join(sorted(ts.split())).strip()


def percent_round(value: float) -> int:
    """Scale a ratio to a percentage and round half away from zero.

    ``round()`` rounds half to even, which would score 0.125 as 12; the
    scores here round 12.5 up to 13.

    Example:
        >>> percent_round(2 / 3)
        67
        >>> percent_round(0.125)
        13
    """
    return round_half_up(100 * value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


# sort_tokens' keyword argument shadows the module-level function
_full_process = full_process


__all__ = ["ascii_only", "full_process", "sort_tokens", "percent_round", "round_half_up"]
