"""Enums for fuzzyratio API."""

from enum import Enum


class Scorer(str, Enum):
    """Available scoring functions.

    This enum provides type-safe scorer selection for batch operations and
    the Polars namespace. String values are accepted wherever a Scorer is.

    Example:
        >>> from fuzzyratio import Scorer, best_matches
        >>> matches = best_matches(
        ...     ["new york mets", "new york yankees", "atlanta braves"],
        ...     "york mets",
        ...     scorer=Scorer.TOKEN_SET_RATIO,
        ...     limit=2
        ... )
    """

    RATIO = "ratio"
    """Indel-weighted similarity of the two processed strings"""

    PARTIAL_RATIO = "partial_ratio"
    """Best-aligned substring of the longer string against the shorter one"""

    TOKEN_SORT_RATIO = "token_sort_ratio"
    """Ratio after sorting whitespace tokens, insensitive to word order"""

    PARTIAL_TOKEN_SORT_RATIO = "partial_token_sort_ratio"
    """Partial ratio after sorting whitespace tokens"""

    TOKEN_SET_RATIO = "token_set_ratio"
    """Ratio of intersection/remainder token strings, insensitive to duplicates"""

    PARTIAL_TOKEN_SET_RATIO = "partial_token_set_ratio"
    """Partial ratio of intersection/remainder token strings"""

    WRATIO = "wratio"
    """Weighted combination of the above, picked by relative string length"""


class EditType(str, Enum):
    """Kinds of edit operation in an alignment of two sequences.

    The values match the tags used by ``difflib.SequenceMatcher.get_opcodes``.
    """

    EQUAL = "equal"
    """s1[src_start:src_end] == s2[dest_start:dest_end]"""

    REPLACE = "replace"
    """s1[src_start:src_end] should be replaced by s2[dest_start:dest_end]"""

    INSERT = "insert"
    """s2[dest_start:dest_end] should be inserted at s1[src_start:src_start]"""

    DELETE = "delete"
    """s1[src_start:src_end] should be deleted"""


__all__ = ["Scorer", "EditType"]
