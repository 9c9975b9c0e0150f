"""Batch operations API for fuzzyratio.

This module provides list-based helpers built on the pairwise scorers. Every
comparison is independent: each one builds its own StringMatcher, so the
functions here can be called from several threads at once.

Example usage:
    >>> import fuzzyratio.batch as batch

    # Score a query against all strings
    >>> results = batch.similarity(["new york mets", "atlanta braves"], "new york")
    >>> [r.text for r in results]
    ['new york mets', 'atlanta braves']
    >>> results[0].score
    90

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [(m.text, m.score) for m in matches]
    [('apple', 80), ('apply', 80)]

    # Pairwise scores between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hallo", "word"])
    [80, 89]

    # Full score matrix
    >>> matrix = batch.similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
    >>> # matrix[0] = scores of "hello" against each choice
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Optional

from fuzzyratio._utils import check_min_score, check_strings, normalize_scorer
from fuzzyratio.exceptions import ValidationError
from fuzzyratio.fuzz import partial_ratio, ratio
from fuzzyratio.token_ratio import (
    partial_token_set_ratio,
    partial_token_sort_ratio,
    token_set_ratio,
    token_sort_ratio,
)
from fuzzyratio.weighted import wratio

if TYPE_CHECKING:
    from fuzzyratio.enums import Scorer

logger = logging.getLogger(__name__)

_SCORERS: Dict[str, Callable[[str, str], int]] = {
    "ratio": ratio,
    "partial_ratio": partial_ratio,
    "token_sort_ratio": token_sort_ratio,
    "partial_token_sort_ratio": partial_token_sort_ratio,
    "token_set_ratio": token_set_ratio,
    "partial_token_set_ratio": partial_token_set_ratio,
    "wratio": wratio,
}

__all__ = [
    "MatchResult",
    "get_scorer",
    "similarity",
    "best_matches",
    "extract",
    "extract_one",
    "pairwise",
    "similarity_matrix",
]


@dataclass(frozen=True)
class MatchResult:
    """Result from best_matches, extract and the other batch operations.

    Supports equality comparison and hashing for use in sets and as dict keys.
    """

    text: str
    score: int
    id: Optional[int] = None


def get_scorer(scorer: str | Scorer) -> Callable[[str, str], int]:
    """Return the scoring function for a scorer name or Scorer enum.

    Example:
        >>> get_scorer("token_sort_ratio")("new york mets", "york new mets")
        100
    """
    return _SCORERS[normalize_scorer(scorer)]


def _check_strings_list(name: str, strings) -> None:
    if isinstance(strings, str) or not isinstance(strings, (list, tuple)):
        raise ValidationError(f"{name} must be a list of str, got {type(strings).__name__}")


def similarity(
    strings: list[str],
    query: str,
    scorer: str | Scorer = "wratio",
) -> list[MatchResult]:
    """Score a query against all strings.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        scorer: Scoring function to use (string or Scorer enum). Options:
            - "ratio"
            - "partial_ratio"
            - "token_sort_ratio"
            - "partial_token_sort_ratio"
            - "token_set_ratio"
            - "partial_token_set_ratio"
            - "wratio" (default)

    Returns:
        List of MatchResult objects in the same order as input strings.
        Each result has `text`, `score`, and `id` fields where `id` is
        the original index in the input list.
    """
    _check_strings_list("strings", strings)
    score = get_scorer(scorer)
    for text in strings:
        check_strings(query, text)
    logger.debug("Scoring %d strings with %s", len(strings), score.__name__)
    return [MatchResult(text, score(query, text), idx) for idx, text in enumerate(strings)]


def best_matches(
    strings: list[str],
    query: str,
    scorer: str | Scorer = "wratio",
    limit: int = 5,
    min_score: float = 0,
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Scores all strings against the query, keeps those scoring at least
    min_score, sorts by score descending (ties keep input order) and
    returns at most `limit` of them.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        scorer: Scoring function to use (default: "wratio").
        limit: Maximum number of results to return (default: 5).
        min_score: Minimum score to include in results, 0 to 100
            (default: 0, meaning all results are included).

    Returns:
        List of MatchResult objects sorted by score descending.

    Raises:
        ValidationError: If min_score is outside [0, 100] or limit is negative.

    Example:
        >>> matches = best_matches(["apple", "apply", "banana"], "appel", limit=2)
        >>> [m.text for m in matches]
        ['apple', 'apply']
    """
    check_min_score(min_score)
    if limit < 0:
        raise ValidationError(f"limit must be non-negative, got {limit}")

    results = [r for r in similarity(strings, query, scorer) if r.score >= min_score]
    results.sort(key=lambda r: r.score, reverse=True)
    return results[:limit]


def extract(
    query: str,
    choices: list[str],
    limit: int = 10,
    min_score: float = 0,
) -> list[MatchResult]:
    """
    Find top N matches from a list using wratio.

    Args:
        query: Query string to match
        choices: List of strings to search
        limit: Maximum number of results (default 10)
        min_score: Minimum score threshold (default 0)

    Returns:
        List of MatchResult objects sorted by score descending.

    Example:
        >>> results = extract("new york", ["new york mets", "atlanta braves"], limit=1)
        >>> [(r.text, r.score) for r in results]
        [('new york mets', 90)]
    """
    return best_matches(choices, query, scorer="wratio", limit=limit, min_score=min_score)


def extract_one(
    query: str,
    choices: list[str],
    min_score: float = 0,
) -> MatchResult | None:
    """
    Find the single best match from a list using wratio.

    Returns:
        The best MatchResult, or None if no choice scores at least min_score.
    """
    results = extract(query, choices, limit=1, min_score=min_score)
    return results[0] if results else None


def pairwise(
    left: list[str],
    right: list[str],
    scorer: str | Scorer = "ratio",
) -> list[int]:
    """Score each pair (left[i], right[i]) of two equal-length lists.

    Args:
        left: First list of strings.
        right: Second list of strings (must be same length as left).
        scorer: Scoring function to use (default: "ratio").

    Returns:
        List of scores (0 to 100), one for each pair.

    Raises:
        ValidationError: If left and right have different lengths.
    """
    _check_strings_list("left", left)
    _check_strings_list("right", right)
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have equal length, got {len(left)} and {len(right)}"
        )
    score = get_scorer(scorer)
    return [score(a, b) for a, b in zip(left, right)]


def similarity_matrix(
    queries: list[str],
    choices: list[str],
    scorer: str | Scorer = "ratio",
) -> list[list[int]]:
    """Score every query against every choice.

    Returns:
        2D list where result[i][j] is the score of queries[i] against
        choices[j].

    Example:
        >>> matrix = similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
        >>> len(matrix), len(matrix[0])
        (2, 3)
    """
    _check_strings_list("queries", queries)
    _check_strings_list("choices", choices)
    score = get_scorer(scorer)
    logger.debug("Computing %dx%d score matrix", len(queries), len(choices))
    return [[score(q, c) for c in choices] for q in queries]
