"""Polars expression namespace for fuzzy string matching.

This module registers a `.fuzzy` namespace on Polars expressions,
enabling chainable fuzzy matching operations directly in Polars
expression contexts. Every method evaluates the pairwise scorers row by
row through ``map_elements``.

Warning:
    ``map_elements`` runs Python code per row. For large frames, bound the
    string lengths first: every comparison is O(n*m).

Example:
    >>> import polars as pl
    >>> import fuzzyratio  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"team": ["new york mets", "NY Mets", "atlanta braves"]})
    >>> df.with_columns(
    ...     is_mets=pl.col("team").fuzzy.is_similar("new york mets", min_score=80)
    ... )
"""

from typing import Union

import polars as pl

from fuzzyratio.batch import best_matches, get_scorer
from fuzzyratio.enums import Scorer
from fuzzyratio.exceptions import ValidationError
from fuzzyratio.levenshtein import distance as _distance
from fuzzyratio.processing import full_process


def _as_text(value) -> str:
    return str(value) if value is not None else ""


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy string matching namespace for Polars expressions.

    Provides chainable methods for fuzzy matching directly on columns.
    Access via `.fuzzy` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def _pairwise(self, other: Union[str, pl.Expr], func, return_dtype) -> pl.Expr:
        if isinstance(other, str):
            # Compare against a literal string
            return self._expr.map_elements(
                lambda s: func(_as_text(s), other),
                return_dtype=return_dtype,
                skip_nulls=False,
            )
        if not isinstance(other, pl.Expr):
            raise ValidationError(
                f"other must be str or polars Expr, got {type(other).__name__}"
            )

        # Compare against another column
        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: func(_as_text(row["_left"]), _as_text(row["_right"])),
            return_dtype=return_dtype,
        )

    def similarity(
        self,
        other: Union[str, pl.Expr],
        scorer: Union[str, Scorer] = "wratio",
    ) -> pl.Expr:
        """
        Score this column against a string literal or another column.

        Args:
            other: String literal or column expression to compare against
            scorer: Scoring function to use (string or Scorer enum)

        Returns:
            Expression producing integer scores (0 to 100). Nulls compare
            as empty strings.

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").fuzzy.similarity("John")
            ... )
            >>> df.with_columns(
            ...     score=pl.col("name1").fuzzy.similarity(pl.col("name2"), scorer="ratio")
            ... )
        """
        return self._pairwise(other, get_scorer(scorer), pl.Int64)

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_score: int = 80,
        scorer: Union[str, Scorer] = "wratio",
    ) -> pl.Expr:
        """
        Check if values score at least min_score against another value/column.

        Example:
            >>> df.filter(pl.col("name").fuzzy.is_similar("John", min_score=85))
        """
        return self.similarity(other, scorer=scorer) >= min_score

    def distance(self, other: Union[str, pl.Expr]) -> pl.Expr:
        """
        Levenshtein distance between this column and another value/column.

        Example:
            >>> df.with_columns(
            ...     dist=pl.col("name").fuzzy.distance("John")
            ... )
        """
        return self._pairwise(other, _distance, pl.Int64)

    def best_match(
        self,
        choices: list,
        scorer: Union[str, Scorer] = "wratio",
        min_score: int = 0,
    ) -> pl.Expr:
        """
        Find the best matching string from a list of choices.

        Args:
            choices: List of strings to match against
            scorer: Scoring function to use (string or Scorer enum)
            min_score: Minimum score to return a match (otherwise null)

        Returns:
            Expression with the best matching string (or null)

        Example:
            >>> teams = ["new york mets", "atlanta braves"]
            >>> df.with_columns(
            ...     team=pl.col("raw_team").fuzzy.best_match(teams)
            ... )
        """
        get_scorer(scorer)

        def find_best(value):
            if value is None:
                return None
            results = best_matches(
                choices, str(value), scorer=scorer, limit=1, min_score=min_score
            )
            return results[0].text if results else None

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)

    def normalize(self, force_ascii: bool = False) -> pl.Expr:
        """
        Apply full_process to every value.

        Example:
            >>> df.with_columns(
            ...     normalized=pl.col("name").fuzzy.normalize()
            ... )
        """

        def normalize_value(value):
            if value is None:
                return None
            return full_process(str(value), strip_non_ascii=force_ascii)

        return self._expr.map_elements(normalize_value, return_dtype=pl.Utf8)
