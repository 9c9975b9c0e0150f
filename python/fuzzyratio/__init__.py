"""
fuzzyratio - fuzzy string similarity scores

Pairwise similarity scores for deduplication, record linkage, search
ranking and fuzzy lookup, built on a Levenshtein alignment engine.
All scorers return an integer between 0 and 100.

Example usage:
    >>> import fuzzyratio as fr

    # Simple and partial ratio
    >>> fr.ratio("this is a test", "did you know this is a test")
    68
    >>> fr.partial_ratio("this is a test", "did you know this is a test")
    100

    # Token-based ratios
    >>> fr.token_sort_ratio("fuzzy wuzzy was a bear", "wuzzy fuzzy was a bear")
    100
    >>> fr.token_set_ratio("fuzzy was a bear", "fuzzy fuzzy was a bear")
    100

    # Weighted ratio picks the best of the above
    >>> fr.wratio("this is an interesting test", "this is a test!")
    86

    # Alignment details
    >>> m = fr.StringMatcher("this is interesting", "this is cool")
    >>> m.distance()
    11
"""

from importlib.metadata import version as _get_version

# Register the .fuzzy expression namespace
import fuzzyratio.expr  # noqa: F401
from fuzzyratio.batch import (
    MatchResult,
    best_matches,
    extract,
    extract_one,
    get_scorer,
    pairwise,
    similarity,
    similarity_matrix,
)
from fuzzyratio.enums import EditType, Scorer
from fuzzyratio.exceptions import FuzzyRatioError, ScorerError, ValidationError
from fuzzyratio.fuzz import partial_ratio, ratio
from fuzzyratio.levenshtein import (
    EditOp,
    MatchingBlock,
    Opcode,
    apply_opcodes,
    distance,
    editops,
    indel_distance,
    matching_blocks,
    opcodes,
)
from fuzzyratio.matcher import StringMatcher
from fuzzyratio.processing import ascii_only, full_process, percent_round, sort_tokens
from fuzzyratio.token_ratio import (
    partial_token_set_ratio,
    partial_token_sort_ratio,
    token_set_ratio,
    token_sort_ratio,
)
from fuzzyratio.weighted import weighted_ratio, wratio

__version__ = _get_version("fuzzyratio")

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "FuzzyRatioError",
    "ValidationError",
    "ScorerError",
    # Enums
    "Scorer",
    "EditType",
    # Result types
    "EditOp",
    "Opcode",
    "MatchingBlock",
    "MatchResult",
    # Alignment engine
    "distance",
    "indel_distance",
    "editops",
    "opcodes",
    "matching_blocks",
    "apply_opcodes",
    "StringMatcher",
    # Scorers
    "ratio",
    "partial_ratio",
    "token_sort_ratio",
    "partial_token_sort_ratio",
    "token_set_ratio",
    "partial_token_set_ratio",
    "wratio",
    "weighted_ratio",
    # Processing
    "full_process",
    "ascii_only",
    "sort_tokens",
    "percent_round",
    # Batch helpers
    "get_scorer",
    "similarity",
    "best_matches",
    "extract",
    "extract_one",
    "pairwise",
    "similarity_matrix",
]


# Convenience aliases
edit_distance = distance
