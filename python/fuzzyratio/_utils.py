"""Internal utilities for fuzzyratio."""

import math
from typing import Union

from fuzzyratio.enums import Scorer
from fuzzyratio.exceptions import ScorerError, ValidationError

# Valid scorer names (lowercase)
VALID_SCORERS = frozenset({s.value for s in Scorer})

# Alternative spellings accepted for scorer names
SCORER_ALIASES = {
    "weighted_ratio": Scorer.WRATIO.value,
    "qratio": Scorer.RATIO.value,
}


def normalize_scorer(scorer: Union[str, Scorer]) -> str:
    """Convert Scorer enum to string, or validate string scorer name.

    Args:
        scorer: Either a Scorer enum value or a string scorer name.

    Returns:
        Lowercase string scorer name.

    Raises:
        ScorerError: If the scorer name is not recognized.
        TypeError: If scorer is not a string or Scorer enum.

    Example:
        >>> normalize_scorer(Scorer.TOKEN_SET_RATIO)
        'token_set_ratio'
        >>> normalize_scorer("Weighted_Ratio")
        'wratio'
    """
    if isinstance(scorer, Scorer):
        return scorer.value

    if isinstance(scorer, str):
        name = scorer.lower()
        if name in VALID_SCORERS:
            return name
        if name in SCORER_ALIASES:
            return SCORER_ALIASES[name]
        raise ScorerError(
            f"Unknown scorer: '{scorer}'. "
            f"Valid options: {sorted(VALID_SCORERS | SCORER_ALIASES.keys())}"
        )

    raise TypeError(f"scorer must be str or Scorer enum, got {type(scorer).__name__}")


def check_strings(s1, s2) -> None:
    """Raise ValidationError unless both arguments are ``str``."""
    for name, value in (("s1", s1), ("s2", s2)):
        if not isinstance(value, str):
            raise ValidationError(f"{name} must be str, got {type(value).__name__}")


def check_min_score(min_score) -> None:
    """Raise ValidationError unless min_score is a finite number in [0, 100]."""
    if isinstance(min_score, bool) or not isinstance(min_score, (int, float)):
        raise ValidationError(f"min_score must be a number, got {type(min_score).__name__}")
    if math.isnan(min_score) or not 0 <= min_score <= 100:
        raise ValidationError(f"min_score must be between 0 and 100, got {min_score}")


__all__ = [
    "normalize_scorer",
    "check_strings",
    "check_min_score",
    "VALID_SCORERS",
    "SCORER_ALIASES",
]
