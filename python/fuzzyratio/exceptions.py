"""Exception hierarchy for fuzzyratio."""


class FuzzyRatioError(Exception):
    """Base exception for all fuzzyratio errors."""


class ValidationError(FuzzyRatioError, TypeError, ValueError):
    """Raised when input validation fails (non-string inputs, out of range parameters)."""


class ScorerError(FuzzyRatioError, ValueError):
    """Raised when an unknown scorer is specified."""


__all__ = ["FuzzyRatioError", "ValidationError", "ScorerError"]
