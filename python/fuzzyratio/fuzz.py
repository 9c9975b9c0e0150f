"""Simple and partial ratio.

Both functions return an integer score in [0, 100], higher meaning more
similar.

Example:
    >>> from fuzzyratio import ratio, partial_ratio
    >>> ratio("this is a test", "did you know this is a test")
    68
    >>> partial_ratio("this is a test", "did you know this is a test")
    100
"""

import math

from fuzzyratio._utils import check_strings
from fuzzyratio.matcher import StringMatcher
from fuzzyratio.processing import full_process as _process
from fuzzyratio.processing import percent_round

# A candidate window scoring above this counts as an exact partial match
PARTIAL_MATCH_THRESHOLD = 0.995


def ratio(s1: str, s2: str, full_process: bool = True) -> int:
    """
    Compute the similarity of two strings.

    Args:
        s1: First string
        s2: Second string
        full_process: Lowercase both strings and reduce punctuation to
            single spaces before comparing (default: True)

    Returns:
        Similarity score (0 to 100). Two empty strings score 100.

    Example:
        >>> ratio("new york mets", "new YORK mets")
        100
        >>> ratio("new york mets", "new YORK mets", full_process=False)
        69
    """
    check_strings(s1, s2)
    if full_process:
        s1, s2 = _process(s1), _process(s2)

    if not s1 and not s2:
        return 100
    return percent_round(StringMatcher(s1, s2).ratio())


def partial_ratio(s1: str, s2: str, full_process: bool = True) -> int:
    """
    Compute the ratio of the best-matching substring.

    The shorter string is compared against windows of the longer string
    with the same length. Only windows aligned with a matching block of the
    two strings are tried: the best partial match lines up with at least
    one of them. For example with shorter ``"abcd"`` and longer
    ``"XXXbcdeEEE"`` the block ``(1, 3, 3)`` gives the window ``"Xbcd"``.

    Args:
        s1: First string
        s2: Second string
        full_process: Process both strings before comparing (default: True)

    Returns:
        Similarity score (0 to 100). 100 if the shorter string occurs in
        the longer one.

    Example:
        >>> partial_ratio("new york mets", "the wonderful new york mets")
        100
        >>> partial_ratio("HSINCHUANG", "SINJHUAN", full_process=False)
        88
    """
    check_strings(s1, s2)
    if full_process:
        s1, s2 = _process(s1), _process(s2)

    if len(s1) <= len(s2):
        shorter, longer = s1, s2
    else:
        shorter, longer = s2, s1

    if s1 == s2:
        return 100
    # The alignment only yields one window per block and can miss a verbatim
    # occurrence that is not the last one.
    if shorter and shorter in longer:
        return 100

    blocks = StringMatcher(shorter, longer).matching_blocks()

    scores = []
    for i, j, _ in blocks:
        long_start = max(0, j - i)
        window = longer[long_start : long_start + len(shorter)]

        r = StringMatcher(shorter, window).ratio()
        if r > PARTIAL_MATCH_THRESHOLD:
            return 100
        scores.append(r)

    # An empty shorter string compared with an empty window is 0 / 0
    scores = [score for score in scores if not math.isnan(score)]
    if not scores:
        return 0
    return percent_round(max(scores))


__all__ = ["ratio", "partial_ratio", "PARTIAL_MATCH_THRESHOLD"]
