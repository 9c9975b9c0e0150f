"""Weighted ratio: the best of several scorers, picked by string length.

Steps, in the order they occur:

1. Process both strings (optionally dropping non-ASCII characters).
2. Short circuit if this makes either string empty.
3. Take the simple ratio of the two processed strings.
4. Compare the lengths of the processed strings:
   * if one is at least 1.5 times as long as the other, use the partial
     scorers and scale their results by 0.9 (so only full matches can
     reach 100);
   * if one is more than 8 times as long, scale by 0.6 instead.
5. Run the other scorers:
   * with partials: partial_ratio, partial_token_sort_ratio and
     partial_token_set_ratio, scaled by the length-based factor;
   * otherwise: token_sort_ratio and token_set_ratio;
   * token-based results are scaled by a further 0.95.
6. Return the highest value, rounded to an integer.
"""

import logging

from fuzzyratio._utils import check_strings
from fuzzyratio.fuzz import partial_ratio, ratio
from fuzzyratio.processing import full_process, round_half_up
from fuzzyratio.token_ratio import _token_set, _token_sort

logger = logging.getLogger(__name__)

PARTIAL_LENGTH_RATIO = 1.5
LONG_LENGTH_RATIO = 8.0
PARTIAL_SCALE = 0.9
LONG_PARTIAL_SCALE = 0.6
TOKEN_SCALE = 0.95


def wratio(s1: str, s2: str, force_ascii: bool = True) -> int:
    """
    Compute a weighted similarity using the best scorer for the input.

    Args:
        s1: First string
        s2: Second string
        force_ascii: Remove non-ASCII characters before comparing (default: True)

    Returns:
        Similarity score (0 to 100). Two strings that are empty after
        processing score 100; one empty string scores 0.

    Example:
        >>> wratio("new york mets", "the wonderful new york mets")
        90
        >>> wratio("new york mets vs atlanta braves", "atlanta braves vs new york mets")
        95
    """
    check_strings(s1, s2)
    p1 = full_process(s1, strip_non_ascii=force_ascii)
    p2 = full_process(s2, strip_non_ascii=force_ascii)

    if not p1 and not p2:
        return 100
    if not p1 or not p2:
        return 0

    base = ratio(p1, p2, full_process=False)
    len_ratio = max(len(p1), len(p2)) / min(len(p1), len(p2))

    try_partials = len_ratio >= PARTIAL_LENGTH_RATIO
    partial_scale = LONG_PARTIAL_SCALE if len_ratio > LONG_LENGTH_RATIO else PARTIAL_SCALE
    logger.debug(
        "wratio length ratio %.2f: partials=%s, partial scale=%s",
        len_ratio,
        try_partials,
        partial_scale,
    )

    # Token scorers see the same ASCII setting as the processing above, so
    # force_ascii=False never collapses non-ASCII tokens to empty strings.
    if try_partials:
        partial = partial_ratio(p1, p2, full_process=False) * partial_scale
        ptsor = _token_sort(p1, p2, True, force_ascii, False) * TOKEN_SCALE * partial_scale
        ptser = _token_set(p1, p2, True, force_ascii, False) * TOKEN_SCALE * partial_scale
        return round_half_up(max(base, partial, ptsor, ptser))

    tsor = _token_sort(p1, p2, False, force_ascii, False) * TOKEN_SCALE
    tser = _token_set(p1, p2, False, force_ascii, False) * TOKEN_SCALE
    return round_half_up(max(base, tsor, tser))


weighted_ratio = wratio


__all__ = [
    "wratio",
    "weighted_ratio",
    "PARTIAL_LENGTH_RATIO",
    "LONG_LENGTH_RATIO",
    "PARTIAL_SCALE",
    "LONG_PARTIAL_SCALE",
    "TOKEN_SCALE",
]
