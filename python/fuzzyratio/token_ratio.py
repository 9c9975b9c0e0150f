"""Token-based ratios.

``token_sort_ratio`` compares the strings after sorting their whitespace
tokens, so word order stops mattering. ``token_set_ratio`` compares the
shared tokens against each side's remainder, so repeated words stop
mattering too. The ``partial_`` variants use ``partial_ratio`` for the final
comparison.

Note the default ``full_process`` differs: False for ``token_sort_ratio``
and ``token_set_ratio``, True for the partial variants.

Example:
    >>> token_sort_ratio("fuzzy was a bear", "fuzzy fuzzy was a bear")
    84
    >>> token_set_ratio("fuzzy was a bear", "fuzzy fuzzy was a bear")
    100
"""

from fuzzyratio._utils import check_strings
from fuzzyratio.fuzz import partial_ratio, ratio
from fuzzyratio.processing import full_process as _process
from fuzzyratio.processing import sort_tokens


def _token_sort(
    s1: str, s2: str, partial: bool = True, force_ascii: bool = True, full_process: bool = True
) -> int:
    check_strings(s1, s2)
    sorted1 = sort_tokens(s1, force_ascii=force_ascii, full_process=full_process)
    sorted2 = sort_tokens(s2, force_ascii=force_ascii, full_process=full_process)

    if partial:
        return partial_ratio(sorted1, sorted2, full_process=full_process)
    return ratio(sorted1, sorted2, full_process=full_process)


def _token_set(
    s1: str, s2: str, partial: bool = True, force_ascii: bool = True, full_process: bool = True
) -> int:
    """
    Score the two strings by their token sets.

    Builds ``<sorted intersection>``, ``<sorted intersection> <sorted rest
    of s1>`` and ``<sorted intersection> <sorted rest of s2>`` and returns
    the best pairwise ratio between them. One string containing all tokens
    of the other scores 100, whatever else it contains.
    """
    check_strings(s1, s2)
    if not full_process and s1 == s2:
        return 100

    p1 = _process(s1, strip_non_ascii=force_ascii) if full_process else s1
    p2 = _process(s2, strip_non_ascii=force_ascii) if full_process else s2

    if not p1 and not p2:
        return 100
    # One empty side scores 0, not the 100 that ratio("", "") on the empty
    # intersection and remainders would give.
    if not p1 or not p2:
        return 0

    tokens1 = set(p1.split())
    tokens2 = set(p2.split())

    intersection = tokens1 & tokens2
    diff1to2 = tokens1 - tokens2
    diff2to1 = tokens2 - tokens1

    sorted_sect = " ".join(sorted(intersection))
    sorted_1to2 = " ".join(sorted(diff1to2))
    sorted_2to1 = " ".join(sorted(diff2to1))

    combined_1to2 = (sorted_sect + " " + sorted_1to2).strip()
    combined_2to1 = (sorted_sect + " " + sorted_2to1).strip()
    sorted_sect = sorted_sect.strip()

    ratio_func = partial_ratio if partial else ratio
    pairwise = [
        ratio_func(sorted_sect, combined_1to2, full_process=full_process),
        ratio_func(sorted_sect, combined_2to1, full_process=full_process),
        ratio_func(combined_1to2, combined_2to1, full_process=full_process),
    ]
    return max(pairwise)


def token_sort_ratio(s1: str, s2: str, full_process: bool = False) -> int:
    """
    Compute the ratio after sorting the whitespace tokens of both strings.

    Non-ASCII characters are always removed.

    Args:
        s1: First string
        s2: Second string
        full_process: Process both strings before tokenizing (default: False)

    Returns:
        Similarity score (0 to 100).

    Example:
        >>> token_sort_ratio("new york mets", "york new mets")
        100
    """
    return _token_sort(s1, s2, partial=False, force_ascii=True, full_process=full_process)


def partial_token_sort_ratio(
    s1: str, s2: str, force_ascii: bool = True, full_process: bool = True
) -> int:
    """
    Compute the partial ratio after sorting the whitespace tokens of both strings.

    Args:
        s1: First string
        s2: Second string
        force_ascii: Remove non-ASCII characters (default: True)
        full_process: Process both strings before tokenizing (default: True)

    Returns:
        Similarity score (0 to 100).

    Example:
        >>> partial_token_sort_ratio("new york mets vs atlanta braves",
        ...                          "atlanta braves vs new york mets")
        100
    """
    return _token_sort(s1, s2, partial=True, force_ascii=force_ascii, full_process=full_process)


def token_set_ratio(s1: str, s2: str, full_process: bool = False) -> int:
    """
    Compute the ratio of the intersection and remainder token strings.

    Non-ASCII characters are always removed when processing.

    Args:
        s1: First string
        s2: Second string
        full_process: Process both strings before tokenizing (default: False)

    Returns:
        Similarity score (0 to 100).

    Example:
        >>> token_set_ratio("new york mets vs atlanta braves",
        ...                 "atlanta braves vs new york mets")
        100
    """
    return _token_set(s1, s2, partial=False, force_ascii=True, full_process=full_process)


def partial_token_set_ratio(
    s1: str, s2: str, force_ascii: bool = True, full_process: bool = True
) -> int:
    """
    Compute the partial ratio of the intersection and remainder token strings.

    Args:
        s1: First string
        s2: Second string
        force_ascii: Remove non-ASCII characters (default: True)
        full_process: Process both strings before tokenizing (default: True)

    Returns:
        Similarity score (0 to 100).

    Example:
        >>> partial_token_set_ratio("new york mets vs atlanta braves",
        ...                         "new york city mets - atlanta braves")
        100
    """
    return _token_set(s1, s2, partial=True, force_ascii=force_ascii, full_process=full_process)


__all__ = [
    "token_sort_ratio",
    "partial_token_sort_ratio",
    "token_set_ratio",
    "partial_token_set_ratio",
]
