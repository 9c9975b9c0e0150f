"""StringMatcher: one comparison between two strings with cached results.

Distance, ratio, opcodes and matching blocks are expensive to compute and
depend only on the two strings, so a StringMatcher computes each of them at
most once. Replacing either string throws the whole cache away.

Example:
    >>> from fuzzyratio import StringMatcher
    >>> m = StringMatcher("this is interesting", "this is cool")
    >>> m.distance()
    11
    >>> m.matching_blocks()[-1]
    MatchingBlock(a=19, b=12, size=0)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from fuzzyratio import levenshtein
from fuzzyratio._utils import check_strings
from fuzzyratio.levenshtein import EditOp, MatchingBlock, Opcode

logger = logging.getLogger(__name__)


@dataclass
class _MatcherCache:
    distance: Optional[int] = None
    ratio: Optional[float] = None
    editops: Optional[List[EditOp]] = None
    opcodes: Optional[List[Opcode]] = None
    matching_blocks: Optional[List[MatchingBlock]] = None


class StringMatcher:
    """
    Compare a pair of strings, memoizing every result.

    Differences are computed as "what do we need to do to ``s1`` to turn it
    into ``s2``?".

    Warning:
        This class is NOT thread-safe: computing a result writes to the
        cache. Create one instance per thread, or finish all computations
        before sharing an instance for reading.

    Example:
        >>> m = StringMatcher("abcd", "abXd")
        >>> m.ratio()
        0.75
        >>> m.s2 = "abcd"  # clears the cache
        >>> m.ratio()
        1.0
    """

    def __init__(self, s1: str = "", s2: str = ""):
        check_strings(s1, s2)
        self._s1 = s1
        self._s2 = s2
        self._cache = _MatcherCache()

    @property
    def s1(self) -> str:
        """The first string being compared."""
        return self._s1

    @s1.setter
    def s1(self, value: str) -> None:
        self.set_seq1(value)

    @property
    def s2(self) -> str:
        """The second string being compared."""
        return self._s2

    @s2.setter
    def s2(self, value: str) -> None:
        self.set_seq2(value)

    def set_seqs(self, s1: str, s2: str) -> None:
        """Replace both strings."""
        check_strings(s1, s2)
        self._s1, self._s2 = s1, s2
        self._clear_cache()

    def set_seq1(self, s1: str) -> None:
        """Replace the first string."""
        check_strings(s1, self._s2)
        self._s1 = s1
        self._clear_cache()

    def set_seq2(self, s2: str) -> None:
        """Replace the second string."""
        check_strings(self._s1, s2)
        self._s2 = s2
        self._clear_cache()

    def _clear_cache(self) -> None:
        logger.debug("StringMatcher sequences replaced, clearing cache")
        self._cache = _MatcherCache()

    def distance(self) -> int:
        """Levenshtein distance from s1 to s2 (unit-cost substitutions)."""
        if self._cache.distance is None:
            self._cache.distance = levenshtein.distance(self._s1, self._s2)
        return self._cache.distance

    def ratio(self) -> float:
        """
        Similarity of the two strings as a float in [0, 1].

        Computed as ``(T - D) / T`` where T is the total length of both
        strings and D their Indel distance (a substitution counts as a
        delete plus an insert). This equals ``2 * M / T`` for M characters
        in the longest common subsequence: 1.0 for identical strings, 0.0
        when they share no character.

        Returns:
            The ratio, or ``nan`` when both strings are empty (0 / 0). The
            public ``fuzzyratio.ratio`` maps that case to 100.
        """
        if self._cache.ratio is None:
            lensum = len(self._s1) + len(self._s2)
            if lensum == 0:
                self._cache.ratio = float("nan")
            else:
                dist = levenshtein.indel_distance(self._s1, self._s2)
                self._cache.ratio = (lensum - dist) / lensum
        return self._cache.ratio

    def editops(self) -> List[EditOp]:
        """Single-character edits turning s1 into s2."""
        if self._cache.editops is None:
            self._cache.editops = levenshtein.editops(self._s1, self._s2)
        return list(self._cache.editops)

    def opcodes(self) -> List[Opcode]:
        """Merged edit script turning s1 into s2, covering both strings end-to-end."""
        if self._cache.opcodes is None:
            self._cache.opcodes = levenshtein.opcodes(self._s1, self._s2)
        return list(self._cache.opcodes)

    def matching_blocks(self) -> List[MatchingBlock]:
        """
        Return the list of blocks where s1 and s2 agree.

        Each block ``(a, b, size)`` means ``s1[a:a + size] == s2[b:b + size]``.
        Blocks increase strictly in ``a`` and in ``b``, and two adjacent
        blocks other than the last never continue each other. The last block
        is ``(len(s1), len(s2), 0)`` and is the only one with size 0.
        """
        if self._cache.matching_blocks is None:
            self._cache.matching_blocks = levenshtein.matching_blocks(self.opcodes())
        return list(self._cache.matching_blocks)

    # difflib.SequenceMatcher-style names
    get_opcodes = opcodes
    get_editops = editops
    get_matching_blocks = matching_blocks

    def __repr__(self) -> str:
        return f"StringMatcher(s1={self._s1!r}, s2={self._s2!r})"


__all__ = ["StringMatcher"]
