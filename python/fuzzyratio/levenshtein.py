"""Levenshtein distance and edit-script reconstruction.

The distance functions run the classic dynamic program over a
``(len(s1) + 1) x (len(s2) + 1)`` cost matrix, keeping two rows at a time.
The edit-script functions keep the whole matrix and walk it back from
``(len(s1), len(s2))`` to ``(0, 0)``.

When several minimal-cost predecessors exist the backtrace picks, in order:
equal, replace, insert, delete. The choice decides which matching blocks
come out, so it is fixed rather than left to iteration order.

Example:
    >>> from fuzzyratio import levenshtein as lev
    >>> lev.distance("kitten", "sitting")
    3
    >>> lev.opcodes("abcd", "abXd")
    [Opcode(tag=<EditType.EQUAL: 'equal'>, src_start=0, src_end=2, dest_start=0, dest_end=2),
     Opcode(tag=<EditType.REPLACE: 'replace'>, src_start=2, src_end=3, dest_start=2, dest_end=3),
     Opcode(tag=<EditType.EQUAL: 'equal'>, src_start=3, src_end=4, dest_start=3, dest_end=4)]
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple

from fuzzyratio.enums import EditType


class EditOp(NamedTuple):
    """A single-character edit: ``tag`` applied at ``s1[src_pos]`` / ``s2[dest_pos]``."""

    tag: EditType
    src_pos: int
    dest_pos: int


class Opcode(NamedTuple):
    """A run of identical edits covering ``s1[src_start:src_end]`` and ``s2[dest_start:dest_end]``."""

    tag: EditType
    src_start: int
    src_end: int
    dest_start: int
    dest_end: int


class MatchingBlock(NamedTuple):
    """``s1[a:a + size] == s2[b:b + size]``."""

    a: int
    b: int
    size: int


def distance(s1: str, s2: str, replace_cost: int = 1) -> int:
    """
    Compute the edit distance between two strings.

    Args:
        s1: First string
        s2: Second string
        replace_cost: Weight of a substitution. Insertions and deletions
            always cost 1. With ``replace_cost=2`` a substitution is never
            cheaper than a delete plus an insert (the Indel distance).

    Returns:
        The minimum total cost of single-character edits turning s1 into s2.

    Complexity:
        Time: O(m*n). Space: O(min(m, n)) using two-row optimization.

    Example:
        >>> distance("kitten", "sitting")
        3
        >>> distance("kitten", "sitting", replace_cost=2)
        5
    """
    if s1 == s2:
        return 0
    # Insertions and deletions cost the same, so the shorter string can be
    # the inner loop.
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    if not s2:
        return len(s1)

    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, 1):
        current = [i]
        for j, c2 in enumerate(s2, 1):
            if c1 == c2:
                current.append(previous[j - 1])
            else:
                current.append(
                    min(previous[j - 1] + replace_cost, previous[j] + 1, current[j - 1] + 1)
                )
        previous = current
    return previous[-1]


def indel_distance(s1: str, s2: str) -> int:
    """Edit distance counting only insertions and deletions.

    Equals ``len(s1) + len(s2) - 2 * lcs`` where ``lcs`` is the length of the
    longest common subsequence.
    """
    return distance(s1, s2, replace_cost=2)


def _cost_matrix(s1: str, s2: str) -> List[List[int]]:
    rows = [list(range(len(s2) + 1))]
    for i, c1 in enumerate(s1, 1):
        previous = rows[-1]
        row = [i]
        for j, c2 in enumerate(s2, 1):
            if c1 == c2:
                row.append(previous[j - 1])
            else:
                row.append(1 + min(previous[j - 1], previous[j], row[j - 1]))
        rows.append(row)
    return rows


def _backtrace(s1: str, s2: str) -> List[Tuple[EditType, int, int]]:
    """Return one ``(tag, i, j)`` step per aligned position, first to last."""
    matrix = _cost_matrix(s1, s2)
    i, j = len(s1), len(s2)
    steps = []
    while i or j:
        cost = matrix[i][j]
        if i and j and s1[i - 1] == s2[j - 1] and matrix[i - 1][j - 1] == cost:
            i -= 1
            j -= 1
            steps.append((EditType.EQUAL, i, j))
        elif i and j and matrix[i - 1][j - 1] + 1 == cost:
            i -= 1
            j -= 1
            steps.append((EditType.REPLACE, i, j))
        elif j and matrix[i][j - 1] + 1 == cost:
            j -= 1
            steps.append((EditType.INSERT, i, j))
        else:
            i -= 1
            steps.append((EditType.DELETE, i, j))
    steps.reverse()
    return steps


def editops(s1: str, s2: str) -> List[EditOp]:
    """
    Find the single-character edits turning s1 into s2.

    Returns:
        One EditOp per replaced, inserted or deleted character, in order.
        For an insert, ``src_pos`` is the insertion point in s1; for a
        delete, ``dest_pos`` is the matching position in s2.

    Example:
        >>> editops("spam", "park")
        [EditOp(tag=<EditType.DELETE: 'delete'>, src_pos=0, dest_pos=0),
         EditOp(tag=<EditType.INSERT: 'insert'>, src_pos=3, dest_pos=2),
         EditOp(tag=<EditType.REPLACE: 'replace'>, src_pos=3, dest_pos=3)]
    """
    return [EditOp(tag, i, j) for tag, i, j in _backtrace(s1, s2) if tag is not EditType.EQUAL]


def opcodes(s1: str, s2: str) -> List[Opcode]:
    """
    Find a minimal edit script turning s1 into s2.

    Consecutive steps with the same tag are merged, so the result is an
    ordered partition of both strings: the first opcode starts at (0, 0),
    each one starts where the previous ended, and the last ends at
    ``(len(s1), len(s2))``. Both strings empty gives an empty list.

    Example:
        >>> [(op.tag.value, op.src_start, op.src_end, op.dest_start, op.dest_end)
        ...  for op in opcodes("new york", "york")]
        [('delete', 0, 4, 0, 0), ('equal', 4, 8, 0, 4)]
    """
    result: List[Opcode] = []
    for tag, i, j in _backtrace(s1, s2):
        src_end = i if tag is EditType.INSERT else i + 1
        dest_end = j if tag is EditType.DELETE else j + 1
        if result and result[-1].tag is tag:
            result[-1] = result[-1]._replace(src_end=src_end, dest_end=dest_end)
        else:
            result.append(Opcode(tag, i, src_end, j, dest_end))
    return result


def matching_blocks(ops: Sequence[Opcode]) -> List[MatchingBlock]:
    """
    Derive matching blocks from an edit script.

    Each ``equal`` opcode becomes one block. The list always ends with the
    zero-length block ``(len(s1), len(s2), 0)``, read off the end of the
    script, and that block is the only one with ``size == 0``.

    Example:
        >>> matching_blocks(opcodes("abcd", "abXd"))
        [MatchingBlock(a=0, b=0, size=2), MatchingBlock(a=3, b=3, size=1),
         MatchingBlock(a=4, b=4, size=0)]
    """
    blocks = [
        MatchingBlock(op.src_start, op.dest_start, op.src_end - op.src_start)
        for op in ops
        if op.tag == EditType.EQUAL
    ]
    if ops:
        blocks.append(MatchingBlock(ops[-1].src_end, ops[-1].dest_end, 0))
    else:
        blocks.append(MatchingBlock(0, 0, 0))
    return blocks


def apply_opcodes(ops: Sequence[Opcode], s1: str, s2: str) -> str:
    """Replay an edit script on s1, taking inserted/replacement text from s2."""
    parts = []
    for op in ops:
        if op.tag == EditType.EQUAL:
            parts.append(s1[op.src_start : op.src_end])
        elif op.tag != EditType.DELETE:
            parts.append(s2[op.dest_start : op.dest_end])
    return "".join(parts)


__all__ = [
    "EditOp",
    "Opcode",
    "MatchingBlock",
    "distance",
    "indel_distance",
    "editops",
    "opcodes",
    "matching_blocks",
    "apply_opcodes",
]
