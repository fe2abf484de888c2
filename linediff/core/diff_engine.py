# linediff/core/diff_engine.py
"""Line-level diff engine producing a minimal edit script.

The script is derived from an exact longest common subsequence. A suffix
table ``L[i][j]`` holds the LCS length of ``original[i:]`` and
``modified[j:]``; the script is then emitted in one forward walk that
applies, at every alignment point ``(i, j)``:

1. heads equal: ``Equal(i, j)``, advance both sides;
2. otherwise, if deleting ``original[i]`` keeps the script minimal
   (``L[i+1][j] >= L[i][j+1]``): ``Delete(i)``;
3. otherwise: ``Insert(j)``.

Rule 2 wins every tie, so at any point where both are possible the run of
deletions is finished before the run of insertions starts.
"""
from __future__ import annotations

from typing import List, Sequence

from linediff.core.edits import Delete, EditScript, Equal, Insert
from linediff.utils.logger import logger


def _common_prefix(a: Sequence[str], b: Sequence[str]) -> int:
    n = min(len(a), len(b))
    k = 0
    while k < n and a[k] == b[k]:
        k += 1
    return k


def _suffix_lcs_table(a: Sequence[str], b: Sequence[str]) -> List[List[int]]:
    """table[i][j] == LCS length of a[i:] and b[j:]."""
    n, m = len(a), len(b)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = table[i], table[i + 1]
        ai = a[i]
        for j in range(m - 1, -1, -1):
            if ai == b[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = below[j] if below[j] >= row[j + 1] else row[j + 1]
    return table


def table_cells(original: Sequence[str], modified: Sequence[str]) -> int:
    """Cells diff() allocates for its table once the shared head is skipped."""
    p = _common_prefix(original, modified)
    return (len(original) - p + 1) * (len(modified) - p + 1)


def lcs_length(original: Sequence[str], modified: Sequence[str]) -> int:
    """Length of the longest common subsequence (two rows of memory)."""
    p = _common_prefix(original, modified)
    a, b = original[p:], modified[p:]
    m = len(b)
    below = [0] * (m + 1)
    for i in range(len(a) - 1, -1, -1):
        row = [0] * (m + 1)
        ai = a[i]
        for j in range(m - 1, -1, -1):
            if ai == b[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = below[j] if below[j] >= row[j + 1] else row[j + 1]
        below = row
    return p + below[0]


def edit_distance(original: Sequence[str], modified: Sequence[str]) -> int:
    """Number of inserts plus deletes in a shortest edit script."""
    return len(original) + len(modified) - 2 * lcs_length(original, modified)


def diff(original: Sequence[str], modified: Sequence[str]) -> EditScript:
    """Return a minimal edit script turning ``original`` into ``modified``.

    Never raises for finite sequences of strings and never mutates them.
    Repeated calls on equal inputs return equal scripts.
    """
    script: EditScript = []

    # A shared head is always consumed by rule 1, so skip it in the table.
    p = _common_prefix(original, modified)
    for k in range(p):
        script.append(Equal(k, k, original[k]))

    a, b = original[p:], modified[p:]
    n, m = len(a), len(b)
    table = _suffix_lcs_table(a, b)

    i = j = 0
    while i < n or j < m:
        if i < n and j < m and a[i] == b[j]:
            script.append(Equal(p + i, p + j, a[i]))
            i += 1
            j += 1
        elif i < n and (j == m or table[i + 1][j] >= table[i][j + 1]):
            script.append(Delete(p + i, a[i]))
            i += 1
        else:
            script.append(Insert(p + j, b[j]))
            j += 1

    logger.info(
        f"diff: {len(original)} -> {len(modified)} lines, "
        f"common prefix {p}, lcs {p + table[0][0]}"
    )
    return script
