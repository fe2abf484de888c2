# linediff/core/guard.py
from __future__ import annotations

from typing import Optional, Sequence

from linediff.config import DIFF_MAX_CELLS, DIFF_MAX_LINES
from linediff.core.diff_engine import diff, table_cells
from linediff.core.edits import EditScript
from linediff.core.errors import InputTooLargeError
from linediff.utils.logger import logger
from linediff.utils.prefs import load_prefs


def _resolve(explicit: Optional[int], pref_key: str, default: int) -> int:
    if explicit is not None:
        return explicit
    value = load_prefs().get(pref_key)
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    if value is not None:
        logger.error(f"Ignoring invalid {pref_key} pref: {value!r}")
    return default


def resolve_max_lines(max_lines: Optional[int] = None) -> int:
    """Explicit argument, else the ``diff_max_lines`` pref, else the default."""
    return _resolve(max_lines, "diff_max_lines", DIFF_MAX_LINES)


def resolve_max_cells(max_cells: Optional[int] = None) -> int:
    """Explicit argument, else the ``diff_max_cells`` pref, else the default."""
    return _resolve(max_cells, "diff_max_cells", DIFF_MAX_CELLS)


def guarded_diff(
    original: Sequence[str],
    modified: Sequence[str],
    max_lines: Optional[int] = None,
    max_cells: Optional[int] = None,
) -> EditScript:
    """Run diff() only when both sides fit the line budget and the LCS
    table it would build fits the cell budget."""
    limit = resolve_max_lines(max_lines)
    for what, seq in (("original", original), ("modified", modified)):
        if len(seq) > limit:
            logger.error(f"Diff rejected: {what} has {len(seq)} lines (limit {limit})")
            raise InputTooLargeError(what, len(seq), limit)

    cell_limit = resolve_max_cells(max_cells)
    cells = table_cells(original, modified)
    if cells > cell_limit:
        logger.error(f"Diff rejected: table needs {cells} cells (limit {cell_limit})")
        raise InputTooLargeError("diff table", cells, cell_limit, unit="cells")
    return diff(original, modified)
