# linediff/core/renderer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from linediff.core.edits import Delete, EditOp, Equal


PREFIXES = {
    "equal": "  ",
    "delete": "- ",
    "insert": "+ ",
}


@dataclass
class DiffRow:
    tag: str                    # 'equal' | 'delete' | 'insert'
    left_no: int | None         # 1-based line number in the original
    right_no: int | None        # 1-based line number in the modified
    left_text: str | None
    right_text: str | None


def render_plain(script: Iterable[EditOp]) -> str:
    """One line per operation with a two-character marker."""
    return "\n".join(PREFIXES[op.tag] + op.value for op in script)


def build_rows(script: Iterable[EditOp]) -> List[DiffRow]:
    """Produce side-by-side rows for table rendering."""
    rows: List[DiffRow] = []
    for op in script:
        if isinstance(op, Equal):
            rows.append(DiffRow("equal",
                                op.original_index + 1, op.modified_index + 1,
                                op.value, op.value))
        elif isinstance(op, Delete):
            rows.append(DiffRow("delete", op.original_index + 1, None, op.value, None))
        else:
            rows.append(DiffRow("insert", None, op.modified_index + 1, None, op.value))
    return rows
