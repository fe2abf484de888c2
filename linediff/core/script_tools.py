# linediff/core/script_tools.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from linediff.core.edits import Delete, EditOp, EditScript, Equal, Insert
from linediff.core.errors import ScriptMismatchError
from linediff.utils.logger import logger


Opcode = Tuple[str, int, int, int, int]     # (tag, i1, i2, j1, j2)


def original_side(script: Iterable[EditOp]) -> List[str]:
    """Replay Equal + Delete entries: the original lines, in order."""
    return [op.value for op in script if not isinstance(op, Insert)]


def modified_side(script: Iterable[EditOp]) -> List[str]:
    """Replay Equal + Insert entries: the modified lines, in order."""
    return [op.value for op in script if not isinstance(op, Delete)]


def _mismatch(message: str) -> ScriptMismatchError:
    logger.error(f"Script mismatch: {message}")
    return ScriptMismatchError(message)


def apply_script(original: Sequence[str], script: Iterable[EditOp]) -> List[str]:
    """Replay ``script`` against ``original`` and return the modified lines.

    Every Equal/Delete must name the next unconsumed original line, by index
    and by value, and the script must consume ``original`` completely.
    """
    out: List[str] = []
    pos = 0
    for op in script:
        if isinstance(op, Insert):
            if op.modified_index != len(out):
                raise _mismatch(
                    f"insert at modified index {op.modified_index}, expected {len(out)}"
                )
            out.append(op.value)
            continue

        if op.original_index != pos or pos >= len(original) or original[pos] != op.value:
            raise _mismatch(f"{op.tag} does not match original line {pos}: {op!r}")
        if isinstance(op, Equal):
            if op.modified_index != len(out):
                raise _mismatch(
                    f"equal at modified index {op.modified_index}, expected {len(out)}"
                )
            out.append(op.value)
        pos += 1

    if pos != len(original):
        raise _mismatch(f"script consumed {pos} of {len(original)} original lines")
    return out


def invert(script: Iterable[EditOp]) -> EditScript:
    """Swap the roles of the two sides: a script from modified to original."""
    out: EditScript = []
    for op in script:
        if isinstance(op, Equal):
            out.append(Equal(op.modified_index, op.original_index, op.value))
        elif isinstance(op, Delete):
            out.append(Insert(op.original_index, op.value))
        else:
            out.append(Delete(op.modified_index, op.value))
    return out


@dataclass
class DiffStats:
    equal: int
    deleted: int
    inserted: int

    @property
    def original_length(self) -> int:
        return self.equal + self.deleted

    @property
    def modified_length(self) -> int:
        return self.equal + self.inserted

    @property
    def edit_distance(self) -> int:
        return self.deleted + self.inserted

    @property
    def lcs_length(self) -> int:
        return self.equal

    @property
    def similarity(self) -> float:
        total = self.original_length + self.modified_length
        return (2.0 * self.equal / total) if total else 1.0


def diff_stats(script: Iterable[EditOp]) -> DiffStats:
    equal = deleted = inserted = 0
    for op in script:
        if isinstance(op, Equal):
            equal += 1
        elif isinstance(op, Delete):
            deleted += 1
        else:
            inserted += 1
    return DiffStats(equal, deleted, inserted)


def to_opcodes(script: Sequence[EditOp]) -> List[Opcode]:
    """Group a script into difflib-style ``(tag, i1, i2, j1, j2)`` opcodes.

    Runs of Equal become ``"equal"``; a run of changes between two Equal runs
    becomes ``"delete"``, ``"insert"`` or, when it touches both sides,
    ``"replace"``.
    """
    opcodes: List[Opcode] = []
    i = j = 0
    k = 0
    while k < len(script):
        i1, j1 = i, j
        if isinstance(script[k], Equal):
            while k < len(script) and isinstance(script[k], Equal):
                i += 1
                j += 1
                k += 1
            opcodes.append(("equal", i1, i, j1, j))
            continue

        while k < len(script) and not isinstance(script[k], Equal):
            if isinstance(script[k], Delete):
                i += 1
            else:
                j += 1
            k += 1
        if i > i1 and j > j1:
            tag = "replace"
        elif i > i1:
            tag = "delete"
        else:
            tag = "insert"
        opcodes.append((tag, i1, i, j1, j))
    return opcodes
