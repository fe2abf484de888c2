# linediff/core/edits.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Union


@dataclass(frozen=True)
class Equal:
    original_index: int
    modified_index: int
    value: str
    tag: ClassVar[str] = "equal"


@dataclass(frozen=True)
class Delete:
    original_index: int
    value: str
    tag: ClassVar[str] = "delete"


@dataclass(frozen=True)
class Insert:
    modified_index: int
    value: str
    tag: ClassVar[str] = "insert"


EditOp = Union[Equal, Delete, Insert]
EditScript = List[EditOp]
