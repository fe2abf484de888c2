# linediff/core/segmenter.py
from __future__ import annotations

import os
from typing import List, Optional

from linediff.config import READ_MAX_BYTES
from linediff.core.errors import InputTooLargeError
from linediff.utils.encoding_detector import detect_file_encoding
from linediff.utils.logger import logger


def to_lines(text: str, normalize_eol: bool = True) -> List[str]:
    """Split text into lines without terminators.

    A trailing terminator ends the last line rather than starting an empty
    one, so ``"a\\nb\\n"`` and ``"a\\nb"`` both give ``["a", "b"]`` and ``""``
    gives ``[]``. With ``normalize_eol`` off, only ``"\\n"`` splits and any
    ``"\\r"`` stays part of the line.
    """
    if normalize_eol:
        text = text.replace("\r\n", "\n").replace("\r", "\n")
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(
    file_path: str,
    encoding: Optional[str] = None,
    max_bytes: int = READ_MAX_BYTES,
    normalize_eol: bool = True,
) -> List[str]:
    """
    Read a text file and split it into lines.
    Detects the encoding when none is given and replaces undecodable bytes.
    Raises InputTooLargeError for files over ``max_bytes``; OS errors propagate.
    """
    try:
        size = os.path.getsize(file_path)
    except OSError as e:
        logger.error(f"Cannot stat {file_path}: {str(e)}")
        raise
    if size > max_bytes:
        logger.error(f"Refusing to read {file_path}: {size} bytes exceeds {max_bytes}")
        raise InputTooLargeError(file_path, size, max_bytes, unit="bytes")

    enc = encoding or detect_file_encoding(file_path)
    try:
        # newline="" keeps '\r' so to_lines decides how terminators split
        with open(file_path, "r", encoding=enc, errors="replace", newline="") as f:
            text = f.read()
    except (OSError, LookupError) as e:
        logger.error(f"Error reading text file {file_path}: {str(e)}")
        raise
    logger.info(f"Read {file_path} ({size} bytes, {enc})")
    return to_lines(text, normalize_eol=normalize_eol)
