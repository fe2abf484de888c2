# linediff/utils/encoding_detector.py

import codecs

import chardet

from linediff.config import ENCODING_SNIFF_BYTES
from linediff.utils.logger import logger

def detect_file_encoding(file_path: str) -> str:
    """
    Detect the encoding of a file.

    Args:
        file_path (str): Path to the file

    Returns:
        str: Detected encoding or 'utf-8' as fallback
    """
    try:
        with open(file_path, 'rb') as f:
            raw = f.read(ENCODING_SNIFF_BYTES)
    except OSError as e:
        logger.error(f"Failed to detect encoding for {file_path}: {str(e)}")
        return 'utf-8'
    return detect_bytes_encoding(raw)

def detect_bytes_encoding(raw: bytes) -> str:
    # A UTF-8 BOM must be stripped, otherwise it sticks to the first line
    if raw.startswith(codecs.BOM_UTF8):
        return 'utf-8-sig'
    # Fast path: UTF-8 is common; if it decodes, use it without chardet.
    # The sniffed head may end mid-character, so decode incrementally.
    try:
        codecs.getincrementaldecoder('utf-8')().decode(raw, final=False)
        return 'utf-8'
    except UnicodeDecodeError:
        pass
    result = chardet.detect(raw)
    return result.get('encoding') or 'utf-8'
