"""
binary_sniff.py - Text/Binary Classification

A file counts as text when it has at least one line containing a printable,
non-control character. Files with a NUL byte near the start, unreadable files
and empty files are treated as binary and skipped by content operations.
"""

from pathlib import Path
import logging

logger = logging.getLogger(__name__)

# Same window git and grep use for their NUL-byte check
SNIFF_BYTES = 8000

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


def _has_printable(line: str) -> bool:
    # str.isprintable() is False for control characters and lone surrogates
    return any(ch.isprintable() for ch in line)


def is_probably_text(path: Path) -> bool:
    """
    Guess whether a file holds text

    Args:
        path: File to inspect

    Returns:
        True if the file looks like text
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            head = f.read(SNIFF_BYTES)
            if b"\0" in head:
                logger.debug("NUL byte in %s, treating as binary", path)
                return False

        with open(path, "r", encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="") as f:
            for line in f:
                if _has_printable(line):
                    return True
    except OSError as e:
        logger.debug("Cannot read %s: %s", path, e)
        return False

    logger.debug("No printable line in %s, treating as binary", path)
    return False
