"""
text_match.py - Text Matching Tools

Provides string matching, replacement and other functions
"""

from typing import Optional, Callable
import os
import re


def contains(text: str, keyword: str, case_sensitive: bool = True) -> bool:
    """
    Check if text contains keyword

    Args:
        text: Text to check
        keyword: Keyword (empty string always matches)
        case_sensitive: Whether case-sensitive

    Returns:
        Whether contains
    """
    if not keyword:
        return True

    if case_sensitive:
        return keyword in text
    else:
        return keyword.casefold() in text.casefold()


def replace_text(text: str, old: str, new: str, case_sensitive: bool = True) -> str:
    """
    Replace every occurrence of a literal string

    Matches are leftmost and non-overlapping. In case-insensitive mode the
    unmatched parts of the text keep their original casing and `new` is
    inserted verbatim (no backreference expansion).

    Args:
        text: Original text
        old: String to replace (empty string leaves text unchanged)
        new: Replacement string
        case_sensitive: Whether case-sensitive

    Returns:
        Replaced text
    """
    if not old:
        return text

    if case_sensitive:
        return text.replace(old, new)
    else:
        pattern = re.compile(re.escape(old), re.IGNORECASE)
        return pattern.sub(lambda _m: new, text)


def compile_line_matcher(
    pattern: str,
    case_sensitive: bool = False,
    regex: bool = False
) -> Callable[[str], bool]:
    """
    Build a predicate that tells whether a line matches

    Args:
        pattern: Literal text or regular expression
        case_sensitive: Whether case-sensitive
        regex: Treat pattern as a regular expression

    Returns:
        Function taking a line and returning whether it matches

    Raises:
        re.error: If regex is set and pattern does not compile
    """
    if regex:
        flags = 0 if case_sensitive else re.IGNORECASE
        compiled = re.compile(pattern, flags)
        return lambda line: compiled.search(line) is not None

    if case_sensitive:
        return lambda line: pattern in line

    folded = pattern.casefold()
    return lambda line: folded in line.casefold()


def is_valid_filename(name: str) -> tuple[bool, Optional[str]]:
    """
    Check if a name can be used as a single path component

    Args:
        name: Filename

    Returns:
        (is_valid, error_reason)
    """
    if not name:
        return False, "Filename cannot be empty"

    if name in (".", ".."):
        return False, f"Filename cannot be {name!r}"

    invalid_chars = "/\0" + ("\\:" if os.name == "nt" else "")
    for char in invalid_chars:
        if char in name:
            return False, f"Filename contains invalid character: {char!r}"

    if len(name) > 255:
        return False, "Filename exceeds 255 characters"

    return True, None
