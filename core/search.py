"""
search.py - Content Search Module

Walks files and reports matching lines, or matching file names only,
while counting files scanned and matches found.
"""

from pathlib import Path
from typing import Optional, Callable, Iterable
import logging

from .models_fs import SearchMatch, SearchResult
from .text_match import compile_line_matcher
from .binary_sniff import is_probably_text, TEXT_ENCODING, TEXT_ERRORS
from .scan_files import scan_recursive

logger = logging.getLogger(__name__)


def search_tree(
    root: Path,
    pattern: str,
    extensions: Optional[Iterable[str]] = None,
    case_sensitive: bool = False,
    regex: bool = False,
    filenames_only: bool = False,
    exclude_dirs: Optional[Iterable[str]] = None,
    match_callback: Optional[Callable[[SearchMatch], None]] = None
) -> SearchResult:
    """
    Search file contents under root

    Every candidate file counts as scanned, including binary or unreadable
    ones whose content is not searched.

    Args:
        root: Root directory
        pattern: Literal text, or a regular expression when regex is set
        extensions: Normalized extension filter
        case_sensitive: Whether case-sensitive
        regex: Treat pattern as a regular expression
        filenames_only: One match per matching file instead of per line
        exclude_dirs: Directory names not to descend into
        match_callback: Receives each match as it is found; when given,
            matches are streamed and not kept in the result

    Returns:
        Search result with counters

    Raises:
        re.error: If regex is set and the pattern is invalid
    """
    matcher = compile_line_matcher(pattern, case_sensitive=case_sensitive, regex=regex)
    result = SearchResult()

    files = scan_recursive(root, extensions=extensions, exclude_dirs=exclude_dirs)

    for item in files:
        result.files_scanned += 1

        if not is_probably_text(item.path):
            logger.debug("Skipping binary file: %s", item.path)
            continue

        try:
            with open(item.path, "r", encoding=TEXT_ENCODING, errors=TEXT_ERRORS) as f:
                for line_number, line in enumerate(f, start=1):
                    line = line.rstrip("\r\n")
                    if not matcher(line):
                        continue

                    if filenames_only:
                        match = SearchMatch(path=item.path)
                    else:
                        match = SearchMatch(path=item.path, line_number=line_number, line=line)

                    result.matches_total += 1
                    if match_callback:
                        match_callback(match)
                    else:
                        result.matches.append(match)

                    if filenames_only:
                        break
        except OSError as e:
            logger.warning("Cannot read %s: %s", item.path, e)

    return result
