"""
scan_files.py - File Scanning Module

Provides recursive file and folder scanning with name and extension filters
"""

from pathlib import Path
from typing import List, Optional, Callable, Iterable, Iterator, Tuple
import logging
import os

from .models_fs import FileItem
from .text_match import contains
from .sort_rules import sort_deepest_first

logger = logging.getLogger(__name__)


def matches_extension(path: Path, extensions: Optional[Iterable[str]]) -> bool:
    """
    Check a path against a normalized extension filter

    Args:
        path: File path
        extensions: Extensions like ".txt" or ".tar.gz" (empty or None matches everything)

    Returns:
        Whether the path passes the filter
    """
    if not extensions:
        return True
    name = path.name.lower()
    return any(name.endswith(ext) for ext in extensions)


def _walk(root: Path, exclude_dirs: Iterable[str]) -> Iterator[Tuple[Path, List[str], List[str]]]:
    """os.walk in sorted order, pruning excluded directory names"""
    excluded = set(exclude_dirs or ())

    def on_error(e: OSError):
        logger.warning("Cannot read directory %s: %s", e.filename, e.strerror)

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        # Modifying dirnames in place prevents os.walk from entering these directories
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        yield Path(dirpath), dirnames, sorted(filenames)


def _check_root(root: Path) -> Path:
    root = Path(root)
    if not root.is_dir():
        raise ValueError(f"Directory does not exist: {root}")
    return root


def scan_recursive(
    root: Path,
    keyword: str = "",
    case_sensitive: bool = True,
    extensions: Optional[Iterable[str]] = None,
    exclude_dirs: Optional[Iterable[str]] = None,
    file_filter: Optional[Callable[[Path], bool]] = None,
    progress_callback: Optional[Callable[[str], None]] = None
) -> List[FileItem]:
    """
    Recursively scan folder for files whose name contains keyword

    Args:
        root: Root directory
        keyword: Name keyword (empty string means match all)
        case_sensitive: Whether case-sensitive
        extensions: Normalized extension filter
        exclude_dirs: Directory names not to descend into
        file_filter: Additional file filter function
        progress_callback: Progress callback function

    Returns:
        List of matched files
    """
    root = _check_root(root)
    results: List[FileItem] = []

    for current_dir, _dirnames, filenames in _walk(root, exclude_dirs):
        for filename in filenames:
            filepath = current_dir / filename

            if progress_callback:
                progress_callback(str(filepath))

            if not matches_extension(filepath, extensions):
                continue

            if not contains(filename, keyword, case_sensitive):
                continue

            if file_filter and not file_filter(filepath):
                continue

            results.append(FileItem(path=filepath, name=filename, is_dir=False))

    return results


def scan_folders(
    root: Path,
    keyword: str = "",
    case_sensitive: bool = True,
    exclude_dirs: Optional[Iterable[str]] = None
) -> List[FileItem]:
    """
    Recursively collect folders whose name contains keyword

    The root itself is never included. The result is ordered deepest-first,
    so a folder always comes before any of its ancestors.

    Args:
        root: Root directory
        keyword: Name keyword (empty string means match all)
        case_sensitive: Whether case-sensitive
        exclude_dirs: Directory names not to descend into

    Returns:
        List of matched folders
    """
    root = _check_root(root)
    results: List[FileItem] = []

    for current_dir, dirnames, _filenames in _walk(root, exclude_dirs):
        for dirname in dirnames:
            if contains(dirname, keyword, case_sensitive):
                results.append(FileItem(path=current_dir / dirname, name=dirname, is_dir=True))

    return sort_deepest_first(results)
