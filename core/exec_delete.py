"""
exec_delete.py - Name Listing and Deletion Module

Responsibilities:
- List files whose name contains a keyword (case-insensitive)
- Delete them only when forced; preview otherwise
"""

from pathlib import Path
from typing import List, Tuple, Optional, Callable, Iterable
from dataclasses import dataclass, field
import logging
import os

from .models_fs import FileItem
from .scan_files import scan_recursive

logger = logging.getLogger(__name__)


@dataclass
class DeleteResult:
    """Delete execution result"""
    matched: List[Path] = field(default_factory=list)
    deleted: List[Path] = field(default_factory=list)
    failed: List[Tuple[Path, str]] = field(default_factory=list)  # (path, error_msg)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    def summary(self) -> str:
        """Generate summary"""
        return "\n".join([
            "Delete Result:",
            f"  - Matched: {len(self.matched)}",
            f"  - Deleted: {len(self.deleted)}",
            f"  - Failed: {self.failed_count}",
        ])


def list_matching(
    root: Path,
    keyword: str,
    extensions: Optional[Iterable[str]] = None,
    exclude_dirs: Optional[Iterable[str]] = None
) -> List[FileItem]:
    """
    Files under root whose name contains keyword, ignoring case

    Args:
        root: Root directory
        keyword: Name keyword
        extensions: Normalized extension filter
        exclude_dirs: Directory names not to descend into

    Returns:
        Matching files
    """
    return scan_recursive(
        root,
        keyword=keyword,
        case_sensitive=False,
        extensions=extensions,
        exclude_dirs=exclude_dirs,
    )


def delete_matching(
    root: Path,
    keyword: str,
    extensions: Optional[Iterable[str]] = None,
    force: bool = False,
    dry_run: bool = False,
    exclude_dirs: Optional[Iterable[str]] = None,
    progress_callback: Optional[Callable[[str], None]] = None
) -> DeleteResult:
    """
    Delete files whose name contains keyword

    Nothing is removed unless force is set; dry_run overrides force.

    Args:
        root: Root directory
        keyword: Name keyword (case-insensitive)
        extensions: Normalized extension filter
        force: Actually remove files
        dry_run: Only report, even when forced
        exclude_dirs: Directory names not to descend into
        progress_callback: Receives one message per matched file

    Returns:
        Delete result
    """
    result = DeleteResult()
    commit = force and not dry_run

    for item in list_matching(root, keyword, extensions, exclude_dirs):
        result.matched.append(item.path)

        if not commit:
            if progress_callback:
                progress_callback(f"[WOULD DELETE] {item.path}")
            continue

        try:
            os.remove(item.path)
        except OSError as e:
            logger.warning("Delete failed for %s: %s", item.path, e)
            result.failed.append((item.path, str(e)))
            continue

        result.deleted.append(item.path)
        if progress_callback:
            progress_callback(f"deleted {item.path}")

    return result
