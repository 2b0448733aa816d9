"""
sort_rules.py - Sorting Rules Module

Provides the processing orders used by tree operations
"""

from typing import List
from .models_fs import FileItem


def path_depth(item: FileItem) -> int:
    """Number of path components"""
    return len(item.path.parts)


def sort_by_path(items: List[FileItem], reverse: bool = False) -> List[FileItem]:
    """
    Sort by path (for ensuring stable processing order)

    Args:
        items: File list
        reverse: Whether to sort in reverse

    Returns:
        Sorted file list
    """
    return sorted(items, key=lambda f: str(f.path).lower(), reverse=reverse)


def sort_deepest_first(items: List[FileItem]) -> List[FileItem]:
    """
    Order entries so every child comes before its parent

    Deeper paths come first; entries at the same depth keep path order.
    Renaming in this order never invalidates a path still waiting to
    be processed.

    Args:
        items: Folder list

    Returns:
        Sorted list (new list)
    """
    return sorted(items, key=lambda f: (-path_depth(f), str(f.path).lower()))
