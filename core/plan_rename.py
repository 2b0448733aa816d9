"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Compute new names by literal substitution
- Order operations: all files first, then folders deepest-first
- Skip invalid names and collisions with a warning
- Output RenamePlan
"""

from pathlib import Path
from typing import List, Optional, Iterable, Set

from .models_fs import FileItem, RenamePlan
from .text_match import replace_text, is_valid_filename
from .safety_checks import is_collision
from .scan_files import scan_recursive, scan_folders
from .sort_rules import sort_by_path


def _plan_items(
    plan: RenamePlan,
    items: List[FileItem],
    old_str: str,
    new_str: str,
    case_sensitive: bool,
    claimed: Set[str]
) -> None:
    for item in items:
        new_name = replace_text(item.name, old_str, new_str, case_sensitive)

        # Skip if name hasn't changed
        if new_name == item.name:
            continue

        valid, error = is_valid_filename(new_name)
        if not valid:
            plan.add_warning(f"Skip {item.path}: {error}")
            continue

        dst = item.path.with_name(new_name)
        key = str(dst)
        if key in claimed or is_collision(item.path, dst):
            plan.add_warning(f"Skip {item.path}: target already exists: {dst}")
            continue

        claimed.add(key)
        plan.add_op(item.path, dst, is_dir=item.is_dir)


def plan_name_rename(
    root: Path,
    old_str: str,
    new_str: str,
    case_sensitive: bool = True,
    exclude_dirs: Optional[Iterable[str]] = None
) -> RenamePlan:
    """
    Generate the rename plan for a whole tree

    Every path in the plan refers to the tree as it is before any rename.
    That holds during execution because files go first and each folder is
    renamed before any of its ancestors.

    Args:
        root: Root directory
        old_str: String to replace in names
        new_str: Replacement string
        case_sensitive: Whether case-sensitive
        exclude_dirs: Directory names not to descend into

    Returns:
        Rename plan
    """
    plan = RenamePlan()

    if not old_str:
        return plan

    # Pre-filter at traversal time: only names containing old_str
    files = sort_by_path(scan_recursive(
        root, keyword=old_str, case_sensitive=case_sensitive, exclude_dirs=exclude_dirs
    ))
    folders = scan_folders(
        root, keyword=old_str, case_sensitive=case_sensitive, exclude_dirs=exclude_dirs
    )

    claimed: Set[str] = set()
    _plan_items(plan, files, old_str, new_str, case_sensitive, claimed)
    _plan_items(plan, folders, old_str, new_str, case_sensitive, claimed)

    return plan
