"""
safety_checks.py - Safety Check Module

Provides checks run right before each rename
"""

from pathlib import Path
from typing import Tuple, Optional
import os

from .text_match import is_valid_filename


def check_writable(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if the directory holding path accepts changes

    Args:
        path: Path to check

    Returns:
        (is_writable, error_reason)
    """
    parent = path.parent
    if not parent.exists():
        return False, f"Parent directory does not exist: {parent}"
    if not os.access(parent, os.W_OK):
        return False, f"Directory is not writable: {parent}"
    return True, None


def is_collision(src: Path, dst: Path) -> bool:
    """
    Whether dst is occupied by something other than src itself

    On case-insensitive filesystems a case-only rename finds the source
    under the new name, which is not a collision.
    """
    if not os.path.lexists(dst):
        return False
    try:
        return not os.path.samefile(src, dst)
    except OSError:
        return True


def check_rename_op(src: Path, dst: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if a single rename operation is safe

    Args:
        src: Source path
        dst: Destination path

    Returns:
        (is_safe, error_reason)
    """
    if not os.path.lexists(src):
        return False, f"Source does not exist: {src}"

    valid, error = is_valid_filename(dst.name)
    if not valid:
        return False, error

    if is_collision(src, dst):
        return False, f"Target already exists: {dst}"

    return check_writable(src)
