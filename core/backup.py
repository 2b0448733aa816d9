"""
backup.py - Backup and Undo Module

Responsibilities:
- Copy a file to its sibling backup before it is rewritten
- Move backups back over their originals (undo)
"""

from pathlib import Path
from typing import List, Tuple, Optional, Callable, Iterable
from dataclasses import dataclass, field
import logging
import os
import shutil

from .scan_files import scan_recursive, matches_extension

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


@dataclass
class UndoResult:
    """Undo execution result"""
    restored: List[Path] = field(default_factory=list)
    failed: List[Tuple[Path, str]] = field(default_factory=list)  # (backup, error_msg)
    planned: List[Path] = field(default_factory=list)             # dry-run only

    @property
    def restored_count(self) -> int:
        return len(self.restored)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            "Undo Result:",
            f"  - Restored: {self.restored_count}",
            f"  - Failed: {self.failed_count}",
        ]
        if self.planned:
            lines.append(f"  - Would restore: {len(self.planned)}")
        return "\n".join(lines)


def backup_path_for(path: Path) -> Path:
    """Backup location for a file: its full name plus the backup suffix"""
    path = Path(path)
    return path.with_name(path.name + BACKUP_SUFFIX)


def original_path_for(backup_path: Path) -> Path:
    """
    Derive the original file path from a backup path

    Raises:
        ValueError: If the name does not carry the backup suffix
    """
    backup_path = Path(backup_path)
    name = backup_path.name
    if not name.endswith(BACKUP_SUFFIX) or len(name) == len(BACKUP_SUFFIX):
        raise ValueError(f"Not a backup file: {backup_path}")
    return backup_path.with_name(name[:-len(BACKUP_SUFFIX)])


def is_backup_file(path: Path) -> bool:
    name = Path(path).name
    return name.endswith(BACKUP_SUFFIX) and len(name) > len(BACKUP_SUFFIX)


def create_backup(path: Path) -> bool:
    """
    Copy a file to its backup path, replacing any older backup

    Args:
        path: File to back up

    Returns:
        Whether the backup was written (failure is logged, not raised)
    """
    target = backup_path_for(path)
    try:
        shutil.copy2(path, target)
    except OSError as e:
        logger.warning("Backup failed for %s: %s", path, e)
        return False
    logger.debug("Backup written: %s", target)
    return True


def restore_backup(backup_path: Path, dry_run: bool = False) -> Tuple[bool, Optional[str]]:
    """
    Move a backup back over its original

    Whatever currently occupies the original path is overwritten.

    Args:
        backup_path: Backup file
        dry_run: Only report

    Returns:
        (restored, error_reason); always (True, None) in dry-run
    """
    original = original_path_for(backup_path)
    if dry_run:
        return True, None

    try:
        os.replace(backup_path, original)
    except OSError as e:
        logger.warning("Restore failed for %s: %s", backup_path, e)
        return False, str(e)
    return True, None


def undo_tree(
    root: Path,
    extensions: Optional[Iterable[str]] = None,
    dry_run: bool = False,
    exclude_dirs: Optional[Iterable[str]] = None,
    progress_callback: Optional[Callable[[str], None]] = None
) -> UndoResult:
    """
    Restore every backup found under root

    Args:
        root: Root directory
        extensions: Filter on the original file's extension
        dry_run: Only report what would be restored
        exclude_dirs: Directory names not to descend into
        progress_callback: Receives one message per backup

    Returns:
        Undo result
    """
    result = UndoResult()

    def wanted(p: Path) -> bool:
        return is_backup_file(p) and matches_extension(original_path_for(p), extensions)

    backups = scan_recursive(root, exclude_dirs=exclude_dirs, file_filter=wanted)

    for item in backups:
        original = original_path_for(item.path)

        if dry_run:
            result.planned.append(item.path)
            if progress_callback:
                progress_callback(f"[DRY-RUN] restore {item.path} -> {original}")
            continue

        ok, error = restore_backup(item.path)
        if ok:
            result.restored.append(original)
            if progress_callback:
                progress_callback(f"restored {original}")
        else:
            result.failed.append((item.path, error))

    return result
