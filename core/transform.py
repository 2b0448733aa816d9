"""
transform.py - File Content Replacement Module

Responsibilities:
- Line-by-line literal replacement staged in a temporary file
- Change detection before committing
- Optional backup, then atomic commit by rename
- dry_run support (never touches the target)
"""

from pathlib import Path
from typing import Dict, List, Optional, Callable, Iterable
from dataclasses import dataclass, field
import filecmp
import logging
import os
import shutil
import tempfile

from .models_fs import TransformResult
from .text_match import replace_text
from .binary_sniff import is_probably_text, TEXT_ENCODING, TEXT_ERRORS
from .backup import create_backup, is_backup_file
from .scan_files import scan_recursive

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".filekit.tmp"


@dataclass
class ReplaceResult:
    """Content replacement result, grouped by outcome"""
    outcomes: Dict[TransformResult, List[Path]] = field(
        default_factory=lambda: {r: [] for r in TransformResult}
    )

    def add(self, path: Path, outcome: TransformResult) -> None:
        self.outcomes[outcome].append(path)

    def count(self, outcome: TransformResult) -> int:
        return len(self.outcomes[outcome])

    @property
    def files_processed(self) -> int:
        return sum(len(paths) for paths in self.outcomes.values())

    @property
    def failed_count(self) -> int:
        return self.count(TransformResult.WRITE_FAILED)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            "Replace Result:",
            f"  - Files processed: {self.files_processed}",
            f"  - Changed: {self.count(TransformResult.CHANGED)}",
            f"  - Would change: {self.count(TransformResult.WOULD_CHANGE)}",
            f"  - Unchanged: {self.count(TransformResult.UNCHANGED)}",
            f"  - Skipped (binary): {self.count(TransformResult.SKIPPED_BINARY)}",
            f"  - Write failed: {self.failed_count}",
        ]
        return "\n".join(lines)


def is_temp_file(path: Path) -> bool:
    """Check if it's a staging file left by a transform"""
    return Path(path).name.endswith(TEMP_SUFFIX)


def _discard(temp_path: str) -> None:
    try:
        os.remove(temp_path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Cannot remove staging file %s: %s", temp_path, e)


def _stage(path: Path, old: str, new: str, case_sensitive: bool) -> str:
    """
    Write the transformed content of path to a new staging file

    The staging file lives next to the target so the final rename stays on
    one filesystem. Line endings and undecodable bytes round-trip unchanged.

    Returns:
        Staging file path
    """
    fd, temp_path = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=TEMP_SUFFIX, dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="") as out, \
                open(path, "r", encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="") as src:
            for line in src:
                out.write(replace_text(line, old, new, case_sensitive))
    except BaseException:
        _discard(temp_path)
        raise
    return temp_path


def transform_file(
    path: Path,
    old: str,
    new: str,
    case_sensitive: bool = True,
    backup: bool = False,
    dry_run: bool = False
) -> TransformResult:
    """
    Replace every occurrence of old with new inside one file

    The target is only ever modified by the final os.replace of the staging
    file, so an interrupted run leaves it untouched.

    Args:
        path: Target file
        old: Literal text to find
        new: Replacement text
        case_sensitive: Whether matching is case-sensitive
        backup: Copy the original to its backup path before committing
        dry_run: Compute the outcome without writing anything

    Returns:
        Outcome for this file
    """
    path = Path(path)
    if not path.is_file():
        return TransformResult.SKIPPED_MISSING

    if not is_probably_text(path):
        logger.info("Skipped binary: %s", path)
        return TransformResult.SKIPPED_BINARY

    try:
        temp_path = _stage(path, old, new, case_sensitive)
    except OSError as e:
        logger.warning("Cannot stage %s: %s", path, e)
        return TransformResult.WRITE_FAILED

    try:
        if filecmp.cmp(path, temp_path, shallow=False):
            logger.info("Unchanged: %s", path)
            return TransformResult.UNCHANGED

        if dry_run:
            return TransformResult.WOULD_CHANGE

        if backup:
            create_backup(path)

        try:
            shutil.copymode(path, temp_path)
            os.replace(temp_path, path)
        except OSError as e:
            logger.warning("Write failed for %s: %s", path, e)
            return TransformResult.WRITE_FAILED

        return TransformResult.CHANGED
    finally:
        # No-op after a successful commit
        _discard(temp_path)


def replace_in_tree(
    root: Path,
    old: str,
    new: str,
    extensions: Optional[Iterable[str]] = None,
    case_sensitive: bool = True,
    backup: bool = False,
    dry_run: bool = False,
    exclude_dirs: Optional[Iterable[str]] = None,
    progress_callback: Optional[Callable[[str], None]] = None
) -> ReplaceResult:
    """
    Apply transform_file to every matching file under root

    Backup and staging files are never treated as targets. A failure on one
    file never stops the rest of the batch.

    Args:
        root: Root directory
        old: Literal text to find
        new: Replacement text
        extensions: Normalized extension filter
        case_sensitive: Whether matching is case-sensitive
        backup: Keep a backup of every changed file
        dry_run: Only report
        exclude_dirs: Directory names not to descend into
        progress_callback: Receives one message per changed file

    Returns:
        Replace result
    """
    result = ReplaceResult()

    def is_target(p: Path) -> bool:
        return not (is_backup_file(p) or is_temp_file(p) or p.is_symlink())

    files = scan_recursive(
        root,
        extensions=extensions,
        exclude_dirs=exclude_dirs,
        file_filter=is_target,
    )

    for item in files:
        outcome = transform_file(
            item.path, old, new,
            case_sensitive=case_sensitive,
            backup=backup,
            dry_run=dry_run,
        )
        result.add(item.path, outcome)

        if not progress_callback:
            continue
        if outcome is TransformResult.WOULD_CHANGE:
            progress_callback(f"[DRY-RUN] would change {item.path}")
        elif outcome is TransformResult.CHANGED:
            progress_callback(f"changed {item.path}")

    return result
