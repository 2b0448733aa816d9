"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Sequential execution of a RenamePlan (files, then folders deepest-first)
- Per-operation failure handling; a failed op never stops the batch
- Case-only renames through a temporary name
- dry_run support
"""

from pathlib import Path
from typing import List, Tuple, Optional, Callable
from dataclasses import dataclass, field
import logging
import uuid
import os

from .models_fs import RenamePlan, RenameOp
from .safety_checks import check_rename_op

logger = logging.getLogger(__name__)


@dataclass
class RenameResult:
    """Rename execution result"""
    success: List[RenameOp] = field(default_factory=list)
    failed: List[Tuple[RenameOp, str]] = field(default_factory=list)  # (op, error_msg)
    skipped: List[str] = field(default_factory=list)                 # plan warnings
    dry_run: bool = False

    @property
    def success_count(self) -> int:
        return len(self.success)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def summary(self, dry_run: Optional[bool] = None) -> str:
        """Generate summary (dry_run defaults to how the result was produced)"""
        if dry_run is None:
            dry_run = self.dry_run
        lines = [
            "Execution Result:" if not dry_run else "Preview Result:",
            f"  - {'Would rename' if dry_run else 'Renamed'}: {self.success_count}",
            f"  - Failed: {self.failed_count}",
            f"  - Skipped: {self.skipped_count}",
        ]
        if self.failed:
            lines.append("Failure Details:")
            for op, error in self.failed[:10]:  # Show at most 10
                lines.append(f"  - {op.src.name} -> {op.dst.name}: {error}")
            if len(self.failed) > 10:
                lines.append(f"  ... and {len(self.failed) - 10} more failures")
        return "\n".join(lines)


def _generate_temp_name(original: Path) -> Path:
    """Generate temporary name in the same directory"""
    unique_id = uuid.uuid4().hex[:8]
    temp_name = f".__tmp_rename__{unique_id}__{original.name}"
    return original.parent / temp_name


def _rename(op: RenameOp) -> None:
    if not op.is_case_only_change:
        os.rename(op.src, op.dst)
        return

    # Case-insensitive filesystems treat src and dst as the same entry
    temp_path = _generate_temp_name(op.src)
    os.rename(op.src, temp_path)
    try:
        os.rename(temp_path, op.dst)
    except OSError:
        os.rename(temp_path, op.src)
        raise


def execute_rename(
    plan: RenamePlan,
    dry_run: bool = False,
    progress_callback: Optional[Callable[[int, int, str], None]] = None
) -> RenameResult:
    """
    Execute rename plan

    Args:
        plan: Rename plan
        dry_run: Run the per-operation checks but rename nothing
        progress_callback: Progress callback (current, total, message)

    Returns:
        Execution result
    """
    result = RenameResult(skipped=list(plan.warnings), dry_run=dry_run)
    valid_ops = plan.valid_ops
    total = len(valid_ops)

    for i, op in enumerate(valid_ops):
        ok, error = check_rename_op(op.src, op.dst)
        if ok and not dry_run:
            try:
                _rename(op)
            except OSError as e:
                ok, error = False, str(e)

        if not ok:
            logger.warning("Rename failed: %s -> %s: %s", op.src, op.dst.name, error)
            result.failed.append((op, error))
            continue

        result.success.append(op)
        if progress_callback:
            prefix = "[DRY-RUN] rename" if dry_run else "renamed"
            progress_callback(i + 1, total, f"{prefix} {op.src} -> {op.dst.name}")

    return result
