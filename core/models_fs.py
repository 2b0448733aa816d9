"""
models_fs.py - Core Data Structure Definitions

Contains:
- Mode: Operation mode
- RunConfig: Immutable run configuration
- FileItem: File or folder discovered during traversal
- RenameOp / RenamePlan: Name substitution operations
- TransformResult: Outcome of transforming a single file
- SearchMatch / SearchResult: Search hits and counters
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Iterable, FrozenSet, List
from enum import Enum
import re


class ConfigError(ValueError):
    """Invalid run configuration"""


class Mode(Enum):
    """Operation mode enumeration"""
    RENAME = "rename"
    REPLACE = "replace"
    SEARCH = "search"
    LIST = "list"
    UNDO = "undo"
    DELETE = "delete"


class TransformResult(Enum):
    """Outcome of applying a content replacement to one file"""
    UNCHANGED = "unchanged"
    WOULD_CHANGE = "would-change"       # dry-run only
    CHANGED = "changed"
    WRITE_FAILED = "write-failed"
    SKIPPED_BINARY = "skipped-binary"
    SKIPPED_MISSING = "skipped-missing"


def normalize_extensions(values: Optional[Iterable[str]]) -> FrozenSet[str]:
    """
    Normalize extension filter values

    "txt", ".txt", ".TXT" and "*.txt" all become ".txt".

    Args:
        values: Raw extension strings

    Returns:
        Set of normalized extensions (empty means all files)
    """
    result = set()
    for value in values or ():
        value = value.strip().lower()
        if value.startswith("*"):
            value = value[1:]
        value = value.lstrip(".")
        if value:
            result.add("." + value)
    return frozenset(result)


@dataclass(frozen=True)
class RunConfig:
    """Run configuration, validated once before any operation starts"""
    mode: Mode
    root: Path
    old: str = ""                   # FROM: search / name-match token
    new: Optional[str] = None       # TO: replacement (rename and replace only)
    extensions: FrozenSet[str] = frozenset()
    exclude_dirs: FrozenSet[str] = frozenset()

    # Flags
    dry_run: bool = False
    verbose: bool = False
    backup: bool = False
    quiet: bool = False
    filenames_only: bool = False
    case_sensitive_search: bool = False
    regex_search: bool = False
    force: bool = False
    ignore_case_replace: bool = False
    debug: bool = False

    @classmethod
    def from_args(cls, args) -> "RunConfig":
        """Build configuration from parsed argparse arguments"""
        try:
            mode = Mode(args.command)
        except ValueError:
            raise ConfigError(f"Unknown mode: {args.command}")

        return cls(
            mode=mode,
            root=Path(args.directory).expanduser(),
            old=getattr(args, "old", "") or "",
            new=getattr(args, "new", None),
            extensions=normalize_extensions(getattr(args, "extensions", None)),
            exclude_dirs=frozenset(getattr(args, "exclude_dir", None) or ()),
            dry_run=getattr(args, "dry_run", False),
            verbose=getattr(args, "verbose", False),
            backup=getattr(args, "backup", False),
            quiet=getattr(args, "quiet", False),
            filenames_only=getattr(args, "filenames_only", False),
            case_sensitive_search=getattr(args, "case_sensitive", False),
            regex_search=getattr(args, "regex", False),
            force=getattr(args, "force", False),
            ignore_case_replace=getattr(args, "ignore_case", False),
            debug=getattr(args, "debug", False),
        )

    def validate(self) -> "RunConfig":
        """
        Check required values for the selected mode

        Returns:
            self, for chaining

        Raises:
            ConfigError: On the first problem found
        """
        if not isinstance(self.mode, Mode):
            raise ConfigError(f"Unknown mode: {self.mode}")

        if not self.root.is_dir():
            raise ConfigError(f"Directory does not exist: {self.root}")

        if self.mode is not Mode.UNDO and not self.old:
            raise ConfigError(f"{self.mode.value}: search text (FROM) is required")

        if self.mode in (Mode.RENAME, Mode.REPLACE) and self.new is None:
            raise ConfigError(f"{self.mode.value}: replacement text (TO) is required")

        if self.mode is Mode.REPLACE and not self.extensions:
            raise ConfigError("replace: at least one file extension is required")

        if self.mode is Mode.SEARCH and self.regex_search:
            try:
                re.compile(self.old)
            except re.error as e:
                raise ConfigError(f"Invalid regular expression {self.old!r}: {e}")

        return self


@dataclass
class FileItem:
    """File or folder found during traversal"""
    path: Path                      # Full path
    name: str                       # Name component
    is_dir: bool = False

    @classmethod
    def from_path(cls, p: Path) -> "FileItem":
        """Create FileItem from Path object"""
        return cls(path=p, name=p.name, is_dir=p.is_dir())

    def relative_to(self, base: Path) -> str:
        """Get relative path string"""
        try:
            return str(self.path.relative_to(base))
        except ValueError:
            return str(self.path)


@dataclass
class RenameOp:
    """Single rename operation"""
    src: Path                       # Source path
    dst: Path                       # Destination path
    is_dir: bool = False

    @property
    def is_same(self) -> bool:
        """Whether source and destination are the same"""
        return self.src == self.dst

    @property
    def is_case_only_change(self) -> bool:
        """Whether it's only a case change"""
        return (self.src.parent == self.dst.parent and
                self.src.name.lower() == self.dst.name.lower() and
                self.src.name != self.dst.name)


@dataclass
class RenamePlan:
    """Batch rename plan: file operations first, then folders deepest-first"""
    ops: List[RenameOp] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid_ops(self) -> List[RenameOp]:
        """Get valid operations (excluding source=destination)"""
        return [op for op in self.ops if not op.is_same]

    @property
    def file_ops(self) -> List[RenameOp]:
        return [op for op in self.valid_ops if not op.is_dir]

    @property
    def folder_ops(self) -> List[RenameOp]:
        return [op for op in self.valid_ops if op.is_dir]

    @property
    def total_count(self) -> int:
        """Total number of operations"""
        return len(self.valid_ops)

    def add_op(self, src: Path, dst: Path, is_dir: bool = False) -> None:
        """Add operation"""
        self.ops.append(RenameOp(src=src, dst=dst, is_dir=is_dir))

    def add_warning(self, msg: str) -> None:
        """Add warning"""
        self.warnings.append(msg)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            "Rename Plan Summary:",
            f"  - Files: {len(self.file_ops)}",
            f"  - Folders: {len(self.folder_ops)}",
            f"  - Skipped: {len(self.warnings)}",
        ]
        return "\n".join(lines)


@dataclass
class SearchMatch:
    """A matching file (filenames-only) or a matching line"""
    path: Path
    line_number: Optional[int] = None   # 1-based
    line: Optional[str] = None

    def format(self) -> str:
        if self.line_number is None:
            return str(self.path)
        return f"{self.path}:{self.line_number}: {self.line}"


@dataclass
class SearchResult:
    """Search counters and hits for one invocation"""
    files_scanned: int = 0
    matches_total: int = 0
    matches: List[SearchMatch] = field(default_factory=list)

    def summary(self) -> str:
        return "\n".join([
            "Search Result:",
            f"  - Files scanned: {self.files_scanned}",
            f"  - Matches: {self.matches_total}",
        ])
