"""
core - File Kit Core Module

Provides tree scanning, name rename, content replace, search, list,
delete and backup/undo operations.
"""

from .models_fs import (
    Mode,
    RunConfig,
    ConfigError,
    FileItem,
    RenameOp,
    RenamePlan,
    TransformResult,
    SearchMatch,
    SearchResult,
    normalize_extensions,
)

from .scan_files import (
    scan_recursive,
    scan_folders,
    matches_extension,
)

from .text_match import (
    contains,
    replace_text,
    compile_line_matcher,
    is_valid_filename,
)

from .binary_sniff import (
    is_probably_text,
)

from .sort_rules import (
    sort_by_path,
    sort_deepest_first,
)

from .plan_rename import (
    plan_name_rename,
)

from .exec_rename import (
    execute_rename,
    RenameResult,
)

from .transform import (
    transform_file,
    replace_in_tree,
    ReplaceResult,
)

from .backup import (
    BACKUP_SUFFIX,
    backup_path_for,
    original_path_for,
    create_backup,
    restore_backup,
    undo_tree,
    UndoResult,
)

from .search import (
    search_tree,
)

from .exec_delete import (
    list_matching,
    delete_matching,
    DeleteResult,
)

from .safety_checks import (
    check_writable,
    check_rename_op,
)

__all__ = [
    # Data models
    "Mode",
    "RunConfig",
    "ConfigError",
    "FileItem",
    "RenameOp",
    "RenamePlan",
    "TransformResult",
    "SearchMatch",
    "SearchResult",
    "RenameResult",
    "ReplaceResult",
    "UndoResult",
    "DeleteResult",
    "normalize_extensions",

    # Scanning
    "scan_recursive",
    "scan_folders",
    "matches_extension",

    # Text processing
    "contains",
    "replace_text",
    "compile_line_matcher",
    "is_valid_filename",
    "is_probably_text",

    # Sorting
    "sort_by_path",
    "sort_deepest_first",

    # Rename
    "plan_name_rename",
    "execute_rename",

    # Replace
    "transform_file",
    "replace_in_tree",

    # Backup / undo
    "BACKUP_SUFFIX",
    "backup_path_for",
    "original_path_for",
    "create_backup",
    "restore_backup",
    "undo_tree",

    # Search, list, delete
    "search_tree",
    "list_matching",
    "delete_matching",

    # Safety checks
    "check_writable",
    "check_rename_op",
]
