"""
cli_entry.py - CLI Entry Point

Supports:
- Command-line argument mode (one subcommand per operation)
- Interactive mode
"""

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from core import (
    Mode, RunConfig, ConfigError,
    plan_name_rename, execute_rename,
    replace_in_tree, search_tree, list_matching,
    undo_tree, delete_matching,
)

logger = logging.getLogger("filekit")

EXIT_OK = 0
EXIT_ITEM_FAILURES = 1
EXIT_USAGE = 2


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="filekit",
        description="Recursive rename, replace, search, list, undo and delete",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rename files and folders containing "draft"
  filekit rename draft final ./docs --dry-run

  # Replace text inside .py and .txt files, keeping .bak copies
  filekit replace old_name new_name ./src py txt --backup

  # Search, printing only file names
  filekit search TODO ./src py --filenames-only

  # Restore all .bak copies
  filekit undo ./src

  # Delete files whose name contains "~" (preview unless --force)
  filekit delete "~" ./src --force
"""
    )

    # Options shared by all subcommands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--verbose", "-v", action="store_true", help="Report unchanged and skipped items")
    common.add_argument("--quiet", "-q", action="store_true", help="Only print the final summary and errors")
    common.add_argument("--debug", action="store_true", help="Trace every step to stderr")
    common.add_argument("--exclude-dir", action="append", default=[], metavar="NAME",
                        help="Directory name to skip (repeatable)")

    subparsers = parser.add_subparsers(dest="command", metavar="MODE", help="Operation")

    # rename subcommand
    rename_parser = subparsers.add_parser("rename", parents=[common], help="Rename files, then folders")
    rename_parser.add_argument("old", metavar="FROM", help="Text to replace in names")
    rename_parser.add_argument("new", metavar="TO", help="Replacement text")
    rename_parser.add_argument("directory", metavar="DIR", help="Root directory")
    rename_parser.add_argument("--dry-run", "-d", action="store_true", help="Preview only, do not execute")

    # replace subcommand
    replace_parser = subparsers.add_parser("replace", parents=[common], help="Replace text inside files")
    replace_parser.add_argument("old", metavar="FROM", help="Text to replace")
    replace_parser.add_argument("new", metavar="TO", help="Replacement text")
    replace_parser.add_argument("directory", metavar="DIR", help="Root directory")
    replace_parser.add_argument("extensions", metavar="EXT", nargs="+", help="File extensions to process")
    replace_parser.add_argument("--dry-run", "-d", action="store_true", help="Preview only, do not execute")
    replace_parser.add_argument("--backup", "-b", action="store_true", help="Keep a .bak copy of every changed file")
    replace_parser.add_argument("--ignore-case", "-i", action="store_true", help="Case-insensitive replacement")

    # search subcommand
    search_parser = subparsers.add_parser("search", parents=[common], help="Search file contents")
    search_parser.add_argument("old", metavar="FROM", help="Text or pattern to search for")
    search_parser.add_argument("directory", metavar="DIR", help="Root directory")
    search_parser.add_argument("extensions", metavar="EXT", nargs="*", help="File extensions to search")
    search_parser.add_argument("--filenames-only", "-l", action="store_true", help="Print matching file names only")
    search_parser.add_argument("--case-sensitive", "-c", action="store_true", help="Case-sensitive")
    search_parser.add_argument("--regex", "-r", action="store_true", help="Treat FROM as a regular expression")

    # list subcommand
    list_parser = subparsers.add_parser("list", parents=[common], help="List files by name")
    list_parser.add_argument("old", metavar="FROM", help="Text the file name must contain")
    list_parser.add_argument("directory", metavar="DIR", help="Root directory")
    list_parser.add_argument("extensions", metavar="EXT", nargs="*", help="File extensions to list")

    # undo subcommand
    undo_parser = subparsers.add_parser("undo", parents=[common], help="Restore .bak backups")
    undo_parser.add_argument("directory", metavar="DIR", help="Root directory")
    undo_parser.add_argument("extensions", metavar="EXT", nargs="*", help="Only restore files with these extensions")
    undo_parser.add_argument("--dry-run", "-d", action="store_true", help="Preview only, do not execute")

    # delete subcommand
    delete_parser = subparsers.add_parser("delete", parents=[common], help="Delete files by name")
    delete_parser.add_argument("old", metavar="FROM", help="Text the file name must contain")
    delete_parser.add_argument("directory", metavar="DIR", help="Root directory")
    delete_parser.add_argument("extensions", metavar="EXT", nargs="*", help="File extensions to delete")
    delete_parser.add_argument("--force", "-f", action="store_true", help="Actually delete (default is preview)")
    delete_parser.add_argument("--dry-run", "-d", action="store_true", help="Preview only, overrides --force")

    # interactive subcommand
    subparsers.add_parser("interactive", help="Menu-driven interactive mode")

    return parser


def configure_logging(config: RunConfig) -> None:
    """Send log records to stderr at the level chosen by the flags"""
    fmt = "%(levelname)s: %(message)s"
    if config.debug:
        level = logging.DEBUG
        fmt = "%(asctime)s %(levelname)s %(name)s:%(funcName)s:%(lineno)d %(message)s"
    elif config.quiet:
        level = logging.ERROR
    elif config.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(level=level, format=fmt, stream=sys.stderr, force=True)


def _printer(config: RunConfig) -> Callable[[str], None]:
    """Per-item output function; silent in quiet mode"""
    if config.quiet:
        return lambda msg: None
    return print


def cmd_rename(config: RunConfig) -> int:
    """Handle rename command"""
    emit = _printer(config)

    plan = plan_name_rename(config.root, config.old, config.new, exclude_dirs=config.exclude_dirs)
    for warning in plan.warnings:
        logger.warning(warning)

    result = execute_rename(
        plan,
        dry_run=config.dry_run,
        progress_callback=lambda current, total, msg: emit(msg),
    )
    print(result.summary())

    return EXIT_ITEM_FAILURES if result.failed_count or result.skipped_count else EXIT_OK


def cmd_replace(config: RunConfig) -> int:
    """Handle replace command"""
    result = replace_in_tree(
        config.root,
        config.old,
        config.new,
        extensions=config.extensions,
        case_sensitive=not config.ignore_case_replace,
        backup=config.backup,
        dry_run=config.dry_run,
        exclude_dirs=config.exclude_dirs,
        progress_callback=_printer(config),
    )
    print(result.summary())

    return EXIT_ITEM_FAILURES if result.failed_count else EXIT_OK


def cmd_search(config: RunConfig) -> int:
    """Handle search command"""
    emit = _printer(config)

    result = search_tree(
        config.root,
        config.old,
        extensions=config.extensions,
        case_sensitive=config.case_sensitive_search,
        regex=config.regex_search,
        filenames_only=config.filenames_only,
        exclude_dirs=config.exclude_dirs,
        match_callback=lambda match: emit(match.format()),
    )
    print(result.summary())

    return EXIT_OK


def cmd_list(config: RunConfig) -> int:
    """Handle list command"""
    emit = _printer(config)

    files = list_matching(config.root, config.old, config.extensions, config.exclude_dirs)
    for f in files:
        emit(str(f.path))
    print(f"Found {len(files)} files")

    return EXIT_OK


def cmd_undo(config: RunConfig) -> int:
    """Handle undo command"""
    result = undo_tree(
        config.root,
        extensions=config.extensions,
        dry_run=config.dry_run,
        exclude_dirs=config.exclude_dirs,
        progress_callback=_printer(config),
    )
    print(result.summary())

    return EXIT_ITEM_FAILURES if result.failed_count else EXIT_OK


def cmd_delete(config: RunConfig) -> int:
    """Handle delete command"""
    result = delete_matching(
        config.root,
        config.old,
        extensions=config.extensions,
        force=config.force,
        dry_run=config.dry_run,
        exclude_dirs=config.exclude_dirs,
        progress_callback=_printer(config),
    )
    print(result.summary())
    if result.matched and not result.deleted and not result.failed:
        print("Nothing was deleted; use --force to delete")

    return EXIT_ITEM_FAILURES if result.failed_count else EXIT_OK


COMMANDS = {
    Mode.RENAME: cmd_rename,
    Mode.REPLACE: cmd_replace,
    Mode.SEARCH: cmd_search,
    Mode.LIST: cmd_list,
    Mode.UNDO: cmd_undo,
    Mode.DELETE: cmd_delete,
}


def run(config: RunConfig) -> int:
    """Dispatch a validated configuration to its command"""
    return COMMANDS[config.mode](config)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    if args.command == "interactive":
        from .cli_interactive import interactive_mode
        return interactive_mode()

    try:
        config = RunConfig.from_args(args).validate()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(config)
    logger.debug("Configuration: %s", config)

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
