"""
cli_interactive.py - Interactive CLI

Provides a menu-style interactive interface
"""

import dataclasses
import os
from pathlib import Path
from typing import Optional, List

from core import Mode, RunConfig, ConfigError, normalize_extensions
from .cli_entry import run


def clear_screen():
    """Clear screen"""
    os.system('cls' if os.name == 'nt' else 'clear')


def print_header(title: str):
    """Print header"""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)
    print()


def pause():
    input("\nPress Enter to return...")


def input_directory(prompt: str = "Please enter directory path") -> Optional[Path]:
    """Input and validate directory"""
    while True:
        path_str = input(f"{prompt} (q to return): ").strip()
        if path_str.lower() == 'q':
            return None

        path = Path(path_str).expanduser().resolve()
        if path.is_dir():
            return path
        else:
            print(f"Error: Directory does not exist: {path}")


def input_bool(prompt: str, default: bool = False) -> bool:
    """Input boolean value"""
    default_str = "Y/n" if default else "y/N"
    value = input(f"{prompt} ({default_str}): ").strip().lower()
    if not value:
        return default
    return value == 'y'


def input_extensions(required: bool = False) -> List[str]:
    """Input space-separated extensions"""
    hint = "required" if required else "leave empty for all files"
    while True:
        value = input(f"File extensions, e.g. 'py txt' ({hint}): ").split()
        if value or not required:
            return value
        print("At least one extension is required")


def _run_with_preview(config: RunConfig, commit: RunConfig) -> None:
    """Show the preview run, then run the committing configuration after confirmation"""
    print("\nPreview:")
    print("-" * 70)
    run(config)
    print("-" * 70)

    print()
    if not input_bool("Confirm execution", default=False):
        print("Cancelled")
        return

    print("\nExecuting...")
    run(commit)


def _build(mode: Mode, directory: Path, **values) -> Optional[RunConfig]:
    extensions = normalize_extensions(values.pop("extensions", ()))
    try:
        return RunConfig(mode=mode, root=directory, extensions=extensions, **values).validate()
    except ConfigError as e:
        print(f"Error: {e}")
        return None


def menu_rename():
    """Rename files and folders menu"""
    print_header("Rename Files and Folders")

    directory = input_directory("Please enter root directory")
    if directory is None:
        return

    old = input("Text to replace in names: ")
    new = input("Replace with (leave empty to delete): ")

    config = _build(Mode.RENAME, directory, old=old, new=new, dry_run=True)
    if config:
        _run_with_preview(config, dataclasses.replace(config, dry_run=False))
    pause()


def menu_replace():
    """Replace text inside files menu"""
    print_header("Replace Text in Files")

    directory = input_directory("Please enter root directory")
    if directory is None:
        return

    old = input("Text to replace: ")
    new = input("Replace with (leave empty to delete): ")
    extensions = input_extensions(required=True)
    ignore_case = input_bool("Ignore case", default=False)
    backup = input_bool("Keep .bak backups", default=True)

    config = _build(
        Mode.REPLACE, directory,
        old=old, new=new, extensions=extensions,
        ignore_case_replace=ignore_case, backup=backup, dry_run=True,
    )
    if config:
        _run_with_preview(config, dataclasses.replace(config, dry_run=False))
    pause()


def menu_search():
    """Search file contents menu"""
    print_header("Search File Contents")

    directory = input_directory("Please enter search directory")
    if directory is None:
        return

    old = input("Search text: ")
    extensions = input_extensions()
    regex = input_bool("Regular expression", default=False)
    case_sensitive = input_bool("Case sensitive", default=False)
    filenames_only = input_bool("File names only", default=False)

    config = _build(
        Mode.SEARCH, directory,
        old=old, extensions=extensions, regex_search=regex,
        case_sensitive_search=case_sensitive, filenames_only=filenames_only,
    )
    if config:
        print()
        run(config)
    pause()


def menu_list():
    """List files by name menu"""
    print_header("List Files by Name")

    directory = input_directory("Please enter search directory")
    if directory is None:
        return

    old = input("Name contains: ")
    extensions = input_extensions()

    config = _build(Mode.LIST, directory, old=old, extensions=extensions)
    if config:
        print()
        run(config)
    pause()


def menu_undo():
    """Restore backups menu"""
    print_header("Restore Backups")

    directory = input_directory("Please enter root directory")
    if directory is None:
        return

    extensions = input_extensions()

    config = _build(Mode.UNDO, directory, extensions=extensions, dry_run=True)
    if config:
        _run_with_preview(config, dataclasses.replace(config, dry_run=False))
    pause()


def menu_delete():
    """Delete files by name menu"""
    print_header("Delete Files by Name")

    directory = input_directory("Please enter root directory")
    if directory is None:
        return

    old = input("Name contains: ")
    extensions = input_extensions()

    config = _build(Mode.DELETE, directory, old=old, extensions=extensions)
    if config:
        _run_with_preview(config, dataclasses.replace(config, force=True))
    pause()


MENU = {
    "1": ("Rename files and folders", menu_rename),
    "2": ("Replace text in files", menu_replace),
    "3": ("Search file contents", menu_search),
    "4": ("List files by name", menu_list),
    "5": ("Restore backups (undo)", menu_undo),
    "6": ("Delete files by name", menu_delete),
}


def interactive_mode() -> int:
    """Interactive mode main loop"""
    while True:
        clear_screen()
        print_header("File Kit")

        print("Please select function:")
        print()
        for key, (label, _handler) in MENU.items():
            print(f"  {key}. {label}")
        print()
        print("  q. Exit")
        print()

        choice = input(f"Please select ({'/'.join(MENU)}/q): ").strip().lower()

        if choice == 'q':
            print("Goodbye!")
            return 0
        elif choice in MENU:
            MENU[choice][1]()
        else:
            print("Invalid choice")
            input("Press Enter to continue...")


if __name__ == "__main__":
    import sys
    sys.exit(interactive_mode())
