"""
Shared fixtures for the File Kit tests.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict

import pytest


def snapshot(root: Path) -> Dict[str, bytes]:
    """Map of relative path -> content (None for directories) for a whole tree."""
    result = {}
    for p in sorted(root.rglob("*")):
        rel = p.relative_to(root).as_posix()
        result[rel] = None if p.is_dir() else p.read_bytes()
    return result


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """A small project tree with text, binary and nested content."""
    root = tmp_path / "project"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "docs").mkdir()

    (root / "src" / "main.py").write_text("import foo\nprint(foo.bar)\n")
    (root / "src" / "pkg" / "util.py").write_text("def helper():\n    return 'no match here'\n")
    (root / "src" / "pkg" / "notes.txt").write_text("Foo and foo and FOO\n")
    (root / "docs" / "readme.md").write_text("# foo docs\n\nUse foo.\n")
    (root / "docs" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00foo\x00")
    return root
