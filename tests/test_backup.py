"""
Tests for backup creation and undo.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from core.backup import (
    backup_path_for,
    original_path_for,
    restore_backup,
    undo_tree,
)
from core.transform import replace_in_tree

from conftest import snapshot


class TestBackupPaths:
    def test_suffix_appended_to_full_name(self, tmp_path: Path):
        assert backup_path_for(tmp_path / "a.txt") == tmp_path / "a.txt.bak"

    def test_original_path(self, tmp_path: Path):
        assert original_path_for(tmp_path / "a.txt.bak") == tmp_path / "a.txt"

    @pytest.mark.parametrize("name", ["a.txt", ".bak"])
    def test_not_a_backup(self, tmp_path: Path, name: str):
        with pytest.raises(ValueError):
            original_path_for(tmp_path / name)


class TestRestore:
    def test_restore_overwrites_current_file(self, tmp_path: Path):
        f = tmp_path / "a.txt"
        f.write_text("current\n")
        backup_path_for(f).write_text("original\n")

        assert restore_backup(backup_path_for(f)) == (True, None)
        assert f.read_text() == "original\n"
        assert not backup_path_for(f).exists()

    def test_restore_dry_run(self, tmp_path: Path):
        f = tmp_path / "a.txt"
        f.write_text("current\n")
        backup_path_for(f).write_text("original\n")

        assert restore_backup(backup_path_for(f), dry_run=True) == (True, None)
        assert f.read_text() == "current\n"
        assert backup_path_for(f).exists()

    def test_restore_failure_reported(self, tmp_path: Path, monkeypatch):
        backup = tmp_path / "a.txt.bak"
        backup.write_text("original\n")

        def failing_replace(src, dst):
            raise PermissionError("denied")

        monkeypatch.setattr("core.backup.os.replace", failing_replace)

        ok, error = restore_backup(backup)
        assert not ok
        assert "denied" in error


class TestUndoTree:
    def test_backup_undo_round_trip(self, tree: Path):
        original = snapshot(tree)

        replace_in_tree(tree, "foo", "qux", extensions={".py", ".md", ".txt"}, backup=True)
        assert (tree / "src" / "main.py").read_text() == "import qux\nprint(qux.bar)\n"
        assert (tree / "src" / "main.py.bak").exists()
        # Unchanged files get no backup
        assert not (tree / "src" / "pkg" / "util.py.bak").exists()

        result = undo_tree(tree)

        assert result.restored_count == 3
        assert result.failed_count == 0
        assert snapshot(tree) == original

    def test_second_undo_restores_nothing(self, tree: Path):
        replace_in_tree(tree, "foo", "qux", extensions={".py"}, backup=True)
        undo_tree(tree)

        result = undo_tree(tree)
        assert result.restored_count == 0
        assert result.failed_count == 0

    def test_dry_run_is_pure(self, tree: Path):
        replace_in_tree(tree, "foo", "qux", extensions={".py", ".md"}, backup=True)
        before = snapshot(tree)
        messages = []

        result = undo_tree(tree, dry_run=True, progress_callback=messages.append)

        assert snapshot(tree) == before
        assert len(result.planned) == 2
        assert result.restored_count == 0
        assert all(m.startswith("[DRY-RUN]") for m in messages)

    def test_extension_filter_applies_to_original(self, tree: Path):
        replace_in_tree(tree, "foo", "qux", extensions={".py", ".md"}, backup=True)

        result = undo_tree(tree, extensions={".md"})

        assert result.restored == [tree / "docs" / "readme.md"]
        assert (tree / "src" / "main.py.bak").exists()
