"""
Tests for rename planning and execution.
"""
from __future__ import annotations

import os
from pathlib import Path

import pytest

from core.plan_rename import plan_name_rename
from core.exec_rename import execute_rename
from core.scan_files import scan_folders

from conftest import snapshot


@pytest.fixture
def nested(tmp_path: Path) -> Path:
    root = tmp_path / "root"
    (root / "old_a" / "old_b").mkdir(parents=True)
    (root / "old_a" / "old_b" / "old_file.txt").write_text("x")
    (root / "old_a" / "keep.txt").write_text("y")
    (root / "old_top.txt").write_text("z")
    return root


class TestPlan:
    def test_files_before_folders_deepest_first(self, nested: Path):
        plan = plan_name_rename(nested, "old", "new")

        kinds = [op.is_dir for op in plan.valid_ops]
        assert kinds == sorted(kinds)  # all files (False) before folders (True)

        folders = [op.src for op in plan.folder_ops]
        assert folders == [nested / "old_a" / "old_b", nested / "old_a"]

    def test_only_matching_names(self, nested: Path):
        plan = plan_name_rename(nested, "old", "new")
        names = {op.src.name for op in plan.file_ops}
        assert names == {"old_file.txt", "old_top.txt"}

    def test_empty_old_plans_nothing(self, nested: Path):
        assert plan_name_rename(nested, "", "new").total_count == 0

    def test_collision_becomes_warning(self, tmp_path: Path):
        (tmp_path / "a_old.txt").write_text("1")
        (tmp_path / "a_new.txt").write_text("2")
        (tmp_path / "b_old.txt").write_text("3")

        plan = plan_name_rename(tmp_path, "old", "new")

        assert [op.src.name for op in plan.valid_ops] == ["b_old.txt"]
        assert len(plan.warnings) == 1
        assert "a_old.txt" in plan.warnings[0]

    def test_invalid_target_name_becomes_warning(self, tmp_path: Path):
        (tmp_path / "a_old.txt").write_text("1")

        plan = plan_name_rename(tmp_path, "old", "x/y")

        assert plan.total_count == 0
        assert len(plan.warnings) == 1


class TestExecute:
    def test_nested_rename(self, nested: Path):
        result = execute_rename(plan_name_rename(nested, "old", "new"))

        assert result.failed_count == 0
        assert (nested / "new_a" / "new_b" / "new_file.txt").read_text() == "x"
        assert (nested / "new_a" / "keep.txt").read_text() == "y"
        assert (nested / "new_top.txt").read_text() == "z"
        assert not (nested / "old_a").exists()

    def test_no_rename_targets_a_stale_path(self, nested: Path, monkeypatch):
        real_rename = os.rename
        attempts = []

        def recording_rename(src, dst):
            attempts.append(Path(src))
            assert os.path.lexists(src), f"stale path: {src}"
            return real_rename(src, dst)

        monkeypatch.setattr("core.exec_rename.os.rename", recording_rename)

        result = execute_rename(plan_name_rename(nested, "old", "new"))

        assert result.failed_count == 0
        assert attempts.index(nested / "old_a" / "old_b") < attempts.index(nested / "old_a")
        assert attempts.index(nested / "old_a" / "old_b" / "old_file.txt") < attempts.index(nested / "old_a" / "old_b")

    def test_dry_run_is_pure(self, nested: Path):
        before = snapshot(nested)
        messages = []

        result = execute_rename(
            plan_name_rename(nested, "old", "new"),
            dry_run=True,
            progress_callback=lambda current, total, msg: messages.append(msg),
        )

        assert snapshot(nested) == before
        assert result.success_count == 4
        assert all(m.startswith("[DRY-RUN]") for m in messages)

    def test_dry_run_reports_failures_of_real_run(self, tmp_path: Path, monkeypatch):
        (tmp_path / "a_old.txt").write_text("1")
        plan = plan_name_rename(tmp_path, "old", "new")
        monkeypatch.setattr("core.safety_checks.os.access", lambda path, mode: False)

        preview = execute_rename(plan, dry_run=True)
        real = execute_rename(plan)

        assert (preview.success_count, preview.failed_count) == (real.success_count, real.failed_count)
        assert preview.failed_count == 1
        assert "not writable" in preview.failed[0][1]
        assert (tmp_path / "a_old.txt").exists()

    def test_summary_follows_dry_run(self, nested: Path):
        preview = execute_rename(plan_name_rename(nested, "old", "new"), dry_run=True)
        assert "Would rename: 4" in preview.summary()

        real = execute_rename(plan_name_rename(nested, "old", "new"))
        assert "Renamed: 4" in real.summary()

    def test_failure_does_not_stop_batch(self, tmp_path: Path):
        (tmp_path / "a_old.txt").write_text("1")
        (tmp_path / "b_old.txt").write_text("2")
        plan = plan_name_rename(tmp_path, "old", "new")

        # Target appears between planning and execution
        (tmp_path / "a_new.txt").write_text("squatter")

        result = execute_rename(plan)

        assert result.failed_count == 1
        assert result.success_count == 1
        assert (tmp_path / "a_new.txt").read_text() == "squatter"
        assert (tmp_path / "b_new.txt").read_text() == "2"

    def test_case_only_rename(self, tmp_path: Path):
        (tmp_path / "readme.txt").write_text("1")

        result = execute_rename(plan_name_rename(tmp_path, "readme", "README"))

        assert result.failed_count == 0
        assert [p.name for p in tmp_path.iterdir()] == ["README.txt"]


class TestScanFolders:
    def test_deepest_first_and_root_excluded(self, nested: Path):
        (nested / "zz").mkdir()
        folders = [f.path for f in scan_folders(nested)]

        assert nested not in folders
        assert folders.index(nested / "old_a" / "old_b") < folders.index(nested / "old_a")
        assert set(folders) == {nested / "old_a", nested / "old_a" / "old_b", nested / "zz"}
