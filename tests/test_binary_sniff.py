"""
Tests for text/binary classification.
"""
from __future__ import annotations

from pathlib import Path

from core.binary_sniff import is_probably_text


class TestIsProbablyText:
    def test_plain_text(self, tmp_path: Path):
        f = tmp_path / "a.txt"
        f.write_text("hello\n")
        assert is_probably_text(f)

    def test_empty_file_is_binary(self, tmp_path: Path):
        f = tmp_path / "empty.txt"
        f.write_bytes(b"")
        assert not is_probably_text(f)

    def test_only_blank_lines_is_binary(self, tmp_path: Path):
        f = tmp_path / "blank.txt"
        f.write_bytes(b"\n\r\n\t\n")
        assert not is_probably_text(f)

    def test_control_characters_only_is_binary(self, tmp_path: Path):
        f = tmp_path / "ctrl.bin"
        f.write_bytes(b"\x01\x02\x03\n\x1b\x7f\n")
        assert not is_probably_text(f)

    def test_nul_byte_is_binary(self, tmp_path: Path):
        f = tmp_path / "data.bin"
        f.write_bytes(b"text before\x00text after\n")
        assert not is_probably_text(f)

    def test_non_utf8_text_is_text(self, tmp_path: Path):
        f = tmp_path / "latin1.txt"
        f.write_bytes(b"caf\xe9 au lait\n")
        assert is_probably_text(f)

    def test_missing_file_is_not_text(self, tmp_path: Path):
        assert not is_probably_text(tmp_path / "missing.txt")
