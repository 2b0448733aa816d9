"""
Tests for the text matching helpers.
"""
from __future__ import annotations

import re

import pytest

from core.text_match import (
    contains,
    replace_text,
    compile_line_matcher,
    is_valid_filename,
)


class TestContains:
    def test_empty_keyword_always_matches(self):
        assert contains("anything", "")
        assert contains("", "")

    def test_case_sensitive(self):
        assert contains("HelloWorld", "World")
        assert not contains("HelloWorld", "world")

    def test_case_insensitive(self):
        assert contains("HelloWorld", "WORLD", case_sensitive=False)


class TestReplaceText:
    def test_literal_global(self):
        assert replace_text("a.b.c", ".", "-") == "a-b-c"

    def test_no_regex_interpretation(self):
        assert replace_text("a+b", "a+", "x") == "xb"
        assert replace_text("aab", "a+", "x") == "aab"

    def test_empty_old_leaves_text(self):
        assert replace_text("abc", "", "x") == "abc"
        assert replace_text("abc", "", "x", case_sensitive=False) == "abc"

    def test_case_insensitive_keeps_unmatched_casing(self):
        text = "Foo said FOO to fOo, Bar"
        assert replace_text(text, "foo", "baz", case_sensitive=False) == "baz said baz to baz, Bar"

    def test_case_insensitive_leftmost_non_overlapping(self):
        assert replace_text("AAAA", "aa", "b", case_sensitive=False) == "bb"
        assert replace_text("aAa", "aa", "x", case_sensitive=False) == "xa"

    def test_case_insensitive_replacement_is_literal(self):
        assert replace_text("a.b", ".", r"\1\n", case_sensitive=False) == "a\\1\\nb"

    @pytest.mark.parametrize("text", [
        "foo bar foo",
        "nothing here",
        "foofoo\n",
        "",
    ])
    def test_reverse_replace_restores_disjoint_tokens(self, text):
        once = replace_text(text, "foo", "qux")
        assert replace_text(once, "qux", "foo") == text


class TestLineMatcher:
    def test_literal_case_insensitive_default(self):
        match = compile_line_matcher("todo")
        assert match("# TODO: fix")
        assert not match("done")

    def test_literal_case_sensitive(self):
        match = compile_line_matcher("TODO", case_sensitive=True)
        assert match("TODO")
        assert not match("todo")

    def test_literal_ignores_regex_syntax(self):
        match = compile_line_matcher("a.c")
        assert match("xa.cx")
        assert not match("abc")

    def test_regex(self):
        match = compile_line_matcher(r"^def \w+\(", regex=True)
        assert match("def run(self):")
        assert not match("    x = def_run()")

    def test_regex_case_flag(self):
        assert compile_line_matcher("abc", regex=True)("ABC")
        assert not compile_line_matcher("abc", case_sensitive=True, regex=True)("ABC")

    def test_invalid_regex_raises(self):
        with pytest.raises(re.error):
            compile_line_matcher("(unclosed", regex=True)


class TestIsValidFilename:
    def test_valid(self):
        assert is_valid_filename("report_2024.txt") == (True, None)

    @pytest.mark.parametrize("name", ["", ".", "..", "a/b", "nul\0byte", "x" * 256])
    def test_invalid(self, name):
        valid, error = is_valid_filename(name)
        assert not valid
        assert error
