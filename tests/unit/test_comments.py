"""
Unit tests for comment marker selection.
"""

import pytest

from core.comments import comment_marker, file_suffix


class TestFileSuffix:

    @pytest.mark.parametrize("label, suffix", [
        ("test.py", "py"),
        ("archive.tar.gz", "gz"),
        ("README", ""),
        ("", ""),
        ("src/pkg.v2/Makefile", "v2/Makefile"),
        ("trailing.", ""),
    ])
    def test_suffix(self, label, suffix):
        assert file_suffix(label) == suffix


class TestCommentMarker:

    @pytest.mark.parametrize("label, marker", [
        ("x.py", "#"),
        ("x.rb", "#"),
        ("x.sql", "--"),
        ("x.rs", "//"),
        ("README", "//"),
        ("", "//"),
    ])
    def test_suffix_mapping(self, label, marker):
        assert comment_marker(label) == marker

    def test_override_wins(self):
        assert comment_marker("x.sql", ";") == ";"
        assert comment_marker("", ";") == ";"

    def test_empty_override_is_used(self):
        assert comment_marker("x.py", "") == ""

    def test_suffix_is_case_sensitive(self):
        assert comment_marker("X.PY") == "//"
