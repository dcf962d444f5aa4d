"""Unit tests for core/extract/numbered.py"""

import pytest

from manuscript.core.extract.numbered import break_numbered_lines


@pytest.mark.parametrize("text,expected", [
    ("1)foo 2)bar",          "1)foo\n2)bar"),
    ("1)foo",                "1)foo"),
    ("手順 1）準備 2）実行",  "手順\n1）準備\n2）実行"),
    ("手順　1）準備",         "手順\n1）準備"),
    ("a\n1)b",               "a\n1)b"),
    ("a\n  1)b",             "a\n  1)b"),
    ("x12)y",                "x\n12)y"),
    ("no markers",           "no markers"),
    ("",                     ""),
])
def test_break_numbered_lines(text, expected):
    """Each marker not already at a line start begins a new line."""
    assert break_numbered_lines(text) == expected


def test_break_numbered_lines_keeps_non_space_content():
    """Only the spacing in front of markers changes."""
    text = "A 1)x 2)y 3)z"
    result = break_numbered_lines(text)
    assert result == "A\n1)x\n2)y\n3)z"
    assert result.replace("\n", "") == text.replace(" ", "")


def test_break_numbered_lines_is_stable():
    """Running the pass twice changes nothing more."""
    once = break_numbered_lines("a 1)b 2)c")
    assert break_numbered_lines(once) == once


def test_fullwidth_digits_are_not_markers():
    """Only ASCII digits form a marker."""
    assert break_numbered_lines("a１)b") == "a１)b"
