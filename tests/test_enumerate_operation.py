"""Tests for EnumerateOperation.

Author: Michael Economou
Date: 2026-01-07
"""

import pytest

from bulkrename.operations.enumerate_operation import EnumerateOperation


def test_enumerate_default():
    op = EnumerateOperation()
    assert op.rename("a", 0) == "a0"
    assert op.rename("a", 4) == "a4"


@pytest.mark.parametrize(
    "start, increment, padding, index, expected",
    [
        (1, 1, 3, 0, "n001"),
        (1, 1, 3, 4, "n005"),
        (10, 5, 2, 0, "n10"),
        (10, 5, 2, 2, "n20"),
        (0, -1, 0, 2, "n-2"),
    ],
)
def test_enumerate_step_padding(start, increment, padding, index, expected):
    op = EnumerateOperation(start=start, increment=increment, padding=padding)
    assert op.rename("n", index) == expected


def test_prepend_with_separator():
    op = EnumerateOperation(start=1, padding=2, separator="_", prepend=True)
    assert op.rename("tile", 2) == "03_tile"


def test_negative_padding_is_identity():
    op = EnumerateOperation(padding=-1)
    assert op.rename("tile", 0) == "tile"


def test_non_integer_settings_are_identity():
    op = EnumerateOperation()
    op.start = "one"
    assert op.rename("tile", 0) == "tile"


def test_set_data_coerces_values():
    op = EnumerateOperation()
    op.set_data({"start": "7", "increment": "x", "padding": 2, "prepend": True})
    assert op.start == 7
    assert op.increment == 1
    assert op.rename("b", 1) == "08b"


def test_clone_is_independent():
    op = EnumerateOperation(start=5, padding=2)
    copied = op.clone()
    copied.start = 100
    assert op.rename("n", 0) == "n05"
    assert copied.rename("n", 0) == "n100"
