# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from arrdiff.diffing.comparing import compare_loose, compare_strict, get_compare


@pytest.mark.parametrize("x, y", [
    (1, 1),
    ("foo", "foo"),
    (1, "1"),
    ("1", 1),
    (1.0, "1"),
    (1.5, "1.50"),
    (-2, " -2 "),
    (None, None),
    ([1, 2], [1, 2]),
    ("1", "1.0"),
    ("1", "01"),
    ("10", "1e1"),
    (" 2", "2.0"),
    (".5", "0.5"),
])
def test_compare_loose_equal(x, y):
    assert compare_loose(x, y)


@pytest.mark.parametrize("x, y", [
    (1, 2),
    ("foo", "Foo"),
    (1, "one"),
    (1, "2"),
    (True, "1"),
    ("1", True),
    (0, ""),
    (None, "None"),
    ("1", "1.0a"),
    (1000, "1_000"),
    ("1_000", "1000"),
    (1, "inf"),
    (float("inf"), "inf"),
    (float("inf"), "Infinity"),
    (0, "0x0"),
    ("", " "),
])
def test_compare_loose_not_equal(x, y):
    assert not compare_loose(x, y)


def test_compare_strict():
    assert compare_strict(1, 1)
    assert compare_strict(1, 1.0)
    assert not compare_strict(1, "1")


def test_get_compare():
    assert get_compare("loose") is compare_loose
    assert get_compare("strict") is compare_strict
    with pytest.raises(ValueError):
        get_compare("fuzzy")
