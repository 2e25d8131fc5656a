# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import numbers
import operator
import re

__all__ = ["compare_loose", "compare_strict", "get_compare"]


compare_strict = operator.__eq__


def _is_number(x):
    return isinstance(x, numbers.Number) and not isinstance(x, bool)


# Decimal or exponent notation, surrounding whitespace allowed
_numeric_string = re.compile(
    r"\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?\s*")


def _as_number(s):
    if not _numeric_string.fullmatch(s):
        return None
    return float(s)


def compare_loose(x, y):
    """Compare two atomic values, allowing numbers to match numeric strings.

    E.g. 1 == "1", 1.5 == "1.50" and "10" == "1e1", but True != "1".
    Two strings that both spell numbers are compared by value.
    Everything else is compared with ==.
    """
    if isinstance(x, str) and isinstance(y, str):
        m = _as_number(x)
        n = _as_number(y)
        if m is not None and n is not None:
            return m == n
        return x == y
    if isinstance(x, str) and _is_number(y):
        x, y = y, x
    if _is_number(x) and isinstance(y, str):
        n = _as_number(y)
        return n is not None and n == x
    return x == y


_compare_functions = {
    "loose": compare_loose,
    "strict": compare_strict,
}


def get_compare(name):
    "Look up an equality predicate by configuration name."
    try:
        return _compare_functions[name]
    except KeyError:
        raise ValueError("Unknown comparison %r, expected one of %r." % (
            name, sorted(_compare_functions)))
