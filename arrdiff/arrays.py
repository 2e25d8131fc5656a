# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Helpers for filtering, searching and sorting lists and dicts."""

from collections.abc import Mapping, Sized
import itertools
import numbers
import re

from .diffing.comparing import compare_loose, _as_number

__all__ = [
    "filter_by_key", "filter_by_key_prefix", "in_array", "is_assoc",
    "is_empty", "key_string_replace", "permute",
    "sort_by_field", "sort_by_attribute", "sort_by_method",
    ]


_sort_orders = {
    "asc": False,
    "ascending": False,
    "desc": True,
    "descending": True,
}

_int_key = re.compile(r"-?(0|[1-9][0-9]*)")


def _items(array):
    if isinstance(array, Mapping):
        return array.items()
    return enumerate(array)


def filter_by_key(array, callback):
    """Keep the items of array whose key passes callback.

    For a list the keys are the indices. Keys are preserved, so the
    result is always a dict:

        filter_by_key(['foo', 'bar', 'baz'], lambda k: k > 1)  # {2: 'baz'}
    """
    return {k: v for k, v in _items(array) if callback(k)}


def filter_by_key_prefix(array, prefix):
    "Keep the items of array whose (string) key starts with prefix."
    return filter_by_key(
        array, lambda k: isinstance(k, str) and k.startswith(prefix))


def in_array(needle, haystack, wildcard='*'):
    """Search haystack for needle, supporting wildcards.

    Without a wildcard this is a plain (loose) membership test. Otherwise
    'foo*' matches values starting with 'foo', '*foo' values ending with
    'foo', and '*foo*' values containing 'foo'.
    """
    if wildcard not in needle:
        return any(compare_loose(needle, value) for value in haystack)

    leading = needle.startswith(wildcard)
    trailing = needle.endswith(wildcard)
    needle = needle.replace(wildcard, '')

    for value in haystack:
        if not isinstance(value, str):
            continue
        if leading and trailing:
            found = needle in value
        elif leading:
            found = value.endswith(needle)
        else:
            found = value.startswith(needle)
        if found:
            return True
    return False


def is_assoc(array):
    """Whether array is a mapping with at least one non-integer key.

    String keys that spell an integer ('8') count as integer keys.
    """
    if not isinstance(array, Mapping):
        return False
    for k in array:
        if isinstance(k, str) and not _int_key.fullmatch(k):
            return True
    return False


def _is_zero(value):
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Number):
        return value == 0
    if isinstance(value, str):
        return _as_number(value) == 0
    return False


def _is_blank(value):
    # None, False, 0, 0.0, '', '0' and empty containers
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value in ('', '0')
    if isinstance(value, numbers.Number):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def _has_key(array, key):
    if isinstance(array, Mapping):
        return key in array
    # lists only have non-negative integer keys
    if isinstance(key, bool) or not isinstance(key, int):
        return False
    return 0 <= key < len(array)


def is_empty(key, array, is_zero_empty=True):
    """Whether key is missing from array, or its value is empty.

    Empty values are None, False, 0, '' and '0', and empty containers.
    For a list, key is an index.
    If is_zero_empty is False, a zero value is not considered empty.
    """
    if not _has_key(array, key):
        return True
    value = array[key]
    empty = _is_blank(value)
    if empty and not is_zero_empty:
        empty = not _is_zero(value)
    return empty


def _as_list(arg, name):
    if isinstance(arg, str):
        return [arg]
    if isinstance(arg, (list, tuple)):
        return list(arg)
    raise ValueError("%s should be a string or a list of strings" % name)


def key_string_replace(search, replace, array):
    """Replace search with replace in the keys of array (case-insensitive).

    search and replace can be strings, or lists where the n-th search
    string is replaced by the n-th replace string (missing replacements
    are taken as ''). A single replace string is used for every search.
    Non-string keys are kept as they are.
    """
    searches = _as_list(search, "search")
    if isinstance(replace, str):
        replaces = [replace] * len(searches)
    else:
        replaces = _as_list(replace, "replace")
        replaces += [''] * (len(searches) - len(replaces))

    result = {}
    for k, v in _items(array):
        if isinstance(k, str):
            for s, r in zip(searches, replaces):
                if not s:
                    continue
                k = re.sub(re.escape(s), lambda m: r, k, flags=re.IGNORECASE)
        result[k] = v
    return result


def permute(items):
    """Return all orderings of items.

    The number of permutations grows with the factorial of len(items).
    """
    return [list(p) for p in itertools.permutations(items)]


def _sort(items, key, sort):
    try:
        reverse = _sort_orders[sort.lower()]
    except (KeyError, AttributeError):
        raise ValueError("sort should be 'asc[ending]' or 'desc[ending]', not %r" % (sort,))
    result = sorted(items, key=key)
    if reverse:
        result.reverse()
    return result


def sort_by_field(array, field, sort='asc'):
    "Sort a list of dicts by the value of field."
    if not all(isinstance(v, Mapping) and field in v for v in array):
        raise ValueError(
            "array should be a list of mappings all with the key %r" % (field,))
    return _sort(array, lambda v: v[field], sort)


def sort_by_attribute(array, name, sort='asc'):
    "Sort a list of objects by the value of attribute name."
    if not all(hasattr(v, name) for v in array):
        raise ValueError(
            "array should be a list of objects with attribute %r" % (name,))
    return _sort(array, lambda v: getattr(v, name), sort)


def sort_by_method(array, name, sort='asc'):
    "Sort a list of objects by the return value of their method name."
    if not all(callable(getattr(v, name, None)) for v in array):
        raise ValueError(
            "array should be a list of objects with method %r" % (name,))
    return _sort(array, lambda v: getattr(v, name)(), sort)
