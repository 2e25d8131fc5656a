# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Sequence
import logging

import arrdiff.log

from ..diff_format import diff_stats
from .comparing import compare_loose
from .lcs import llcs_table, backtrack_edit_script

__all__ = ["diff_sequence"]


def _check_sequence(arg, name):
    if isinstance(arg, (str, bytes, bytearray)) or not isinstance(arg, Sequence):
        raise TypeError(
            "Argument %r must be a non-string sequence, got %s." % (
                name, type(arg).__name__))


def diff_sequence(a, b, compare=compare_loose):
    """Compute the edit script transforming sequence a into sequence b.

    The script is a list of DiffEntry items in a/b order, each with a
    "value" and a "mask": -1 for values deleted from a, 0 for values
    kept from a, and 1 for values inserted from b. Keeping only the
    entries with mask != -1 gives back b, keeping those with mask != 1
    gives back a, and the kept entries form a longest common
    subsequence of the two.

    Elements are compared with `compare`, which defaults to loose
    equality (numbers match numeric strings). Elements are treated as
    atomic, i.e. nested sequences are not diffed recursively.

    Uses O(len(a)*len(b)) time and memory.
    """
    _check_sequence(a, "a")
    _check_sequence(b, "b")
    if not callable(compare):
        raise TypeError("compare must be callable, got %r." % (compare,))

    arrdiff.log.debug("Diffing sequences of length %d and %d", len(a), len(b))
    R = llcs_table(a, b, compare)
    script = backtrack_edit_script(a, b, R)
    if arrdiff.log.logger.isEnabledFor(logging.DEBUG):
        arrdiff.log.debug("Diff result: %r", diff_stats(script))
    return script
