# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, diff_sequence, compare_loose, compare_strict
from .diff_format import source_values, target_values


__all__ = [
    "__version__",
    "diff", "diff_sequence",
    "compare_loose", "compare_strict",
    "source_values", "target_values",
    ]
