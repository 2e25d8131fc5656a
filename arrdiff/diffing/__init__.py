# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .sequences import diff_sequence
from .comparing import compare_loose, compare_strict

diff = diff_sequence

__all__ = ["diff", "diff_sequence", "compare_loose", "compare_strict"]
