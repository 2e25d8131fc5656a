# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import op_insert, op_delete, op_unchanged
from .comparing import compare_loose

__all__ = ["llcs_table", "backtrack_edit_script", "llcs"]


def llcs_table(A, B, compare=compare_loose):
    """Compute grid R[x][y] == llcs(A[:x], B[:y]).

    Row 0 and column 0 hold the empty prefix case, so the
    grid has shape (len(A)+1, len(B)+1).
    """
    N, M = len(A), len(B)
    R = [[0]*(M+1) for i in range(N+1)]
    for x in range(1, N+1):
        a = A[x-1]
        for y in range(1, M+1):
            if compare(a, B[y-1]):
                R[x][y] = R[x-1][y-1] + 1
            else:
                R[x][y] = max(R[x-1][y], R[x][y-1])
    return R


def backtrack_edit_script(A, B, R):
    """Walk the llcs grid R from (len(A), len(B)) back to the origin.

    At each step an insertion is preferred over a deletion, and
    a value is only kept unchanged when neither applies. The
    order of these checks picks one script among several equally
    long alignments, so it must not be changed.

    Returns the edit script in A/B order.
    """
    x = len(A)
    y = len(B)
    script = []
    while x > 0 or y > 0:
        if y > 0 and R[x][y-1] == R[x][y]:
            y -= 1
            script.append(op_insert(B[y]))
        elif x > 0 and R[x-1][y] == R[x][y]:
            x -= 1
            script.append(op_delete(A[x]))
        else:
            x -= 1
            y -= 1
            script.append(op_unchanged(A[x]))
    script.reverse()
    return script


def llcs(A, B, compare=compare_loose):
    "Length of the longest common subsequence of A and B."
    R = llcs_table(A, B, compare)
    return R[len(A)][len(B)]
