#!/usr/bin/env python3
"""examples/run_all.py – smoke-test for the ranged fold structures.

Run this file directly, or execute `python -m examples.run_all` from the project
root.  It builds every structure over the same small sequence and prints:

  1. max folds, including a point assignment
  2. additive prefix and range folds
  3. string concatenation (non-commutative) through the order-preserving trees
  4. the overlapping-window query of the sparse table
"""

from __future__ import annotations

import time

import rangefold.utils as utils
from rangefold.algebra import satisfies
from rangefold.algebra.typical import Additive, Max, StringChain
from rangefold.structure.ranged import (
    AccumulativeArray,
    FenwickTree,
    NaiveVec,
    SegmentTree,
    SparseTable,
    SquareRootDecomposition,
)

# Activate verbose internal logging so the user can see the build traces.
utils.VERBOSE = True

SEP = "=" * 80
DIGITS = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5]
ALL = [NaiveVec, AccumulativeArray, FenwickTree, SegmentTree, SparseTable, SquareRootDecomposition]


def _hdr(title: str) -> None:
    print(f"\n{SEP}\n{title}\n{SEP}\n")


def _buildable(operator):
    return [cls for cls in ALL if satisfies(operator, *cls.needs)]

# ---------------------------------------------------------------------------
# 1. Max
# ---------------------------------------------------------------------------

def run_max_example() -> None:
    _hdr("1 – max over the digits of pi")
    op = Max()
    print(f"Input: {DIGITS}\n")
    for cls in _buildable(op):
        t0 = time.perf_counter()
        s = cls(DIGITS, op)
        line = f"{cls.__name__:<24} right_op(0)={s.right_op(0)}"
        if hasattr(s, "range_op"):
            line += f"  range_op(2, 5)={s.range_op(2, 5)}  range_op(0, 11)={s.range_op(0, 11)}"
        if hasattr(s, "set_at"):
            s.set_at(8, 5)
            line += f"  after set_at(8, 5): {s.range_op(0, 11)}"
        print(line + f"  ({time.perf_counter() - t0:.6f} s)")

# ---------------------------------------------------------------------------
# 2. Addition
# ---------------------------------------------------------------------------

def run_additive_example() -> None:
    _hdr("2 – addition")
    op = Additive()
    for cls in _buildable(op):
        s = cls(DIGITS, op)
        print(f"{cls.__name__:<24} range_op(0, 11)={s.range_op(0, 11)}  right_op(5)={s.right_op(5)}")

# ---------------------------------------------------------------------------
# 3. Concatenation
# ---------------------------------------------------------------------------

def run_string_example() -> None:
    _hdr("3 – string concatenation")
    op = StringChain()
    words = ["wow", "that", "is", "mississippi"]
    for cls in (NaiveVec, SegmentTree, SquareRootDecomposition):
        s = cls(words, op)
        s.set_at("was", 2)
        print(f"{cls.__name__:<24} range_op(1, 4)={s.range_op(1, 4)!r}")
    ft = FenwickTree(words, op)
    print(f"{'FenwickTree':<24} right_op(4)={ft.right_op(4)!r}  range_op exposed: {hasattr(ft, 'range_op')}")

# ---------------------------------------------------------------------------
# 4. Sparse table overlap
# ---------------------------------------------------------------------------

def run_sparse_example() -> None:
    _hdr("4 – sparse table with overlapping windows")
    s = SparseTable([3, 1, 4, 1, 5], Max())
    print(f"range_op(1, 4) = {s.range_op(1, 4)}   (windows [1, 3) and [2, 4))")


if __name__ == "__main__":
    run_max_example()
    run_additive_example()
    run_string_example()
    run_sparse_example()
