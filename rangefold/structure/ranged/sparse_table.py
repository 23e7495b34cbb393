"""Sparse table for O(1) idempotent range folds."""

from __future__ import annotations

from typing import Any, Iterable, List

from rangefold.algebra import Commutative, Idempotent, Monoid
from rangefold.structure.ranged.base import LeftFixedOp, RangedStructure, RangeOp
from rangefold.utils import check_range, floor_log2, log

__all__ = ["SparseTable"]


class SparseTable(RangedStructure, RangeOp, LeftFixedOp):
    """
    Build O(n log n), ``range_op`` O(1).  Static.

    ``doubling[i][j]`` is the fold of the ``2**j`` elements starting at ``i``
    (clamped to the last element).  A query combines two windows of equal
    length that may overlap, hence the Idempotent + Commutative requirement.
    """

    needs = (Monoid, Commutative, Idempotent)

    def __init__(self, sequence: Iterable[Any], operator: Monoid) -> None:
        super().__init__(operator)
        a = list(sequence)
        n = len(a)
        depth = floor_log2(n) + 1 if n else 0
        doubling: List[List[Any]] = [[operator.id()] * depth for _ in range(n)]
        for i, x in enumerate(a):
            doubling[i][0] = x
        for j in range(depth - 1):
            step = 1 << j
            for i in range(n):
                doubling[i][j + 1] = operator.op(
                    doubling[i][j], doubling[min(n - 1, i + step)][j]
                )
        self._doubling = doubling
        self._n = n
        log(f"[sparse_table] n={n} depth={depth} op={operator!r}")

    def range_op(self, start: int, end: int) -> Any:
        check_range(start, end, self._n)
        if start == end:
            return self.operator.id()
        t = floor_log2(end - start)
        return self.operator.op(
            self._doubling[start][t], self._doubling[end - (1 << t)][t]
        )

    def right_op(self, r: int) -> Any:
        return self.range_op(0, r)
