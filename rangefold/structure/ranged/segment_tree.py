"""Iterative bottom-up segment tree."""

from __future__ import annotations

from typing import Any, Iterable, List

from rangefold.algebra import Monoid
from rangefold.structure.ranged.base import LeftFixedOp, PointAssign, RangedStructure, RangeOp
from rangefold.utils import check_index, check_range, log, next_power_of_two

__all__ = ["SegmentTree"]


class SegmentTree(RangedStructure, RangeOp, LeftFixedOp, PointAssign):
    """Build O(n), fold and point assignment O(log n).  Needs a Monoid.

    Node ``k`` holds ``op(node[2k], node[2k + 1])``; leaves live at
    ``[size, 2 * size)`` with ``size = next_power_of_two(n)``.  Folds keep
    two accumulators so that the original order is preserved and nothing is
    ever inverted.
    """

    needs = (Monoid,)

    def __init__(self, sequence: Iterable[Any], operator: Monoid) -> None:
        super().__init__(operator)
        a = list(sequence)
        n = len(a)
        size = next_power_of_two(n)
        data: List[Any] = [operator.id() for _ in range(2 * size)]
        data[size:size + n] = a
        for k in range(size - 1, 0, -1):
            data[k] = operator.op(data[2 * k], data[2 * k + 1])
        self._data = data
        self._size = size
        self._n = n
        log(f"[segment_tree] n={n} leaves={size} op={operator!r}")

    def get(self, index: int) -> Any:
        check_index(index, self._n)
        return self._data[self._size + index]

    def set_at(self, elem: Any, index: int) -> None:
        check_index(index, self._n)
        k = index + self._size
        self._data[k] = elem
        while k > 1:
            k //= 2
            self._data[k] = self.operator.op(self._data[2 * k], self._data[2 * k + 1])

    def _fold(self, start: int, end: int) -> Any:
        op = self.operator.op
        res_left = self.operator.id()
        res_right = self.operator.id()
        lo = start + self._size
        hi = end + self._size
        while lo < hi:
            if lo % 2 == 1:
                res_left = op(res_left, self._data[lo])
                lo += 1
            if hi % 2 == 1:
                hi -= 1
                res_right = op(self._data[hi], res_right)
            lo //= 2
            hi //= 2
        return op(res_left, res_right)

    def range_op(self, start: int, end: int) -> Any:
        check_range(start, end, self._n)
        return self._fold(start, end)

    def right_op(self, r: int) -> Any:
        check_range(0, r, self._n)
        return self._fold(0, r)
