"""Fenwick (binary indexed) tree over an arbitrary monoid."""

from __future__ import annotations

from typing import Any, Iterable, List

from rangefold.algebra import Commutative, Group, Monoid, requires
from rangefold.structure.ranged.base import LeftFixedOp, PointAssign, RangedStructure, RangeOp
from rangefold.utils import check_index, check_range, log, lowest_set_bit

__all__ = ["FenwickTree"]


class FenwickTree(RangedStructure, RangeOp, LeftFixedOp, PointAssign):
    """
    Binary indexed tree supporting prefix folds in O(log n).

    Slot ``i`` (1-based) holds the fold of ``a[i - lsb(i):i]``.

    * ``right_op``         – any Monoid.
    * ``point_op_assign``  – Commutative (the update is merged into covering
      slots out of their left-to-right order).
    * ``range_op``         – commutative Group, as the difference of two
      prefix folds.
    * ``set_at``           – commutative Group: the old value is cancelled with
      its inverse and the new one applied as a point update.

    Without commutativity there is no advantage over ``AccumulativeArray``.
    """

    needs = (Monoid,)

    def __init__(self, sequence: Iterable[Any], operator: Monoid) -> None:
        super().__init__(operator)
        a = list(sequence)
        n = len(a)
        data: List[Any] = [operator.id() for _ in range(n + 1)]
        for i, x in enumerate(a, 1):
            data[i] = operator.op(data[i], x)
            j = i + lowest_set_bit(i)
            if j <= n:
                # children of j arrive in increasing order, before a[j - 1]
                data[j] = operator.op(data[j], data[i])
        self._data = data
        self._n = n
        log(f"[fenwick_tree] n={n} op={operator!r}")

    @classmethod
    def new(cls, count: int, operator: Monoid) -> "FenwickTree":
        """All-identity tree of ``count`` elements."""
        if count < 0:
            raise ValueError("count must be non-negative")
        return cls((operator.id() for _ in range(count)), operator)

    def right_op(self, r: int) -> Any:
        check_range(0, r, self._n)
        res = self.operator.id()
        while r > 0:
            res = self.operator.op(self._data[r], res)
            r -= lowest_set_bit(r)
        return res

    @requires(Group, Commutative)
    def range_op(self, start: int, end: int) -> Any:
        check_range(start, end, self._n)
        right = self.right_op(end)
        left = self.right_op(start)
        return self.operator.op(right, self.operator.inv(left))

    @requires(Commutative)
    def point_op_assign(self, index: int, rhs: Any) -> None:
        """a[index] = op(a[index], rhs)."""
        check_index(index, self._n)
        i = index + 1
        while i <= self._n:
            self._data[i] = self.operator.op(self._data[i], rhs)
            i += lowest_set_bit(i)

    @requires(Group, Commutative)
    def set_at(self, elem: Any, index: int) -> None:
        check_index(index, self._n)
        current = self.range_op(index, index + 1)
        self.point_op_assign(index, self.operator.inv(current))
        self.point_op_assign(index, elem)
