"""Prefix-fold array (cumulative sums for a general monoid)."""

from __future__ import annotations

from typing import Any, Iterable, List

from rangefold.algebra import Commutative, Group, Monoid, requires
from rangefold.structure.ranged.base import LeftFixedOp, RangedStructure, RangeOp
from rangefold.utils import check_range, log

__all__ = ["AccumulativeArray"]


class AccumulativeArray(RangedStructure, RangeOp, LeftFixedOp):
    """Build O(n), ``right_op`` O(1) for any Monoid.

    ``range_op`` is O(1) and only exposed for commutative groups, since it is
    derived as ``op(prefix[end], inv(prefix[start]))``.  Immutable once built.
    """

    needs = (Monoid,)

    def __init__(self, sequence: Iterable[Any], operator: Monoid) -> None:
        super().__init__(operator)
        data: List[Any] = [operator.id()]
        for x in sequence:
            data.append(operator.op(data[-1], x))
        self._data = data
        self._n = len(data) - 1
        log(f"[accumulative_array] n={self._n} op={operator!r}")

    def right_op(self, r: int) -> Any:
        check_range(0, r, self._n)
        return self._data[r]

    @requires(Group, Commutative)
    def range_op(self, start: int, end: int) -> Any:
        check_range(start, end, self._n)
        return self.operator.op(self._data[end], self.operator.inv(self._data[start]))
