"""Plain list folded on demand; the oracle for the other structures."""

from __future__ import annotations

from typing import Any, Iterable, List

from rangefold.algebra import Magma, Monoid, fold, requires
from rangefold.structure.ranged.base import LeftFixedOp, PointAssign, RangedStructure, RangeOp
from rangefold.utils import check_index, check_range, log

__all__ = ["NaiveVec"]


class NaiveVec(RangedStructure, RangeOp, LeftFixedOp, PointAssign):
    """Build O(n), fold O(r - l).  Needs only a Magma; folds need a Monoid."""

    needs = (Magma,)

    def __init__(self, sequence: Iterable[Any], operator: Magma) -> None:
        super().__init__(operator)
        self._data: List[Any] = list(sequence)
        self._n = len(self._data)
        log(f"[naive_vec] n={self._n} op={operator!r}")

    def get(self, index: int) -> Any:
        check_index(index, self._n)
        return self._data[index]

    def set_at(self, elem: Any, index: int) -> None:
        check_index(index, self._n)
        self._data[index] = elem

    def point_op_assign(self, index: int, rhs: Any) -> None:
        """a[index] = op(a[index], rhs)."""
        check_index(index, self._n)
        self._data[index] = self.operator.op(self._data[index], rhs)

    @requires(Monoid)
    def range_op(self, start: int, end: int) -> Any:
        check_range(start, end, self._n)
        return fold(self.operator, self._data[start:end])

    @requires(Monoid)
    def right_op(self, r: int) -> Any:
        return self.range_op(0, r)
