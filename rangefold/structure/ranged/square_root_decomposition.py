"""Square-root (block) decomposition."""

from __future__ import annotations

from typing import Any, Iterable, List

from rangefold.algebra import Monoid, fold
from rangefold.structure.ranged.base import LeftFixedOp, PointAssign, RangedStructure, RangeOp
from rangefold.utils import ceil_sqrt, check_index, check_range, log

__all__ = ["SquareRootDecomposition"]


class SquareRootDecomposition(RangedStructure, RangeOp, LeftFixedOp, PointAssign):
    """Build O(n), folds and point assignment O(sqrt n).  Needs a Monoid.

    The sequence is cut into blocks of ``b = ceil(sqrt(n))`` elements, each
    with a cached fold.  Assignment re-folds the owning block, so no inverse
    is needed.
    """

    needs = (Monoid,)

    def __init__(self, sequence: Iterable[Any], operator: Monoid) -> None:
        super().__init__(operator)
        data = list(sequence)
        b = ceil_sqrt(len(data))
        blocks: List[Any] = [operator.id() for _ in range(b)]
        for i, x in enumerate(data):
            blocks[i // b] = operator.op(blocks[i // b], x)
        self._data = data
        self._blocks = blocks
        self._block_len = b
        self._n = len(data)
        log(f"[sqrt_decomposition] n={self._n} block_len={b} op={operator!r}")

    @property
    def block_len(self) -> int:
        return self._block_len

    def _naive_fold(self, start: int, end: int) -> Any:
        return fold(self.operator, self._data[start:end])

    def get(self, index: int) -> Any:
        check_index(index, self._n)
        return self._data[index]

    def set_at(self, elem: Any, index: int) -> None:
        check_index(index, self._n)
        b = self._block_len
        k = index // b
        self._data[index] = elem
        self._blocks[k] = self._naive_fold(k * b, (k + 1) * b)

    def right_op(self, r: int) -> Any:
        check_range(0, r, self._n)
        b = self._block_len
        full = r // b
        res = self.operator.id()
        for k in range(full):
            res = self.operator.op(res, self._blocks[k])
        return self.operator.op(res, self._naive_fold(full * b, r))

    def range_op(self, start: int, end: int) -> Any:
        check_range(start, end, self._n)
        b = self._block_len
        res = self.operator.id()
        pos = start
        while pos < end:
            k = pos // b
            block_end = (k + 1) * b
            if pos == k * b and block_end <= end:
                res = self.operator.op(res, self._blocks[k])
            else:
                res = self.operator.op(res, self._naive_fold(pos, min(block_end, end)))
            pos = block_end
        return res
