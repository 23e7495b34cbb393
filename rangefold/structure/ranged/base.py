"""Query contracts implemented by the ranged structures."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Type, TypeVar

from rangefold.algebra import Magma, require

__all__ = ["RangedStructure", "RangeOp", "LeftFixedOp", "PointAssign"]

S = TypeVar("S", bound="RangedStructure")


class RangedStructure(ABC):
    """Owns a fixed-length sequence and the operator folding it.

    Subclasses list their base capability requirement in ``needs``; an
    operator lacking one of them is rejected at construction.
    """

    needs: tuple[Type[Magma], ...] = (Magma,)

    def __init__(self, operator: Magma) -> None:
        require(operator, *self.needs, owner=type(self).__name__)
        self.operator = operator
        self._n = 0

    @classmethod
    def build(cls: Type[S], sequence: Iterable[Any], operator: Magma) -> S:
        return cls(sequence, operator)  # type: ignore[call-arg]

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self._n}, operator={self.operator!r})"


# Reads take the structure as mutable state: a lazily propagated variant is
# allowed to restructure itself while answering a query.
class RangeOp(ABC):
    @abstractmethod
    def range_op(self, start: int, end: int) -> Any:
        """Fold of a[start:end], left to right; identity when start == end."""


class LeftFixedOp(ABC):
    @abstractmethod
    def right_op(self, r: int) -> Any:
        """Fold of a[0:r]; identity when r == 0."""


class PointAssign(ABC):
    @abstractmethod
    def set_at(self, elem: Any, index: int) -> None:
        """Replace a[index] with elem and refresh every aggregate covering it."""
