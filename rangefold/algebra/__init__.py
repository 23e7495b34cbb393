"""Algebraic capability model shared by every ranged structure.

An operator is a small stateless object whose class declares, by
inheritance, which laws its ``op`` satisfies.  Structures demand a subset of
these capabilities: the base requirement is checked when the structure is
built, and methods that need more are hidden behind :func:`requires`.

None of the laws are verified at runtime.  Declaring ``Commutative`` on a
non-commutative ``op`` silently yields wrong folds.
"""

from __future__ import annotations

import functools
import types
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Sequence, Type

__all__ = [
    "Magma",
    "Semigroup",
    "Monoid",
    "Group",
    "Commutative",
    "Idempotent",
    "satisfies",
    "missing_capabilities",
    "require",
    "requires",
    "fold",
]


# ---------------------------------------------------------------------------
#  Capabilities
# ---------------------------------------------------------------------------
class Magma(ABC):
    """A closed binary operator ``op(lhs, rhs)``."""

    @abstractmethod
    def op(self, lhs: Any, rhs: Any) -> Any:
        ...

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(vars(self).items()))))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({args})"


class Semigroup(Magma):
    """``op(op(a, b), c) == op(a, op(b, c))``."""


class Monoid(Semigroup):
    """Semigroup with an identity: ``op(id, a) == op(a, id) == a``."""

    @abstractmethod
    def id(self) -> Any:
        ...


class Group(Monoid):
    """Monoid in which every element has an inverse: ``op(a, inv(a)) == id``."""

    @abstractmethod
    def inv(self, elem: Any) -> Any:
        ...


class Commutative(Magma):
    """``op(a, b) == op(b, a)``."""


class Idempotent(Magma):
    """``op(a, a) == a``, e.g. max or gcd."""


# ---------------------------------------------------------------------------
#  Capability checks
# ---------------------------------------------------------------------------
def missing_capabilities(operator: object, caps: Sequence[Type[Magma]]) -> List[Type[Magma]]:
    return [cap for cap in caps if not isinstance(operator, cap)]


def satisfies(operator: object, *caps: Type[Magma]) -> bool:
    return not missing_capabilities(operator, caps)


def _names(caps: Iterable[Type[Magma]]) -> str:
    return ", ".join(cap.__name__ for cap in caps)


def require(operator: object, *caps: Type[Magma], owner: str = "structure") -> None:
    """Reject ``operator`` unless it declares every capability in ``caps``."""
    missing = missing_capabilities(operator, caps)
    if missing:
        raise TypeError(
            f"{owner} needs an operator that is {_names(caps)}; "
            f"{operator!r} is not {_names(missing)}"
        )


class _GuardedMethod:
    """Method that is only exposed when ``instance.operator`` has ``caps``.

    Accessing it through an instance whose operator lacks a capability raises
    ``AttributeError``, so ``hasattr`` reports the method as absent.
    """

    def __init__(self, func: Callable[..., Any], caps: Sequence[Type[Magma]]) -> None:
        functools.update_wrapper(self, func)
        self.func = func
        self.caps = tuple(caps)
        self.name = func.__name__

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        missing = missing_capabilities(instance.operator, self.caps)
        if missing:
            raise AttributeError(
                f"{type(instance).__name__}.{self.name} needs an operator that is "
                f"{_names(self.caps)}; {instance.operator!r} is not {_names(missing)}"
            )
        return types.MethodType(self.func, instance)


def requires(*caps: Type[Magma]) -> Callable[[Callable[..., Any]], _GuardedMethod]:
    """Decorator hiding a method unless the owner's operator has ``caps``."""

    def wrap(func: Callable[..., Any]) -> _GuardedMethod:
        return _GuardedMethod(func, caps)

    return wrap


def fold(operator: Monoid, items: Iterable[Any]) -> Any:
    """Left fold of ``items`` seeded with ``operator.id()``."""
    acc = operator.id()
    for item in items:
        acc = operator.op(acc, item)
    return acc
