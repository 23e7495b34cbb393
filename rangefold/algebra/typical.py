"""Frequently used operators."""

from __future__ import annotations

import math
from typing import Any

from rangefold.algebra import Commutative, Group, Idempotent, Monoid

__all__ = ["Min", "Max", "Additive", "BitXor", "StringChain", "Gcd"]


class Min(Monoid, Commutative, Idempotent):
    """min; the identity is the domain's upper bound."""

    def __init__(self, identity: Any = math.inf) -> None:
        self.identity = identity

    def op(self, lhs: Any, rhs: Any) -> Any:
        return rhs if rhs < lhs else lhs

    def id(self) -> Any:
        return self.identity


class Max(Monoid, Commutative, Idempotent):
    """max; the identity is the domain's lower bound."""

    def __init__(self, identity: Any = -math.inf) -> None:
        self.identity = identity

    def op(self, lhs: Any, rhs: Any) -> Any:
        return rhs if rhs > lhs else lhs

    def id(self) -> Any:
        return self.identity


class Additive(Group, Commutative):
    def op(self, lhs: Any, rhs: Any) -> Any:
        return lhs + rhs

    def id(self) -> Any:
        return 0

    def inv(self, elem: Any) -> Any:
        return -elem


class BitXor(Group, Commutative):
    """Bitwise xor: every element is its own inverse."""

    def op(self, lhs: int, rhs: int) -> int:
        return lhs ^ rhs

    def id(self) -> int:
        return 0

    def inv(self, elem: int) -> int:
        return elem


class StringChain(Monoid):
    """Concatenation; associative but not commutative."""

    def op(self, lhs: str, rhs: str) -> str:
        return lhs + rhs

    def id(self) -> str:
        return ""


class Gcd(Monoid, Commutative, Idempotent):
    # gcd(0, a) == a
    def op(self, lhs: int, rhs: int) -> int:
        return math.gcd(lhs, rhs)

    def id(self) -> int:
        return 0
