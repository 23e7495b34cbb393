# Capability model & operators
from .algebra import (
    Commutative,
    Group,
    Idempotent,
    Magma,
    Monoid,
    Semigroup,
    fold,
    require,
    requires,
    satisfies,
)
from .algebra.typical import Additive, BitXor, Gcd, Max, Min, StringChain

# Ranged structures
from .structure.ranged import (
    AccumulativeArray,
    FenwickTree,
    LeftFixedOp,
    NaiveVec,
    PointAssign,
    RangeOp,
    SegmentTree,
    SparseTable,
    SquareRootDecomposition,
)

# Configuration
from .common.constants import DEFAULT_SEED, RNG_SEEDS, seed_everywhere

__all__ = [
    # algebra
    "Magma",
    "Semigroup",
    "Monoid",
    "Group",
    "Commutative",
    "Idempotent",
    "fold",
    "require",
    "requires",
    "satisfies",
    # operators
    "Min",
    "Max",
    "Additive",
    "BitXor",
    "StringChain",
    "Gcd",
    # structures
    "RangeOp",
    "LeftFixedOp",
    "PointAssign",
    "NaiveVec",
    "AccumulativeArray",
    "FenwickTree",
    "SegmentTree",
    "SparseTable",
    "SquareRootDecomposition",
    # configuration
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
]
