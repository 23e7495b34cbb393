"""Range-fold structures over a caller-supplied operator.

| structure                 | build      | right_op  | range_op  | set_at    | needs                          |
|---------------------------|------------|-----------|-----------|-----------|--------------------------------|
| NaiveVec                  | O(n)       | O(r)      | O(r - l)  | O(1)      | Magma (Monoid to fold)         |
| AccumulativeArray         | O(n)       | O(1)      | O(1)      | –         | Monoid (commutative Group)     |
| FenwickTree               | O(n)       | O(log n)  | O(log n)  | O(log n)  | Monoid (commutative Group)     |
| SegmentTree               | O(n)       | O(log n)  | O(log n)  | O(log n)  | Monoid                         |
| SparseTable               | O(n log n) | O(1)      | O(1)      | –         | commutative idempotent Monoid  |
| SquareRootDecomposition   | O(n)       | O(√n)     | O(√n)     | O(√n)     | Monoid                         |
"""

from __future__ import annotations

from rangefold.structure.ranged.accumulative_array import AccumulativeArray
from rangefold.structure.ranged.base import LeftFixedOp, PointAssign, RangedStructure, RangeOp
from rangefold.structure.ranged.fenwick_tree import FenwickTree
from rangefold.structure.ranged.naive_vec import NaiveVec
from rangefold.structure.ranged.segment_tree import SegmentTree
from rangefold.structure.ranged.sparse_table import SparseTable
from rangefold.structure.ranged.square_root_decomposition import SquareRootDecomposition

__all__ = [
    "RangedStructure",
    "RangeOp",
    "LeftFixedOp",
    "PointAssign",
    "NaiveVec",
    "AccumulativeArray",
    "FenwickTree",
    "SegmentTree",
    "SparseTable",
    "SquareRootDecomposition",
]
