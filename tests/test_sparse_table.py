from __future__ import annotations

import pytest

from rangefold.algebra.typical import Additive, Gcd, Max, Min, StringChain
from rangefold.structure.ranged import NaiveVec, SparseTable
from tests.test_utils import all_ranges, gen_ints


def test_sparse_max(pi_digits) -> None:
    st = SparseTable(pi_digits, Max())
    nv = NaiveVec(pi_digits, Max())
    for i, j in all_ranges(len(pi_digits)):
        assert st.range_op(i, j) == nv.range_op(i, j), (i, j)


def test_sparse_overlapping_windows() -> None:
    st = SparseTable([3, 1, 4, 1, 5], Max())
    # windows [1, 3) and [2, 4) share index 2
    assert st.range_op(1, 4) == 4


def test_sparse_scenario(pi_digits) -> None:
    st = SparseTable(pi_digits, Max())
    assert st.range_op(2, 5) == 5
    assert st.right_op(0) == Max().id()
    assert st.range_op(0, 11) == 9


@pytest.mark.parametrize("operator", [Min(), Gcd()], ids=repr)
def test_sparse_other_idempotent_operators(operator) -> None:
    x = gen_ints(3, 40, low=1, high=500)
    st = SparseTable(x, operator)
    nv = NaiveVec(x, operator)
    for i, j in all_ranges(len(x)):
        assert st.range_op(i, j) == nv.range_op(i, j)


def test_sparse_empty() -> None:
    st = SparseTable([], Max())
    assert len(st) == 0
    assert st.range_op(0, 0) == Max().id()


@pytest.mark.parametrize("operator", [Additive(), StringChain()], ids=repr)
def test_sparse_rejects_non_idempotent(operator) -> None:
    with pytest.raises(TypeError, match="Idempotent"):
        SparseTable([1, 2], operator)


def test_sparse_is_static(pi_digits) -> None:
    st = SparseTable(pi_digits, Max())
    assert not hasattr(st, "set_at")
