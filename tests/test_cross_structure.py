from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from rangefold.algebra.typical import Additive, BitXor, Gcd, Max, Min, StringChain
from tests.test_utils import (
    OPERATORS,
    UPDATABLE,
    all_ranges,
    gen_for,
    oracle_fold,
    rng,
    structures_for,
)


def _elements(operator):
    if isinstance(operator, StringChain):
        return st.text(alphabet="xyz", max_size=2)
    if isinstance(operator, (BitXor, Gcd)):
        return st.integers(min_value=0, max_value=255)
    return st.integers(min_value=-50, max_value=50)


# ---------------------------------------------------------------------------
#  Fixed scenarios
# ---------------------------------------------------------------------------
def test_structure_registry_matches_capabilities() -> None:
    names = lambda op: {cls.__name__ for cls in structures_for(op)}  # noqa: E731
    assert names(Additive()) == {
        "NaiveVec",
        "AccumulativeArray",
        "FenwickTree",
        "SegmentTree",
        "SquareRootDecomposition",
    }
    assert names(Max()) == {"NaiveVec", "SegmentTree", "SparseTable", "SquareRootDecomposition"}
    assert names(StringChain()) == {"NaiveVec", "SegmentTree", "SquareRootDecomposition"}


@pytest.mark.parametrize("cls", structures_for(Max()), ids=lambda c: c.__name__)
def test_max_scenario(cls, pi_digits) -> None:
    s = cls.build(pi_digits, Max())
    assert s.range_op(2, 5) == 5
    assert s.right_op(0) == Max().id()
    assert s.range_op(0, 11) == 9
    if cls in UPDATABLE:
        s.set_at(8, 5)
        assert s.range_op(0, 11) == 8


@pytest.mark.parametrize("cls", structures_for(Additive()), ids=lambda c: c.__name__)
def test_additive_scenario(cls, pi_digits) -> None:
    s = cls.build(pi_digits, Additive())
    assert s.range_op(0, 11) == 44
    assert s.right_op(5) == 3 + 1 + 4 + 1 + 5


@pytest.mark.parametrize("operator", OPERATORS, ids=repr)
@pytest.mark.parametrize("n", [0, 1, 7, 16, 30])
def test_all_structures_agree(operator, n) -> None:
    x = gen_for(operator)(rng(1000 + n), n)
    built = [cls.build(x, operator) for cls in structures_for(operator)]
    for i, j in all_ranges(n):
        expected = oracle_fold(operator, x, i, j)
        for s in built:
            assert s.range_op(i, j) == expected, (type(s).__name__, i, j)


# ---------------------------------------------------------------------------
#  Properties
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("operator", OPERATORS, ids=repr)
@given(data=st.data())
def test_equivalence_with_oracle(operator, data) -> None:
    x = data.draw(st.lists(_elements(operator), max_size=24))
    i = data.draw(st.integers(min_value=0, max_value=len(x)))
    j = data.draw(st.integers(min_value=i, max_value=len(x)))
    expected = oracle_fold(operator, x, i, j)
    for cls in structures_for(operator):
        assert cls.build(x, operator).range_op(i, j) == expected


@pytest.mark.parametrize("operator", OPERATORS, ids=repr)
@given(data=st.data())
def test_prefix_matches_range(operator, data) -> None:
    x = data.draw(st.lists(_elements(operator), max_size=24))
    for cls in structures_for(operator):
        s = cls.build(x, operator)
        if not hasattr(s, "right_op"):
            continue
        for r in range(len(x) + 1):
            assert s.right_op(r) == s.range_op(0, r)


@pytest.mark.parametrize("operator", OPERATORS, ids=repr)
@given(data=st.data())
def test_empty_range_is_identity(operator, data) -> None:
    x = data.draw(st.lists(_elements(operator), max_size=24))
    for cls in structures_for(operator):
        s = cls.build(x, operator)
        for i in range(len(x) + 1):
            assert s.range_op(i, i) == operator.id()


@pytest.mark.parametrize("operator", [Min(), Max(), Additive(), BitXor(), StringChain()], ids=repr)
@given(data=st.data())
def test_updates_are_reflected(operator, data) -> None:
    x = data.draw(st.lists(_elements(operator), min_size=1, max_size=20))
    updates = data.draw(
        st.lists(
            st.tuples(st.integers(min_value=0, max_value=len(x) - 1), _elements(operator)),
            max_size=8,
        )
    )
    built = [cls.build(x, operator) for cls in structures_for(operator, UPDATABLE)]
    for idx, value in updates:
        untouched = {
            (i, j): oracle_fold(operator, x, i, j)
            for i, j in all_ranges(len(x))
            if not i <= idx < j
        }
        x[idx] = value
        for s in built:
            s.set_at(value, idx)
        for i, j in all_ranges(len(x)):
            expected = oracle_fold(operator, x, i, j)
            for s in built:
                got = s.range_op(i, j)
                assert got == expected
                if (i, j) in untouched:
                    assert got == untouched[(i, j)]
