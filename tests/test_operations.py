import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.operations import Machine

ALL_OPS = ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]


def test_initial_state():
    values = [3, 1, 2]
    m = Machine(values)
    assert list(m.a) == values
    assert list(m.b) == []
    assert m.instructions == []


@pytest.mark.parametrize("name", ALL_OPS)
def test_each_op_is_recorded_and_emitted(name):
    emitted = []
    m = Machine([1, 2, 3], emit=emitted.append)
    getattr(m, name)()
    assert m.instructions == [name]
    assert emitted == [name]


def test_pb_then_pa_round_trip():
    values = [5, 6, 7]
    m = Machine(values)
    m.pb()
    assert list(m.a) == values[1:]
    assert list(m.b) == values[:1]
    m.pa()
    assert list(m.a) == values
    assert list(m.b) == []


def test_sa_swaps_a_only():
    values = [1, 2, 3]
    m = Machine(values)
    m.pb()
    m.pb()
    b_before = list(m.b)
    m.sa()
    assert list(m.b) == b_before
    assert list(m.a) == values[2:]


def test_ss_swaps_both():
    m = Machine([1, 2, 3, 4, 5])
    m.pb()
    m.pb()
    a_before, b_before = list(m.a), list(m.b)
    m.ss()
    assert list(m.a) == [a_before[1], a_before[0], *a_before[2:]]
    assert list(m.b) == [b_before[1], b_before[0]]


def test_rr_and_rrr_inverse():
    m = Machine([1, 2, 3, 4, 5, 6])
    m.pb()
    m.pb()
    m.pb()
    a_before, b_before = list(m.a), list(m.b)
    m.rr()
    m.rrr()
    assert list(m.a) == a_before
    assert list(m.b) == b_before
    assert m.instructions[-2:] == ["rr", "rrr"]


def test_ops_on_empty_b_are_recorded_noops():
    values = [2, 1]
    m = Machine(values)
    m.sb()
    m.rb()
    m.rrb()
    m.pa()
    assert list(m.a) == values
    assert list(m.b) == []
    assert m.instructions == ["sb", "rb", "rrb", "pa"]


@given(
    st.lists(st.integers(), max_size=10),
    st.lists(st.sampled_from(ALL_OPS), max_size=30),
)
def test_elements_are_conserved(values, ops):
    m = Machine(values)
    for name in ops:
        getattr(m, name)()
    assert sorted([*m.a, *m.b]) == sorted(values)
    assert m.instructions == ops