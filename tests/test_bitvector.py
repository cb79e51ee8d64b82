import pytest
from hypothesis import given, strategies as st

from compactmeta.bitvector import PlainBitvector, SparseBitvector

bit_lists = st.lists(st.booleans(), min_size=1, max_size=200)


def test_plain_rank_on_run_of_ones():
    vector = PlainBitvector.from_ones([0, 1, 2], 6)
    assert vector.rank(1, 5) == 3
    assert vector.rank(0, 5) == 3
    assert vector.rank(1, 0, inclusive=False) == 0


@given(bit_lists)
def test_plain_access_matches_input(bits):
    vector = PlainBitvector.from_ones([i for i, b in enumerate(bits) if b], len(bits))
    assert len(vector) == len(bits)
    assert [vector.access(i) for i in range(len(bits))] == [int(b) for b in bits]


@given(bit_lists)
def test_plain_rank_zero_and_one_partition(bits):
    vector = PlainBitvector.from_ones([i for i, b in enumerate(bits) if b], len(bits))
    for i in range(len(bits)):
        assert vector.rank(0, i) + vector.rank(1, i) == i + 1
        assert vector.rank(1, i) - vector.rank(1, i, inclusive=False) == vector.access(i)


@given(bit_lists)
def test_plain_select_inverts_rank(bits):
    vector = PlainBitvector.from_ones([i for i, b in enumerate(bits) if b], len(bits))
    for i in range(len(bits)):
        b = vector.access(i)
        assert vector.select(b, vector.rank(b, i)) == i


@given(bit_lists)
def test_plain_pred0_succ0(bits):
    vector = PlainBitvector.from_ones([i for i, b in enumerate(bits) if b], len(bits))
    for i in range(len(bits)):
        if vector.rank(0, i) > 0:
            p = vector.pred0(i)
            assert p <= i and vector.access(p) == 0
            assert vector.rank(0, i) == vector.rank(0, p)
        else:
            with pytest.raises(IndexError):
                vector.pred0(i)
        if vector.rank(0, len(bits) - 1) > vector.rank(0, i, inclusive=False):
            s = vector.succ0(i)
            assert s >= i and vector.access(s) == 0
            assert vector.rank(0, s, inclusive=False) == vector.rank(0, i, inclusive=False)


def test_plain_set_and_clear_update_rank():
    vector = PlainBitvector(10)
    vector.set(4)
    before = vector.rank(1, 9)
    vector.set(7)
    assert vector.rank(1, 9) == before + 1
    vector.clear(4)
    assert vector.select(1, 1) == 7


def test_plain_out_of_range_errors():
    vector = PlainBitvector.from_ones([1], 3)
    with pytest.raises(IndexError):
        vector.access(3)
    with pytest.raises(IndexError):
        vector.select(1, 2)
    with pytest.raises(IndexError):
        vector.select(0, 0)
    with pytest.raises(ValueError):
        PlainBitvector(-1)


@given(bit_lists, st.integers(min_value=0, max_value=6))
def test_sparse_agrees_with_plain(bits, lower_bits):
    ones = [i for i, b in enumerate(bits) if b]
    plain = PlainBitvector.from_ones(ones, len(bits))
    sparse = SparseBitvector(ones, len(bits), lower_bits)
    assert len(sparse) == len(bits)
    for i in range(len(bits)):
        assert sparse.rank1(i) == plain.rank(1, i)
        assert sparse.rank1(i, inclusive=False) == plain.rank(1, i, inclusive=False)
        assert sparse.access(i) == plain.access(i)
    for k in range(1, len(ones) + 1):
        assert sparse.select(k) == plain.select(1, k)


@given(bit_lists)
def test_sparse_from_bits_matches_ones(bits):
    sparse = SparseBitvector.from_bits(bits)
    ones = [i for i, b in enumerate(bits) if b]
    assert [sparse.select(k) for k in range(1, len(ones) + 1)] == ones


def test_sparse_select_past_end_returns_last_one():
    sparse = SparseBitvector([3, 40, 77], 100)
    assert sparse.select(4) == 77
    assert sparse.select(50) == 77
    with pytest.raises(IndexError):
        sparse.select(0)


def test_sparse_rejects_bad_positions():
    with pytest.raises(ValueError):
        SparseBitvector([5, 2], 10)
    with pytest.raises(ValueError):
        SparseBitvector([2, 2], 10)
    with pytest.raises(ValueError):
        SparseBitvector([10], 10)


def test_sparse_access_out_of_range():
    sparse = SparseBitvector([1], 4)
    with pytest.raises(IndexError):
        sparse.access(4)