import pytest
from hypothesis import given
from hypothesis import strategies as st

from compactmeta.gamma import GammaArray, gamma_decode, gamma_encode


def test_encode_known_codes():
    assert gamma_encode(1) == "1"
    assert gamma_encode(2) == "010"
    assert gamma_encode(5) == "00101"


@pytest.mark.parametrize("value", [0, -3])
def test_encode_rejects_non_positive(value):
    with pytest.raises(ValueError):
        gamma_encode(value)


@given(st.integers(min_value=1, max_value=2**70))
def test_encode_decode_round_trip(value):
    code = gamma_encode(value)
    assert gamma_decode(code) == (value, len(code))
    assert len(code) == 2 * value.bit_length() - 1


@given(st.lists(st.integers(min_value=1, max_value=10**6), min_size=1, max_size=30))
def test_decode_concatenated_codes(values):
    bits = "".join(gamma_encode(v) for v in values)
    offset = 0
    decoded = []
    while offset < len(bits):
        value, length = gamma_decode(bits, offset)
        decoded.append(value)
        offset += length
    assert decoded == values


def test_decode_truncated_raises():
    with pytest.raises(ValueError):
        gamma_decode(gamma_encode(9)[:-1])


def test_decode_offset_out_of_range():
    with pytest.raises(IndexError):
        gamma_decode("1", 5)


@given(
    st.lists(st.integers(min_value=0, max_value=10**9), max_size=200),
    st.sampled_from([0, 1, 2, 3, 7, 64]),
)
def test_array_round_trip(values, block_size):
    array = GammaArray(values, block_size)
    assert len(array) == len(values)
    assert list(array) == values
    assert [array[i] for i in range(len(values))] == values


def test_array_negative_index():
    values = [4, 0, 17, 3]
    array = GammaArray(values, 2)
    assert array[-1] == values[-1]
    assert array[-4] == values[0]


def test_array_index_errors():
    array = GammaArray([1, 2, 3])
    assert array[2] == 3
    assert array[-3] == 1
    with pytest.raises(IndexError):
        array[3]
    with pytest.raises(IndexError):
        array[-4]


def test_array_rejects_negative_values():
    with pytest.raises(ValueError):
        GammaArray([1, -1])


def test_array_small_block_size_uses_default():
    assert GammaArray([1, 2], 1).block_size == GammaArray([1, 2]).block_size


def test_array_bit_length_matches_codes():
    values = [0, 5, 100]
    array = GammaArray(values)
    assert array.bit_length == sum(len(gamma_encode(v + 1)) for v in values)