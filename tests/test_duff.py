import pytest

from metagems.duff import duff_copy


@pytest.mark.parametrize("unroll", [1, 3, 8, 16])
@pytest.mark.parametrize("count", list(range(0, 35)))
def test_copies_prefix(count, unroll):
    source = bytes(range(1, 41))
    dest = bytearray(40)
    result = duff_copy(dest, source, count, unroll)
    assert result is dest
    assert dest[:count] == source[:count]
    assert dest[count:] == bytearray(40 - count)


def test_default_unroll_with_list():
    source = list("abcdefghijklmnopqrstuvwxyz")
    dest = ["-"] * 30
    duff_copy(dest, source, 26)
    assert dest[:26] == source
    assert dest[26:] == ["-"] * 4


def test_length_preserved():
    dest = [0] * 10
    duff_copy(dest, list(range(10)), 9, 4)
    assert len(dest) == 10
    assert dest == list(range(9)) + [0]


def test_zero_unroll_rejected():
    with pytest.raises(ValueError):
        duff_copy(bytearray(4), b"abcd", 4, 0)


def test_count_too_large_rejected():
    with pytest.raises(ValueError):
        duff_copy(bytearray(2), b"abcd", 4)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        duff_copy(bytearray(4), b"abcd", -1)