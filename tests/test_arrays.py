import pytest

from cborkit.arrays import Array
from cborkit.items import CborError, CborType, UnsignedInt


def test_definite_array_push_set_replace():
    arr = Array(2)
    one = UnsignedInt(1)
    two = UnsignedInt(2)
    arr.push(one)
    arr.set(1, two)
    arr.replace(0, one)
    assert list(arr) == [one, two]
    assert arr.is_definite
    assert arr.type is CborType.ARRAY


def test_indefinite_array_push():
    arr = Array()
    one = UnsignedInt(1)
    two = UnsignedInt(2)
    arr.push(one)
    arr.push(two)
    assert list(arr) == [one, two]
    assert not arr.is_definite
    assert arr.capacity is None


def test_indefinite_array_grows():
    arr = Array()
    items = [UnsignedInt(i) for i in range(100)]
    for item in items:
        arr.push(item)
    assert len(arr) == len(items)
    assert list(arr) == items


def test_definite_array_is_not_reallocated():
    arr = Array(1)
    arr.push(UnsignedInt(42))
    with pytest.raises(CborError):
        arr.push(UnsignedInt(43))
    assert len(arr) == 1


def test_zero_capacity_array_refuses_push():
    with pytest.raises(CborError):
        Array(0).push(UnsignedInt(1))


def test_negative_capacity_raises():
    with pytest.raises(CborError):
        Array(-1)


def test_get_by_index():
    arr = Array(1)
    arr.push(UnsignedInt(42))
    assert arr[0].value == 42
    with pytest.raises(IndexError):
        arr[1]


def test_set_beyond_end_raises():
    arr = Array()
    arr.push(UnsignedInt(1))
    with pytest.raises(IndexError):
        arr.set(2, UnsignedInt(2))


def test_set_at_end_appends():
    arr = Array()
    arr.push(UnsignedInt(1))
    arr.set(1, UnsignedInt(2))
    assert [item.value for item in arr] == [1, 2]


def test_replace_out_of_range_raises():
    arr = Array(2)
    arr.push(UnsignedInt(1))
    with pytest.raises(IndexError):
        arr.replace(1, UnsignedInt(2))
    with pytest.raises(IndexError):
        arr.replace(-1, UnsignedInt(2))


def test_set_on_full_definite_array_raises():
    arr = Array(1)
    arr.push(UnsignedInt(1))
    with pytest.raises(CborError):
        arr.set(1, UnsignedInt(2))


def test_sorting_contents():
    arr = Array(4)
    for value in (4, 3, 1, 2):
        arr.push(UnsignedInt(value, ))
    ordered = sorted(arr, key=lambda item: item.value)
    for index, item in enumerate(ordered):
        arr.replace(index, item)
    assert [item.value for item in arr] == sorted([4, 3, 1, 2])


def test_equality_depends_on_definiteness_and_contents():
    first = Array(1)
    first.push(UnsignedInt(7))
    second = Array(1)
    second.push(UnsignedInt(7))
    indefinite = Array()
    indefinite.push(UnsignedInt(7))
    assert first == second
    assert not first == indefinite