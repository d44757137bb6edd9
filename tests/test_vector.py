import pytest

from algokit.errors import IndexOutOfBounds, RangeError
from algokit.vector import Vector


def test_create_with_size_zero():
    with pytest.raises(RangeError):
        Vector(0)


def test_create_with_size_zero_and_value():
    with pytest.raises(RangeError):
        Vector(0, 10)


def test_default_length_is_one():
    assert len(Vector()) == 1


def test_copy_of_vector():
    v1 = Vector(5, 1)
    v2 = v1.copy()
    assert len(v1) == len(v2)
    assert str(v1) == str(v2)


def test_copy_is_independent():
    v1 = Vector(3, 0)
    v2 = v1.copy()
    v2[0] = 9
    assert v1[0] == 0


def test_initial_value():
    v1 = Vector(5, 1)
    assert len(v1) == 5
    assert str(v1) == "[1, 1, 1, 1, 1]"


def test_resize_to_zero():
    v1 = Vector(10, 1)
    with pytest.raises(RangeError):
        v1.resize(0)


def test_increasing_size():
    v1 = Vector(10, 1)
    assert v1.resize(15) == 15
    assert len(v1) == 15
    assert [v1[i] for i in range(10)] == [1] * 10


def test_decreasing_size():
    v1 = Vector(10, 1)
    v1.resize(5)
    assert len(v1) == 5
    assert str(v1) == "[1, 1, 1, 1, 1]"


def test_index_out_of_bounds():
    v1 = Vector(10, 1)
    with pytest.raises(IndexOutOfBounds) as info:
        v1[100]
    assert isinstance(info.value, IndexError)
    assert len(v1) == 10


def test_negative_index_out_of_bounds():
    v1 = Vector(10, 1)
    with pytest.raises(IndexOutOfBounds) as info:
        v1[-1]
    assert isinstance(info.value, IndexError)
    assert str(v1) == "[1, 1, 1, 1, 1, 1, 1, 1, 1, 1]"


def test_set_out_of_bounds():
    v1 = Vector(2, 1)
    with pytest.raises(IndexOutOfBounds) as info:
        v1[2] = 5
    assert isinstance(info.value, IndexError)
    assert len(v1) == 2
    assert str(v1) == "[1, 1]"


def test_changing_value_at_position():
    v1 = Vector(10, 1)
    v1[1] = 2
    assert v1[1] == 2


def test_assign_vector_to_another():
    v1 = Vector(10, 1)
    v2 = Vector(5, 2)
    assert len(v2) == 5
    assert str(v2) == "[2, 2, 2, 2, 2]"
    v2.assign(v1)
    assert len(v2) == 10
    assert str(v2) == "[1, 1, 1, 1, 1, 1, 1, 1, 1, 1]"
    assert v2 == v1