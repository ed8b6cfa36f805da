import pytest

from linkedvector import DynamicArray


def test_empty_array_has_no_capacity():
    a = DynamicArray()
    assert len(a) == 0
    assert a.capacity() == 0
    assert list(a) == []


def test_append_grows_geometrically():
    a = DynamicArray()
    caps = []
    for i in range(9):
        a.append(i)
        caps.append(a.capacity())
    assert caps == [4, 4, 4, 4, 8, 8, 8, 8, 16]
    assert list(a) == list(range(9))


def test_pop_keeps_capacity():
    a = DynamicArray(range(10))
    cap = a.capacity()
    while a:
        a.pop()
    assert len(a) == 0
    assert a.capacity() == cap


def test_pop_returns_last_and_raises_when_empty():
    a = DynamicArray([1, 2])
    assert a.pop() == 2
    assert a.pop() == 1
    with pytest.raises(IndexError):
        a.pop()


def test_reserve():
    a = DynamicArray([1, 2, 3])
    a.reserve(10)
    assert a.capacity() >= 13
    cap = a.capacity()
    for i in range(10):
        a.append(i)
    assert a.capacity() == cap
    with pytest.raises(ValueError):
        a.reserve(-1)


def test_initial_capacity():
    a = DynamicArray(capacity=7)
    assert a.capacity() == 7
    assert len(a) == 0
    with pytest.raises(ValueError):
        DynamicArray(capacity=-1)


def test_indexing_matches_builtin_list():
    data = [10, 20, 30, 40]
    a = DynamicArray(data)
    for i in range(-len(data), len(data)):
        assert a[i] == data[i]
    a[-1] = 99
    assert a[3] == 99
    with pytest.raises(IndexError):
        a[4]
    with pytest.raises(IndexError):
        a[-5] = 0


def test_clear_keeps_capacity():
    a = DynamicArray(range(5))
    cap = a.capacity()
    a.clear()
    assert len(a) == 0
    assert a.capacity() == cap
