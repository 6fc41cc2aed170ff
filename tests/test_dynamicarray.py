import pytest

from hermeskit.dynamicarray import GROWTH_FACTOR, DynamicArray


def make(items, capacity=4):
    array = DynamicArray(capacity)
    array.extend(items)
    return array


def test_new_array_is_empty_with_given_capacity():
    array = DynamicArray(16)
    assert len(array) == 0
    assert list(array) == []
    assert array.capacity() == 16


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        DynamicArray(-1)


def test_append_keeps_order():
    items = ["x", "y", "z", "w", "v"]
    array = DynamicArray(2)
    for item in items:
        array.append(item)
    assert list(array) == items
    assert len(array) == len(items)


def test_capacity_stays_above_length():
    array = DynamicArray(1)
    for value in range(100):
        array.append(value)
        assert array.capacity() > len(array)


def test_growth_happens_when_last_slot_would_fill():
    array = DynamicArray(4)
    array.extend([1, 2, 3])
    assert array.capacity() == 4
    array.append(4)
    assert array.capacity() == int(4 * GROWTH_FACTOR)


def test_grow_multiplies_capacity():
    array = DynamicArray(5)
    array.grow()
    assert array.capacity() == int(5 * GROWTH_FACTOR)


def test_grow_from_zero_capacity_makes_room():
    array = DynamicArray(0)
    array.append("a")
    assert list(array) == ["a"]
    assert array.capacity() > len(array)


def test_shrink_leaves_one_free_slot():
    array = make(range(10), capacity=64)
    array.shrink()
    assert array.capacity() == len(array) + 1
    assert list(array) == list(range(10))


def test_clear_keeps_capacity():
    array = make(range(10))
    capacity = array.capacity()
    array.clear()
    assert len(array) == 0
    assert array.capacity() == capacity


def test_concat_appends_other_array():
    first = make(["a", "b"])
    second = make(["c", "d", "e"])
    first.concat(second)
    assert list(first) == ["a", "b"] + ["c", "d", "e"]
    assert list(second) == ["c", "d", "e"]


def test_delete_removes_range():
    array = make(range(6))
    array.delete(1, 2)
    assert list(array) == [0, 3, 4, 5]


def test_delete_outside_raises():
    array = make(range(3))
    with pytest.raises(IndexError):
        array.delete(2, 5)


def test_insert_in_middle():
    array = make([1, 2, 3])
    array.insert(1, ["a", "b"])
    assert list(array) == [1, "a", "b", 2, 3]
    assert array.capacity() > len(array)


def test_insert_at_end_matches_extend():
    inserted = make([1, 2])
    extended = make([1, 2])
    inserted.insert(len(inserted), [3, 4, 5])
    extended.extend([3, 4, 5])
    assert list(inserted) == list(extended)


def test_insert_past_end_raises():
    array = make([1])
    with pytest.raises(IndexError):
        array.insert(3, [2])


def test_replace_overwrites_and_extends():
    array = make([1, 2, 3])
    array.replace(2, [7, 8, 9])
    assert list(array) == [1, 2, 7, 8, 9]
    assert array.capacity() > len(array)


def test_replace_inside_keeps_length():
    array = make(["a", "b", "c", "d"])
    array.replace(1, ["B", "C"])
    assert len(array) == 4
    assert array[1] == "B"
    assert array[2] == "C"
    assert array[3] == "d"


def test_replace_past_end_raises():
    array = make([1, 2])
    with pytest.raises(IndexError):
        array.replace(3, [0])


def test_indexing_and_slicing():
    items = ["p", "q", "r", "s"]
    array = make(items)
    assert array[0] == items[0]
    assert array[-1] == items[-1]
    assert array[1:3] == items[1:3]
    with pytest.raises(IndexError):
        array[len(items)]