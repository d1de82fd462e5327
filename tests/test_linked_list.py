import pytest

from dsakit.linked_list import LinkedList


def test_construction_keeps_order():
    values = [5, 7, 9, 11]
    assert list(LinkedList(values)) == values
    assert len(LinkedList(values)) == len(values)


def test_empty_list():
    lst = LinkedList()
    assert list(lst) == []
    assert len(lst) == 0


def test_push_and_reverse_example():
    lst = LinkedList()
    for value in (20, 4, 15, 85):
        lst.insert_at_beginning(value)
    assert list(lst) == [85, 15, 4, 20]
    lst.reverse()
    assert list(lst) == [20, 4, 15, 85]


def test_reverse_twice_is_identity():
    values = [3, 1, 4, 1, 5, 9]
    lst = LinkedList(values)
    lst.reverse()
    assert list(lst) == values[::-1]
    lst.reverse()
    assert list(lst) == values


def test_insert_at_end_appends():
    values = [1, 2, 3]
    lst = LinkedList(values)
    lst.insert_at_end(42)
    assert list(lst)[-1] == 42
    assert list(lst)[:-1] == values
    assert len(lst) == len(values) + 1


def test_insert_at_end_on_empty():
    lst = LinkedList()
    lst.insert_at_end(8)
    assert list(lst) == [8]


def test_insert_after_places_value_next_to_ref():
    lst = LinkedList([1, 2, 3])
    lst.insert_after(2, 99)
    items = list(lst)
    assert items.index(99) == items.index(2) + 1
    assert len(lst) == 4


def test_insert_after_missing_ref_raises():
    lst = LinkedList([1, 2])
    with pytest.raises(ValueError):
        lst.insert_after(7, 99)
    assert list(lst) == [1, 2]


def test_insert_before_head_and_middle():
    lst = LinkedList([1, 2, 3])
    lst.insert_before(1, 50)
    assert list(lst)[0] == 50
    lst.insert_before(3, 60)
    items = list(lst)
    assert items.index(60) == items.index(3) - 1


def test_insert_before_missing_ref_raises():
    lst = LinkedList()
    with pytest.raises(ValueError):
        lst.insert_before(1, 2)


def test_delete_start_and_end():
    values = [10, 20, 30]
    lst = LinkedList(values)
    assert lst.delete_start() == values[0]
    assert lst.delete_end() == values[-1]
    assert list(lst) == values[1:-1]
    assert lst.delete_end() == values[1]
    assert list(lst) == []


@pytest.mark.parametrize("method", ["delete_start", "delete_end"])
def test_delete_from_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(LinkedList(), method)()


def test_delete_value():
    lst = LinkedList([4, 5, 6, 5])
    lst.delete(5)
    assert list(lst) == [4, 6, 5]
    lst.delete(4)
    assert list(lst) == [6, 5]
    with pytest.raises(ValueError):
        lst.delete(100)


def test_position_is_one_based():
    values = [7, 8, 9]
    lst = LinkedList(values)
    for index, value in enumerate(values, start=1):
        assert lst.position(value) == index
    with pytest.raises(ValueError):
        lst.position(1)