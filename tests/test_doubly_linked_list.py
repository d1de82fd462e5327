import pytest

from dsakit.doubly_linked_list import DoublyLinkedList


def assert_consistent(dll):
    forward = list(dll)
    assert list(reversed(dll)) == forward[::-1]
    assert len(dll) == len(forward)


def test_construction_and_both_directions():
    values = [1, 2, 3, 4]
    dll = DoublyLinkedList(values)
    assert list(dll) == values
    assert list(reversed(dll)) == values[::-1]
    assert len(dll) == len(values)


def test_insert_at_beginning_and_end():
    dll = DoublyLinkedList([5, 6])
    dll.insert_at_beginning(4)
    dll.insert_at_end(7)
    assert list(dll) == [4, 5, 6, 7]
    assert_consistent(dll)


@pytest.mark.parametrize("method", ["insert_at_beginning", "insert_at_end"])
def test_insert_on_empty_raises(method):
    dll = DoublyLinkedList()
    with pytest.raises(IndexError):
        getattr(dll, method)(1)
    assert list(dll) == []


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_insert_at_lands_at_position(position):
    dll = DoublyLinkedList([10, 20, 30])
    dll.insert_at(position, 99)
    assert list(dll)[position - 1] == 99
    assert_consistent(dll)
    assert len(dll) == 4


@pytest.mark.parametrize("position", [0, -1, 5, 10])
def test_insert_at_invalid_position(position):
    dll = DoublyLinkedList([10, 20, 30])
    with pytest.raises(IndexError):
        dll.insert_at(position, 99)
    assert list(dll) == [10, 20, 30]


def test_insert_at_on_empty_raises():
    with pytest.raises(IndexError):
        DoublyLinkedList().insert_at(1, 5)


def test_delete_from_ends():
    values = [1, 2, 3]
    dll = DoublyLinkedList(values)
    assert dll.delete_from_beginning() == values[0]
    assert dll.delete_from_end() == values[-1]
    assert list(dll) == [2]
    assert dll.delete_from_end() == 2
    assert list(dll) == []
    assert list(reversed(dll)) == []


@pytest.mark.parametrize("method", ["delete_from_beginning", "delete_from_end"])
def test_delete_on_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(DoublyLinkedList(), method)()


def test_delete_single_from_beginning_clears_tail():
    dll = DoublyLinkedList([8])
    assert dll.delete_from_beginning() == 8
    with pytest.raises(IndexError):
        dll.delete_from_end()


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_delete_at_removes_that_node(position):
    values = ["a", "b", "c", "d"]
    dll = DoublyLinkedList(values)
    assert dll.delete_at(position) == values[position - 1]
    expected = values[: position - 1] + values[position:]
    assert list(dll) == expected
    assert_consistent(dll)


@pytest.mark.parametrize("position", [0, 5, 9])
def test_delete_at_invalid_position(position):
    dll = DoublyLinkedList([1, 2, 3, 4])
    with pytest.raises(IndexError):
        dll.delete_at(position)
    assert len(dll) == 4


def test_delete_at_on_empty_raises():
    with pytest.raises(IndexError):
        DoublyLinkedList().delete_at(2)