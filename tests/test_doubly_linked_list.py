import pytest

from dsakit.doubly_linked_list import DoublyLinkedList
from dsakit.linked_list import ListError


def test_forward_and_backward_agree():
    values = [3, 1, 4, 1, 5]
    dl = DoublyLinkedList(values)
    assert list(dl) == values
    assert list(reversed(dl)) == values[::-1]
    assert len(dl) == len(values)


def test_insert_at_beginning():
    dl = DoublyLinkedList([2, 3])
    dl.insert_at_beginning(1)
    assert list(dl) == [1, 2, 3]
    assert list(reversed(dl)) == [3, 2, 1]


@pytest.mark.parametrize("position", [0, 1, 2, 3])
def test_insert_at_position(position):
    dl = DoublyLinkedList([1, 2, 3])
    dl.insert_at_position(position, 77)
    items = list(dl)
    assert items[position] == 77
    assert [v for v in items if v != 77] == [1, 2, 3]
    assert list(reversed(dl)) == items[::-1]


def test_insert_at_position_into_empty():
    dl = DoublyLinkedList()
    dl.insert_at_position(4, 8)
    assert list(dl) == [8]
    assert list(reversed(dl)) == [8]


@pytest.mark.parametrize("position", [-1, 4])
def test_insert_at_position_out_of_range(position):
    dl = DoublyLinkedList([1, 2, 3])
    with pytest.raises(ListError):
        dl.insert_at_position(position, 77)
    assert list(dl) == [1, 2, 3]


def test_delete_at_beginning():
    dl = DoublyLinkedList([1, 2, 3])
    assert dl.delete_at_beginning() == 1
    assert list(dl) == [2, 3]
    assert list(reversed(dl)) == [3, 2]


def test_delete_at_end():
    dl = DoublyLinkedList([1, 2, 3])
    assert dl.delete_at_end() == 3
    assert list(dl) == [1, 2]
    assert list(reversed(dl)) == [2, 1]


def test_delete_last_item_empties_both_ends():
    dl = DoublyLinkedList([5])
    assert dl.delete_at_end() == 5
    assert list(dl) == []
    assert list(reversed(dl)) == []
    dl.insert_at_end(6)
    assert dl.delete_at_beginning() == 6
    assert len(dl) == 0


def test_delete_from_empty_raises():
    dl = DoublyLinkedList()
    with pytest.raises(ListError):
        dl.delete_at_beginning()
    with pytest.raises(ListError):
        dl.delete_at_end()