import pytest

from dsakit.linked_list import LinkedList, ListError


def test_values_kept_in_order():
    values = [10, 20, 30, 40]
    ll = LinkedList(values)
    assert list(ll) == values
    assert len(ll) == len(values)


def test_insert_at_beginning_puts_value_first():
    ll = LinkedList([1, 2, 3])
    ll.insert_at_beginning(9)
    assert list(ll)[0] == 9
    assert list(ll)[1:] == [1, 2, 3]


def test_insert_at_end_appends():
    ll = LinkedList()
    ll.insert_at_end(5)
    ll.insert_at_end(6)
    assert list(ll) == [5, 6]


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_insert_at_position_places_value(position):
    ll = LinkedList([1, 2, 3])
    ll.insert_at_position(99, position)
    items = list(ll)
    assert items[position - 1] == 99
    assert [v for v in items if v != 99] == [1, 2, 3]
    assert len(ll) == 4


@pytest.mark.parametrize("position", [0, 5, 10])
def test_insert_at_position_out_of_range(position):
    ll = LinkedList([1, 2, 3])
    with pytest.raises(ListError):
        ll.insert_at_position(99, position)
    assert list(ll) == [1, 2, 3]


def test_delete_at_beginning_returns_first():
    ll = LinkedList([4, 5, 6])
    assert ll.delete_at_beginning() == 4
    assert list(ll) == [5, 6]


def test_delete_at_end_returns_last():
    ll = LinkedList([4, 5, 6])
    assert ll.delete_at_end() == 6
    assert list(ll) == [4, 5]


def test_delete_at_end_single_element():
    ll = LinkedList([7])
    assert ll.delete_at_end() == 7
    assert len(ll) == 0


@pytest.mark.parametrize(
    "method", ["delete_at_beginning", "delete_at_end"]
)
def test_delete_from_empty_raises(method):
    with pytest.raises(ListError):
        getattr(LinkedList(), method)()


def test_delete_at_position_middle():
    ll = LinkedList([1, 2, 3, 4])
    assert ll.delete_at_position(3) == 3
    assert list(ll) == [1, 2, 4]


def test_delete_at_position_out_of_range():
    ll = LinkedList([1, 2])
    with pytest.raises(ListError):
        ll.delete_at_position(3)
    with pytest.raises(ListError):
        LinkedList().delete_at_position(1)


def test_delete_by_value_removes_first_match():
    ll = LinkedList([3, 1, 3, 2])
    ll.delete_by_value(3)
    assert list(ll) == [1, 3, 2]
    ll.delete_by_value(2)
    assert list(ll) == [1, 3]


def test_delete_by_value_missing():
    ll = LinkedList([1, 2])
    with pytest.raises(ListError):
        ll.delete_by_value(8)
    assert len(ll) == 2


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_left_shift_rotates(k):
    values = [10, 20, 30, 40, 50]
    ll = LinkedList(values)
    ll.left_shift(k)
    items = list(ll)
    assert items[0] == values[k]
    assert sorted(items) == values
    assert items[-1] == values[k - 1]


@pytest.mark.parametrize("k", [0, 5, 6])
def test_left_shift_identity_cases(k):
    values = [10, 20, 30, 40, 50]
    ll = LinkedList(values)
    ll.left_shift(k)
    assert list(ll) == values


def test_left_shift_negative():
    with pytest.raises(ValueError):
        LinkedList([1, 2]).left_shift(-1)


def test_str_format():
    assert str(LinkedList([1, 2, 3])) == "Linked List: 1 2 3"
    assert str(LinkedList()) == "Linked List is empty."