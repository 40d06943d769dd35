import pytest

from dsakit.containers import EmptyError
from dsakit.singly_linked import LinkedList

VALUES = [2, 12, 32, 41, 2]


def test_round_trip_and_length():
    ll = LinkedList(VALUES)
    assert list(ll) == VALUES
    assert len(ll) == len(VALUES)


def test_empty_list():
    ll = LinkedList()
    assert list(ll) == []
    assert len(ll) == 0
    assert ll.head is None


def test_head_node():
    ll = LinkedList(VALUES)
    assert ll.head.data == VALUES[0]
    assert ll.head.next.data == VALUES[1]


def test_contains():
    ll = LinkedList(VALUES)
    assert 32 in ll
    assert 99 not in ll


def test_insert_head():
    ll = LinkedList(VALUES)
    ll.insert_head(7)
    assert list(ll) == [7] + VALUES
    assert len(ll) == len(VALUES) + 1


def test_insert_tail():
    ll = LinkedList(VALUES)
    ll.insert_tail(7)
    assert list(ll) == VALUES + [7]


def test_insert_tail_on_empty():
    ll = LinkedList()
    ll.insert_tail(7)
    assert list(ll) == [7]


@pytest.mark.parametrize("position", range(1, len(VALUES) + 2))
def test_insert_at_every_position(position):
    ll = LinkedList(VALUES)
    ll.insert_at(position, 99)
    result = list(ll)
    assert result[position - 1] == 99
    del result[position - 1]
    assert result == VALUES
    assert len(ll) == len(VALUES) + 1


@pytest.mark.parametrize("position", [0, len(VALUES) + 2])
def test_insert_at_out_of_range(position):
    ll = LinkedList(VALUES)
    with pytest.raises(IndexError):
        ll.insert_at(position, 99)
    assert list(ll) == VALUES


def test_insert_before_value_source_example():
    ll = LinkedList(VALUES)
    assert ll.insert_before_value(14, 2) is True
    assert list(ll) == [14, 2, 12, 32, 41, 2]


def test_insert_before_value_in_middle():
    ll = LinkedList(VALUES)
    assert ll.insert_before_value(14, 32)
    result = list(ll)
    assert result[result.index(32) - 1] == 14


def test_insert_before_value_missing():
    ll = LinkedList(VALUES)
    assert ll.insert_before_value(14, 99) is False
    assert list(ll) == VALUES


def test_remove_head():
    ll = LinkedList(VALUES)
    assert ll.remove_head() == VALUES[0]
    assert list(ll) == VALUES[1:]


def test_remove_tail():
    ll = LinkedList(VALUES)
    assert ll.remove_tail() == VALUES[-1]
    assert list(ll) == VALUES[:-1]


def test_remove_tail_single():
    ll = LinkedList([5])
    assert ll.remove_tail() == 5
    assert list(ll) == []
    assert len(ll) == 0


@pytest.mark.parametrize("method", ["remove_head", "remove_tail"])
def test_remove_from_empty(method):
    with pytest.raises(EmptyError):
        getattr(LinkedList(), method)()


@pytest.mark.parametrize("position", range(1, len(VALUES) + 1))
def test_remove_at(position):
    ll = LinkedList(VALUES)
    assert ll.remove_at(position) == VALUES[position - 1]
    assert list(ll) == VALUES[: position - 1] + VALUES[position:]


@pytest.mark.parametrize("position", [0, len(VALUES) + 1])
def test_remove_at_out_of_range(position):
    ll = LinkedList(VALUES)
    with pytest.raises(IndexError):
        ll.remove_at(position)
    assert list(ll) == VALUES


def test_remove_at_empty():
    with pytest.raises(EmptyError):
        LinkedList().remove_at(1)