import pytest

from liftsim.linkedlist import LinkedList


def test_empty_list():
    ll = LinkedList()
    assert len(ll) == 0
    assert list(ll) == []
    assert ll.render() == "Head -> "


def test_add_front_reverses_insertion_order():
    ll = LinkedList()
    for value in (1, 2, 3):
        ll.add_front(value)
    assert list(ll) == [3, 2, 1]
    assert len(ll) == 3


def test_add_rear_keeps_insertion_order():
    ll = LinkedList()
    for value in (4, 5, 6):
        ll.add_rear(value)
    assert list(ll) == [4, 5, 6]


def test_mixed_insertion():
    ll = LinkedList([2])
    ll.add_front(1)
    ll.add_rear(3)
    assert list(ll) == [1, 2, 3]


def test_rear_after_front_on_empty_list():
    ll = LinkedList()
    ll.add_front(7)
    ll.add_rear(8)
    assert list(ll) == [7, 8]


def test_render_lists_values_from_head():
    ll = LinkedList([1, 2, 3])
    assert ll.render() == "Head -> 1 2 3"


def test_delete_removes_every_occurrence():
    ll = LinkedList([1, 2, 1, 3, 1])
    removed = ll.delete(1)
    assert removed == 3
    assert list(ll) == [2, 3]
    assert len(ll) == 2


def test_delete_missing_value_changes_nothing():
    ll = LinkedList([1, 2])
    assert ll.delete(9) == 0
    assert list(ll) == [1, 2]


def test_delete_then_append_uses_new_tail():
    ll = LinkedList([1, 2, 3])
    ll.delete(3)
    ll.add_rear(4)
    assert list(ll) == [1, 2, 4]


def test_copy_is_independent():
    original = LinkedList([1, 2, 3])
    duplicate = original.copy()
    assert list(duplicate) == list(original)
    duplicate.add_rear(4)
    original.delete(1)
    assert list(original) == [2, 3]
    assert list(duplicate) == [1, 2, 3, 4]


def test_clear_empties_list():
    ll = LinkedList([1, 2, 3])
    ll.clear()
    assert len(ll) == 0
    assert list(ll) == []
    ll.add_rear(5)
    assert list(ll) == [5]


@pytest.mark.parametrize("values", [[], [0], [5, -1, 5], list(range(20))])
def test_length_matches_iteration(values):
    ll = LinkedList(values)
    assert len(ll) == len(list(ll)) == len(values)
    assert list(ll) == values