import pytest

from raycaster.ftlib.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_back_keeps_order():
    lst = LinkedList()
    for item in ["a", "b", "c"]:
        lst.push_back(item)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for item in [1, 2, 3]:
        lst.push_front(item)
    assert list(lst) == [3, 2, 1]


def test_last_tracks_back_after_mixed_pushes():
    lst = LinkedList()
    lst.push_front("x")
    lst.push_back("y")
    lst.push_front("w")
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == "y"
    assert last.next is None
    assert list(lst) == ["w", "x", "y"]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front(5)
    assert lst.last() is node


def test_constructor_from_iterable():
    lst = LinkedList(range(4))
    assert list(lst) == [0, 1, 2, 3]
    assert len(lst) == 4


def test_iter_calls_function_in_order():
    seen = []
    LinkedList([3, 1, 2]).iter(seen.append)
    assert seen == [3, 1, 2]


def test_clear_deletes_every_content():
    deleted = []
    lst = LinkedList(["p", "q"])
    lst.clear(deleted.append)
    assert deleted == ["p", "q"]
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_clear_then_reuse():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(9)
    assert list(lst) == [9]


def test_map_produces_new_list():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(lst) == [1, 2, 3]
    assert len(mapped) == len(lst)


def test_map_none_result_cleans_up_and_raises():
    deleted = []
    lst = LinkedList([1, 2, 3])

    def f(x):
        return None if x == 3 else x + 100

    with pytest.raises(ValueError):
        lst.map(f, deleted.append)
    assert deleted == [101, 102]
    assert list(lst) == [1, 2, 3]


def test_map_exception_cleans_up_and_propagates():
    deleted = []

    def f(x):
        if x == 2:
            raise KeyError(x)
        return str(x)

    with pytest.raises(KeyError):
        LinkedList([1, 2]).map(f, deleted.append)
    assert deleted == ["1"]


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(lambda x: x)) == 0