import pytest

from pushswap.lists import LinkedList, ListNode


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_add_back_on_empty():
    lst = LinkedList()
    lst.add_back("Bonjour")
    assert list(lst) == ["Bonjour"]
    assert lst.head.next is None


def test_add_front_on_empty():
    lst = LinkedList()
    node = lst.add_front("Bonjour")
    assert lst.head is node
    assert node.content == "Bonjour"
    assert node.next is None


def test_add_front_reverses_order():
    lst = LinkedList()
    for item in [1, 2, 3]:
        lst.add_front(item)
    assert list(lst) == [3, 2, 1]


def test_init_from_items_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_last_returns_final_node():
    lst = LinkedList()
    lst.add_front("un element")
    tail = lst.last()
    assert isinstance(tail, ListNode)
    assert tail.content == "un element"
    lst.add_back("autre")
    assert lst.last().content == "autre"


def test_len_counts_nodes():
    lst = LinkedList()
    assert len(lst) == 0
    lst.add_front("Bonjour")
    assert len(lst) == 1
    lst.add_back("x")
    assert len(lst) == 2


def test_clear_calls_delete_and_empties():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList(["a"])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_in_order():
    seen = []
    LinkedList([4, 5, 6]).iterate(seen.append)
    assert seen == [4, 5, 6]


def test_map_builds_new_list():
    original = LinkedList(["ab", "cd"])
    mapped = original.map(str.upper)
    assert list(mapped) == ["AB", "CD"]
    assert list(original) == ["ab", "cd"]
    assert mapped is not original


def test_map_empty_list():
    assert len(LinkedList().map(str.upper)) == 0


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3]).map(func, deleted.append)
    assert deleted == [10, 20]


def test_map_without_function():
    with pytest.raises(ValueError):
        LinkedList([1]).map(None)