from hypothesis import given
from hypothesis import strategies as st

from enetlite.linkedlist import LinkedList, ListNode, insert, move, remove


def _build(values):
    lst = LinkedList()
    nodes = [insert(lst.end(), ListNode(v)) for v in values]
    return lst, nodes


def _values(lst):
    return [node.value for node in lst]


def test_new_list_is_empty():
    lst = LinkedList()
    assert lst.is_empty()
    assert len(lst) == 0
    assert lst.begin() is lst.end()


def test_insert_at_end_appends_in_order():
    lst, _ = _build(["a", "b", "c"])
    assert _values(lst) == ["a", "b", "c"]
    assert len(lst) == 3
    assert not lst.is_empty()


def test_insert_at_begin_prepends():
    lst, _ = _build(["b"])
    node = insert(lst.begin(), ListNode("a"))
    assert lst.begin() is node
    assert _values(lst) == ["a", "b"]


def test_insert_returns_node():
    lst = LinkedList()
    node = ListNode(1)
    assert insert(lst.end(), node) is node


def test_remove_middle_node():
    lst, nodes = _build([1, 2, 3])
    removed = remove(nodes[1])
    assert removed is nodes[1]
    assert _values(lst) == [1, 3]


def test_remove_all_leaves_empty():
    lst, nodes = _build([1, 2])
    for node in nodes:
        remove(node)
    assert lst.is_empty()


def test_iteration_tolerates_removal_of_current():
    lst, _ = _build([1, 2, 3, 4])
    for node in lst:
        if node.value % 2 == 0:
            remove(node)
    assert _values(lst) == [1, 3]


def test_clear_empties_list():
    lst, _ = _build([1, 2, 3])
    lst.clear()
    assert lst.is_empty()
    assert _values(lst) == []


def test_move_range_between_lists():
    src, nodes = _build([1, 2, 3, 4])
    dst, _ = _build(["x", "y"])
    first = move(dst.end(), nodes[1], nodes[2])
    assert first is nodes[1]
    assert _values(src) == [1, 4]
    assert _values(dst) == ["x", "y", 2, 3]


def test_move_to_front_of_same_list():
    lst, nodes = _build([1, 2, 3])
    move(lst.begin(), nodes[2], nodes[2])
    assert _values(lst) == [3, 1, 2]


def test_backward_links_are_consistent():
    lst, _ = _build([1, 2, 3])
    backward = []
    node = lst.end().previous
    while node is not lst.end():
        backward.append(node.value)
        node = node.previous
    assert backward == [3, 2, 1]


@given(st.lists(st.integers()))
def test_length_and_order_match_inserted(values):
    lst, _ = _build(values)
    assert len(lst) == len(values)
    assert _values(lst) == values


@given(st.lists(st.integers(), min_size=1), st.data())
def test_remove_one_keeps_others(values, data):
    lst, nodes = _build(values)
    index = data.draw(st.integers(min_value=0, max_value=len(values) - 1))
    remove(nodes[index])
    assert _values(lst) == values[:index] + values[index + 1 :]