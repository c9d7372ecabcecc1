from hypothesis import given
from hypothesis import strategies as st

import pytest

from algosolve.linked_list import ListNode, build_list, detect_cycle


def _nth(head, index):
    node = head
    for _ in range(index):
        node = node.next
    return node


def test_build_list_links_values_in_order():
    head = build_list([3, 2, 0, -4])
    values = []
    node = head
    while node is not None:
        values.append(node.val)
        node = node.next
    assert values == [3, 2, 0, -4]


def test_build_empty_list_gives_none():
    assert build_list([]) is None


def test_build_list_rejects_bad_position():
    with pytest.raises(ValueError):
        build_list([1, 2], 2)
    with pytest.raises(ValueError):
        build_list([1, 2], -2)


def test_cycle_entry_found():
    head = build_list([3, 2, 0, -4], 1)
    assert detect_cycle(head) is _nth(head, 1)


def test_single_node_self_loop():
    head = build_list([1], 0)
    assert detect_cycle(head) is head


def test_no_cycle_returns_none():
    assert detect_cycle(build_list([1, 2, 3])) is None
    assert detect_cycle(None) is None


def test_manual_nodes():
    tail = ListNode(5)
    middle = ListNode(4, tail)
    head = ListNode(3, middle)
    tail.next = middle
    assert detect_cycle(head) is middle


@given(st.data())
def test_cycle_entry_matches_position(data):
    values = data.draw(st.lists(st.integers(), min_size=1, max_size=40))
    pos = data.draw(st.integers(min_value=-1, max_value=len(values) - 1))
    head = build_list(values, pos)
    found = detect_cycle(head)
    if pos == -1:
        assert found is None
    else:
        assert found is _nth(head, pos)