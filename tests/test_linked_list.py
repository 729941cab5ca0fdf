import pytest

from algodrills.linked_list import (
    ListNode,
    build_list,
    delete_duplicates,
    delete_node,
    has_cycle,
    is_palindrome_list,
    list_size,
    merge_nodes,
    middle_node,
    remove_elements,
    remove_nth_from_end,
    reverse_list,
    swap_nodes,
    to_values,
)


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3], [5, 5, 0, -2]])
def test_build_and_to_values_round_trip(values):
    assert to_values(build_list(values)) == values


def test_build_empty_gives_none():
    assert build_list([]) is None


def test_iteration_over_node():
    head = build_list([4, 8, 15])
    assert list(head) == [4, 8, 15]


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4]])
def test_list_size_matches_length(values):
    assert list_size(build_list(values)) == len(values)


def test_has_cycle_detects_loop():
    head = build_list([3, 2, 0, -4])
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = head.next
    assert has_cycle(head) is True


def test_has_cycle_self_loop():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_has_cycle_false_for_plain_lists(values):
    assert has_cycle(build_list(values)) is False


def test_swap_nodes_example():
    head = swap_nodes(build_list([1, 2, 3, 4, 5]), 2)
    assert to_values(head) == [1, 4, 3, 2, 5]


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5, 6])
def test_swap_nodes_twice_restores(k):
    values = [9, 8, 7, 6, 5, 4]
    head = build_list(values)
    swap_nodes(head, k)
    swap_nodes(head, k)
    assert to_values(head) == values


@pytest.mark.parametrize("k", [1, 3, 5])
def test_swap_nodes_keeps_values(k):
    values = [10, 20, 30, 40, 50]
    head = swap_nodes(build_list(values), k)
    assert sorted(to_values(head)) == sorted(values)
    assert to_values(head)[k - 1] == values[-k]


@pytest.mark.parametrize("k", [0, 4])
def test_swap_nodes_out_of_range(k):
    with pytest.raises(IndexError):
        swap_nodes(build_list([1, 2, 3]), k)


def test_remove_nth_from_end_removes_head():
    values = [1, 2, 3, 4, 5]
    head = remove_nth_from_end(build_list(values), len(values))
    assert to_values(head) == values[1:]


def test_remove_nth_from_end_single():
    assert remove_nth_from_end(build_list([1]), 1) is None


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_remove_nth_from_end_drops_right_value(n):
    values = [11, 12, 13, 14, 15]
    result = to_values(remove_nth_from_end(build_list(values), n))
    assert len(result) == len(values) - 1
    assert values[-n] not in result


@pytest.mark.parametrize("n", [0, 3])
def test_remove_nth_from_end_out_of_range(n):
    with pytest.raises(IndexError):
        remove_nth_from_end(build_list([1, 2]), n)


def test_merge_nodes_example():
    head = merge_nodes(build_list([0, 3, 1, 0, 4, 5, 2, 0]))
    assert to_values(head) == [4, 11]


def test_merge_nodes_preserves_total():
    values = [0, 1, 0, 3, 0, 2, 2, 0]
    result = to_values(merge_nodes(build_list(values)))
    assert sum(result) == sum(values)
    assert len(result) == values.count(0) - 1


@pytest.mark.parametrize("values", [[0], [0, 1, 2]])
def test_merge_nodes_rejects_bad_shape(values):
    with pytest.raises(ValueError):
        merge_nodes(build_list(values))


def test_remove_elements_drops_all_matches():
    values = [1, 2, 6, 3, 4, 5, 6]
    result = to_values(remove_elements(build_list(values), 6))
    assert 6 not in result
    assert len(result) == len(values) - values.count(6)


def test_remove_elements_all_removed():
    assert remove_elements(build_list([7, 7, 7, 7]), 7) is None


def test_remove_elements_no_match_unchanged():
    values = [1, 2, 3]
    assert to_values(remove_elements(build_list(values), 9)) == values


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert to_values(reverse_list(build_list(values))) == values[::-1]


def test_reverse_list_twice_round_trip():
    values = [3, 1, 4, 1, 5]
    assert to_values(reverse_list(reverse_list(build_list(values)))) == values


def test_reverse_empty():
    assert reverse_list(None) is None


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 2, 1], True), ([1, 2], False), ([1], True), ([1, 2, 3, 2, 1], True)],
)
def test_is_palindrome_list(values, expected):
    assert is_palindrome_list(build_list(values)) is expected


def test_is_palindrome_list_leaves_list_intact():
    values = [1, 2, 3]
    head = build_list(values)
    is_palindrome_list(head)
    assert to_values(head) == values


def test_delete_node_middle():
    head = build_list([4, 5, 1, 9])
    delete_node(head.next)
    assert to_values(head) == [4, 1, 9]


def test_delete_node_last_raises():
    head = build_list([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)


@pytest.mark.parametrize("values", [[1, 1, 2], [1, 1, 2, 3, 3], [2, 2, 2], [1, 2, 3]])
def test_delete_duplicates(values):
    result = to_values(delete_duplicates(build_list(values)))
    assert set(result) == set(values)
    assert all(a < b for a, b in zip(result, result[1:]))


def test_delete_duplicates_empty():
    assert delete_duplicates(None) is None


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6], [1]])
def test_middle_node(values):
    assert to_values(middle_node(build_list(values))) == values[len(values) // 2:]


def test_middle_node_empty():
    assert middle_node(None) is None