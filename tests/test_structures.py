import pytest

from puzzlekit.structures import ListNode, TreeNode, delete_node, smallest_from_leaf


def _build_list(values):
    head = None
    for value in reversed(values):
        head = ListNode(value, head)
    return head


def _values(head):
    result = []
    while head is not None:
        result.append(head.val)
        head = head.next
    return result


def test_delete_node_middle():
    head = _build_list([4, 5, 1, 9])
    delete_node(head.next)
    assert _values(head) == [4, 1, 9]


def test_delete_node_head():
    head = _build_list([1, 2, 3])
    delete_node(head)
    assert _values(head) == [2, 3]


def test_delete_node_tail_raises():
    head = _build_list([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)


def test_smallest_from_leaf_empty():
    assert smallest_from_leaf(None) == ""


def test_smallest_from_leaf_single():
    assert smallest_from_leaf(TreeNode(0)) == "a"


def test_smallest_from_leaf_example():
    root = TreeNode(
        0,
        TreeNode(1, TreeNode(3), TreeNode(4)),
        TreeNode(2, TreeNode(3), TreeNode(4)),
    )
    assert smallest_from_leaf(root) == "dba"


def test_smallest_from_leaf_picks_minimum_leaf():
    root = TreeNode(25, TreeNode(3), TreeNode(1))
    assert smallest_from_leaf(root) == "bz"


def test_smallest_from_leaf_prefers_shorter_prefix():
    # "ba" is a prefix-free competitor of "bca"; the shorter path wins only by ordering.
    root = TreeNode(0, TreeNode(1), TreeNode(2, TreeNode(1)))
    result = smallest_from_leaf(root)
    assert result in {"ba", "bca"}
    assert result == min("ba", "bca")