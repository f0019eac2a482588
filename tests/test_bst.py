import pytest

from structkit.binary_tree import inorder, level_order, max_height, parse_level_order
from structkit.bst import contains, from_sorted, insert


def test_from_sorted_source_example():
    root = from_sorted([2, 5, 8, 12, 15, 18])
    assert level_order(root) == [8, 2, 15, 5, 12, 18]


def test_from_sorted_sorts_input_first():
    values = [18, 2, 15, 5, 12, 8]
    assert level_order(from_sorted(values)) == level_order(from_sorted(sorted(values)))


def test_from_sorted_empty():
    assert from_sorted([]) is None


@pytest.mark.parametrize("size", [1, 2, 3, 7, 8, 15, 20])
def test_from_sorted_inorder_and_balance(size):
    values = list(range(size, 0, -1))
    root = from_sorted(values)
    assert inorder(root) == sorted(values)
    assert max_height(root) == size.bit_length()


def test_insert_source_example():
    root = parse_level_order("20 10 30 -1 15 25 35 -1 -1 -1 -1 -1 -1")
    for value in (13, 32, 27, 22):
        root = insert(root, value)
    assert level_order(root) == [20, 10, 30, 15, 25, 35, 13, 22, 27, 32]


def test_insert_into_empty_returns_new_root():
    root = insert(None, 7)
    assert root.value == 7
    assert root.left is None and root.right is None


def test_insert_keeps_inorder_sorted_with_duplicates():
    values = [5, 3, 8, 3, 5, 1, 9]
    root = None
    for value in values:
        root = insert(root, value)
    assert inorder(root) == sorted(values)


def test_insert_equal_goes_right():
    root = insert(None, 4)
    root = insert(root, 4)
    assert root.left is None
    assert root.right.value == 4


def test_contains_source_example():
    root = parse_level_order("10 5 15 2 6 12 16 -1 3 -1 -1 -1 -1 -1 -1 -1 -1")
    assert contains(root, 6) is True
    assert contains(root, 3) is True
    assert contains(root, 7) is False


def test_contains_empty_tree():
    assert contains(None, 1) is False


def test_contains_every_built_value():
    values = [4, 9, 1, 7, 3]
    root = from_sorted(values)
    assert all(contains(root, value) for value in values)
    assert not any(contains(root, value) for value in (0, 2, 5, 10))