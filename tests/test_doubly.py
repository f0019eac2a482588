import pytest

from structkit.doubly import DoublyLinkedList, DoublyNode


def test_forward_and_backward_traversal():
    values = [5, 10, 20]
    lst = DoublyLinkedList(values)
    assert list(lst) == values
    assert list(reversed(lst)) == values[::-1]
    assert len(lst) == len(values)


def test_links_are_consistent():
    lst = DoublyLinkedList([1, 2, 3, 4])
    node = lst.head
    assert node.prev is None
    while node.next is not None:
        assert node.next.prev is node
        node = node.next
    assert node is lst.tail


def test_prepend_and_append():
    lst = DoublyLinkedList()
    lst.append(2)
    lst.prepend(1)
    lst.append(3)
    assert list(lst) == [1, 2, 3]
    assert list(reversed(lst)) == [3, 2, 1]


@pytest.mark.parametrize("position", [0, 1, 2, 3, 4])
def test_insert_at_every_position(position):
    values = [10, 20, 30, 40]
    lst = DoublyLinkedList(values)
    lst.insert(position, 100)
    expected = values[:position] + [100] + values[position:]
    assert list(lst) == expected
    assert list(reversed(lst)) == expected[::-1]
    assert len(lst) == len(expected)


@pytest.mark.parametrize("position", [5, -1])
def test_insert_invalid_position(position):
    values = [10, 20, 30, 40]
    lst = DoublyLinkedList(values)
    with pytest.raises(IndexError):
        lst.insert(position, 100)
    assert list(lst) == values


def test_insert_into_empty_list():
    lst = DoublyLinkedList()
    lst.insert(0, 7)
    assert list(lst) == [7]
    assert lst.head is lst.tail


@pytest.mark.parametrize(
    "values", [[], [1], [10, 30], [10, 30, 40], [10, 30, 40, 50], [1, 2, 3, 4, 5, 6, 7]]
)
def test_reverse(values):
    lst = DoublyLinkedList(values)
    lst.reverse()
    assert list(lst) == values[::-1]
    assert list(reversed(lst)) == values


def test_node_repr_does_not_recurse():
    lst = DoublyLinkedList([1, 2])
    assert repr(lst.head) == "DoublyNode(value=1)"
    assert isinstance(lst.head.next, DoublyNode) and lst.head.next.value == 2