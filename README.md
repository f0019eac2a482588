# structkit

A small collection of classic data structures and the algorithms that go
with them, written in plain Python with no dependencies beyond the
standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `structkit.heap` | `MaxHeap` and `MinHeap`, array-backed binary heaps |
| `structkit.stack` | `Stack` and `is_valid_parentheses` |
| `structkit.fifo` | `Queue`, a first-in first-out queue |
| `structkit.singly` | `Node`, `SinglyLinkedList` and `has_cycle` |
| `structkit.doubly` | `DoublyNode` and `DoublyLinkedList` |
| `structkit.binary_tree` | `TreeNode`, `parse_level_order`, traversals and tree metrics |
| `structkit.bst` | binary search tree helpers: `from_sorted`, `insert`, `contains` |
| `structkit.counting` | `count_words` and `count_characters` |
| `structkit.ranking` | `Student`, `rank_students` and `run_priority_commands` |
| `structkit.menu` | `run_session` and `main`, a menu-driven linked-list session |

Removing from or peeking into an empty heap, stack or queue raises
`IndexError`, as do out-of-range positions in the linked lists.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Examples

### Heaps

```python
from structkit.heap import MaxHeap, MinHeap

heap = MaxHeap([5, 1, 9, 3])
heap.push(7)
largest = heap.peek()      # 9
heap.pop()                 # removes and returns 9
print(len(heap), heap.to_list())

smallest_first = MinHeap([4, 2, 8])
print(smallest_first.peek())   # 2
```

Iterating over a heap yields its values in storage (level) order.

### Stacks and queues

```python
from structkit.stack import Stack, is_valid_parentheses
from structkit.fifo import Queue

stack = Stack([1, 2, 3])
stack.push(4)
print(stack.peek(), len(stack))   # 4 4

queue = Queue([1, 2, 3])
queue.push(4)
print(queue.front(), queue.is_empty())   # 1 False

print(is_valid_parentheses("{[()]}"))   # True
print(is_valid_parentheses("(]"))       # False
```

Iterating over a `Stack` goes from top to bottom; over a `Queue`, from
front to back. `is_valid_parentheses` treats any character that is not an
opening bracket as a closer, so text with other characters is invalid.

### Linked lists

```python
from structkit.singly import SinglyLinkedList
from structkit.doubly import DoublyLinkedList

items = SinglyLinkedList([30, 10, 20])
items.prepend(5)
items.append(40)
items.sort()
print(list(items), list(items.values_reversed()))

items.insert(2, 15)        # zero-based position
items.delete_at(0)
items.delete_tail()
items.reverse()

both_ways = DoublyLinkedList([10, 20, 30])
both_ways.insert(1, 15)
print(list(both_ways), list(reversed(both_ways)))
```

`has_cycle(head)` checks a chain of `Node` objects for a loop using the
slow/fast pointer technique.

### Binary trees

Trees are read in level order, with `-1` marking a missing child:

```python
from structkit.binary_tree import (
    parse_level_order, level_order, preorder, inorder, postorder,
    count_nodes, count_leaves, max_height,
)

root = parse_level_order("10 20 50 30 40 70 60 -1 -1 -1 -1 -1 80 -1 -1 -1 -1")
print(level_order(root))
print(preorder(root), inorder(root), postorder(root))
print(count_nodes(root), count_leaves(root), max_height(root))
```

`parse_level_order` accepts a string or an iterable of tokens and raises
`ValueError` if the tokens run out before the tree is complete.

### Binary search trees

```python
from structkit.bst import from_sorted, insert, contains

root = from_sorted([2, 5, 8, 12, 15, 18])
root = insert(root, 13)
print(contains(root, 13), contains(root, 6))   # True False
```

`from_sorted` sorts its input and roots each subtree at the middle value.
`insert` sends equal values to the right.

### Counting and ranking

```python
from structkit.counting import count_words, count_characters
from structkit.ranking import Student, rank_students, run_priority_commands

print(count_words("she sells sea shells she"))
print(count_characters("banana"))

students = [Student("tamim", 9, 85), Student("sakib", 23, 95)]
for student in rank_students(students):
    print(student)

# 0 pushes the next value, 1 pops the largest, 2 reports the largest,
# anything else stops the script.
print(run_priority_commands("0 5 0 9 2 1 2 3"))   # [9, 5]
```

Counts come back as dictionaries keyed in ascending order. Students are
ranked by marks, highest first, with lower roll numbers first on a tie.

## Interactive menu

The `structkit-menu` command starts a menu-driven session on a singly
linked list, reading numbered options from standard input:

1. insert at tail
2. print the list
3. insert at any (zero-based) position
4. insert at head
5. delete at position
6. delete head
7. quit

```
structkit-menu
```

The session also ends at the end of input. The same session can be run
from code with `structkit.menu.run_session(stream, out)`, which returns
the resulting `SinglyLinkedList`.