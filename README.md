# dsakit

Small, readable implementations of classic data structures and algorithms.
It has no runtime dependencies and needs Python 3.10 or later.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `delete_at`, `insert_at` (bounded by a capacity), `second_largest` |
| `dsakit.searching` | `binary_search`, `linear_search` |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `quick_sort` |
| `dsakit.stack` | fixed-capacity `Stack` with `StackOverflowError` / `StackUnderflowError` |
| `dsakit.parentheses` | `is_balanced` for `()` only, `is_balanced_multi` for `()`, `[]` and `{}`, plus `matches` |
| `dsakit.array_list` | `ArrayList`, a bounded list that appends at the back and pops from either end |
| `dsakit.queues` | bounded `Queue` and `Deque`, an unbounded `LinkedQueue`, and `QueueFullError` / `QueueEmptyError` |
| `dsakit.linked_list` | singly linked `LinkedList` made of `Node`s, and `grade_report` returning a `GradeReport` |
| `dsakit.doubly_linked_list` | `DoublyLinkedList` made of `DoublyNode`s |
| `dsakit.bst` | `TreeNode`, `inorder` / `preorder` / `postorder`, `is_bst`, `find`, `find_iterative`, `in_order_predecessor`, `delete` |

## Behaviour worth knowing

- The array helpers and all sorts return new lists; the input is left alone.
- `binary_search` and `linear_search` return an index, or `None` when the
  element is absent.
- `insert_at` raises `OverflowError` when the items already fill the capacity;
  `delete_at` and `insert_at` raise `IndexError` for a bad index.
- `second_largest` ignores repeats of the maximum and raises `ValueError`
  when there are fewer than two distinct values.
- `Queue` is linear: slots freed by `dequeue` are not reused, so it is full
  once `capacity` values have been enqueued. `Deque.push_front` only fills
  slots freed earlier by `pop_front`; otherwise it raises `QueueFullError`.
- `ArrayList` reuses room freed by `pop_front`; `append` on a full list
  raises `OverflowError`, and popping an empty one raises `IndexError`.
- `LinkedList.delete_value` raises `ValueError` when the value is missing;
  `insert_after` raises `ValueError` for a node from another list.
- `grade_report` grades `(name, mark)` pairs: A from 85 up, B above 70 and
  below 85. `str()` of the report lists each graded student and the totals.
- `bst.delete` replaces a node with a left subtree by its in-order
  predecessor and returns the (possibly new) root.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Searching and sorting:

```python
from dsakit.searching import binary_search, linear_search
from dsakit.sorting import quick_sort

binary_search([12, 43, 54, 67, 87, 90, 123], 123)   # 6
linear_search([23, 435, 56, 76], 99)                 # None
quick_sort([-3, -5, 2, 13, 12])                      # [-5, -3, 2, 12, 13]
```

A bounded stack:

```python
from dsakit.stack import Stack, StackOverflowError

stack = Stack(capacity=2)
stack.push(5)
stack.push(6)
try:
    stack.push(7)
except StackOverflowError:
    pass
stack.pop()   # 6
```

Checking brackets:

```python
from dsakit.parentheses import is_balanced, is_balanced_multi

is_balanced("(3 + (9*10)")                                         # False
is_balanced_multi("[30 - {20(10+10) - 10}] - [2121 - (32 * 32]")   # False
```

Queues:

```python
from dsakit.queues import LinkedQueue

queue = LinkedQueue()
queue.enqueue(10)
queue.enqueue(20)
queue.dequeue()   # 10
list(queue)       # [20]
```

Linked lists:

```python
from dsakit.linked_list import LinkedList, grade_report

items = LinkedList([10, 20, 30, 40, 50])
items.delete_value(20)
list(items)   # [10, 30, 40, 50]

report = grade_report([("Ahmad", 100), ("Ali", 75), ("Sara", 60)])
report.a_count, report.b_count   # (1, 1)
```

Binary search trees:

```python
from dsakit.bst import TreeNode, inorder, find, delete

root = TreeNode(15, TreeNode(10, TreeNode(7), TreeNode(11)),
                    TreeNode(17, TreeNode(16), TreeNode(20)))
list(inorder(root))          # [7, 10, 11, 15, 16, 17, 20]
find(root, 11).data          # 11
root = delete(root, 15)
list(inorder(root))          # [7, 10, 11, 16, 17, 20]
```

## What it does not do

dsakit is a library only: it has no command-line tool, and it does not
balance trees, persist data, or grow the bounded containers beyond the
capacity they were given.