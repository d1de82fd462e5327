# dsakit

A small collection of classic data structures and algorithms written in plain
Python, meant for study and experiment. It has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.linked_list` | `LinkedList`: a singly linked list with insertion at either end, insertion before or after a value, deletion, 1-based position lookup and in-place reversal |
| `dsakit.doubly_linked_list` | `DoublyLinkedList`: insertion and deletion at either end or at a 1-based position, with forward and reverse iteration |
| `dsakit.tree` | `TreeNode`, `tree_to_list`, `iter_list`: relinks a binary tree in place into a doubly linked list in in-order sequence |
| `dsakit.queues` | `ArrayQueue` (a circular buffer that doubles when full), `LinkedQueue`, `QueueEmpty` |
| `dsakit.stacks` | `ArrayStack`, `LinkedStack`, `StackEmpty` |
| `dsakit.sparse` | `to_triplets`, `transpose_triplets`, `add_matrices`, `multiply_matrices` |
| `dsakit.searching` | `integer_sqrt`, `binary_search` |
| `dsakit.sorting` | `bubble_sort`, `bucket_sort`, `quick_sort`, `sort_descending`, `sort_letters`, `unique_numbers` |
| `dsakit.arrays` | `delete_element`, `frequencies`, `merge_arrays`, `remove_duplicates`, `reverse_array`, `find_unique` |
| `dsakit.strings` | `is_lapindrome` |
| `dsakit.number_theory` | `primes_up_to`, `multiplication_table` |

## Examples

```python
from dsakit.linked_list import LinkedList

items = LinkedList([85, 15, 4, 20])
items.reverse()
list(items)            # [20, 4, 15, 85]
items.position(15)     # 3 (positions count from 1)
```

```python
from dsakit.queues import ArrayQueue

queue = ArrayQueue(2)
for value in (10, 20, 30):
    queue.enqueue(value)   # the buffer grows past its first capacity
queue.dequeue()            # 10
len(queue)                 # 2
```

```python
from dsakit.sparse import to_triplets, transpose_triplets

triplets = to_triplets([[0, 5], [7, 0]])
# [(2, 2, 2), (0, 1, 5), (1, 0, 7)]: a header of (rows, columns, count) comes first
transpose_triplets(triplets)
# [(2, 2, 2), (1, 0, 5), (0, 1, 7)]
```

```python
from dsakit.searching import integer_sqrt
from dsakit.strings import is_lapindrome
from dsakit.number_theory import primes_up_to

integer_sqrt(8)          # 2
is_lapindrome("gaga")    # True
primes_up_to(20)         # [2, 3, 5, 7, 11, 13, 17, 19]
```

## Errors

Failures raise exceptions. The functions do not return sentinel values:

- Removing from or reading an empty queue or stack raises `QueueEmpty` or
  `StackEmpty`. Both are subclasses of `IndexError`.
- `LinkedList` raises `ValueError` when it is asked for a value that it does
  not hold. It raises `IndexError` when deleting from an empty list.
- `DoublyLinkedList` raises `IndexError` for an invalid position or an empty
  list. You can fill an empty `DoublyLinkedList` only through its constructor.
  `insert_at_beginning`, `insert_at_end` and `insert_at` need at least one node
  to be present.
- `add_matrices` and `multiply_matrices` raise `ValueError` when the shapes do
  not fit. `bucket_sort` raises `ValueError` for values outside `[0, 1)`.
  `sort_letters` raises `ValueError` for characters outside `a` to `z`.

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menu. It does not read input from the terminal. To use a structure or an
algorithm, import it and call it from Python.