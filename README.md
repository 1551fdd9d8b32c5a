# dsakit

dsakit is a small collection of classic data structures and algorithms,
written in plain Python with no dependencies beyond the standard library.

## Installation

```
pip install dsakit
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "dsakit[test]"
pytest
```

## What is included

| Module              | Contents                                                                                                   |
|---------------------|------------------------------------------------------------------------------------------------------------|
| `dsakit.searching`  | `bubble_sort`, `binary_search`, `linear_search`                                                            |
| `dsakit.arrays`     | `insert_sorted`, `insert_at`, `merge_sorted`, `multiply_matrices`, `swap_min_max`, `remove_value`, `remove_at`, `row_totals`, `column_totals` |
| `dsakit.recursion`  | `factorial`, `fibonacci`, `gcd`, `hanoi_moves`, `is_safe`, `solve_n_queens`, `all_n_queens`               |
| `dsakit.heap`       | `MinHeap`, `HeapOverflowError`                                                                             |
| `dsakit.singly`     | `SinglyLinkedList`                                                                                         |
| `dsakit.doubly`     | `DoublyLinkedList`                                                                                         |
| `dsakit.circular`   | `CircularLinkedList`                                                                                       |
| `dsakit.queues`     | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `PriorityQueue`, `QueueOverflowError`, `QueueUnderflowError` |
| `dsakit.stacks`     | `ArrayStack`, `LinkedStack`, `is_balanced`, `reverse_with_stack`, `StackFullError`, `StackEmptyError`      |
| `dsakit.trees`      | `TreeNode`, `pre_order`, `in_order`, `post_order`, `breadth_first`, `build_expression_tree`, `format_expression` |

The functions in `dsakit.arrays` and `bubble_sort` return new lists and leave
their input unchanged.

## Examples

Searching:

```python
from dsakit.searching import binary_search, bubble_sort, linear_search

data = bubble_sort([9, 1, 12, 5])  # [1, 5, 9, 12]
binary_search(data, 5)             # 1
binary_search(data, 4)             # None
linear_search([4, 8, 15], 8)       # 1
```

Recursion:

```python
from dsakit.recursion import factorial, fibonacci, gcd, hanoi_moves, solve_n_queens

factorial(5)                 # 120
fibonacci(7)                 # 13
gcd(48, 18)                  # 6
list(hanoi_moves(2))         # [('A', 'C'), ('A', 'B'), ('C', 'B')]
board = solve_n_queens(8)    # an 8x8 list of 0s and 1s, or None
```

`all_n_queens(n)` yields every placement as a board of its own.

Heaps and queues:

```python
from dsakit.heap import MinHeap
from dsakit.queues import PriorityQueue

heap = MinHeap(10)
for value in (9, 1, 12, 5, 7, 20):
    heap.push(value)
heap.pop()  # 1

jobs = PriorityQueue()
jobs.enqueue("backup", 2)
jobs.enqueue("alert", 1)
jobs.dequeue()  # "alert"
```

`PriorityQueue` serves the lowest priority number first, and values of equal
priority in arrival order. `ArrayQueue` does not reuse slots freed at the front
until it has been emptied completely; `CircularQueue` wraps round and reuses
them.

Linked lists:

```python
from dsakit.singly import SinglyLinkedList
from dsakit.doubly import DoublyLinkedList

items = SinglyLinkedList([3, 1, 2])
items.insert_at_end(0)
items.sort()
list(items)  # [0, 1, 2, 3]

both = DoublyLinkedList([1, 2, 3])
both.add_after(4, 2)
list(reversed(both))  # [3, 4, 2, 1]
```

Stacks:

```python
from dsakit.stacks import is_balanced, reverse_with_stack

is_balanced("{[(1 + 2) * 3]}")  # True
is_balanced("(]")                # False
reverse_with_stack([1, 2, 3])    # [3, 2, 1]
```

Trees:

```python
from dsakit.trees import build_expression_tree, format_expression, post_order

tree = build_expression_tree("((1+2)*3)")
format_expression(tree)  # "( ( 1 + 2 ) * 3 )"
post_order(tree)         # ['1', '2', '+', '3', '*']
```

Expression trees take single-digit operands and the operators `+ - * /`;
other characters are ignored, and a malformed expression raises `ValueError`.

## Errors

Operations that cannot go ahead raise exceptions:

- pushing onto a full `MinHeap` raises `HeapOverflowError`; popping an empty
  one raises `IndexError`;
- adding to a full `ArrayQueue` or `CircularQueue` raises `QueueOverflowError`;
  taking from or peeking into any empty queue raises `QueueUnderflowError`;
- pushing onto a full `ArrayStack` raises `StackFullError`; popping or peeking
  an empty stack raises `StackEmptyError`;
- deleting from an empty linked list raises `IndexError`, and naming a value
  the list does not hold raises `ValueError`;
- `insert_at` and `remove_at` raise `IndexError` for a position out of range,
  and `multiply_matrices` raises `ValueError` for mismatched shapes.

## What it does not do

dsakit is a library only. It has no command-line program or interactive menu:
the structures are built and used from Python code.