# dsakit

A small collection of classic data structures and algorithms in plain Python.
It needs nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `second_largest`, `second_smallest`, `second_order_elements`, `binary_search`, `binary_search_recursive`, `linear_search`, `left_rotate`, `rotate_left`, `move_zeros_to_end`, `remove_duplicates` |
| `dsakit.basic_math` | `gcd`, `is_armstrong`, `count_nonzero_digits`, `is_palindrome_number`, `is_prime`, `count_dividing_digits`, `sum_of_divisors`, `sum_of_divisors_naive` |
| `dsakit.bits` | `add_binary`, `is_bit_set`, `parity` (returning a `Parity` member), `is_power_of_two`, `clear_bit`, `set_bit`, `toggle_bit`, `binary_to_decimal`, `decimal_to_binary`, `count_set_bits`, `remove_last_set_bit`, `xor_swap` |
| `dsakit.recursion` | `fibonacci`, `reverse_in_place`, `is_palindrome` |
| `dsakit.hashing` | `frequencies`, `frequency_lookup`, `frequency_extremes` |
| `dsakit.sorting` | `bubble_sort`, `bubble_sort_recursive`, `insertion_sort`, `insertion_sort_recursive`, `selection_sort`, `merge`, `merge_sort`, `partition`, `quick_sort` |
| `dsakit.trees` | `TreeNode`, `preorder`, `inorder`, `preorder_iterative`, `inorder_iterative`, `postorder_iterative`, `level_order`, `insert_level_order` |
| `dsakit.containers` | `LinkedStack`, `ArrayStack`, `QueueStack`, `ArrayQueue`, `LinkedQueue`, `StackQueue`, and the `EmptyError` and `FullError` exceptions |
| `dsakit.notation` | `precedence`, `postfix_to_infix`, `prefix_to_infix`, `infix_to_prefix` |
| `dsakit.singly_linked` | `Node`, `LinkedList` |
| `dsakit.doubly_linked` | `Node`, `DoublyLinkedList` |

A few conventions hold throughout:

- The sorting functions return a new ascending list and leave their input
  alone; only `partition` rearranges a list in place.
- Functions that need something to work on raise `ValueError` when they do
  not get it, for example `second_largest` on fewer than two distinct values
  or `postfix_to_infix` on a malformed expression.
- Stacks and queues raise `EmptyError` (a subclass of `IndexError`) when
  there is nothing to take. `ArrayStack` and `ArrayQueue` have a fixed
  `capacity` (1000 by default) and raise `FullError` (a subclass of
  `OverflowError`) when it is reached.
- Linked-list positions are counted from 1.

## Examples

Searching and sorting:

```python
from dsakit.arrays import second_order_elements, rotate_left
from dsakit.sorting import merge_sort

second_order_elements([3, 4, 5, 2])       # (4, 3)
rotate_left([1, 3, 4, 55, 15], 3)         # [55, 15, 1, 3, 4]
merge_sort([13, 42, 41, 8, 94])           # [8, 13, 41, 42, 94]
```

Bits:

```python
from dsakit.bits import add_binary, decimal_to_binary, parity, Parity

add_binary(111, 1011)                     # 10010
decimal_to_binary(10)                     # "1010"
parity(7) == Parity.ODD                   # True
```

Binary trees:

```python
from dsakit.trees import TreeNode, level_order, insert_level_order

root = TreeNode(1)
root.left = TreeNode(2)
root.right = TreeNode(3)
insert_level_order(root, 4)
level_order(root)                         # [[1], [2, 3], [4]]
```

Stacks and queues:

```python
from dsakit.containers import ArrayQueue, EmptyError

queue = ArrayQueue(2)
queue.push(1)
queue.push(2)
queue.pop()                               # 1
len(queue)                                # 1
```

Expression notation:

```python
from dsakit.notation import postfix_to_infix, prefix_to_infix

postfix_to_infix("ab+c*")                 # "((a+b)*c)"
prefix_to_infix("*+abc")                  # "((a+b)*c)"
```

Linked lists can be iterated like Python sequences:

```python
from dsakit.doubly_linked import DoublyLinkedList

items = DoublyLinkedList([12, 41, 23, 65])
items.reverse()
list(items)                               # [65, 23, 41, 12]
```

## What it does not do

This is a library only. It has no command-line program and reads no input of
its own. Every routine is called from Python with its data as arguments.