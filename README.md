# algodrills

Small, self-contained routines that solve familiar algorithm exercises. They
work on singly linked lists, integer sequences, strings and plain integers. The
package uses only the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

## Modules

| Module | Contents |
| --- | --- |
| `algodrills.linked_list` | `ListNode`, `build_list`, `to_values`, `list_size`, `has_cycle`, `swap_nodes`, `remove_nth_from_end`, `merge_nodes`, `remove_elements`, `reverse_list`, `is_palindrome_list`, `delete_node`, `delete_duplicates`, `middle_node` |
| `algodrills.containers` | `QueueBackedStack`, `StackBackedQueue` |
| `algodrills.arrays` | `two_sum`, `candy`, `three_sum`, `max_product`, `max_subsequence`, `contains_duplicate`, `count_hill_valley`, `product_except_self`, `max_adjacent_distance`, `max_unique_sum`, `search_insert`, `search_insert_linear`, `find_content_children`, `next_greater_element`, `max_subarray`, `can_place_flowers`, `plus_one`, `num_subarray_product_less_than_k`, `total_fruit` |
| `algodrills.strings` | `int_to_roman`, `roman_to_int`, `is_palindrome_text`, `make_fancy_string`, `is_valid_parentheses`, `is_anagram`, `possible_string_count`, `max_parity_difference`, `fizz_buzz`, `backspace_compare` |
| `algodrills.integers` | `maximum_69_number`, `digit_square_sum`, `is_happy`, `is_power_of_two`, `is_power_of_three`, `is_power_of_four`, `distribute_candies`, `reverse_integer`, `is_palindrome_number` |

## Linked lists

`ListNode` is a dataclass with `val` and `next`. Iterating over a node yields
the values from that node to the end of the list. `build_list` turns an
iterable into a list and returns its head, or `None` when the iterable is
empty. `to_values` turns a list back into a Python list.

```python
from algodrills.linked_list import build_list, to_values, reverse_list, middle_node

head = build_list([1, 2, 3, 4, 5])
print(to_values(reverse_list(head)))              # [5, 4, 3, 2, 1]
print(middle_node(build_list([1, 2, 3, 4])).val)  # 3
```

Most list operations relink or rewrite the nodes they are given and return the
new head. `is_palindrome_list` and `has_cycle` leave the list as it was.
Out-of-range positions in `swap_nodes` and `remove_nth_from_end` raise
`IndexError`. `merge_nodes` raises `ValueError` if the list does not start and
end with a zero node. `delete_node` raises `ValueError` when given the last node.

## Containers

`QueueBackedStack` keeps its items in a FIFO queue and behaves as a stack.
`StackBackedQueue` keeps its items in a LIFO stack and behaves as a queue. Both
support `push`, `pop`, `is_empty` and `len()`. The stack also has `top` and the
queue has `peek`. Popping or looking into an empty container raises `IndexError`.

```python
from algodrills.containers import QueueBackedStack, StackBackedQueue

stack = QueueBackedStack()
stack.push(1)
stack.push(2)
print(stack.pop())   # 2

queue = StackBackedQueue()
queue.push(1)
queue.push(2)
print(queue.peek())  # 1
```

## Arrays, strings and integers

```python
from algodrills.arrays import two_sum, max_subarray
from algodrills.strings import int_to_roman, roman_to_int
from algodrills.integers import is_happy, reverse_integer

two_sum([2, 7, 11, 15], 9)                     # [0, 1]
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
int_to_roman(1994)                             # "MCMXCIV"
roman_to_int("LVIII")                          # 58
is_happy(19)                                   # True
reverse_integer(-123)                          # -321
```

The array functions accept any sequence and do not modify it. For example,
`plus_one` and `can_place_flowers` work on a copy. Where an answer cannot
exist, the function raises `ValueError`. Examples are an empty input to
`max_product`, `max_subarray`, `max_adjacent_distance` or `max_unique_sum`, a
`k` out of range for `max_subsequence`, a value missing from `nums2` in
`next_greater_element`, a non-Roman character in `roman_to_int`, and a string
lacking an odd or an even frequency in `max_parity_difference`.
`two_sum` returns an empty list when no pair adds up to the target.
`reverse_integer` returns 0 when the reversed value leaves the signed 32-bit
range.

## What it does not do

This is a library of functions and classes only. It has no command-line tool
and keeps no state beyond the objects you create.

## Running the tests

```
pip install ".[test]"
pytest
```