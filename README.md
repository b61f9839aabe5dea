# algokit

Short, plain-Python implementations of classic algorithms, puzzles and data
structures. The code is meant for reading and experimenting. It needs only the
standard library and Python 3.10 or later.

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

| Module                | Contents |
|-----------------------|----------|
| `algokit.arrays`      | `atm`, `check_palindrome`, `reverse_array`, `compare_triplets`, `how_many_games`, `largest`, `max_ascending_sum`, `second_largest`, `tuples_same_product` |
| `algokit.basics`      | `add_binary`, `supplies_count`, `min_height`, `roman_to_int`, `int_sqrt` |
| `algokit.logic`       | `longest_common_prefix`, `max_distance`, `max_product`, `max_subarray`, `missing_number`, `move_zeroes`, `plus_one`, `remove_duplicates`, `rotate`, `third_max` |
| `algokit.linked_list` | `Node`, `SinglyLinkedList`, `CircularLinkedList` |
| `algokit.strings`     | `is_anagram`, `are_almost_equal`, `longest_unique_substring`, `min_repeats`, `is_palindrome` |
| `algokit.searching`   | `binary_search`, `linear_search` (both return `-1` when the target is absent) |
| `algokit.sorting`     | `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` (all sort a list in place) |
| `algokit.patterns`    | `square`, `right_triangle`, `number_triangle`, `repeated_number_triangle`, `inverted_triangle`, `inverted_number_triangle`, `pyramid`, `inverted_pyramid`, `diamond`, and the `main` command |
| `algokit.recursion`   | `balanced_parentheses`, `count_subsets`, `count_combinations` |
| `algokit.trees`       | `TreeNode`, `BinarySearchTree`, `preorder`, `inorder`, `postorder`, `max_depth` |

Functions that work "in place" (`reverse_array`, `move_zeroes`, `rotate`,
`remove_duplicates` and the sorts) change the list they are given and return
`None`, except `remove_duplicates`, which returns the number of unique values
now at the front of the list.

A few functions keep deliberately simple rules worth knowing:

- `atm(amount, balance)` returns the new balance (withdrawal plus a 0.50 fee)
  when `amount` is a multiple of five, the unchanged balance when `amount`
  exceeds it, and `None` otherwise.
- `largest` and `second_largest` start from zero, so they never return a
  negative number.
- `longest_common_prefix([])` returns a single space.
- `third_max` falls back to the maximum when there are fewer than three
  distinct values.
- `min_repeats(a, b)` returns `-1` when no number of repeats of `a` contains `b`.

Invalid input raises `ValueError` (for example `int_sqrt(-1)`,
`add_binary("12", "1")` or `max_subarray([])`), and linked-list positions out
of range raise `IndexError`.

## Examples

```python
from algokit.basics import add_binary, roman_to_int, int_sqrt
from algokit.strings import is_anagram
from algokit.searching import linear_search
from algokit.recursion import balanced_parentheses

add_binary("11", "1")                # "100"
roman_to_int("MCMXCIV")              # 1994
int_sqrt(8)                          # 2
is_anagram("anagram", "nagaram")     # True
linear_search([10, 50, 30, 70], 30)  # 2
balanced_parentheses(2)              # ["(())", "()()"]
```

Linked lists and binary search trees can be built from any iterable:

```python
from algokit.linked_list import SinglyLinkedList, CircularLinkedList
from algokit.trees import BinarySearchTree, preorder

items = SinglyLinkedList([10, 20, 30])
items.insert_at_beginning(5)
items.reverse()
list(items)                    # [30, 20, 10, 5]
str(items)                     # "30 20 10 5"

ring = CircularLinkedList([20, 30, 60, 90])
ring.insert_at_start(43)
list(ring)                     # [43, 20, 30, 60, 90]

tree = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
60 in tree                     # True
90 in tree                     # False
list(tree)                     # [20, 30, 40, 50, 60, 70, 80]
list(preorder(tree.root))      # [50, 30, 20, 40, 70, 60, 80]
```

`SinglyLinkedList` positions for `insert_at_position` and
`delete_at_position` count from 1; `delete_at_index` counts from 0.

## Command line

The pattern functions return one string per row; the `algokit-patterns`
command prints them. Give a pattern name and a row count:

```
algokit-patterns pyramid 3
```

```
  *  
 *** 
*****
```

If the row count is left out, it is read from standard input:

```
echo 4 | algokit-patterns square
```

The pattern names are `square`, `right-triangle`, `number-triangle`,
`repeated-number-triangle`, `inverted-triangle`, `inverted-number-triangle`,
`pyramid`, `inverted-pyramid` and `diamond`. To see them all with the options:

```
algokit-patterns --help
```

## What it does not do

Apart from `algokit-patterns`, the package offers no commands: the other
algorithms are library functions to call from Python.