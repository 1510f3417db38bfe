# galgo

Classic data structures and algorithms in plain Python, together with worked
solutions to well-known algorithm exercises. The package has no runtime
dependencies and supports Python 3.10 and later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Data structures

- `galgo.stack.Stack`: a LIFO stack with `push`, `pop`, `peek` and `is_empty`.
  `pop` and `peek` raise `IndexError` on an empty stack.
- `galgo.fifo.Queue`: a FIFO queue with the same methods and the same errors.
- `galgo.heap.MaxHeap` and `galgo.heap.MinHeap`: binary heaps built from any
  iterable, with `push`, `pop`, `peek`, `is_empty`, `len()` and
  `set(index, value)`, which replaces a value and restores the heap order
  (an index past the end is ignored). The module also offers the list helpers
  `parent`, `left_child`, `right_child`, `max_heapify`, `max_down`, `max_up`,
  `min_heapify`, `min_down` and `min_up`.
- `galgo.linkedlist.Node`: a singly linked list node. `from_list` builds a list
  from a non-empty sequence; a node can be iterated, measured with `len()`,
  turned back into a list with `to_list`, and edited with `append`,
  `append_node`, `insert`, `detach`, `skip_next`, `replace_next` and
  `replace_next_node`.
- `galgo.ringbuffer.RingBuffer`: a fixed-capacity circular buffer. `write`
  accepts any iterable and never fails, dropping the oldest unread items once
  full; `read(size)` returns up to `size` items and raises `EOFError` when
  there is nothing to read.
- `galgo.binarytree.TreeNode`: a binary tree node. `from_heap_list` builds a
  tree from values in heap order with `None` marking gaps, and `inorder`
  yields the nodes in in-order sequence.
- `galgo.tree.Node`: a tree node with any number of ordered children, with
  `child`, `append`, `append_node` and `remove`.
- `galgo.hashmap.HashMap`: a separate-chaining hash map with a fixed number of
  buckets and a hash function of your choice (`rabin_fingerprint`, `int_hash`,
  `djb2` or `object_hash`). It has `set`, `get` (which raises `KeyError` for a
  missing key), `delete`, `len()` and `in`.

## Algorithms

- `galgo.sorting`: `bubble_sort`, `selection_sort`, `insertion_sort`,
  `binary_insertion_sort`, `merge_sort`, `quick_sort`, `heap_sort` and
  `radix_sort`, each sorting a list in place. `radix_sort` accepts only
  non-negative integers and raises `ValueError` otherwise.
- `galgo.searching`: `linear_search`, `binary_search` and
  `binary_search_range`, which can return the insertion point instead of -1.
- `galgo.mathutil`: `generate_primes`, `sieve_of_eratosthenes`, integer `sqrt`
  by Newton's method, `from_string`, `is_digit`, `absolute` and `sum_of`.
- `galgo.functional`: `pipe` composes functions left to right; `to_chars`,
  `from_chars` and `to_bytes` convert strings.

## Exercises

The `galgo.exercises` package holds these modules:

- `linked_lists`: `remove_duplicates`, `kth_to_last`, `delete_middle`, `partition`
- `expression_tree`: node classes (`ValueNode`, `AddNode`, `SubtractNode`,
  `MultiplyNode`, `DivideNode`), `make_operation`, `build_tree` from postfix
  tokens and `expression_tree_solution`
- `stairs`: climbing stairs and min-cost climbing stairs
- `coin_change`: fewest coins for an amount
- `house_robber`: best loot without robbing neighbours
- `last_stone_weight`: smash the heaviest stones
- `subsequences`: longest common and longest increasing subsequence
- `stock_trading`: at most `k` trades, trades with a cooldown, trades with a fee
- `max_value_of_coins`: best `k` coins from the tops of piles
- `min_difference`: smallest spread after three changes
- `grid_paths`: minimum path sum, unique paths, unique paths with obstacles
- `tree_problems`: maximum depth, in-order differences, zigzag level order
- `brainpower`: solving questions with brainpower

Most exercises come in several versions (`_v1`, `_v2`, ...): top-down with
memoisation, bottom-up tables and constant-space forms. Some versions keep the
behaviour of a flawed formulation and their docstrings say so:
`climb_stairs_v1`, `unique_paths_v3`, `max_value_of_coins_v2` and
`solving_questions_with_brainpower_v1` always return 0;
`min_difference_tree_v1` compares each value only with the first in-order
value; `zigzag_traversal_v1` leaves out the deepest level; and
`longest_increasing_subsequence_v1` returns 0 when no increasing pair exists.
Use the other versions where you need the usual answers.

## Examples

```python
from galgo.heap import MaxHeap
from galgo.sorting import merge_sort
from galgo.mathutil import generate_primes
from galgo.exercises.coin_change import coin_change_v2

heap = MaxHeap([3, 1, 4, 1, 5])
heap.pop()                      # 5

values = [5, 2, 9, 1]
merge_sort(values)              # values is now [1, 2, 5, 9]

generate_primes(20)             # [2, 3, 5, 7, 11, 13, 17, 19]

coin_change_v2([1, 2, 5], 100)  # 20
```

```python
from galgo.hashmap import HashMap, rabin_fingerprint

ages = HashMap(3, rabin_fingerprint)
ages.set("Alice", 4)
ages.get("Alice")               # 4
len(ages)                       # 1
```

```python
from galgo.exercises.expression_tree import build_tree, expression_tree_solution
from galgo.exercises.linked_lists import remove_duplicates
from galgo.linkedlist import from_list

solve = expression_tree_solution(build_tree)
solve(["3", "4", "+", "2", "*", "7", "/"])           # 2

"".join(remove_duplicates(from_list("FOLLOW UP")))  # "FOLW UP"
```

## What it does not do

The package is a library only: it has no command-line tool. It has no graph
algorithms, and none of its structures is persisted; everything lives in
memory.