# algodrills

Classic algorithm exercises written as plain Python functions, together with
the linked-list and binary-tree helpers they use. Pure Python, no
dependencies, Python 3.10 or later.

## Installing

```
pip install .
```

Install the test requirements with `pip install .[test]` and run the suite
with `pytest`.

## Modules

### `algodrills.structures`

- `ListNode(val, next=None)`: a singly linked list node. Iterating a node
  yields the values from that node to the end of the list.
- `TreeNode(val=0, left=None, right=None)`: a binary tree node.
- `linked_list(values)`: build a linked list holding `values` in order and
  return its head, or `None` for empty input.
- `format_linked_list(head)`: render a list as `"[1->2->3]"`, or `"[]"` for
  `None`.
- `build_tree(nodes)`: build a binary tree from its level-order form, where
  `None` or `0` marks a missing node. An empty sequence, or one starting with
  a missing node, gives `None`.
- `tree_to_string(root)`: the level-order form of a tree as text. Leaves add no
  child markers and trailing `null`s are dropped, e.g. `"{1, 2, 3}"`,
  `"{5, 4, 7, 3, null, 2, null, -1, null, 9}"`, or `"{}"` for an empty tree.
- `format_sequence(items)`: render a sequence as `"[a, b, c]"` (nested lists
  and tuples are rendered the same way).
- `format_nested(rows)`: render rows one per line, each followed by a comma,
  inside `[` and `]`; `"[]"` when there are no rows.

### `algodrills.dynamic`

- `fib(n)`, `tribonacci(n)`: the `n`-th Fibonacci / Tribonacci number.
- `pascal_triangle(num_rows)`: the first rows of Pascal's triangle.
- `rob(nums)`: most money from houses in a row without robbing two neighbours.
- `rob_circular(nums)`: the same with the houses in a circle.
- `min_cost_climbing_stairs(cost)`: cheapest way up, starting on step 0 or 1
  and climbing one or two steps at a time.

Negative `n` or `num_rows`, an empty list of houses, and fewer than two stairs
raise `ValueError`.

### `algodrills.greedy`

- `max_profit_single(prices)`: best profit from one buy and one later sale
  (empty `prices` raises `ValueError`).
- `max_profit_multiple(prices)`: best profit with any number of trades.
- `candy(ratings)`: fewest candies so higher-rated children outrank their
  neighbours.
- `answer_queries(nums, queries)`: for each query, the longest subsequence of
  `nums` whose sum does not exceed it.
- `reconstruct_queue(people)`: rebuild a queue from `[height, k]` pairs.
- `erase_overlap_intervals(intervals)`: fewest intervals to remove so the rest
  do not overlap.
- `find_min_arrow_shots(points)`: fewest arrows to burst all balloon spans
  (empty `points` raises `ValueError`).
- `find_content_children(greed, sizes)`: how many children cookies can satisfy.
- `can_place_flowers(flowerbed, n)`: whether `n` more flowers fit without
  neighbours touching.
- `check_possibility(nums)`: whether changing at most one element makes the
  list non-decreasing (the input is not modified).
- `partition_labels(s)`: split a lower-case string into the most parts so each
  letter appears in one part; other characters raise `ValueError`.

### `algodrills.pointers`

- `sorted_array_to_bst(nums)`: a height-balanced search tree from ascending
  values.
- `detect_cycle(head)`: the node where a linked list's cycle begins, or `None`.
- `two_sum_sorted(numbers, target)`: 1-based positions of two entries adding up
  to `target`; `ValueError` when there is none.
- `find_longest_word(s, dictionary)`: the longest dictionary word that is a
  subsequence of `s`, ties broken alphabetically; `""` if none.
- `judge_square_sum(c)`: whether `c` is a sum of two squares (negative `c`
  raises `ValueError`).
- `valid_palindrome(s)`: whether `s` is a palindrome after deleting at most one
  character.
- `merge_sorted(nums1, m, nums2, n)`: merge the first `n` of `nums2` into the
  first `m` of `nums1` in place, filling the tail of `nums1`; bad lengths raise
  `ValueError`.

## Example

```python
from algodrills.dynamic import rob
from algodrills.greedy import partition_labels
from algodrills.structures import build_tree, tree_to_string

rob([1, 2, 3, 1])                                  # 4
partition_labels("ababcbacadefegdehijhklij")       # [9, 7, 8]
tree_to_string(build_tree([1, None, 2, 3]))        # "{1, null, 2, 3}"
```

## What it does not do

The package is a library only: it has no command-line tool and does not read
problems from files or standard input. Call the functions from Python.