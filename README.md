# algokit

Classic algorithms with small, readable implementations and no dependencies
beyond the standard library.

## Installation

```
pip install algokit
```

## What is inside

- `algokit.sorting`: `bubble_sort`, `selection_sort`, `insertion_sort`,
  `merge_sort`, `quick_sort` and `heap_sort`. Each sorts a mutable sequence
  (such as a list) in ascending order, in place, and returns `None`.
  `merge_sort` is stable; `quick_sort` uses the last element of each range
  as its pivot.
- `algokit.searching`: `binary_search`, `left_bound_binary_search` and
  `right_bound_binary_search` on an ascending sequence. Each returns an
  index, or `-1` when the target is not present. The bound searches return
  the first and last index of a repeated value.
- `algokit.arrays`: test-data generators.
  `generate_random_array(n, range_l, range_r)` returns `n` random integers
  from the inclusive range; `generate_nearly_ordered_array(n, swap_times)`
  returns `0 .. n-1` with `swap_times` random pairs swapped;
  `generate_ordered_array(n)` returns `0 .. n-1`. A non-positive `n` or
  `swap_times`, or `range_l > range_r`, raises `ValueError`.
- `algokit.student`: `Student`, a dataclass with a `name` and a `score`.
  Students order by score first and then by name, and print as
  `Student: <name> <score>`.
- `algokit.graph`: `UnionFind`, disjoint sets over `0 .. n-1` with path
  compression and union by size (`find`, `unite`, `is_connected`, the
  `count` property holding the number of sets, and `len()` giving the
  number of elements; an element out of range raises `IndexError`). Also
  `bfs_traversal`, `dfs_traversal`, `shortest_path_unweighted` and
  `topological_sort` on adjacency lists.
- `algokit.tree`: the `TreeNode` dataclass (`val`, `left`, `right`) and the
  helpers `preorder_traversal`, `inorder_traversal`, `postorder_traversal`,
  `level_order_traversal`, `max_depth`, `is_valid_bst` and `search_bst`.

## Examples

Sorting in place:

```python
from algokit.sorting import heap_sort

nums = [9, 4, 7, 1, 3, 8, 2, 6, 5]
heap_sort(nums)
nums                                        # [1, 2, 3, 4, 5, 6, 7, 8, 9]
```

Searching a sorted sequence:

```python
from algokit.searching import binary_search, left_bound_binary_search

binary_search([1, 3, 5, 7, 9, 11, 13], 7)              # 3
left_bound_binary_search([1, 2, 2, 2, 3, 4, 4, 5], 2)  # 1
```

Graphs are lists of neighbour lists, indexed by node:

```python
from algokit.graph import UnionFind, bfs_traversal, topological_sort

graph = [[1, 2], [0, 3, 4], [0, 5], [1], [1, 5], [2, 4]]
bfs_traversal(graph, 0)                     # [0, 1, 2, 3, 4, 5]
topological_sort([[1], [2], [0]])           # [] because the graph has a cycle

sets = UnionFind(6)
sets.unite(0, 1)                            # True
sets.is_connected(0, 1)                     # True
sets.count                                  # 5
```

A start node out of range gives an empty traversal, and
`shortest_path_unweighted` gives `-1` for every node it cannot reach.

Building and walking a binary search tree:

```python
from algokit.tree import TreeNode, inorder_traversal, is_valid_bst

root = TreeNode(5, TreeNode(3), TreeNode(7))
inorder_traversal(root)                     # [3, 5, 7]
is_valid_bst(root)                          # True
```

## What it does not do

algokit is a library only: it has no command-line tool, and it does not
time or benchmark the algorithms.

## Running the tests

```
pip install -e ".[test]"
pytest
```