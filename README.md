# dsakit

A small library of classic data structures and algorithms, written with
nothing but the standard library.

## Installation

```
pip install dsakit
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.linked_list` | `LinkedList` (1-based positions, `left_shift`), `ListError` |
| `dsakit.header_list` | `HeaderLinkedList`, a singly linked list whose header node keeps the count |
| `dsakit.doubly_linked_list` | `DoublyLinkedList` (0-based positions, iterable both ways) |
| `dsakit.stack` | `Stack` (`push`, `pop`, `peek`), `StackUnderflow` |
| `dsakit.fifo` | `Queue` (`enqueue`, `dequeue`), `QueueUnderflow` |
| `dsakit.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `heap_sort`, `merge_descending`, `sort_until_sentinel` |
| `dsakit.searching` | `linear_search`, `binary_search`, `recursive_linear_search` |
| `dsakit.arrays` | `doubled`, `alternate_ends`, `read_until_sentinel` |
| `dsakit.recursion` | `sum_of_n`, `hanoi_moves`, `hanoi_move_count`, `Move` |
| `dsakit.hashing` | `linear_probe_table`, `double_hash_table`, `quadratic_probe_table`, `occupied_indices`, `first_and_last`, `count_frequencies`, `TableFullError` |
| `dsakit.open_hashing` | `ChainedHashTable` (chaining in per-slot buckets) |
| `dsakit.graph` | `Graph`, an undirected graph with `bfs`, `dfs`, `neighbours`, `adjacency` |
| `dsakit.shortest_paths` | `floyd_warshall`, `INF` |
| `dsakit.heap` | `Heap`, `MinHeap`, `MaxHeap`, `HeapOverflow`, `HeapEmpty` |
| `dsakit.traversal` | `TreeNode`, `build_tree`, `inorder`, `preorder`, `postorder`, `level_order`, `reverse_level_order` |
| `dsakit.bst` | `BinarySearchTree` (duplicates go right, `inorder_ascii`) |
| `dsakit.avl` | `AVLTree` |
| `dsakit.btree` | `BTree` with a configurable minimum degree |

The sorting functions take any iterable and return a new ascending list; the
input is not changed. The search functions return an index, or `None` when the
key is absent. The hashing functions return the table as a list in which empty
slots are `None`.

## Examples

```python
from dsakit.linked_list import LinkedList
from dsakit.sorting import heap_sort
from dsakit.heap import MinHeap
from dsakit.graph import Graph
from dsakit.bst import BinarySearchTree
from dsakit.hashing import linear_probe_table, first_and_last
from dsakit.shortest_paths import INF, floyd_warshall
from dsakit.recursion import hanoi_moves, hanoi_move_count

items = LinkedList([10, 20, 30])
items.insert_at_position(15, 2)
print(list(items))                  # [10, 15, 20, 30]

print(heap_sort([12, 11, 13, 5, 6, 7]))   # [5, 6, 7, 11, 12, 13]

heap = MinHeap(capacity=8)
for key in (5, 3, 8, 1):
    heap.insert(key)
print(heap.extract_min())           # 1

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(0, 2)
g.add_edge(2, 3)
print(g.bfs(0))                     # [0, 1, 2, 3]

tree = BinarySearchTree([10, 5, 15, 3, 7])
print(tree.inorder())               # [3, 5, 7, 10, 15]
print(7 in tree)                    # True

table = linear_probe_table([1024, 1056, 2045, 3145, 1210, 3512])
print(first_and_last(table))        # ((0, 1210), (7, 3145))

print(floyd_warshall([[0, 3, INF], [INF, 0, 1], [2, INF, 0]]))
# [[0, 3, 4], [3, 0, 1], [2, 5, 0]]

for move in hanoi_moves(2, "A", "C", "B"):
    print(move)                     # Move disk 1 from A to B, ...
print(hanoi_move_count(3))          # 7
```

## Errors

Operations that cannot proceed raise exceptions rather than printing or
returning status values:

- `ListError` for an empty list, a position out of range or a missing value
  in any of the linked lists;
- `StackUnderflow` and `QueueUnderflow` when taking from an empty stack or queue;
- `HeapOverflow` when inserting into a full heap, `HeapEmpty` when peeking at
  or extracting from an empty one;
- `TableFullError` when a key finds no free slot in a probing table;
- `ValueError` for invalid arguments such as a non-positive vertex count, an
  out-of-range edge or a negative number of disks.

## What it does not do

dsakit is a library only. It has no command-line program and reads nothing
from standard input; every structure and algorithm is used by calling it
from Python.

## Running the tests

```
pip install "dsakit[test]"
pytest
```