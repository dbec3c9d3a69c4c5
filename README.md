# treebench

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Failed operations on the structures raise
`treebench.errors.StructureError` (a subclass of `Exception`) unless noted
otherwise.

## Modules

- `treebench.bst.BinarySearchTree` – unbalanced binary search tree.
  `insert` raises on a duplicate; `delete` replaces a node with two children
  by its in-order predecessor and raises on an empty tree or a missing value;
  `search` raises on an empty tree. `inorder()`, `preorder()` and
  `postorder()` return lists; `height()` counts nodes on the longest path
  (0 when empty); `tree_state()` compares the value sums of the root's two
  subtrees and returns `"Balanced Tree"`, `"Left Heavy Tree"` or
  `"Right Heavy Tree"`.
- `treebench.avl.AVLTree` – AVL tree. Duplicates are ignored on `insert`,
  missing keys on `remove`. Offers `preorder()`, `inorder()`, `height()`
  (in edges, -1 when empty) and `render()`.
- `treebench.splay.SplayTree` – splay tree with `insert`, `remove` (raises on
  an empty tree), `search` (splays and returns a bool), `preorder()` and
  `render()`.
- `treebench.dsw.DSWTree` – binary search tree with `balance()`, which runs
  the Day–Stout–Warren rotations in place and returns the rendering of the
  intermediate vine. Also `insert`, `preorder()`, `inorder()`, `height()` and
  `render()`.
- `treebench.render.render_sideways(root, label)` – text rendering of any
  binary tree whose nodes have `left` and `right`, right subtree on top, ten
  spaces of indent per level.
- `treebench.binomial_heap.BinomialHeap` – binomial min-heap of integers.
  `insert` returns the `BinomialNode` holding the key; `merge`, `find_min`,
  `delete_min` (returns the key), `decrease_key(node, new_key)`,
  `delete_key(key)` (returns whether it was found), `degrees()`, `keys()`,
  `len()` and `render()`.
- `treebench.union_find` – `WeightedQuickUnion` (union by size with path
  halving, plus `connected` and `render`), `QuickUnion` (no balancing) and
  `UnionFind` (union by rank with path compression). Out-of-range elements
  raise `IndexError`.
- `treebench.array_list.ArrayList` – list holding at most `capacity`
  integers. `insert` raises `StructureError` when full, `remove(index)`
  raises `IndexError` when out of range, `search` returns an index or `None`,
  `display()` returns the elements separated by spaces.
- `treebench.chained_hash` – `polynomial_hash(key, size)` and
  `ChainedHashTable(size, threshold)`, a separate-chaining table that doubles
  before an insert would push its load factor over `threshold`. Inserting an
  existing key replaces its value; `search` returns the value or `None`;
  `remove` returns a bool; `render()` lists every slot.
- `treebench.keyed_avl.KeyedAVLTree` – AVL tree mapping string keys to
  integers, with `insert`, `remove`, `search`, `items()`, `height()` and
  `render()`.
- `treebench.hash_table` – `HashTable(size, method)` with a
  `CollisionHandling` strategy: `CHAINING_VECTOR`, `CHAINING_LIST`,
  `CHAINING_BST` (chains are `KeyedAVLTree`s), `LINEAR_PROBING`,
  `QUADRATIC_PROBING` or `DOUBLE_HASHING`. The table doubles when its load
  factor exceeds 0.75 at the start of an insert or remove. The list and
  vector chains append on every insert, after updating an earlier entry with
  the same key. `stats()` returns a `TableStats`. Also `read_data(path)`,
  `benchmark_table(...)` and `benchmark_dict(...)`, which return a
  `BenchmarkResult` in microseconds.
- `treebench.edges.Edge` – frozen `(src, dest, weight)`; equal when all
  fields match, ordered by weight.
- `treebench.edge_heap.EdgeHeap` – fixed-capacity binary min-heap of edges.
- `treebench.edge_binomial_heap.EdgeBinomialHeap` – binomial min-heap of
  edges with `merge`, `decrease_key`, `delete_key` and `render`.
- `treebench.mst` – `MST(vertices)` with `add_edge`, `kruskal_v1()` (binary
  heap and `QuickUnion`) and `kruskal_v2()` (binomial heap and `UnionFind`);
  both return the spanning-tree weight and raise `StructureError` when the
  graph is not connected. `random_graph(num_nodes, num_edges, seed)` builds a
  connected random graph.
- `treebench.gene_bank` – `Sample` records of 28 bytes on disk
  (little-endian int32 id, int32 species code 0–4, float32 purity, 20-byte
  researcher name keeping at most 19 bytes), with `Sample.pack`/`unpack`,
  `read_samples`, `write_samples`, a stable `tim_sort` by species code, and
  `GeneBank` for `sort`, `index_samples`, `search_sample`, `researcher`,
  `update_researcher`, `delete_sample` (marks the id -1 and the name
  `DELETED`) and `sample_range`.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from treebench.avl import AVLTree

tree = AVLTree()
for key in (10, 20, 30, 40, 50, 25):
    tree.insert(key)
tree.remove(30)
print(tree.inorder())
print(tree.render())
```

```python
from treebench.mst import MST

graph = MST(4)
graph.add_edge(0, 1, 1)
graph.add_edge(1, 2, 2)
graph.add_edge(2, 3, 3)
graph.add_edge(0, 3, 10)
print(graph.kruskal_v1(), graph.kruskal_v2())  # 6 6
```

```python
from treebench.hash_table import CollisionHandling, HashTable

table = HashTable(101, CollisionHandling.DOUBLE_HASHING)
table.insert("alpha", 1)
print(table.search("alpha"))
print(table.stats().render())
```

## Commands

- `treebench-array` – menu for an `ArrayList` of capacity 10, reading
  choices and numbers from standard input.
- `treebench-hash [FILE ...] [--size N] [--deletes N] [--seed N]` – for each
  data file of whitespace-separated `key value` pairs, benchmarks every
  `CollisionHandling` method and a built-in `dict`, then prints table
  statistics. Without file arguments it looks for
  `data/no_collision_data.txt`, `data/low_collision_data.txt` and
  `data/high_collision_data.txt`.
- `treebench-mst [--nodes N] [--edges N] [--seed N]` – runs both Kruskal
  variants on a small fixed graph and on a random graph (200000 nodes and
  500000 edges by default) and prints cost and time.
- `treebench-genebank FILE` – sorts a binary sample file into
  `Sorted_FILE` beside it, prints a series of lookups, updates and
  deletions, then offers a menu over the sorted records.

## What it does not do

No data files ship with the package: `treebench-hash` needs key/value files
supplied by the user, and `treebench-genebank` needs an existing binary
sample file. The benchmarks measure these Python implementations only; the
default large MST run takes a while in pure Python.