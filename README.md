# bstree

Small linked tree structures whose nodes point to their parent as well as
their children, and a writer for Graphviz `dot` files.

- `bstree.tree.Node` is a plain binary tree. You can look nodes up by value
  (`find_by_value`) or by their links (`find_by_full_property`), cut off
  subtrees (`discard_by_value`), count nodes (`count_nodes`), measure depth
  (`depth`) and find siblings (`sibling`).
- `bstree.bst.BstNode` is a binary search tree. It has `search`, `minimum`,
  `maximum`, `root`, `successor` and `successor_simpler` lookups. The module
  functions `tree_insert` and `tree_delete` add and remove keys.
- `bstree.dot` renders either kind of tree as an undirected Graphviz graph
  (`render_tree`, `render_bst`) and writes it to a file (`write_tree_dot`,
  `write_bst_dot`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

Build a binary search tree and query it:

```python
from bstree.bst import tree_insert, tree_delete

root = None
for key in [15, 6, 18, 3, 7, 17, 20, 2, 4, 13, 9]:
    root = tree_insert(root, key)

node = root.search(13)
print(node.key)                  # 13
print(root.minimum().key)        # 2
print(root.maximum().key)        # 20
```

`tree_insert` returns the root of the tree. Keys that are not larger than a
node's key go to its left. `search`, `minimum` and `maximum` return a copy of
the matching node. That copy shares the key, parent and children of the node.
`tree_delete(node)` removes a node and returns the node that took its place.
It returns `None` when a leaf was removed.

Write the tree as a Graphviz file:

```python
from bstree.dot import render_bst, write_bst_dot

print(render_bst(root))
write_bst_dot(root, "bst.dot")
```

The output is an undirected graph called `tree`. It has one `parent--child;`
edge per line. A node's own edges come before those of its subtrees, and the
left subtree comes before the right:

```
graph tree{
	15--6;
	15--18;
	...
}
```

Plain binary trees work the same way:

```python
from bstree.tree import Node
from bstree.dot import write_tree_dot

root = Node(5)
root.add_left_child(3)
root.add_right_child(7)
print(root.count_nodes(), root.depth())   # 3 1
write_tree_dot(root, "tree.dot")
```

## Command line

The `bstree` command runs a demonstration. It builds a sample search tree
and prints the search, minimum, maximum, root and successor results. It
then builds the same tree by insertion, deletes its root and writes the
`.dot` files:

```
bstree
```

Options:

- `-o DIR`, `--output-dir DIR`: the directory for the dot files. It is
  created if missing. The default is the current directory.
- `--binary-tree`: run the plain binary tree demonstration first as well.

## What it does not do

The package only writes `.dot` text. It does not draw images itself. To get
an image, render a written file with Graphviz, for example
`dot -Tpng bst.dot -o bst.png`.