# bintree

A small library of linked binary tree nodes. Each node holds an integer
value and links to its parent, its left child and its right child. On top of
that the library offers insertion, traversals, measurements, shape checks and
a text drawing of the tree.

## Installation

```
pip install .
```

## Building a tree

```python
from bintree.tree import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
root.insert_right(128)   # 128 takes 402's place; 402 becomes 128's right child
```

`insert_left` and `insert_right` always put the new node directly under the
node they are called on and return it. If that side was already taken, the
old child moves down one level and is attached on the same side of the new
node.

`Node(value, parent)` records the parent but does not attach the new node to
it. To link such a node, set the parent's `left` or `right` yourself, or use
`insert_left` / `insert_right`.

## Traversals

`preorder()`, `inorder()` and `postorder()` are generators that yield the
values of the subtree rooted at a node in the corresponding order:

```python
list(root.preorder())
```

## Measurements and checks

| Method             | Result                                                      |
|--------------------|-------------------------------------------------------------|
| `height()`         | edges on the longest path from the node down; a leaf is 0   |
| `depth()`          | edges from the node up to the root                          |
| `size()`           | number of nodes in the subtree                              |
| `leaves()`         | number of leaves in the subtree                             |
| `internal_nodes()` | number of nodes in the subtree with at least one child      |
| `balance()`        | left height minus right height, an absent side counting 0   |
| `is_leaf()`        | the node has no children                                    |
| `is_root()`        | the node has no parent                                      |
| `is_full()`        | every node has either zero or two children                  |
| `is_perfect()`     | full, and every leaf is at the same level                   |
| `sibling()`        | the other child of the node's parent, or `None`             |
| `uncle()`          | the sibling of the node's parent, or `None`                 |

`delete()` detaches a node from its parent and breaks every parent and child
link inside its subtree.

## Drawing a tree

```python
from bintree.render import render, print_tree

text = render(root)   # the drawing as a string; "" for None
print_tree(root)      # writes the drawing and a newline to standard output
```

`print_tree(tree, file)` writes to any text file object instead; given
`None` it writes nothing. Each value is drawn as `(nnn)`, zero-padded to
three digits, with one line per level and dotted, dashed connectors from a
parent to its children. Trailing spaces are stripped from each line. For a
root 98 with children 12 and 402:

```
  .--(098)--.
(012)     (402)
```