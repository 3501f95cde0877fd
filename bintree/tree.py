"""Binary tree nodes with parent links, and the usual structural queries."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        # The parent is recorded but the node is not attached to it;
        # attaching is left to the caller or to insert_left/insert_right.
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    # -- building -----------------------------------------------------------

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves under it."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves under it."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def delete(self) -> None:
        """Detach this subtree from its parent and break every link inside it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
            self.parent = None
        stack = [self]
        while stack:
            node = stack.pop()
            for child in node._children():
                child.parent = None
                stack.append(child)
            node.left = None
            node.right = None

    # -- predicates ---------------------------------------------------------

    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    # -- traversals ---------------------------------------------------------

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left subtree, right subtree."""
        yield self.value
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left subtree, node, right subtree."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left subtree, right subtree, node."""
        if self.left is not None:
            yield from self.left.postorder()
        if self.right is not None:
            yield from self.right.postorder()
        yield self.value

    # -- measures -----------------------------------------------------------

    def _side_height(self, child: Node | None) -> int:
        return child.height() + 1 if child is not None else 0

    def height(self) -> int:
        """Number of edges on the longest downward path; a leaf has height 0."""
        return max(self._side_height(self.left), self._side_height(self.right))

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        depth = 0
        node = self
        while node.parent is not None:
            depth += 1
            node = node.parent
        return depth

    def size(self) -> int:
        """Number of nodes in this subtree."""
        return 1 + sum(child.size() for child in self._children())

    def leaves(self) -> int:
        """Number of leaves in this subtree."""
        if self.is_leaf():
            return 1
        return sum(child.leaves() for child in self._children())

    def internal_nodes(self) -> int:
        """Number of nodes in this subtree that have at least one child."""
        if self.is_leaf():
            return 0
        return 1 + sum(child.internal_nodes() for child in self._children())

    def balance(self) -> int:
        """Left height minus right height, counting an absent side as 0."""
        return self._side_height(self.left) - self._side_height(self.right)

    def is_full(self) -> bool:
        """True if every node has either zero or two children."""
        if self.is_leaf():
            return True
        if self.left is not None and self.right is not None:
            return self.left.is_full() and self.right.is_full()
        return False

    def is_perfect(self) -> bool:
        """True if the tree is full and all its leaves are at the same level."""
        if self.is_leaf():
            return True
        if self.left is None or self.right is None:
            return False
        if not (self.left.is_perfect() and self.right.is_perfect()):
            return False
        return self.left.height() == self.right.height()

    # -- relatives ----------------------------------------------------------

    def sibling(self) -> Node | None:
        """The other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Node | None:
        """The sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()