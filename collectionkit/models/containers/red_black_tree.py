"""
Red-Black Tree implementation of a sorted set container.

Balanced insert and delete in O(log N); traversal in ascending order.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, TypeVar

from collectionkit.base.mutable import MutableContainerBase
from collectionkit.interfaces.traversal import StatefulTraversal

E = TypeVar("E")


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node:
    """Node in the Red-Black Tree."""

    element: Any
    color: Color = Color.RED
    left: "Node | None" = None
    right: "Node | None" = None
    parent: "Node | None" = None


class RedBlackTreeSet(MutableContainerBase[E]):
    """
    Sorted set of unique, mutually comparable elements.

    Properties maintained:
    1. Every node is either red or black
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from root to leaf has same number of black nodes

    insert() returns False for an element that is already present.
    """

    def __init__(self, elements: Iterable[E] | None = None) -> None:
        """
        Initialize RedBlackTreeSet.

        Args:
            elements: Optional initial contents.
        """
        self._root: Node | None = None
        self._size: int = 0
        if elements is not None:
            self.insert_all(elements)

    def insert(self, element: E) -> bool:
        """Insert element unless already present. O(log N)"""
        if self._root is None:
            self._root = Node(element=element, color=Color.BLACK)
            self._size = 1
            return True

        # Find insertion point
        parent = self._root
        current: Node | None = self._root
        while current is not None:
            parent = current
            if element < current.element:
                current = current.left
            elif element > current.element:
                current = current.right
            else:
                return False

        new_node = Node(element=element, parent=parent)
        if element < parent.element:
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1
        self._fix_insert(new_node)
        return True

    def discard(self, element: E) -> bool:
        """Remove element by key lookup. O(log N)"""
        node = self._find_node(element)
        if node is None:
            return False

        self._delete_node(node)
        self._size -= 1
        return True

    def has(self, element: E) -> bool:
        """Ordered lookup. O(log N), unlike the linear contains()."""
        return self._find_node(element) is not None

    def first(self) -> E | None:
        node = self._root
        while node is not None and node.left is not None:
            node = node.left
        return node.element if node else None

    def last(self) -> E | None:
        node = self._root
        while node is not None and node.right is not None:
            node = node.right
        return node.element if node else None

    def size(self) -> int:
        return self._size

    def traverse(self, start: E | None = None, end: E | None = None) -> "_TreeTraversal[E]":
        """
        Return an ascending traversal over [start, end).

        Args:
            start: Lower bound (inclusive). If None, starts from the smallest.
            end: Upper bound (exclusive). If None, runs to the largest.
        """
        return _TreeTraversal(self, start, end)

    def _find_node(self, element: E) -> Node | None:
        current = self._root
        while current is not None:
            if element < current.element:
                current = current.left
            elif element > current.element:
                current = current.right
            else:
                return current
        return None

    def _fix_insert(self, node: Node) -> None:
        """Fix Red-Black Tree properties after insert."""
        while node.parent is not None and node.parent.color == Color.RED:
            # A red parent is never the root, so the grandparent exists
            grandparent = node.parent.parent
            if node.parent is grandparent.left:
                uncle = grandparent.right
                if uncle is not None and uncle.color == Color.RED:
                    # Case 1: Uncle is red
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                else:
                    if node is node.parent.right:
                        # Case 2: Node is right child
                        node = node.parent
                        self._rotate_left(node)

                    # Case 3: Node is left child
                    node.parent.color = Color.BLACK
                    grandparent.color = Color.RED
                    self._rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if uncle is not None and uncle.color == Color.RED:
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                else:
                    if node is node.parent.left:
                        node = node.parent
                        self._rotate_right(node)

                    node.parent.color = Color.BLACK
                    grandparent.color = Color.RED
                    self._rotate_left(grandparent)

        self._root.color = Color.BLACK

    def _rotate_left(self, node: Node) -> None:
        right_child = node.right
        if right_child is None:
            return

        node.right = right_child.left
        if right_child.left:
            right_child.left.parent = node

        right_child.parent = node.parent
        if node.parent is None:
            self._root = right_child
        elif node is node.parent.left:
            node.parent.left = right_child
        else:
            node.parent.right = right_child

        right_child.left = node
        node.parent = right_child

    def _rotate_right(self, node: Node) -> None:
        left_child = node.left
        if left_child is None:
            return

        node.left = left_child.right
        if left_child.right:
            left_child.right.parent = node

        left_child.parent = node.parent
        if node.parent is None:
            self._root = left_child
        elif node is node.parent.right:
            node.parent.right = left_child
        else:
            node.parent.left = left_child

        left_child.right = node
        node.parent = left_child

    def _delete_node(self, node: Node) -> None:
        """Unlink a node, rebalancing before it leaves the tree."""
        if node.left and node.right:
            # Two children: move the successor's element up, delete the successor
            successor = node.right
            while successor.left:
                successor = successor.left
            node.element = successor.element
            node = successor

        # Node has at most one child
        child = node.left if node.left else node.right

        if node.color == Color.BLACK:
            if child and child.color == Color.RED:
                child.color = Color.BLACK
            else:
                # Node is still linked, so it stands in as the double-black
                self._fix_delete(node)

        self._replace_node(node, child)

    def _replace_node(self, node: Node, child: Node | None) -> None:
        if node.parent is None:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child

        if child:
            child.parent = node.parent

    def _fix_delete(self, node: Node) -> None:
        """Fix Red-Black Tree properties after delete."""
        while node is not self._root and node.color == Color.BLACK:
            parent = node.parent
            if node is parent.left:
                sibling = parent.right

                if sibling.color == Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    sibling = parent.right

                left_black = sibling.left is None or sibling.left.color == Color.BLACK
                right_black = sibling.right is None or sibling.right.color == Color.BLACK

                if left_black and right_black:
                    sibling.color = Color.RED
                    node = parent
                else:
                    if right_black:
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_right(sibling)
                        sibling = parent.right

                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    if sibling.right:
                        sibling.right.color = Color.BLACK
                    self._rotate_left(parent)
                    node = self._root
            else:
                sibling = parent.left

                if sibling.color == Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    sibling = parent.left

                left_black = sibling.left is None or sibling.left.color == Color.BLACK
                right_black = sibling.right is None or sibling.right.color == Color.BLACK

                if left_black and right_black:
                    sibling.color = Color.RED
                    node = parent
                else:
                    if left_black:
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_left(sibling)
                        sibling = parent.left

                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    if sibling.left:
                        sibling.left.color = Color.BLACK
                    self._rotate_right(parent)
                    node = self._root

        node.color = Color.BLACK


class _TreeTraversal(StatefulTraversal[E]):
    """In-order traversal over a range of a RedBlackTreeSet."""

    def __init__(self, tree: RedBlackTreeSet[E], start: E | None, end: E | None) -> None:
        super().__init__()
        self._tree = tree
        self._stack: list[Node] = []
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(tree._root, start, inclusive=True)

    def _has_next(self) -> bool:
        if not self._stack:
            return False

        # Check end bound
        if self._end is not None and not self._stack[-1].element < self._end:
            self._stack.clear()
            return False
        return True

    def _advance(self) -> E:
        node = self._stack.pop()
        self._push_left_path(node.right, None, inclusive=True)
        return node.element

    def _remove(self, element: E) -> None:
        self._tree.discard(element)

        # Rotations and successor swaps invalidate the stack, re-seek past element
        self._stack.clear()
        self._push_left_path(self._tree._root, element, inclusive=False)

    def _push_left_path(self, node: Node | None, start: E | None, inclusive: bool) -> None:
        """Push leftmost path to stack, skipping nodes below start."""
        while node:
            if start is not None and (
                node.element < start if inclusive else not start < node.element
            ):
                node = node.right
            else:
                self._stack.append(node)
                node = node.left
