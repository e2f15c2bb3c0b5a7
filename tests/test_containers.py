"""
Tests for the reference containers: ArrayBag and RedBlackTreeSet.
"""

import random

from collectionkit.models.containers import ArrayBag, RedBlackTreeSet
from collectionkit.models.containers.red_black_tree import Color


def black_height(node):
    """Return the black height of a subtree, asserting Red-Black properties."""
    if node is None:
        return 1

    if node.color == Color.RED:
        for child in (node.left, node.right):
            assert child is None or child.color == Color.BLACK
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node

    left = black_height(node.left)
    right = black_height(node.right)
    assert left == right
    return left + (1 if node.color == Color.BLACK else 0)


def assert_valid_tree(tree):
    root = tree._root
    if root is not None:
        assert root.color == Color.BLACK
        assert root.parent is None
    black_height(root)
    elements = list(tree)
    assert elements == sorted(elements)
    assert len(elements) == tree.size()


class TestArrayBag:
    """Tests for ArrayBag."""

    def test_insert_always_changes(self, bag):
        """Test inserts accept duplicates."""
        assert bag.insert("x")
        assert bag.insert("x")
        assert bag.size() == 2

    def test_insertion_order(self, sample_elements):
        """Test traversal follows insertion order."""
        bag = ArrayBag(reversed(sample_elements))
        assert list(bag) == ["key3", "key2", "key1"]

    def test_duplicates_scenario(self):
        """Test removing one of two duplicates."""
        bag = ArrayBag(["x", "x", "y"])

        assert bag.remove_one("x")
        assert bag.size() == 2
        assert bag.materialize().count("x") == 1

    def test_len(self, bag):
        """Test len() matches size()."""
        bag.insert_all([1, 2, 3])
        assert len(bag) == bag.size() == 3


class TestRedBlackTreeSet:
    """Tests for RedBlackTreeSet sorted container."""

    def test_insert_and_has(self, tree):
        """Test basic insert and lookup."""
        assert tree.insert("key1")
        assert tree.insert("key2")

        assert tree.has("key1")
        assert tree.has("key2")
        assert not tree.has("key3")

    def test_duplicate_rejected(self, tree):
        """Test inserting an existing element reports no change."""
        tree.insert("key1")

        assert not tree.insert("key1")
        assert tree.size() == 1

    def test_discard(self, tree):
        """Test discard by lookup."""
        tree.insert_all(["key1", "key2"])

        assert tree.discard("key1")
        assert not tree.has("key1")
        assert tree.has("key2")
        assert not tree.discard("key3")

    def test_iteration(self, tree):
        """Test sorted iteration."""
        tree.insert_all(["c", "a", "b"])
        assert list(tree) == ["a", "b", "c"]

    def test_range_traversal(self, tree):
        """Test traversal bounded to [start, end)."""
        tree.insert_all(f"key{i:02d}" for i in range(10))

        assert list(tree.traverse("key03", "key07")) == ["key03", "key04", "key05", "key06"]
        assert list(tree.traverse(start="key08")) == ["key08", "key09"]
        assert list(tree.traverse(end="key02")) == ["key00", "key01"]

    def test_first_and_last(self, tree):
        """Test smallest and largest element lookup."""
        assert tree.first() is None
        assert tree.last() is None

        tree.insert_all([5, 1, 9, 3])
        assert tree.first() == 1
        assert tree.last() == 9

    def test_balanced_after_inserts(self, tree):
        """Test Red-Black properties hold after ascending inserts."""
        tree.insert_all(range(200))
        assert_valid_tree(tree)

    def test_balanced_after_random_mutation(self):
        """Test Red-Black properties hold through mixed inserts and removals."""
        rng = random.Random(7)
        values = list(range(500))
        rng.shuffle(values)
        tree = RedBlackTreeSet(values)
        assert_valid_tree(tree)

        rng.shuffle(values)
        for value in values[:250]:
            assert tree.discard(value)
            if value % 25 == 0:
                assert_valid_tree(tree)

        assert_valid_tree(tree)
        assert list(tree) == sorted(values[250:])

    def test_balanced_after_traversal_removal(self):
        """Test removal through the traversal keeps the tree valid."""
        tree = RedBlackTreeSet(range(300))

        assert tree.remove_if(lambda n: n % 2 == 0 or n % 7 == 0)

        assert_valid_tree(tree)
        assert list(tree) == [n for n in range(300) if n % 2 and n % 7]
