"""
Shared pytest fixtures for container tests.
"""

import pytest

from collectionkit.models.containers import ArrayBag, RedBlackTreeSet


@pytest.fixture(params=[ArrayBag, RedBlackTreeSet], ids=["array_bag", "rb_tree_set"])
def container_cls(request):
    """Provide each mutable reference container class in turn."""
    return request.param


@pytest.fixture
def abc_container(container_cls):
    """Provide a container holding "a", "b", "c"."""
    return container_cls(["a", "b", "c"])


@pytest.fixture
def bag():
    """Provide a fresh empty ArrayBag."""
    return ArrayBag()


@pytest.fixture
def tree():
    """Provide a fresh empty RedBlackTreeSet."""
    return RedBlackTreeSet()


@pytest.fixture
def sample_elements():
    """Provide sample elements for testing."""
    return ["key1", "key2", "key3"]
