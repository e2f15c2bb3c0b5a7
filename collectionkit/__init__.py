"""
Skeletal container base classes.

A concrete container supplies only size() and a traversal; this package
derives the rest:
- is_empty, contains, contains_all, describe, materialize (read-only)
- insert_all, remove_one, remove_all, retain_all, remove_if, retain_if,
  clear (mutable, built on removal through the traversal)
"""

from collectionkit.interfaces import (
    Container,
    MutableContainer,
    StatefulTraversal,
    Traversal,
    TraversalState,
)
from collectionkit.base import MutableContainerBase, ReadOnlyContainerBase
from collectionkit.models.containers import ArrayBag, RedBlackTreeSet
from collectionkit.models.exceptions import (
    ContainerSizeMismatchError,
    InvalidTraversalStateError,
    UnsupportedTraversalOperationError,
)
from collectionkit.models.view import ReadOnlyView

__all__ = [
    "ArrayBag",
    "Container",
    "ContainerSizeMismatchError",
    "InvalidTraversalStateError",
    "MutableContainer",
    "MutableContainerBase",
    "ReadOnlyContainerBase",
    "ReadOnlyView",
    "RedBlackTreeSet",
    "StatefulTraversal",
    "Traversal",
    "TraversalState",
    "UnsupportedTraversalOperationError",
]
