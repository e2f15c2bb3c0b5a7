"""
Abstract base classes and protocols for containers and their traversals.
"""

from collectionkit.interfaces.container import Container, MutableContainer
from collectionkit.interfaces.traversal import (
    StatefulTraversal,
    Traversal,
    TraversalState,
)

__all__ = [
    "Container",
    "MutableContainer",
    "StatefulTraversal",
    "Traversal",
    "TraversalState",
]
