"""
Data models: exceptions and reference container implementations.

Containers live in collectionkit.models.containers and
collectionkit.models.view; they are not re-exported here because the
interfaces import this package for its exceptions.
"""

from collectionkit.models.exceptions import (
    ContainerSizeMismatchError,
    InvalidTraversalStateError,
    UnsupportedTraversalOperationError,
)

__all__ = [
    "ContainerSizeMismatchError",
    "InvalidTraversalStateError",
    "UnsupportedTraversalOperationError",
]
