"""
Skeletal container implementations built on the capability contracts.
"""

from collectionkit.base.materialize import (
    TERMINATOR,
    collection_to_list,
    collection_to_list_into,
)
from collectionkit.base.mutable import MutableContainerBase
from collectionkit.base.read_only import ReadOnlyContainerBase

__all__ = [
    "TERMINATOR",
    "MutableContainerBase",
    "ReadOnlyContainerBase",
    "collection_to_list",
    "collection_to_list_into",
]
