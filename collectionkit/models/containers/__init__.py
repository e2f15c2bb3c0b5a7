"""
Concrete container implementations built on MutableContainerBase.
"""

from collectionkit.models.containers.array_bag import ArrayBag
from collectionkit.models.containers.red_black_tree import RedBlackTreeSet

__all__ = ["ArrayBag", "RedBlackTreeSet"]
