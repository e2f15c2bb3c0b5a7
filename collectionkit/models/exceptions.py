"""
Custom exceptions for container traversal and materialization.
"""

from typing import Any


class InvalidTraversalStateError(RuntimeError):
    """
    Raised when remove_current() is called on a traversal that has no
    removable element.

    Either nothing has been produced yet, or the element just produced was
    already removed.
    """

    def __init__(self, state: Any, message: str | None = None):
        """
        Initialize traversal state error.

        Args:
            state: The TraversalState the cursor was in.
            message: Optional override for the default message.
        """
        self.state = state
        super().__init__(
            message
            or f"remove_current() is not valid in traversal state {state.name}"
        )


class UnsupportedTraversalOperationError(RuntimeError):
    """Raised when removal is attempted through a read-only traversal."""

    def __init__(self, owner: str):
        self.owner = owner
        super().__init__(f"{owner} traversal does not support removal")


class ContainerSizeMismatchError(RuntimeError):
    """
    Raised when a traversal yields a different number of elements than
    size() reported before materialization started.

    The container was mutated concurrently or its size() is out of sync
    with its storage. No partially filled buffer is returned.
    """

    def __init__(self, expected: int, actual: int):
        """
        Initialize mismatch error.

        Args:
            expected: Element count reported by size().
            actual: Elements actually produced (may stop at expected + 1).
        """
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Container size changed during materialization: "
            f"size() reported {expected}, traversal produced "
            f"{'more than ' + str(expected) if actual > expected else actual}"
        )
