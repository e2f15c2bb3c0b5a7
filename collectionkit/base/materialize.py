"""
Copy a container's elements into a fixed-size list.
"""

import logging
from typing import Any

from collectionkit.interfaces.container import Container
from collectionkit.models.exceptions import ContainerSizeMismatchError

logger = logging.getLogger(__name__)

# Written after the last element when the destination has spare room
TERMINATOR = None


def collection_to_list(container: Container[Any]) -> list[Any]:
    """
    Copy all elements, in traversal order, into a new list.

    The list is sized from container.size() before traversal starts.

    Args:
        container: The container to copy.

    Returns:
        A new list holding exactly size() elements.

    Raises:
        ContainerSizeMismatchError: If the traversal produced a different
            number of elements than size() reported.
    """
    expected = container.size()
    result: list[Any] = [None] * expected
    _fill(container, result, expected)
    return result


def collection_to_list_into(container: Container[Any], destination: list[Any]) -> list[Any]:
    """
    Copy all elements into destination if it is large enough.

    If len(destination) >= size(), elements are written from index 0 and,
    when there is room left, destination[size()] is set to TERMINATOR.
    Slots after the terminator are left as they were. Otherwise destination
    is not touched and a new list of exactly size() elements is returned.

    Args:
        container: The container to copy.
        destination: Caller-supplied buffer.

    Returns:
        destination when it was used, otherwise a newly allocated list.

    Raises:
        ContainerSizeMismatchError: If the traversal produced a different
            number of elements than size() reported.
    """
    expected = container.size()
    if len(destination) < expected:
        return collection_to_list(container)

    # Fill a scratch buffer first so a mismatch leaves destination unchanged
    staged: list[Any] = [None] * expected
    _fill(container, staged, expected)

    destination[:expected] = staged
    if len(destination) > expected:
        destination[expected] = TERMINATOR
    return destination


def _fill(container: Container[Any], buffer: list[Any], expected: int) -> None:
    """Write traversal output into buffer, checking it matches expected."""
    count = 0
    for element in container.traverse():
        if count == expected:
            _mismatch(container, expected, count + 1)
        buffer[count] = element
        count += 1

    if count != expected:
        _mismatch(container, expected, count)


def _mismatch(container: Container[Any], expected: int, actual: int) -> None:
    logger.error(
        f"{type(container).__name__} size() reported {expected} elements "
        f"but traversal produced {'more' if actual > expected else actual}"
    )
    raise ContainerSizeMismatchError(expected, actual)
