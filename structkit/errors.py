from __future__ import annotations


class DataStructureError(Exception):
    """Base class for every error raised by structkit containers."""


class InvalidArgumentError(DataStructureError, ValueError):
    """A structurally invalid argument (e.g. a sentinel passed to ``remove_node``)."""


class NullKeyError(InvalidArgumentError):
    """``None`` used as a hash map key."""

    def __init__(self, message: str = "key must not be None") -> None:
        super().__init__(message)


class EmptyCollectionError(DataStructureError, IndexError):
    """Removal or peek on an empty list, heap or array."""


class IndexOutOfRangeError(DataStructureError, IndexError):
    """Positional access outside ``[0, size)``."""


class TypeMismatchError(DataStructureError, TypeError):
    """Heap element that cannot be ordered and no comparator was supplied."""
