import logging

from .dynamic_array import DynamicArray
from .errors import (
    DataStructureError,
    EmptyCollectionError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    NullKeyError,
    TypeMismatchError,
)
from .hash_map import Entry, HashMap
from .heap import MinHeap
from .linked_list import LinkedList, Node

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DynamicArray",
    "Entry",
    "HashMap",
    "LinkedList",
    "Node",
    "MinHeap",
    "DataStructureError",
    "EmptyCollectionError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "NullKeyError",
    "TypeMismatchError",
]
