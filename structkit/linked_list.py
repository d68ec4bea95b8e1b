from __future__ import annotations
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from .errors import EmptyCollectionError, IndexOutOfRangeError, InvalidArgumentError

T = TypeVar("T")


class Node(Generic[T]):
    """A node handle of a :class:`LinkedList`.

    `value` is freely writable; `next` and `prev` are maintained by the list.
    Once a node is removed it is detached (both links are None) and can no
    longer be used as an insertion point.
    """

    __slots__ = ("value", "_next", "_prev")

    def __init__(self, value: Optional[T], prev: Optional[Node[T]], next: Optional[Node[T]]) -> None:
        self.value = value
        self._prev = prev
        self._next = next

    @property
    def next(self) -> Node[T]:
        return self._next  # type: ignore[return-value]

    @property
    def prev(self) -> Node[T]:
        return self._prev  # type: ignore[return-value]

    def is_sentinel(self) -> bool:
        return False

    def is_detached(self) -> bool:
        return self._next is None

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Node({self.value!r})"


class _SentinelNode(Node[T]):
    """The boundary node of a list ring. Never holds a user value."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(None, None, None)
        self._next = self._prev = self

    def is_sentinel(self) -> bool:
        return True

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "Node(<sentinel>)"


class LinkedList(Generic[T]):
    """Doubly linked list closed into a ring by a sentinel node.

    ``sentinel.next`` is the first node and ``sentinel.prev`` the last; both
    point back at the sentinel when the list is empty. Insertion methods return
    the new :class:`Node` so callers can later insert around it or remove it in
    O(1). ``get_first``/``get_last`` return the sentinel on an empty list; compare
    against :meth:`get_sentinel` to detect the end of a walk.

    Not thread-safe.
    """

    __slots__ = ("_sentinel", "_size")

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._sentinel: _SentinelNode[T] = _SentinelNode()
        self._size = 0
        if it is not None:
            for v in it:
                self.add_last(v)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _check_attached(node: Node[T]) -> None:
        if node.is_detached():
            raise InvalidArgumentError("node has been removed from its list")

    def _link_between(self, value: T, before: Node[T], after: Node[T]) -> Node[T]:
        node = Node(value, before, after)
        before._next = node
        after._prev = node
        self._size += 1
        return node

    def _unlink(self, node: Node[T]) -> T:
        node._prev._next = node._next  # type: ignore[union-attr]
        node._next._prev = node._prev  # type: ignore[union-attr]
        node._prev = node._next = None
        self._size -= 1
        return node.value  # type: ignore[return-value]

    # -----------------------------
    # Accessors
    # -----------------------------
    def get_sentinel(self) -> Node[T]:
        """Return the sentinel node, the end marker for manual walks."""
        return self._sentinel

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def get_first(self) -> Node[T]:
        """First node, or the sentinel if the list is empty."""
        return self._sentinel.next

    def get_last(self) -> Node[T]:
        """Last node, or the sentinel if the list is empty."""
        return self._sentinel.prev

    def get_node(self, i: int) -> Node[T]:
        """Return the node at 0-based position `i`. O(n).

        Walks from whichever end of the ring is closer.

        Raises:
            IndexOutOfRangeError: if `i` is not in [0, size).
        """
        if i < 0 or i >= self._size:
            raise IndexOutOfRangeError(f"index {i} out of range for list of size {self._size}")
        if i < self._size // 2:
            node = self._sentinel.next
            for _ in range(i):
                node = node.next
        else:
            node = self._sentinel.prev
            for _ in range(self._size - 1 - i):
                node = node.prev
        return node

    # -----------------------------
    # Insertion
    # -----------------------------
    def add_first(self, value: T) -> Node[T]:
        return self._link_between(value, self._sentinel, self._sentinel.next)

    def add_last(self, value: T) -> Node[T]:
        return self._link_between(value, self._sentinel.prev, self._sentinel)

    def add_after(self, node: Node[T], value: T) -> Node[T]:
        """Insert `value` right after `node`.

        For [1, 2, 3, 4] with `node` holding 2, ``add_after(node, 9)`` gives
        [1, 2, 9, 3, 4]. Passing the sentinel inserts at the front.
        """
        self._check_attached(node)
        return self._link_between(value, node, node.next)

    def add_before(self, node: Node[T], value: T) -> Node[T]:
        """Insert `value` right before `node`.

        For [1, 2, 3, 4] with `node` holding 2, ``add_before(node, 9)`` gives
        [1, 9, 2, 3, 4]. Passing the sentinel appends at the end.
        """
        self._check_attached(node)
        return self._link_between(value, node.prev, node)

    # -----------------------------
    # Removal
    # -----------------------------
    def remove_node(self, node: Node[T]) -> T:
        """Unlink `node` and return its value.

        `node` must belong to this list. A node of another live list is not
        detected and corrupts both lists.

        Raises:
            InvalidArgumentError: if `node` is a sentinel or already removed.
        """
        if node.is_sentinel():
            raise InvalidArgumentError("cannot remove the sentinel node")
        self._check_attached(node)
        return self._unlink(node)

    def remove_first(self) -> T:
        if self._size == 0:
            raise EmptyCollectionError("remove_first from empty list")
        return self._unlink(self._sentinel.next)

    def remove_last(self) -> T:
        if self._size == 0:
            raise EmptyCollectionError("remove_last from empty list")
        return self._unlink(self._sentinel.prev)

    def clear(self) -> None:
        """Drop every node. Previously returned handles become detached."""
        while self._size:
            self._unlink(self._sentinel.next)

    # -----------------------------
    # Splicing
    # -----------------------------
    def splice_after(self, node: Node[T], other: LinkedList[T]) -> None:
        """Move every node of `other`, in order, to sit right after `node`. O(1).

        For [1, 2, 3, 4], `other` = [7, 8, 9] and `node` holding 2 the result
        is [1, 2, 7, 8, 9, 3, 4]. The moved nodes keep their identity and
        `other` is left as a valid empty list.

        `node` must belong to this list (its sentinel included). Ownership is
        not checked, so a node of another live list corrupts both lists.
        """
        if other is self:
            raise InvalidArgumentError("cannot splice a list into itself")
        self._check_attached(node)
        if other._size:
            first = other._sentinel._next
            last = other._sentinel._prev
            after = node._next
            node._next = first
            first._prev = node  # type: ignore[union-attr]
            last._next = after  # type: ignore[union-attr]
            after._prev = last  # type: ignore[union-attr]
            self._size += other._size

        other._sentinel._next = other._sentinel._prev = other._sentinel
        other._size = 0

    # -----------------------------
    # Iteration & comparison
    # -----------------------------
    def nodes(self) -> Iterator[Node[T]]:
        """Yield node handles front to back."""
        node = self._sentinel.next
        while node is not self._sentinel:
            nxt = node.next
            yield node
            node = nxt

    def __iter__(self) -> Iterator[T]:
        for node in self.nodes():
            yield node.value  # type: ignore[misc]

    def __reversed__(self) -> Iterator[T]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            yield node.value  # type: ignore[misc]
            node = node.prev

    def __eq__(self, other: object) -> bool:
        """Same length and pairwise-equal values in order.

        None only matches None; other values match by identity or ``==``.
        """
        if not isinstance(other, LinkedList):
            return NotImplemented
        if self._size != other._size:
            return False
        for a, b in zip(self, other):
            if a is None or b is None:
                if a is not b:
                    return False
            elif a is not b and not a == b:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:  # pragma: no cover - trivial
        return self._size

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def to_list(self) -> List[T]:
        return list(self)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"LinkedList({self.to_list()!r})"
