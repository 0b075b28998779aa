"""Doubly circular linked list holding the digits of a number."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .errors import EmptyRing, IndexOutOfRange, InvalidBase, InvalidDigit


@dataclass(eq=False)
class DigitNode:
    """Node in a doubly circular linked list of digits."""

    value: int
    next: Optional["DigitNode"] = field(default=None, repr=False)
    prev: Optional["DigitNode"] = field(default=None, repr=False)


class DigitRing:
    """Digits of a non-negative integer, most significant first.

    ``head`` holds the most significant digit and ``head.prev`` the least
    significant one. Every digit stays within ``[0, base)``.
    """

    def __init__(self, base: int, digits: Optional[Iterable[int]] = None) -> None:
        if base < 2:
            raise InvalidBase(base)
        self._base = base
        self._head: Optional[DigitNode] = None
        self._size = 0
        if digits is not None:
            self.extend(digits)

    @classmethod
    def from_digits(cls, digits: Iterable[int], base: int) -> "DigitRing":
        return cls(base, digits)

    @property
    def base(self) -> int:
        return self._base

    @property
    def head(self) -> Optional[DigitNode]:
        return self._head

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        for _ in range(self._size):
            assert node is not None  # circular invariant
            yield node.value
            node = node.next

    def __contains__(self, digit: object) -> bool:
        return self.index_of(digit) != -1

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DigitRing):
            return NotImplemented
        if self._size != other._size:
            return False
        return all(mine == theirs for mine, theirs in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(str(digit) for digit in self)

    def __repr__(self) -> str:
        return f"DigitRing(base={self._base}, digits={self.to_list()!r})"

    def is_empty(self) -> bool:
        return self._size == 0

    def to_list(self) -> list[int]:
        return list(self)

    def copy(self) -> "DigitRing":
        return DigitRing(self._base, self)

    def first(self) -> int:
        if self._head is None:
            raise EmptyRing("read the first digit")
        return self._head.value

    def last(self) -> int:
        if self._head is None:
            raise EmptyRing("read the last digit")
        assert self._head.prev is not None
        return self._head.prev.value

    # --- structure -------------------------------------------------------

    def append(self, digit: int) -> bool:
        """Add a digit after the least significant one."""
        self._check_digit(digit)
        self._link_before_head(DigitNode(value=digit))
        return True

    def extend(self, digits: Iterable[int]) -> bool:
        """Append several digits; nothing is linked unless all are valid."""
        pending = list(digits)
        for digit in pending:
            self._check_digit(digit)
        for digit in pending:
            self._link_before_head(DigitNode(value=digit))
        return bool(pending)

    def insert(self, index: int, digit: int) -> None:
        """Place ``digit`` so that it ends up at position ``index``."""
        if index < 0 or index > self._size:
            raise IndexOutOfRange(index, self._size)
        self._check_digit(digit)
        if index == self._size:
            self._link_before_head(DigitNode(value=digit))
            return
        current = self.node_at(index)
        node = DigitNode(value=digit)
        previous = current.prev
        assert previous is not None
        previous.next = node
        node.prev = previous
        node.next = current
        current.prev = node
        if index == 0:
            self._head = node
        self._size += 1

    def insert_all(self, index: int, digits: Iterable[int]) -> bool:
        """Insert several digits starting at ``index``, keeping their order."""
        if index < 0 or index > self._size:
            raise IndexOutOfRange(index, self._size)
        pending = list(digits)
        for digit in pending:
            self._check_digit(digit)
        for offset, digit in enumerate(pending):
            self.insert(index + offset, digit)
        return bool(pending)

    def remove_at(self, index: int) -> int:
        """Unlink the digit at ``index`` and return it."""
        node = self.node_at(index)
        self._unlink(node)
        return node.value

    def remove_value(self, digit: object) -> bool:
        """Unlink the first occurrence of ``digit`` scanning from the head."""
        node = self._find_forward(digit)
        if node is None:
            return False
        self._unlink(node)
        return True

    def remove_all(self, digits: Iterable[object]) -> bool:
        """Drop every occurrence of each given digit."""
        modified = False
        for digit in set(digits):
            while self.remove_value(digit):
                modified = True
        return modified

    def retain_all(self, digits: Iterable[object]) -> bool:
        """Keep only the digits contained in ``digits``."""
        keep = set(digits)
        modified = False
        node = self._head
        remaining = self._size
        for _ in range(remaining):
            assert node is not None
            following = node.next
            if node.value not in keep:
                self._unlink(node)
                modified = True
            node = following
        return modified

    def contains_all(self, digits: Iterable[object]) -> bool:
        return all(digit in self for digit in digits)

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def node_at(self, index: int) -> DigitNode:
        """Return the node at ``index``.

        Positions in the first half are reached walking forward from the
        head, the rest walking backward from the tail, so no lookup visits
        more than half of the ring.
        """
        if index < 0 or index >= self._size:
            raise IndexOutOfRange(index, self._size)
        assert self._head is not None
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                assert node.next is not None
                node = node.next
            return node
        node = self._head.prev
        assert node is not None
        for _ in range(self._size - 1 - index):
            assert node.prev is not None
            node = node.prev
        return node

    def get(self, index: int) -> int:
        return self.node_at(index).value

    def set(self, index: int, digit: int) -> int:
        """Overwrite the digit at ``index`` and return the previous one."""
        node = self.node_at(index)
        self._check_digit(digit)
        previous = node.value
        node.value = digit
        return previous

    def index_of(self, digit: object) -> int:
        node = self._head
        for index in range(self._size):
            assert node is not None
            if node.value == digit:
                return index
            node = node.next
        return -1

    def last_index_of(self, digit: object) -> int:
        if self._head is None:
            return -1
        node = self._head.prev
        for index in range(self._size - 1, -1, -1):
            assert node is not None
            if node.value == digit:
                return index
            node = node.prev
        return -1

    # --- ordering --------------------------------------------------------

    def swap(self, first: int, second: int) -> bool:
        """Exchange the digits at two positions; ``False`` if either is invalid."""
        if not (0 <= first < self._size and 0 <= second < self._size):
            return False
        if first == second:
            return True
        left = self.node_at(first)
        right = self.node_at(second)
        left.value, right.value = right.value, left.value
        return True

    def sort_ascending(self) -> None:
        self._bubble_sort(descending=False)

    def sort_descending(self) -> None:
        self._bubble_sort(descending=True)

    def shift_left(self) -> None:
        """Rotate so the second digit becomes the most significant one."""
        if self._size > 1:
            assert self._head is not None
            self._head = self._head.next

    def shift_right(self) -> None:
        """Rotate so the least significant digit becomes the most significant one."""
        if self._size > 1:
            assert self._head is not None
            self._head = self._head.prev

    # --- helpers ---------------------------------------------------------

    def _check_digit(self, digit: int) -> None:
        if isinstance(digit, bool) or not isinstance(digit, int):
            raise InvalidDigit(digit, self._base)
        if digit < 0 or digit >= self._base:
            raise InvalidDigit(digit, self._base)

    def _link_before_head(self, node: DigitNode) -> None:
        if self._head is None:
            node.next = node.prev = node
            self._head = node
        else:
            tail = self._head.prev
            assert tail is not None
            tail.next = node
            node.prev = tail
            node.next = self._head
            self._head.prev = node
        self._size += 1

    def _unlink(self, node: DigitNode) -> None:
        if self._size == 1:
            self._head = None
        else:
            assert node.prev is not None and node.next is not None
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        node.next = node.prev = None
        self._size -= 1

    def _find_forward(self, digit: object) -> Optional[DigitNode]:
        node = self._head
        for _ in range(self._size):
            assert node is not None
            if node.value == digit:
                return node
            node = node.next
        return None

    def _bubble_sort(self, descending: bool) -> None:
        if self._size <= 1:
            return
        for sweep in range(self._size):
            node = self._head
            for _ in range(self._size - 1 - sweep):
                assert node is not None and node.next is not None
                following = node.next
                out_of_order = (
                    node.value < following.value if descending else node.value > following.value
                )
                if out_of_order:
                    node.value, following.value = following.value, node.value
                node = following
