"""Max-priority queue backed by an array binary heap.

The buffer is a fixed-length list of slots; ``_size`` counts the valid
prefix and ``_capacity`` is the slot count. Capacity doubles on overflow and
never shrinks on its own.
"""

import logging
import sys
from typing import Generic, Iterable, Iterator, List, Optional, TextIO, TypeVar

T = TypeVar('T')

DEFAULT_CAPACITY = 100

logger = logging.getLogger(__name__)


class HeapPriorityQueue(Generic[T]):
    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self._data: List[Optional[T]] = [None] * capacity
        self._size = 0
        self._capacity = capacity

    def peek(self) -> T:
        if self.empty():
            raise IndexError("peek from empty heap")
        return self._data[0]

    def enqueue(self, datum: T) -> None:
        if self._size + 1 > self._capacity:
            self._resize()
        self._data[self._size] = datum
        self._size += 1
        self._bubble(self._size - 1)

    def dequeue(self) -> T:
        if self.empty():
            raise IndexError("dequeue from empty heap")
        self._size -= 1
        result = self._data[0]
        self._data[0] = self._data[self._size]
        self._data[self._size] = None
        try:
            self._percolate(0)
        except BaseException:
            # Keep the removed maximum so no element is lost.
            self._data[self._size] = result
            self._size += 1
            raise
        return result

    def empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        # Capacity is kept; only the stale references are dropped.
        for i in range(self._size):
            self._data[i] = None
        self._size = 0

    def build(self, elements: Iterable[T]) -> None:
        """Replace the contents with ``elements`` in linear time.

        The new buffer is sized exactly to the input, so ``capacity()``
        equals ``size()`` afterwards. The caller's collection is copied,
        never referenced.
        """
        data: List[Optional[T]] = list(elements)
        self._data = data
        self._size = len(data)
        self._capacity = len(data)
        for i in range(self._size // 2 - 1, -1, -1):
            self._percolate(i)
        logger.debug("built heap of %d elements", self._size)

    def print(self, out: Optional[TextIO] = None, sep: str = ", ") -> TextIO:
        """Write the elements in raw array order, not priority order."""
        if out is None:
            out = sys.stdout
        for i in range(self._size):
            out.write(f"{self._data[i]}{sep}")
        out.write("\n")
        return out

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self.empty()

    push = enqueue
    pop = dequeue

    def copy(self) -> 'HeapPriorityQueue[T]':
        clone: HeapPriorityQueue[T] = type(self).__new__(type(self))
        clone._data = [None] * self._capacity
        for i in range(self._size):
            clone._data[i] = self._data[i]
        clone._size = self._size
        clone._capacity = self._capacity
        return clone

    def assign(self, other: 'HeapPriorityQueue[T]') -> 'HeapPriorityQueue[T]':
        """Copy-assign ``other`` into this heap; both keep separate buffers."""
        if other is self:
            return self
        if self._capacity < other._size:
            self._data = [None] * other._capacity
            self._capacity = other._capacity
        for i in range(other._size):
            self._data[i] = other._data[i]
        for i in range(other._size, self._size):
            self._data[i] = None
        self._size = other._size
        return self

    def take(self) -> 'HeapPriorityQueue[T]':
        """Move the buffer into a new heap and leave this one empty."""
        moved: HeapPriorityQueue[T] = type(self).__new__(type(self))
        moved._data = self._data
        moved._size = self._size
        moved._capacity = self._capacity
        self._data = [None] * DEFAULT_CAPACITY
        self._size = 0
        self._capacity = DEFAULT_CAPACITY
        logger.debug("moved %d elements out of heap", moved._size)
        return moved

    @staticmethod
    def from_array(arr: Iterable[T]) -> 'HeapPriorityQueue[T]':
        heap: HeapPriorityQueue[T] = HeapPriorityQueue()
        heap.build(arr)
        return heap

    @staticmethod
    def _parent(child: int) -> int:
        return (child - 1) // 2

    @staticmethod
    def _left(p: int) -> int:
        return 2 * p + 1

    @staticmethod
    def _right(p: int) -> int:
        return 2 * p + 2

    def _valid(self, i: int) -> bool:
        return 0 <= i < self._size

    def _is_leaf(self, p: int) -> bool:
        return not self._valid(self._left(p))

    def _has_right(self, p: int) -> bool:
        return self._valid(self._right(p))

    def _has_parent(self, c: int) -> bool:
        return c > 0 and self._valid(self._parent(c))

    def _resize(self) -> None:
        new_capacity = 1 if self._capacity == 0 else self._capacity * 2
        # Allocate in full before swapping so a MemoryError leaves us intact.
        new_data: List[Optional[T]] = [None] * new_capacity
        for i in range(self._size):
            new_data[i] = self._data[i]
        logger.debug("growing heap capacity %d -> %d", self._capacity, new_capacity)
        self._data = new_data
        self._capacity = new_capacity

    def _bubble(self, p: int) -> None:
        data = self._data
        while self._has_parent(p):
            parent = self._parent(p)
            if not data[parent] < data[p]:
                break
            data[p], data[parent] = data[parent], data[p]
            p = parent

    def _percolate(self, p: int) -> None:
        data = self._data
        while not self._is_leaf(p):
            child = self._left(p)
            if self._has_right(p) and data[child] < data[self._right(p)]:
                child = self._right(p)
            if not data[p] < data[child]:
                break
            data[p], data[child] = data[child], data[p]
            p = child

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __copy__(self) -> 'HeapPriorityQueue[T]':
        return self.copy()

    def __repr__(self) -> str:
        return f"HeapPriorityQueue({self._data[:self._size]})"

    def __str__(self) -> str:
        return f"HeapPriorityQueue(size={self._size}, capacity={self._capacity})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.empty():
            yield heap_copy.dequeue()
