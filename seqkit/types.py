from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

from .exceptions import IndexOutOfRangeError

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
SourceFunc = Callable[[], Iterable[T]]

# marks "no default supplied" where None is a legitimate default
_MISSING: Any = object()


class _ListView(Generic[T]):
    """
    read-only, indexable window over a backing list.
    subclasses map a view index onto a backing index; the backing list is
    never copied, so later changes to it show through the view.
    """

    def __init__(self, backing: List[T]):
        self._backing = backing

    def _backing_index(self, index: int) -> int:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            return [self[i] for i in range(start, stop, step)]

        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexOutOfRangeError(f"index {index} out of range for view of size {size}")
        return self._backing[self._backing_index(index)]

    def __iter__(self) -> Iterator[T]:
        for i in range(len(self)):
            yield self[i]

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, (_ListView, list, tuple)):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)})"


class ReversedList(_ListView[T]):
    """presents a list in reverse index order without touching it"""

    def _backing_index(self, index: int) -> int:
        return len(self._backing) - 1 - index

    def __len__(self) -> int:
        return len(self._backing)

    @property
    def forward(self) -> List[T]:
        """the list this view reverses"""
        return self._backing


class ListSlice(_ListView[T]):
    """contiguous, read-only slice [start, start + size) of a backing list"""

    def __init__(self, backing: List[T], start: int, size: int):
        super().__init__(backing)
        self._start = start
        self._size = size

    def _backing_index(self, index: int) -> int:
        return self._start + index

    def __len__(self) -> int:
        # the backing list may have shrunk since the view was handed out
        return max(0, min(self._size, len(self._backing) - self._start))


class ListPartition(Generic[T]):
    """
    consecutive read-only sub-list views of a backing list.
    every chunk holds exactly `size` elements except possibly the last.
    """

    def __init__(self, backing: List[T], size: int):
        self._backing = backing
        self._size = size

    def __len__(self) -> int:
        # ceiling division
        return -(-len(self._backing) // self._size)

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            return [self[i] for i in range(start, stop, step)]

        count = len(self)
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexOutOfRangeError(f"chunk {index} out of range for partition of {count} chunks")
        return ListSlice(self._backing, index * self._size, self._size)

    def __iter__(self) -> Iterator[ListSlice[T]]:
        for i in range(len(self)):
            yield self[i]

    def __repr__(self) -> str:
        return f"ListPartition({[list(chunk) for chunk in self]})"
