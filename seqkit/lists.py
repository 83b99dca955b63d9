"""list-specific helpers: read-only reversed and partitioned views, and list factories."""
from .exceptions import InvalidArgumentError
from .types import *


def reverse(items: List[T]) -> ReversedList[T]:
    """a read-only view of `items` in reverse index order. reversing the view again gives back `items`."""
    if isinstance(items, ReversedList):
        return items.forward
    return ReversedList(items)

def partition(items: List[T], size: int) -> ListPartition[T]:
    """consecutive read-only sub-list views of `size` elements; the last view holds the remainder"""
    if size <= 0:
        raise InvalidArgumentError(f"partition size must be positive, got {size}")
    return ListPartition(items, size)

def new_list(*elements: T) -> List[T]:
    """a new mutable list holding `elements`"""
    return list(elements)

def new_list_from(elements: Iterable[T]) -> List[T]:
    """a new mutable list drained from any iterable, including a one-shot iterator"""
    return list(elements)
