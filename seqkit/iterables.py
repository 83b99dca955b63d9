"""
plain-function helpers over any python iterable.

every function here accepts lists, tuples, sets, generators or seqkit
sequences alike; lazy results come back as a `Sequence`.
"""
from itertools import chain
from .factories import from_iterable
from .mutation import add_all, remove_all, retain_all
from .sequence import Sequence
from .types import *
from .types import _MISSING


# --- combination and slicing ---

def concat(*iterables: Iterable[T]) -> Sequence[T]:
    """lazy concatenation of the given iterables. no arguments gives an empty sequence."""
    return Sequence(lambda: chain.from_iterable(iterables))

def concat_all(iterables: Iterable[Iterable[T]]) -> Sequence[T]:
    """like concat(), for iterables supplied as one iterable of iterables"""
    return Sequence(lambda: chain.from_iterable(iterables))

def limit(iterable: Iterable[T], max_size: int) -> Sequence[T]:
    return from_iterable(iterable).limit(max_size)

def partition(iterable: Iterable[T], size: int) -> Sequence[Tuple[T, ...]]:
    return from_iterable(iterable).partition(size)

def unmodifiable(iterable: Iterable[T]) -> Sequence[T]:
    return from_iterable(iterable).unmodifiable()

# --- inspection ---

def frequency(iterable: Iterable[T], target: T) -> int:
    return from_iterable(iterable).query.frequency(target)

def contains(iterable: Iterable[T], value: T) -> bool:
    return from_iterable(iterable).query.contains(value)

def size(iterable: Iterable[T]) -> int:
    return from_iterable(iterable).query.size()

def is_empty(iterable: Iterable[T]) -> bool:
    return from_iterable(iterable).query.is_empty()

def elements_equal(a: Iterable[T], b: Iterable[T]) -> bool:
    return from_iterable(a).query.elements_equal(b)

def get_first(iterable: Iterable[T], default: Optional[T] = None) -> Optional[T]:
    return from_iterable(iterable).get.first(default)

def get_last(iterable: Iterable[T], default: T = _MISSING) -> T:
    return from_iterable(iterable).get.last(default)

def get_only_element(iterable: Iterable[T], default: T = _MISSING) -> T:
    return from_iterable(iterable).get.only(default)

def get(iterable: Iterable[T], index: int, default: T = _MISSING) -> T:
    return from_iterable(iterable).get.at(index, default)

# --- materialization ---

def to_array(iterable: Iterable[T], dtype: Optional[Any] = None):
    return from_iterable(iterable).to.array(dtype)

def to_string(iterable: Iterable[T]) -> str:
    return from_iterable(iterable).to.string()


__all__ = [
    "concat", "concat_all", "limit", "partition", "unmodifiable",
    "frequency", "contains", "size", "is_empty", "elements_equal",
    "get_first", "get_last", "get_only_element", "get",
    "to_array", "to_string",
    "add_all", "remove_all", "retain_all",
]
