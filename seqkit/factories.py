import typing
import itertools
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Sequence

def from_iterable(data: Iterable[T]) -> 'Sequence[T]':
    """create sequence from iterable. a bare iterator or generator can only be traversed once."""
    from .sequence import Sequence
    return Sequence(lambda: data)

def of(*elements: T) -> 'Sequence[T]':
    """create sequence from the given elements"""
    from .sequence import Sequence
    return Sequence(lambda: elements)

def empty() -> 'Sequence[Any]':
    """create empty sequence"""
    from .sequence import Sequence
    return Sequence(lambda: ())

def from_range(start: int, count: int) -> 'Sequence[int]':
    """create sequence from range"""
    from .sequence import Sequence
    return Sequence(lambda: range(start, start + count))

def repeat(item: T, count: Optional[int] = None) -> 'Sequence[T]':
    """create sequence with repeated item. endless when count is None."""
    from .sequence import Sequence
    if count is None:
        return Sequence(lambda: itertools.repeat(item))
    return Sequence(lambda: itertools.repeat(item, count))

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Sequence[T]':
    """generate sequence by calling a function once per element. endless when count is None."""
    from .sequence import Sequence
    def produce():
        steps = itertools.count() if count is None else range(count)
        return (generator_func() for _ in steps)
    return Sequence(produce)

def count_from(start: int = 0, step: int = 1) -> 'Sequence[int]':
    """endless arithmetic progression start, start + step, ..."""
    from .sequence import Sequence
    return Sequence(lambda: itertools.count(start, step))

# --- aliases ---
seq = from_iterable
S = from_iterable
