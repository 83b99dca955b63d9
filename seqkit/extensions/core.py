from __future__ import annotations
import typing
from itertools import chain, islice, batched
from ..exceptions import InvalidArgumentError
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class _CoreOperations(Generic[T]):
    def concat(self: 'Sequence[T]', *others: Iterable[T]) -> 'Sequence[T]':
        """
        this sequence followed by each of `others`, in order.
        lazy: an input is only opened once the cursor has exhausted the one before it.
        """
        from ..sequence import Sequence
        # chain calls iter() on each argument only when it reaches it
        return Sequence(lambda: chain(self, *others))

    def limit(self: 'Sequence[T]', max_size: int) -> 'Sequence[T]':
        """at most `max_size` leading elements. stops pulling from the source once reached."""
        from ..sequence import Sequence
        if max_size < 0:
            raise InvalidArgumentError(f"limit must not be negative, got {max_size}")
        return Sequence(lambda: islice(self, max_size))

    def skip(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """every element after the first `count`"""
        from ..sequence import Sequence
        if count < 0:
            raise InvalidArgumentError(f"skip count must not be negative, got {count}")
        return Sequence(lambda: islice(self, count, None))

    def partition(self: 'Sequence[T]', size: int) -> 'Sequence[Tuple[T, ...]]':
        """
        consecutive chunks of exactly `size` elements; the last chunk holds the remainder.
        each chunk is a tuple, realized in full before it is yielded, so the
        display string renders chunks in tuple form: [(1, 2), (3, 4), (5,)].
        """
        from ..sequence import Sequence
        if size <= 0:
            raise InvalidArgumentError(f"partition size must be positive, got {size}")
        return Sequence(lambda: batched(self, size))

    def where(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """filter elements based on a predicate"""
        from ..sequence import Sequence
        return Sequence(lambda: (x for x in self if predicate(x)))

    def select(self: 'Sequence[T]', selector: Selector[T, U]) -> 'Sequence[U]':
        """project each element to a new form"""
        from ..sequence import Sequence
        return Sequence(lambda: (selector(x) for x in self))

    def of_type(self: 'Sequence[T]', type_filter: Type[U]) -> 'Sequence[U]':
        """filters the elements of a sequence based on a specified type"""
        return self.where(lambda item: isinstance(item, type_filter))

    def reverse(self: 'Sequence[T]') -> 'Sequence[T]':
        """
        the elements in reverse encounter order.
        each traversal takes a snapshot of the source first, so infinite sources never finish.
        """
        from ..sequence import Sequence
        return Sequence(lambda: reversed(self._snapshot()))

    def unmodifiable(self: 'Sequence[T]') -> 'Sequence[T]':
        """a view that exposes iteration only, hiding the source object from callers"""
        from ..sequence import Sequence
        return Sequence(lambda: iter(self))
