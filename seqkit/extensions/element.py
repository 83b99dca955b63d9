from __future__ import annotations
import typing
from collections import deque
from collections.abc import Sequence as _Indexable
from itertools import islice
from ..exceptions import InvalidArgumentError, NoSuchElementError, IndexOutOfRangeError
from ..types import *
from ..types import _MISSING

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

# elements quoted in the "more than one element" message
_ONLY_ELEMENT_PREVIEW = 5


class ElementAccessor(Generic[T]):
    """picks single elements out of a sequence by position."""

    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def first(self, default: Optional[T] = None) -> Optional[T]:
        """the first element, or `default` when the sequence is empty"""
        return next(iter(self._sequence), default)

    def last(self, default: T = _MISSING) -> T:
        """
        the last element. indexes straight into lists and tuples, otherwise
        runs one full traversal keeping only the most recent element.
        raises NoSuchElementError on an empty sequence unless a default is given.
        """
        source = self._sequence._source()
        if isinstance(source, _Indexable):
            if len(source) > 0:
                return source[-1]
        else:
            tail = deque(source, maxlen=1)
            if tail:
                return tail[0]

        if default is _MISSING:
            raise NoSuchElementError("sequence contains no elements")
        return default

    def only(self, default: T = _MISSING) -> T:
        """
        the single element of the sequence.
        advances the cursor twice to prove there is no second element.
        an empty sequence returns `default` when one is given; more than one element always fails.
        """
        cursor = iter(self._sequence)
        first = next(cursor, _MISSING)
        if first is _MISSING:
            if default is _MISSING:
                raise InvalidArgumentError("expected exactly one element but sequence was empty")
            return default

        second = next(cursor, _MISSING)
        if second is _MISSING:
            return first

        preview = [first, second, *islice(cursor, _ONLY_ELEMENT_PREVIEW - 2)]
        rendered = ", ".join(str(item) for item in preview)
        if next(cursor, _MISSING) is not _MISSING:
            rendered += ", ..."
        raise InvalidArgumentError(f"expected exactly one element but sequence was: [{rendered}]")

    def at(self, index: int, default: T = _MISSING) -> T:
        """
        the element at zero-based `index`.
        an index past the end returns `default` when one is given, a negative index never does.
        """
        if index < 0:
            raise IndexOutOfRangeError(f"index must not be negative, got {index}")

        source = self._sequence._source()
        if isinstance(source, _Indexable):
            if index < len(source):
                return source[index]
            size = len(source)
        else:
            # islice stops pulling once it reaches `index`
            item = next(islice(source, index, None), _MISSING)
            if item is not _MISSING:
                return item
            size = None

        if default is not _MISSING:
            return default
        if size is None:
            raise IndexOutOfRangeError(f"index {index} is past the end of the sequence")
        raise IndexOutOfRangeError(f"index {index} out of range for sequence of size {size}")
