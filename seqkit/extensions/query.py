from __future__ import annotations
import typing
from collections import Counter
from collections.abc import Sized
from itertools import zip_longest
from ..types import *
from ..types import _MISSING

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


class QueryAccessor(Generic[T]):
    """
    answers questions about a whole sequence: how long it is, what it contains,
    and whether it matches another sequence element for element.
    all of these run eagerly and traverse at most once.
    """

    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def size(self) -> int:
        """number of elements. uses len() when the source has it, otherwise counts one traversal."""
        source = self._sequence._source()
        if isinstance(source, Sized):
            return len(source)
        return sum(1 for _ in source)

    def is_empty(self) -> bool:
        """true when the sequence has no elements. pulls at most one element."""
        source = self._sequence._source()
        if isinstance(source, Sized):
            return len(source) == 0
        return next(iter(source), _MISSING) is _MISSING

    def frequency(self, target: T) -> int:
        """number of elements equal to `target`"""
        return sum(1 for item in self._sequence if item == target)

    def frequencies(self) -> Counter:
        """element -> occurrence count for a sequence of hashable elements"""
        return Counter(self._sequence)

    def contains(self, value: T) -> bool:
        """value-equality membership. stops at the first match."""
        source = self._sequence._source()
        # hashed containers answer without a scan, as long as the value hashes
        if isinstance(source, (set, frozenset, dict)):
            try:
                return value in source
            except TypeError:
                return any(item == value for item in source)
        return any(item == value for item in source)

    def elements_equal(self, other: Iterable[T]) -> bool:
        """
        true iff both sequences have the same length and equal elements in the same order.
        returns false at the first mismatch; two sized sources of different length are not traversed at all.
        """
        from ..sequence import Sequence
        source = self._sequence._source()
        other_source = other._source() if isinstance(other, Sequence) else other

        if isinstance(source, Sized) and isinstance(other_source, Sized):
            if len(source) != len(other_source):
                return False

        for a, b in zip_longest(source, other_source, fillvalue=_MISSING):
            if a is _MISSING or b is _MISSING or a != b:
                return False
        return True
