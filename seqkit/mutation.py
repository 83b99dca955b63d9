"""
bulk changes to a caller-owned mutable collection.

these are the only seqkit functions with side effects, and they only ever
touch `target`. every function reports whether `target` changed.
"""
import logging
from collections.abc import MutableSet, MutableSequence
from .exceptions import InvalidArgumentError
from .types import *

logger = logging.getLogger(__name__)


def add_all(target: Any, elements: Iterable[T]) -> bool:
    """append every element of `elements` to `target`, in order. true iff target's size changed."""
    before = len(target)
    # lists and deques extend, sets update
    extend = getattr(target, 'extend', None) or getattr(target, 'update', None)
    if extend is None:
        raise InvalidArgumentError(f"cannot add elements to a {type(target).__name__}")
    extend(elements)

    added = len(target) - before
    logger.debug(f"added {added} elements to {type(target).__name__}")
    return added != 0


def remove_all(target: Any, candidates: Iterable[Any]) -> bool:
    """remove every element of `target` equal to some candidate. true iff anything was removed."""
    is_candidate = _membership(candidates)
    return _remove_where(target, is_candidate)


def retain_all(target: Any, candidates: Iterable[Any]) -> bool:
    """keep only the elements of `target` equal to some candidate. true iff anything was removed."""
    is_candidate = _membership(candidates)
    return _remove_where(target, lambda item: not is_candidate(item))


def _membership(candidates: Iterable[Any]) -> Callable[[Any], bool]:
    """a value-equality membership test over `candidates`, hashed when the candidates allow it"""
    pool = list(candidates)
    try:
        hashed = set(pool)
    except TypeError:
        # unhashable candidates: fall back to equality scans
        return lambda item: item in pool

    def contains(item: Any) -> bool:
        try:
            return item in hashed
        except TypeError:
            return item in pool

    return contains


def _remove_where(target: Any, predicate: Predicate[Any]) -> bool:
    if isinstance(target, MutableSet):
        doomed = [item for item in target if predicate(item)]
        for item in doomed:
            target.discard(item)
        removed = len(doomed)
    elif isinstance(target, MutableSequence):
        kept = [item for item in target if not predicate(item)]
        removed = len(target) - len(kept)
        if removed:
            # clear + extend works for deques too, which reject slice assignment
            target.clear()
            target.extend(kept)
    else:
        raise InvalidArgumentError(f"cannot remove elements from a {type(target).__name__}")

    logger.debug(f"removed {removed} elements from {type(target).__name__}")
    return removed != 0
