from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.element import ElementAccessor
from .extensions.query import QueryAccessor
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def _open(self) -> Iterator[T]:
        """obtain a fresh cursor over the elements"""
        pass

# --- base sequence implementation ---

class _BaseSequence(ISequence[T]):
    def __init__(self, source_func: SourceFunc[T]):
        """init with a function that returns the elements as an iterable when called"""
        self._source_func = source_func

    def _source(self) -> Iterable[T]:
        """the raw iterable behind one traversal. lets accessors use len() and indexing when the source has them."""
        return self._source_func()

    def _open(self) -> Iterator[T]:
        return iter(self._source_func())

    def _snapshot(self) -> List[T]:
        """materialize one full traversal into a new list"""
        data = list(self._source_func())
        logger.debug(f"materialized {len(data)} elements")
        return data

    def __iter__(self) -> Iterator[T]:
        return self._open()

    # no __len__: list() asks for a length hint, which would traverse
    # (and exhaust) one-shot or infinite sources before iterating them

    def __str__(self) -> str:
        return self.to.string()

# --- main sequence class ---

class Sequence(
    _BaseSequence[T],
    _CoreOperations[T]
):
    """a lazy, forward-only sequence. every traversal asks the source for a fresh cursor."""
    def __init__(self, source_func: SourceFunc[T]):
        super().__init__(source_func)
        # --- initialize accessors ---
        self.get = ElementAccessor(self)
        self.query = QueryAccessor(self)
        self.to = TerminalAccessor(self)
