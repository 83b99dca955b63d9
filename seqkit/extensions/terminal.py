from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class TerminalAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to a new list"""
        return self._sequence._snapshot()

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._sequence)

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._sequence)

    def array(self, dtype: Optional[Any] = None) -> np.ndarray:
        """convert to a fixed-size numpy array"""
        return np.array(self._sequence._snapshot(), dtype=dtype)

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._sequence._snapshot())

    def string(self) -> str:
        """render as [e1, e2, ..., en]; an empty sequence renders as []"""
        return "[" + ", ".join(str(item) for item in self._sequence) + "]"

    def into(self, target: Any) -> bool:
        """append every element to the mutable collection `target`. true if target grew."""
        from ..mutation import add_all
        return add_all(target, self._sequence)
