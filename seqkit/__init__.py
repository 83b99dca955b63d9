r"""
'                    _    _ _
'    ___  ___  __ _ | | _(_) |_
'   / __|/ _ \/ _` || |/ / | __|
'   \__ \  __/ (_| ||   <| | |_
'   |___/\___|\__, ||_|\_\_|\__|
'                |_|
"""

# expose the main class
from .sequence import Sequence

# expose the factory functions
from .factories import (
    from_iterable,
    of,
    empty,
    from_range,
    repeat,
    generate,
    count_from,
    seq,
    S
)

# expose the helper modules
from . import iterables, lists

# expose supporting view classes and errors
from .types import ReversedList, ListPartition, ListSlice
from .exceptions import (
    SequenceError,
    InvalidArgumentError,
    NoSuchElementError,
    IndexOutOfRangeError
)

# define what `import *` does
__all__ = [
    "Sequence",
    "from_iterable",
    "of",
    "empty",
    "from_range",
    "repeat",
    "generate",
    "count_from",
    "seq",
    "S",
    "iterables",
    "lists",
    "ReversedList",
    "ListPartition",
    "ListSlice",
    "SequenceError",
    "InvalidArgumentError",
    "NoSuchElementError",
    "IndexOutOfRangeError"
]
