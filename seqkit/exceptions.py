"""
error types raised by seqkit.

each one also derives from the closest built-in so callers can keep
catching ValueError, LookupError or IndexError.
"""


class SequenceError(Exception):
    """base class for every seqkit failure."""
    pass


class InvalidArgumentError(SequenceError, ValueError):
    """an argument or the shape of an input sequence broke a precondition."""
    pass


class NoSuchElementError(SequenceError, LookupError):
    """the requested element does not exist."""
    pass


class IndexOutOfRangeError(NoSuchElementError, IndexError):
    """an index fell outside [0, size)."""
    pass
