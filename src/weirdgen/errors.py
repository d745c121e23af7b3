"""
Error handling for weirdgen.

This module defines the exception classes raised by the generators. There
are two kinds of failure: a configuration error, raised eagerly when a
weight table that cannot generate anything is built or installed, and a
bit source fault, which is always propagated to the caller unchanged.
"""


class WeirdgenError(Exception):
    """Base class for all weirdgen errors."""
    pass


class WeightTableError(WeirdgenError, ValueError):
    """
    Exception raised for an invalid weight table.

    Raised when a table has no strictly positive weight, holds a negative or
    non-numeric weight, names a category from another family, or enables a
    category the target type cannot represent.
    """
    pass


class UnsupportedType(WeirdgenError, ValueError):
    """Exception raised for an unknown type name or an unsupported width."""
    pass


class BitSourceError(WeirdgenError):
    """
    Exception raised when a bit source cannot supply the requested bits.

    Generators never catch this exception: returning a substitute value
    would silently hide the fault.
    """
    pass


class BitSourceExhausted(BitSourceError):
    """Exception raised by a scripted bit source that ran out of draws."""
    pass
