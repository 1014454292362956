"""Exceptions raised by the proquint codec.

Overflow uses the builtin OverflowError and unsupported input types the
builtin TypeError.
"""


class FormatError(ValueError):
    """Text does not match the proquint word or sequence grammar."""


class RangeError(ValueError):
    """A word index or value lies outside the range the codec accepts."""
