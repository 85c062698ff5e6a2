"""
Exception types raised by MatNet.

Every error is a caller-input problem and is raised immediately; nothing is
retried. File access failures are not wrapped: the built-in ``OSError``
family (``FileNotFoundError``, ``PermissionError``, ...) propagates as is.
"""


class MatrixNetworkError(Exception):
    """Base class for all MatNet errors."""


class FormatError(MatrixNetworkError, ValueError):
    """A loaded file holds a non-integer field or rows of unequal width."""


class InvalidArgumentError(MatrixNetworkError, ValueError):
    """An argument has a value outside its accepted set (e.g. orientation)."""


class RangeError(MatrixNetworkError, IndexError):
    """A node index lies outside the valid range for the chosen axis."""


__all__ = [
    "MatrixNetworkError",
    "FormatError",
    "InvalidArgumentError",
    "RangeError",
]
