"""
MatNet - utilities for matrix representations of networks

Conversion of leaders x targets incidence matrices into symmetric adjacency
matrices, neighbour and degree queries along rows or columns, and loading of
integer matrices from delimited text files.
"""

__version__ = "0.1.0"

from . import errors
from . import network

from .errors import (
    MatrixNetworkError,
    FormatError,
    InvalidArgumentError,
    RangeError,
)
from .network import (
    load_matrix,
    symmetrize,
    neighbours,
    degree,
    degree_sequence,
    Orientation,
    SymmetricMatrix,
)

__all__ = [
    # Version
    "__version__",
    # Modules
    "errors",
    "network",
    # Operations
    "load_matrix",
    "symmetrize",
    "neighbours",
    "degree",
    "degree_sequence",
    # Types
    "Orientation",
    "SymmetricMatrix",
    # Errors
    "MatrixNetworkError",
    "FormatError",
    "InvalidArgumentError",
    "RangeError",
]
