"""
Network Module for MatNet

This module provides structural queries on matrix representations of networks.
"""

from .io import load_matrix, DEFAULT_SEPARATOR
from .matrix_utils import (
    Orientation,
    DEFAULT_ORIENTATION,
    NODE_INDEX_BASE,
    symmetrize,
    neighbours,
    degree,
    degree_sequence,
)
from .symmetric import SymmetricMatrix

__all__ = [
    "load_matrix",
    "symmetrize",
    "neighbours",
    "degree",
    "degree_sequence",
    "Orientation",
    "SymmetricMatrix",
    "DEFAULT_SEPARATOR",
    "DEFAULT_ORIENTATION",
    "NODE_INDEX_BASE",
]
