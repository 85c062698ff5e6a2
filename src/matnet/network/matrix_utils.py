"""
Structural queries on adjacency and incidence matrices.

Node indices at this API are 1-based: a matrix with ``n`` rows has row nodes
``1..n``. Internally numpy's 0-based indexing is used and the shift happens
only at the boundary (:data:`NODE_INDEX_BASE`).
"""

import logging
from enum import Enum
from typing import Optional, Union

import numpy as np
import scipy.sparse as sp

from ..errors import InvalidArgumentError, RangeError
from .symmetric import SymmetricMatrix

NODE_INDEX_BASE = 1


class Orientation(str, Enum):
    """Axis along which a node's adjacency vector is read."""

    ROW = "row"
    COLUMN = "column"

    @classmethod
    def parse(cls, value):
        """Coerce a member or its exact literal (``"row"``/``"column"``).

        Raises
        ------
        InvalidArgumentError
            For any other value, including differently cased literals.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(
                f"orientation must be row or column, got {value!r}"
            ) from None

    @property
    def axis(self):
        """numpy axis indexed by the node: 0 for rows, 1 for columns."""
        return 0 if self is Orientation.ROW else 1


DEFAULT_ORIENTATION = Orientation.ROW


def _is_sparse(matrix):
    return sp.issparse(matrix)


def _as_matrix(M):
    """Return a 2D indexable view of ``M`` without copying where possible."""
    if isinstance(M, SymmetricMatrix):
        return M
    try:
        a = np.asarray(M)
    except ValueError as err:
        raise InvalidArgumentError(f"Matrix must be 2D and rectangular: {err}") from err
    if a.ndim != 2:
        raise InvalidArgumentError(f"Matrix must be 2D, got shape {a.shape}")
    return a


def _node_to_position(node, size, orientation):
    """Validate a 1-based node index and return its 0-based position.

    Raises
    ------
    TypeError
        If ``node`` is not an integer.
    RangeError
        If ``node`` is outside ``[1, size]``.
    """
    if not isinstance(node, (int, np.integer)) or isinstance(node, (bool, np.bool_)):
        raise TypeError(f"Node index must be an integer, got {type(node).__name__}")
    last = size - 1 + NODE_INDEX_BASE
    if not NODE_INDEX_BASE <= node <= last:
        raise RangeError(
            f"Node {node} is out of bounds for {orientation.value} axis of size {size} "
            f"(valid range is [{NODE_INDEX_BASE}, {last}])"
        )
    return int(node) - NODE_INDEX_BASE


def symmetrize(M, logger: Optional[logging.Logger] = None) -> SymmetricMatrix:
    """Embed a rectangular leaders x targets matrix into a symmetric one.

    The result is the block matrix ``[[0, M], [M.T, 0]]`` of order
    ``n_L + n_T``: leaders occupy vertices ``1..n_L`` and targets
    ``n_L+1..n_L+n_T``. Both diagonal blocks are zero.

    Parameters
    ----------
    M : array-like or scipy sparse matrix
        Rectangular ``n_L x n_T`` integer matrix. Either dimension may be 0.
        It is never modified. Sparse input is densified.
    logger : logging.Logger, optional
        Logger for debug messages.

    Returns
    -------
    SymmetricMatrix
        Square matrix of order ``n_L + n_T`` with ``partition == (n_L, n_T)``
        and the dtype of ``M``.

    Raises
    ------
    InvalidArgumentError
        If ``M`` is not two-dimensional.

    Examples
    --------
    >>> symmetrize([[1, 0, 1], [0, 0, 1]]).toarray()
    array([[0, 0, 1, 0, 1],
           [0, 0, 0, 0, 1],
           [1, 0, 0, 0, 0],
           [0, 0, 0, 0, 0],
           [1, 1, 0, 0, 0]])
    """
    logger = logger or logging.getLogger(__name__)

    if _is_sparse(M):
        M = M.toarray()
    m = _as_matrix(M)
    if isinstance(m, SymmetricMatrix):
        m = m.toarray()

    n_rows, n_cols = m.shape
    row_zeros = np.zeros((n_rows, n_rows), dtype=m.dtype)
    col_zeros = np.zeros((n_cols, n_cols), dtype=m.dtype)
    # np.block copies, M stays untouched
    full = np.block([[row_zeros, m], [m.T, col_zeros]])

    logger.debug(
        f"Symmetrized {n_rows}x{n_cols} matrix into order {n_rows + n_cols}"
    )
    return SymmetricMatrix(full, partition=(n_rows, n_cols))


def neighbours(
    M,
    node: int,
    orientation: Union[Orientation, str] = DEFAULT_ORIENTATION,
    logger: Optional[logging.Logger] = None,
) -> np.ndarray:
    """Get neighbours of a node in an adjacency matrix.

    Reads row ``node`` (or column ``node``) and reports where it is
    non-zero. Only presence matters: the sign and magnitude of an entry are
    ignored.

    Parameters
    ----------
    M : array-like, SymmetricMatrix or scipy sparse matrix
        Adjacency matrix, square or rectangular.
    node : int
        1-based index of the node along the selected axis.
    orientation : Orientation or {'row', 'column'}, default='row'
        Whether ``node`` indexes a row or a column.
    logger : logging.Logger, optional
        Logger for debug messages.

    Returns
    -------
    numpy.ndarray
        Ascending 1-based indices in the opposite axis's index space. Empty
        if the node has no neighbours.

    Raises
    ------
    InvalidArgumentError
        If ``orientation`` is not row or column, or ``M`` is not 2D.
    RangeError
        If ``node`` is outside ``[1, size]`` along the selected axis.
    TypeError
        If ``node`` is not an integer.

    Examples
    --------
    >>> B = [[0, 1, 0, 0], [1, 0, 1, 0]]
    >>> neighbours(B, 2, "row")
    array([1, 3])
    >>> neighbours(B, 2, "column")
    array([2])
    """
    logger = logger or logging.getLogger(__name__)
    orientation = Orientation.parse(orientation)

    if _is_sparse(M):
        size = M.shape[orientation.axis]
        pos = _node_to_position(node, size, orientation)
        if orientation is Orientation.ROW:
            inds = sp.csr_array(M)[[pos], :].nonzero()[1]
        else:
            inds = sp.csc_array(M)[:, [pos]].nonzero()[0]
    else:
        a = _as_matrix(M)
        size = a.shape[orientation.axis]
        pos = _node_to_position(node, size, orientation)
        vec = a[pos, :] if orientation is Orientation.ROW else a[:, pos]
        inds = np.flatnonzero(vec)

    result = np.sort(inds).astype(np.intp) + NODE_INDEX_BASE
    logger.debug(f"Node {node} ({orientation.value}) has {len(result)} neighbours")
    return result


def degree(
    M,
    node: int,
    orientation: Union[Orientation, str] = DEFAULT_ORIENTATION,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Get degree of a node in an adjacency matrix.

    Number of entries returned by :func:`neighbours` for the same arguments;
    raises whatever :func:`neighbours` raises.

    Examples
    --------
    >>> A = [[0, 0, 1, 0, 1], [0, 0, 0, 0, 1], [1, 0, 0, 0, 0],
    ...      [0, 0, 0, 0, 0], [1, 1, 0, 0, 0]]
    >>> degree(A, 1)
    2
    """
    return len(neighbours(M, node, orientation, logger=logger))


def degree_sequence(
    M,
    orientation: Union[Orientation, str] = DEFAULT_ORIENTATION,
    logger: Optional[logging.Logger] = None,
) -> np.ndarray:
    """Degrees of all nodes along an orientation.

    Parameters
    ----------
    M : array-like, SymmetricMatrix or scipy sparse matrix
        Adjacency matrix, square or rectangular.
    orientation : Orientation or {'row', 'column'}, default='row'
        ``'row'`` counts non-zero entries per row (out-degrees of a directed
        graph), ``'column'`` per column (in-degrees).
    logger : logging.Logger, optional
        Logger for debug messages.

    Returns
    -------
    numpy.ndarray
        Integer array whose ``k``-th entry is ``degree(M, k + 1, orientation)``.

    Raises
    ------
    InvalidArgumentError
        If ``orientation`` is not row or column, or ``M`` is not 2D.
    """
    logger = logger or logging.getLogger(__name__)
    orientation = Orientation.parse(orientation)
    count_axis = 1 - orientation.axis

    if _is_sparse(M):
        mask = sp.csr_array(M) != 0
        degrees = np.asarray(mask.sum(axis=count_axis)).ravel()
    else:
        degrees = np.count_nonzero(np.asarray(_as_matrix(M)), axis=count_axis)

    degrees = np.asarray(degrees, dtype=np.intp)
    logger.debug(f"Computed {orientation.value} degrees of {len(degrees)} nodes")
    return degrees
