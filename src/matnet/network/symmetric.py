"""
Symmetric adjacency matrix container.

A :class:`SymmetricMatrix` wraps a dense square integer array and keeps
``S[i, j] == S[j, i]`` for every pair of nodes. Reads hand out values or
read-only views; the only write path mirrors itself across the diagonal.
"""

from typing import Optional, Tuple

import numpy as np


class SymmetricMatrix:
    """Dense symmetric matrix with an invariant-preserving accessor.

    Parameters
    ----------
    data : array-like
        Square matrix. It is copied, so later changes to ``data`` do not
        leak into the container.
    partition : tuple of int, optional
        ``(n_leaders, n_targets)`` when the matrix is the block embedding of
        a rectangular leaders x targets matrix (see
        :func:`~matnet.network.matrix_utils.symmetrize`).

    Raises
    ------
    ValueError
        If ``data`` is not a square 2D matrix, is not exactly symmetric, or
        ``partition`` does not add up to the matrix order.

    Examples
    --------
    >>> S = SymmetricMatrix([[0, 1], [1, 0]])
    >>> S[1, 0] = 0
    >>> S.toarray()
    array([[0, 0],
           [0, 0]])
    """

    def __init__(self, data, partition: Optional[Tuple[int, int]] = None):
        a = np.array(data, copy=True)
        if a.ndim != 2 or a.shape[0] != a.shape[1]:
            raise ValueError(f"Symmetric matrix must be square, got shape {a.shape}")
        if not np.array_equal(a, a.T):
            raise ValueError("Input matrix is non-symmetric")

        if partition is not None:
            n_leaders, n_targets = (int(p) for p in partition)
            if n_leaders < 0 or n_targets < 0 or n_leaders + n_targets != a.shape[0]:
                raise ValueError(
                    f"Partition {partition} does not match matrix order {a.shape[0]}"
                )
            partition = (n_leaders, n_targets)

        self._data = a
        self.partition = partition

    @property
    def shape(self):
        return self._data.shape

    @property
    def dtype(self):
        return self._data.dtype

    @property
    def ndim(self):
        return 2

    @property
    def order(self):
        """Number of vertices (rows == columns)."""
        return self._data.shape[0]

    @property
    def T(self):
        return self

    def __len__(self):
        return self.order

    def __getitem__(self, key):
        res = self._data[key]
        if isinstance(res, np.ndarray):
            # basic slicing returns a view into our storage
            res = res.view()
            res.flags.writeable = False
        return res

    def __setitem__(self, key, value):
        if not (
            isinstance(key, tuple)
            and len(key) == 2
            and all(_is_int_index(k) for k in key)
        ):
            raise TypeError(
                "SymmetricMatrix supports assignment to a single (i, j) position only"
            )
        i, j = key
        self._data[i, j] = value
        self._data[j, i] = value

    def __array__(self, dtype=None, copy=None):
        if copy is False:
            raise ValueError(
                "SymmetricMatrix cannot be exposed without a copy; use S[i, j] = v to write"
            )
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def toarray(self):
        """Return an independent dense copy of the matrix."""
        return self._data.copy()

    def biadjacency(self):
        """Return the leaders x targets block this matrix was built from.

        Returns
        -------
        numpy.ndarray
            Copy of ``S[:n_leaders, n_leaders:]``.

        Raises
        ------
        ValueError
            If the matrix carries no leaders/targets partition.
        """
        if self.partition is None:
            raise ValueError("Matrix has no leaders/targets partition")
        n_leaders = self.partition[0]
        return self._data[:n_leaders, n_leaders:].copy()

    def __eq__(self, other):
        if not isinstance(other, SymmetricMatrix):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self):
        body = np.array2string(self._data, prefix="SymmetricMatrix(")
        if self.partition is None:
            return f"SymmetricMatrix({body})"
        return f"SymmetricMatrix({body}, partition={self.partition})"


def _is_int_index(k):
    return isinstance(k, (int, np.integer)) and not isinstance(k, (bool, np.bool_))
