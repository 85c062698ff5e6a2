"""
Loading matrix networks from delimited text files.

One matrix row per line, fields split on a single separator character, every
field an integer. There is no header and no comment syntax.
"""

import logging
import os
import warnings
from typing import Optional, Union

import numpy as np

from ..errors import FormatError, InvalidArgumentError

DEFAULT_SEPARATOR = " "


def load_matrix(
    filepath: Union[str, os.PathLike],
    separator: str = DEFAULT_SEPARATOR,
    logger: Optional[logging.Logger] = None,
) -> np.ndarray:
    """Read an integer matrix from a delimited text file.

    Parameters
    ----------
    filepath : str or os.PathLike
        Path to an existing text file.
    separator : str, default=' '
        Single character separating the fields of a line.
    logger : logging.Logger, optional
        Logger for debug and error messages.

    Returns
    -------
    numpy.ndarray
        ``int64`` matrix of shape (number of lines, fields per line), values
        in reading order. Blank lines, anywhere in the file, are skipped and
        do not count as rows. An empty file gives a 0 x 0 matrix.

    Raises
    ------
    OSError
        If the file cannot be opened (``FileNotFoundError`` etc.).
    FormatError
        If a field is not an integer or the lines hold different numbers of
        fields. No partial matrix is returned.
    InvalidArgumentError
        If ``separator`` is not a single character.

    Examples
    --------
    A file holding the two lines ``1 0 1`` and ``0 0 1``:

    >>> load_matrix("network.txt")  # doctest: +SKIP
    array([[1, 0, 1],
           [0, 0, 1]])
    """
    logger = logger or logging.getLogger(__name__)

    if not isinstance(separator, str) or len(separator) != 1:
        raise InvalidArgumentError(
            f"separator must be a single character, got {separator!r}"
        )

    with open(filepath, "r") as fh:
        with warnings.catch_warnings():
            # empty input only warns; float-looking fields may only warn too
            warnings.simplefilter("ignore", UserWarning)
            warnings.simplefilter("error", DeprecationWarning)
            try:
                data = np.loadtxt(
                    fh,
                    delimiter=separator,
                    dtype=np.int64,
                    comments=None,
                    ndmin=2,
                )
            except (ValueError, DeprecationWarning) as err:
                logger.error(f"Malformed matrix file {os.fspath(filepath)}: {err}")
                raise FormatError(
                    f"Cannot read integer matrix from {os.fspath(filepath)}: {err}"
                ) from err

    if data.size == 0:
        data = np.zeros((0, 0), dtype=np.int64)

    logger.debug(f"Loaded {data.shape[0]}x{data.shape[1]} matrix from {os.fspath(filepath)}")
    return data
