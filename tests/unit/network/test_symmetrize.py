"""Tests for embedding leaders x targets matrices into symmetric ones."""

import networkx as nx
import numpy as np
import pytest
import scipy.sparse as sp

from matnet.errors import InvalidArgumentError
from matnet.network.matrix_utils import symmetrize
from matnet.network.symmetric import SymmetricMatrix

from .graph_fixtures import (
    SHAPES,
    create_incidence_matrix,
    create_sparse_incidence_matrix,
    create_small_test_graph,
)


def test_reference_example():
    M = np.array([[1, 0, 1], [0, 0, 1]])
    S = symmetrize(M)

    assert isinstance(S, SymmetricMatrix)
    np.testing.assert_array_equal(S.toarray(), create_small_test_graph())


@pytest.mark.parametrize("shape", SHAPES)
def test_order_and_exact_symmetry(shape):
    M = create_incidence_matrix(*shape, signed=True)
    S = np.asarray(symmetrize(M))

    n = shape[0] + shape[1]
    assert S.shape == (n, n)
    assert np.array_equal(S, S.T)


@pytest.mark.parametrize("shape", SHAPES)
def test_block_placement(shape):
    R, C = shape
    M = create_incidence_matrix(R, C, signed=True)
    S = np.asarray(symmetrize(M))

    np.testing.assert_array_equal(S[:R, R:], M)
    np.testing.assert_array_equal(S[R:, :R], M.T)
    assert not S[:R, :R].any()
    assert not S[R:, R:].any()


def test_input_not_mutated():
    M = create_incidence_matrix(4, 6)
    M_before = M.copy()
    S = symmetrize(M)

    np.testing.assert_array_equal(M, M_before)
    # result does not alias the input
    S[0, 4] = 7
    np.testing.assert_array_equal(M, M_before)


def test_partition_and_inverse():
    M = create_incidence_matrix(3, 5)
    S = symmetrize(M)

    assert S.partition == (3, 5)
    np.testing.assert_array_equal(S.biadjacency(), M)


def test_dtype_preserved():
    M = np.array([[1, 0], [0, 1]], dtype=np.int32)
    assert symmetrize(M).dtype == np.int32


def test_all_zero_matrix_gives_empty_graph():
    S = symmetrize(np.zeros((3, 4), dtype=int))
    assert S.shape == (7, 7)
    assert not np.asarray(S).any()


@pytest.mark.parametrize("shape", [(0, 3), (3, 0), (0, 0)])
def test_degenerate_dimensions(shape):
    R, C = shape
    M = np.zeros(shape, dtype=int)
    S = symmetrize(M)

    assert S.shape == (R + C, R + C)
    assert S.partition == (R, C)
    assert not np.asarray(S).any()


def test_from_list_of_lists():
    S = symmetrize([[0, 1], [1, 0], [1, 1]])
    assert S.shape == (5, 5)
    np.testing.assert_array_equal(S.biadjacency(), [[0, 1], [1, 0], [1, 1]])


def test_sparse_input():
    M = create_sparse_incidence_matrix(4, 3)
    S = symmetrize(M)
    np.testing.assert_array_equal(S.toarray(), symmetrize(M.toarray()).toarray())


def test_matches_networkx_bipartite_adjacency():
    R, C = 6, 4
    M = create_incidence_matrix(R, C)
    G = nx.bipartite.from_biadjacency_matrix(sp.csr_array(M))
    expected = nx.to_numpy_array(G, nodelist=range(R + C), dtype=int)

    np.testing.assert_array_equal(symmetrize(M).toarray(), expected)


def test_symmetrize_non_2d_fails():
    with pytest.raises(InvalidArgumentError, match="Matrix must be 2D"):
        symmetrize(np.array([1, 0, 1]))


def test_symmetrize_ragged_rows_fails():
    with pytest.raises(InvalidArgumentError, match="rectangular"):
        symmetrize([[1, 0, 1], [0, 1]])
