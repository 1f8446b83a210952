"""
================================================================================
complexes.py - Building Simplices and Chains from Graphs
================================================================================

This module turns networkx graphs into lists of ordered simplices and into
chains, and goes back from a chain to the graph of its 1-skeleton.

    level 1 : vertices            (v,)
    level 2 : edges               (u, v)           u < v
    level k : k-cliques           (v_1, ..., v_k)  v_1 < ... < v_k

Every simplex produced here lists its labels in ascending order, so the
orientation is the one induced by the vertex ordering (the usual choice in
clique / flag complexes). Node labels therefore have to be mutually
comparable.

Author: Simplicial Chains Contributors
Date: 2026
"""

import logging
from itertools import combinations

import networkx as nx

from .chains import create_simplex_chain
from .exceptions import InvalidArgumentError
from .ring import DEFAULT_MODULUS
from .simplex import OrderedSimplex


logger = logging.getLogger(__name__)


# =============================================================================
# GRAPH -> SIMPLICES
# =============================================================================

def simplices_from_graph(G, length):
    """
    Ordered simplices of the clique complex of a graph.

    Parameters
    ----------
    G : networkx.Graph
        Undirected graph with comparable node labels.
    length : int
        Number of labels per simplex (the chain level), >= 1.

    Returns
    -------
    list of OrderedSimplex
        Sorted list, one simplex per clique of ``length`` nodes, labels in
        ascending order.

    Example
    -------
    >>> G = nx.Graph([(1, 2), (2, 3), (1, 3), (3, 4)])
    >>> [str(s) for s in simplices_from_graph(G, 3)]
    ['(1,2,3)']
    """
    if length < 1:
        raise InvalidArgumentError(f"simplex length must be >= 1, got {length}")

    if length == 1:
        return [OrderedSimplex([node]) for node in sorted(G.nodes())]

    cliques = set()
    # enumerate_all_cliques yields cliques in order of increasing size
    for clique in nx.enumerate_all_cliques(G):
        if len(clique) > length:
            break
        if len(clique) == length:
            cliques.add(tuple(sorted(clique)))

    logger.debug("found %d cliques of size %d", len(cliques), length)
    return [OrderedSimplex(clique) for clique in sorted(cliques)]


def chain_from_graph(G, level, modulus=DEFAULT_MODULUS):
    """
    Sum of all level-``level`` simplices of the clique complex of ``G``.

    Every simplex gets coefficient 1.
    """
    return create_simplex_chain(
        simplices_from_graph(G, level), modulus=modulus, level=level
    )


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def extract_faces(simplices):
    """
    Sorted unique faces of a list of simplices.

    Parameters
    ----------
    simplices : iterable of OrderedSimplex
        Simplices of length >= 2.

    Returns
    -------
    list of OrderedSimplex
        One simplex per distinct face, sorted lexicographically.

    Example
    -------
    >>> tris = [OrderedSimplex([1, 2, 3]), OrderedSimplex([2, 3, 4])]
    >>> [str(f) for f in extract_faces(tris)]
    ['(1,2)', '(1,3)', '(2,3)', '(2,4)', '(3,4)']
    """
    face_set = set()

    for simplex in simplices:
        for face in simplex.faces():
            face_set.add(tuple(face))

    return [OrderedSimplex(face) for face in sorted(face_set)]


def get_vertices_from_simplices(simplices):
    """Sorted list of unique labels used by the given simplices."""
    vertex_set = set()

    for simplex in simplices:
        vertex_set.update(simplex)

    return sorted(vertex_set)


def skeleton_graph(chain):
    """
    Graph of the 1-skeleton of a chain's support.

    Nodes are the labels of the chain's simplices. Two labels are joined
    when they occur together in some simplex with nonzero coefficient.
    Each edge carries a ``multiplicity`` attribute counting those simplices.

    Parameters
    ----------
    chain : ChainGroup

    Returns
    -------
    networkx.Graph
    """
    G = nx.Graph()
    G.add_nodes_from(chain.vertices())

    for simplex in chain.get_generators():
        pairs = {frozenset(pair) for pair in combinations(simplex, 2) if pair[0] != pair[1]}
        for u, v in pairs:
            if G.has_edge(u, v):
                G[u][v]['multiplicity'] += 1
            else:
                G.add_edge(u, v, multiplicity=1)

    return G
