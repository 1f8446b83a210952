"""
================================================================================
simplicial_chains: Chain Algebra for Computational Algebraic Topology
================================================================================

A Python package providing the algebraic building blocks of simplicial
homology: ordered simplices, chains with coefficients in Z or Z/pZ, and the
boundary operator between them.

This package provides tools for:

1. COEFFICIENT RINGS
   - ModularRing: elements of Z (modulus 0) or Z/pZ (modulus p > 0)

2. FORMAL SUMS
   - FreeModule: canonical formal sums over any ordered generator type

3. SIMPLICES
   - OrderedSimplex: fixed-length ordered vertex labels with the
     alternating face formula

4. CHAINS
   - ChainGroup: chains of one level, boundary operator, cycle tests
   - are_homologous, create_simplex_chain, get_all_boundary_components

5. CONSUMERS
   - Chains from networkx graphs (clique complexes)
   - Boundary matrices as numpy arrays
   - pandas / LaTeX tables

Level convention: a level-d simplex has d vertex labels (geometric dimension
d - 1). The boundary of level-0 and level-1 chains is empty.

Quick Start
-----------
>>> from simplicial_chains import ChainGroup, OrderedSimplex
>>> c = ChainGroup(3, [OrderedSimplex([1, 2, 3])])
>>> print(c.boundary())
[(1,(1,2)),(-1,(1,3)),(1,(2,3))]
>>> c.boundary().is_cycle()
True

Or use individual modules:
>>> from simplicial_chains.complexes import chain_from_graph
>>> from simplicial_chains.matrices import boundary_matrix

Requirements
------------
- numpy >= 1.20
- networkx >= 2.6
- pandas >= 1.3

References
----------
[1] Munkres, J. R. (1984). Elements of Algebraic Topology.
[2] Hatcher, A. (2002). Algebraic Topology.
[3] Edelsbrunner, H., & Harer, J. (2010). Computational Topology.

License: MIT
"""

import logging

__version__ = "1.0.0"
__author__ = "Simplicial Chains Contributors"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Import main modules
from . import ring
from . import free_module
from . import simplex
from . import chains
from . import complexes
from . import matrices
from . import tables

# Import commonly used names for convenience
from .exceptions import (
    ChainAlgebraError,
    OutOfRangeError,
    InvalidArgumentError
)

from .ring import (
    DEFAULT_MODULUS,
    ModularRing,
    normalize
)

from .free_module import (
    FreeModule,
    canonicalize
)

from .simplex import OrderedSimplex

from .chains import (
    BoundaryStatus,
    ChainGroup,
    are_homologous,
    create_simplex_chain,
    get_all_boundary_components,
    boundary_of_boundary_vanishes,
    chain_z,
    chain_z2,
    chain_z3
)

from .complexes import (
    simplices_from_graph,
    chain_from_graph,
    extract_faces,
    get_vertices_from_simplices,
    skeleton_graph
)

from .matrices import (
    boundary_matrix,
    composed_boundary_vanishes,
    chain_to_vector,
    vector_to_chain
)

from .tables import (
    chain_to_frame,
    boundary_frame,
    generate_chain_table
)

# Define what gets imported with "from simplicial_chains import *"
__all__ = [
    # Modules
    'ring',
    'free_module',
    'simplex',
    'chains',
    'complexes',
    'matrices',
    'tables',

    # Errors
    'ChainAlgebraError',
    'OutOfRangeError',
    'InvalidArgumentError',

    # Core types
    'DEFAULT_MODULUS',
    'ModularRing',
    'normalize',
    'FreeModule',
    'canonicalize',
    'OrderedSimplex',
    'BoundaryStatus',
    'ChainGroup',

    # Chain functions
    'are_homologous',
    'create_simplex_chain',
    'get_all_boundary_components',
    'boundary_of_boundary_vanishes',
    'chain_z',
    'chain_z2',
    'chain_z3',

    # Graph functions
    'simplices_from_graph',
    'chain_from_graph',
    'extract_faces',
    'get_vertices_from_simplices',
    'skeleton_graph',

    # Matrix functions
    'boundary_matrix',
    'composed_boundary_vanishes',
    'chain_to_vector',
    'vector_to_chain',

    # Table functions
    'chain_to_frame',
    'boundary_frame',
    'generate_chain_table',
]
