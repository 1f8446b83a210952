#!/usr/bin/env python3
"""
================================================================================
main.py - Command-Line Driver
================================================================================

Small driver around the chain algebra: build a chain from simplices given on
the command line, then report its boundary, the ∂∂ = 0 check, and whether it
is a cycle.

Simplices are written as comma-separated labels, optionally followed by a
coefficient after a colon. Labels that all parse as integers are used as
integers, otherwise every label is kept as a string.

Usage:
    python -m simplicial_chains.main -s 1,2,3                 # one triangle over Z
    python -m simplicial_chains.main -s 1,2 -s 2,3 -s 3,1     # a loop of edges
    python -m simplicial_chains.main -s 1,2,3:2 -p 3          # coefficient 2 over Z/3Z
    python -m simplicial_chains.main -s a,b -s b,c --latex chain.tex

Author: Simplicial Chains Contributors
Date: 2026
"""

import argparse
import logging
import sys

from .chains import BoundaryStatus, ChainGroup, boundary_of_boundary_vanishes
from .exceptions import InvalidArgumentError
from .ring import DEFAULT_MODULUS
from .simplex import OrderedSimplex
from .tables import generate_chain_table


logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='simplicial-chains',
        description='Boundary and cycle analysis of simplicial chains',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    simplicial-chains -s 1,2,3
    simplicial-chains -s 1,2 -s 2,3 -s 3,1
    simplicial-chains -s 1,2,3:2 --modulus 3
        """
    )

    parser.add_argument(
        '--simplex', '-s',
        action='append',
        required=True,
        metavar='LABELS[:COEF]',
        help='Simplex as comma-separated labels with optional coefficient '
             '(repeatable)'
    )

    parser.add_argument(
        '--modulus', '-p',
        type=int,
        default=DEFAULT_MODULUS,
        help='Coefficient ring modulus, 0 for the integers (default: 0)'
    )

    parser.add_argument(
        '--latex',
        type=str,
        default=None,
        help='Also write a LaTeX table of the chain to this path'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args(argv)


def parse_simplex_argument(text):
    """
    Split ``'1,2,3:2'`` into ``(['1', '2', '3'], 2)``.

    The coefficient defaults to 1. Labels stay strings here.
    """
    labels_part, _, coefficient_part = text.partition(':')
    labels = [label.strip() for label in labels_part.split(',') if label.strip()]

    coefficient = 1
    if coefficient_part.strip():
        try:
            coefficient = int(coefficient_part)
        except ValueError:
            raise InvalidArgumentError(
                f"coefficient {coefficient_part!r} in {text!r} is not an integer"
            ) from None

    return labels, coefficient


def _is_integer(text):
    try:
        int(text)
    except ValueError:
        return False
    return True


def build_chain(simplex_arguments, modulus=DEFAULT_MODULUS):
    """
    Build a ChainGroup from ``LABELS[:COEF]`` strings.

    The chain level is the label count of the first simplex; the others
    must match it.
    """
    parsed = [parse_simplex_argument(text) for text in simplex_arguments]

    all_labels = [label for labels, _ in parsed for label in labels]
    if all(_is_integer(label) for label in all_labels):
        parsed = [([int(label) for label in labels], c) for labels, c in parsed]

    simplices = [OrderedSimplex(labels) for labels, _ in parsed]
    coefficients = [c for _, c in parsed]

    return ChainGroup(len(simplices[0]), simplices, coefficients, modulus=modulus)


def run_analysis(chain, latex_path=None, verbose=True):
    """
    Compute and report the boundary data of one chain.

    Parameters
    ----------
    chain : ChainGroup
        Chain to analyze.
    latex_path : str, optional
        If provided, also write a LaTeX table to this path.
    verbose : bool
        If True, print the report.

    Returns
    -------
    results : dict
        - 'chain': rendering of the chain
        - 'boundary': rendering of its boundary
        - 'boundary_squared_zero': result of the ∂∂ = 0 check
        - 'is_cycle': cycle status
        - 'is_boundary': BoundaryStatus of the chain
    """
    ring = "Z" if chain.modulus == 0 else f"Z/{chain.modulus}Z"
    boundary = chain.boundary()

    results = {
        'chain': str(chain),
        'boundary': str(boundary),
        'boundary_squared_zero': boundary_of_boundary_vanishes(chain),
        'is_cycle': chain.is_cycle(),
        'is_boundary': chain.is_boundary(),
    }

    if verbose:
        print("=" * 70)
        print("Simplicial Chains: Boundary Analysis")
        print("=" * 70)
        print(f"Ring:        {ring}")
        print(f"Level:       {chain.level}")
        print(f"Simplices:   {chain.get_number_of_simplices()}")
        print(f"Chain:       {results['chain']}")
        print(f"Boundary:    {results['boundary']}")
        print(f"∂∂ = 0:      {'yes' if results['boundary_squared_zero'] else 'no'}")
        print(f"Cycle:       {'yes' if results['is_cycle'] else 'no'}")
        status = results['is_boundary']
        if status is BoundaryStatus.NOT_COMPUTED:
            print("Boundary?:   not computed")
        else:
            print(f"Boundary?:   {status.value}")

    if latex_path:
        generate_chain_table(chain, save_path=latex_path)

    return results


def main(argv=None):
    """Entry point; returns the process exit code."""
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    try:
        chain = build_chain(args.simplex, modulus=args.modulus)
    except InvalidArgumentError as exc:
        logger.error("cannot build chain: %s", exc)
        print(f"ERROR: {exc}")
        return 1

    run_analysis(chain, latex_path=args.latex)
    return 0


# =============================================================================
# ENTRY POINT
# =============================================================================

if __name__ == "__main__":
    sys.exit(main())
