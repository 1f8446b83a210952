"""
================================================================================
tables.py - Tabular and LaTeX Rendering of Chains
================================================================================

This module lays chains out as pandas DataFrames and as LaTeX tables for
inclusion in documents. Tables use the booktabs package.

Only the canonical form of a chain is ever rendered: rows come out sorted by
simplex, with merged and nonzero coefficients.

Author: Simplicial Chains Contributors
Date: 2026
"""

import logging

import pandas as pd

from .chains import ChainGroup


logger = logging.getLogger(__name__)


def chain_to_frame(chain):
    """
    One row per canonical term of a chain.

    Parameters
    ----------
    chain : FreeModule or ChainGroup

    Returns
    -------
    frame : pandas.DataFrame
        Columns:
        - 'simplex': rendered generator, e.g. '(1,2)'
        - 'coefficient': integer representative of the coefficient

    Example
    -------
    >>> c = ChainGroup(2, [OrderedSimplex([1, 2])], [3], modulus=5)
    >>> chain_to_frame(c).to_dict('records')
    [{'simplex': '(1,2)', 'coefficient': 3}]
    """
    records = [
        {'simplex': str(simplex), 'coefficient': int(coefficient)}
        for simplex, coefficient in chain
    ]
    return pd.DataFrame(records, columns=['simplex', 'coefficient'])


def boundary_frame(chain):
    """
    One row per generator of a chain with the boundary of that generator.

    Returns
    -------
    frame : pandas.DataFrame
        Columns:
        - 'simplex': rendered generator
        - 'coefficient': its coefficient in ``chain``
        - 'boundary': rendering of the unscaled boundary of the generator
        - 'n_faces': number of nonzero terms of that boundary
    """
    records = []

    for simplex, coefficient in chain:
        component = ChainGroup.from_simplex(simplex, chain.modulus).boundary()
        records.append({
            'simplex': str(simplex),
            'coefficient': int(coefficient),
            'boundary': str(component),
            'n_faces': component.get_nonzero_count()
        })

    return pd.DataFrame(
        records, columns=['simplex', 'coefficient', 'boundary', 'n_faces']
    )


def _ring_label(modulus):
    if modulus == 0:
        return "\\mathbb{Z}"
    return f"\\mathbb{{Z}}/{modulus}\\mathbb{{Z}}"


def generate_chain_table(chain, caption=None, save_path=None):
    """
    Generate a LaTeX table listing a chain and its boundary.

    Parameters
    ----------
    chain : ChainGroup
        Chain to tabulate.
    caption : str, optional
        Table caption. A description of level and ring is used if omitted.
    save_path : str, optional
        If provided, save LaTeX to this file.

    Returns
    -------
    latex : str
        LaTeX table code.

    Table Contents
    --------------
    - One row per simplex with its coefficient
    - The boundary of each simplex (unscaled)
    - A closing row with the boundary of the whole chain and its cycle status
    """
    ring = _ring_label(chain.modulus)
    if caption is None:
        caption = f"Level-{chain.level} chain over ${ring}$."

    frame = boundary_frame(chain)
    rows = "\n".join(
        f"${row.simplex}$ & {row.coefficient} & ${row.boundary}$ \\\\"
        for row in frame.itertuples(index=False)
    )
    if not rows:
        rows = "\\multicolumn{3}{c}{(empty chain)} \\\\"

    cycle = "yes" if chain.is_cycle() else "no"

    latex = f"""
\\begin{{table}}[htbp]
\\centering
\\caption{{{caption}}}
\\begin{{tabular}}{{lcl}}
\\toprule
\\textbf{{Simplex}} & \\textbf{{Coefficient}} & \\textbf{{Boundary}} \\\\
\\midrule
{rows}
\\midrule
$\\partial c$ & -- & ${chain.boundary()}$ \\\\
Cycle & \\multicolumn{{2}}{{l}}{{{cycle}}} \\\\
\\bottomrule
\\end{{tabular}}
\\end{{table}}
"""

    if save_path:
        with open(save_path, 'w') as f:
            f.write(latex)
        logger.info("Saved: %s", save_path)

    return latex
