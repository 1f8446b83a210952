"""
Tests for DataFrame and LaTeX rendering of chains
"""

from simplicial_chains import (
    ChainGroup,
    FreeModule,
    OrderedSimplex,
    boundary_frame,
    chain_to_frame,
    generate_chain_table,
)


def S(*labels):
    return OrderedSimplex(labels)


class TestFrames:
    """Tests for chain_to_frame() and boundary_frame()"""

    def test_chain_to_frame(self):
        chain = ChainGroup(2, [S(2, 3), S(1, 2)], [-1, 3], modulus=5)
        frame = chain_to_frame(chain)
        assert list(frame.columns) == ['simplex', 'coefficient']
        assert frame.to_dict('records') == [
            {'simplex': '(1,2)', 'coefficient': 3},
            {'simplex': '(2,3)', 'coefficient': 4},
        ]

    def test_chain_to_frame_empty(self):
        frame = chain_to_frame(ChainGroup(2))
        assert frame.empty
        assert list(frame.columns) == ['simplex', 'coefficient']

    def test_free_module_frame(self):
        frame = chain_to_frame(FreeModule(['b', 'a'], [1, 2]))
        assert frame['simplex'].tolist() == ['a', 'b']

    def test_boundary_frame(self):
        chain = ChainGroup(3, [S(1, 2, 3)], [2])
        frame = boundary_frame(chain)
        row = frame.iloc[0]
        assert row['simplex'] == '(1,2,3)'
        assert row['coefficient'] == 2
        assert row['boundary'] == '[(1,(1,2)),(-1,(1,3)),(1,(2,3))]'
        assert row['n_faces'] == 3


class TestLatex:
    """Tests for generate_chain_table()"""

    def test_contains_rows_and_status(self):
        chain = ChainGroup(2, [S(1, 2), S(2, 3), S(1, 3)], [1, 1, -1])
        latex = generate_chain_table(chain)
        assert '\\begin{table}' in latex
        assert '\\toprule' in latex
        assert '$(1,2)$ & 1 &' in latex
        assert 'Level-2 chain over $\\mathbb{Z}$.' in latex
        assert 'Cycle & \\multicolumn{2}{l}{yes}' in latex

    def test_ring_caption_mod_p(self):
        latex = generate_chain_table(ChainGroup(2, modulus=3))
        assert '\\mathbb{Z}/3\\mathbb{Z}' in latex
        assert '(empty chain)' in latex

    def test_custom_caption(self):
        latex = generate_chain_table(ChainGroup(1), caption='My chain')
        assert '\\caption{My chain}' in latex

    def test_save(self, tmp_path):
        path = tmp_path / 'chain.tex'
        latex = generate_chain_table(ChainGroup(2, [S(1, 2)]), save_path=str(path))
        assert path.read_text() == latex
