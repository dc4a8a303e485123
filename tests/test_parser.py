import pytest

from rnastruct.end_id import assign_end_id
from rnastruct.motif_type import MotifType
from rnastruct.parser import (
    NodeData,
    NodeType,
    Parser,
    SecondaryStructureChainGraph,
)
from rnastruct.residue import Residue, SecondaryStructureError

HAIRPIN_SEQ = "GGAAACC"
HAIRPIN_SS = "((...))"
TWOWAY_SEQ = "GGAGGAAACCACC"
TWOWAY_SS = "((.((...)).))"


def test_parse_node_count_and_types():
    g = Parser().parse(HAIRPIN_SEQ, HAIRPIN_SS)
    assert len(g) == 5
    types = [n.data.type for n in g]
    assert types == [
        NodeType.PAIRED,
        NodeType.PAIRED,
        NodeType.UNPAIRED,
        NodeType.PAIRED,
        NodeType.PAIRED,
    ]


def test_parse_groups_unpaired_residues():
    g = Parser().parse(HAIRPIN_SEQ, HAIRPIN_SS)
    unpaired = [n for n in g if n.data.type == NodeType.UNPAIRED]
    assert len(unpaired) == 1
    assert "".join(r.name for r in unpaired[0].data.residues) == "AAA"


def test_parse_pairs_nodes_across():
    g = Parser().parse(HAIRPIN_SEQ, HAIRPIN_SS)
    nodes = g.nodes
    assert nodes[0].partner(2) is nodes[4]
    assert nodes[4].partner(2) is nodes[0]
    assert nodes[1].partner(2) is nodes[3]


def test_parse_links_backbone():
    g = Parser().parse(HAIRPIN_SEQ, HAIRPIN_SS)
    nodes = g.nodes
    for a, b in zip(nodes, nodes[1:]):
        assert a.partner(1) is b
        assert b.partner(0) is a
    assert nodes[0].partner(0) is None
    assert nodes[-1].partner(1) is None


def test_parse_chain_break_leaves_node_unlinked():
    g = Parser().parse("GG&CC", "((&))")
    nodes = g.nodes
    assert len(nodes) == 4
    assert nodes[2].partner(0) is None
    assert nodes[1].partner(1) is None
    assert nodes[2].partner(1) is nodes[3]


def test_parse_to_motifs_hairpin():
    motifs = Parser().parse_to_motifs(HAIRPIN_SEQ, HAIRPIN_SS)
    assert [m.mtype for m in motifs] == [MotifType.HELIX, MotifType.HAIRPIN]
    helix, hairpin = motifs
    assert len(helix.residues()) == 4
    assert len(helix.chains()) == 2
    assert len(helix.basepairs) == 2
    assert len(hairpin.chains()) == 1
    assert hairpin.sequence() == "GAAAC"


def test_parse_to_motifs_end_ids_match_assignment():
    motifs = Parser().parse_to_motifs(HAIRPIN_SEQ, HAIRPIN_SS)
    for m in motifs:
        assert len(m.end_ids) == len(m.ends)
        assert m.end_ids == [assign_end_id(m, end) for end in m.ends]


def test_hairpin_end_id():
    motifs = Parser().parse_to_motifs(HAIRPIN_SEQ, HAIRPIN_SS)
    assert motifs[1].end_ids == ["GAAAC_LUUUR"]


def test_parse_to_motifs_twoway():
    motifs = Parser().parse_to_motifs(TWOWAY_SEQ, TWOWAY_SS)
    assert [m.mtype for m in motifs] == [
        MotifType.HELIX,
        MotifType.TWOWAY,
        MotifType.HELIX,
        MotifType.HAIRPIN,
    ]
    twoway = motifs[1]
    assert len(twoway.chains()) == 2
    assert len(twoway.ends) == 2


def test_parse_to_motifs_covers_every_residue():
    p = Parser()
    motifs = p.parse_to_motifs(TWOWAY_SEQ, TWOWAY_SS)
    covered = {r.num for m in motifs for r in m.residues()}
    assert covered == set(range(1, len(TWOWAY_SEQ) + 1))


def test_parse_to_motif_whole_structure():
    m = Parser().parse_to_motif(HAIRPIN_SEQ, HAIRPIN_SS)
    assert m.sequence() == HAIRPIN_SEQ
    assert m.dot_bracket() == HAIRPIN_SS
    assert m.mtype == MotifType.HAIRPIN
    assert len(m.basepairs) == 2
    assert len(m.ends) == 1
    assert {m.ends[0].res1.num, m.ends[0].res2.num} == {1, 7}


def test_parse_to_pose():
    pose = Parser().parse_to_pose(TWOWAY_SEQ, TWOWAY_SS)
    assert pose.sequence() == TWOWAY_SEQ
    assert pose.dot_bracket() == TWOWAY_SS
    assert len(pose.motifs) == 4
    assert len(pose.basepairs) == 4
    assert len(pose.helices()) == 2


def test_pose_motif_basepairs_are_shared():
    pose = Parser().parse_to_pose(HAIRPIN_SEQ, HAIRPIN_SS)
    pose_bps = {id(bp) for bp in pose.basepairs}
    for m in pose.motifs:
        assert all(id(bp) in pose_bps for bp in m.basepairs)


def test_unmatched_open_bracket_raises():
    with pytest.raises(SecondaryStructureError):
        Parser().parse("GGAAA", "((...")


def test_unmatched_close_bracket_raises():
    with pytest.raises(SecondaryStructureError):
        Parser().parse("AAC", "..)")


def test_unsupported_bracket_raises():
    with pytest.raises(SecondaryStructureError):
        Parser().parse("AGAC", ".[.]")


def test_length_mismatch_raises():
    with pytest.raises(SecondaryStructureError):
        Parser().parse("GGAAACC", "((..))")


def test_reset_clears_state_and_parser_reusable():
    p = Parser()
    p.parse_to_motifs(HAIRPIN_SEQ, HAIRPIN_SS)
    p.reset()
    motifs = p.parse_to_motifs("AAAA", "....")
    assert len(motifs) == 1
    assert motifs[0].basepairs == []


def _residue(num):
    return Residue("A", ".", num, "A")


def test_graph_add_chain_and_lookup():
    g = SecondaryStructureChainGraph()
    r1, r2, r3 = _residue(1), _residue(2), _residue(3)
    i0 = g.add_chain(NodeData([r1], NodeType.UNPAIRED))
    i1 = g.add_chain(NodeData([r2, r3], NodeType.UNPAIRED), i0)
    assert (i0, i1) == (0, 1)
    assert g.get_node_by_res(r3) == 1
    assert g.get_node_by_res(_residue(4)) == -1
    assert g.nodes[0].partner(1) is g.nodes[1]


def test_graph_orphan_not_connected():
    g = SecondaryStructureChainGraph()
    g.add_chain(NodeData([_residue(1)], NodeType.UNPAIRED))
    g.add_chain(NodeData([_residue(2)], NodeType.UNPAIRED), 0, True)
    assert g.nodes[0].partner(1) is None
    assert g.nodes[1].partner(0) is None


def test_graph_pair_res_requires_paired_nodes():
    g = SecondaryStructureChainGraph()
    g.add_chain(NodeData([_residue(1)], NodeType.UNPAIRED))
    g.add_chain(NodeData([_residue(2)], NodeType.PAIRED))
    with pytest.raises(SecondaryStructureError):
        g.pair_res(0, 1)


def test_graph_pair_res_connects():
    g = SecondaryStructureChainGraph()
    g.add_chain(NodeData([_residue(1)], NodeType.PAIRED))
    g.add_chain(NodeData([_residue(2)], NodeType.PAIRED))
    g.pair_res(0, 1)
    assert g.nodes[0].partner(2) is g.nodes[1]
    assert g.nodes[1].partner(2) is g.nodes[0]


def test_graph_bad_parent_index_raises():
    g = SecondaryStructureChainGraph()
    g.add_chain(NodeData([_residue(1)], NodeType.PAIRED))
    with pytest.raises(SecondaryStructureError):
        g.add_chain(NodeData([_residue(2)], NodeType.PAIRED), 5)