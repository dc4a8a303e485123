import pytest

from rnastruct.basepair import BPType, Basepair, get_bp_type
from rnastruct.end_id import assign_end_id, fill_basepairs_in_ss
from rnastruct.motif import Motif
from rnastruct.residue import SecondaryStructureError
from rnastruct.rna_structure import RNAStructure
from rnastruct.rng import RandomNumberGenerator
from rnastruct.structure import Structure


def _helix(seq="GG&CC", cls=RNAStructure):
    structure = Structure.from_sequence(seq, "((&))")
    r1, r2, r3, r4 = structure.residues()
    bp1 = Basepair(r1, r4)
    bp2 = Basepair(r2, r3)
    return cls(structure, [bp1, bp2], [bp1, bp2])


def _hairpin():
    structure = Structure.from_sequence("GAAAC", "(...)")
    res = structure.residues()
    bp = Basepair(res[0], res[4])
    return RNAStructure(structure, [bp], [bp])


def test_hairpin_end_id():
    hp = _hairpin()
    assert assign_end_id(hp, hp.ends[0]) == "GAAAC_LUUUR"


def test_helix_end_ids():
    h = _helix()
    assert assign_end_id(h, h.ends[0]) == "GG_LL_CC_RR"
    assert assign_end_id(h, h.ends[1]) == "CC_LL_GG_RR"


def test_end_id_unchanged_by_copy():
    h = _helix()
    c = h.copy()
    assert assign_end_id(c, c.ends[0]) == assign_end_id(h, h.ends[0])


def test_end_not_in_structure():
    h = _helix()
    other = _hairpin()
    with pytest.raises(SecondaryStructureError):
        assign_end_id(h, other.ends[0])


def test_fill_basepairs_in_ss():
    motif = _helix("NN&NN", Motif)
    pose = RNAStructure(motif.structure, motif.basepairs, motif.ends)
    pose.motifs = [motif]
    fill_basepairs_in_ss(pose, RandomNumberGenerator(1))
    allowed = {BPType.AU, BPType.UA, BPType.GC, BPType.CG}
    assert all(get_bp_type(bp) in allowed for bp in pose.basepairs)
    assert "N" not in pose.sequence()
    assert motif.end_ids == [assign_end_id(motif, end) for end in motif.ends]
    assert len(motif.end_ids) == 2


def test_fill_leaves_named_pairs():
    motif = _helix("GN&NC", Motif)
    pose = RNAStructure(motif.structure, motif.basepairs, motif.ends)
    pose.motifs = [motif]
    fill_basepairs_in_ss(pose, RandomNumberGenerator(3))
    assert pose.basepairs[0].res1.name == "G"
    assert pose.basepairs[0].res2.name == "C"
    assert get_bp_type(pose.basepairs[1]) in {BPType.AU, BPType.UA, BPType.GC, BPType.CG}