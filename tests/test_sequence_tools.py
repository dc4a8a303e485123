import pytest

from rnastruct.basepair import Basepair
from rnastruct.chain import Chain
from rnastruct.motif import Motif
from rnastruct.motif_type import MotifType
from rnastruct.pose import Pose
from rnastruct.residue import ResType, SecondaryStructureError
from rnastruct.sequence_tools import (
    find_gc_helix_stretches,
    find_longest_gc_helix_stretch,
    find_longest_gc_helix_stretch_in_motif,
    find_res_types_in_motif,
    find_res_types_in_pose,
    get_complement_res_type,
    get_res_types_from_sequence,
)
from rnastruct.structure import Structure


def _helix_pose(seq):
    structure = Structure.from_sequence(seq, "((((&))))")
    c0, c1 = structure.chains
    top = c0.residues
    bottom = list(reversed(c1.residues))
    bps = [Basepair(a, b) for a, b in zip(top, bottom)]
    steps = []
    for i in range(3):
        s = Structure([Chain([top[i], top[i + 1]]), Chain([bottom[i + 1], bottom[i]])])
        steps.append(
            Motif(s, [bps[i], bps[i + 1]], [bps[i], bps[i + 1]], mtype=MotifType.HELIX)
        )
    return Pose(structure, bps, [bps[0]], steps)


def _single_chain_pose(seq):
    return Pose(Structure.from_sequence(seq, "." * len(seq)))


def test_res_types_from_sequence():
    assert get_res_types_from_sequence("ACGU") == [
        ResType.A,
        ResType.C,
        ResType.G,
        ResType.U,
    ]
    assert get_res_types_from_sequence("T") == [ResType.U]


def test_res_types_from_bad_sequence_raises():
    with pytest.raises(SecondaryStructureError):
        get_res_types_from_sequence("AXG")


def test_find_res_types_in_pose():
    pose = _helix_pose("AAAA&UUUU")
    assert find_res_types_in_pose(pose, get_res_types_from_sequence("AAAA")) == 1
    assert find_res_types_in_pose(pose, get_res_types_from_sequence("UUUU")) == 1
    assert find_res_types_in_pose(pose, get_res_types_from_sequence("AAAAA")) == 0


def test_find_res_types_does_not_cross_chains():
    pose = _helix_pose("GGAA&UUCC")
    assert find_res_types_in_pose(pose, get_res_types_from_sequence("AAUU")) == 0


def test_find_res_types_residue_after_match_resets():
    pose = _single_chain_pose("AAAAAAAAA")
    assert find_res_types_in_pose(pose, get_res_types_from_sequence("AAAA")) == 2


def test_find_res_types_in_motif_matches_pose_search():
    pose = _helix_pose("GGAC&GUCC")
    types = get_res_types_from_sequence("GG")
    motif = pose.motifs[0]
    assert find_res_types_in_motif(motif, types) == 1
    assert find_res_types_in_motif(motif, get_res_types_from_sequence("CC")) == 1
    assert find_res_types_in_motif(motif, get_res_types_from_sequence("AA")) == 0


def test_longest_gc_stretch_whole_strand():
    pose = _helix_pose("GGGC&GCCC")
    assert find_longest_gc_helix_stretch(pose) == 4
    assert find_longest_gc_helix_stretch_in_motif(pose.helices()[0]) == 4


def test_longest_gc_stretch_without_helices_is_zero():
    assert find_longest_gc_helix_stretch(_single_chain_pose("GGGG")) == 0


def test_gc_helix_stretches_is_zero_or_one():
    structure = Structure.from_sequence("GG&CC", "((&))")
    res = structure.residues()
    bps = [Basepair(res[0], res[3]), Basepair(res[1], res[2])]
    pose = Pose(structure, bps, [bps[0]])
    assert len(pose.helices()) == 2
    assert find_gc_helix_stretches(pose, 1) == 1
    assert find_gc_helix_stretches(pose, 2) == 0


def test_gc_helix_stretches_threshold_inclusive():
    pose = _helix_pose("GGGC&GCCC")
    assert find_gc_helix_stretches(pose, 4) == 1
    assert find_gc_helix_stretches(pose, 5) == 0


def test_complement_res_type():
    assert get_complement_res_type(ResType.A) == ResType.U
    assert get_complement_res_type(ResType.U) == ResType.A
    assert get_complement_res_type(ResType.G) == ResType.C
    assert get_complement_res_type(ResType.C) == ResType.G


def test_complement_of_ambiguous_code_raises():
    with pytest.raises(SecondaryStructureError):
        get_complement_res_type(ResType.N)