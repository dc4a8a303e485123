"""Searches over residue types in poses and motifs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from rnastruct.chain import Chain
from rnastruct.residue import ResType, SecondaryStructureError, convert_res_name_to_type

if TYPE_CHECKING:
    from rnastruct.motif import Motif
    from rnastruct.pose import Pose

_COMPLEMENTS = {
    ResType.A: ResType.U,
    ResType.C: ResType.G,
    ResType.G: ResType.C,
    ResType.U: ResType.A,
}


def get_res_types_from_sequence(sequence: str) -> list[ResType]:
    """Return the residue type of every letter of ``sequence``."""
    return [convert_res_name_to_type(c) for c in sequence]


def _count_runs(chains: Iterable[Chain], residue_types: Sequence[ResType]) -> int:
    # After a full match the following residue only resets the search.
    n = len(residue_types)
    count = 0
    for c in chains:
        j = 0
        for r in c:
            if j < n and r.res_type == residue_types[j]:
                j += 1
                if j == n:
                    count += 1
            else:
                j = 0
    return count


def find_res_types_in_pose(p: Pose, residue_types: Sequence[ResType]) -> int:
    """Count occurrences of ``residue_types`` within the chains of a pose."""
    return _count_runs(p.chains(), residue_types)


def find_res_types_in_motif(m: Motif, residue_types: Sequence[ResType]) -> int:
    """Count occurrences of ``residue_types`` within the chains of a motif."""
    return _count_runs(m.chains(), residue_types)


def find_gc_helix_stretches(p: Pose, length: int) -> int:
    """Return 1 if any helix has a G/C run of at least ``length``, else 0."""
    for h in p.helices():
        if find_longest_gc_helix_stretch_in_motif(h) >= length:
            return 1
    return 0


def find_longest_gc_helix_stretch(p: Pose) -> int:
    """Return the longest G/C run found in the first strand of any helix."""
    return max(
        (find_longest_gc_helix_stretch_in_motif(h) for h in p.helices()), default=0
    )


def find_longest_gc_helix_stretch_in_motif(m: Motif) -> int:
    """Return the longest run of G or C in the first chain of ``m``."""
    count = 0
    longest = 0
    for r in m.chains()[0]:
        count = count + 1 if r.res_type in (ResType.G, ResType.C) else 0
        longest = max(longest, count)
    return longest


def get_complement_res_type(r_type: ResType) -> ResType:
    """Return the Watson-Crick complement of A, C, G or U."""
    try:
        return _COMPLEMENTS[r_type]
    except KeyError:
        raise SecondaryStructureError("cannot get complement res type") from None