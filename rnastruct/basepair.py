"""Pairs of secondary-structure residues."""

from __future__ import annotations

from enum import Enum

from rnastruct.ids import Uuid
from rnastruct.residue import Residue, ResType, SecondaryStructureError


class Basepair:
    """Two paired residues with an identifier."""

    def __init__(self, res1: Residue, res2: Residue, uuid: Uuid | None = None) -> None:
        self.res1 = res1
        self.res2 = res2
        self.uuid = uuid if uuid is not None else Uuid()

    def name(self) -> str:
        """Return ``<chain><num><icode>-<chain><num><icode>`` in sorted order."""
        str1 = f"{self.res1.chain_id}{self.res1.num}{self.res1.i_code}"
        str2 = f"{self.res2.chain_id}{self.res2.num}{self.res2.i_code}"
        if str1 < str2:
            return f"{str1}-{str2}"
        return f"{str2}-{str1}"

    def partner(self, r: Residue) -> Residue:
        """Return the residue paired with ``r``."""
        if r is self.res1:
            return self.res2
        if r is self.res2:
            return self.res1
        raise SecondaryStructureError(
            "called partner with a residue not in basepair in secondary_structure"
        )

    def __repr__(self) -> str:
        return f"Basepair({self.name()!r})"


class BPType(Enum):
    AU = "AU"
    UA = "UA"
    CG = "CG"
    GC = "GC"
    GU = "GU"
    UG = "UG"


def _types(bp: Basepair) -> tuple[ResType, ResType]:
    return bp.res1.res_type, bp.res2.res_type


def is_gc_pair(bp: Basepair) -> bool:
    return _types(bp) in ((ResType.G, ResType.C), (ResType.C, ResType.G))


def is_au_pair(bp: Basepair) -> bool:
    return _types(bp) in ((ResType.A, ResType.U), (ResType.U, ResType.A))


def is_gu_pair(bp: Basepair) -> bool:
    return _types(bp) in ((ResType.G, ResType.U), (ResType.U, ResType.G))


def get_bp_type(bp: Basepair) -> BPType:
    """Return the canonical pair type of ``bp``."""
    key = bp.res1.name + bp.res2.name
    try:
        return BPType(key)
    except ValueError:
        raise SecondaryStructureError(
            f"unknown basepair type: {bp.res1.name}-{bp.res2.name}"
        ) from None