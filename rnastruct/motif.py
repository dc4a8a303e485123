"""Secondary-structure motifs and their text form."""

from __future__ import annotations

from collections.abc import Iterable

from rnastruct.basepair import Basepair
from rnastruct.ids import Uuid
from rnastruct.motif_type import MotifType
from rnastruct.rna_structure import RNAStructure, _index_by_identity
from rnastruct.structure import Structure


class Motif(RNAStructure):
    """An RNA structure element with a motif type and its own identifier."""

    def __init__(
        self,
        structure: Structure | None = None,
        basepairs: Iterable[Basepair] | None = None,
        ends: Iterable[Basepair] | None = None,
        end_ids: Iterable[str] | None = None,
        name: str = "",
        path: str = "",
        score: float = 0.0,
        mtype: MotifType = MotifType.UNKNOWN,
    ) -> None:
        super().__init__(structure, basepairs, ends, end_ids, name, path, score)
        self.mtype = mtype
        self.id = Uuid()

    @classmethod
    def from_str(cls, s: str) -> Motif:
        """Build a motif from the ``!``-separated form made by :meth:`to_str`."""
        spl = s.split("!")
        if len(spl) < 7:
            raise ValueError(f"cannot build motif from str: {s!r}")
        structure = Structure.from_str(spl[3])
        res = structure.residues()
        basepairs = []
        for bp_str in spl[4].split("@"):
            indices = bp_str.split()
            if not indices:
                continue
            basepairs.append(Basepair(res[int(indices[0])], res[int(indices[1])]))
        ends = [basepairs[int(i)] for i in spl[5].split()]
        return cls(
            structure,
            basepairs,
            ends,
            end_ids=spl[6].split(),
            name=spl[1],
            path=spl[2],
            mtype=MotifType(int(spl[0])),
        )

    def copy(self) -> Motif:
        """Return an independent copy; the copy gets a fresh identifier."""
        structure, basepairs, ends = self._copied_parts()
        return Motif(
            structure,
            basepairs,
            ends,
            self.end_ids,
            self.name,
            self.path,
            self.score,
            self.mtype,
        )

    def to_str(self) -> str:
        """Return ``mtype!name!path!structure!pairs!ends!end_ids``."""
        res = self.structure.residues()
        pairs = "".join(
            f"{_index_by_identity(res, bp.res1)} {_index_by_identity(res, bp.res2)}@"
            for bp in self.basepairs
        )
        ends = "".join(
            f"{_index_by_identity(self.basepairs, end)} " for end in self.ends
        )
        end_ids = "".join(f"{ei} " for ei in self.end_ids)
        return (
            f"{int(self.mtype)}!{self.name}!{self.path}!{self.structure.to_str()}!"
            f"{pairs}!{ends}!{end_ids}"
        )