"""A whole secondary structure split into motifs, with helices derived on demand."""

from __future__ import annotations

from collections.abc import Iterable

from rnastruct.basepair import Basepair
from rnastruct.chain import Chain
from rnastruct.end_id import assign_end_id
from rnastruct.ids import Uuid
from rnastruct.motif import Motif
from rnastruct.motif_type import MotifType
from rnastruct.residue import SecondaryStructureError
from rnastruct.rna_structure import RNAStructure
from rnastruct.structure import Structure


class Pose(RNAStructure):
    """An RNA structure that also holds the motifs it is made of."""

    def __init__(
        self,
        structure: Structure | None = None,
        basepairs: Iterable[Basepair] | None = None,
        ends: Iterable[Basepair] | None = None,
        motifs: Iterable[Motif] | None = None,
        end_ids: Iterable[str] | None = None,
    ) -> None:
        super().__init__(structure, basepairs, ends, end_ids)
        self.motifs: list[Motif] = list(motifs) if motifs else []
        self._helices: list[Motif] = []

    @classmethod
    def from_rna_structure(cls, rs: RNAStructure, motifs: Iterable[Motif]) -> Pose:
        """Build a pose sharing the structure, basepairs and ends of ``rs``."""
        return cls(rs.structure, rs.basepairs, rs.ends, motifs, rs.end_ids)

    def helices(self) -> list[Motif]:
        """Return the helices: joined runs of helix steps plus lone basepairs."""
        if not self._helices:
            self._build_helices()
        return self._helices

    def motif(self, uuid: Uuid) -> Motif | None:
        """Return the motif with identifier ``uuid``, or None."""
        return next((m for m in self.motifs if m.id == uuid), None)

    def replace_sequence(self, seq: str) -> None:
        """Rename every residue and recompute the end ids of every motif."""
        super().replace_sequence(seq)
        for m in self.motifs:
            m.end_ids = [assign_end_id(m, end) for end in m.ends]

    def update_motif(self, uuid: Uuid) -> None:
        """Recompute the end ids of the motif with identifier ``uuid``."""
        m = self.motif(uuid)
        if m is None:
            raise SecondaryStructureError(f"no motif with id {uuid}")
        m.end_ids = [assign_end_id(m, end) for end in m.ends]

    def _build_helices(self) -> None:
        steps = [
            m for m in self.motifs if m.mtype == MotifType.HELIX and len(m.ends) == 2
        ]
        seen: set[int] = set()
        seen_bp: set[int] = set()

        while True:
            current: Motif | None = None
            found = False
            for m1 in steps:
                found = False
                if id(m1) in seen:
                    continue
                for m2 in steps:
                    if id(m2) in seen or m1 is m2:
                        continue
                    if any(m1.ends[0] is end for end in m2.ends):
                        found = True
                if not found:
                    current = m1
                    break

            if found or current is None:
                break

            helix_motifs: list[Motif] = []
            found = True
            while found:
                seen.add(id(current))
                helix_motifs.append(current)
                found = False
                for m in steps:
                    if id(m) in seen:
                        continue
                    if m.ends[0] is current.ends[1]:
                        current = m
                        found = True
                        break

            first = helix_motifs[0]
            res1 = [first.chains()[0].first()]
            res2 = [first.chains()[1].last()]
            bps = [first.basepairs[0]]
            ends = [first.ends[0], helix_motifs[-1].ends[1]]
            for m in helix_motifs:
                res1.append(m.chains()[0].last())
                res2.append(m.chains()[1].first())
                bps.append(m.basepairs[1])
            res2.reverse()

            structure = Structure([Chain(res1), Chain(res2)])
            seen_bp.update(id(bp) for bp in bps)
            self._helices.append(Motif(structure, bps, ends))

        for bp in self.basepairs:
            if id(bp) in seen_bp:
                continue
            structure = Structure([Chain([bp.res1]), Chain([bp.res2])])
            self._helices.append(Motif(structure, [bp], [bp]))