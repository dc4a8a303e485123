"""A secondary structure together with its basepairs and ends."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rnastruct.basepair import Basepair
from rnastruct.chain import Chain
from rnastruct.ids import Uuid
from rnastruct.residue import Residue, SecondaryStructureError
from rnastruct.structure import Structure


def _index_by_identity(items: Sequence[object], target: object) -> int:
    """Return the position of ``target`` in ``items``, compared by identity."""
    for pos, item in enumerate(items):
        if item is target:
            return pos
    raise SecondaryStructureError("object is not a member of this structure")


class RNAStructure:
    """Chains of residues plus the basepairs and end basepairs between them."""

    def __init__(
        self,
        structure: Structure | None = None,
        basepairs: Iterable[Basepair] | None = None,
        ends: Iterable[Basepair] | None = None,
        end_ids: Iterable[str] | None = None,
        name: str = "",
        path: str = "",
        score: float = 0.0,
    ) -> None:
        self.structure = structure if structure is not None else Structure()
        self.basepairs: list[Basepair] = list(basepairs) if basepairs else []
        self.ends: list[Basepair] = list(ends) if ends else []
        self.end_ids: list[str] = list(end_ids) if end_ids else []
        self.name = name
        self.path = path
        self.score = score

    def _copied_parts(self) -> tuple[Structure, list[Basepair], list[Basepair]]:
        """Deep-copy the structure and rebuild basepairs and ends against it."""
        structure = self.structure.copy()
        basepairs = [
            Basepair(
                structure.get_residue_by_uuid(bp.res1.uuid),
                structure.get_residue_by_uuid(bp.res2.uuid),
                bp.uuid,
            )
            for bp in self.basepairs
        ]
        ends = [basepairs[_index_by_identity(self.basepairs, end)] for end in self.ends]
        return structure, basepairs, ends

    def copy(self) -> RNAStructure:
        """Return an independent copy sharing no residues or basepairs."""
        structure, basepairs, ends = self._copied_parts()
        return RNAStructure(
            structure, basepairs, ends, self.end_ids, self.name, self.path, self.score
        )

    def get_basepair_by_name(self, name: str) -> list[Basepair]:
        """Return a one-element list with the basepair called ``name``."""
        for bp in self.basepairs:
            if bp.name() == name:
                return [bp]
        raise SecondaryStructureError(f"could not find basepair with name {name}")

    def get_basepair_by_uuid(self, uuid: Uuid) -> list[Basepair]:
        """Return basepairs whose own uuid or one of whose residues' uuid matches."""
        bps: list[Basepair] = []
        for bp in self.basepairs:
            if bp.uuid == uuid:
                bps.append(bp)
            if bp.res1.uuid == uuid or bp.res2.uuid == uuid:
                bps.append(bp)
        return bps

    def get_basepair_by_residues(self, res1: Residue, res2: Residue) -> list[Basepair]:
        """Return basepairs joining ``res1`` and ``res2`` in either order."""
        return self.get_basepair_by_uuids(res1.uuid, res2.uuid)

    def get_basepair_by_uuids(self, uuid1: Uuid, uuid2: Uuid) -> list[Basepair]:
        """Return basepairs joining the residues with these uuids in either order."""
        bps: list[Basepair] = []
        for bp in self.basepairs:
            if bp.res1.uuid == uuid1 and bp.res2.uuid == uuid2:
                bps.append(bp)
            if bp.res1.uuid == uuid2 and bp.res2.uuid == uuid1:
                bps.append(bp)
        return bps

    def get_end(self, name: str) -> Basepair:
        """Return the end basepair called ``name``."""
        for bp in self.ends:
            if bp.name() == name:
                return bp
        raise SecondaryStructureError(f"could not find basepair with name {name}")

    def replace_sequence(self, seq: str) -> None:
        """Rename every residue from ``seq``; chains are separated by ``&``."""
        pieces = seq.split("&")
        flat = "".join(pieces)
        if len(pieces) != len(self.chains()):
            raise SecondaryStructureError(
                "cannot replace sequence with one with a different number of chains: "
                f"\n org: {self.sequence()}\n new: {seq}"
            )
        residues = self.residues()
        if len(flat) != len(residues):
            raise SecondaryStructureError(
                "cannot replace sequence with a different length sequence: "
                f"\n org: {self.sequence()}\n new: {seq}"
            )
        for residue, letter in zip(residues, flat):
            residue.name = letter

    def get_residue(self, num: int, chain_id: str, i_code: str = "") -> Residue | None:
        return self.structure.get_residue(num, chain_id, i_code)

    def get_residue_by_uuid(self, uuid: Uuid) -> Residue | None:
        return self.structure.get_residue_by_uuid(uuid)

    def sequence(self) -> str:
        return self.structure.sequence()

    def dot_bracket(self) -> str:
        return self.structure.dot_bracket()

    def chains(self) -> list[Chain]:
        return self.structure.chains

    def residues(self) -> list[Residue]:
        return self.structure.residues()