"""Collections of chains built from sequence and dot-bracket strings."""

from __future__ import annotations

from collections.abc import Iterable

from rnastruct.chain import Chain
from rnastruct.ids import Uuid
from rnastruct.residue import Residue, SecondaryStructureError

CHAIN_IDS = "ABCDEFGHIJKLMNOPQRSTUVWXZ"
VALID_SEQ = "AGUCTNWSMKRYBDHV&+-"
VALID_SS = "[{(.)}]"
_CHAIN_BREAKS = "&+"


class Structure:
    """An ordered collection of chains."""

    def __init__(self, chains: Iterable[Chain] | None = None) -> None:
        self.chains: list[Chain] = list(chains) if chains is not None else []

    @classmethod
    def from_sequence(cls, sequence: str, dot_bracket: str) -> Structure:
        """Build chains from a sequence and dot bracket; ``&`` or ``+`` split chains."""
        if len(sequence) != len(dot_bracket):
            raise SecondaryStructureError(
                "cannot construct new SecondaryStructure object: new sequence and "
                "dot bracket are not the same length"
            )
        if not sequence:
            raise SecondaryStructureError(
                "cannot construct new SecondaryStructure object: sequence is of "
                "length zero!"
            )
        if dot_bracket[0] not in "(.&+":
            raise SecondaryStructureError(
                "cannot construct new SecondaryStructure object: dot bracket notation "
                "for secondary structure is not valid. perhaps you flipped seq and ss?"
            )

        chains: list[Chain] = []
        res: list[Residue] = []
        count = 1
        ci = 0
        for name, db in zip(sequence, dot_bracket):
            if name in _CHAIN_BREAKS:
                ci += 1
                chains.append(Chain(res))
                res = []
                if ci == len(CHAIN_IDS) - 1:
                    ci = 0
                continue
            if name not in VALID_SEQ:
                raise SecondaryStructureError(
                    f"{name} is not a valid name for a residue valid names are: "
                    "AGUCTNWSMKRYBDHV"
                )
            if db not in VALID_SS:
                raise SecondaryStructureError(
                    f"{db} is not a valid structure element for a residue valid "
                    "elements are: [{(.)}]"
                )
            res.append(Residue(name, db, count, CHAIN_IDS[ci], Uuid()))
            count += 1
        if res:
            chains.append(Chain(res))
        return cls(chains)

    @classmethod
    def from_str(cls, s: str) -> Structure:
        """Build from ``|``-separated chain strings as made by :meth:`to_str`."""
        return cls(Chain.from_str(piece) for piece in s.split("|") if piece)

    def copy(self) -> Structure:
        """Return a structure with copies of every chain and residue."""
        return Structure(c.copy() for c in self.chains)

    def residues(self) -> list[Residue]:
        return [r for c in self.chains for r in c]

    def sequence(self) -> str:
        return "&".join(c.sequence() for c in self.chains)

    def dot_bracket(self) -> str:
        return "&".join(c.dot_bracket() for c in self.chains)

    def get_residue(self, num: int, chain_id: str, i_code: str = "") -> Residue | None:
        """Return the residue with this number, chain and insertion code, or None."""
        return next(
            (
                r
                for r in self.residues()
                if r.num == num and r.chain_id == chain_id and r.i_code == i_code
            ),
            None,
        )

    def get_residue_by_uuid(self, uuid: Uuid) -> Residue | None:
        """Return the residue with this uuid, or None."""
        return next((r for r in self.residues() if r.uuid == uuid), None)

    def to_str(self) -> str:
        return "".join(c.to_str() + "|" for c in self.chains)