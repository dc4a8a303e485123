"""Ordered runs of secondary-structure residues."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from rnastruct.residue import Residue, SecondaryStructureError


class Chain:
    """A single strand of residues in order."""

    def __init__(self, residues: Iterable[Residue] | None = None) -> None:
        self.residues: list[Residue] = list(residues) if residues is not None else []

    @classmethod
    def from_str(cls, s: str) -> Chain:
        """Build from ``;``-separated residue strings; short pieces are skipped."""
        return cls(Residue.from_str(piece) for piece in s.split(";") if len(piece) >= 3)

    def copy(self) -> Chain:
        """Return a chain holding copies of every residue."""
        return Chain(r.copy() for r in self.residues)

    def __iter__(self) -> Iterator[Residue]:
        return iter(self.residues)

    def __len__(self) -> int:
        return len(self.residues)

    def first(self) -> Residue:
        if not self.residues:
            raise SecondaryStructureError(
                "called first() on a chain without any residues in it"
            )
        return self.residues[0]

    def last(self) -> Residue:
        if not self.residues:
            raise SecondaryStructureError(
                "called last() on a chain without any residues in it"
            )
        return self.residues[-1]

    def sequence(self) -> str:
        return "".join(r.name for r in self.residues)

    def dot_bracket(self) -> str:
        return "".join(r.dot_bracket for r in self.residues)

    def to_str(self) -> str:
        return "".join(r.to_str() + ";" for r in self.residues)