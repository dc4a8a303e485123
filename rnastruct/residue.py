"""Secondary-structure residues and nucleotide type codes."""

from __future__ import annotations

from enum import IntEnum

from rnastruct.ids import Uuid


class SecondaryStructureError(RuntimeError):
    """Raised when secondary-structure data is invalid."""


class ResType(IntEnum):
    """Nucleotide codes, including the IUPAC ambiguity codes."""

    A = 0
    C = 1
    G = 2
    U = 3
    W = 4  # weak: A or U
    S = 5  # strong: C or G
    M = 6  # amino: A or C
    K = 7  # keto: G or U
    R = 8  # purine: A or G
    Y = 9  # pyrimidine: C or U
    B = 10  # not A
    D = 11  # not C
    H = 12  # not G
    V = 13  # not U
    N = 14  # any


_NAME_TO_TYPE = {t.name: t for t in ResType}
_NAME_TO_TYPE["T"] = ResType.U


def convert_res_name_to_type(c: str) -> ResType:
    """Return the residue type for a one-letter code; ``T`` maps to ``U``."""
    try:
        return _NAME_TO_TYPE[c]
    except (KeyError, TypeError):
        raise SecondaryStructureError(
            "incorrect character for secondary string"
        ) from None


def convert_res_type_to_str(r: ResType) -> str:
    """Return the one-letter code of a residue type."""
    if not isinstance(r, ResType):
        raise SecondaryStructureError(
            f"incorrect ResType cannot convert to string: {r!r}"
        )
    return r.name


def is_restype_a_weak(r: ResType) -> bool:
    return r in (ResType.A, ResType.U)


def is_restype_a_strong(r: ResType) -> bool:
    return r in (ResType.C, ResType.G)


def is_restype_a_amino(r: ResType) -> bool:
    return r in (ResType.A, ResType.C)


def is_restype_a_keto(r: ResType) -> bool:
    return r in (ResType.G, ResType.U)


def is_restype_a_purine(r: ResType) -> bool:
    return r in (ResType.A, ResType.G)


def is_restype_a_pyrimidine(r: ResType) -> bool:
    return r in (ResType.C, ResType.U)


def is_restype_not_A(r: ResType) -> bool:
    return r in (ResType.C, ResType.G, ResType.U)


def is_restype_not_C(r: ResType) -> bool:
    return r in (ResType.A, ResType.G, ResType.U)


def is_restype_not_G(r: ResType) -> bool:
    return r in (ResType.A, ResType.C, ResType.U)


def is_restype_not_U(r: ResType) -> bool:
    return r in (ResType.A, ResType.C, ResType.G)


def is_restype_a_ambiguous_code(r: ResType) -> bool:
    return r not in (ResType.A, ResType.C, ResType.G, ResType.U)


_CONSTRAINT_TESTS = {
    ResType.A: lambda r: r == ResType.A,
    ResType.C: lambda r: r == ResType.C,
    ResType.G: lambda r: r == ResType.G,
    ResType.U: lambda r: r == ResType.U,
    ResType.W: is_restype_a_weak,
    ResType.S: is_restype_a_strong,
    ResType.M: is_restype_a_amino,
    ResType.K: is_restype_a_keto,
    ResType.R: is_restype_a_purine,
    ResType.Y: is_restype_a_pyrimidine,
    ResType.B: is_restype_not_A,
    ResType.D: is_restype_not_C,
    ResType.H: is_restype_not_G,
    ResType.V: is_restype_not_U,
    ResType.N: lambda r: True,
}


def does_restype_satisfy_constraint(r: ResType, constraint: ResType) -> bool:
    """Return True if residue type ``r`` is allowed by ``constraint``."""
    try:
        test = _CONSTRAINT_TESTS[constraint]
    except (KeyError, TypeError):
        raise SecondaryStructureError(
            f"unknown constraint ResType: {constraint!r}"
        ) from None
    return test(r)


class Residue:
    """One nucleotide with its dot-bracket symbol and position."""

    def __init__(
        self,
        name: str,
        dot_bracket: str,
        num: int,
        chain_id: str,
        uuid: Uuid | None = None,
        i_code: str = "",
    ) -> None:
        self.res_type = convert_res_name_to_type(name[:1])
        self.dot_bracket = dot_bracket
        self.num = num
        self.chain_id = chain_id
        self.uuid = uuid if uuid is not None else Uuid()
        self.i_code = i_code

    @classmethod
    def from_str(cls, s: str) -> Residue:
        """Build from ``name,dot_bracket,num,chain_id[,i_code]``; a new uuid is made."""
        spl = s.split(",")
        if len(spl) < 4:
            raise SecondaryStructureError(
                f"cannot build secondary_structure::Residue from str: {s}"
            )
        i_code = spl[4] if len(spl) == 5 else ""
        return cls(spl[0], spl[1], int(spl[2]), spl[3], Uuid(), i_code)

    def copy(self) -> Residue:
        """Return an independent residue with the same fields and uuid."""
        return Residue(
            self.name, self.dot_bracket, self.num, self.chain_id, self.uuid, self.i_code
        )

    @property
    def name(self) -> str:
        return convert_res_type_to_str(self.res_type)

    @name.setter
    def name(self, value: str) -> None:
        self.res_type = convert_res_name_to_type(value[:1])

    def to_str(self) -> str:
        return f"{self.name},{self.dot_bracket},{self.num},{self.chain_id},{self.i_code}"

    def __repr__(self) -> str:
        return f"Residue({self.to_str()!r})"