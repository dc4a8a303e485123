"""Kinds of structural motif and their text names."""

from __future__ import annotations

from enum import IntEnum


class MotifType(IntEnum):
    TWOWAY = 0
    NWAY = 1
    HAIRPIN = 2
    TCONTACT_HP_HP = 3
    TCONTACT_H_HP = 4
    TCONTACT_H_H = 5
    T_T = 6
    T_T_T = 7
    TWOWAY_SEGMENTS = 8
    HELIX = 9
    SSTRAND = 10
    TCONTACT = 11
    UNKNOWN = 99
    ALL = 999


_TYPE_NAMES = {
    MotifType.TWOWAY: "TWOWAY",
    MotifType.NWAY: "NWAY",
    MotifType.HAIRPIN: "HAIRPIN",
    MotifType.T_T: "2X_TWOWAY",
    MotifType.T_T_T: "3X_TWOWAY",
    MotifType.TWOWAY_SEGMENTS: "TWOWAY_SEGMENTS",
    MotifType.HELIX: "HELIX",
    MotifType.SSTRAND: "SSTRAND",
    MotifType.UNKNOWN: "UNKNOWN",
}

# SSTRAND has a name but is deliberately not parsed back.
_NAME_TYPES = {
    name: mtype for mtype, name in _TYPE_NAMES.items() if mtype != MotifType.SSTRAND
}


def type_to_str(mtype: MotifType) -> str:
    """Return the text name of a motif type."""
    try:
        return _TYPE_NAMES[MotifType(mtype)]
    except (KeyError, ValueError):
        raise ValueError(f"cannot identify type {mtype!r}") from None


def str_to_type(s: str) -> MotifType:
    """Return the motif type for a text name."""
    try:
        return _NAME_TYPES[s]
    except KeyError:
        raise ValueError(f"cannot identify str for type: {s!r}") from None