"""Random 25-character identifiers."""

from __future__ import annotations

import string

from rnastruct.rng import RandomNumberGenerator

ALPHABET = string.digits + string.ascii_uppercase
ID_LENGTH = 25


class Uuid:
    """An identifier made of digits and upper-case letters."""

    __slots__ = ("_value",)

    def __init__(self, value: str | None = None) -> None:
        if value is None:
            rng = RandomNumberGenerator()
            value = "".join(
                ALPHABET[rng.randrange(len(ALPHABET))] for _ in range(ID_LENGTH)
            )
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uuid):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Uuid) -> bool:
        if not isinstance(other, Uuid):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Uuid({self._value!r})"