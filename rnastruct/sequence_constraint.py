"""Constraints that a designed sequence must respect."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod

from rnastruct.motif import Motif
from rnastruct.pose import Pose
from rnastruct.sequence_tools import (
    find_gc_helix_stretches,
    find_longest_gc_helix_stretch_in_motif,
    find_res_types_in_motif,
    find_res_types_in_pose,
    get_res_types_from_sequence,
)


class SequenceConstraint(ABC):
    """A rule counting how often a pose or motif breaks it."""

    @abstractmethod
    def violations(self, target: Pose | Motif) -> int:
        """Return the number of violations in ``target``."""

    def violates_constraint(self, target: Pose | Motif) -> bool:
        """Return True if ``target`` has at least one violation."""
        return self.violations(target) > 0


class DisallowedSequence(SequenceConstraint):
    """Forbids a run of residues within any chain."""

    def __init__(self, disallowed_sequence: str) -> None:
        self.disallowed_res_types = get_res_types_from_sequence(disallowed_sequence)

    def violations(self, target: Pose | Motif) -> int:
        if isinstance(target, Pose):
            return find_res_types_in_pose(target, self.disallowed_res_types)
        return find_res_types_in_motif(target, self.disallowed_res_types)


class GCHelixStretchLimit(SequenceConstraint):
    """Limits how long a run of G/C may be in a helix strand."""

    def __init__(self, length: int) -> None:
        self.length = length

    def violations(self, target: Pose | Motif) -> int:
        if isinstance(target, Pose):
            return find_gc_helix_stretches(target, self.length)
        return 1 if find_longest_gc_helix_stretch_in_motif(target) > self.length else 0


class SequenceConstraints:
    """An ordered set of constraints evaluated together."""

    def __init__(self) -> None:
        self._constraints: list[SequenceConstraint] = []

    def add_sequence_constraint(self, seq_constraint: SequenceConstraint) -> None:
        """Add a copy of ``seq_constraint``."""
        self._constraints.append(copy.copy(seq_constraint))

    def add_disallowed_sequence(self, seq: str) -> None:
        self.add_sequence_constraint(DisallowedSequence(seq))

    def add_gc_helix_stretch_limit(self, length: int) -> None:
        self.add_sequence_constraint(GCHelixStretchLimit(length))

    def violations(self, target: Pose | Motif) -> list[int]:
        """Return the violation count of each constraint, in order added."""
        return [c.violations(target) for c in self._constraints]

    def __len__(self) -> int:
        return len(self._constraints)