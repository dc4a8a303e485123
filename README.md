# rnastruct

A library for RNA secondary structure. It turns a sequence and its
dot-bracket notation into residues, chains and basepairs, splits the
structure into motifs (helices, hairpins, two-way and n-way junctions,
single strands), gathers them into a pose, and checks designed sequences
against constraints.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parsing a structure

```python
from rnastruct.parser import Parser

parser = Parser()
motifs = parser.parse_to_motifs("GGGAAACCC", "(((...)))")
for m in motifs:
    print(m.mtype, m.sequence(), m.dot_bracket(), m.end_ids)

whole = parser.parse_to_motif("GGGAAACCC", "(((...)))")

pose = parser.parse_to_pose("GGGAAACCC", "(((...)))")
print(pose.sequence(), pose.dot_bracket())
print(len(pose.helices()))
```

`Parser.parse` returns the underlying `SecondaryStructureChainGraph`, whose
nodes (`ChainGraphNode`) hold either one paired residue or a run of
unpaired residues.

Chains are separated with `&` (or `+`) in both the sequence and the
dot-bracket string, for example `"GG&CC"` with `"((&))"`. Residue letters
may be `A C G U T` or the ambiguity codes `N W S M K R Y B D H V`; `T` is
read as `U`. Invalid input raises `SecondaryStructureError`
(from `rnastruct.residue`).

## Structures, residues and basepairs

```python
from rnastruct.structure import Structure
from rnastruct.basepair import Basepair, get_bp_type

s = Structure.from_sequence("GGAAACC", "((...))")
print(s.sequence(), s.dot_bracket())
r1 = s.get_residue(1, "A", "")
r7 = s.get_residue(7, "A", "")
print(r1.to_str())

bp = Basepair(r1, r7)
print(bp.name(), get_bp_type(bp))
```

Structures, chains, residues and motifs can be written to strings with
`to_str()` and read back with the matching `from_str()` class method.
Reading back gives new identifiers (`rnastruct.ids.Uuid`) to residues and
basepairs; `copy()` keeps them.

## Changing a sequence

```python
pose.replace_sequence("GAGAAACUC")
print(pose.sequence())
```

The new sequence must have the same number of chains and residues.
`Pose.replace_sequence` also recomputes the end identifiers of every motif
(see `rnastruct.end_id.assign_end_id`). `rnastruct.end_id.fill_basepairs_in_ss`
gives every `N`-`N` basepair of a pose a random Watson-Crick pair.

## Sequence constraints

```python
from rnastruct.sequence_constraint import SequenceConstraints

constraints = SequenceConstraints()
constraints.add_disallowed_sequence("AAAA")
constraints.add_gc_helix_stretch_limit(4)
print(constraints.violations(pose))
```

`violations` returns one count per constraint, in the order they were
added; it accepts a pose or a motif. `DisallowedSequence` and
`GCHelixStretchLimit` can also be used on their own, and
`rnastruct.sequence_tools` holds the underlying searches.

## Other utilities

- `rnastruct.motif_type`: the `MotifType` enum with `type_to_str` / `str_to_type`.
- `rnastruct.monte_carlo.MonteCarlo`: Metropolis acceptance with a temperature.
- `rnastruct.rng.RandomNumberGenerator`: seedable uniform floats and bounded integers.
- `rnastruct.vector.Vector` and `rnastruct.matrix.Matrix`: immutable 3D vector
  and 3x3 matrix types with arithmetic and string round trips.
- `rnastruct.ids.Uuid`: random 25-character identifiers.

## What it does not do

The package works on secondary structure only. It has no three-dimensional
atomic models, reads and writes no structure files (everything goes through
strings), does not predict folding, and provides no command-line tool.