"""End identifiers for secondary-structure elements."""

from __future__ import annotations

from collections import deque

from rnastruct.basepair import Basepair
from rnastruct.chain import Chain
from rnastruct.residue import Residue, SecondaryStructureError
from rnastruct.rna_structure import RNAStructure
from rnastruct.rng import RandomNumberGenerator

_SYMBOL_CODES = {"(": "L", ")": "R", ".": "U"}
_PAIRS = ("AU", "UA", "GC", "CG")


def _first_pair(ss: RNAStructure, r: Residue) -> Basepair | None:
    bps = ss.get_basepair_by_uuid(r.uuid)
    return bps[0] if bps else None


def _chain_score(ss: RNAStructure, c: Chain, seen_bp: set[Basepair]) -> int:
    return sum(1 for r in c if _first_pair(ss, r) in seen_bp)


def _first_seen_position(ss: RNAStructure, c: Chain, seen_bp: set[Basepair]) -> int:
    for pos, r in enumerate(c):
        if _first_pair(ss, r) in seen_bp:
            return pos
    return 1000


def assign_end_id(ss: RNAStructure, end: Basepair) -> str:
    """Return the identifier of ``ss`` as seen when entering through ``end``."""
    if not any(end.uuid == e.uuid for e in ss.ends):
        raise SecondaryStructureError("supplied an end that is not in current ss element")

    all_chains = list(ss.chains())
    start = next(
        (c for c in all_chains if c.first() is end.res1 or c.first() is end.res2),
        None,
    )
    if start is None:
        raise SecondaryStructureError("no chain starts at the supplied end")
    all_chains = [c for c in all_chains if c is not start]
    open_chains: deque[Chain] = deque([start])

    seen_res: dict[Residue, int] = {}
    seen_bp: set[Basepair] = set()
    id_chains: list[tuple[str, str]] = []

    while open_chains:
        c = open_chains.popleft()
        structure = []
        sequence = []
        for r in c:
            symbol = "."
            bp = _first_pair(ss, r)
            if bp is not None:
                partner_r = bp.partner(r)
                if (
                    bp not in seen_bp
                    and r not in seen_res
                    and partner_r not in seen_res
                ):
                    seen_res[r] = 1
                    symbol = "("
                elif partner_r in seen_res:
                    if seen_res.setdefault(r, 0) <= 1:
                        symbol = ")"
                        seen_res[r] = 1
                        seen_res[partner_r] += 1
            structure.append(symbol)
            sequence.append(r.name)
            if bp is not None:
                seen_bp.add(bp)
        id_chains.append(("".join(sequence), "".join(structure)))

        if not all_chains:
            break
        scores = [_chain_score(ss, c2, seen_bp) for c2 in all_chains]
        best_score = max(scores)
        best_chains = [c2 for c2, s in zip(all_chains, scores) if s == best_score]
        best_chain = min(
            best_chains, key=lambda c2: _first_seen_position(ss, c2, seen_bp)
        )
        all_chains = [c2 for c2 in all_chains if c2 is not best_chain]
        open_chains.append(best_chain)

    parts = []
    for sequence, structure in id_chains:
        try:
            codes = "".join(_SYMBOL_CODES[e] for e in structure)
        except KeyError as exc:
            raise SecondaryStructureError(
                f"unexpected symbol in dot bracket notation: {exc.args[0]}"
            ) from None
        parts.append(f"{sequence}_{codes}")
    return "_".join(parts)


def fill_basepairs_in_ss(pose, rng: RandomNumberGenerator | None = None) -> None:
    """Give every N-N basepair a random Watson-Crick pair and refresh end ids."""
    rng = rng if rng is not None else RandomNumberGenerator()
    for bp in pose.basepairs:
        if bp.res1.name != "N" or bp.res2.name != "N":
            continue
        pair = _PAIRS[rng.randrange(len(_PAIRS))]
        bp.res1.name = pair[0]
        bp.res2.name = pair[1]
    for m in pose.motifs:
        m.end_ids = [assign_end_id(m, end) for end in m.ends]