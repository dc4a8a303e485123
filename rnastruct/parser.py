"""Parse sequence and dot-bracket strings into chain graphs, motifs and poses."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from rnastruct.basepair import Basepair
from rnastruct.chain import Chain
from rnastruct.end_id import assign_end_id
from rnastruct.motif import Motif
from rnastruct.motif_type import MotifType
from rnastruct.pose import Pose
from rnastruct.residue import Residue, SecondaryStructureError
from rnastruct.structure import Structure

_PARENT_SLOT = 0
_CHILD_SLOT = 1
_PAIR_SLOT = 2
_SLOT_COUNT = 3


class NodeType(IntEnum):
    UNPAIRED = 0
    PAIRED = 1


@dataclass
class NodeData:
    """The residues held by one graph node and whether they are paired."""

    residues: list[Residue]
    type: NodeType


@dataclass(eq=False)
class ChainGraphNode:
    """A node of the chain graph; slot 0 is the parent, 1 the child, 2 the pair."""

    index: int
    data: NodeData
    connections: list[ChainGraphNode | None] = field(
        default_factory=lambda: [None] * _SLOT_COUNT
    )

    def partner(self, slot: int) -> ChainGraphNode | None:
        """Return the node connected at ``slot``, or None."""
        return self.connections[slot]

    def __repr__(self) -> str:
        nums = ",".join(str(r.num) for r in self.data.residues)
        return f"ChainGraphNode({self.index}, {self.data.type.name}, [{nums}])"


class SecondaryStructureChainGraph:
    """Residues grouped into nodes linked along the backbone and across pairs."""

    def __init__(self) -> None:
        self._nodes: list[ChainGraphNode] = []

    def __iter__(self) -> Iterator[ChainGraphNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> list[ChainGraphNode]:
        return self._nodes

    def get_node(self, index: int) -> ChainGraphNode:
        if not 0 <= index < len(self._nodes):
            raise SecondaryStructureError(f"no node with index {index}")
        return self._nodes[index]

    def _connect(
        self, parent: ChainGraphNode, child: ChainGraphNode, p_slot: int, c_slot: int
    ) -> None:
        if parent.connections[p_slot] is not None:
            raise SecondaryStructureError(
                f"slot {p_slot} of node {parent.index} is already connected"
            )
        if child.connections[c_slot] is not None:
            raise SecondaryStructureError(
                f"slot {c_slot} of node {child.index} is already connected"
            )
        parent.connections[p_slot] = child
        child.connections[c_slot] = parent

    def add_chain(
        self, data: NodeData, parent_index: int = -1, orphan: bool = False
    ) -> int:
        """Add a node after ``parent_index`` (the last node if -1); return its index."""
        parent = self._nodes[-1] if self._nodes else None
        if parent_index != -1:
            parent = self.get_node(parent_index)
        node = ChainGraphNode(len(self._nodes), data)
        self._nodes.append(node)
        if parent is not None and not orphan:
            self._connect(parent, node, _CHILD_SLOT, _PARENT_SLOT)
        return node.index

    def get_node_by_res(self, res: Residue | None) -> int:
        """Return the index of the node holding ``res``, or -1."""
        if res is None:
            return -1
        for node in self._nodes:
            if any(r.uuid == res.uuid for r in node.data.residues):
                return node.index
        return -1

    def pair_res(self, n_i: int, n_j: int) -> None:
        """Connect two paired nodes through their pair slots."""
        node_i = self.get_node(n_i)
        node_j = self.get_node(n_j)
        if (
            node_i.data.type != NodeType.PAIRED
            or node_j.data.type != NodeType.PAIRED
        ):
            raise SecondaryStructureError("unpaired node is being paired")
        self._connect(node_i, node_j, _PAIR_SLOT, _PAIR_SLOT)


class Parser:
    """Turns sequence and dot-bracket notation into structural elements."""

    def __init__(self) -> None:
        self.reset()
        self._seen: set[ChainGraphNode] = set()

    def reset(self) -> None:
        """Forget the structure, residues and pairs of the last parse."""
        self._structure: Structure | None = None
        self._residues: list[Residue] = []
        self._positions: dict[Residue, int] = {}
        self._pairs: list[Basepair] = []

    def parse(self, sequence: str, dot_bracket: str) -> SecondaryStructureChainGraph:
        """Build the chain graph of a sequence and its dot bracket."""
        self._structure = Structure.from_sequence(sequence, dot_bracket)
        self._residues = self._structure.residues()
        self._positions = {r: i for i, r in enumerate(self._residues)}
        self._pairs = []

        g = SecondaryStructureChainGraph()
        res: list[Residue] = []
        for r in self._residues:
            is_start_res = self._start_of_chain(r)
            if r.dot_bracket == ".":
                res.append(r)
            elif r.dot_bracket == "(":
                if res:
                    self._add_unpaired_residues_to_graph(g, res, is_start_res)
                    res = []
                self._add_paired_res_to_graph(g, r, is_start_res)
            elif r.dot_bracket == ")":
                if res:
                    self._add_unpaired_residues_to_graph(g, res, is_start_res)
                    res = []
                pair = self._get_previous_pair(r)
                new_data = NodeData([r], NodeType.PAIRED)
                parent_index = g.get_node_by_res(self._previous_res(r))
                pair_res_pos = g.get_node_by_res(pair.res1)
                pos = g.add_chain(new_data, parent_index, is_start_res)
                g.pair_res(pair_res_pos, pos)
            else:
                raise SecondaryStructureError(
                    f"unexpected symbol in dot bracket: {r.dot_bracket}"
                )
        if res:
            self._add_unpaired_residues_to_graph(g, res, False)
        return g

    def parse_to_motifs(self, sequence: str, dot_bracket: str) -> list[Motif]:
        """Split a structure into helices, hairpins, junctions and strands."""
        return self._parse_to_motifs(self.parse(sequence, dot_bracket))

    def parse_to_motif(self, sequence: str, dot_bracket: str) -> Motif:
        """Return the whole structure as a single motif."""
        self.parse(sequence, dot_bracket)
        return self._build_motif(self._structure)

    def parse_to_pose(self, sequence: str, dot_bracket: str) -> Pose:
        """Return a pose of the whole structure holding its motifs."""
        motifs = self.parse_to_motifs(sequence, dot_bracket)
        m = self._build_motif(self._structure)
        return Pose.from_rna_structure(m, motifs)

    def _add_unpaired_residues_to_graph(
        self, g: SecondaryStructureChainGraph, res: list[Residue], is_start_res: bool
    ) -> None:
        parent_index = g.get_node_by_res(self._previous_res(res[0]))
        g.add_chain(NodeData(list(res), NodeType.UNPAIRED), parent_index, is_start_res)

    def _add_paired_res_to_graph(
        self, g: SecondaryStructureChainGraph, r: Residue, is_start_res: bool
    ) -> None:
        pair_res = self._get_bracket_pair(r)
        parent_index = g.get_node_by_res(self._previous_res(r))
        self._pairs.append(Basepair(r, pair_res))
        g.add_chain(NodeData([r], NodeType.PAIRED), parent_index, is_start_res)

    def _get_previous_pair(self, r: Residue) -> Basepair:
        for p in self._pairs:
            if p.res2.uuid == r.uuid:
                return p
        raise SecondaryStructureError(
            f"cannot parse secondary structure: \n{self._structure.sequence()}\n"
            f"{self._structure.dot_bracket()}\n position: {r.num} has no matching pair"
        )

    def _previous_res(self, r: Residue) -> Residue | None:
        i = self._positions[r]
        return None if i == 0 else self._residues[i - 1]

    def _start_of_chain(self, r: Residue) -> bool:
        return any(c.first() is r for c in self._structure.chains)

    def _get_bracket_pair(self, r_start: Residue) -> Residue:
        bracket_count = 0
        for r in self._residues[self._positions[r_start]:]:
            if r.dot_bracket == "(":
                bracket_count += 1
            elif r.dot_bracket == ")":
                bracket_count -= 1
                if bracket_count == 0:
                    return r
        raise SecondaryStructureError("cannot find pair in _get_bracket_pair")

    def _parse_to_motifs(self, g: SecondaryStructureChainGraph) -> list[Motif]:
        motifs: list[Motif] = []
        self._seen = set()
        for n in g:
            if n.partner(_CHILD_SLOT) is None:
                continue
            if n.data.type == NodeType.UNPAIRED:
                continue
            if n.data.residues[0].dot_bracket != "(":
                continue
            mtype, nodes = self._walk_nodes(n)
            self._seen.update(nodes)
            if mtype == MotifType.UNKNOWN:
                continue
            motifs.append(self._build_motif(self._structure_from_nodes(nodes)))

        for n in g:
            if n not in self._seen:
                motifs.append(self._build_motif(self._structure_from_nodes([n])))
        return motifs

    @staticmethod
    def _structure_from_nodes(nodes: Sequence[ChainGraphNode]) -> Structure:
        res = [r for n in nodes for r in n.data.residues]
        chains: list[Chain] = []
        current = [res[0]]
        for prev, r in zip(res, res[1:]):
            if r.num - prev.num != 1:
                chains.append(Chain(current))
                current = []
            current.append(r)
        chains.append(Chain(current))
        return Structure(chains)

    def _walk_nodes(
        self, n: ChainGraphNode
    ) -> tuple[MotifType, list[ChainGraphNode]]:
        nodes: list[ChainGraphNode] = []
        current: ChainGraphNode | None = n
        while current is not None:
            nodes.append(current)
            nxt = current.partner(_CHILD_SLOT)
            if nxt is None:
                break
            cur_type = current.data.type
            next_type = nxt.data.type
            if cur_type == NodeType.PAIRED and next_type == NodeType.PAIRED:
                cur1, cur2 = self._basepair_res(current)
                next1, next2 = self._basepair_res(nxt)
                if cur1.num == next1.num - 1 and cur2.num == next2.num + 1:
                    nodes.extend(
                        [nxt, nxt.partner(_PAIR_SLOT), current.partner(_PAIR_SLOT)]
                    )
                    return MotifType.HELIX, nodes
                nodes.append(nxt)
                if self._is_a_bp(nodes[0], nxt):
                    return MotifType.NWAY, nodes
                nxt = nxt.partner(_PAIR_SLOT)
            elif cur_type == NodeType.PAIRED and next_type == NodeType.UNPAIRED:
                if any(x is nxt for x in nodes):
                    return MotifType.UNKNOWN, nodes
            elif cur_type == NodeType.UNPAIRED and next_type == NodeType.PAIRED:
                if self._is_a_bp(nodes[0], nxt):
                    nodes.append(nxt)
                    if len(nodes) == 3:
                        return MotifType.HAIRPIN, nodes
                    if len(nodes) == 5:
                        return MotifType.TWOWAY, nodes
                    return MotifType.NWAY, nodes
                if any(x is nxt for x in nodes):
                    return MotifType.UNKNOWN, nodes
                nodes.append(nxt)
                nxt = nxt.partner(_PAIR_SLOT)
            current = nxt
        return MotifType.UNKNOWN, nodes

    @staticmethod
    def _basepair_res(n: ChainGraphNode) -> tuple[Residue, Residue]:
        if n.data.type == NodeType.UNPAIRED:
            raise SecondaryStructureError(
                "cannot get basepair res it is not a basepair"
            )
        partner = n.partner(_PAIR_SLOT)
        if partner is None:
            raise SecondaryStructureError("paired node has no partner")
        return n.data.residues[0], partner.data.residues[0]

    @staticmethod
    def _is_a_bp(n1: ChainGraphNode, n2: ChainGraphNode) -> bool:
        return n1.partner(_PAIR_SLOT) is n2

    def _build_motif(self, struc: Structure) -> Motif:
        res = set(struc.residues())
        bps = [bp for bp in self._pairs if bp.res1 in res and bp.res2 in res]
        chain_ends = set()
        for c in struc.chains:
            chain_ends.add(c.first())
            chain_ends.add(c.last())
        ends = [bp for bp in bps if bp.res1 in chain_ends and bp.res2 in chain_ends]

        m = Motif(struc, bps, ends)
        if ends:
            m.end_ids = [assign_end_id(m, end) for end in m.ends]

        if len(m.residues()) == 4:
            m.mtype = MotifType.HELIX
        elif len(m.chains()) == 2:
            m.mtype = MotifType.TWOWAY
        elif len(m.chains()) == 1 and not m.basepairs:
            m.mtype = MotifType.SSTRAND
        elif len(m.chains()) == 1:
            m.mtype = MotifType.HAIRPIN
        else:
            m.mtype = MotifType.NWAY
        return m