""" NodeIndex assigns every node of an Instance a dense, 0-based integer index.

Customers come first (in instance order), then charging stations, and the depot is appended last,
so dimension == customers + stations + 1. The mapping is fixed at construction: nodes that were not
part of the instance then can never be resolved later. """

from __future__ import annotations
from typing import Dict, List, Tuple

from ..errors import IndexOutOfRangeError, UnknownNodeError
from ..models import Instance
from ..models.node import Node


class NodeIndex:
    def __init__(self, inst: Instance):
        nodes: List[Node] = inst.nodes
        self._nodes: Tuple[Node, ...] = tuple(nodes)
        self._index: Dict[Tuple[str, str], int] = {n.key: i for i, n in enumerate(nodes)}
        self.depot_index: int = len(nodes) - 1
        self.station_indices = range(len(inst.customers), self.depot_index)

    @property
    def dimension(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._nodes

    @property
    def depot(self) -> Node:
        return self._nodes[self.depot_index]

    @property
    def stations(self) -> Tuple[Node, ...]:
        return tuple(self._nodes[i] for i in self.station_indices)

    def __contains__(self, node: Node) -> bool:
        return getattr(node, "key", None) in self._index

    def index_of(self, node: Node) -> int:
        try:
            return self._index[node.key]
        except (KeyError, AttributeError) as e:
            raise UnknownNodeError(getattr(node, "key", node)) from e

    def node_at(self, idx: int) -> Node:
        if not 0 <= idx < len(self._nodes):
            raise IndexOutOfRangeError(f"Node index {idx} outside 0..{len(self._nodes) - 1}")
        return self._nodes[idx]

    def lookup(self, kind: str, node_id: str) -> Node:
        """Resolve a (kind, id) reference, e.g. ("customer", "C3"), to the registered node."""
        try:
            return self._nodes[self._index[(kind, str(node_id))]]
        except KeyError as e:
            raise UnknownNodeError((kind, str(node_id))) from e
