""" DistanceAgent takes a problem Instance and precomputes every distance that route construction and local
search will ask for: the full node-to-node matrix, the charging-station detour candidates of every edge,
and per-customer depot / customer / station distances (customer pairs filtered by a feasibility
predicate). After the constructor returns, every query is a read against immutable tables, so a single
agent can be shared between threads.

Queries identify nodes by the model objects of the instance (any node with the same kind and id resolves
to the same entry). Nodes or customers that were not in the instance at construction time raise
UnknownNodeError / UnknownCustomerError; empty candidate lists and zero distances are ordinary results. """

from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..constraints import PreprocessingChecker, ViolatesFn
from ..distance import DistanceFn, euclidean_distance
from ..errors import UnknownCustomerError
from ..models import Customer, Instance, PrecomputeConfig
from ..models.node import Node
from .builders import (
    Matrix,
    NodeDistance,
    build_charging_candidates,
    build_customer_relations,
    build_distance_matrix,
)
from .node_index import NodeIndex

logger = logging.getLogger(__name__)


class DistanceAgent:
    def __init__(
        self,
        inst: Instance,
        distance_fn: Optional[DistanceFn] = None,
        violates_fn: Optional[ViolatesFn] = None,
        config: Optional[PrecomputeConfig] = None,
    ):
        self.instance: Instance = inst
        self.config: PrecomputeConfig = config or PrecomputeConfig()
        distance_fn = distance_fn or euclidean_distance
        violates_fn = violates_fn or PreprocessingChecker(inst, distance_fn)

        # Build everything into locals first; attributes are only set once all builders succeeded
        node_index = NodeIndex(inst)
        relations = build_customer_relations(inst, distance_fn, violates_fn)
        matrix = build_distance_matrix(node_index, distance_fn, self.config.verify_symmetry)
        candidates = build_charging_candidates(node_index, matrix, self.config)

        self.node_index: NodeIndex = node_index
        self._matrix: Matrix = matrix
        self._candidates = candidates
        self._depot_distances = MappingProxyType(relations.depot_distances)
        self._customer_distances = MappingProxyType(relations.customer_distances)
        self._station_distances = MappingProxyType(relations.station_distances)
        self._folded_customer_ids = {cid.lower(): cid for cid in relations.customer_distances}

        logger.info(
            "Precomputed distances: %d customers, %d stations, dimension %d",
            len(inst.customers), len(inst.charging_stations), node_index.dimension,
        )

    # ---------- read-only tables ----------
    @property
    def dimension(self) -> int:
        return self.node_index.dimension

    @property
    def distance_matrix(self) -> Matrix:
        return self._matrix

    @property
    def depot_distances(self) -> Mapping[str, float]:
        return self._depot_distances

    @property
    def customer_distances(self) -> Mapping[str, Tuple[NodeDistance, ...]]:
        return self._customer_distances

    @property
    def station_distances(self) -> Mapping[str, Tuple[NodeDistance, ...]]:
        return self._station_distances

    # ---------- queries ----------
    def direct_distance(self, a: Node, b: Node) -> float:
        return self._matrix[self.node_index.index_of(a)][self.node_index.index_of(b)]

    def max_distance_to_depot(self) -> float:
        max_distance = 0.0
        for d in self._matrix[self.node_index.depot_index]:
            if d > max_distance:
                max_distance = d
        return max_distance

    def distance_to_depot(self, customer: Customer) -> float:
        return self._depot_distances[self._customer_id(customer, self._depot_distances)]

    def customer_to_customer_distance(self, from_customer: Customer, to_customer: Customer) -> float:
        """
        Distance stored in from_customer's filtered list for to_customer (ids compared case-insensitively).
        Returns 0.0 when the pair was filtered out; raises UnknownCustomerError when either customer is
        not registered. Instance validation keeps ids unique ignoring case, so at most one entry matches.
        """
        pairs = self._customer_distances[self._customer_id(from_customer, self._customer_distances)]
        target = to_customer.id.lower() if getattr(to_customer, "kind", None) == Customer.kind else None
        if target not in self._folded_customer_ids:
            raise UnknownCustomerError(getattr(to_customer, "key", to_customer))
        return sum((p.distance for p in pairs if p.node.id.lower() == target), 0.0)

    def nearest_customers(self, customer: Customer) -> Tuple[NodeDistance, ...]:
        """All entries tied at the minimum of the customer's filtered list; UnknownCustomerError for non-customers."""
        return _all_at_minimum(self._customer_distances[self._customer_id(customer, self._customer_distances)])

    def nearest_charging_stations(self, customer: Customer) -> Tuple[NodeDistance, ...]:
        return _all_at_minimum(self._station_distances[self._customer_id(customer, self._station_distances)])

    def charging_candidates_for_edge(self, from_node: Node, to_node: Node) -> Tuple[NodeDistance, ...]:
        return self._candidates[self.node_index.index_of(from_node)][self.node_index.index_of(to_node)]

    # ---------- helpers ----------
    @staticmethod
    def _customer_id(node: Node, table: Mapping) -> str:
        key = getattr(node, "key", node)
        if getattr(node, "kind", None) != Customer.kind or node.id not in table:
            raise UnknownCustomerError(key)
        return node.id


def _all_at_minimum(pairs: Tuple[NodeDistance, ...]) -> Tuple[NodeDistance, ...]:
    if not pairs:
        return ()
    best = min(p.distance for p in pairs)
    return tuple(p for p in pairs if p.distance == best)
