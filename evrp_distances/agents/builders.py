""" Builders for the precomputed distance tables.

build_customer_relations: per customer, the depot distance, the feasibility-filtered distances to
other customers and the unfiltered distances to every charging station (mappings keyed by customer id).
build_distance_matrix: the full node x node table over the NodeIndex space.
build_charging_candidates: for every ordered node pair (i, j), the charging stations usable as a detour
on the edge i -> j, read from the finished matrix.

All builders are pure: they return new tables and never touch the instance. """

from __future__ import annotations
import logging
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from ..constraints import ViolatesFn
from ..distance import DistanceFn
from ..errors import IndexOutOfRangeError
from ..models import Instance, PrecomputeConfig
from ..models.node import Node
from .node_index import NodeIndex

logger = logging.getLogger(__name__)

Matrix = Tuple[Tuple[float, ...], ...]


class NodeDistance(NamedTuple):
    node: Node
    distance: float


class CustomerRelations(NamedTuple):
    depot_distances: Dict[str, float]
    customer_distances: Dict[str, Tuple[NodeDistance, ...]]
    station_distances: Dict[str, Tuple[NodeDistance, ...]]


def build_customer_customer_distances(
    inst: Instance, distance_fn: DistanceFn, violates_fn: ViolatesFn
) -> Dict[str, Tuple[NodeDistance, ...]]:
    out: Dict[str, Tuple[NodeDistance, ...]] = {}
    for c in inst.customers:
        # self pairs are offered too; the predicate decides whether they survive
        out[c.id] = tuple(
            NodeDistance(t, distance_fn(c, t)) for t in inst.customers if not violates_fn(c, t)
        )
    return out


def build_customer_depot_distances(inst: Instance, distance_fn: DistanceFn) -> Dict[str, float]:
    return {c.id: distance_fn(inst.depot, c) for c in inst.customers}


def build_customer_station_distances(
    inst: Instance, distance_fn: DistanceFn
) -> Dict[str, Tuple[NodeDistance, ...]]:
    return {
        c.id: tuple(NodeDistance(s, distance_fn(c, s)) for s in inst.charging_stations)
        for c in inst.customers
    }


def build_customer_relations(
    inst: Instance, distance_fn: DistanceFn, violates_fn: ViolatesFn
) -> CustomerRelations:
    customer_distances = build_customer_customer_distances(inst, distance_fn, violates_fn)
    depot_distances = build_customer_depot_distances(inst, distance_fn)
    station_distances = build_customer_station_distances(inst, distance_fn)
    kept = sum(len(v) for v in customer_distances.values())
    logger.debug("Customer relations: %d customers, %d feasible customer pairs",
                 len(inst.customers), kept)
    return CustomerRelations(depot_distances, customer_distances, station_distances)


def build_distance_matrix(
    node_index: NodeIndex, distance_fn: DistanceFn, verify_symmetry: bool = False
) -> Matrix:
    n = node_index.dimension
    rows: List[List[float]] = [[0.0] * n for _ in range(n)]
    for a in node_index.nodes:
        i = node_index.index_of(a)
        if i >= n:
            raise IndexOutOfRangeError(f"Index {i} of {a.key} exceeds matrix dimension {n}")
        for b in node_index.nodes:
            j = node_index.index_of(b)
            if j >= n:
                raise IndexOutOfRangeError(f"Index {j} of {b.key} exceeds matrix dimension {n}")
            rows[i][j] = distance_fn(a, b)

    if verify_symmetry:
        for i in range(n):
            for j in range(i + 1, n):
                if rows[i][j] != rows[j][i]:
                    a, b = node_index.node_at(i), node_index.node_at(j)
                    raise ValueError(
                        f"Asymmetric distance between {a.key} and {b.key}: {rows[i][j]} != {rows[j][i]}"
                    )
    return tuple(tuple(r) for r in rows)


def charging_candidates_for(
    i: int, j: int, station_indices: Sequence[int], node_index: NodeIndex, matrix: Matrix
) -> List[NodeDistance]:
    """
    Charging stations usable as a detour on the edge i -> j.

    A station qualifies when it is strictly closer than the edge length to the start node, and
    (independently) when it is strictly closer to the end node. Either way the recorded distance is
    measured from i, because a detour is inserted right after i. A station that passes both tests
    is listed twice. The result is stably sorted by recorded distance, so ties keep the order
    "near-start entries, then near-end entries", each in station order.
    """
    edge = matrix[i][j]
    stations: List[NodeDistance] = []
    for s in station_indices:
        if matrix[i][s] < edge:
            stations.append(NodeDistance(node_index.node_at(s), matrix[i][s]))
    for s in station_indices:
        if matrix[j][s] < edge:
            stations.append(NodeDistance(node_index.node_at(s), matrix[i][s]))
    stations.sort(key=lambda p: p.distance)
    return stations


def _dedupe(stations: List[NodeDistance]) -> List[NodeDistance]:
    seen = set()
    out = []
    for p in stations:
        if p.node.key not in seen:
            seen.add(p.node.key)
            out.append(p)
    return out


def build_charging_candidates(
    node_index: NodeIndex, matrix: Matrix, config: Optional[PrecomputeConfig] = None
) -> Tuple[Tuple[Tuple[NodeDistance, ...], ...], ...]:
    cfg = config or PrecomputeConfig()
    n = node_index.dimension
    station_indices = list(node_index.station_indices)
    table = []
    for i in range(n):
        row = []
        for j in range(n):
            stations = charging_candidates_for(i, j, station_indices, node_index, matrix)
            if cfg.deduplicate_charging_candidates:
                stations = _dedupe(stations)
            row.append(tuple(stations))
        table.append(tuple(row))
    logger.debug("Charging candidates: %d x %d edges over %d stations", n, n, len(station_indices))
    return tuple(table)
