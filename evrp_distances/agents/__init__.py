# Index space over all instance nodes (customers, charging stations, depot last)
from .node_index import NodeIndex

# Table builders and the NodeDistance pair type they produce
from .builders import (
    NodeDistance,
    build_customer_relations,
    build_distance_matrix,
    build_charging_candidates,
    charging_candidates_for,
)

# DistanceAgent owns the precomputed tables and answers every distance query
from .distance_agent import DistanceAgent
