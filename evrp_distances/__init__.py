"""
EVRP distance precomputation.

Builds, once per instance, the node-to-node distance matrix, per-edge charging-station detour
candidates and feasibility-filtered customer distance lists, and answers nearest-neighbour queries
against them.
"""

from .models import Instance, Depot, Customer, ChargingStation, Vehicle, PrecomputeConfig
from .agents import DistanceAgent, NodeIndex, NodeDistance
from .constraints import PreprocessingChecker
from .distance import euclidean_distance
from .errors import IndexOutOfRangeError, UnknownNodeError, UnknownCustomerError

__version__ = "0.1.0"

__all__ = [
    "Instance",
    "Depot",
    "Customer",
    "ChargingStation",
    "Vehicle",
    "PrecomputeConfig",
    "DistanceAgent",
    "NodeIndex",
    "NodeDistance",
    "PreprocessingChecker",
    "euclidean_distance",
    "IndexOutOfRangeError",
    "UnknownNodeError",
    "UnknownCustomerError",
]
