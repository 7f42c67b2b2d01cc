from .node import Node
from .depot import Depot
from .customer import Customer
from .charging_station import ChargingStation
from .vehicle import Vehicle
from .instance import Instance
from .precompute import PrecomputeConfig

from .api_schemas import (
    NodeRef, DistanceEntry,
    DistancesRequest, DistancesResponse,
    CandidatesRequest, CandidatesResponse,
    NearestRequest, NearestResponse,
)
