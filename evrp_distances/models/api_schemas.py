from typing import Dict, List, Literal
from pydantic import BaseModel, Field
from .instance import Instance
from .precompute import PrecomputeConfig


class NodeRef(BaseModel):
    kind: Literal["depot", "customer", "station"]
    id: str


class DistanceEntry(BaseModel):
    kind: str
    id: str
    distance: float


class DistancesRequest(BaseModel):
    instance: Instance
    config: PrecomputeConfig = PrecomputeConfig()


class DistancesResponse(BaseModel):
    status: str
    nodes: List[NodeRef] = Field(..., description="Nodes in matrix index order (depot last)")
    matrix: List[List[float]]
    max_distance_to_depot: float
    depot_distances: Dict[str, float]


class CandidatesRequest(BaseModel):
    instance: Instance
    from_node: NodeRef
    to_node: NodeRef
    config: PrecomputeConfig = PrecomputeConfig()


class CandidatesResponse(BaseModel):
    status: str
    candidates: List[DistanceEntry]


class NearestRequest(BaseModel):
    instance: Instance
    customer_id: str
    config: PrecomputeConfig = PrecomputeConfig()


class NearestResponse(BaseModel):
    status: str
    customers: List[DistanceEntry]
    charging_stations: List[DistanceEntry]
