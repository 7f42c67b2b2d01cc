from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from typing import Dict, Any, Iterable

from .models import (
    NodeRef,
    DistancesRequest, DistancesResponse,
    CandidatesRequest, CandidatesResponse,
    NearestRequest, NearestResponse,
)
from .agents import DistanceAgent, NodeDistance
from .errors import UnknownNodeError

app = FastAPI(title="EVRP Distance Precomputation", version="0.1")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_methods=["*"], allow_headers=["*"],
)


def _entries(pairs: Iterable[NodeDistance]) -> list:
    return [{"kind": p.node.kind, "id": p.node.id, "distance": p.distance} for p in pairs]


def _resolve(agent: DistanceAgent, ref: NodeRef):
    try:
        return agent.node_index.lookup(ref.kind, ref.id)
    except UnknownNodeError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "healthy"}


@app.post("/distances", response_model=DistancesResponse)
def endpoint_distances(req: DistancesRequest) -> Dict[str, Any]:
    agent = DistanceAgent(req.instance, config=req.config)
    return {
        "status": "ok",
        "nodes": [{"kind": n.kind, "id": n.id} for n in agent.node_index.nodes],
        "matrix": [list(row) for row in agent.distance_matrix],
        "max_distance_to_depot": agent.max_distance_to_depot(),
        "depot_distances": dict(agent.depot_distances),
    }


@app.post("/candidates", response_model=CandidatesResponse)
def endpoint_candidates(req: CandidatesRequest) -> Dict[str, Any]:
    agent = DistanceAgent(req.instance, config=req.config)
    a = _resolve(agent, req.from_node)
    b = _resolve(agent, req.to_node)
    return {"status": "ok", "candidates": _entries(agent.charging_candidates_for_edge(a, b))}


@app.post("/nearest", response_model=NearestResponse)
def endpoint_nearest(req: NearestRequest) -> Dict[str, Any]:
    agent = DistanceAgent(req.instance, config=req.config)
    customer = _resolve(agent, NodeRef(kind="customer", id=req.customer_id))
    return {
        "status": "ok",
        "customers": _entries(agent.nearest_customers(customer)),
        "charging_stations": _entries(agent.nearest_charging_stations(customer)),
    }
