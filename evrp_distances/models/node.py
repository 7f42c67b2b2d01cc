""" Shared behaviour for every node of an EVRP instance (depot, customer, charging station).

Every node has a string id and coordinates, given either as (x, y) or as location=[x, y].
The node kind plus its id form the node's stable key, which is the identity used by the
index space and by all precomputed distance mappings. """

from typing import ClassVar, List, Optional, Tuple              # Type hints for coordinates and the kind tag
from pydantic import BaseModel, field_validator, model_validator


class Node(BaseModel):                                          # Base model for anything a vehicle can visit
    kind: ClassVar[str] = "node"                                # Overridden by each concrete node type

    id: str                                                     # Stable identifier (unique within a kind)
    x: Optional[float] = None                                   # X-coordinate (optional if location[] is used)
    y: Optional[float] = None                                   # Y-coordinate (optional if location[] is used)
    location: Optional[List[float]] = None                      # Alternative coordinate format: [x, y]

    @field_validator("id", mode="before")                       # Accept integer ids from JSON payloads
    @classmethod
    def _coerce_id(cls, v):
        if isinstance(v, bool):
            raise ValueError("id must be a string or an integer")
        if isinstance(v, int):
            return str(v)
        return v

    @model_validator(mode="after")
    def _check_coords(self):
        has_loc = self.location is not None and len(self.location) >= 2
        has_xy = self.x is not None and self.y is not None
        if not (has_loc or has_xy):
            raise ValueError(f"Provide either (x,y) or location=[x,y] for {self.kind} {self.id}")
        return self

    @property
    def coords(self) -> Tuple[float, float]:                    # Unified coordinate accessor
        if self.location and len(self.location) >= 2:           # Prefer location[] if provided
            return float(self.location[0]), float(self.location[1])
        return float(self.x), float(self.y)

    @property
    def key(self) -> Tuple[str, str]:                           # Identity used by every lookup table
        return (self.kind, self.id)
