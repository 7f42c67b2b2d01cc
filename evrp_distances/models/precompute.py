# Defines the options applied while precomputing distance tables.

from pydantic import BaseModel


class PrecomputeConfig(BaseModel):
    deduplicate_charging_candidates: bool = False   # Keep only the first entry per station in each edge list
    verify_symmetry: bool = False                   # Reject distance functions with d(a,b) != d(b,a)
