# Defines the homogeneous electric Vehicle model used by the preprocessing feasibility rules.

from pydantic import BaseModel, field_validator       # Pydantic BaseModel and field-level validator


class Vehicle(BaseModel):                             # Vehicle data model
    capacity: float = float("inf")                    # Maximum load capacity
    battery_capacity: float = float("inf")            # Battery capacity (energy units)
    energy_consumption: float = 1.0                   # Energy used per distance unit
    speed: float = 1.0                                # Distance per time unit (τ = distance / speed)

    @field_validator("speed")
    @classmethod
    def _positive_speed(cls, v):
        if v <= 0:
            raise ValueError("speed must be positive")
        return v
