""" This file defines the Customer Pydantic model, which represents a customer in the EVRP instance.

It ensures:

Customers always have valid coordinates (inherited from Node).
Time windows are normalized into a [ready, due] list (single numbers/lists are expanded).
Provides .ready_time / .due_time accessors used by the preprocessing feasibility rules. """

from typing import ClassVar, List                      # Type hints for the time window list and the kind tag
from pydantic import field_validator                   # Field-level validator for window normalization
from .node import Node


class Customer(Node):                                  # Customer node (demand point)
    kind: ClassVar[str] = "customer"

    demand: float = 0.0                                # Quantity to deliver
    time_windows: List[float] = [0.0, float("inf")]    # [ready, due]; unbounded by default
    service_time: float = 0.0                          # Service duration at this customer

    @field_validator("time_windows", mode="before")    # Validate/normalize time_windows *before* assignment
    @classmethod
    def _coerce_time_windows(cls, v):
        if isinstance(v, (int, float)):                # If single number → interpret as [0, value]
            return [0.0, float(v)]
        if isinstance(v, list):
            if len(v) == 1:                            # Single-element list → expand to [0, value]
                return [0.0, float(v[0])]
            if len(v) == 2:                            # Two elements → cast to floats
                return [float(v[0]), float(v[1])]
        raise ValueError("time_windows must be [ready, due]")

    @property
    def ready_time(self) -> float:
        return float(self.time_windows[0])

    @property
    def due_time(self) -> float:
        return float(self.time_windows[1])
