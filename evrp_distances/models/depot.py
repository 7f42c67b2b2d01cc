""" The Depot Pydantic model represents the single start/end point of every route.

It holds the planning horizon: vehicles leave no earlier than start_time and, when due_time is
set, must be back by due_time. The preprocessing feasibility rules use the horizon to discard
customer pairs that can never be served on one route. """

from typing import ClassVar, Optional
from .node import Node


class Depot(Node):                                  # Depot node (entry point/exit for vehicles)
    kind: ClassVar[str] = "depot"

    start_time: float = 0.0                         # Earliest time vehicles can depart
    due_time: Optional[float] = None                # Latest return time (None = unbounded horizon)
