# Defines the ChargingStation model: a node where electric vehicles can recharge mid-route.

from typing import ClassVar, Optional
from .node import Node


class ChargingStation(Node):
    kind: ClassVar[str] = "station"

    recharging_rate: Optional[float] = None         # Energy per time unit (None = not modelled)
