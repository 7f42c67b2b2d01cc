""" The Instance model is the container for a full electric VRP input.
It holds:

Depot: the single depot every route starts and ends at.
Customers: ordered list of customer nodes with demand and time windows.
Charging stations: ordered list of recharging nodes.
Vehicle: optional homogeneous vehicle description (capacity, battery, speed).

The order of customers and stations is significant: it fixes the dense node index space and the
enumeration order of charging candidates. Instances are treated as frozen once built. """

from typing import List, Optional                  # Type hints for lists and optional fields
from pydantic import BaseModel, model_validator    # Pydantic base class and post-validation hook
from .depot import Depot
from .customer import Customer
from .charging_station import ChargingStation
from .vehicle import Vehicle


class Instance(BaseModel):                         # Top-level model describing a full EVRP instance
    depot: Depot                                   # Exactly one depot (required)
    customers: List[Customer]                      # Customers in index order (required)
    charging_stations: List[ChargingStation] = []  # Charging stations in index order
    vehicle: Optional[Vehicle] = None              # Vehicle used by preprocessing rules (optional)

    @model_validator(mode="after")
    def _check_unique_ids(self):
        for label, nodes in (("customer", self.customers), ("charging station", self.charging_stations)):
            seen = set()
            for n in nodes:
                # customer ids are matched case-insensitively by distance lookups
                nid = n.id.lower() if label == "customer" else n.id
                if nid in seen:
                    raise ValueError(f"Duplicate {label} id: {n.id}")
                seen.add(nid)
        return self

    @property
    def nodes(self) -> list:                       # All nodes in index order: customers, stations, depot
        return [*self.customers, *self.charging_stations, self.depot]
