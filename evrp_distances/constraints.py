""" Preprocessing feasibility rules for customer-to-customer arcs.

PreprocessingChecker decides, before any route is built, whether travelling directly from customer a
to customer b can ever be part of a feasible route. It applies the usual EVRPTW arc eliminations:

self arcs, combined demand above vehicle capacity, arrival at b after its due time even when leaving
a as early as possible, a depot -> a -> b -> depot tour that cannot finish inside the depot horizon,
and an arc longer than a full battery can cover.

The check is independent of any route under construction; it only looks at the instance. """

from __future__ import annotations
from typing import Callable, Optional

from .models import Customer, Instance
from .distance import DistanceFn, euclidean_distance

ViolatesFn = Callable[[Customer, Customer], bool]


class PreprocessingChecker:
    def __init__(self, inst: Instance, distance_fn: Optional[DistanceFn] = None):
        self.instance = inst
        self.depot = inst.depot
        self.vehicle = inst.vehicle
        self.distance_fn: DistanceFn = distance_fn or euclidean_distance
        self.speed = self.vehicle.speed if self.vehicle is not None else 1.0   # unit speed by default

    def __call__(self, a: Customer, b: Customer) -> bool:
        return self.violates(a, b)

    def _travel_time(self, a, b) -> float:
        return self.distance_fn(a, b) / self.speed

    def violates(self, a: Customer, b: Customer) -> bool:
        if a.id == b.id:
            return True
        return (self.violates_capacity(a, b)
                or self.violates_time_window(a, b)
                or self.violates_horizon(a, b)
                or self.violates_battery(a, b))

    def violates_capacity(self, a: Customer, b: Customer) -> bool:
        if self.vehicle is None:
            return False
        return a.demand + b.demand > self.vehicle.capacity

    def violates_time_window(self, a: Customer, b: Customer) -> bool:
        earliest_at_b = a.ready_time + a.service_time + self._travel_time(a, b)
        return earliest_at_b > b.due_time

    def violates_horizon(self, a: Customer, b: Customer) -> bool:
        if self.depot.due_time is None:
            return False
        t = max(self.depot.start_time + self._travel_time(self.depot, a), a.ready_time)
        t += a.service_time + self._travel_time(a, b)
        t = max(t, b.ready_time) + b.service_time + self._travel_time(b, self.depot)
        return t > self.depot.due_time

    def violates_battery(self, a: Customer, b: Customer) -> bool:
        if self.vehicle is None:
            return False
        return self.vehicle.energy_consumption * self.distance_fn(a, b) > self.vehicle.battery_capacity
