""" Distance functions between instance nodes.

A distance function takes two nodes and returns a non-negative float. It must be symmetric and
depend only on the nodes' coordinates; the precomputed tables rely on both properties. """

import math
from typing import Callable

from .models.node import Node

DistanceFn = Callable[[Node, Node], float]


def euclidean_distance(a: Node, b: Node) -> float:
    ax, ay = a.coords
    bx, by = b.coords
    return math.hypot(ax - bx, ay - by)
