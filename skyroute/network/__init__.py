"""Flight network core: identifier index, adjacency storage and path search."""

from .index import City, CityIndex, PositionOutOfRangeError
from .graph import Arc, FlightGraph
from .pathfinding import UNREACHABLE, reconstruct_path, shortest_paths

__all__ = [
    "City",
    "CityIndex",
    "PositionOutOfRangeError",
    "Arc",
    "FlightGraph",
    "UNREACHABLE",
    "shortest_paths",
    "reconstruct_path",
]
