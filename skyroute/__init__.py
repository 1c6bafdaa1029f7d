"""
Skyroute - cheapest-route queries over a small weighted city network.

Build a network once from loader-supplied city and route records, then ask
which cities connect directly to a city and what the cheapest path between two
cities costs.

No file I/O, no interactive menu, no rendering.
Records are supplied by the caller; results are returned as values.
"""

__version__ = "0.1.0"

# Main query context
from .session import FlightNetwork

# Network core
from .network import (
    City,
    CityIndex,
    PositionOutOfRangeError,
    Arc,
    FlightGraph,
    UNREACHABLE,
    shortest_paths,
    reconstruct_path,
)
from .history import ActionHistory

# Boundary schemas
from .schemas import (
    CityRecord,
    RouteRecord,
    NetworkState,
    QueryStatus,
    ConnectionsResult,
    PathResult,
)

__all__ = [
    # Main class
    "FlightNetwork",
    # Network core
    "City",
    "CityIndex",
    "PositionOutOfRangeError",
    "Arc",
    "FlightGraph",
    "UNREACHABLE",
    "shortest_paths",
    "reconstruct_path",
    "ActionHistory",
    # Schemas
    "CityRecord",
    "RouteRecord",
    "NetworkState",
    "QueryStatus",
    "ConnectionsResult",
    "PathResult",
]
