"""
Pydantic schemas for the Skyroute query surface.

Records supplied by an external loader and results returned to a presentation
layer are defined here. The network core itself works on plain tuples and
dataclasses; these models are what crosses the library boundary.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Input Records
# ============================================================================


class CityRecord(BaseModel):
    """One city as supplied by a loader."""

    external_id: int = Field(..., description="Externally assigned city identifier")
    display_name: str = Field("", description="Human-friendly city name")

    def as_tuple(self) -> tuple[int, str]:
        return self.external_id, self.display_name


class RouteRecord(BaseModel):
    """One undirected route between two cities.

    Cost sign is not validated here; negative costs are accepted structurally but
    break cheapest-path guarantees.
    """

    source_id: int
    destination_id: int
    cost: int = Field(..., description="Route cost (non-negative)")

    def as_tuple(self) -> tuple[int, int, int]:
        return self.source_id, self.destination_id, self.cost


class NetworkState(BaseModel):
    """Already-parsed network data, validated before the network is built.

    Record order matters: city order defines internal positions and route order
    defines arc order in every adjacency list.
    """

    cities: List[CityRecord] = Field(default_factory=list)
    routes: List[RouteRecord] = Field(default_factory=list)


# ============================================================================
# Query Results
# ============================================================================


class QueryStatus(str, Enum):
    """Named outcome of a query.

    Not-found outcomes come from user-supplied identifiers and are expected, not
    errors. ``NO_PATH`` means both cities exist but no route chain joins them.
    """

    OK = "ok"
    NOT_FOUND = "not_found"
    SOURCE_NOT_FOUND = "source_not_found"
    DESTINATION_NOT_FOUND = "destination_not_found"
    NO_PATH = "no_path"


class ConnectionsResult(BaseModel):
    """Cities reachable by a single route from ``city``."""

    status: QueryStatus
    city: Optional[str] = Field(None, description="Name of the queried city when found")
    connections: List[str] = Field(
        default_factory=list,
        description="Neighbor names in arc insertion order; duplicates kept for parallel routes",
    )

    @property
    def ok(self) -> bool:
        return self.status is QueryStatus.OK


class PathResult(BaseModel):
    """Cheapest path between two cities, or the reason there is none."""

    status: QueryStatus
    cities: List[str] = Field(default_factory=list, description="City names from source to destination")
    positions: List[int] = Field(default_factory=list, description="Internal positions along the path")
    total_cost: Optional[int] = Field(None, description="Sum of route costs along the path")

    @property
    def ok(self) -> bool:
        return self.status is QueryStatus.OK

    def summary(self) -> str:
        """Render ``"A -> B -> C (total cost 8)"`` or a short failure message."""
        if self.status is QueryStatus.OK:
            return f"{' -> '.join(self.cities)} (total cost {self.total_cost})"
        messages = {
            QueryStatus.SOURCE_NOT_FOUND: "Source not found.",
            QueryStatus.DESTINATION_NOT_FOUND: "Destination not found.",
            QueryStatus.NO_PATH: "No flight path exists.",
        }
        return messages.get(self.status, "City not found.")
