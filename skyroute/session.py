"""
Query context bundling the city index, flight graph and action history.

``FlightNetwork`` is the single object a front end holds: it is built once from
loader-supplied records and then answers the read-only queries. Every completed
query is recorded in the session's ``ActionHistory``; lookups that fail on an
unknown id or an unreachable destination are not recorded.

Usage:
    network = FlightNetwork.build(
        cities=[(1, "Alpha"), (2, "Beta"), (3, "Gamma")],
        routes=[(1, 2, 5), (2, 3, 3), (1, 3, 100)],
    )
    result = network.cheapest_path(1, 3)
    result.cities      # ["Alpha", "Beta", "Gamma"]
    result.total_cost  # 8
"""

from typing import Iterable, List, Optional, Tuple

from .config import Config
from .history import ActionHistory
from .logging_utils import log_error, log_info, log_success
from .network import UNREACHABLE, CityIndex, FlightGraph, reconstruct_path, shortest_paths
from .schemas import ConnectionsResult, NetworkState, PathResult, QueryStatus


class FlightNetwork:
    """One network and one action history for a running session."""

    def __init__(
        self,
        index: CityIndex,
        graph: FlightGraph,
        history: Optional[ActionHistory] = None,
    ):
        if graph.node_count != len(index):
            raise ValueError(
                f"Graph sized for {graph.node_count} cities but index holds {len(index)}"
            )
        self.index = index
        self.graph = graph
        self.history = history if history is not None else ActionHistory()

    @classmethod
    def build(
        cls,
        cities: Iterable[Tuple[int, str]],
        routes: Iterable[Tuple[int, int, int]],
        *,
        max_cities: Optional[int] = None,
        verbose: Optional[bool] = None,
    ) -> "FlightNetwork":
        """Build the index, then the graph, from raw loader records.

        Args:
            cities: ``(external_id, display_name)`` records; order assigns positions
            routes: ``(external_id_a, external_id_b, cost)`` undirected routes
            max_cities: City cap; defaults to ``Config.MAX_CITIES``
            verbose: Print load summaries; defaults to ``Config.VERBOSE``

        Duplicate city ids keep the first record, cities past the cap and routes
        naming unknown ids are dropped. None of these are errors.
        """
        if max_cities is None:
            Config.validate()
            max_cities = Config.MAX_CITIES
        if verbose is None:
            verbose = Config.VERBOSE

        index = CityIndex.build(cities, capacity=max_cities)
        graph = FlightGraph.build(len(index), routes, index)

        if verbose:
            log_success(f"Loaded {len(index)} cities.")
            duplicates = sum(1 for _, _, reason in index.skipped if reason == "duplicate")
            over_cap = len(index.skipped) - duplicates
            if duplicates:
                log_info(f"Skipped {duplicates} duplicate city record(s).")
            if over_cap:
                log_error(f"City limit of {max_cities} reached; ignored {over_cap} record(s).")
            log_success(f"Loaded {graph.route_count} routes (undirected).")
            if graph.skipped_routes:
                log_info(f"Skipped {len(graph.skipped_routes)} route(s) naming unknown cities.")

        return cls(index, graph)

    @classmethod
    def from_state(
        cls,
        state: NetworkState,
        *,
        max_cities: Optional[int] = None,
        verbose: Optional[bool] = None,
    ) -> "FlightNetwork":
        """Build from a validated ``NetworkState`` snapshot."""
        return cls.build(
            (city.as_tuple() for city in state.cities),
            (route.as_tuple() for route in state.routes),
            max_cities=max_cities,
            verbose=verbose,
        )

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_entities(self) -> List[Tuple[int, str]]:
        """All cities as ``(external_id, display_name)`` in insertion order."""
        entities = [(city.external_id, city.display_name) for city in self.index]
        self.history.append("Viewed all cities")
        return entities

    def list_links(self) -> List[Tuple[str, str, int]]:
        """Every stored arc as ``(from_name, to_name, cost)``.

        An undirected route appears twice, once per direction.
        """
        name = self._name_at
        links = [(name(source), name(target), cost) for source, target, cost in self.graph.arcs()]
        self.history.append("Viewed all routes")
        return links

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def direct_connections(self, external_id: int) -> ConnectionsResult:
        """Names of cities one route away from ``external_id``."""
        city = self.index.find(external_id)
        if city is None:
            return ConnectionsResult(status=QueryStatus.NOT_FOUND)

        connections = [self._name_at(arc.target) for arc in self.graph.neighbors(city.position)]
        self.history.append(f"Viewed direct connections of {city.display_name}")
        return ConnectionsResult(
            status=QueryStatus.OK,
            city=city.display_name,
            connections=connections,
        )

    def cheapest_path(self, source_id: int, destination_id: int) -> PathResult:
        """Minimum-cost route chain between two cities.

        Returns a ``PathResult`` whose status distinguishes an unknown source, an
        unknown destination and a destination with no connecting routes.
        """
        source = self.index.find(source_id)
        if source is None:
            return PathResult(status=QueryStatus.SOURCE_NOT_FOUND)
        destination = self.index.find(destination_id)
        if destination is None:
            return PathResult(status=QueryStatus.DESTINATION_NOT_FOUND)

        costs, predecessors = shortest_paths(
            self.graph, source.position, target=destination.position
        )
        if costs[destination.position] == UNREACHABLE:
            return PathResult(status=QueryStatus.NO_PATH)

        positions = reconstruct_path(destination.position, predecessors)
        self.history.append(
            f"Found cheapest flight path from {source.display_name} to {destination.display_name}"
        )
        return PathResult(
            status=QueryStatus.OK,
            cities=[self._name_at(position) for position in positions],
            positions=positions,
            total_cost=int(costs[destination.position]),
        )

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def log_entries(self) -> List[str]:
        """Recorded query descriptions, newest first."""
        return list(self.history.list_newest_first())

    def log_clear(self) -> None:
        self.history.clear()

    def _name_at(self, position: int) -> str:
        return self.index.city_at(position).display_name
