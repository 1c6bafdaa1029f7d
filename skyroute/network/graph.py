"""Adjacency-list storage for the flight network.

Each undirected route is stored as two directed arcs, one per direction. Arc
order per city is insertion order; parallel routes between the same pair are
kept as separate arcs.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, NamedTuple, Tuple

from .index import CityIndex, check_position


class Arc(NamedTuple):
    """One directed half of a route."""

    target: int
    cost: int


class FlightGraph:
    """Fixed-size adjacency lists indexed by internal position.

    Costs are expected to be non-negative integers. The store does not check the
    sign: a negative cost is stored as given but voids the shortest-path guarantee.
    """

    def __init__(self, node_count: int):
        if node_count < 0:
            raise ValueError(f"node_count must be non-negative (got {node_count})")
        self._adjacency: List[List[Arc]] = [[] for _ in range(node_count)]
        # Undirected routes accepted during build.
        self.route_count = 0
        # Route records dropped during build because an endpoint was unknown.
        self.skipped_routes: List[Tuple[int, int, int]] = []

    @classmethod
    def build(
        cls,
        node_count: int,
        routes: Iterable[Tuple[int, int, int]],
        index: CityIndex,
    ) -> "FlightGraph":
        """Build adjacency lists from ``(external_id_a, external_id_b, cost)`` routes.

        Both endpoints are resolved through ``index``; a route naming an unknown
        id on either end is skipped.
        """
        graph = cls(node_count)
        for source_id, destination_id, cost in routes:
            source = index.find(source_id)
            destination = index.find(destination_id)
            if source is None or destination is None:
                graph.skipped_routes.append((source_id, destination_id, cost))
                continue
            graph.add_route(source.position, destination.position, cost)
        return graph

    def add_route(self, a: int, b: int, cost: int) -> None:
        """Append the arc pair ``a -> b`` and ``b -> a``. Used during build only."""
        check_position(a, self.node_count)
        check_position(b, self.node_count)
        self._adjacency[a].append(Arc(b, cost))
        self._adjacency[b].append(Arc(a, cost))
        self.route_count += 1

    @property
    def node_count(self) -> int:
        return len(self._adjacency)

    def degree(self, position: int) -> int:
        check_position(position, self.node_count)
        return len(self._adjacency[position])

    def neighbors(self, position: int) -> Tuple[Arc, ...]:
        """Outgoing arcs of ``position`` as ``(to_position, cost)`` in insertion order."""
        check_position(position, self.node_count)
        return tuple(self._adjacency[position])

    def arcs(self) -> Iterator[Tuple[int, int, int]]:
        """Yield every directed arc as ``(from_position, to_position, cost)``."""
        for source, outgoing in enumerate(self._adjacency):
            for arc in outgoing:
                yield source, arc.target, arc.cost
