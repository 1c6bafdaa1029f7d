"""Single-source cheapest-path search over a ``FlightGraph``.

Label-setting search (Dijkstra) with a binary heap frontier. The heap cannot
lower an entry's priority in place, so every improvement pushes a fresh entry
and entries popped with a cost above the current best are discarded as stale.
"""

from __future__ import annotations

import heapq
import math
from typing import List, Optional, Tuple, Union

from .graph import FlightGraph
from .index import check_position

# Cost recorded for positions the search never reached.
UNREACHABLE = math.inf

Cost = Union[int, float]


def shortest_paths(
    graph: FlightGraph,
    source: int,
    *,
    target: Optional[int] = None,
) -> Tuple[List[Cost], List[Optional[int]]]:
    """Compute cheapest costs and predecessors from ``source``.

    Args:
        graph: Network to search; arc costs must be non-negative
        source: Internal position to start from
        target: Optional position at which to stop early. Once the target is
            settled its cost and predecessor chain are final; other entries may
            be incomplete.

    Returns:
        ``(costs, predecessors)`` lists sized to ``graph.node_count``.
        ``costs[p]`` is ``UNREACHABLE`` for positions with no route from
        ``source``; ``predecessors[p]`` is None for the source and for
        unreachable positions.

    Raises:
        PositionOutOfRangeError: If ``source`` or ``target`` is not a valid position
    """
    node_count = graph.node_count
    check_position(source, node_count)
    if target is not None:
        check_position(target, node_count)

    costs: List[Cost] = [UNREACHABLE] * node_count
    predecessors: List[Optional[int]] = [None] * node_count
    costs[source] = 0
    # (cost, position) pairs; equal costs pop in position order, so runs are repeatable.
    frontier: List[Tuple[Cost, int]] = [(0, source)]

    while frontier:
        cost, position = heapq.heappop(frontier)
        if cost > costs[position]:
            continue
        if position == target:
            break
        for neighbor, arc_cost in graph.neighbors(position):
            candidate = cost + arc_cost
            # Strict comparison: the first arc to reach a cost keeps the predecessor.
            if candidate < costs[neighbor]:
                costs[neighbor] = candidate
                predecessors[neighbor] = position
                heapq.heappush(frontier, (candidate, neighbor))

    return costs, predecessors


def reconstruct_path(target: int, predecessors: List[Optional[int]]) -> List[int]:
    """Return positions from the search source to ``target``.

    Callers check ``costs[target]`` first; an unreachable target just yields
    ``[target]`` because it has no predecessor.
    """
    check_position(target, len(predecessors))
    path: List[int] = []
    current: Optional[int] = target
    while current is not None:
        path.append(current)
        current = predecessors[current]
    path.reverse()
    return path
