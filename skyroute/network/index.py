"""Ordered lookup from external city identifiers to dense internal positions.

Cities arrive with externally chosen integer ids that are neither contiguous nor
sorted. Adjacency storage wants a dense ``0..n-1`` position instead, so the index
hands out positions in insertion order and answers ``find(external_id)`` with a
binary search over a sorted key array.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple


class PositionOutOfRangeError(IndexError):
    """Raised when an internal position outside ``[0, node_count)`` is used.

    Positions are produced by the index itself, so a bad one is a programming
    error rather than a user input problem.
    """

    def __init__(self, position: int, node_count: int) -> None:
        self.position = position
        self.node_count = node_count
        super().__init__(
            f"Position {position} out of range for network with {node_count} cities"
        )


def check_position(position: int, node_count: int) -> None:
    """Raise ``PositionOutOfRangeError`` unless ``0 <= position < node_count``."""
    # Negative positions would silently wrap with list indexing.
    if not 0 <= position < node_count:
        raise PositionOutOfRangeError(position, node_count)


@dataclass(frozen=True)
class City:
    """One location in the network."""

    external_id: int
    display_name: str
    position: int


class CityIndex:
    """Read-mostly map of ``external_id -> City`` built once from input records.

    Duplicate ids keep the first record seen. A skipped duplicate does not consume
    a position, so positions always form the contiguous range ``[0, len(index))``.
    """

    def __init__(self) -> None:
        # Parallel arrays sorted by external id, searched with bisect.
        self._keys: List[int] = []
        self._sorted: List[City] = []
        # Cities by position (insertion order).
        self._cities: List[City] = []
        # Records dropped during build as (external_id, display_name, reason).
        self.skipped: List[Tuple[int, str, str]] = []

    @classmethod
    def build(
        cls,
        records: Iterable[Tuple[int, str]],
        *,
        capacity: Optional[int] = None,
    ) -> "CityIndex":
        """Insert ``(external_id, display_name)`` records in order.

        Args:
            records: City records; input order defines position assignment
            capacity: Optional maximum number of cities to accept

        Returns:
            Fully built index, ready for lookups
        """
        index = cls()
        for external_id, display_name in records:
            if capacity is not None and len(index) >= capacity:
                index.skipped.append((external_id, display_name, "capacity"))
                continue
            if index._insert(external_id, display_name) is None:
                index.skipped.append((external_id, display_name, "duplicate"))
        return index

    def _insert(self, external_id: int, display_name: str) -> Optional[City]:
        slot = bisect_left(self._keys, external_id)
        if slot < len(self._keys) and self._keys[slot] == external_id:
            return None
        name = display_name.strip() if display_name else ""
        city = City(
            external_id=external_id,
            display_name=name or f"City{external_id}",
            position=len(self._cities),
        )
        self._keys.insert(slot, external_id)
        self._sorted.insert(slot, city)
        self._cities.append(city)
        return city

    def find(self, external_id: int) -> Optional[City]:
        """Return the city for ``external_id`` or None when the id is unknown."""
        slot = bisect_left(self._keys, external_id)
        if slot < len(self._keys) and self._keys[slot] == external_id:
            return self._sorted[slot]
        return None

    def city_at(self, position: int) -> City:
        check_position(position, len(self._cities))
        return self._cities[position]

    def ids(self) -> List[int]:
        """External ids in ascending order."""
        return list(self._keys)

    def __len__(self) -> int:
        return len(self._cities)

    def __contains__(self, external_id: object) -> bool:
        return isinstance(external_id, int) and self.find(external_id) is not None

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)
