"""Undirected weighted graph of towns and roads.

The graph keeps two views of the same roads:
- an adjacency mapping ``{town: {neighbour: road}}`` for traversal
- a mapping from the unordered endpoint pair to its road

Both views always hold the same Road instances. At most one road
connects any pair of towns.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Set

from ..domain.errors import DuplicateRoadError, InvalidRoadError, TownNotFoundError
from ..domain.models import PathOutcome, PathResult, Road, Town
from .dijkstra import dijkstra


@dataclass
class Graph:
    """Graph engine keyed by Town identity.

    Implements TownGraphPort. Lookups for unknown towns or roads return
    None/False; only structurally invalid requests raise.

    Every mutation and every multi-step read runs under one re-entrant
    lock, so a shortest-path traversal never observes a half-applied
    mutation.
    """

    _adjacency: Dict[Town, Dict[Town, Road]] = field(default_factory=dict, repr=False)
    _roads: Dict[FrozenSet[Town], Road] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ----------------- vertices -----------------

    def add_vertex(self, town: Optional[Town]) -> bool:
        """Add a town if it is not already a vertex.

        Returns:
            True if the town was newly added, False if it was already
            present or is not a Town.
        """
        if not isinstance(town, Town):
            return False
        with self._lock:
            if town in self._adjacency:
                return False
            self._adjacency[town] = {}
        self._logger.debug("Town added", extra={"town": town.name})
        return True

    def _has(self, town: object) -> bool:
        return isinstance(town, Town) and town in self._adjacency

    def contains_vertex(self, town: Optional[Town]) -> bool:
        return self._has(town)

    def remove_vertex(self, town: Optional[Town]) -> bool:
        """Remove a town and every road touching it.

        Returns:
            True if the town was present and removed.
        """
        with self._lock:
            if not self._has(town):
                return False
            neighbours = self._adjacency.pop(town)  # type: ignore[arg-type]
            for neighbour, road in neighbours.items():
                del self._adjacency[neighbour][town]  # type: ignore[index]
                del self._roads[road.endpoints]
        self._logger.debug(
            "Town removed",
            extra={"town": town.name, "roads_removed": len(neighbours)},  # type: ignore[union-attr]
        )
        return True

    def vertex_set(self) -> Set[Town]:
        with self._lock:
            return set(self._adjacency)

    # ----------------- edges -----------------

    def add_edge(self, town1: Town, town2: Town, weight: int, name: str) -> Road:
        """Connect two existing towns with a new road.

        Args:
            town1: First endpoint, must already be a vertex.
            town2: Second endpoint, must already be a vertex.
            weight: Non-negative integer distance.
            name: Road name.

        Returns:
            The created Road, reachable from both endpoints.

        Raises:
            InvalidRoadError: If an endpoint is None, the road would be a
                self-loop, or the weight is negative or not an integer.
            TownNotFoundError: If an endpoint is not a vertex.
            DuplicateRoadError: If the towns are already connected.
        """
        if not isinstance(town1, Town) or not isinstance(town2, Town):
            raise InvalidRoadError(
                f"Road {name!r} needs two towns, got {town1!r} and {town2!r}",
                weight=weight,
            )

        with self._lock:
            for town in (town1, town2):
                if town not in self._adjacency:
                    raise TownNotFoundError(
                        f"Town not in graph: {town.name}",
                        town_name=town.name,
                    )

            existing = self._adjacency[town1].get(town2)
            if existing is not None:
                raise DuplicateRoadError(
                    f"{town1.name} and {town2.name} are already connected by {existing.name}",
                    town1=town1.name,
                    town2=town2.name,
                    existing_road=existing.name,
                )

            road = Road(source=town1, destination=town2, weight=weight, name=name)
            self._adjacency[town1][town2] = road
            self._adjacency[town2][town1] = road
            self._roads[road.endpoints] = road

        self._logger.debug(
            "Road added",
            extra={"road": name, "town1": town1.name, "town2": town2.name, "weight": weight},
        )
        return road

    def get_edge(self, town1: Optional[Town], town2: Optional[Town]) -> Optional[Road]:
        """Return the road connecting the two towns, in either order."""
        with self._lock:
            if not self._has(town1) or not isinstance(town2, Town):
                return None
            return self._adjacency[town1].get(town2)  # type: ignore[index]

    def contains_edge(self, town1: Optional[Town], town2: Optional[Town]) -> bool:
        return self.get_edge(town1, town2) is not None

    def remove_edge(
        self,
        town1: Optional[Town],
        town2: Optional[Town],
        weight: Optional[int] = None,
        name: Optional[str] = None,
    ) -> bool:
        """Remove the road connecting two towns.

        ``weight`` and ``name`` are only checked against the stored road;
        they never select among roads since a pair has at most one.

        Returns:
            True if a road was removed. False if the towns are not
            connected or the stored road does not match weight/name.
        """
        with self._lock:
            road = self.get_edge(town1, town2)
            if road is None:
                return False
            if (weight is not None and weight != road.weight) or (
                name is not None and name != road.name
            ):
                self._logger.warning(
                    "Road does not match removal request",
                    extra={
                        "road": road.name,
                        "weight": road.weight,
                        "requested_name": name,
                        "requested_weight": weight,
                    },
                )
                return False

            del self._adjacency[road.source][road.destination]
            del self._adjacency[road.destination][road.source]
            del self._roads[road.endpoints]

        self._logger.debug("Road removed", extra={"road": road.name})
        return True

    def edge_set(self) -> Set[Road]:
        with self._lock:
            return set(self._roads.values())

    def edges_of(self, town: Optional[Town]) -> Set[Road]:
        """Roads incident to ``town``; empty if the town is isolated or absent."""
        with self._lock:
            if not self._has(town):
                return set()
            return set(self._adjacency[town].values())  # type: ignore[index]

    # ----------------- paths -----------------

    def find_path(self, source: Optional[Town], destination: Optional[Town]) -> PathResult:
        """Run Dijkstra between two towns, keeping the outcome distinguishable."""
        with self._lock:
            if not self._has(source) or not self._has(destination):
                return PathResult(outcome=PathOutcome.NOT_FOUND)
            return dijkstra(self._adjacency, source, destination)  # type: ignore[arg-type]

    def shortest_path(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> Optional[List[str]]:
        """Shortest path as hop descriptions in traversal order.

        Each hop reads ``"<from> via <road> to <to> <weight> mi"``.

        Returns:
            The hop descriptions, or None if either town is unknown or no
            path connects them.
        """
        result = self.find_path(source, destination)
        if not result.is_found:
            return None
        return list(result.hops)

    # ----------------- helpers -----------------

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return len(self._roads)

    def __contains__(self, town: object) -> bool:
        return self._has(town)

    def __len__(self) -> int:
        return len(self._adjacency)
