"""Town graph manager - Name-based façade over the graph engine.

Callers work with plain town and road names; the manager turns them
into Town identities, drives the graph, and translates the results back
into strings and sorted lists. It keeps no graph state of its own and
re-resolves every name through the graph on each call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..adapters.graph import TextRoadRepository
from ..domain.errors import TownGraphError
from ..domain.models import PathOutcome, PathResult, Town
from ..graph import Graph
from ..ports.graph import RoadRepositoryPort, TownGraphPort


@dataclass
class TownGraphManager:
    """Manage towns and roads by name.

    Invalid names (None, empty, not a string) are treated like unknown
    towns: every operation returns its absence value (False, None or an
    empty list) instead of raising.

    Attributes:
        graph: The graph engine holding all towns and roads
        road_repository: Source of bulk-loaded roads
    """

    graph: TownGraphPort = field(default_factory=Graph)
    road_repository: RoadRepositoryPort = field(default_factory=TextRoadRepository)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @staticmethod
    def _town(name: Optional[str]) -> Optional[Town]:
        try:
            return Town(name)  # type: ignore[arg-type]
        except ValueError:
            return None

    # ---------- towns ----------

    def add_town(self, name: str) -> bool:
        """Add a town; False if it already exists or the name is invalid."""
        town = self._town(name)
        if town is None:
            return False
        return self.graph.add_vertex(town)

    def contains_town(self, name: str) -> bool:
        town = self._town(name)
        return town is not None and self.graph.contains_vertex(town)

    def get_town(self, name: str) -> Optional[Town]:
        """Return the graph's Town with exactly this name, or None."""
        town = self._town(name)
        if town is None:
            return None
        for candidate in self.graph.vertex_set():
            if candidate == town:
                return candidate
        return None

    def delete_town(self, name: str) -> bool:
        """Delete a town together with every road touching it."""
        town = self._town(name)
        if town is None:
            return False
        return self.graph.remove_vertex(town)

    def all_towns(self) -> List[str]:
        """All town names in ascending lexicographic order."""
        return sorted(town.name for town in self.graph.vertex_set())

    # ---------- roads ----------

    def add_road(self, town1: str, town2: str, weight: int, road_name: str) -> bool:
        """Connect two towns, adding either town first if needed.

        Returns:
            True if the road was created. False for invalid names,
            self-loops, negative weights, empty road names, or towns
            already connected.
        """
        source, destination = self._town(town1), self._town(town2)
        if source is None or destination is None:
            return False

        self.graph.add_vertex(source)
        self.graph.add_vertex(destination)
        try:
            self.graph.add_edge(source, destination, weight, road_name)
        except TownGraphError as e:
            self._logger.debug(
                "Road rejected",
                extra={"road": road_name, "town1": town1, "town2": town2, "error": str(e)},
            )
            return False
        return True

    def get_road(self, town1: str, town2: str) -> Optional[str]:
        """Name of the road connecting the two towns, or None."""
        road = self.graph.get_edge(self._town(town1), self._town(town2))
        if road is None:
            return None
        return road.name

    def contains_road_connection(self, town1: str, town2: str) -> bool:
        return self.graph.contains_edge(self._town(town1), self._town(town2))

    def delete_road_connection(self, town1: str, town2: str, road_name: str) -> bool:
        """Delete the road connecting two towns.

        ``road_name`` is accepted for symmetry with add_road; the road is
        found by its endpoints alone and removed with its stored weight
        and name.
        """
        source, destination = self._town(town1), self._town(town2)
        road = self.graph.get_edge(source, destination)
        if road is None:
            return False
        return self.graph.remove_edge(source, destination, road.weight, road.name)

    def all_roads(self) -> List[str]:
        """All road names in ascending lexicographic order, duplicates kept."""
        return sorted(road.name for road in self.graph.edge_set())

    # ---------- paths ----------

    def find_route(self, town1: str, town2: str) -> PathResult:
        """Shortest route between two towns with the outcome kept visible.

        Returns NOT_FOUND when either town is unknown and UNREACHABLE when
        either town has no roads or the towns are in different components.
        """
        source, destination = self._town(town1), self._town(town2)
        if not (self.graph.contains_vertex(source) and self.graph.contains_vertex(destination)):
            return PathResult(outcome=PathOutcome.NOT_FOUND)
        if not self.graph.edges_of(source) or not self.graph.edges_of(destination):
            return PathResult(outcome=PathOutcome.UNREACHABLE)
        return self.graph.find_path(source, destination)

    def get_path(self, town1: str, town2: str) -> List[str]:
        """Shortest path between two towns as hop descriptions.

        Each entry reads ``"<from> via <road> to <to> <weight> mi"``.

        An empty list is the single not-found signal: unknown or isolated
        towns, disconnected towns, and any failure while computing the
        path all return ``[]``. Failures are logged, never raised.
        """
        try:
            result = self.find_route(town1, town2)
        except Exception:
            self._logger.exception(
                "Path computation failed",
                extra={"town1": town1, "town2": town2},
            )
            return []

        if not result.is_found:
            self._logger.info(
                "No path found",
                extra={"town1": town1, "town2": town2, "outcome": result.outcome.name},
            )
            return []

        self._logger.info(
            "Path found",
            extra={
                "town1": town1,
                "town2": town2,
                "hops": result.num_hops,
                "distance": result.total_distance,
            },
        )
        return list(result.hops)

    # ---------- bulk loading ----------

    def populate_town_graph(self, path: Optional[Path] = None) -> int:
        """Load roads from the bulk-load file into the graph.

        Both towns of every record are added if absent. A road is only
        added when its towns are not already connected, so the first
        road listed for a pair wins. Records the graph rejects (negative
        weight, self-loop) are logged and skipped.

        Args:
            path: Road file; defaults to the repository's configured file.

        Returns:
            Number of roads added.

        Raises:
            GraphLoadError: If the file cannot be read.
            RoadFormatError: If a line is malformed and the repository
                does not skip malformed lines.
        """
        added = 0
        for record in self.road_repository.load(path):
            source, destination = Town(record.town1), Town(record.town2)
            self.graph.add_vertex(source)
            self.graph.add_vertex(destination)
            if self.graph.contains_edge(source, destination):
                continue
            try:
                self.graph.add_edge(source, destination, record.weight, record.name)
            except TownGraphError as e:
                self._logger.warning(
                    "Skipping invalid road",
                    extra={"line_number": record.line_number, "error": str(e)},
                )
                continue
            added += 1

        self._logger.info(
            "Roads loaded",
            extra={
                "roads_added": added,
                "towns": self.graph.vertex_count,
                "roads": self.graph.edge_count,
            },
        )
        return added
