"""Graph ports - Abstractions for the graph engine and road sources.

These protocols define the contracts the manager relies on: the
identity-based graph engine and the source of bulk-loaded roads.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterator, List, Optional, Protocol, Set

if TYPE_CHECKING:
    from ..domain.models import PathResult, Road, RoadRecord, Town


class TownGraphPort(Protocol):
    """Port for the undirected town graph.

    Implementation: graph/graph.py (Graph)

    Absent towns and roads are reported through None/False return
    values; only structurally invalid requests raise.
    """

    def add_vertex(self, town: Optional[Town]) -> bool:
        ...

    def contains_vertex(self, town: Optional[Town]) -> bool:
        ...

    def remove_vertex(self, town: Optional[Town]) -> bool:
        ...

    def vertex_set(self) -> Set[Town]:
        ...

    def add_edge(self, town1: Town, town2: Town, weight: int, name: str) -> Road:
        """Connect two existing towns.

        Raises:
            InvalidRoadError: Self-loop, negative weight or missing town.
            TownNotFoundError: An endpoint is not a vertex.
            DuplicateRoadError: The towns are already connected.
        """
        ...

    def get_edge(self, town1: Optional[Town], town2: Optional[Town]) -> Optional[Road]:
        ...

    def contains_edge(self, town1: Optional[Town], town2: Optional[Town]) -> bool:
        ...

    def remove_edge(
        self,
        town1: Optional[Town],
        town2: Optional[Town],
        weight: Optional[int] = None,
        name: Optional[str] = None,
    ) -> bool:
        ...

    def edge_set(self) -> Set[Road]:
        ...

    def edges_of(self, town: Optional[Town]) -> Set[Road]:
        ...

    def find_path(self, source: Optional[Town], destination: Optional[Town]) -> PathResult:
        ...

    def shortest_path(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> Optional[List[str]]:
        ...

    @property
    def vertex_count(self) -> int:
        ...

    @property
    def edge_count(self) -> int:
        ...


class RoadRepositoryPort(Protocol):
    """Port for reading roads from persistent storage.

    Implementation: adapters/graph/text_repository.py

    The repository only parses; deciding which records become roads is
    left to the manager.
    """

    def load(self, path: Optional[Path] = None) -> Iterator[RoadRecord]:
        """Yield the stored road records in file order.

        Args:
            path: Optional source overriding the configured one.

        Raises:
            GraphLoadError: If the storage cannot be read.
            RoadFormatError: If a record cannot be parsed.
        """
        ...
