"""Immutable domain models for the town graph.

Towns are vertices identified by name. Roads are undirected, weighted
edges whose identity is the unordered pair of towns they connect.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import FrozenSet, Optional

from .errors import InvalidRoadError

DISTANCE_UNIT = "mi"


@dataclass(frozen=True, slots=True, order=True)
class Town:
    """A named vertex.

    Two towns with the same name are the same vertex.

    Attributes:
        name: Town name, conventionally "Lastname, Firstname"
    """

    name: str

    def __post_init__(self) -> None:
        """Validate the name."""
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Town name must be a non-empty string, got {self.name!r}")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, eq=False)
class Road:
    """An undirected, named and weighted connection between two towns.

    Equality and hashing only look at the unordered endpoint pair, so a
    road from A to B is the same road as one from B to A.

    Attributes:
        source: First endpoint
        destination: Second endpoint
        weight: Non-negative distance in miles
        name: Road name, not unique across the graph
    """

    source: Town
    destination: Town
    weight: int
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidRoadError(
                f"Road name must be a non-empty string, got {self.name!r}",
                town1=self.source.name,
                town2=self.destination.name,
                weight=self.weight,
            )
        if self.source == self.destination:
            raise InvalidRoadError(
                f"Road {self.name!r} cannot connect {self.source} to itself",
                town1=self.source.name,
                town2=self.destination.name,
                weight=self.weight,
            )
        if isinstance(self.weight, bool) or not isinstance(self.weight, int) or self.weight < 0:
            raise InvalidRoadError(
                f"Road weight must be a non-negative integer, got {self.weight!r}",
                town1=self.source.name,
                town2=self.destination.name,
                weight=self.weight,
            )

    @property
    def endpoints(self) -> FrozenSet[Town]:
        """The unordered pair of towns this road connects."""
        return frozenset((self.source, self.destination))

    def connects(self, town1: Town, town2: Town) -> bool:
        """True if this road links town1 and town2, in either order."""
        return self.endpoints == frozenset((town1, town2))

    def other_end(self, town: Town) -> Optional[Town]:
        """Given one endpoint, return the other. None if town isn't an endpoint."""
        if town == self.source:
            return self.destination
        if town == self.destination:
            return self.source
        return None

    def describe(self, from_town: Town) -> str:
        """Hop description when travelling this road away from ``from_town``."""
        to_town = self.other_end(from_town)
        if to_town is None:
            raise ValueError(f"{from_town} is not an endpoint of road {self.name!r}")
        return f"{from_town.name} via {self.name} to {to_town.name} {self.weight} {DISTANCE_UNIT}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Road):
            return NotImplemented
        return self.endpoints == other.endpoints

    def __hash__(self) -> int:
        return hash(self.endpoints)

    def __str__(self) -> str:
        return self.name


class PathOutcome(Enum):
    """Why a shortest-path query ended the way it did."""

    FOUND = auto()
    NOT_FOUND = auto()
    UNREACHABLE = auto()


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query between two towns.

    Attributes:
        outcome: FOUND, NOT_FOUND (unknown town) or UNREACHABLE
        roads: Roads in traversal order from source to destination
        hops: One description per road, in traversal order
        total_distance: Sum of road weights, None unless found
    """

    outcome: PathOutcome
    roads: tuple[Road, ...] = field(default_factory=tuple)
    hops: tuple[str, ...] = field(default_factory=tuple)
    total_distance: Optional[int] = None

    @property
    def is_found(self) -> bool:
        """Check if a path was found."""
        return self.outcome is PathOutcome.FOUND

    @property
    def num_hops(self) -> int:
        """Return the number of roads travelled."""
        return len(self.roads)


@dataclass(frozen=True, slots=True)
class RoadRecord:
    """One parsed line of a bulk-load road file.

    Attributes:
        name: Road name
        weight: Road weight as written in the file
        town1: Name of the first town
        town2: Name of the second town
        line_number: 1-based line number in the source file
    """

    name: str
    weight: int
    town1: str
    town2: str
    line_number: int = 0
