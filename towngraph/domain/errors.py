"""Typed domain errors for the town graph.

The graph engine raises these for structurally invalid requests; the
manager converts them into the absence values of its name-based API.

All errors inherit from TownGraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TownGraphError(Exception):
    """Base error for the town graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidRoadError(TownGraphError):
    """A road request is structurally invalid.

    Raised for self-loops, negative or non-integer weights and missing
    endpoints.

    Attributes:
        town1: Name of the first endpoint, if known
        town2: Name of the second endpoint, if known
        weight: The rejected weight
    """

    town1: str = ""
    town2: str = ""
    weight: Optional[object] = None


@dataclass
class DuplicateRoadError(TownGraphError):
    """The two towns are already connected by a road.

    Attributes:
        town1: Name of the first endpoint
        town2: Name of the second endpoint
        existing_road: Name of the road already connecting them
    """

    town1: str = ""
    town2: str = ""
    existing_road: str = ""


@dataclass
class TownNotFoundError(TownGraphError):
    """A town required by the operation is not a vertex of the graph.

    Attributes:
        town_name: The town that was not found
    """

    town_name: str = ""


@dataclass
class RoadFormatError(TownGraphError):
    """A bulk-load line could not be parsed.

    Attributes:
        line_number: 1-based line number in the source file
        line: The raw offending line
    """

    line_number: int = 0
    line: str = ""


@dataclass
class GraphLoadError(TownGraphError):
    """The bulk-load file could not be read.

    Attributes:
        file_path: Path to the road file if relevant
    """

    file_path: Optional[str] = None

