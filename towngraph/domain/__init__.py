"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    DuplicateRoadError,
    GraphLoadError,
    InvalidRoadError,
    RoadFormatError,
    TownGraphError,
    TownNotFoundError,
)
from .models import (
    DISTANCE_UNIT,
    PathOutcome,
    PathResult,
    Road,
    RoadRecord,
    Town,
)

__all__ = [
    # Models
    "DISTANCE_UNIT",
    "Town",
    "Road",
    "RoadRecord",
    "PathOutcome",
    "PathResult",
    # Errors
    "TownGraphError",
    "InvalidRoadError",
    "DuplicateRoadError",
    "TownNotFoundError",
    "RoadFormatError",
    "GraphLoadError",
]
