"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the manager and the components it
drives, so each side can be swapped or faked in tests.
"""

from .graph import RoadRepositoryPort, TownGraphPort

__all__ = [
    "TownGraphPort",
    "RoadRepositoryPort",
]
