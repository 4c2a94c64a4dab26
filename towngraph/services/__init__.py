"""Services layer - Application façade.

Available services:
- TownGraphManager: Name-based API over the town graph
"""

from .town_graph_manager import TownGraphManager

__all__ = ["TownGraphManager"]
