"""Graph engine for the town network.

This subpackage contains the in-memory undirected graph of towns and
roads and the Dijkstra shortest-path algorithm that runs on top of it.
"""

from .dijkstra import dijkstra
from .graph import Graph

__all__ = ["Graph", "dijkstra"]
