"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextRoadRepository: Reads roads from the bulk-load text format
"""

from .text_repository import TextRoadRepository, parse_road_line

__all__ = ["TextRoadRepository", "parse_road_line"]
