"""Shortest-path computation using Dijkstra's algorithm.

This module computes the minimum-total-weight path between two towns
over an adjacency mapping of the form ``{town: {neighbour: road}}``.
"""

from __future__ import annotations

import heapq
from typing import Dict, List, Mapping, Set, Tuple

from ..domain.models import PathOutcome, PathResult, Road, Town

Adjacency = Mapping[Town, Mapping[Town, Road]]


def dijkstra(adjacency: Adjacency, start: Town, end: Town) -> PathResult:
    """Compute the shortest path between two towns using Dijkstra.

    Parameters
    ----------
    adjacency:
        Mapping of every vertex to its neighbours and the road to each.
    start:
        Departure town.
    end:
        Arrival town.

    Returns
    -------
    PathResult
        ``FOUND`` with the roads and hop descriptions in traversal order,
        ``NOT_FOUND`` if either town is not a vertex, ``UNREACHABLE`` if
        no path connects them.
    """
    if start not in adjacency or end not in adjacency:
        return PathResult(outcome=PathOutcome.NOT_FOUND)

    if start == end:
        return PathResult(outcome=PathOutcome.FOUND, total_distance=0)

    # Ties on distance are settled in vertex insertion order.
    rank: Dict[Town, int] = {town: i for i, town in enumerate(adjacency)}
    distances: Dict[Town, float] = {town: float("inf") for town in adjacency}
    previous: Dict[Town, Road] = {}
    distances[start] = 0

    heap: List[Tuple[float, int, Town]] = [(0, rank[start], start)]
    visited: Set[Town] = set()

    while heap:
        current_distance, _, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        if u == end:
            break

        for v, road in adjacency[u].items():
            if v in visited:
                continue
            new_distance = current_distance + road.weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = road
                heapq.heappush(heap, (new_distance, rank[v], v))

    if end not in visited:
        return PathResult(outcome=PathOutcome.UNREACHABLE)

    roads: List[Road] = []
    current = end
    while current != start:
        road = previous[current]
        roads.append(road)
        current = road.other_end(current)  # type: ignore[assignment]
    roads.reverse()

    hops: List[str] = []
    position = start
    for road in roads:
        hops.append(road.describe(position))
        position = road.other_end(position)  # type: ignore[assignment]

    return PathResult(
        outcome=PathOutcome.FOUND,
        roads=tuple(roads),
        hops=tuple(hops),
        total_distance=int(distances[end]),
    )
