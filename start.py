"""Simple launcher for the town graph.

Loads a road file in the bulk-load format, prints the towns and roads it
contains, and optionally the shortest path between two towns.

    python start.py data/roads.txt --from "Ada, Lovelace" --to "Turing, Alan"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from towngraph.config import get_config
from towngraph.container import Container
from towngraph.domain.errors import TownGraphError
from towngraph.services import TownGraphManager


def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()
    logging.basicConfig(
        level=config.observability.level,
        format=config.observability.format,
    )

    parser = argparse.ArgumentParser(description="Town graph launcher")
    parser.add_argument(
        "roads",
        nargs="?",
        type=Path,
        default=None,
        help=f"road file (default: {config.graph.roads_path})",
    )
    parser.add_argument("--from", dest="source", help="departure town")
    parser.add_argument("--to", dest="destination", help="arrival town")
    args = parser.parse_args(argv)

    manager: TownGraphManager = Container.create_default(config).resolve(TownGraphManager)
    try:
        manager.populate_town_graph(args.roads)
    except TownGraphError as e:
        print(f"Failed to load roads: {e}", file=sys.stderr)
        return 1

    print("=== Towns ===")
    for town in manager.all_towns():
        print(town)
    print("=== Roads ===")
    for road in manager.all_roads():
        print(road)

    if args.source and args.destination:
        print(f"=== {args.source} -> {args.destination} ===")
        path = manager.get_path(args.source, args.destination)
        if not path:
            print("No path found")
        for hop in path:
            print(hop)

    return 0


if __name__ == "__main__":
    sys.exit(main())
