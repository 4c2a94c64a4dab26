"""Top-level package for the town graph project.

The package models towns connected by named, weighted roads and answers
shortest-path queries between them:

- domain: Town, Road and path result value types, typed errors
- graph: the undirected graph engine and Dijkstra's algorithm
- services: TownGraphManager, the name-based API used by callers
- adapters: loading roads from the bulk-load text format
"""
