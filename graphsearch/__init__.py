"""Uninformed and heuristic search algorithms on small undirected graphs, with a command-line front end."""

__version__ = "0.1.0"
__all__ = ["graph", "uninformed", "informed", "cli"]