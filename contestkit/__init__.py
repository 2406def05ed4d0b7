"""Solvers for classic programming-contest problems, with a big-integer type."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "bigint", "bipartite", "connectivity", "grids", "puzzles", "trees"]