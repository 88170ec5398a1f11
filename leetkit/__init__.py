"""Classic algorithm exercises: arrays, strings, linked lists, trees, grids, dynamic programming and backtracking."""

__version__ = "0.1.0"
__all__ = ["arrays", "backtracking", "dynamic", "grids", "linked", "strings", "trees"]