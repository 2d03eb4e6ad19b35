"""Data-structure drills: arrays, matrices, sorting algorithms, recursion and a small command line."""

__version__ = "0.1.0"
__all__ = ["arrays", "matrices", "sorting", "recursion", "cli"]