"""Classic sorting, searching, graph and binary-tree algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "graph", "searching", "sorting", "student", "tree"]