"""Tower of Hanoi state graphs, shortest paths and simple graph containers."""

__version__ = "0.1.0"

__all__ = ["hanoi", "hanoi_paths", "adjacency_list", "adjacency_matrix"]