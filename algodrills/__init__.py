"""Classic algorithm exercises with linked-list and binary-tree helpers."""

__version__ = "0.1.0"
__all__ = ["structures", "dynamic", "greedy", "pointers"]