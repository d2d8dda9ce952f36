"""A flight network of airports and flights, with route listing and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["airport", "graph", "cli"]