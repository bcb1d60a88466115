"""Tilt puzzle solver and breadth-first / depth-first search engine."""

__version__ = "0.1.0"
