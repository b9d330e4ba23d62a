"""Ecology rules for a grid-world ecosystem simulator: terrain kinds, food, food patches, depletion, predation, dynamic obstacles and environment reshuffles."""

__version__ = "2.0.0"