"""Shared type aliases and enums."""

from metricgraph.types.base import Cost, Metric, SearchStrategy

__all__ = ["Cost", "Metric", "SearchStrategy"]
