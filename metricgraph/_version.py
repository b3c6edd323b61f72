"""Version information for metricgraph."""

__version__ = "0.1.0"
