"""Exception types raised on caller misuse.

Expected negative outcomes (absent node, absent link, unreachable
destination) are reported through return values, never through exceptions.
"""


class MetricGraphError(Exception):
    """Base class for metricgraph errors."""


class InvalidHandleError(MetricGraphError, ValueError):
    """A node or link handle is removed, cleared, or owned by another store."""
