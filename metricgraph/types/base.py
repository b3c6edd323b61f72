"""Base aliases and enums for graph storage and path search."""

from __future__ import annotations

from enum import IntEnum

#: Integer weight attached to a link. Negative values are legal.
Metric = int

#: Total metric of a path.
Cost = int


class SearchStrategy(IntEnum):
    """How the minimum-cost path search walks the graph.

    Both concrete strategies visit links in the same order and return
    identical results; they differ only in use of the interpreter stack.
    """

    #: Pick RECURSIVE or ITERATIVE from the graph size (see PathSearchConfig).
    AUTO = 0
    #: Python recursion, one frame per node on the current candidate path.
    RECURSIVE = 1
    #: Explicit frame stack; depth limited only by memory.
    ITERATIVE = 2

    @classmethod
    def from_string(cls, value: str) -> "SearchStrategy":
        """Parse a string into a SearchStrategy enum value.

        Args:
            value: Case-insensitive string name (e.g., "auto", "ITERATIVE").

        Returns:
            The corresponding SearchStrategy enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid search strategy '{value}'. Valid values are: {valid}"
            ) from None
