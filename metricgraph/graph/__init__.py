"""Graph primitives.

This package provides the `GraphStore` container, the `NodeHandle` and
`LinkHandle` references it hands out, and NetworkX conversion helpers
(`convert`).
"""
