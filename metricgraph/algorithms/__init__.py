"""Graph search algorithms."""
