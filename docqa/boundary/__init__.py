"""Boundary layer: relational stores and file-backed caches."""
