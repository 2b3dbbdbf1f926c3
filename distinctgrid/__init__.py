"""Largest submatrix with all-distinct elements, and a constant-time resettable map."""

__version__ = "0.1.0"
__all__ = ["versioned_map", "submatrix", "cli"]