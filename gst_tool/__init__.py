"""Greedy String Tiling similarity detection."""

__version__ = "0.1.0"
