"""Concurrent price comparison across Amazon and Walmart, printed as a table."""

__version__ = "0.1.0"
__all__ = ["__version__"]