"""A typed collection, a byte string built on it, and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["collection", "fieldinfo", "mystring", "cli"]