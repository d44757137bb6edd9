"""Classic recursion and search algorithms, a bounds-checked vector and simple timing tools."""

__version__ = "0.1.0"