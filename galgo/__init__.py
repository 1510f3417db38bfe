"""Classic data structures, sorting and searching algorithms, and algorithm exercises."""

__version__ = "0.1.0"