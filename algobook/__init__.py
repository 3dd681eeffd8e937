"""Classic textbook algorithms and data structures."""

__version__ = "0.1.0"

__all__ = [
    "dynamic",
    "examples",
    "geometry",
    "graphs",
    "greedy",
    "matrix",
    "selection",
    "sorting",
    "structures",
    "subarray",
    "substring",
    "symbol_tables",
]