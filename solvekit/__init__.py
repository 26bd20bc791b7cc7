"""Solutions to classic algorithm problems over arrays, strings, grids, trees, graphs and heaps."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "strings",
    "combinatorics",
    "probability",
    "subsets",
    "heaps",
    "grids",
    "linked",
    "trees",
    "graphs",
]