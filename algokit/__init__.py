"""Classic algorithm and data-structure routines: strings, arrays, backtracking,
tries, dynamic programming, grids, linked nodes, graphs and heaps."""

__version__ = "0.1.0"