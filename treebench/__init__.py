"""Search trees, heaps, union-find, hash tables, Kruskal's MST and binary sample records."""

__version__ = "0.1.0"