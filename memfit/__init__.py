"""Contiguous memory allocation simulator with first, best and worst fit and compaction."""

__version__ = "0.1.0"