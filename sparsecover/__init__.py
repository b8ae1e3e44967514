"""Sparse 0/1 matrices, block partitioning, partial cover solutions, bit-set families and variable pairing search."""

__version__ = "0.1.0"