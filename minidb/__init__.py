"""Typed SQL values, an LRU frame replacer, matrices and string helpers for a small database engine."""

__version__ = "0.1.0"