"""Data structures, memory pools, task schedulers and small algorithms."""

__version__ = "0.1.0"