# src/sortscope/errors.py
from __future__ import annotations


class SortscopeError(Exception):
    """Base class for sortscope errors."""


class PostconditionViolation(SortscopeError):
    """A sort finished but its output is not in non-decreasing order."""

    def __init__(self, algorithm: str, size: int):
        self.algorithm = algorithm
        self.size = size
        super().__init__(f"{algorithm} produced unsorted output (n={size})")


class InvalidRange(SortscopeError, IndexError):
    """Partition or merge indices outside the sequence."""
