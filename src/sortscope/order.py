# src/sortscope/order.py
from __future__ import annotations

from typing import Sequence


def is_sorted(seq: Sequence[int]) -> bool:
    """True when every adjacent pair is in non-decreasing order."""
    for i in range(1, len(seq)):
        if seq[i - 1] > seq[i]:
            return False
    return True
