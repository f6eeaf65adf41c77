# src/sortscope/aggregate.py
from __future__ import annotations

from typing import Iterable, List, Optional

from .benchmark import BenchmarkResult
from .config import TIE_EPSILON_MS


def _beats(candidate: BenchmarkResult, best: BenchmarkResult, epsilon: float) -> bool:
    if candidate.time_ms + epsilon < best.time_ms:
        return True
    return abs(candidate.time_ms - best.time_ms) <= epsilon and candidate.comparisons < best.comparisons


def pick_best(results: Iterable[BenchmarkResult], epsilon: float = TIE_EPSILON_MS) -> Optional[BenchmarkResult]:
    """
    Fastest non-skipped result; timings within `epsilon` ms of each other are
    decided by fewer comparisons, and exact ties keep the earlier entry.
    Returns None when every result was skipped.
    """
    best: Optional[BenchmarkResult] = None
    for r in results:
        if r.skipped:
            continue
        if best is None or _beats(r, best, epsilon):
            best = r
    return best


def rank_results(results: Iterable[BenchmarkResult], epsilon: float = TIE_EPSILON_MS) -> List[BenchmarkResult]:
    """
    Non-skipped results with the `pick_best` winner first, the rest ordered by
    (time_ms, comparisons). Exact ties keep their input order.
    """
    entries = [r for r in results if not r.skipped]
    best = pick_best(entries, epsilon)
    if best is None:
        return []
    rest = [r for r in entries if r is not best]
    return [best] + sorted(rest, key=lambda r: (r.time_ms, r.comparisons))
