# src/sortscope/benchmark.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .errors import PostconditionViolation
from .order import is_sorted
from .sorts import SortAlgorithm
from .utils import CIResult, summarize_timings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkResult:
    name: str
    comparisons: int = 0
    time_ms: float = 0.0
    skipped: bool = False
    sorted_ok: bool = True
    error: Optional[str] = None

    @classmethod
    def skipped_result(cls, name: str) -> "BenchmarkResult":
        return cls(name=name, skipped=True)


@dataclass
class TimingSummary:
    name: str
    comparisons: int
    samples_ms: List[float] = field(default_factory=list)
    time_ci: Optional[CIResult] = None
    errors: List[str] = field(default_factory=list)


def run_benchmark(data: Sequence[int], algorithm: SortAlgorithm, strict: bool = False) -> BenchmarkResult:
    """
    Time one run of `algorithm` on a private copy of `data`.

    The caller's sequence is never touched. If the output is not sorted the
    failure is logged and recorded on the result (or raised when `strict`).
    """
    work = list(data)

    t0 = time.perf_counter()
    comparisons = algorithm.sort_in_place(work)
    elapsed_ms = (time.perf_counter() - t0) * 1e3

    if not is_sorted(work):
        violation = PostconditionViolation(algorithm.name, len(work))
        logger.error("Sorting failed: %s", violation)
        if strict:
            raise violation
        return BenchmarkResult(
            name=algorithm.name,
            comparisons=comparisons,
            time_ms=elapsed_ms,
            sorted_ok=False,
            error=str(violation),
        )

    logger.debug("%s: n=%d comparisons=%d time=%.3f ms", algorithm.name, len(work), comparisons, elapsed_ms)
    return BenchmarkResult(name=algorithm.name, comparisons=comparisons, time_ms=elapsed_ms)


def repeat_benchmark(
    data: Sequence[int],
    algorithm: SortAlgorithm,
    repeats: int,
    warmup: int = 0,
    ci_method: str = "t",
    confidence: float = 0.95,
) -> TimingSummary:
    """Run `algorithm` `repeats` times (after `warmup` untimed runs) and summarise the timings."""
    if repeats < 1:
        raise ValueError("repeats must be >= 1")

    for _ in range(max(0, warmup)):
        algorithm.apply(data)

    summary = TimingSummary(name=algorithm.name, comparisons=0)
    for _ in range(repeats):
        result = run_benchmark(data, algorithm)
        summary.samples_ms.append(result.time_ms)
        # the count is deterministic for a given input, keep the last one
        summary.comparisons = result.comparisons
        if result.error:
            summary.errors.append(result.error)

    summary.time_ci = summarize_timings(summary.samples_ms, ci_method, confidence)
    return summary
