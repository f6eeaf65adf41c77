# src/sortscope/utils.py
"""
Summaries of repeated sort timings and the time formatting shared by the
console table, the HTML report and the JSON export. All inputs are milliseconds.
"""
from __future__ import annotations

import math
import statistics
from dataclasses import dataclass
from typing import Callable, Dict, Sequence

import numpy as np

INTERVAL_METHODS = ("t", "bootstrap")
BOOTSTRAP_DRAWS = 2000
BOOTSTRAP_SEED = 42

# two-sided 95% Student t quantiles for 1..30 degrees of freedom
_T95_SMALL = (
    12.706, 4.303, 3.182, 2.776, 2.571, 2.447, 2.365, 2.306, 2.262, 2.228,
    2.201, 2.179, 2.160, 2.145, 2.131, 2.120, 2.110, 2.101, 2.093, 2.086,
    2.080, 2.074, 2.069, 2.064, 2.060, 2.056, 2.052, 2.048, 2.045, 2.042,
)
# (largest df, quantile) steps above 30, then the normal limit
_T95_STEPS = ((40, 2.021), (50, 2.009), (60, 2.000))
_Z95 = 1.96


@dataclass
class CIResult:
    """Mean run time of a repeated benchmark with its interval bounds, in ms."""
    mean: float
    std: float
    n: int
    lower: float
    upper: float
    method: str

    @property
    def half_width(self) -> float:
        return (self.upper - self.lower) / 2.0


def _t95(df: int) -> float:
    if df <= len(_T95_SMALL):
        return _T95_SMALL[df - 1]
    for bound, value in _T95_STEPS:
        if df <= bound:
            return value
    return _Z95


def _degenerate(samples_ms: Sequence[float], method: str) -> CIResult:
    mean = float(samples_ms[0]) if samples_ms else float("nan")
    return CIResult(mean, 0.0, len(samples_ms), mean, mean, method)


def _t_interval(samples_ms: Sequence[float], confidence: float) -> CIResult:
    n = len(samples_ms)
    mean = statistics.fmean(samples_ms)
    std = statistics.stdev(samples_ms)
    if math.isclose(confidence, 0.95):
        critical = _t95(n - 1)
    else:
        # no table for other levels; the normal quantile is close enough for timing runs
        critical = statistics.NormalDist().inv_cdf(0.5 + confidence / 2.0)
    half = critical * std / math.sqrt(n)
    return CIResult(mean, std, n, mean - half, mean + half, "t")


def _bootstrap_interval(samples_ms: Sequence[float], confidence: float) -> CIResult:
    runs = np.asarray(samples_ms, dtype=float)
    rng = np.random.default_rng(BOOTSTRAP_SEED)
    # every resample of the runs at once, one row per draw
    means = runs[rng.integers(0, runs.size, size=(BOOTSTRAP_DRAWS, runs.size))].mean(axis=1)
    tail = (1.0 - confidence) / 2.0
    lower, upper = np.quantile(means, [tail, 1.0 - tail])
    return CIResult(float(runs.mean()), float(runs.std(ddof=1)), int(runs.size), float(lower), float(upper), "bootstrap")


_INTERVALS: Dict[str, Callable[[Sequence[float], float], CIResult]] = {
    "t": _t_interval,
    "bootstrap": _bootstrap_interval,
}


def summarize_timings(samples_ms: Sequence[float], method: str = "t", confidence: float = 0.95) -> CIResult:
    """
    Mean and `confidence` interval of repeated run times.

    `method` is "t" (Student t, normal quantile for levels other than 95%) or
    "bootstrap" (seeded resampling of the run means). Fewer than two runs give a
    zero-width interval around the single value.
    """
    if method not in _INTERVALS:
        raise ValueError(f"ci_method must be one of {', '.join(INTERVAL_METHODS)}; got {method!r}")
    samples_ms = [float(x) for x in samples_ms]
    if len(samples_ms) < 2:
        return _degenerate(samples_ms, method)
    return _INTERVALS[method](samples_ms, confidence)


def format_ms(ms: float) -> str:
    """Milliseconds with three decimals, the precision every table uses."""
    return f"{ms:.3f}"


def human_time(ms: float) -> str:
    """Pick the unit that keeps a run time readable; "—" for missing values."""
    if ms is None or not (isinstance(ms, (int, float)) and math.isfinite(ms)):
        return "—"
    if ms < 1e-3:
        return f"{ms * 1e6:.2f} ns"
    if ms < 1.0:
        return f"{ms * 1e3:.2f} µs"
    if ms < 1e3:
        return f"{ms:.3f} ms"
    return f"{ms / 1e3:.3f} s"
