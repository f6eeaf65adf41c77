# src/sortscope/config.py
from __future__ import annotations

from dataclasses import dataclass

from .advisor import AdvisorMode

# Above this size the O(n^2) sorts are skipped unless the caller asks for them.
QUADRATIC_LIMIT = 1000

# Two timings closer than this (ms) count as a tie.
TIE_EPSILON_MS = 1e-6


@dataclass(frozen=True)
class BenchmarkConfig:
    seed: int = 42
    quadratic_limit: int = QUADRATIC_LIMIT
    run_all: bool = False
    tie_epsilon_ms: float = TIE_EPSILON_MS
    repeats: int = 1
    warmup: int = 0
    ci_method: str = "t"
    confidence: float = 0.95
    advisor_mode: AdvisorMode = AdvisorMode.DECISION_TREE
    strict: bool = False
    preview_limit: int = 20  # print datasets up to this size

    def __post_init__(self) -> None:
        if self.quadratic_limit < 0:
            raise ValueError("quadratic_limit must be >= 0")
        if self.tie_epsilon_ms < 0:
            raise ValueError("tie_epsilon_ms must be >= 0")
        if self.repeats < 1:
            raise ValueError("repeats must be >= 1")
        if self.warmup < 0:
            raise ValueError("warmup must be >= 0")
        if self.ci_method not in ("t", "bootstrap"):
            raise ValueError("ci_method must be 't' or 'bootstrap'")
        if not 0.0 < self.confidence < 1.0:
            raise ValueError("confidence must be in (0, 1)")
        # accept plain strings like "knn"
        object.__setattr__(self, "advisor_mode", AdvisorMode(self.advisor_mode))

    def should_skip(self, quadratic: bool, n: int) -> bool:
        return quadratic and not self.run_all and n > self.quadratic_limit
