# src/sortscope/suite.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from .advisor import AdvisorMode, predict_best_algorithm
from .aggregate import pick_best
from .benchmark import BenchmarkResult, TimingSummary, repeat_benchmark, run_benchmark
from .config import BenchmarkConfig
from .datasets import Dataset
from .errors import PostconditionViolation
from .sorts import ALGORITHMS, SortAlgorithm

logger = logging.getLogger(__name__)


@dataclass
class DatasetReport:
    dataset: Dataset
    results: List[BenchmarkResult] = field(default_factory=list)
    best: Optional[BenchmarkResult] = None
    predicted: Optional[str] = None
    advisor_mode: AdvisorMode = AdvisorMode.DECISION_TREE
    timings: Dict[str, TimingSummary] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    @property
    def n(self) -> int:
        return len(self.dataset.values)

    @property
    def skipped(self) -> List[str]:
        return [r.name for r in self.results if r.skipped]

    @property
    def prediction_matches(self) -> Optional[bool]:
        if self.best is None or self.predicted is None:
            return None
        return self.predicted == self.best.name


def run_suite(
    dataset: Dataset,
    config: Optional[BenchmarkConfig] = None,
    algorithms: Sequence[SortAlgorithm] = ALGORITHMS,
) -> DatasetReport:
    """
    Benchmark every algorithm on one dataset.

    Quadratic sorts are skipped above `config.quadratic_limit` unless
    `config.run_all` is set. An algorithm that produces unsorted output is
    reported in `errors` and the remaining algorithms still run.
    """
    config = config or BenchmarkConfig()
    data = dataset.values
    n = len(data)
    report = DatasetReport(dataset=dataset, advisor_mode=config.advisor_mode)

    skipping = [a.name for a in algorithms if config.should_skip(a.quadratic, n)]
    if skipping:
        logger.info("Skipping %s because n > %d.", " and ".join(skipping), config.quadratic_limit)

    for algo in algorithms:
        if algo.name in skipping:
            report.results.append(BenchmarkResult.skipped_result(algo.name))
            continue
        try:
            result = run_benchmark(data, algo, strict=config.strict)
        except PostconditionViolation as exc:
            report.errors.append(str(exc))
            continue
        if result.error:
            report.errors.append(result.error)
        report.results.append(result)

        if config.repeats > 1:
            report.timings[algo.name] = repeat_benchmark(
                data,
                algo,
                repeats=config.repeats,
                warmup=config.warmup,
                ci_method=config.ci_method,
                confidence=config.confidence,
            )

    report.best = pick_best(report.results, epsilon=config.tie_epsilon_ms)
    report.predicted = predict_best_algorithm(data, config.advisor_mode)
    if report.best is None:
        logger.warning("No result available for dataset %r (n=%d).", dataset.name, n)
    return report


def run_suites(datasets: Iterable[Dataset], config: Optional[BenchmarkConfig] = None) -> List[DatasetReport]:
    config = config or BenchmarkConfig()
    return [run_suite(ds, config) for ds in datasets]
