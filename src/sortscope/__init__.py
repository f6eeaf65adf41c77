# src/sortscope/__init__.py
from .advisor import AdvisorMode, calculate_sortedness, calculate_unique_ratio, predict_best_algorithm
from .aggregate import pick_best, rank_results
from .benchmark import BenchmarkResult, TimingSummary, repeat_benchmark, run_benchmark
from .config import QUADRATIC_LIMIT, BenchmarkConfig
from .datasets import Dataset, build_dataset, demo_datasets, make_rng
from .errors import InvalidRange, PostconditionViolation, SortscopeError
from .order import is_sorted
from .sorts import (
    ALGORITHM_NAMES,
    ALGORITHMS,
    SortAlgorithm,
    bubble_sort,
    get_algorithm,
    insertion_sort,
    merge_sort,
    quick_sort,
)
from .suite import DatasetReport, run_suite, run_suites

__all__ = [
    "ALGORITHMS",
    "ALGORITHM_NAMES",
    "AdvisorMode",
    "BenchmarkConfig",
    "BenchmarkResult",
    "Dataset",
    "DatasetReport",
    "InvalidRange",
    "PostconditionViolation",
    "QUADRATIC_LIMIT",
    "SortAlgorithm",
    "SortscopeError",
    "TimingSummary",
    "bubble_sort",
    "build_dataset",
    "calculate_sortedness",
    "calculate_unique_ratio",
    "demo_datasets",
    "get_algorithm",
    "insertion_sort",
    "is_sorted",
    "make_rng",
    "merge_sort",
    "pick_best",
    "predict_best_algorithm",
    "quick_sort",
    "rank_results",
    "repeat_benchmark",
    "run_benchmark",
    "run_suite",
    "run_suites",
]

__version__ = "0.1.0"
