from __future__ import annotations

import pytest

from sortscope import ALGORITHMS, BenchmarkConfig, Dataset, SortAlgorithm, run_suite, run_suites
from sortscope.config import QUADRATIC_LIMIT


def _reverse_in_place(arr):
    arr.reverse()
    return 0


def test_small_dataset_runs_every_algorithm():
    report = run_suite(Dataset("Reversed", list(range(25, 0, -1))))
    assert [r.name for r in report.results] == [a.name for a in ALGORITHMS]
    assert not any(r.skipped for r in report.results)
    assert report.best is not None
    assert report.predicted in [a.name for a in ALGORITHMS]
    assert report.prediction_matches == (report.predicted == report.best.name)
    assert report.errors == []
    assert report.timings == {}


def test_quadratic_sorts_skipped_above_limit():
    config = BenchmarkConfig(quadratic_limit=10)
    report = run_suite(Dataset("Random", list(range(11, 0, -1))), config)
    assert report.skipped == ["Bubble Sort", "Insertion Sort"]
    assert report.best.name in ("Merge Sort", "Quick Sort")


def test_limit_is_exclusive_and_run_all_disables_skipping():
    data = Dataset("Edge", list(range(10, 0, -1)))
    assert run_suite(data, BenchmarkConfig(quadratic_limit=10)).skipped == []
    longer = Dataset("Edge", list(range(11, 0, -1)))
    assert run_suite(longer, BenchmarkConfig(quadratic_limit=10, run_all=True)).skipped == []


def test_default_limit():
    assert QUADRATIC_LIMIT == 1000
    assert BenchmarkConfig().should_skip(True, 1001)
    assert not BenchmarkConfig().should_skip(True, 1000)
    assert not BenchmarkConfig().should_skip(False, 10 ** 6)


def test_all_skipped_gives_no_best():
    quadratic_only = [a for a in ALGORITHMS if a.quadratic]
    report = run_suite(Dataset("Big", list(range(20))), BenchmarkConfig(quadratic_limit=5), quadratic_only)
    assert report.best is None
    assert report.prediction_matches is None


def test_broken_algorithm_does_not_stop_the_suite():
    broken = SortAlgorithm("Broken Sort", _reverse_in_place)
    algos = [broken] + list(ALGORITHMS)
    report = run_suite(Dataset("Random", [4, 1, 3, 2]), algorithms=algos)
    assert len(report.results) == 5
    assert report.results[0].sorted_ok is False
    assert report.errors and "Broken Sort" in report.errors[0]
    assert all(r.sorted_ok for r in report.results[1:])


def test_strict_mode_drops_the_broken_result():
    broken = SortAlgorithm("Broken Sort", _reverse_in_place)
    report = run_suite(Dataset("Random", [4, 1, 3, 2]), BenchmarkConfig(strict=True), [broken, ALGORITHMS[2]])
    assert [r.name for r in report.results] == ["Merge Sort"]
    assert len(report.errors) == 1


def test_repeats_collect_timings():
    config = BenchmarkConfig(repeats=3, quadratic_limit=10)
    report = run_suite(Dataset("Random", list(range(30, 0, -1))), config)
    assert set(report.timings) == {"Merge Sort", "Quick Sort"}
    assert all(len(t.samples_ms) == 3 for t in report.timings.values())


def test_empty_dataset():
    report = run_suite(Dataset("Empty", []))
    assert all(r.comparisons == 0 for r in report.results)
    assert report.best is not None


def test_run_suites_keeps_order():
    datasets = [Dataset("A", [2, 1]), Dataset("B", [1])]
    reports = run_suites(datasets)
    assert [r.dataset.name for r in reports] == ["A", "B"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"repeats": 0},
        {"warmup": -1},
        {"quadratic_limit": -1},
        {"tie_epsilon_ms": -1.0},
        {"ci_method": "median"},
        {"confidence": 1.0},
        {"advisor_mode": "oracle"},
    ],
)
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        BenchmarkConfig(**kwargs)


def test_config_accepts_mode_strings():
    assert BenchmarkConfig(advisor_mode="knn").advisor_mode.label == "k-NN"
