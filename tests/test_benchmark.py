from __future__ import annotations

import logging

import pytest

from sortscope import (
    ALGORITHMS,
    PostconditionViolation,
    SortAlgorithm,
    get_algorithm,
    repeat_benchmark,
    run_benchmark,
)


def _do_nothing(arr):
    return 0


BROKEN = SortAlgorithm("Broken Sort", _do_nothing)


@pytest.mark.parametrize("algo", ALGORITHMS, ids=lambda a: a.name)
def test_run_benchmark_does_not_mutate_input(algo):
    data = [5, 3, 8, 1, 9, 2]
    snapshot = list(data)
    result = run_benchmark(data, algo)
    assert data == snapshot
    assert result.name == algo.name
    assert result.sorted_ok
    assert result.error is None
    assert not result.skipped
    assert result.comparisons > 0
    assert result.time_ms >= 0.0


@pytest.mark.parametrize("algo", ALGORITHMS, ids=lambda a: a.name)
def test_run_benchmark_on_empty_input(algo):
    result = run_benchmark([], algo)
    assert result.comparisons == 0
    assert result.sorted_ok


def test_run_benchmark_scenarios():
    assert run_benchmark([5, 3, 8, 1], get_algorithm("bubble")).comparisons == 6
    assert run_benchmark([1, 2, 3, 4, 5], get_algorithm("insertion")).comparisons == 4
    assert run_benchmark([7, 7, 7, 7], get_algorithm("quick")).sorted_ok


def test_broken_sort_is_reported_not_raised(caplog):
    with caplog.at_level(logging.ERROR, logger="sortscope.benchmark"):
        result = run_benchmark([3, 1, 2], BROKEN)
    assert not result.sorted_ok
    assert "Broken Sort" in result.error
    assert result.comparisons == 0
    assert any("unsorted output" in rec.getMessage() for rec in caplog.records)


def test_broken_sort_raises_in_strict_mode():
    with pytest.raises(PostconditionViolation) as excinfo:
        run_benchmark([3, 1, 2], BROKEN, strict=True)
    assert excinfo.value.algorithm == "Broken Sort"
    assert excinfo.value.size == 3


def test_broken_sort_on_sorted_input_passes():
    assert run_benchmark([1, 2, 3], BROKEN).sorted_ok


def test_repeat_benchmark_collects_samples():
    data = list(range(50, 0, -1))
    summary = repeat_benchmark(data, get_algorithm("merge"), repeats=5, warmup=1)
    assert summary.name == "Merge Sort"
    assert len(summary.samples_ms) == 5
    assert summary.time_ci is not None
    assert summary.time_ci.n == 5
    assert summary.time_ci.lower <= summary.time_ci.mean <= summary.time_ci.upper
    assert summary.comparisons == run_benchmark(data, get_algorithm("merge")).comparisons
    assert summary.errors == []
    assert data == list(range(50, 0, -1))


def test_repeat_benchmark_bootstrap_and_validation():
    summary = repeat_benchmark([3, 2, 1], get_algorithm("quick"), repeats=4, ci_method="bootstrap")
    assert summary.time_ci.method == "bootstrap"
    with pytest.raises(ValueError):
        repeat_benchmark([1], get_algorithm("quick"), repeats=0)
    with pytest.raises(ValueError):
        repeat_benchmark([1], get_algorithm("quick"), repeats=2, ci_method="median")
