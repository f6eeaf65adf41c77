from __future__ import annotations

from itertools import permutations

from sortscope import BenchmarkResult, pick_best, rank_results


def _r(name, ms, comps, skipped=False):
    if skipped:
        return BenchmarkResult.skipped_result(name)
    return BenchmarkResult(name=name, comparisons=comps, time_ms=ms)


def test_pick_best_fastest_wins():
    results = [_r("Bubble Sort", 2.0, 10), _r("Merge Sort", 1.0, 50), _r("Quick Sort", 1.5, 5)]
    assert pick_best(results).name == "Merge Sort"


def test_equal_time_prefers_fewer_comparisons():
    results = [_r("Merge Sort", 0.5, 40), _r("Quick Sort", 0.5, 30)]
    assert pick_best(results).name == "Quick Sort"


def test_times_within_epsilon_count_as_tie():
    results = [_r("Merge Sort", 0.5000005, 40), _r("Quick Sort", 0.5, 45), _r("Insertion Sort", 0.5000009, 10)]
    assert pick_best(results).name == "Insertion Sort"
    # with a zero epsilon the raw fastest wins
    assert pick_best(results, epsilon=0.0).name == "Quick Sort"


def test_exact_tie_keeps_first_entry():
    results = [_r("Merge Sort", 0.5, 40), _r("Quick Sort", 0.5, 40)]
    assert pick_best(results).name == "Merge Sort"


def test_skipped_results_are_ignored():
    results = [_r("Bubble Sort", 0, 0, skipped=True), _r("Quick Sort", 3.0, 100)]
    assert pick_best(results).name == "Quick Sort"


def test_all_skipped_means_no_result():
    results = [_r("Bubble Sort", 0, 0, skipped=True), _r("Insertion Sort", 0, 0, skipped=True)]
    assert pick_best(results) is None
    assert pick_best([]) is None


def test_skipped_result_shape():
    r = BenchmarkResult.skipped_result("Bubble Sort")
    assert r.skipped
    assert r.comparisons == 0
    assert r.time_ms == 0.0


def test_rank_results_orders_by_time_then_comparisons():
    results = [
        _r("Bubble Sort", 0, 0, skipped=True),
        _r("Insertion Sort", 2.0, 10),
        _r("Merge Sort", 1.0, 50),
        _r("Quick Sort", 1.0, 20),
    ]
    ranked = rank_results(results)
    assert [r.name for r in ranked] == ["Quick Sort", "Merge Sort", "Insertion Sort"]
    assert ranked[0] == pick_best(results)


def test_rank_results_with_chained_near_ties():
    # a is within epsilon of b, b of c, but a and c are further apart
    a = _r("Bubble Sort", 1.0, 30)
    b = _r("Merge Sort", 1.0000008, 20)
    c = _r("Quick Sort", 1.0000016, 10)
    for order in permutations([a, b, c]):
        ranked = rank_results(order)
        assert ranked[0] is pick_best(order)
        rest = ranked[1:]
        assert rest == sorted(rest, key=lambda r: (r.time_ms, r.comparisons))
        assert len(ranked) == 3


def test_rank_results_all_skipped():
    assert rank_results([_r("Bubble Sort", 0, 0, skipped=True)]) == []
