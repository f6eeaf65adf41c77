from __future__ import annotations

import pytest

from sortscope.datasets import (
    DATASET_KINDS,
    FEW_UNIQUE_POOL,
    build_dataset,
    demo_datasets,
    few_unique_data,
    make_rng,
    nearly_sorted_data,
    random_data,
    reversed_data,
)


def test_generators_are_deterministic_for_a_seed():
    a = [ds.values for ds in demo_datasets(make_rng(42))]
    b = [ds.values for ds in demo_datasets(make_rng(42))]
    assert a == b


def test_demo_datasets_shape():
    datasets = demo_datasets(make_rng(1))
    assert [ds.name for ds in datasets] == ["Random", "Nearly Sorted", "Reversed", "Few Unique", "Large Random"]
    assert [len(ds) for ds in datasets] == [15, 20, 25, 200, 5000]
    assert all(type(v) is int for ds in datasets for v in ds.values)


def test_random_data_bounds():
    values = random_data(500, -50, 50, make_rng(3))
    assert len(values) == 500
    assert min(values) >= -50
    assert max(values) <= 50


def test_nearly_sorted_is_a_permutation():
    values = nearly_sorted_data(100, make_rng(5))
    assert sorted(values) == list(range(1, 101))
    assert nearly_sorted_data(1, make_rng(5)) == [0]
    assert nearly_sorted_data(0, make_rng(5)) == []


def test_reversed_data():
    assert reversed_data(5) == [5, 4, 3, 2, 1]
    assert reversed_data(0) == []


def test_few_unique_uses_pool():
    values = few_unique_data(300, make_rng(9))
    assert len(values) == 300
    assert set(values) <= set(FEW_UNIQUE_POOL)


def test_build_dataset_kinds():
    rng = make_rng(11)
    for kind, (name, _) in DATASET_KINDS.items():
        size = 1500 if kind == "large_random" else 30
        ds = build_dataset(kind, size, rng)
        assert ds.name == name
        assert len(ds) == size


def test_build_dataset_rejects_bad_input():
    rng = make_rng(0)
    with pytest.raises(ValueError):
        build_dataset("sawtooth", 10, rng)
    with pytest.raises(ValueError):
        build_dataset("random", -1, rng)
    with pytest.raises(ValueError):
        build_dataset("large_random", 1000, rng)
