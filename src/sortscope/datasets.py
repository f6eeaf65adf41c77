# src/sortscope/datasets.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

FEW_UNIQUE_POOL = (-5, -1, 0, 3, 7, 12)
LARGE_RANDOM_MIN_SIZE = 1001


@dataclass
class Dataset:
    name: str
    values: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.values)


def make_rng(seed: Optional[int] = 42) -> np.random.Generator:
    return np.random.default_rng(seed)


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError("dataset size must be >= 0")


def random_data(n: int, low: int, high: int, rng: np.random.Generator) -> List[int]:
    """Uniform integers in [low, high]."""
    _check_size(n)
    return rng.integers(low, high, size=n, endpoint=True).tolist()


def nearly_sorted_data(n: int, rng: np.random.Generator) -> List[int]:
    """1..n with roughly n/10 random swaps applied."""
    _check_size(n)
    if n < 2:
        return [0] * n
    data = list(range(1, n + 1))
    swaps = max(1, n // 10)
    for _ in range(swaps):
        a, b = rng.integers(0, n, size=2).tolist()
        data[a], data[b] = data[b], data[a]
    return data


def reversed_data(n: int) -> List[int]:
    _check_size(n)
    return list(range(n, 0, -1))


def few_unique_data(n: int, rng: np.random.Generator) -> List[int]:
    """Values drawn from a six-element pool, so most are duplicates."""
    _check_size(n)
    return rng.choice(np.array(FEW_UNIQUE_POOL), size=n).tolist()


def _large_random(size: int, rng: np.random.Generator) -> List[int]:
    if size < LARGE_RANDOM_MIN_SIZE:
        raise ValueError(f"large_random datasets need more than {LARGE_RANDOM_MIN_SIZE - 1} elements")
    return random_data(size, 0, 100_000, rng)


# kind -> (display name, builder)
DATASET_KINDS: Dict[str, Tuple[str, Callable[[int, np.random.Generator], List[int]]]] = {
    "random": ("Random", lambda size, rng: random_data(size, -50, 50, rng)),
    "nearly_sorted": ("Nearly Sorted", nearly_sorted_data),
    "reversed": ("Reversed", lambda size, rng: reversed_data(size)),
    "few_unique": ("Few Unique", few_unique_data),
    "large_random": ("Large Random", _large_random),
}


def build_dataset(kind: str, size: int, rng: np.random.Generator) -> Dataset:
    try:
        name, builder = DATASET_KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown dataset kind {kind!r}; expected one of {', '.join(DATASET_KINDS)}") from None
    _check_size(size)
    return Dataset(name, builder(size, rng))


def demo_datasets(rng: np.random.Generator) -> List[Dataset]:
    return [
        Dataset("Random", random_data(15, -50, 50, rng)),
        Dataset("Nearly Sorted", nearly_sorted_data(20, rng)),
        Dataset("Reversed", reversed_data(25)),
        Dataset("Few Unique", few_unique_data(200, rng)),
        Dataset("Large Random", random_data(5000, 0, 100_000, rng)),
    ]
