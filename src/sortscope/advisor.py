# src/sortscope/advisor.py
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np

from .sorts import BUBBLE, INSERTION, MERGE, QUICK


class AdvisorMode(str, Enum):
    DECISION_TREE = "decision_tree"
    KNN = "knn"
    CUSTOM_RULES = "custom_rules"

    @property
    def label(self) -> str:
        return {
            AdvisorMode.DECISION_TREE: "Decision Tree",
            AdvisorMode.KNN: "k-NN",
            AdvisorMode.CUSTOM_RULES: "Custom Rules",
        }[self]


@dataclass(frozen=True)
class AdvisorFeatures:
    n: int
    sortedness: float
    unique_ratio: float
    log_size: float


def calculate_sortedness(data: Sequence[int]) -> float:
    """Fraction of adjacent pairs already in non-decreasing order (1.0 when n < 2)."""
    if len(data) < 2:
        return 1.0
    in_order = sum(1 for i in range(len(data) - 1) if data[i] <= data[i + 1])
    return in_order / (len(data) - 1)


def calculate_unique_ratio(data: Sequence[int]) -> float:
    """Distinct values over n (0.0 for an empty dataset)."""
    if not data:
        return 0.0
    return len(set(data)) / len(data)


def normalized_log_size(n: int) -> float:
    # log10(n) / 5 maps n in [1, 100000] onto [0, 1]
    if n <= 1:
        return 0.0
    return min(1.0, max(0.0, math.log10(n) / 5.0))


def extract_features(data: Sequence[int]) -> AdvisorFeatures:
    return AdvisorFeatures(
        n=len(data),
        sortedness=calculate_sortedness(data),
        unique_ratio=calculate_unique_ratio(data),
        log_size=normalized_log_size(len(data)),
    )


def _predict_decision_tree(f: AdvisorFeatures) -> str:
    # tiny inputs: bubble only as a baseline for unsorted data
    if f.n <= 30:
        return BUBBLE.name if f.sortedness < 0.80 else INSERTION.name
    if f.n <= 50:
        return INSERTION.name
    if f.sortedness >= 0.90:
        return INSERTION.name
    if f.unique_ratio <= 0.20 and f.n >= 1000:
        return MERGE.name
    if f.sortedness <= 0.10:
        return MERGE.name
    return QUICK.name


# (log size, sortedness, unique ratio) prototypes; read-only after import
_PROTOTYPES = (
    ((normalized_log_size(20), 0.30, 0.90), BUBBLE.name),
    ((normalized_log_size(30), 0.20, 0.90), BUBBLE.name),
    ((normalized_log_size(20), 0.50, 0.90), INSERTION.name),
    ((normalized_log_size(50), 0.95, 0.90), INSERTION.name),
    ((normalized_log_size(500), 0.95, 0.80), INSERTION.name),
    ((normalized_log_size(5000), 0.92, 0.80), INSERTION.name),
    ((normalized_log_size(2000), 0.50, 0.10), MERGE.name),
    ((normalized_log_size(20000), 0.50, 0.10), MERGE.name),
    ((normalized_log_size(5000), 0.55, 0.95), QUICK.name),
    ((normalized_log_size(50000), 0.55, 0.95), QUICK.name),
    ((normalized_log_size(5000), 0.05, 0.90), MERGE.name),
)
_PROTOTYPE_POINTS = np.array([p for p, _ in _PROTOTYPES], dtype=float)
_PROTOTYPE_POINTS.setflags(write=False)
_PROTOTYPE_LABELS = tuple(label for _, label in _PROTOTYPES)

# majority-vote ties resolve in this order
_VOTE_PRIORITY = (INSERTION.name, MERGE.name, QUICK.name, BUBBLE.name)


def _predict_knn(f: AdvisorFeatures, k: int = 3) -> str:
    point = np.array([f.log_size, f.sortedness, f.unique_ratio], dtype=float)
    d2 = np.sum((_PROTOTYPE_POINTS - point) ** 2, axis=1)
    nearest = np.argsort(d2, kind="stable")[:k]
    votes = {label: 0 for label in _VOTE_PRIORITY}
    for idx in nearest:
        votes[_PROTOTYPE_LABELS[idx]] += 1
    top = max(votes.values())
    for label in _VOTE_PRIORITY:
        if votes[label] == top:
            return label
    return BUBBLE.name


def _predict_custom_rules(f: AdvisorFeatures) -> str:
    small_n = 60
    sorted_thresh = 0.88
    dup_thresh = 0.15

    if f.n <= 30 and f.sortedness < 0.80:
        return BUBBLE.name
    if f.n <= small_n:
        return INSERTION.name
    if f.sortedness >= sorted_thresh:
        return INSERTION.name
    if f.unique_ratio <= dup_thresh:
        return MERGE.name
    return QUICK.name


def predict_best_algorithm(data: Sequence[int], mode: AdvisorMode = AdvisorMode.DECISION_TREE) -> str:
    """
    Predict which of the four sorts should win on `data`.

    Returns exactly one of "Bubble Sort", "Insertion Sort", "Merge Sort",
    "Quick Sort", the same labels the benchmark results carry.
    """
    mode = AdvisorMode(mode)
    features = extract_features(data)
    if mode is AdvisorMode.KNN:
        return _predict_knn(features)
    if mode is AdvisorMode.CUSTOM_RULES:
        return _predict_custom_rules(features)
    return _predict_decision_tree(features)
