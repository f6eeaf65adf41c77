# src/sortscope/io.py
from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Sequence

from .suite import DatasetReport
from .utils import human_time


def report_to_dict(report: DatasetReport) -> dict[str, Any]:
    timings = {}
    for name, summary in report.timings.items():
        ci = summary.time_ci
        timings[name] = {
            "samples_ms": summary.samples_ms,
            "comparisons": summary.comparisons,
            "time_ci": asdict(ci) if ci is not None else None,
            "mean_human": human_time(ci.mean) if ci is not None else None,
            "errors": summary.errors,
        }

    return {
        "dataset": report.dataset.name,
        "n": report.n,
        "values": report.dataset.values,
        "results": [asdict(r) for r in report.results],
        "best": report.best.name if report.best else None,
        "predicted": report.predicted,
        "advisor_mode": report.advisor_mode.value,
        "prediction_matches": report.prediction_matches,
        "timings": timings,
        "errors": report.errors,
    }


def export_results_json(reports: Sequence[DatasetReport], out_path: str | Path, include_values: bool = False) -> Path:
    """
    Write a JSON file with the structured results of every dataset, for use by
    external frontends or later comparison. Raw dataset values are left out
    unless `include_values` is set.
    """
    out_path = Path(out_path)
    datasets = []
    for rep in reports:
        entry = report_to_dict(rep)
        if not include_values:
            entry.pop("values")
        datasets.append(entry)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps({"datasets": datasets}, indent=2, default=str), encoding="utf-8")
    return out_path
