# src/sortscope/report.py
from __future__ import annotations

import importlib.resources as pkg_resources
from pathlib import Path
from typing import List, Optional, Sequence

import plotly.io as pio
from jinja2 import BaseLoader, Environment
from markupsafe import escape

from .aggregate import rank_results
from .plotting import comparisons_bar_figure, runtime_bar_figure
from .suite import DatasetReport
from .utils import format_ms, human_time


def load_template_text() -> str:
    """Load the Jinja2 report template shipped inside the package."""
    tmpl = pkg_resources.files("sortscope").joinpath("templates/report.html.j2")
    return tmpl.read_text(encoding="utf-8")


def fig_to_div(fig, include_js: bool = False) -> str:
    """
    Convert a Plotly figure to an HTML div. When include_js=True, embed
    Plotly JS from the CDN (used once per report).
    """
    return pio.to_html(
        fig,
        include_plotlyjs="cdn" if include_js else False,
        full_html=False,
        default_width="100%",
        default_height="500px",
    )


# ----------------------
# Console rendering
# ----------------------
def format_array(values: Sequence[int]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def format_results_table(report: DatasetReport) -> str:
    """Fixed-width Algorithm / Comparisons / Time (ms) table."""
    name_width = max([len("Algorithm")] + [len(r.name) for r in report.results]) + 2
    comp_width = max(12, len("Comparisons") + 2)
    time_width = max(12, len("Time (ms)") + 2)

    lines = [
        f"{'Algorithm':<{name_width}}{'Comparisons':<{comp_width}}{'Time (ms)':<{time_width}}",
        "-" * (name_width + comp_width + time_width),
    ]
    for r in report.results:
        if r.skipped:
            lines.append(f"{r.name:<{name_width}}{'skipped':<{comp_width}}{'skipped':<{time_width}}")
        else:
            row = f"{r.name:<{name_width}}{r.comparisons:<{comp_width}}{format_ms(r.time_ms):<{time_width}}"
            if not r.sorted_ok:
                row += "UNSORTED"
            lines.append(row)
    return "\n".join(line.rstrip() for line in lines)


def format_best_line(report: DatasetReport) -> str:
    best = report.best
    if best is None:
        return "Actual best: no result available"
    return f"Actual best: {best.name} (time={format_ms(best.time_ms)} ms, comparisons={best.comparisons})"


def format_prediction_line(report: DatasetReport) -> str:
    if report.predicted is None:
        return "Predicted best: n/a"
    line = f"Predicted best ({report.advisor_mode.label}): {report.predicted}"
    matches = report.prediction_matches
    if matches is not None:
        line += " [match]" if matches else " [mismatch]"
    return line


def render_dataset_report(report: DatasetReport, preview_limit: int = 20, quadratic_limit: Optional[int] = None) -> str:
    """Everything the CLI prints for one dataset."""
    out = [f"=== Dataset: {report.dataset.name} (n={report.n}) ==="]
    if report.n <= preview_limit:
        out.append("Original: " + format_array(report.dataset.values))
    if report.skipped and quadratic_limit is not None:
        out.append(f"Skipping {' and '.join(report.skipped)} because n > {quadratic_limit}.")
    out.append(format_results_table(report))
    out.append(format_best_line(report))
    out.append(format_prediction_line(report))
    for err in report.errors:
        out.append(f"[Error] {err}")
    return "\n".join(out)


# ----------------------
# HTML report
# ----------------------
def _summary_rows(reports: Sequence[DatasetReport]) -> List[dict]:
    rows = []
    for rep in reports:
        rows.append({
            "dataset": rep.dataset.name,
            "n": rep.n,
            "best": rep.best.name if rep.best else "no result available",
            "predicted": rep.predicted or "n/a",
            "matches": rep.prediction_matches,
            "ranking": [r.name for r in rank_results(rep.results)],
        })
    return rows


def build_report_html(
    reports: Sequence[DatasetReport],
    title: str = "Sorting Benchmark Report",
    notes: Optional[str] = None,
) -> str:
    """
    Render the HTML report: per-dataset result tables, advisor accuracy and
    runtime/comparison charts.
    """
    env = Environment(loader=BaseLoader(), autoescape=True)
    env.filters["human_time"] = human_time
    env.filters["ms"] = format_ms
    tpl = env.from_string(load_template_text())

    runtime_div = fig_to_div(runtime_bar_figure(reports, title)) if reports else ""
    comparisons_div = fig_to_div(comparisons_bar_figure(reports, title)) if reports else ""

    rows = _summary_rows(reports)
    judged = [row for row in rows if row["matches"] is not None]
    accuracy = (sum(1 for row in judged if row["matches"]) / len(judged)) if judged else None

    return tpl.render(
        title=title,
        notes=escape(notes) if notes else None,
        reports=reports,
        summary_rows=rows,
        accuracy=accuracy,
        runtime_div=runtime_div,
        comparisons_div=comparisons_div,
    )


def write_report_html(
    reports: Sequence[DatasetReport],
    out_path: str | Path,
    title: str = "Sorting Benchmark Report",
    notes: Optional[str] = None,
) -> Path:
    out_path = Path(out_path)
    html = build_report_html(reports, title=title, notes=notes)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(html, encoding="utf-8")
    return out_path
