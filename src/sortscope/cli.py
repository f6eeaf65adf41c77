# src/sortscope/cli.py
"""
Command line entry point.

Usage:
    sortscope                       # interactive menu
    sortscope demo --html report.html
    sortscope custom --kind reversed --size 500 --advisor knn
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .advisor import AdvisorMode
from .config import BenchmarkConfig
from .datasets import DATASET_KINDS, LARGE_RANDOM_MIN_SIZE, Dataset, build_dataset, demo_datasets, make_rng
from .io import export_results_json
from .report import render_dataset_report, write_report_html
from .suite import DatasetReport, run_suites

logger = logging.getLogger(__name__)

# menu number -> dataset kind, in the order the menu lists them
MENU_KINDS = ("random", "nearly_sorted", "reversed", "few_unique", "large_random")


def read_int_in_range(
    prompt: str,
    min_value: int,
    max_value: Optional[int] = None,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> int:
    """Prompt until the user enters an integer in [min_value, max_value]."""
    while True:
        raw = input_fn(prompt)
        try:
            value = int(raw.strip())
        except ValueError:
            value = None
        if value is not None and value >= min_value and (max_value is None or value <= max_value):
            return value
        output("Invalid input. Try again.")


def interactive_datasets(
    rng,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> List[Dataset]:
    output("Sorting Benchmark")
    output("1) Demo datasets")
    output("2) Custom dataset")
    mode = read_int_in_range("Select mode (1-2): ", 1, 2, input_fn, output)
    if mode == 1:
        return demo_datasets(rng)

    output("Dataset types:")
    for i, kind in enumerate(MENU_KINDS, start=1):
        suffix = f" (n > {LARGE_RANDOM_MIN_SIZE - 1})" if kind == "large_random" else ""
        output(f"{i}) {DATASET_KINDS[kind][0]}{suffix}")
    choice = read_int_in_range(f"Select dataset type (1-{len(MENU_KINDS)}): ", 1, len(MENU_KINDS), input_fn, output)
    kind = MENU_KINDS[choice - 1]
    if kind == "large_random":
        size = read_int_in_range(f"Enter dataset size (> {LARGE_RANDOM_MIN_SIZE - 1}): ",
                                 LARGE_RANDOM_MIN_SIZE, None, input_fn, output)
    else:
        size = read_int_in_range("Enter dataset size: ", 1, None, input_fn, output)
    return [build_dataset(kind, size, rng)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortscope",
        description="Benchmark bubble, insertion, merge and quick sort and compare with the advisor's prediction.",
    )
    parser.add_argument("--seed", type=int, default=42, help="RNG seed for dataset generation (default: 42)")
    parser.add_argument("--advisor", choices=[m.value for m in AdvisorMode], default=AdvisorMode.DECISION_TREE.value,
                        help="advisor mode used for the prediction")
    parser.add_argument("--repeats", type=int, default=1, help="extra timed runs per algorithm for confidence intervals")
    parser.add_argument("--warmup", type=int, default=0, help="untimed runs before repeated timing")
    parser.add_argument("--ci", choices=["t", "bootstrap"], default="t", help="confidence interval method")
    parser.add_argument("--run-all", action="store_true", help="never skip the quadratic sorts")
    parser.add_argument("--strict", action="store_true",
                        help="raise on unsorted output; the broken algorithm's row is dropped from the results "
                             "and only its error is reported")
    parser.add_argument("--html", metavar="PATH", help="write an HTML report")
    parser.add_argument("--json", metavar="PATH", help="write results as JSON")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug logging")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("demo", help="run the built-in demo datasets")
    custom = sub.add_parser("custom", help="run a single generated dataset")
    custom.add_argument("--kind", choices=list(DATASET_KINDS), required=True)
    custom.add_argument("--size", type=int, required=True)
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run(args: argparse.Namespace, input_fn: Callable[[str], str] = input) -> List[DatasetReport]:
    config = BenchmarkConfig(
        seed=args.seed,
        run_all=args.run_all,
        repeats=args.repeats,
        warmup=args.warmup,
        ci_method=args.ci,
        advisor_mode=AdvisorMode(args.advisor),
        strict=args.strict,
    )
    rng = make_rng(config.seed)

    if args.command == "demo":
        datasets = demo_datasets(rng)
    elif args.command == "custom":
        datasets = [build_dataset(args.kind, args.size, rng)]
    else:
        datasets = interactive_datasets(rng, input_fn=input_fn)

    reports = run_suites(datasets, config)
    for rep in reports:
        print()
        print(render_dataset_report(rep, config.preview_limit, config.quadratic_limit))

    if args.html:
        path = write_report_html(reports, args.html)
        print(f"\n✅ HTML report saved to: {path.resolve()}")
    if args.json:
        path = export_results_json(reports, args.json)
        print(f"✅ JSON results saved to: {path.resolve()}")
    return reports


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    try:
        reports = run(args)
    except ValueError as exc:
        parser.error(str(exc))
    except (EOFError, KeyboardInterrupt):
        print()
        return 130
    return 1 if any(rep.errors for rep in reports) else 0


if __name__ == "__main__":
    sys.exit(main())
