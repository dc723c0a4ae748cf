"""Command line entry point.

Examples:
   statdash --input data.csv --column sales --kind descriptive
   statdash --input sample:population --column area --kind outliers
   statdash --input https://example.com/data.json --overview
   statdash --input sample:sales --chart-type line --x month --y sales
"""
import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .artifacts import make_run_dirs, write_report
from .charts import CHART_TYPES, chart_payload
from .config import load_config
from .constants import ANALYSIS_KINDS
from .errors import InvalidInputError, LoadError, ValidationError
from .loader import load_source
from .pipeline import PipelineConfig, run_analysis
from .profiler import preview, profile, render_preview, render_profile
from .schema import column_labels, numeric_columns
from .validator import ensure_valid

log = logging.getLogger("statdash.cli")


def _parse_args(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    p = argparse.ArgumentParser(prog="statdash", description="Descriptive statistics for tabular data")
    p.add_argument("--config", type=str, default=None, help="Path to config.yaml or config.json")
    p.add_argument("--input", type=str, required=True, help="File path, http(s) JSON URL, or sample:<sales|population|healthcare>")
    p.add_argument("--column", type=str, default=None, help="Column to analyze (default: first numeric column)")
    p.add_argument("--kind", type=str, default="descriptive", choices=ANALYSIS_KINDS, help="Analysis to run")
    p.add_argument("--bins", type=int, default=None, help="Histogram bin count")
    p.add_argument("--output-dir", type=str, default=None, help="Write report.json/report.md under this directory")
    p.add_argument("--overview", action="store_true", help="Print the dataset overview")
    p.add_argument("--list-columns", action="store_true", help="List columns with their numeric/text label")
    p.add_argument("--json", action="store_true", help="Print the full report as JSON")
    p.add_argument("--preview", action="store_true", help="Print the first 10 rows")
    p.add_argument("--chart-type", type=str, default="bar", choices=CHART_TYPES, help="Chart type for --x/--y")
    p.add_argument("--x", type=str, default=None, help="Chart x-axis column")
    p.add_argument("--y", type=str, default=None, help="Chart y-axis column")
    return vars(p.parse_args(argv))


def _setup_logging(cfg: Dict[str, Any]) -> None:
    level = (cfg.get("logging", {}).get("level") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    cfg = load_config(args.get("config"))
    _setup_logging(cfg)

    try:
        dataset = load_source(args["input"], cfg.get("input", {}))
    except LoadError as e:
        log.error(f"Error loading dataset: {e}")
        print(f"Error loading dataset: {e}", file=sys.stderr)
        return 1

    try:
        warnings = ensure_valid(dataset, cfg.get("input", {}))
    except ValidationError as e:
        log.error(f"Invalid dataset: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    for w in warnings:
        log.warning(w)

    if args.get("list_columns"):
        for _, label in column_labels(dataset):
            print(label)
        return 0

    if args.get("preview"):
        print(render_preview(preview(dataset)))
        if not (args.get("overview") or args.get("column") or args.get("x") or args.get("y")):
            return 0
        print()

    if args.get("overview"):
        print(render_profile(profile(dataset, cfg.get("analysis", {}))))
        if not (args.get("column") or args.get("x") or args.get("y")):
            return 0
        print()

    if args.get("x") or args.get("y"):
        if not (args.get("x") and args.get("y")):
            print("Error: please select both --x and --y", file=sys.stderr)
            return 1
        try:
            chart = chart_payload(dataset, args["x"], args["y"], args["chart_type"])
        except InvalidInputError as e:
            log.error(f"Error generating chart: {e}")
            print(f"Error generating chart: {e}", file=sys.stderr)
            return 1
        print(json.dumps(chart, indent=2, default=str))
        return 0

    column = args.get("column")
    if not column:
        candidates = numeric_columns(dataset) or dataset.columns
        column = candidates[0]

    pcfg = PipelineConfig.from_config(cfg)
    if args.get("output_dir"):
        pcfg.output_dir = args["output_dir"]
        pcfg.write_artifacts = True

    report = run_analysis(dataset, column, args["kind"], bins=args.get("bins"), cfg=pcfg)
    if args.get("json"):
        print(json.dumps(report.as_dict(), indent=2, default=str))
    else:
        print(report.report_text)

    if pcfg.write_artifacts:
        dirs = make_run_dirs(pcfg.output_dir, report.run_id)
        write_report(report.as_dict(), dirs["output_dir"])
        log.info(f"DONE. Outputs: {dirs['output_dir']}")

    return 0 if report.ok else 1
