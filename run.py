"""Convenience runner for the GC content report."""

from __future__ import annotations

import argparse
from pathlib import Path

from gc_content.cli import build_report_config, load_config
from gc_content.pipeline import run_report


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the GC content report without installing the CLI.",
    )
    parser.add_argument(
        "--fasta",
        type=Path,
        required=True,
        help="Input FASTA file.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config/config.yaml"),
        help="Path to configuration YAML file.",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    raw_config = load_config(args.config) if args.config.exists() else {}
    summary = run_report(build_report_config(args.fasta, raw_config))

    print(f"Records reported: {summary['record_count']}")
    print(f"Pooled GC ratio: {summary['gc_ratio']:.6f}")
    for label, path in summary["paths"].items():
        print(f"  - {label}: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
