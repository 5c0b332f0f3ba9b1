"""Command line interface for gc-content."""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from pathlib import Path

import yaml

from .pipeline import ReportConfig, run_report
from .sequence_api import MAX_SEQUENCE_LENGTH, SequenceValidationError, gc_content

CONFIG_KEYS = {
    "out_dir",
    "strict",
    "max_length",
    "chunk_size",
    "skip_undefined",
    "min_gc",
    "max_gc",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gccontent",
        description="Compute GC content of DNA sequences.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v: INFO, -vv: DEBUG).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    calc_parser = subparsers.add_parser(
        "calc",
        help="Print the GC fraction of a single sequence.",
    )
    calc_parser.add_argument("sequence", help="Nucleotide sequence.")
    calc_parser.add_argument(
        "--max-length",
        type=int,
        default=MAX_SEQUENCE_LENGTH,
        help="Reject sequences longer than this (default: %(default)s).",
    )
    calc_parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip alphabet and length checks; unknown symbols are ignored.",
    )

    report_parser = subparsers.add_parser(
        "report",
        help="Write per-record and pooled GC content for a FASTA file.",
    )
    report_parser.add_argument(
        "--fasta",
        type=Path,
        required=True,
        help="Input FASTA file.",
    )
    report_parser.add_argument(
        "--config",
        type=Path,
        help="Optional YAML configuration file.",
    )
    report_parser.add_argument(
        "--out-dir",
        type=Path,
        help="Output directory (default: data/gc_report).",
    )
    report_parser.add_argument(
        "--chunk-size",
        type=int,
        help="Count each sequence in chunks of this many bases.",
    )
    report_parser.add_argument(
        "--skip-undefined",
        action="store_true",
        default=None,
        help="Drop records without any A/C/G/T base.",
    )
    report_parser.add_argument(
        "--min-gc",
        type=float,
        help="Drop records whose GC ratio is below this fraction (0-1).",
    )
    report_parser.add_argument(
        "--max-gc",
        type=float,
        help="Drop records whose GC ratio is above this fraction (0-1).",
    )
    report_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Do not reject records with invalid characters.",
    )
    return parser


def load_config(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    unknown = set(raw) - CONFIG_KEYS
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    return raw


def _resolve_path(value: str | Path | None) -> Path | None:
    if value is None:
        return None
    return Path(value).expanduser()


def _optional_int(raw_config: dict, key: str) -> int | None:
    value = raw_config.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"`{key}` must be an integer, got {value!r}")
    return value


def _optional_float(raw_config: dict, key: str) -> float | None:
    value = raw_config.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"`{key}` must be a number, got {value!r}")
    return float(value)


def _optional_bool(raw_config: dict, key: str, default: bool) -> bool:
    value = raw_config.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"`{key}` must be true or false, got {value!r}")
    return value


def build_report_config(
    fasta: Path,
    raw_config: dict,
    out_dir: Path | None = None,
    chunk_size: int | None = None,
    skip_undefined: bool | None = None,
    lenient: bool = False,
    min_gc: float | None = None,
    max_gc: float | None = None,
) -> ReportConfig:
    """Merge YAML values with command line overrides."""
    resolved_out = (
        _resolve_path(out_dir)
        or _resolve_path(raw_config.get("out_dir"))
        or Path("data/gc_report")
    )
    if skip_undefined is None:
        skip_undefined = _optional_bool(raw_config, "skip_undefined", False)
    max_length = (
        _optional_int(raw_config, "max_length")
        if "max_length" in raw_config
        else MAX_SEQUENCE_LENGTH
    )
    return ReportConfig(
        input_fasta=_resolve_path(fasta),
        out_dir=resolved_out,
        strict=False if lenient else _optional_bool(raw_config, "strict", True),
        max_length=max_length,
        chunk_size=chunk_size if chunk_size is not None else _optional_int(raw_config, "chunk_size"),
        skip_undefined=skip_undefined,
        min_gc=min_gc if min_gc is not None else _optional_float(raw_config, "min_gc"),
        max_gc=max_gc if max_gc is not None else _optional_float(raw_config, "max_gc"),
    )


def _configure_logging(verbose: int) -> None:
    level = (
        logging.WARNING
        if verbose == 0
        else (logging.INFO if verbose == 1 else logging.DEBUG)
    )
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _calc_command(args: argparse.Namespace) -> int:
    try:
        ratio = gc_content(
            args.sequence,
            max_length=args.max_length,
            validate=not args.no_validate,
        )
    except SequenceValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(f"{ratio:.6f}")
    return 0


def _report_command(args: argparse.Namespace) -> int:
    raw_config = load_config(args.config) if args.config else {}
    config = build_report_config(
        args.fasta,
        raw_config,
        out_dir=args.out_dir,
        chunk_size=args.chunk_size,
        skip_undefined=args.skip_undefined,
        lenient=args.lenient,
        min_gc=args.min_gc,
        max_gc=args.max_gc,
    )
    summary = run_report(config)
    _print_summary(summary)
    return 0


def _print_summary(summary: dict) -> None:
    lines = [
        f"Input: {summary.get('input')}",
        f"Records reported: {summary.get('record_count', 0)}",
        f"Records rejected: {summary.get('rejected_count', 0)}",
        f"Records without valid bases: {summary.get('undefined_count', 0)}",
        f"Records outside GC range: {summary.get('filtered_count', 0)}",
        f"Valid bases: {summary.get('valid_bases', 0)}",
        f"Pooled GC ratio: {summary.get('gc_ratio', 0.0):.6f}",
    ]

    if summary.get("paths"):
        lines.append("Outputs:")
        for label, path in summary["paths"].items():
            lines.append(f"  - {label}: {path}")
    else:
        lines.append("No records were exported.")

    message = "\n".join(lines)
    print(textwrap.dedent(message))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    if args.command == "calc":
        return _calc_command(args)
    if args.command == "report":
        return _report_command(args)
    parser.print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
