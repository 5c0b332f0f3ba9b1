"""Orchestration helpers for GC content reports over FASTA files."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .calculator import BaseCounts, combine_counts, symbol_counts, symbol_counts_chunked
from .exporter import write_csv, write_json, write_jsonl
from .featurizer import FEATURE_NAMES, features_from_counts
from .sequence_api import MAX_SEQUENCE_LENGTH, SequenceValidationError, validate_sequence
from .utils_seq import load_fasta_records

LOGGER = logging.getLogger(__name__)

FEATURE_COLUMNS = ("accession", *FEATURE_NAMES)


@dataclass(slots=True)
class ReportConfig:
    input_fasta: Path
    out_dir: Path
    strict: bool = True
    max_length: int | None = MAX_SEQUENCE_LENGTH
    chunk_size: int | None = None
    skip_undefined: bool = False
    min_gc: float | None = None
    max_gc: float | None = None


def _check_config(config: ReportConfig) -> None:
    if config.chunk_size is not None and config.chunk_size <= 0:
        raise ValueError(f"`chunk_size` must be positive, got {config.chunk_size}")
    for key in ("min_gc", "max_gc"):
        value = getattr(config, key)
        if value is not None and not 0.0 <= value <= 1.0:
            raise ValueError(f"`{key}` must lie in [0, 1], got {value}")
    if (
        config.min_gc is not None
        and config.max_gc is not None
        and config.min_gc > config.max_gc
    ):
        raise ValueError(
            f"`min_gc` ({config.min_gc}) is greater than `max_gc` ({config.max_gc})"
        )


def _tally(data: bytes, chunk_size: int | None) -> Counter:
    if chunk_size:
        return symbol_counts_chunked(data, len(data), chunk_size)
    return symbol_counts(data, len(data))


def _outside_gc_range(ratio: float, config: ReportConfig) -> bool:
    if config.min_gc is not None and ratio < config.min_gc:
        return True
    return config.max_gc is not None and ratio > config.max_gc


def run_report(config: ReportConfig) -> dict:
    """Compute per-record and pooled GC content for a FASTA file and export it."""
    _check_config(config)

    records = load_fasta_records(config.input_fasta)
    LOGGER.info("Records read from %s: %s", config.input_fasta, len(records))

    feature_rows: List[dict] = []
    rejected_rows: List[dict] = []
    kept_counts: List[BaseCounts] = []
    undefined_count = 0
    filtered_count = 0

    for record in records:
        sequence = record["sequence"]
        if config.strict:
            try:
                validate_sequence(sequence, max_length=config.max_length)
            except SequenceValidationError as exc:
                LOGGER.warning("Rejected %s: %s", record["accession"], exc)
                rejected_rows.append(
                    {
                        "accession": record["accession"],
                        "header": record["header"],
                        "reason": str(exc),
                    }
                )
                continue

        data = sequence.encode("ascii", errors="replace")
        features, counts = features_from_counts(_tally(data, config.chunk_size), len(data))
        if not counts.is_defined:
            undefined_count += 1
            if config.skip_undefined:
                LOGGER.info("Skipped %s: no A/C/G/T bases", record["accession"])
                continue

        if _outside_gc_range(features["gc_ratio"], config):
            filtered_count += 1
            LOGGER.info(
                "Filtered %s: GC ratio %.4f outside [%s, %s]",
                record["accession"],
                features["gc_ratio"],
                config.min_gc,
                config.max_gc,
            )
            continue

        feature_rows.append({"accession": record["accession"], **features})
        kept_counts.append(counts)

    pooled = combine_counts(kept_counts)
    summary = {
        "input": str(config.input_fasta),
        "record_count": len(feature_rows),
        "rejected_count": len(rejected_rows),
        "undefined_count": undefined_count,
        "filtered_count": filtered_count,
        "valid_bases": pooled.valid_base_count,
        "gc_ratio": pooled.ratio(),
        "paths": {},
    }
    LOGGER.info(
        "Records kept: %s, rejected: %s, filtered: %s, pooled GC ratio: %.6f",
        summary["record_count"],
        summary["rejected_count"],
        summary["filtered_count"],
        summary["gc_ratio"],
    )

    if not records:
        return summary

    out_dir = config.out_dir
    paths = {}
    if feature_rows:
        paths["features"] = write_csv(
            feature_rows, out_dir / "features.csv", columns=FEATURE_COLUMNS
        )
    if rejected_rows:
        paths["rejected"] = write_jsonl(rejected_rows, out_dir / "rejected.jsonl")
    paths["summary"] = out_dir / "summary.json"
    summary["paths"] = {key: str(path) for key, path in paths.items()}
    write_json(summary, paths["summary"])
    return summary
