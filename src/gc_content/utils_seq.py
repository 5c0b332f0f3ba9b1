"""FASTA reading helpers."""

from __future__ import annotations

from pathlib import Path
from typing import List


def _record(header: str, seq_lines: list[str]) -> dict:
    return {
        "header": header,
        "accession": header.split()[0] if header else "",
        "sequence": "".join(seq_lines),
    }


def parse_fasta(text: str) -> List[dict]:
    """Split a FASTA payload into structured records."""
    records: List[dict] = []
    header: str | None = None
    seq_lines: list[str] = []

    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith(">"):
            if header is not None:
                records.append(_record(header, seq_lines))
            header = stripped[1:].strip()
            seq_lines = []
        elif header is not None:
            seq_lines.append("".join(stripped.split()))

    if header is not None:
        records.append(_record(header, seq_lines))

    return records


def load_fasta_records(path: Path) -> List[dict]:
    """Parse a FASTA file into a list of records."""
    if not path.exists():
        raise FileNotFoundError(f"FASTA file not found: {path}")
    return parse_fasta(path.read_text(encoding="utf-8"))
