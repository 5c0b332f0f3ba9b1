"""Export helpers for CSV, JSON, and JSONL outputs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd


def write_csv(rows: Iterable[dict], path: Path, columns: Sequence[str] | None = None) -> Path:
    """Write rows as CSV; ``columns`` fixes the column order when given."""
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = pd.DataFrame.from_records(list(rows), columns=list(columns) if columns else None)
    frame.to_csv(path, index=False)
    return path


def write_jsonl(rows: Iterable[dict], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        handle.writelines(json.dumps(row, ensure_ascii=False) + "\n" for row in rows)
    return path


def write_json(payload: dict, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=False)
        handle.write("\n")
    return path
