"""Per-sequence composition features."""

from __future__ import annotations

from .calculator import AT_SYMBOLS, GC_SYMBOLS, BaseCounts, symbol_counts

REPORTED_BASES = ("A", "C", "G", "T", "N")

FEATURE_NAMES = (
    "length",
    "valid_bases",
    "gc_ratio",
    "gc_percent",
    "gc_defined",
    "gc_skew",
    "count_A",
    "count_C",
    "count_G",
    "count_T",
    "count_N",
    "count_other",
)


def gc_skew(g_count: int, c_count: int) -> float:
    """(G - C) / (G + C), 0.0 when neither base occurs."""
    total = g_count + c_count
    if total == 0:
        return 0.0
    return (g_count - c_count) / total


def features_from_counts(counts, length: int) -> tuple[dict, BaseCounts]:
    """Build the feature row and the base counts from a byte tally."""
    per_base = {
        base: counts[ord(base)] + counts[ord(base.lower())] for base in REPORTED_BASES
    }
    gc = sum(counts[symbol] for symbol in GC_SYMBOLS)
    valid = gc + sum(counts[symbol] for symbol in AT_SYMBOLS)
    base_counts = BaseCounts(gc_count=gc, valid_base_count=valid)
    ratio = base_counts.ratio()
    features = {
        "length": length,
        "valid_bases": valid,
        "gc_ratio": ratio,
        "gc_percent": round(ratio * 100, 4),
        "gc_defined": base_counts.is_defined,
        "gc_skew": gc_skew(per_base["G"], per_base["C"]),
        "count_A": per_base["A"],
        "count_C": per_base["C"],
        "count_G": per_base["G"],
        "count_T": per_base["T"],
        "count_N": per_base["N"],
        "count_other": length - sum(per_base.values()),
    }
    return features, base_counts


def compute_features(sequence: str) -> dict:
    """Return simple descriptive statistics for a nucleotide sequence."""
    data = sequence.encode("ascii", errors="replace")
    features, _ = features_from_counts(symbol_counts(data, len(data)), len(data))
    return features
