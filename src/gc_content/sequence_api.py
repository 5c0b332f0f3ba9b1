"""Text-level entry point that validates a sequence before handing it to the calculator."""

from __future__ import annotations

import re

from .calculator import BaseCounts, calculate_gc_content, count_bases

MAX_SEQUENCE_LENGTH = 1_000_000

# IUPAC nucleotide codes, gaps ('-', '.'), stop ('*') and whitespace.
NUCLEOTIDE_PATTERN = re.compile(r"^[ACGTUacgtuRYSWKMBDHVN\-.*\s]*$")
_INVALID_CHAR = re.compile(r"[^ACGTUacgtuRYSWKMBDHVN\-.*\s]")


class SequenceValidationError(ValueError):
    """Raised when a text sequence cannot be passed to the calculator."""


def validate_sequence(sequence: str, max_length: int | None = MAX_SEQUENCE_LENGTH) -> str:
    """Check type, length and alphabet of ``sequence`` and return it unchanged."""
    if not isinstance(sequence, str):
        raise SequenceValidationError(
            f"sequence must be str, got {type(sequence).__name__}"
        )
    if max_length is not None and len(sequence) > max_length:
        raise SequenceValidationError(
            f"sequence too long ({len(sequence)} > {max_length} characters)"
        )
    if not NUCLEOTIDE_PATTERN.match(sequence):
        bad = _INVALID_CHAR.search(sequence)
        raise SequenceValidationError(
            f"invalid nucleotide character {bad.group()!r} at position {bad.start()}"
        )
    return sequence


def _encode(sequence: str, max_length: int | None, validate: bool) -> bytes:
    if validate:
        validate_sequence(sequence, max_length=max_length)
    return sequence.encode("ascii", errors="replace")


def gc_content(
    sequence: str,
    max_length: int | None = MAX_SEQUENCE_LENGTH,
    validate: bool = True,
) -> float:
    """GC fraction of a text sequence, 0.0 when it holds no A/C/G/T."""
    data = _encode(sequence, max_length, validate)
    return calculate_gc_content(data, len(data))


def gc_counts(
    sequence: str,
    max_length: int | None = MAX_SEQUENCE_LENGTH,
    validate: bool = True,
) -> BaseCounts:
    data = _encode(sequence, max_length, validate)
    return count_bases(data, len(data))
