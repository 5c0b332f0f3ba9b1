"""Single-pass GC content calculation over raw nucleotide bytes.

The entry point takes a buffer and an explicit length, mirroring a
pointer/length boundary. The caller owns the buffer; it is only ever read
through a bounded ``memoryview``.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

GC_SYMBOLS = frozenset(b"GCgc")
AT_SYMBOLS = frozenset(b"ATat")


@dataclass(frozen=True, slots=True)
class BaseCounts:
    """GC and valid-base tallies for one sequence or a slice of one."""

    gc_count: int = 0
    valid_base_count: int = 0

    def __add__(self, other: "BaseCounts") -> "BaseCounts":
        if not isinstance(other, BaseCounts):
            return NotImplemented
        return BaseCounts(
            self.gc_count + other.gc_count,
            self.valid_base_count + other.valid_base_count,
        )

    @property
    def at_count(self) -> int:
        return self.valid_base_count - self.gc_count

    @property
    def is_defined(self) -> bool:
        """False when no A/C/G/T was seen, i.e. the ratio is the 0.0 sentinel."""
        return self.valid_base_count > 0

    def ratio(self) -> float:
        if self.valid_base_count == 0:
            return 0.0
        return self.gc_count / self.valid_base_count


def _bounded_view(sequence, length: int) -> memoryview:
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    view = memoryview(sequence).cast("B")
    if length > view.nbytes:
        raise ValueError(
            f"length {length} exceeds buffer size {view.nbytes}"
        )
    return view[:length]


def symbol_counts(sequence, length: int) -> Counter:
    """Tally every byte value in the first ``length`` bytes of ``sequence``."""
    if length == 0:
        return Counter()
    return Counter(_bounded_view(sequence, length))


def count_bases(sequence, length: int) -> BaseCounts:
    """Return the GC and valid-base counts for the first ``length`` bytes.

    ``G``, ``C``, ``g``, ``c`` count towards both totals, ``A``, ``T``, ``a``,
    ``t`` only towards the valid bases. Any other byte is ignored.
    """
    counts = symbol_counts(sequence, length)
    gc = sum(counts[symbol] for symbol in GC_SYMBOLS)
    at = sum(counts[symbol] for symbol in AT_SYMBOLS)
    return BaseCounts(gc_count=gc, valid_base_count=gc + at)


def combine_counts(parts: Iterable[BaseCounts]) -> BaseCounts:
    """Sum partial counts, e.g. from contiguous chunks of one sequence."""
    return sum(parts, BaseCounts())


def calculate_gc_content(sequence, length: int) -> float:
    """Return the GC fraction of the first ``length`` bytes of ``sequence``.

    ``sequence`` is any object supporting the buffer protocol and must hold at
    least ``length`` bytes. The result lies in [0.0, 1.0]; an empty sequence
    or one without any A/C/G/T yields 0.0. Use :func:`count_bases` when the
    two cases have to be told apart.
    """
    if length == 0:
        return 0.0
    return count_bases(sequence, length).ratio()


def _chunk_views(sequence, length: int, chunk_size: int):
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if length == 0:
        return iter(())
    view = _bounded_view(sequence, length)
    return (view[start : start + chunk_size] for start in range(0, length, chunk_size))


def symbol_counts_chunked(sequence, length: int, chunk_size: int) -> Counter:
    """Per-byte tally built from contiguous chunks of ``chunk_size`` bytes."""
    total: Counter = Counter()
    for chunk in _chunk_views(sequence, length, chunk_size):
        total.update(symbol_counts(chunk, len(chunk)))
    return total


def calculate_gc_content_chunked(sequence, length: int, chunk_size: int) -> float:
    """Same result as :func:`calculate_gc_content`, counted chunk by chunk."""
    chunks = _chunk_views(sequence, length, chunk_size)
    if length == 0:
        return 0.0
    return combine_counts(count_bases(chunk, len(chunk)) for chunk in chunks).ratio()
