"""GC content calculation for raw nucleotide buffers."""

from importlib.metadata import PackageNotFoundError, version

from .calculator import (
    BaseCounts,
    calculate_gc_content,
    calculate_gc_content_chunked,
    combine_counts,
    count_bases,
)

try:
    __version__ = version("gc-content")
except PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"

__all__ = [
    "BaseCounts",
    "__version__",
    "calculate_gc_content",
    "calculate_gc_content_chunked",
    "combine_counts",
    "count_bases",
]
