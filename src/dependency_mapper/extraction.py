"""Contract for upstream source extractors and parallel fragment collection.

Extractors parse import statements and type declarations for one source
(a file, a project, whatever the caller chooses) and emit an immutable
fragment. Fragments from independent sources are merged by concatenation:
duplicate edges collapse later in the graph builder, so merge order only
affects the order of raw records, never the analysis result.

Usage:
    fragments = collect_fragments(paths, MyExtractor(), max_workers=8)
    merged = merge_fragments(fragments)
    result = analyze(merged.edges, merged.type_counts)
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence, TypeVar

from .graph.models import TypeCount
from .logging_config import get_logger

logger = get_logger(__name__)

# Default worker count: use CPU count, capped at 8 to avoid overwhelming I/O
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)

# Below this many sources a thread pool costs more than it saves
_PARALLEL_MIN_SOURCES = 10

S = TypeVar("S", contravariant=True)
T = TypeVar("T")


@dataclass(frozen=True)
class ExtractionFragment:
    """Raw edges and type counts produced by scanning one source."""

    edges: tuple[tuple[str, str], ...] = ()
    type_counts: tuple[TypeCount, ...] = ()

    @classmethod
    def of(
        cls,
        edges: Iterable[tuple[str, str]] = (),
        type_counts: Iterable[Sequence] = (),
    ) -> ExtractionFragment:
        return cls(
            edges=tuple((source, target) for source, target in edges),
            type_counts=tuple(TypeCount(*record) for record in type_counts),
        )


class Extractor(Protocol[S]):
    """Anything that turns a source into a fragment."""

    def extract(self, source: S) -> ExtractionFragment: ...


def merge_fragments(fragments: Iterable[ExtractionFragment]) -> ExtractionFragment:
    """Concatenate fragments into one raw input stream."""
    edges: list[tuple[str, str]] = []
    type_counts: list[TypeCount] = []
    for fragment in fragments:
        edges.extend(fragment.edges)
        type_counts.extend(fragment.type_counts)
    return ExtractionFragment(edges=tuple(edges), type_counts=tuple(type_counts))


def collect_fragments(
    sources: Sequence[T],
    extractor: Extractor[T],
    max_workers: int | None = None,
) -> list[ExtractionFragment]:
    """Run an extractor over every source, in parallel for larger batches.

    Fragments are returned in source order regardless of completion order.
    Any extractor exception propagates to the caller.
    """
    if len(sources) < _PARALLEL_MIN_SOURCES:
        return [extractor.extract(source) for source in sources]

    workers = max_workers or _DEFAULT_WORKERS
    logger.debug(f"Extracting {len(sources)} sources with {workers} workers")
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(extractor.extract, sources))
