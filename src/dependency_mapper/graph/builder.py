"""Dependency graph construction from raw extractor output."""

from typing import Iterable, Sequence, Union

from ..exceptions import DataIntegrityError
from ..logging_config import get_logger
from .models import Dependency, DependencyGraph, Module, TypeCount

logger = get_logger(__name__)

RawEdge = tuple[str, str]
RawTypeCount = Union[TypeCount, Sequence]


def build_dependency_graph(
    edges: Iterable[RawEdge],
    type_counts: Iterable[RawTypeCount] = (),
) -> DependencyGraph:
    """Build a deduplicated dependency graph.

    Every identifier seen in an edge or a type-count record becomes a Module.
    Modules without a type-count record keep 0/0 types. Pairs with equal
    endpoints are recorded as self-loops; duplicate pairs collapse. Several
    records for the same module are summed (one record per scanned file).

    Identifiers are compared by exact string equality.

    Raises:
        DataIntegrityError: If a record has a negative count or declares more
            abstract types than total types. Nothing is returned in that case.
    """
    names: set[str] = set()
    edge_set: set[Dependency] = set()
    loops: set[str] = set()

    for source, target in edges:
        names.add(source)
        names.add(target)
        if source == target:
            loops.add(source)
        else:
            edge_set.add(Dependency(source, target))

    totals: dict[str, list[int]] = {}
    for record in type_counts:
        module, total, abstract = _validate_record(record)
        names.add(module)
        counts = totals.setdefault(module, [0, 0])
        counts[0] += total
        counts[1] += abstract

    modules = {
        name: Module(name, *totals.get(name, (0, 0)))
        for name in sorted(names)
    }

    adjacency: dict[str, list[str]] = {name: [] for name in modules}
    reverse: dict[str, list[str]] = {name: [] for name in modules}
    dependencies = sorted(edge_set)
    for dep in dependencies:
        adjacency[dep.source].append(dep.target)
        reverse[dep.target].append(dep.source)

    graph = DependencyGraph(
        modules=modules,
        dependencies=tuple(dependencies),
        adjacency={name: tuple(sorted(targets)) for name, targets in adjacency.items()},
        reverse={name: tuple(sorted(sources)) for name, sources in reverse.items()},
        self_loops=tuple(sorted(loops)),
    )
    logger.debug(
        f"Built graph: {len(modules)} modules, {graph.edge_count} dependencies, "
        f"{len(loops)} self-loops"
    )
    return graph


def _validate_record(record: RawTypeCount) -> TypeCount:
    """Check one type-count record and normalize it to a TypeCount."""
    try:
        module, total, abstract = record
    except (TypeError, ValueError):
        module = record[0] if isinstance(record, Sequence) and record else repr(record)
        logger.error(f"Rejected type-count record {record!r}: wrong shape")
        raise DataIntegrityError(str(module), "record must be (module, total, abstract)")

    # bool is an int subclass
    if type(total) is not int or type(abstract) is not int:
        logger.error(f"Rejected type counts for {module}: counts must be integers")
        raise DataIntegrityError(module, "type counts must be integers")
    if total < 0 or abstract < 0:
        logger.error(f"Rejected type counts for {module}: negative count")
        raise DataIntegrityError(module, "type counts must be non-negative", total, abstract)
    if abstract > total:
        logger.error(f"Rejected type counts for {module}: {abstract} abstract > {total} total")
        raise DataIntegrityError(
            module, "abstract types exceed total types", total, abstract
        )

    return TypeCount(module, total, abstract)
