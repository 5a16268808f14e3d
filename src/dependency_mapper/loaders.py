"""Readers for extractor output documents used by the CLI.

Accepted inputs:
    JSON document: {"edges": [["a", "b"], ...],
                    "types": [{"module": "a", "total": 3, "abstract": 1}, ...]}
    JSON list of type records (for --types): [{"module": ..., "total": ..., "abstract": ...}]
    CSV edge list with a "from,to" header

Predictions for the compare command are a JSON list of
    {"module": "a", "instability": 0.5, "abstractness": null, "zone": "pain"}
where an explicit null means "I predict this metric is undefined".
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any

from .architecture.models import Zone
from .coaching import Prediction
from .exceptions import InputFormatError
from .extraction import ExtractionFragment
from .graph.models import TypeCount


def load_fragment(path: Path) -> ExtractionFragment:
    """Read edges (and optionally type counts) from a JSON or CSV file."""
    if path.suffix.lower() == ".csv":
        return ExtractionFragment(edges=tuple(_read_csv_edges(path)))

    data = _read_json(path)
    if isinstance(data, list):
        return ExtractionFragment(edges=tuple(_parse_edges(data, path)))
    if not isinstance(data, dict):
        raise InputFormatError("expected an object with 'edges' and 'types'", path)

    return ExtractionFragment(
        edges=tuple(_parse_edges(data.get("edges", []), path)),
        type_counts=tuple(_parse_types(data.get("types", []), path)),
    )


def load_type_counts(path: Path) -> list[TypeCount]:
    data = _read_json(path)
    if isinstance(data, dict):
        data = data.get("types", [])
    return _parse_types(data, path)


def load_predictions(path: Path) -> list[Prediction]:
    data = _read_json(path)
    if not isinstance(data, list):
        raise InputFormatError("predictions must be a JSON list", path)

    predictions = []
    for item in data:
        if not isinstance(item, dict) or "module" not in item:
            raise InputFormatError(f"prediction without module: {item!r}", path)
        undefined = frozenset(
            metric
            for metric in ("instability", "abstractness")
            if metric in item and item[metric] is None
        )
        zone = item.get("zone")
        try:
            predictions.append(
                Prediction(
                    module=str(item["module"]),
                    instability=_optional_float(item.get("instability")),
                    abstractness=_optional_float(item.get("abstractness")),
                    zone=Zone(zone) if zone is not None else None,
                    undefined=undefined,
                )
            )
        except (TypeError, ValueError) as e:
            raise InputFormatError(f"invalid prediction for {item['module']}: {e}", path)
    return predictions


def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise InputFormatError(f"cannot read file: {e}", path)
    except json.JSONDecodeError as e:
        raise InputFormatError(f"invalid JSON: {e}", path)


def _read_csv_edges(path: Path) -> list[tuple[str, str]]:
    try:
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            if reader.fieldnames is None or not {"from", "to"} <= set(reader.fieldnames):
                raise InputFormatError("CSV edge list needs 'from' and 'to' columns", path)
            edges = []
            for row in reader:
                source, target = row["from"], row["to"]
                if not source or not target:
                    raise InputFormatError(
                        f"row {reader.line_num}: both 'from' and 'to' are required", path
                    )
                edges.append((source, target))
            return edges
    except OSError as e:
        raise InputFormatError(f"cannot read file: {e}", path)


def _parse_edges(raw: Any, path: Path) -> list[tuple[str, str]]:
    if not isinstance(raw, list):
        raise InputFormatError("'edges' must be a list", path)
    edges = []
    for item in raw:
        if isinstance(item, dict):
            item = (item.get("from"), item.get("to"))
        if (
            not isinstance(item, (list, tuple))
            or len(item) != 2
            or not all(isinstance(part, str) for part in item)
        ):
            raise InputFormatError(f"edge must be a [from, to] string pair: {item!r}", path)
        edges.append((item[0], item[1]))
    return edges


def _parse_types(raw: Any, path: Path) -> list[TypeCount]:
    if not isinstance(raw, list):
        raise InputFormatError("'types' must be a list", path)
    records = []
    for item in raw:
        if not isinstance(item, dict) or "module" not in item:
            raise InputFormatError(f"type record without module: {item!r}", path)
        records.append(
            TypeCount(str(item["module"]), item.get("total", 0), item.get("abstract", 0))
        )
    return records


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    return float(value)
