"""Reporting utilities for query results."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .ingest import write_csv


def _format_value(value) -> str:
    if isinstance(value, tuple):
        return " -> ".join(str(v) for v in value)
    return str(value)


def query_rows(name: str, values: Iterable) -> List[dict]:
    return [{"query": name, "value": _format_value(v)} for v in values]


def write_results_csv(path: str, name: str, values: Iterable) -> None:
    write_csv(path, query_rows(name, values))


def print_summary(
    name: str,
    values: Sequence,
    deduplicated: Sequence[str] | None = None,
) -> None:
    """Print a titled listing of query results.

    Args:
        name: Query name used as the heading
        values: Raw query results, in query order
        deduplicated: Optional collapsed results; when given, the collapsed
            listing replaces the raw one and both counts are shown
    """
    print(f"{name}:")
    shown = deduplicated if deduplicated is not None else values
    for v in shown:
        print(f"  {_format_value(v)}")
    print(f"  total : {len(values)}")
    if deduplicated is not None:
        print(f"  unique: {len(deduplicated)}")
