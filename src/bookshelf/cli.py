"""CLI entrypoint for bookshelf.

Usage:
  python -m bookshelf.cli shared-authors --dedupe
  python -m bookshelf.cli titles --contains Program --out out/titles.csv
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List

from .catalog import (
    Book,
    authors_with_multiple_books,
    default_books,
    titles_by_author_prefix,
    titles_containing,
)
from .dedup import remove_duplicates
from .ingest import read_books_csv
from .people import default_family, mothers_and_children
from .report import print_summary, write_results_csv

DEFAULT_CONFIG = {
    "catalog_path": None,
    "author_separator": ";",
}


def load_config(path: str | Path) -> dict:
    path = Path(path)
    if not path.exists():
        return dict(DEFAULT_CONFIG)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object: {path}")
    cfg = dict(DEFAULT_CONFIG)
    cfg.update(data)
    return cfg


def load_books(args: argparse.Namespace) -> List[Book]:
    """Resolve the catalog: --catalog, then config catalog_path, then the built-in books."""
    cfg = load_config(args.config)
    catalog_path = args.catalog or cfg.get("catalog_path")
    if not catalog_path:
        return default_books()
    return read_books_csv(catalog_path, author_separator=cfg.get("author_separator") or ";")


def _emit(args: argparse.Namespace, name: str, values, deduplicated=None) -> None:
    print_summary(name, values, deduplicated=deduplicated)
    if args.out:
        write_results_csv(args.out, name, deduplicated if deduplicated is not None else values)
        print(f"Wrote report: {args.out}")


def cmd_mothers(args: argparse.Namespace) -> int:
    _emit(args, "mothers-and-children", mothers_and_children(default_family()))
    return 0


def cmd_by_author(args: argparse.Namespace) -> int:
    books = load_books(args)
    _emit(args, "by-author", titles_by_author_prefix(books, args.prefix))
    return 0


def cmd_titles(args: argparse.Namespace) -> int:
    books = load_books(args)
    _emit(args, "titles", titles_containing(books, args.contains))
    return 0


def cmd_shared_authors(args: argparse.Namespace) -> int:
    books = load_books(args)
    shared = authors_with_multiple_books(books)
    _emit(args, "shared-authors", shared, deduplicated=remove_duplicates(shared) if args.dedupe else None)
    return 0


def cmd_dedupe(args: argparse.Namespace) -> int:
    _emit(args, "dedupe", args.values, deduplicated=remove_duplicates(args.values))
    return 0


def _add_output_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument("--out", help="Optional path to output CSV report")


def _add_catalog_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--catalog",
        help="Path to catalog CSV (title,authors); overrides config catalog_path",
    )
    p.add_argument(
        "--config",
        default="resources/config.json",
        help="Path to config.json (optional; defaults will be used if missing)",
    )
    _add_output_arg(p)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bookshelf", description="Comprehension queries over people and books")
    sub = p.add_subparsers(dest="cmd", required=True)

    mothers = sub.add_parser("mothers", help="List mother/child name pairs")
    _add_output_arg(mothers)
    mothers.set_defaults(func=cmd_mothers)

    by_author = sub.add_parser("by-author", help="Titles with an author whose name starts with a prefix")
    by_author.add_argument("--prefix", required=True, help="Author name prefix, e.g. 'Gosling'")
    _add_catalog_args(by_author)
    by_author.set_defaults(func=cmd_by_author)

    titles = sub.add_parser("titles", help="Titles containing a substring")
    titles.add_argument("--contains", required=True, help="Case-sensitive title substring")
    _add_catalog_args(titles)
    titles.set_defaults(func=cmd_titles)

    shared = sub.add_parser("shared-authors", help="Authors that wrote at least two books in the catalog")
    shared.add_argument(
        "--dedupe",
        action="store_true",
        help="Collapse repeated author entries",
    )
    _add_catalog_args(shared)
    shared.set_defaults(func=cmd_shared_authors)

    dedupe = sub.add_parser("dedupe", help="Remove repeats of the first value")
    dedupe.add_argument("values", nargs="*", help="Values to collapse")
    _add_output_arg(dedupe)
    dedupe.set_defaults(func=cmd_dedupe)

    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
