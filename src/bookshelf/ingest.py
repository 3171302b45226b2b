"""CSV ingest for book catalogs and a generic CSV writer.

Schema: title, authors (UTF-8, quoted fields ok). Authors are joined by a
separator, ``;`` by default, and may be empty.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, List

from .catalog import Book


def split_authors(raw: str, separator: str = ";") -> tuple[str, ...]:
    return tuple(a.strip() for a in (raw or "").split(separator) if a.strip())


def read_books_csv(path: str | Path, author_separator: str = ";") -> List[Book]:
    path = Path(path)
    books: List[Book] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        # Header lookup is case-insensitive; map lowered names back to the originals.
        header = {h.lower().strip(): h for h in reader.fieldnames or []}
        expected = {"title", "authors"}
        missing = expected - set(header)
        if missing:
            raise ValueError(f"Missing required columns in {path}: {sorted(missing)}")
        for r in reader:
            books.append(
                Book(
                    title=(r.get(header["title"]) or "").strip(),
                    authors=split_authors(r.get(header["authors"]) or "", author_separator),
                )
            )
    return books


def write_csv(path: str | Path, rows: Iterable[dict]) -> None:
    """Write dict rows with a header from the first row; no rows leaves an empty file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    rows = list(rows)
    with path.open("w", encoding="utf-8", newline="") as f:
        if rows:
            writer = csv.DictWriter(f, fieldnames=list(rows[0]))
            writer.writeheader()
            writer.writerows(rows)
