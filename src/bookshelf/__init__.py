"""Bookshelf package.

Comprehension-style queries over a small family fixture and a book catalog,
plus the captured-head duplicate remover used on the shared-author join.
"""

__all__ = [
    "dedup",
    "people",
    "catalog",
    "ingest",
    "report",
]
