"""Book catalog fixture and title/author queries.

Queries keep catalog order and do not collapse repeats; callers that want a
single entry per author run the result through ``dedup.remove_duplicates``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class Book:
    title: str
    authors: Tuple[str, ...] = ()


def default_books() -> List[Book]:
    return [
        Book(
            "Structure and Interpretation of Computer Programs",
            ("Abelson, Harold", "Sussman, Gerald J."),
        ),
        Book("Principles of Compiler Design", ("Aho, Alfred", "Ullman, Jeffrey")),
        Book("Programming in Modula-2", ("Wirth, Niklaus",)),
        Book("Elements of ML Programming", ("Ullman, Jeffrey",)),
        Book(
            "The Java Language Specification",
            ("Gosling, James", "Joy, Bill", "Steele, Guy", "Bracha, Gilad"),
        ),
    ]


def titles_by_author_prefix(books: Sequence[Book], prefix: str) -> List[str]:
    """Return a title once per author of that book whose name starts with *prefix*."""
    return [b.title for b in books for a in b.authors if a.startswith(prefix)]


def titles_containing(books: Sequence[Book], fragment: str) -> List[str]:
    """Return titles containing *fragment* (case-sensitive)."""
    return [b.title for b in books if fragment in b.title]


def authors_with_multiple_books(books: Sequence[Book]) -> List[str]:
    """Self-join the catalog on author name.

    Yields the author once per ordered pair of distinct books that share
    them, so an author of exactly two books appears twice.
    """
    return [
        a1
        for b1 in books
        for b2 in books
        if b1 != b2
        for a1 in b1.authors
        for a2 in b2.authors
        if a1 == a2
    ]
