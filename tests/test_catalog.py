"""Tests for catalog queries."""

import pytest

from bookshelf.catalog import (
    Book,
    authors_with_multiple_books,
    default_books,
    titles_by_author_prefix,
    titles_containing,
)
from bookshelf.dedup import remove_duplicates


@pytest.fixture
def books():
    return default_books()


class TestTitlesByAuthorPrefix:
    """Test author-prefix title search."""

    def test_gosling(self, books):
        """Test the documented Gosling lookup."""
        assert titles_by_author_prefix(books, "Gosling") == ["The Java Language Specification"]

    def test_ullman_in_catalog_order(self, books):
        assert titles_by_author_prefix(books, "Ullman") == [
            "Principles of Compiler Design",
            "Elements of ML Programming",
        ]

    def test_no_match(self, books):
        assert titles_by_author_prefix(books, "Knuth") == []

    def test_title_repeated_per_matching_author(self):
        """Test that a title is yielded once per author matching the prefix."""
        book = Book("Pair", ("Smith, A", "Smith, B"))
        assert titles_by_author_prefix([book], "Smith") == ["Pair", "Pair"]


class TestTitlesContaining:
    """Test title substring search."""

    def test_program(self, books):
        """Test the documented 'Program' lookup."""
        assert titles_containing(books, "Program") == [
            "Structure and Interpretation of Computer Programs",
            "Programming in Modula-2",
            "Elements of ML Programming",
        ]

    def test_case_sensitive(self, books):
        assert titles_containing(books, "program") == []


class TestAuthorsWithMultipleBooks:
    """Test the self-join on author name."""

    def test_default_catalog(self, books):
        """Test that Ullman is reported once per ordered book pair."""
        assert authors_with_multiple_books(books) == ["Ullman, Jeffrey", "Ullman, Jeffrey"]

    def test_collapsed_with_remove_duplicates(self, books):
        assert remove_duplicates(authors_with_multiple_books(books)) == ["Ullman, Jeffrey"]

    def test_no_shared_authors(self):
        books = [Book("A", ("X",)), Book("B", ("Y",))]
        assert authors_with_multiple_books(books) == []

    def test_equal_books_not_joined(self):
        """Test that structurally equal books are skipped as the same book."""
        books = [Book("A", ("X",)), Book("A", ("X",))]
        assert authors_with_multiple_books(books) == []
