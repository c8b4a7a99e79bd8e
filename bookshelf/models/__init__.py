"""
SQLAlchemy Models Package

This package contains the two database models of the Bookshelf API.

Model Relationships:
- Author <- Book: One-to-Many through book.author_id. The column is a plain
  integer, not a FOREIGN KEY: a book may point at an author that does not
  exist, and resolving it simply yields no author.

Import all models here to:
1. Make them available as: from bookshelf.models import Author, Book
2. Register them on Base.metadata before tables are created
"""

from bookshelf.models.author import Author
from bookshelf.models.book import Book

__all__ = [
    "Author",
    "Book",
]
