"""
Bookshelf GraphQL API

A GraphQL API over authors and books, with cursor-based pagination.
"""

__version__ = "1.0.0"
