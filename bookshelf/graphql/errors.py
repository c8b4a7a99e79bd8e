"""
GraphQL Error Handling

Resolvers run their service calls inside graphql_errors(), which turns the
application's exceptions into GraphQL errors carrying a machine-readable
`extensions.code`:

    MalformedCursorError → BAD_USER_INPUT
    ValidationError      → BAD_USER_INPUT
    StoreError           → STORE_ERROR (message hidden unless debug)

A lookup that finds nothing is not an error: resolvers return null.

Example response:
    {
        "data": null,
        "errors": [{
            "message": "Malformed cursor: 'abc'",
            "path": ["books"],
            "extensions": {"code": "BAD_USER_INPUT"}
        }]
    }
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from graphql import GraphQLError

from bookshelf.services.cursor import MalformedCursorError
from bookshelf.services.entities import ValidationError
from bookshelf.store.base import StoreError

logger = logging.getLogger(__name__)


class ErrorCode:
    """Values of extensions.code."""

    BAD_USER_INPUT = "BAD_USER_INPUT"
    STORE_ERROR = "STORE_ERROR"


@contextmanager
def graphql_errors(debug: bool = False) -> Iterator[None]:
    """
    Re-raise known exceptions as GraphQLError with an error code.

    Args:
        debug: Expose the underlying database error message
    """
    try:
        yield
    except (MalformedCursorError, ValidationError) as exc:
        raise GraphQLError(
            str(exc),
            original_error=exc,
            extensions={"code": ErrorCode.BAD_USER_INPUT},
        ) from exc
    except StoreError as exc:
        logger.error(f"Store error in GraphQL operation: {exc}")
        message = str(exc) if debug else "A database error occurred. Please try again later."
        raise GraphQLError(
            message,
            original_error=exc,
            extensions={"code": ErrorCode.STORE_ERROR},
        ) from exc
