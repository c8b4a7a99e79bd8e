"""
Cursor Codec

Opaque pagination cursors for the connection queries.

A cursor is the base64 encoding of "cursor_<id>", where <id> is the primary
key of the last row a client has seen. Position 0 means "before the first
row", since ids start at 1.

    >>> encode_cursor(2)
    'Y3Vyc29yXzI='
    >>> decode_cursor("Y3Vyc29yXzI=")
    2

Cursors carry no entity type: a cursor taken from the books listing decodes
without error against the authors listing.
"""

import base64
import binascii
import re

CURSOR_PREFIX = "cursor_"

_CURSOR_PATTERN = re.compile(r"cursor_([0-9]{1,19})")

# Largest id a signed 64-bit INTEGER column can hold
MAX_POSITION = 2**63 - 1


class MalformedCursorError(ValueError):
    """Raised when a cursor string was not produced by encode_cursor()."""

    def __init__(self, cursor: str):
        super().__init__(f"Malformed cursor: {cursor!r}")
        self.cursor = cursor


def encode_cursor(position: int) -> str:
    """
    Encode a primary-key position as an opaque cursor.

    Args:
        position: Row id (0 for the start of the table)

    Returns:
        Base64 cursor string

    Raises:
        ValueError: If position is negative
    """
    if position < 0:
        raise ValueError("cursor position must be zero or a positive id")
    payload = f"{CURSOR_PREFIX}{position}"
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_cursor(cursor: str) -> int:
    """
    Decode a cursor back to its primary-key position.

    Args:
        cursor: String produced by encode_cursor()

    Returns:
        The encoded position

    Raises:
        MalformedCursorError: If the input is not valid base64 or does not
            decode to "cursor_<digits>", or if the position does not fit a
            64-bit id
    """
    try:
        payload = base64.b64decode(cursor.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError) as exc:
        raise MalformedCursorError(cursor) from exc

    match = _CURSOR_PATTERN.fullmatch(payload)
    if match is None:
        raise MalformedCursorError(cursor)

    position = int(match.group(1))
    if position > MAX_POSITION:
        raise MalformedCursorError(cursor)
    return position


# Cursor that starts a listing at the first row
INITIAL_CURSOR = encode_cursor(0)
