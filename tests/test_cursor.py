"""
Cursor Codec Tests

Tests for encoding and decoding pagination cursors.
"""

import base64

import pytest

from bookshelf.services.cursor import (
    INITIAL_CURSOR,
    MalformedCursorError,
    decode_cursor,
    encode_cursor,
)


def b64(text: str) -> str:
    return base64.b64encode(text.encode()).decode()


class TestEncodeCursor:
    """Tests for encode_cursor()."""

    def test_encodes_prefixed_id_as_base64(self):
        """The cursor is base64 of 'cursor_<id>'."""
        assert encode_cursor(2) == "Y3Vyc29yXzI="
        assert base64.b64decode(encode_cursor(42)).decode() == "cursor_42"

    def test_initial_cursor_is_position_zero(self):
        """The default cursor points before the first row."""
        assert INITIAL_CURSOR == encode_cursor(0)
        assert decode_cursor(INITIAL_CURSOR) == 0

    def test_negative_position_rejected(self):
        """Negative positions cannot be encoded."""
        with pytest.raises(ValueError):
            encode_cursor(-1)


class TestDecodeCursor:
    """Tests for decode_cursor()."""

    @pytest.mark.parametrize("position", [0, 1, 2, 9, 10, 99, 12345, 2**31, 10**18])
    def test_round_trip(self, position: int):
        """decode(encode(n)) == n."""
        assert decode_cursor(encode_cursor(position)) == position

    @pytest.mark.parametrize(
        "cursor",
        [
            "",
            "not base64!",
            "Y3Vyc29yXzI",  # missing padding
            "тест",
        ],
    )
    def test_invalid_base64(self, cursor: str):
        """Strings that are not base64 are rejected."""
        with pytest.raises(MalformedCursorError):
            decode_cursor(cursor)

    @pytest.mark.parametrize(
        "payload",
        [
            "cursor_",
            "cursor_abc",
            "cursor_-1",
            "cursor_1.5",
            "cursor_ 1",
            "cursor_1\n",
            "offset_1",
            "1",
            "CURSOR_1",
        ],
    )
    def test_wrong_payload_shape(self, payload: str):
        """Valid base64 that does not decode to cursor_<digits> is rejected."""
        with pytest.raises(MalformedCursorError):
            decode_cursor(b64(payload))

    @pytest.mark.parametrize("position", [2**63, 10**20])
    def test_position_beyond_64_bits(self, position: int):
        """Positions no INTEGER column can hold are rejected."""
        with pytest.raises(MalformedCursorError):
            decode_cursor(encode_cursor(position))

    def test_largest_64_bit_position(self):
        assert decode_cursor(encode_cursor(2**63 - 1)) == 2**63 - 1

    def test_very_long_digit_string(self):
        """Thousands of digits are rejected without being parsed."""
        with pytest.raises(MalformedCursorError):
            decode_cursor(b64("cursor_" + "9" * 5000))

    def test_non_utf8_payload(self):
        """Binary payloads are rejected."""
        cursor = base64.b64encode(b"\xff\xfe\x00").decode()
        with pytest.raises(MalformedCursorError):
            decode_cursor(cursor)

    def test_error_is_value_error(self):
        """MalformedCursorError can be handled as a ValueError."""
        with pytest.raises(ValueError) as exc_info:
            decode_cursor("???")
        assert exc_info.value.cursor == "???"

    def test_cursor_is_not_namespaced(self):
        """A cursor carries only the id, not the entity it came from."""
        book_cursor = encode_cursor(3)
        assert decode_cursor(book_cursor) == 3
