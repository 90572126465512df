"""Unit tests for share id encoding and decoding."""
import base64

import pytest

from student_resume.app.api.routes.route_logic.share_token import (
    InvalidShareLinkError,
    build_share_url,
    decode_share_id,
    encode_share_id,
)


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def test_encode_share_id():
    """Test the share id format."""
    share_id = encode_share_id(42, 1700000000000)

    assert share_id == _b64("42-1700000000000")


def test_encode_share_id_defaults_to_current_time():
    """Test that a timestamp is generated when none is given."""
    decoded = base64.b64decode(encode_share_id(7)).decode("utf-8")

    student_id, timestamp = decoded.split("-")
    assert student_id == "7"
    assert timestamp.isdigit()


def test_decode_share_id_round_trip():
    """Test that the student id survives encoding."""
    assert decode_share_id(encode_share_id(1234, 1)) == 1234


def test_decode_share_id_uses_first_segment():
    """Test that only the text before the first dash is the id."""
    assert decode_share_id(_b64("15-1700000000000-extra")) == 15


def test_decode_share_id_tolerates_missing_padding():
    """Test that stripped base64 padding is restored."""
    share_id = _b64("5-1").rstrip("=")

    assert decode_share_id(share_id) == 5


@pytest.mark.parametrize(
    "share_id",
    [
        _b64("abc-1700000000000"),
        _b64("-1700000000000"),
        _b64(""),
        "!!not-base64!!",
        _b64("12abc-1"),
        _b64("²-1700000000000"),
        _b64("٣-1700000000000"),
    ],
)
def test_decode_share_id_invalid(share_id):
    """Test that non-numeric ids are rejected."""
    with pytest.raises(InvalidShareLinkError):
        decode_share_id(share_id)


def test_build_share_url():
    """Test joining the base URL and the share id."""
    url = build_share_url("http://localhost:3000/api/student/resume/public/", 9, 100)

    assert url == f"http://localhost:3000/api/student/resume/public/{_b64('9-100')}"
