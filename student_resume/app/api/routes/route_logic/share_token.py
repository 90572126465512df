import base64
import logging
import time

log = logging.getLogger(__name__)


class InvalidShareLinkError(ValueError):
    """Raised when a share id does not decode to a student id."""


def encode_share_id(student_id: int, timestamp_ms: int | None = None) -> str:
    """Build the opaque share id for a student's resume.

    Args:
        student_id (int): The student whose resume is shared.
        timestamp_ms (int | None): Milliseconds since the epoch. Defaults to now.

    Returns:
        str: Base64 of "<student_id>-<timestamp_ms>".

    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    raw = f"{student_id}-{timestamp_ms}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode_share_id(share_id: str) -> int:
    """Recover the student id from a share id.

    Args:
        share_id (str): The base64 share id taken from the public URL.

    Returns:
        int: The student id.

    Raises:
        InvalidShareLinkError: If the id is not valid base64 or its first segment is not a number.

    Notes:
        1. Base64 decode the id, adding missing padding.
        2. Take the text before the first "-".
        3. Parse it as a base 10 integer made of ASCII digits only.

    """
    padded = share_id + "=" * (-len(share_id) % 4)
    try:
        decoded = base64.b64decode(padded, validate=True).decode("utf-8")
    except ValueError as e:
        _msg = f"Invalid share link: {share_id}"
        log.error(_msg)
        raise InvalidShareLinkError(_msg) from e

    first_segment = decoded.split("-", 1)[0].strip()
    if not (first_segment.isascii() and first_segment.isdigit()):
        _msg = f"Invalid share link: {share_id}, decoded: {decoded}"
        log.error(_msg)
        raise InvalidShareLinkError(_msg)
    return int(first_segment)


def build_share_url(base_url: str, student_id: int, timestamp_ms: int | None = None) -> str:
    """Join the public resume base URL and a fresh share id."""
    return f"{base_url.rstrip('/')}/{encode_share_id(student_id, timestamp_ms)}"
