import logging

from fastapi import HTTPException

from student_resume.app.api.routes.route_logic.share_token import (
    InvalidShareLinkError,
    decode_share_id,
)

log = logging.getLogger(__name__)


async def get_shared_student_id(share_id: str) -> int:
    """
    Dependency to resolve the student id behind a public share id.

    Args:
        share_id (str): The share id from the request path.

    Returns:
        int: The student id encoded in the share id.

    Raises:
        HTTPException: 400 with detail "Invalid share link" if the id cannot be decoded.

    Notes:
        1. Decodes the share id.
        2. Converts a decoding failure into a 400 error.

    """
    try:
        return decode_share_id(share_id)
    except InvalidShareLinkError:
        raise HTTPException(status_code=400, detail="Invalid share link")
