import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel

log = logging.getLogger(__name__)


class ResumeFormat(str, Enum):
    """Enum for the shared resume response formats."""

    PDF = "pdf"
    JSON = "json"


class StudentInfoResponse(BaseModel):
    """Public student details returned with a shared resume.

    Attributes:
        name (str): The student's name.
        email (str | None): The student's email address.
        branch (str | None): The student's branch of study.

    """

    name: str
    email: str | None = None
    branch: str | None = None


class SharedResumeResponse(BaseModel):
    """Response model for a shared resume requested as JSON.

    Attributes:
        success (bool): Always True for a found resume.
        resume (dict[str, Any]): The resume row with a nested studentInfo object.
        message (str): A human readable status message.

    """

    success: bool = True
    resume: dict[str, Any]
    message: str = "Shared resume retrieved successfully"


class TemplateListResponse(BaseModel):
    """Response model for the template listing.

    Attributes:
        templates (list[str]): Template names accepted by the renderer.
        layouts (list[str]): Layout hints accepted by the renderer.
        default_template (str): The template used when none is requested.
        default_layout (str): The layout used when none is requested.

    """

    templates: list[str]
    layouts: list[str]
    default_template: str
    default_layout: str
