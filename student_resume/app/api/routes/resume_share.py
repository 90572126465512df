import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from student_resume.app.api.dependencies import get_shared_student_id
from student_resume.app.api.routes.route_logic.resume_export import (
    build_pdf_headers,
    render_resume_to_pdf_stream,
)
from student_resume.app.api.routes.route_logic.resume_lookup import (
    get_resume_by_student_id,
    get_student_by_id,
)
from student_resume.app.api.routes.route_models import (
    ResumeFormat,
    SharedResumeResponse,
    StudentInfoResponse,
    TemplateListResponse,
)
from student_resume.app.core.config import Settings, get_settings
from student_resume.app.database.database import get_db
from student_resume.app.pdf.exceptions import RenderSinkError
from student_resume.app.pdf.registry import LayoutName, available_templates

log = logging.getLogger(__name__)

router = APIRouter()


class SharedResumeParams:
    """Query parameters for viewing a shared resume."""

    def __init__(
        self,
        format: Annotated[ResumeFormat, Query()] = ResumeFormat.PDF,
        template: Annotated[str | None, Query()] = None,
        layout: Annotated[str | None, Query()] = None,
        download: Annotated[bool, Query()] = False,
    ):
        self.format = format
        self.template = template
        self.layout = layout
        self.download = download


@router.get("/api/student/resume/public/{share_id}")
async def get_shared_resume(
    params: Annotated[SharedResumeParams, Depends()],
    student_id: Annotated[int, Depends(get_shared_student_id)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Serve a shared resume as a PDF or as JSON.

    Args:
        params (SharedResumeParams): The format, template, layout and download flag.
        student_id (int): The student id decoded from the share id.
        db (Session): The database session, injected by dependency.
        settings (Settings): Application settings, used for the default template and layout.

    Returns:
        StreamingResponse | SharedResumeResponse: The rendered PDF, or the
            resume row with the student's public details.

    Raises:
        HTTPException: 400 for an invalid share id, 404 when the resume or
            student is missing, 500 when the PDF cannot be written.

    Notes:
        1. Look up the resume and the student.
        2. For the JSON format, return the resume row with a nested studentInfo.
        3. Otherwise render the PDF with the requested or default template and layout.
        4. Set inline or attachment disposition and the no-cache headers.

    """
    _msg = f"get_shared_resume starting for student {student_id}, format {params.format.value}"
    log.debug(_msg)

    resume = get_resume_by_student_id(db, student_id=student_id)
    student = get_student_by_id(db, student_id=student_id)
    student_info = StudentInfoResponse(name=student.name, email=student.email, branch=student.branch)

    if params.format is ResumeFormat.JSON:
        resume_row = resume.to_dict()
        resume_row["studentInfo"] = student_info.model_dump()
        return SharedResumeResponse(resume=resume_row)

    try:
        file_stream, result = render_resume_to_pdf_stream(
            resume,
            student_info.model_dump(),
            template=params.template or settings.default_template,
            layout=params.layout or settings.default_layout,
        )
    except RenderSinkError as e:
        _msg = f"Failed to generate resume PDF: {e}"
        log.exception(_msg)
        raise HTTPException(status_code=500, detail=_msg)

    if result.degraded:
        _msg = f"Served error document for student {student_id}: {result.error}"
        log.warning(_msg)

    headers = build_pdf_headers(student.name, result.template, params.download)
    _msg = "get_shared_resume returning"
    log.debug(_msg)
    return StreamingResponse(file_stream, media_type="application/pdf", headers=headers)


@router.get("/api/templates", response_model=TemplateListResponse)
async def list_templates(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TemplateListResponse:
    """List the templates and layouts accepted by the renderer."""
    return TemplateListResponse(
        templates=available_templates(),
        layouts=[layout.value for layout in LayoutName],
        default_template=settings.default_template,
        default_layout=settings.default_layout,
    )
