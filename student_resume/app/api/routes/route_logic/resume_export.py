import io
import logging
from datetime import date
from urllib.parse import quote

from student_resume.app.pdf.registry import (
    KeepOpenBuffer,
    RenderResult,
    build_resume_filename,
    render,
)

log = logging.getLogger(__name__)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate, max-age=0",
    "Pragma": "no-cache",
    "Expires": "0",
    "Surrogate-Control": "no-store",
}


def render_resume_to_pdf_stream(
    resume_record,
    student_record,
    template: str,
    layout: str,
    today: date | None = None,
) -> tuple[io.BytesIO, RenderResult]:
    """Renders a stored resume to a PDF file stream.

    Args:
        resume_record: The resume row or a dict of its sections.
        student_record: The student row or a dict with name, email and branch.
        template (str): The requested template name.
        layout (str): The requested layout.
        today (date | None): The date printed in the footer.

    Returns:
        tuple[io.BytesIO, RenderResult]: A buffer positioned at the start of
            the PDF and the render outcome.

    Notes:
        1. Create an in-memory buffer that stays readable after the renderer closes it.
        2. Render the resume into it.
        3. Rewind the buffer and return it with the result.

    """
    _msg = "render_resume_to_pdf_stream starting"
    log.debug(_msg)

    buffer = KeepOpenBuffer()
    result = render(resume_record, student_record, buffer, template, layout, today)
    buffer.seek(0)

    _msg = "render_resume_to_pdf_stream returning"
    log.debug(_msg)
    return buffer, result


def build_content_disposition(student_name: str, template: str, download: bool) -> str:
    """Build a Content-Disposition value that survives any student name.

    Args:
        student_name (str): Used to build the file name.
        template (str): The template actually used.
        download (bool): True for an attachment, False to display inline.

    Returns:
        str: The disposition with an ASCII filename and a UTF-8 filename*.

    Notes:
        1. The quoted filename is ASCII only so the header stays latin-1 encodable.
        2. filename* carries the percent-encoded UTF-8 name for clients that read it.

    """
    disposition = "attachment" if download else "inline"
    ascii_filename = build_resume_filename(student_name, template)
    utf8_filename = quote(build_resume_filename(student_name, template, ascii_only=False), safe="")
    return f"{disposition}; filename=\"{ascii_filename}\"; filename*=UTF-8''{utf8_filename}"


def build_pdf_headers(student_name: str, template: str, download: bool) -> dict[str, str]:
    """Build the response headers for a rendered resume.

    Args:
        student_name (str): Used to build the file name.
        template (str): The template actually used.
        download (bool): True for an attachment, False to display inline.

    Returns:
        dict[str, str]: Content-Disposition plus the no-cache headers.

    """
    headers = {"Content-Disposition": build_content_disposition(student_name, template, download)}
    headers.update(NO_CACHE_HEADERS)
    return headers
