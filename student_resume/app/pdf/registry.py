import io
import logging
import re
import unicodedata
from dataclasses import dataclass
from datetime import date
from enum import Enum

from student_resume.app.models.resume import ResumeData, StudentInfo
from student_resume.app.pdf.canvas import PageCanvas, TextStyle, register_unicode_font
from student_resume.app.pdf.exceptions import RenderSinkError
from student_resume.app.pdf.templates import (
    AcademicTemplate,
    ClassicTemplate,
    CreativeTemplate,
    ElegantTemplate,
    ExecutiveTemplate,
    MinimalistTemplate,
    ModernTemplate,
    ProfessionalTemplate,
    RenderContext,
    ResumeTemplate,
    TechnicalTemplate,
)

log = logging.getLogger(__name__)


class TemplateName(str, Enum):
    """Template names accepted by the renderer."""

    MODERN = "modern"
    CLASSIC = "classic"
    EXECUTIVE = "executive"
    MINIMALIST = "minimalist"
    CREATIVE = "creative"
    TECHNICAL = "technical"
    PROFESSIONAL = "professional"
    ACADEMIC = "academic"
    ELEGANT = "elegant"


class LayoutName(str, Enum):
    """Layout hints accepted by the renderer."""

    SINGLE_COLUMN = "single-column"
    TWO_COLUMN = "two-column"


DEFAULT_TEMPLATE = TemplateName.MODERN
DEFAULT_LAYOUT = LayoutName.SINGLE_COLUMN

TEMPLATE_REGISTRY: dict[str, type[ResumeTemplate]] = {
    TemplateName.MODERN.value: ModernTemplate,
    TemplateName.CLASSIC.value: ClassicTemplate,
    TemplateName.EXECUTIVE.value: ExecutiveTemplate,
    TemplateName.MINIMALIST.value: MinimalistTemplate,
    TemplateName.CREATIVE.value: CreativeTemplate,
    TemplateName.TECHNICAL.value: TechnicalTemplate,
    TemplateName.PROFESSIONAL.value: ProfessionalTemplate,
    TemplateName.ACADEMIC.value: AcademicTemplate,
    TemplateName.ELEGANT.value: ElegantTemplate,
}

# Reserved slots for templates that have not been designed yet.
PLACEHOLDER_TEMPLATES = ("new-template-1", "new-template-2")


@dataclass(frozen=True)
class RenderResult:
    """Outcome of a single render.

    Attributes:
        template (str): The template actually used after normalization.
        layout (str): The layout actually used after normalization.
        byte_count (int): Number of bytes written to the sink.
        degraded (bool): True when the error document was written instead of the resume.
        error (str | None): The renderer failure message when degraded.

    """

    template: str
    layout: str
    byte_count: int
    degraded: bool = False
    error: str | None = None


def register_template(name: str, template_class: type[ResumeTemplate]) -> None:
    """Register a template class under a name.

    Args:
        name (str): The lookup name. It is stored trimmed and lower-cased.
        template_class (type[ResumeTemplate]): The class to instantiate for this name.

    Raises:
        ValueError: If the name is blank.
        TypeError: If template_class is not a ResumeTemplate subclass.

    """
    key = name.strip().lower()
    if not key:
        raise ValueError("Template name must not be blank")
    if not (isinstance(template_class, type) and issubclass(template_class, ResumeTemplate)):
        raise TypeError(f"{template_class!r} is not a ResumeTemplate subclass")
    _msg = f"Registering template {key} as {template_class.__name__}"
    log.debug(_msg)
    TEMPLATE_REGISTRY[key] = template_class


for _placeholder in PLACEHOLDER_TEMPLATES:
    register_template(_placeholder, ModernTemplate)


def configure_unicode_font(font_path: str | None) -> None:
    """Register the configured TrueType font for non-Latin text, when one is set."""
    if not font_path:
        _msg = "No unicode font configured, unencodable characters will be dropped"
        log.debug(_msg)
        return
    register_unicode_font(font_path)


def available_templates() -> list[str]:
    """Return the accepted template names in display order."""
    return [name.value for name in TemplateName]


def normalize_template_name(template: str | None) -> str:
    """Map a requested template onto an accepted name.

    Args:
        template (str | None): The requested name, in any casing.

    Returns:
        str: The matching registered name, or "modern" when there is none.

    Notes:
        1. Trim and lower-case the request.
        2. Return it when a template is registered under that name.
        3. Otherwise log a warning and return the default.

    """
    key = template.strip().lower() if isinstance(template, str) else ""
    if key in TEMPLATE_REGISTRY:
        return key
    _msg = f"Unknown template {template!r}, falling back to {DEFAULT_TEMPLATE.value}"
    log.warning(_msg)
    return DEFAULT_TEMPLATE.value


def normalize_layout(layout: str | None) -> str:
    """Map a requested layout onto an accepted layout, defaulting to single-column."""
    key = layout.strip().lower() if isinstance(layout, str) else ""
    if key in LayoutName._value2member_map_:
        return key
    _msg = f"Unknown layout {layout!r}, falling back to {DEFAULT_LAYOUT.value}"
    log.warning(_msg)
    return DEFAULT_LAYOUT.value


# Characters that break a quoted header parameter or a file name.
_UNSAFE_FILENAME_CHARS = re.compile(r'["\\/:;*?<>|\x00-\x1f\x7f]')


def build_resume_filename(name: str, template: str, ascii_only: bool = True) -> str:
    """Build the download file name, e.g. Jane_Doe_modern_Resume.pdf.

    Args:
        name (str): The student's name.
        template (str): The template actually used.
        ascii_only (bool): When True, accented letters are reduced to their base
            letter and other non-ASCII characters are dropped.

    Returns:
        str: The file name. "Student" stands in for a name with nothing usable left.

    """
    safe_name = _UNSAFE_FILENAME_CHARS.sub("", re.sub(r"\s+", "_", name.strip()))
    if ascii_only:
        safe_name = unicodedata.normalize("NFKD", safe_name).encode("ascii", "ignore").decode("ascii")
    safe_name = safe_name.strip("_") or "Student"
    return f"{safe_name}_{template}_Resume.pdf"


def render_error_document(message: str) -> bytes:
    """Render the one-page document shown when a template fails."""
    canvas = PageCanvas(title="Resume Error")
    canvas.new_page()
    y = canvas.draw_text(
        "Error Generating Resume PDF",
        50,
        200,
        TextStyle(font="Helvetica-Bold", size=20, width=canvas.width - 100, align="center"),
    )
    canvas.draw_text(
        f"There was an error generating your resume: {message}",
        50,
        y + 20,
        TextStyle(size=12, width=canvas.width - 100, align="center"),
    )
    return canvas.finalize()


def _write_and_close(sink, document: bytes) -> None:
    """Write the document to the sink, then close the sink on every path.

    Args:
        sink: A writable binary stream, optionally with a close method.
        document (bytes): The finished PDF.

    Raises:
        RenderSinkError: If the write or the close fails.

    Notes:
        1. Write the document.
        2. Close the sink whether or not the write succeeded.
        3. A close failure after a failed write is logged and the write failure is raised.

    """
    close = getattr(sink, "close", None)
    try:
        sink.write(document)
    except (OSError, ValueError) as e:
        _msg = f"Failed to write resume PDF to sink: {e}"
        log.error(_msg)
        if callable(close):
            try:
                close()
            except (OSError, ValueError) as close_error:
                _close_msg = f"Failed to close sink after write failure: {close_error}"
                log.warning(_close_msg)
        raise RenderSinkError(_msg) from e

    if callable(close):
        try:
            close()
        except (OSError, ValueError) as e:
            _msg = f"Failed to close resume PDF sink: {e}"
            log.error(_msg)
            raise RenderSinkError(_msg) from e


def _render_template(template: str, context: RenderContext) -> bytes:
    template_class = TEMPLATE_REGISTRY[template]
    canvas = PageCanvas(title=f"{context.student.name} Resume")
    return template_class(canvas, context).render()


def render(
    resume_data,
    student_info,
    sink,
    template: str | None = DEFAULT_TEMPLATE.value,
    layout: str | None = DEFAULT_LAYOUT.value,
    today: date | None = None,
) -> RenderResult:
    """Render a resume to a PDF and write it to the sink.

    Args:
        resume_data: The resume sections as a ResumeData, a dict, an object with
            matching attributes, or None.
        student_info: The student's name and contact details in the same forms.
        sink: A writable binary stream. It is closed after writing when it has a close method.
        template (str | None): The template name. Unknown names fall back to "modern".
        layout (str | None): The layout hint. Unknown values fall back to "single-column".
        today (date | None): The date printed in the footer. Defaults to the current date.

    Returns:
        RenderResult: The template and layout used and whether the error document was written.

    Raises:
        RenderSinkError: If writing to or closing the sink fails.

    Notes:
        1. Coerce the inputs into ResumeData and StudentInfo.
        2. Normalize the template and layout.
        3. Render the template into a private buffer.
        4. If the template raises, log it and render the error document instead.
        5. Write the buffered document to the sink and close the sink.

    """
    _msg = "render starting"
    log.debug(_msg)

    resume = ResumeData.from_record(resume_data)
    student = StudentInfo.from_record(student_info)
    template_name = normalize_template_name(template)
    layout_name = normalize_layout(layout)
    context = RenderContext(
        resume=resume,
        student=student,
        layout=layout_name,
        today=today or date.today(),
    )

    error = None
    try:
        document = _render_template(template_name, context)
    except Exception as e:
        error = str(e) or e.__class__.__name__
        _msg = f"Failed to render {template_name} template: {error}"
        log.exception(_msg)
        document = render_error_document(error)

    _write_and_close(sink, document)

    _msg = "render returning"
    log.debug(_msg)
    return RenderResult(
        template=template_name,
        layout=layout_name,
        byte_count=len(document),
        degraded=error is not None,
        error=error,
    )


class KeepOpenBuffer(io.BytesIO):
    """A BytesIO whose close is a no-op so the bytes stay readable."""

    def close(self) -> None:
        pass


def render_to_bytes(
    resume_data,
    student_info,
    template: str | None = DEFAULT_TEMPLATE.value,
    layout: str | None = DEFAULT_LAYOUT.value,
    today: date | None = None,
) -> tuple[bytes, RenderResult]:
    """Render into memory and return the document bytes with the result."""
    buffer = KeepOpenBuffer()
    result = render(resume_data, student_info, buffer, template, layout, today)
    return buffer.getvalue(), result
