import logging
from dataclasses import dataclass
from datetime import date

from student_resume.app.core.rendering_settings import get_palette
from student_resume.app.models.resume import ResumeData, StudentInfo
from student_resume.app.pdf.canvas import PageCanvas, TextStyle
from student_resume.app.pdf.layout import footer_text

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderContext:
    """Inputs shared by every template for a single render.

    Attributes:
        resume (ResumeData): The resume sections.
        student (StudentInfo): The student's name and contact details.
        layout (str): The requested layout. Templates keep their own column
            structure, so this is advisory.
        today (date): The date printed in the footer.

    """

    resume: ResumeData
    student: StudentInfo
    layout: str
    today: date


class ResumeTemplate:
    """Base class for a one-page resume layout.

    Subclasses draw their decorative chrome and their sections; the base
    class runs the forward pass and finalizes the document.

    Attributes:
        name (str): Registry name of the template, also used to look up its palette.
        canvas (PageCanvas): The page being drawn.
        context (RenderContext): The render inputs.
        palette (dict): Colors and fonts for the template.

    """

    name = ""

    def __init__(self, canvas: PageCanvas, context: RenderContext, palette: dict | None = None):
        self.canvas = canvas
        self.context = context
        self.palette = palette if palette is not None else get_palette(self.name)

    @property
    def resume(self) -> ResumeData:
        return self.context.resume

    @property
    def student(self) -> StudentInfo:
        return self.context.student

    @property
    def page_width(self) -> float:
        return self.canvas.width

    @property
    def page_height(self) -> float:
        return self.canvas.height

    def render(self) -> bytes:
        """Draw the whole resume and return the finished PDF.

        Returns:
            bytes: The finalized document.

        Notes:
            1. Open a page with no margins; templates place everything themselves.
            2. Draw the fixed chrome, then the sections, then the footer.
            3. Finalize the document.

        """
        _msg = f"Rendering {self.name} template for {self.student.name}"
        log.debug(_msg)
        self.canvas.new_page()
        self.draw_chrome()
        self.draw_sections()
        self.draw_footer()
        return self.canvas.finalize()

    def draw_chrome(self) -> None:
        raise NotImplementedError

    def draw_sections(self) -> None:
        raise NotImplementedError

    def draw_footer(self) -> None:
        raise NotImplementedError

    def footer(self, separator: str = "•") -> str:
        return footer_text(
            self.student.name, self.palette["label"], self.context.today, separator
        )

    def text_style(
        self,
        size: float,
        color: str,
        bold: bool = False,
        italic: bool = False,
        **kwargs,
    ) -> TextStyle:
        """Build a text style in the template's regular, bold or italic font."""
        font = self.palette["font"]
        if bold:
            font = self.palette["bold_font"]
        elif italic:
            font = self.palette.get("italic_font", font)
        return TextStyle(font=font, size=size, color=color, **kwargs)

    @staticmethod
    def present(sections: list[tuple[str, str]]) -> list[tuple[str, str]]:
        """Keep only the (title, content) pairs whose content is not blank."""
        return [(title, content) for title, content in sections if content.strip()]
