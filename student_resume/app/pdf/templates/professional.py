import logging

from student_resume.app.pdf.layout import draw_timeline, non_blank_lines
from student_resume.app.pdf.templates.base import ResumeTemplate

log = logging.getLogger(__name__)

SIDEBAR_WIDTH = 140
HEADER_HEIGHT = 70


class ProfessionalTemplate(ResumeTemplate):
    """Dark header band, a light right sidebar and an accent-colored timeline.

    The sidebar holds skills and languages. The main column carries the
    summary, an experience timeline and the remaining sections.
    """

    name = "professional"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sidebar_x = self.page_width - SIDEBAR_WIDTH
        self.main_x = 60
        self.main_width = self.page_width - SIDEBAR_WIDTH - 100

    def draw_chrome(self) -> None:
        p = self.palette
        self.canvas.draw_rect(self.sidebar_x, 0, SIDEBAR_WIDTH, self.page_height, p["light"])
        self.canvas.draw_rect(self.sidebar_x, 0, 8, self.page_height, p["primary"])
        self.draw_sidebar()

        self.canvas.draw_rect(0, 0, self.page_width, HEADER_HEIGHT, p["dark"])
        self.canvas.draw_text(
            self.student.name.upper(),
            40,
            22,
            self.text_style(28, p["header_text"], bold=True, width=self.page_width - 80, wrap=False),
        )
        if self.student.email:
            self.canvas.draw_text(
                self.student.email, 40, 54, self.text_style(12, p["header_subtext"], width=250, wrap=False)
            )
        if self.student.branch:
            self.canvas.draw_text(self.student.branch, 300, 54, self.text_style(12, p["header_subtext"]))

    def draw_sidebar(self) -> None:
        p = self.palette
        x = self.sidebar_x + 20
        y = HEADER_HEIGHT + 20
        for title, content in self.present(
            [("SKILLS", self.resume.skills), ("LANGUAGES", self.resume.languages)]
        ):
            self.canvas.draw_text(title, x, y, self.text_style(13, p["primary"], bold=True))
            y += 20
            y = self.canvas.draw_text(
                content, x, y, self.text_style(10, p["dark_text"], width=100, line_gap=3)
            )
            y += 18

    def title(self, text: str, y: float, size: float = 15, spacing: float = 6) -> float:
        bottom = self.canvas.draw_text(
            text, self.main_x, y, self.text_style(size, self.palette["primary"], bold=True)
        )
        return bottom + spacing

    def body(self, content: str, y: float, color: str | None = None, **kwargs) -> float:
        style = {"width": self.main_width, "line_gap": 3}
        style.update(kwargs)
        color = color or self.palette["dark_text"]
        return self.canvas.draw_text(content, self.main_x, y, self.text_style(11, color, **style))

    def draw_sections(self) -> None:
        p = self.palette
        y = 90
        if self.resume.objective.strip():
            y = self.title("PROFESSIONAL SUMMARY", y, size=16, spacing=4)
            y = self.body(
                self.resume.objective, y, p["medium_text"], align="justify", line_gap=4
            )
            y += 18

        lines = non_blank_lines(self.resume.experience)
        if lines:
            y = self.title("EXPERIENCE", y)
            y = draw_timeline(
                self.canvas,
                lines,
                self.main_x,
                y,
                p["primary"],
                self.text_style(11, p["dark_text"], width=self.main_width - 30, line_gap=2),
            )
            y += 8

        for heading, content in self.present(
            [("EDUCATION", self.resume.education), ("PROJECTS", self.resume.projects)]
        ):
            y = self.title(heading, y)
            y = self.body(content, y) + 18

        for heading, content in self.present(
            [
                ("CERTIFICATIONS", self.resume.certifications),
                ("ACHIEVEMENTS", self.resume.achievements),
                ("REFERENCES", self.resume.references_info),
                ("ADDITIONAL INFO", self.resume.additional_info),
            ]
        ):
            y = self.title(heading, y, spacing=4)
            y = self.body(content, y) + 18

    def draw_footer(self) -> None:
        self.canvas.draw_text(
            self.footer(),
            0,
            self.page_height - 30,
            self.text_style(10, self.palette["light_text"], width=self.page_width, align="center"),
        )
