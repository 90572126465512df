import logging

from student_resume.app.pdf.templates.base import ResumeTemplate

log = logging.getLogger(__name__)

PATTERN_STEP = 60
BORDER_INSET = 8


class ElegantTemplate(ResumeTemplate):
    """Serif type on a faint dotted background inside a gold border."""

    name = "elegant"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.column_width = self.page_width / 2 - 80
        self.column_xs = (60, self.page_width / 2 + 10)

    def draw_chrome(self) -> None:
        p = self.palette
        x = 0
        while x < self.page_width:
            y = 0
            while y < self.page_height:
                self.canvas.draw_circle(x + 30, y + 30, 18, p["light"], opacity=0.07)
                y += PATTERN_STEP
            x += PATTERN_STEP

        self.canvas.draw_rect(
            BORDER_INSET,
            BORDER_INSET,
            self.page_width - 2 * BORDER_INSET,
            self.page_height - 2 * BORDER_INSET,
            stroke_color=p["primary"],
            line_width=4,
        )

        self.canvas.draw_rect(0, 0, self.page_width, 90, p["light"])
        centered = {"width": self.page_width, "align": "center", "wrap": False}
        self.canvas.draw_text(
            self.student.name.upper(), 0, 24, self.text_style(28, p["dark"], bold=True, **centered)
        )
        if self.student.email:
            self.canvas.draw_text(self.student.email, 0, 60, self.text_style(12, p["dark_text"], **centered))
        if self.student.branch:
            self.canvas.draw_text(self.student.branch, 0, 76, self.text_style(12, p["dark_text"], **centered))

    def draw_columns(self, columns: list[tuple[str, str]], y: float) -> float:
        """Draw up to two titled columns side by side and return the y below them."""
        p = self.palette
        columns = self.present(columns)
        if not columns:
            return y
        bottom = y + 60
        for (title, content), x in zip(columns, self.column_xs):
            self.canvas.draw_text(title, x, y, self.text_style(15, p["primary"], bold=True))
            column_bottom = self.canvas.draw_text(
                content,
                x,
                y + 20,
                self.text_style(11, p["medium_text"], width=self.column_width, line_gap=3),
            )
            bottom = max(bottom, column_bottom)
        return bottom + 10

    def draw_sections(self) -> None:
        p = self.palette
        y = 110
        y = self.draw_columns([("SKILLS", self.resume.skills), ("EXPERIENCE", self.resume.experience)], y)
        y = self.draw_columns([("PROJECTS", self.resume.projects), ("EDUCATION", self.resume.education)], y)

        for title, content in self.present(
            [
                ("CERTIFICATIONS", self.resume.certifications),
                ("ACHIEVEMENTS", self.resume.achievements),
                ("LANGUAGES", self.resume.languages),
                ("REFERENCES", self.resume.references_info),
                ("ADDITIONAL INFO", self.resume.additional_info),
            ]
        ):
            y = self.canvas.draw_text(title, 60, y, self.text_style(15, p["primary"], bold=True))
            y += 4
            y = self.canvas.draw_text(
                content,
                60,
                y,
                self.text_style(11, p["medium_text"], width=self.page_width - 120, line_gap=3),
            )
            y += 18

    def draw_footer(self) -> None:
        self.canvas.draw_text(
            self.footer(),
            0,
            self.page_height - 30,
            self.text_style(
                10, self.palette["light_text"], italic=True, width=self.page_width, align="center"
            ),
        )
