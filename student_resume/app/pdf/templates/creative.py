import logging

from student_resume.app.pdf.templates.base import ResumeTemplate

log = logging.getLogger(__name__)


class CreativeTemplate(ResumeTemplate):
    """Purple angled banner with colored dividers between content bands."""

    name = "creative"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.content_width = self.page_width - 120

    def draw_chrome(self) -> None:
        p = self.palette
        w = self.page_width
        self.canvas.draw_polygon([(0, 0), (w, 0), (w, 100), (0, 70)], p["primary"])
        self.canvas.draw_text(
            self.student.name,
            40,
            30,
            self.text_style(28, p["white"], bold=True, width=w - 80, wrap=False),
        )
        if self.student.email:
            self.canvas.draw_text(self.student.email, 40, 65, self.text_style(12, p["light_text"], width=200))
        if self.student.branch:
            self.canvas.draw_text(self.student.branch, 250, 65, self.text_style(12, p["light_text"]))

    def divider(self, y: float, color: str) -> float:
        """Draw an angled band across the page and return the y below it."""
        w = self.page_width
        self.canvas.draw_polygon([(0, y), (w, y + 20), (w, y + 30), (0, y + 10)], color)
        return y + 40

    def section(self, title: str, content: str, y: float, size: float = 15) -> float:
        p = self.palette
        y = self.canvas.draw_text(title, 50, y, self.text_style(size, p["primary"], bold=True))
        y += 5
        y = self.canvas.draw_text(
            content,
            60,
            y,
            self.text_style(10, p["dark_text"], width=self.content_width, line_gap=3),
        )
        return y + 18

    def draw_sections(self) -> None:
        p = self.palette
        y = self.divider(120, p["secondary"])

        if self.resume.objective.strip():
            y = self.section("Profile", self.resume.objective, y, size=16)

        columns = self.present([("Skills", self.resume.skills), ("Projects", self.resume.projects)])
        if columns:
            column_width = self.page_width / 2 - 70
            column_xs = (50, self.page_width / 2 + 10)
            column_y = y + 10
            bottom = column_y + 60
            for (title, content), x in zip(columns, column_xs):
                self.canvas.draw_text(title, x, column_y, self.text_style(14, p["primary"], bold=True))
                column_bottom = self.canvas.draw_text(
                    content,
                    x,
                    column_y + 20,
                    self.text_style(10, p["dark_text"], width=column_width, line_gap=3),
                )
                bottom = max(bottom, column_bottom)
            y = bottom

        y = self.divider(y, p["tertiary"])

        for title, content in self.present(
            [
                ("Education", self.resume.education),
                ("Experience", self.resume.experience),
                ("Certifications", self.resume.certifications),
                ("Achievements", self.resume.achievements),
                ("Languages", self.resume.languages),
                ("References", self.resume.references_info),
                ("Additional Info", self.resume.additional_info),
            ]
        ):
            y = self.section(title, content, y)

    def draw_footer(self) -> None:
        p = self.palette
        self.canvas.draw_rect(0, self.page_height - 30, self.page_width, 30, p["secondary"])
        self.canvas.draw_text(
            self.footer(),
            0,
            self.page_height - 22,
            self.text_style(9, p["primary"], width=self.page_width, align="center"),
        )
