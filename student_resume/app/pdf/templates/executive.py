import logging

from student_resume.app.pdf.layout import (
    draw_chips,
    draw_timeline,
    non_blank_lines,
    split_tokens,
)
from student_resume.app.pdf.templates.base import ResumeTemplate

log = logging.getLogger(__name__)

SIDEBAR_WIDTH = 180
CARD_MIN_HEIGHT = 38


class ExecutiveTemplate(ResumeTemplate):
    """Teal sidebar with chip tags, timelines and card sections."""

    name = "executive"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.main_x = SIDEBAR_WIDTH + 40
        self.main_width = self.page_width - self.main_x - 40

    def draw_chrome(self) -> None:
        p = self.palette
        self.canvas.draw_rect(0, 0, SIDEBAR_WIDTH, self.page_height, p["primary"])
        self.canvas.draw_polygon(
            [(SIDEBAR_WIDTH, 0), (SIDEBAR_WIDTH + 40, 0), (SIDEBAR_WIDTH, 120)],
            p["accent"],
        )

        width = SIDEBAR_WIDTH - 60
        y = self.canvas.draw_text(
            self.student.name, 30, 40, self.text_style(22, p["white"], bold=True, width=width)
        )
        y += 10
        if self.student.email:
            self.canvas.draw_text(self.student.email, 30, y, self.text_style(10, p["light"], width=width))
            y += 18
        if self.student.branch:
            self.canvas.draw_text(self.student.branch, 30, y, self.text_style(10, p["light"], width=width))
            y += 22
        y += 10

        y = self.draw_chip_group(
            "SKILLS", self.resume.skills, y, p["chip_bg"], p["chip_text"]
        )
        self.draw_chip_group(
            "LANGUAGES",
            self.resume.languages,
            y,
            p["language_chip_bg"],
            p["language_chip_text"],
        )

    def draw_chip_group(
        self, title: str, content: str, y: float, fill_color: str, text_color: str
    ) -> float:
        tokens = split_tokens(content)
        if not tokens:
            return y
        self.canvas.draw_text(title, 30, y, self.text_style(12, self.palette["accent"], bold=True))
        y += 20
        bottom = draw_chips(
            self.canvas,
            tokens,
            30,
            y,
            SIDEBAR_WIDTH - 20,
            fill_color,
            text_color,
            font=self.palette["bold_font"],
        )
        return bottom + 4

    def draw_sections(self) -> None:
        p = self.palette
        y = 50
        if self.resume.objective.strip():
            y = self.canvas.draw_text(
                "EXECUTIVE SUMMARY", self.main_x, y, self.text_style(18, p["primary"], bold=True)
            )
            y += 6
            y = self.canvas.draw_text(
                self.resume.objective,
                self.main_x,
                y,
                self.text_style(11, p["dark_text"], width=self.main_width, align="justify", line_gap=4),
            )
            y += 18

        for title, content in (
            ("PROFESSIONAL EXPERIENCE", self.resume.experience),
            ("EDUCATION", self.resume.education),
        ):
            y = self.draw_timeline_section(title, content, y)

        for title, content in self.present(
            [
                ("PROJECTS", self.resume.projects),
                ("CERTIFICATIONS", self.resume.certifications),
                ("ACHIEVEMENTS", self.resume.achievements),
                ("REFERENCES", self.resume.references_info),
                ("ADDITIONAL INFO", self.resume.additional_info),
            ]
        ):
            y = self.draw_card(title, content, y)

    def draw_timeline_section(self, title: str, content: str, y: float) -> float:
        lines = non_blank_lines(content)
        if not lines:
            return y
        p = self.palette
        y = self.canvas.draw_text(title, self.main_x, y, self.text_style(15, p["primary"], bold=True))
        y += 8
        y = draw_timeline(
            self.canvas,
            lines,
            self.main_x,
            y,
            p["accent"],
            self.text_style(11, p["dark_text"], width=self.main_width - 30, line_gap=2),
        )
        return y + 8

    def draw_card(self, title: str, content: str, y: float) -> float:
        """Draw a tinted card holding a title and its text; return the y below it."""
        p = self.palette
        body_style = self.text_style(10, p["dark_text"], width=self.main_width - 24, line_gap=2)
        body_height = self.canvas.measure_text_height(
            content, self.main_width - 24, body_style.font, body_style.size, body_style.line_gap
        )
        card_height = max(CARD_MIN_HEIGHT, 22 + body_height + 8)
        self.canvas.draw_rect(self.main_x, y, self.main_width, card_height, p["light"])
        self.canvas.draw_text(
            title, self.main_x + 12, y + 6, self.text_style(13, p["primary"], bold=True)
        )
        self.canvas.draw_text(content, self.main_x + 12, y + 22, body_style)
        return y + card_height + 12

    def draw_footer(self) -> None:
        p = self.palette
        self.canvas.draw_rect(0, self.page_height - 36, self.page_width, 36, p["accent"])
        self.canvas.draw_text(
            self.footer(),
            0,
            self.page_height - 26,
            self.text_style(10, p["white"], width=self.page_width, align="center"),
        )
