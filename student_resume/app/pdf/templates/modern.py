import logging

from student_resume.app.pdf.layout import (
    LineKind,
    classify_line,
    draw_section_header,
    non_blank_lines,
    strip_bullet,
)
from student_resume.app.pdf.templates.base import ResumeTemplate

log = logging.getLogger(__name__)

SIDEBAR_WIDTH = 180
INSTITUTION_KEYWORDS = ("University", "College", "Institute", "School")


def is_institution(line: str) -> bool:
    return any(keyword in line for keyword in INSTITUTION_KEYWORDS)


class ModernTemplate(ResumeTemplate):
    """Blue left sidebar with an asymmetric main column.

    The sidebar carries the name, contact details, skill tags and languages.
    The main column shows the summary, an education timeline, experience
    cards, projects and the remaining sections.
    """

    name = "modern"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.main_x = SIDEBAR_WIDTH + 40
        self.main_width = self.page_width - self.main_x - 40

    def draw_chrome(self) -> None:
        p = self.palette
        self.canvas.draw_rect(0, 0, SIDEBAR_WIDTH, self.page_height, p["primary"])
        self.canvas.draw_polygon(
            [(SIDEBAR_WIDTH, 0), (SIDEBAR_WIDTH + 30, 0), (SIDEBAR_WIDTH, 100)],
            p["dark"],
        )
        self.draw_sidebar()

    def draw_sidebar(self) -> None:
        p = self.palette
        width = SIDEBAR_WIDTH - 60
        y = self.canvas.draw_text(
            self.student.name.upper(),
            30,
            50,
            self.text_style(28, "#ffffff", bold=True, width=width, character_spacing=1, line_gap=5),
        )
        y += 30
        if self.student.email:
            self.canvas.draw_text(
                self.student.email, 30, y, self.text_style(10, p["sidebar_text"], width=width)
            )
            y += 20
        if self.student.branch:
            self.canvas.draw_text(
                self.student.branch, 30, y, self.text_style(10, p["sidebar_text"], width=width)
            )
            y += 30
        y += 20

        skills = [strip_bullet(line) for line in non_blank_lines(self.resume.skills)]
        if skills:
            self.canvas.draw_text("SKILLS", 30, y, self.text_style(12, "#ffffff", bold=True))
            y += 25
            for skill in skills:
                self.canvas.draw_rect(30, y, width, 18, "#ffffff", opacity=0.2)
                self.canvas.draw_text(
                    skill, 35, y + 5, self.text_style(9, "#ffffff", width=width - 10, wrap=False)
                )
                y += 22
            y += 15

        languages = [strip_bullet(line) for line in non_blank_lines(self.resume.languages)]
        if languages:
            self.canvas.draw_text("LANGUAGES", 30, y, self.text_style(12, "#ffffff", bold=True))
            y += 25
            for language in languages:
                self.canvas.draw_text(
                    "• " + language, 30, y, self.text_style(9, p["sidebar_text"], width=width)
                )
                y += 15

    def header(self, title: str, y: float) -> float:
        draw_section_header(
            self.canvas,
            title,
            self.main_x,
            y,
            self.text_style(16, self.palette["dark_text"], bold=True),
            accent_color=self.palette["primary"],
        )
        return y + 35

    def draw_sections(self) -> None:
        y = 60
        y = self.draw_summary(y)
        y = self.draw_education(y)
        y = self.draw_experience(y)
        y = self.draw_projects(y)
        self.draw_additional(y)

    def draw_summary(self, y: float) -> float:
        if not self.resume.objective.strip():
            return y
        p = self.palette
        y = self.header("PROFESSIONAL SUMMARY", y)
        self.canvas.draw_rect(self.main_x, y, self.main_width, 2, p["light"])
        y += 15
        y = self.canvas.draw_text(
            self.resume.objective,
            self.main_x,
            y,
            self.text_style(11, p["medium_text"], width=self.main_width, align="justify", line_gap=4),
        )
        return y + 30

    def draw_education(self, y: float) -> float:
        lines = non_blank_lines(self.resume.education)
        if not lines:
            return y
        p = self.palette
        y = self.header("EDUCATION", y)
        self.canvas.draw_rect(self.main_x + 10, y, 2, 100, p["light"])
        text_x = self.main_x + 25
        text_width = self.main_width - 35
        for line in lines:
            if is_institution(line):
                self.canvas.draw_circle(self.main_x + 11, y + 8, 4, p["primary"])
                self.canvas.draw_text(
                    line, text_x, y, self.text_style(12, p["dark_text"], bold=True, width=text_width)
                )
                y += 20
            else:
                self.canvas.draw_text(
                    strip_bullet(line), text_x, y, self.text_style(10, p["medium_text"], width=text_width)
                )
                y += 15
        return y + 20

    def draw_experience(self, y: float) -> float:
        if not self.resume.experience.strip():
            return y
        p = self.palette
        y = self.header("PROFESSIONAL EXPERIENCE", y)
        expecting_company = True
        for raw in self.resume.experience.split("\n"):
            line = classify_line(raw)
            if line.kind is LineKind.BLANK:
                y += 8
                expecting_company = True
            elif expecting_company and line.kind is LineKind.HEADING:
                self.canvas.draw_rect(self.main_x, y, self.main_width, 25, p["light"])
                self.canvas.draw_text(
                    line.text,
                    self.main_x + 15,
                    y + 8,
                    self.text_style(13, p["dark_text"], bold=True, width=self.main_width - 30),
                )
                y += 30
                expecting_company = False
            elif line.kind is LineKind.HEADING and "20" in line.text:
                self.canvas.draw_text(
                    line.text,
                    self.main_x,
                    y,
                    self.text_style(10, p["primary"], italic=True, width=self.main_width),
                )
                y += 18
            else:
                y = self.canvas.draw_text(
                    "• " + line.text,
                    self.main_x + 15,
                    y,
                    self.text_style(10, p["medium_text"], width=self.main_width - 30),
                )
                y += 5
        return y + 20

    def draw_projects(self, y: float) -> float:
        if not self.resume.projects.strip():
            return y
        p = self.palette
        y = self.header("PROJECTS", y)
        expecting_title = True
        for raw in self.resume.projects.split("\n"):
            line = classify_line(raw)
            if line.kind is LineKind.BLANK:
                y += 8
                expecting_title = True
            elif expecting_title and line.kind is LineKind.HEADING:
                self.canvas.draw_rect(self.main_x, y, 3, 15, p["primary"])
                self.canvas.draw_text(
                    line.text,
                    self.main_x + 10,
                    y + 2,
                    self.text_style(12, p["dark_text"], bold=True, width=self.main_width - 20),
                )
                y += 20
                expecting_title = False
            else:
                y = self.canvas.draw_text(
                    "• " + line.text,
                    self.main_x + 10,
                    y,
                    self.text_style(10, p["medium_text"], width=self.main_width - 20),
                )
                y += 5
        return y + 20

    def draw_additional(self, y: float) -> float:
        sections = self.present(
            [
                ("CERTIFICATIONS", self.resume.certifications),
                ("ACHIEVEMENTS", self.resume.achievements),
                ("REFERENCES", self.resume.references_info),
                ("ADDITIONAL INFO", self.resume.additional_info),
            ]
        )
        for title, content in sections:
            y = self.header(title, y)
            y = self.canvas.draw_text(
                content,
                self.main_x,
                y,
                self.text_style(10, self.palette["medium_text"], width=self.main_width, line_gap=3),
            )
            y += 25
        return y

    def draw_footer(self) -> None:
        p = self.palette
        self.canvas.draw_rect(0, self.page_height - 40, self.page_width, 40, p["footer_bg"])
        self.canvas.draw_text(
            self.footer(),
            0,
            self.page_height - 25,
            self.text_style(8, p["light_text"], width=self.page_width, align="center"),
        )
