import logging

from student_resume.app.pdf.layout import draw_timeline, non_blank_lines
from student_resume.app.pdf.templates.base import ResumeTemplate

log = logging.getLogger(__name__)

SIDEBAR_WIDTH = 170
SIDEBAR_TEXT_WIDTH = 130


class AcademicTemplate(ResumeTemplate):
    """Serif layout with a maroon-capped sidebar for education and research.

    The main column lists publications, conferences and teaching before the
    general sections, so it is the one template that reads the academic
    fields of a resume.
    """

    name = "academic"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.main_x = SIDEBAR_WIDTH + 30
        self.main_width = self.page_width - self.main_x - 30

    def draw_chrome(self) -> None:
        p = self.palette
        self.canvas.draw_rect(0, 0, SIDEBAR_WIDTH, self.page_height, p["light"])
        self.canvas.draw_rect(0, 0, SIDEBAR_WIDTH, 80, p["primary"])

        y = self.canvas.draw_text(
            self.student.name,
            20,
            30,
            self.text_style(22, p["white"], bold=True, width=SIDEBAR_TEXT_WIDTH),
        )
        y += 8
        if self.student.email:
            y = self.canvas.draw_text(
                self.student.email, 20, y, self.text_style(11, p["white"], width=SIDEBAR_TEXT_WIDTH)
            )
            y += 4
        if self.student.branch:
            y = self.canvas.draw_text(
                self.student.branch, 20, y, self.text_style(11, p["white"], width=SIDEBAR_TEXT_WIDTH)
            )
        y += 16
        self.draw_sidebar(max(y, 96))

    def draw_sidebar(self, y: float) -> None:
        p = self.palette
        education = non_blank_lines(self.resume.education)
        if education:
            self.canvas.draw_text("EDUCATION", 20, y, self.text_style(13, p["primary"], bold=True))
            y += 18
            y = draw_timeline(
                self.canvas,
                education,
                26,
                y,
                p["primary"],
                self.text_style(10, p["dark_text"], width=110),
                step=24,
                dot_radius=4,
                text_offset=18,
            )
            y += 8

        if self.resume.research.strip():
            self.canvas.draw_text("RESEARCH", 20, y, self.text_style(13, p["primary"], bold=True))
            y += 18
            self.canvas.draw_text(
                self.resume.research,
                20,
                y,
                self.text_style(10, p["dark_text"], width=SIDEBAR_TEXT_WIDTH, line_gap=2),
            )

    def draw_sections(self) -> None:
        p = self.palette
        y = 40
        for title, content in self.present(
            [
                ("PUBLICATIONS", self.resume.publications),
                ("CONFERENCES", self.resume.conferences),
                ("TEACHING EXPERIENCE", self.resume.teaching_experience),
                ("EXPERIENCE", self.resume.experience),
                ("SKILLS", self.resume.skills),
                ("CERTIFICATIONS", self.resume.certifications),
                ("ACHIEVEMENTS", self.resume.achievements),
                ("LANGUAGES", self.resume.languages),
                ("REFERENCES", self.resume.references_info),
                ("ADDITIONAL INFO", self.resume.additional_info),
            ]
        ):
            y = self.canvas.draw_text(title, self.main_x, y, self.text_style(15, p["primary"], bold=True))
            y += 4
            y = self.canvas.draw_text(
                content,
                self.main_x,
                y,
                self.text_style(11, p["medium_text"], width=self.main_width, line_gap=3),
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
