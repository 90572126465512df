import logging

from student_resume.app.pdf.templates.base import ResumeTemplate

log = logging.getLogger(__name__)

SIDEBAR_WIDTH = 120
SECTION_ORDER = (
    ("objective", "OBJECTIVE"),
    ("education", "EDUCATION"),
    ("experience", "EXPERIENCE"),
    ("skills", "SKILLS"),
    ("projects", "PROJECTS"),
    ("certifications", "CERTIFICATIONS"),
    ("achievements", "ACHIEVEMENTS"),
    ("languages", "LANGUAGES"),
    ("references_info", "REFERENCES"),
    ("additional_info", "INFO"),
)


class MinimalistTemplate(ResumeTemplate):
    """Whitespace-heavy single column with an orange right sidebar.

    Section names appear only as rotated labels in the sidebar; the main
    column carries the section bodies in the same order.
    """

    name = "minimalist"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sidebar_x = self.page_width - SIDEBAR_WIDTH
        self.main_width = self.page_width - SIDEBAR_WIDTH - 80
        self.sections = [
            (label, getattr(self.resume, key))
            for key, label in SECTION_ORDER
            if getattr(self.resume, key).strip()
        ]

    def draw_chrome(self) -> None:
        p = self.palette
        self.canvas.draw_rect(self.sidebar_x, 0, SIDEBAR_WIDTH, self.page_height, p["light"])
        self.canvas.draw_rect(self.sidebar_x, 0, 8, self.page_height, p["primary"])

        center_x = self.sidebar_x + SIDEBAR_WIDTH / 2
        label_y = 60
        for label, _ in self.sections:
            self.canvas.draw_text(
                label,
                center_x - 30,
                label_y - 8,
                self.text_style(
                    12,
                    p["primary"],
                    bold=True,
                    width=60,
                    align="center",
                    wrap=False,
                    rotation=-90,
                    rotation_origin=(center_x, label_y),
                ),
            )
            label_y += 48

    def draw_sections(self) -> None:
        p = self.palette
        y = self.canvas.draw_text(
            self.student.name, 50, 40, self.text_style(26, p["primary"], bold=True, width=self.main_width)
        )
        y += 4
        if self.student.email:
            y = self.canvas.draw_text(self.student.email, 50, y, self.text_style(11, p["muted"]))
        if self.student.branch:
            y = self.canvas.draw_text(self.student.branch, 50, y + 2, self.text_style(11, p["muted"]))
        y += 18

        body_style = self.text_style(12, p["dark_text"], width=self.main_width, line_gap=5)
        for _, content in self.sections:
            y = self.canvas.draw_text(content, 50, y, body_style)
            y += 30

    def draw_footer(self) -> None:
        self.canvas.draw_text(
            self.footer(),
            0,
            self.page_height - 30,
            self.text_style(8, self.palette["muted"], width=self.page_width - 20, align="right"),
        )
