import logging

from student_resume.app.pdf.templates.base import ResumeTemplate

log = logging.getLogger(__name__)

MARGIN_X = 100
SIDE_LABELS = (
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


class ClassicTemplate(ResumeTemplate):
    """Gold header band, serif type and a watermark.

    Section names run vertically down the left margin, education and
    experience sit side by side, and the rest flows in a single column
    below a horizontal rule.
    """

    name = "classic"

    def draw_chrome(self) -> None:
        p = self.palette
        self.canvas.draw_text(
            "RESUME",
            80,
            250,
            self.text_style(
                100,
                p["watermark"],
                bold=True,
                width=self.page_width - 160,
                align="center",
                rotation=-30,
                opacity=0.2,
                wrap=False,
            ),
        )

        label_y = 120
        for key, label in SIDE_LABELS:
            if not getattr(self.resume, key).strip():
                continue
            self.canvas.draw_text(
                label,
                20,
                label_y - 8,
                self.text_style(
                    12,
                    p["primary"],
                    bold=True,
                    width=60,
                    align="center",
                    wrap=False,
                    rotation=-90,
                    rotation_origin=(40, label_y),
                ),
            )
            label_y += 48

        self.canvas.draw_rect(0, 0, self.page_width, 80, p["primary"])
        centered = {"width": self.page_width, "align": "center"}
        self.canvas.draw_text(
            self.student.name.upper(), 0, 22, self.text_style(28, p["dark_text"], bold=True, **centered)
        )
        if self.student.email:
            self.canvas.draw_text(self.student.email, 0, 54, self.text_style(12, p["dark_text"], **centered))
        if self.student.branch:
            self.canvas.draw_text(self.student.branch, 0, 68, self.text_style(12, p["dark_text"], **centered))

    def draw_sections(self) -> None:
        p = self.palette
        y = 110
        columns = self.present(
            [("EDUCATION", self.resume.education), ("EXPERIENCE", self.resume.experience)]
        )
        if columns:
            column_width = self.page_width / 2 - 120
            column_xs = (MARGIN_X, self.page_width / 2 + 10)
            body_y = y + 22
            bottom = body_y + 80
            for (title, content), x in zip(columns, column_xs):
                self.canvas.draw_text(title, x, y, self.text_style(15, p["primary"], bold=True))
                column_bottom = self.canvas.draw_text(
                    content,
                    x,
                    body_y,
                    self.text_style(11, p["dark_text"], width=column_width, line_gap=3),
                )
                bottom = max(bottom, column_bottom)
            y = bottom
            self.canvas.draw_line(
                MARGIN_X, y, self.page_width - MARGIN_X, y, p["rule"], line_width=2
            )
            y += 16

        sections = self.present(
            [
                ("OBJECTIVE", self.resume.objective),
                ("SKILLS", self.resume.skills),
                ("PROJECTS", self.resume.projects),
                ("CERTIFICATIONS", self.resume.certifications),
                ("ACHIEVEMENTS", self.resume.achievements),
                ("LANGUAGES", self.resume.languages),
                ("REFERENCES", self.resume.references_info),
                ("ADDITIONAL INFO", self.resume.additional_info),
            ]
        )
        for title, content in sections:
            y = self.canvas.draw_text(title, MARGIN_X, y, self.text_style(15, p["primary"], bold=True))
            y += 4
            y = self.canvas.draw_text(
                content,
                MARGIN_X,
                y,
                self.text_style(11, p["dark_text"], width=self.page_width - 2 * MARGIN_X, line_gap=3),
            )
            y += 18

    def draw_footer(self) -> None:
        p = self.palette
        rule_y = self.page_height - 50
        self.canvas.draw_line(MARGIN_X, rule_y, self.page_width - MARGIN_X, rule_y, p["rule"])
        self.canvas.draw_text(
            self.footer(separator="-"),
            0,
            self.page_height - 40,
            self.text_style(9, p["primary"], italic=True, width=self.page_width, align="center"),
        )
