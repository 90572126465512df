import logging

from student_resume.app.pdf.templates.base import ResumeTemplate

log = logging.getLogger(__name__)

FRAME_MARGIN = 30
CONTENT_X = 60

# Section field, terminal command and prompt color key, in display order.
COMMANDS = (
    ("objective", "profile", "green"),
    ("experience", "experience", "yellow"),
    ("education", "education", "cyan"),
    ("skills", "skills", "green"),
    ("projects", "projects", "yellow"),
    ("certifications", "certifications", "cyan"),
    ("achievements", "achievements", "green"),
    ("languages", "languages", "yellow"),
    ("references_info", "references", "cyan"),
    ("additional_info", "info", "cyan"),
)


class TechnicalTemplate(ResumeTemplate):
    """Dark terminal window with monospace prompts and code blocks.

    Every section is introduced by a shell prompt such as "$ skills" and
    its text sits in a rounded code block.
    """

    name = "technical"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.content_width = self.page_width - 2 * CONTENT_X

    def draw_chrome(self) -> None:
        p = self.palette
        w = self.page_width
        h = self.page_height
        self.canvas.draw_rounded_rect(
            FRAME_MARGIN, FRAME_MARGIN, w - 2 * FRAME_MARGIN, h - 80, 18, p["background"]
        )
        self.draw_pattern()
        self.canvas.draw_rounded_rect(
            FRAME_MARGIN, FRAME_MARGIN, w - 2 * FRAME_MARGIN, 38, 18, p["header_bg"]
        )
        for dot_x, color in ((50, "window_red"), (70, "window_yellow"), (90, "window_green")):
            self.canvas.draw_circle(dot_x, 49, 6, p[color])

        self.canvas.draw_text(
            self.student.name,
            120,
            44,
            self.text_style(18, p["green"], bold=True, width=w - 180, wrap=False),
        )
        if self.student.email:
            self.canvas.draw_text(
                self.student.email, 120, 62, self.text_style(10, p["cyan"], width=190, wrap=False)
            )
        if self.student.branch:
            self.canvas.draw_text(
                self.student.branch, 320, 62, self.text_style(10, p["yellow"], width=w - 380, wrap=False)
            )

    def draw_pattern(self) -> None:
        """Tile faint code glyphs across the terminal background."""
        style = self.text_style(8, self.palette["pattern"], wrap=False)
        x = 50
        while x < self.page_width - 60:
            y = 80
            while y < self.page_height - 60:
                self.canvas.draw_text("~#", x, y, style)
                self.canvas.draw_text("||", x + 20, y + 10, style)
                self.canvas.draw_text("==", x + 40, y + 20, style)
                y += 40
            x += 60

    def terminal_header(self, command: str, color: str, y: float) -> float:
        bottom = self.canvas.draw_text(
            f"$ {command}", CONTENT_X, y, self.text_style(13, color, bold=True)
        )
        return bottom + 2

    def code_block(self, content: str, color: str, y: float) -> float:
        """Draw content in the prompt color inside a rounded block and return the y below it."""
        p = self.palette
        inner_width = self.content_width - 24
        style = self.text_style(10, color, width=inner_width, line_gap=3)
        text_height = self.canvas.measure_text_height(
            content, inner_width, style.font, style.size, style.line_gap
        )
        self.canvas.draw_rounded_rect(CONTENT_X, y, self.content_width, text_height + 16, 8, p["block_bg"])
        self.canvas.draw_text(content, CONTENT_X + 12, y + 8, style)
        return y + text_height + 24

    def draw_sections(self) -> None:
        y = 90
        for field, command, color_key in COMMANDS:
            content = getattr(self.resume, field)
            if not content.strip():
                continue
            color = self.palette[color_key]
            y = self.terminal_header(command, color, y)
            y = self.code_block(content, color, y)
            y += 8

    def draw_footer(self) -> None:
        self.canvas.draw_text(
            f"$ exit  # {self.footer()}",
            CONTENT_X,
            self.page_height - 36,
            self.text_style(11, self.palette["green"], width=self.content_width, wrap=False),
        )
