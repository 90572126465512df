"""Measurement and flow helpers shared by the resume templates.

The helpers either compute positions without drawing (line classification,
token splitting, chip packing) or draw onto a PageCanvas and return the new
vertical cursor so templates can keep an explicit running y.
"""
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from enum import Enum

from student_resume.app.pdf.canvas import PageCanvas, TextStyle

log = logging.getLogger(__name__)

BULLET_MARKERS = ("•", "-")
TOKEN_SEPARATORS = re.compile(r"\n|,|;")


class LineKind(str, Enum):
    """Role of a single line inside a free-text resume block."""

    HEADING = "heading"
    BULLET = "bullet"
    BLANK = "blank"


@dataclass(frozen=True)
class ClassifiedLine:
    """A trimmed line with its bullet marker removed and its role."""

    kind: LineKind
    text: str


@dataclass(frozen=True)
class ChipPlacement:
    """Where a chip is drawn. Coordinates are the chip's top-left corner."""

    text: str
    x: float
    y: float
    width: float
    row: int


def strip_bullet(line: str) -> str:
    """Trim a line and remove one leading bullet marker."""
    trimmed = line.strip()
    if trimmed.startswith(BULLET_MARKERS):
        return trimmed[1:].strip()
    return trimmed


def classify_line(line: str) -> ClassifiedLine:
    """Classify a raw line as a heading, a bullet or a blank separator.

    Any non-blank line that does not start with a bullet marker is a heading,
    which is how a company or project name is told apart from its details.
    """
    trimmed = line.strip()
    if not trimmed:
        return ClassifiedLine(LineKind.BLANK, "")
    if trimmed.startswith(BULLET_MARKERS):
        return ClassifiedLine(LineKind.BULLET, strip_bullet(trimmed))
    return ClassifiedLine(LineKind.HEADING, trimmed)


def classify_block(text: str) -> list[ClassifiedLine]:
    return [classify_line(line) for line in text.split("\n")]


def non_blank_lines(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def split_tokens(text: str) -> list[str]:
    """Split a skills or languages block into chip tokens.

    Tokens are separated by newlines, commas or semicolons. Leading bullet
    markers and surrounding whitespace are removed and empty tokens dropped.
    The input order is kept.
    """
    tokens = []
    for raw in TOKEN_SEPARATORS.split(text):
        token = strip_bullet(raw)
        if token:
            tokens.append(token)
    return tokens


def pack_chips(
    tokens: list[str],
    measure: Callable[[str], float],
    start_x: float,
    start_y: float,
    max_x: float,
    padding: float = 18,
    gap: float = 8,
    row_height: float = 22,
) -> list[ChipPlacement]:
    """Greedily lay tokens out left to right in rows.

    Args:
        tokens (list[str]): Chip labels in display order.
        measure (Callable[[str], float]): Returns the rendered width of a label.
        start_x (float): Left edge of every row.
        start_y (float): Top edge of the first row.
        max_x (float): Right bound that a chip must not cross.
        padding (float): Horizontal padding added to each label width.
        gap (float): Horizontal space between neighbouring chips.
        row_height (float): Vertical step between rows.

    Returns:
        list[ChipPlacement]: One placement per token, in input order.

    Notes:
        1. Each chip is measure(token) + padding wide.
        2. When the chip would end past max_x, x resets to start_x and y moves
           down one row, unless the chip is already the first in its row.
        3. Tokens are never reordered to pack rows more tightly.

    """
    placements = []
    x = start_x
    y = start_y
    row = 0
    for token in tokens:
        chip_width = measure(token) + padding
        if x + chip_width > max_x and x > start_x:
            x = start_x
            y += row_height
            row += 1
        placements.append(ChipPlacement(token, x, y, chip_width, row))
        x += chip_width + gap
    return placements


def chips_bottom(placements: list[ChipPlacement], start_y: float, row_height: float = 22) -> float:
    """Return the y directly below the last chip row."""
    if not placements:
        return start_y
    return placements[-1].y + row_height


def draw_chips(
    canvas: PageCanvas,
    tokens: list[str],
    x: float,
    y: float,
    max_x: float,
    fill_color: str,
    text_color: str,
    font: str = "Helvetica-Bold",
    size: float = 9,
    chip_height: float = 18,
    radius: float = 8,
) -> float:
    """Draw tokens as rounded chips and return the y below the last row."""
    placements = pack_chips(
        tokens,
        lambda token: canvas.measure_text_width(token, font, size),
        x,
        y,
        max_x,
    )
    for chip in placements:
        canvas.draw_rounded_rect(chip.x, chip.y, chip.width, chip_height, radius, fill_color)
        canvas.draw_text(
            chip.text,
            chip.x + 8,
            chip.y + 4,
            TextStyle(
                font=font,
                size=size,
                color=text_color,
                width=chip.width - 16,
                align="center",
                wrap=False,
            ),
        )
    return chips_bottom(placements, y)


def flow_paragraph(
    canvas: PageCanvas,
    text: str,
    x: float,
    y: float,
    style: TextStyle,
) -> float:
    """Draw a wrapped block of text and return the y below it."""
    if not text:
        return y
    return canvas.draw_text(text, x, y, style)


def draw_timeline(
    canvas: PageCanvas,
    lines: list[str],
    x: float,
    y: float,
    color: str,
    text_style: TextStyle,
    step: float = 30,
    dot_radius: float = 5,
    text_offset: float = 20,
) -> float:
    """Draw one dot per entry joined by connectors.

    Args:
        canvas (PageCanvas): The page to draw on.
        lines (list[str]): Entries in display order.
        x (float): Left edge of the timeline; dots are centred at x + 6.
        y (float): Top of the first entry.
        color (str): Dot and connector color.
        text_style (TextStyle): Style of the entry text.
        step (float): Vertical distance between entries.
        dot_radius (float): Radius of each dot.
        text_offset (float): Distance from x to the entry text.

    Returns:
        float: The y below the last entry.

    Notes:
        1. Each entry gets a dot at its top.
        2. A connector joins consecutive dots; none is drawn after the last entry.
        3. Entries are spaced by the fixed step regardless of their wrapped height.

    """
    dot_x = x + 6
    entry_y = y
    for index, line in enumerate(lines):
        canvas.draw_circle(dot_x, entry_y + 7, dot_radius, color)
        if index < len(lines) - 1:
            canvas.draw_line(
                dot_x,
                entry_y + 7 + dot_radius,
                dot_x,
                entry_y + 7 + step - dot_radius,
                color,
                line_width=2,
            )
        canvas.draw_text(line, x + text_offset, entry_y, text_style)
        entry_y += step
    return entry_y


def draw_section_header(
    canvas: PageCanvas,
    title: str,
    x: float,
    y: float,
    style: TextStyle,
    accent_color: str | None = None,
    accent_size: tuple[float, float] = (4, 20),
    spacing: float = 0,
) -> float:
    """Draw a section title, optionally preceded by a colored accent bar.

    Returns the y below the title plus spacing.
    """
    text_x = x
    if accent_color:
        bar_width, bar_height = accent_size
        canvas.draw_rect(x, y, bar_width, bar_height, accent_color)
        text_x = x + bar_width + 11
        bottom = canvas.draw_text(title, text_x, y + 2, style)
        return max(bottom, y + bar_height) + spacing
    return canvas.draw_text(title, text_x, y, style) + spacing


def format_footer_date(day: date) -> str:
    """Format a date the way the footers show it, e.g. 3/7/2025."""
    return f"{day.month}/{day.day}/{day.year}"


def footer_text(name: str, label: str, day: date, separator: str = "•") -> str:
    """Build the footer line: name, template label and render date."""
    return f"{name} {separator} {label} Resume {separator} {format_footer_date(day)}"
