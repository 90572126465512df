import io
import logging
from dataclasses import dataclass, replace

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.pdfmetrics import getAscentDescent, stringWidth
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen.canvas import Canvas

from student_resume.app.pdf.exceptions import CanvasClosedError

log = logging.getLogger(__name__)

PAGE_WIDTH, PAGE_HEIGHT = A4

# Baseline-to-baseline distance as a multiple of the font size.
LINE_HEIGHT_FACTOR = 1.156


@dataclass(frozen=True)
class TextStyle:
    """Describes how a block of text is drawn.

    Attributes:
        font (str): A standard PDF font name, e.g. "Helvetica-Bold".
        size (float): Font size in points.
        color (str): Fill color as a hex string.
        width (float | None): Wrapping width. None wraps at the right page edge.
        align (str): One of "left", "center", "right" or "justify".
        line_gap (float): Extra space added after every line.
        character_spacing (float): Extra space added between characters.
        rotation (float): Clockwise rotation in degrees.
        rotation_origin (tuple[float, float] | None): Point to rotate around.
            None rotates around the text origin.
        opacity (float): Fill opacity between 0 and 1.
        wrap (bool): When False, lines are never wrapped.

    """

    font: str = "Helvetica"
    size: float = 12
    color: str = "#000000"
    width: float | None = None
    align: str = "left"
    line_gap: float = 0
    character_spacing: float = 0
    rotation: float = 0
    rotation_origin: tuple[float, float] | None = None
    opacity: float = 1.0
    wrap: bool = True


# Name of the registered TrueType font used for text the standard fonts cannot encode.
_unicode_font: str | None = None


def register_unicode_font(path: str, name: str = "ResumeUnicode") -> str:
    """Register a TrueType font for text outside the standard fonts' encoding.

    Args:
        path (str): Path to a .ttf file covering the scripts students use.
        name (str): The font name to register it under.

    Returns:
        str: The registered font name.

    Raises:
        reportlab.pdfbase.ttfonts.TTFError: If the file is not a usable TrueType font.

    Notes:
        1. Register the font with ReportLab.
        2. Text that cannot be encoded in cp1252 is drawn with it from then on.

    """
    global _unicode_font
    pdfmetrics.registerFont(TTFont(name, path))
    _unicode_font = name
    _msg = f"Registered unicode font {name} from {path}"
    log.info(_msg)
    return name


def clear_unicode_font() -> None:
    """Go back to dropping characters the standard fonts cannot encode."""
    global _unicode_font
    _unicode_font = None


def unicode_font() -> str | None:
    return _unicode_font


def needs_unicode_font(text: str) -> bool:
    try:
        text.encode("cp1252")
    except UnicodeEncodeError:
        return True
    return False


def resolve_font(text: str, font: str) -> str:
    """Return the registered unicode font when the text needs it, else the given font."""
    if _unicode_font and needs_unicode_font(text):
        return _unicode_font
    return font


def printable(text: str, font: str | None = None) -> str:
    """Drop characters the standard PDF fonts cannot encode.

    Text bound for the registered unicode font is returned unchanged.
    """
    if font is not None and font == _unicode_font:
        return text
    return text.encode("cp1252", "ignore").decode("cp1252")


class PageCanvas:
    """A single document built on a ReportLab canvas with a top-left origin.

    Every coordinate passed to this class is measured in points from the
    top-left corner of the page. Text drawing returns the y position below
    the drawn block, so callers thread an explicit cursor through their
    layout instead of reading hidden canvas state.

    Attributes:
        width (float): Page width in points.
        height (float): Page height in points.
        page_count (int): Number of pages started so far.
        finalized (bool): True once the document has been saved.

    """

    def __init__(self, page_size: tuple[float, float] = A4, title: str | None = None):
        self.width, self.height = page_size
        self.page_count = 0
        self.finalized = False
        self._buffer = io.BytesIO()
        self._canvas = Canvas(self._buffer, pagesize=page_size)
        if title:
            self._canvas.setTitle(title)

    def _ensure_open(self) -> None:
        if self.finalized:
            raise CanvasClosedError("Cannot draw on a finalized document")

    def _flip(self, y: float) -> float:
        return self.height - y

    def new_page(self) -> None:
        """Start a new page. The first call opens the first page."""
        self._ensure_open()
        if self.page_count:
            self._canvas.showPage()
        self.page_count += 1

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        fill_color: str | None = None,
        stroke_color: str | None = None,
        line_width: float = 1,
        opacity: float = 1.0,
    ) -> None:
        self._ensure_open()
        c = self._canvas
        c.saveState()
        self._apply_paint(fill_color, stroke_color, line_width, opacity)
        c.rect(
            x,
            self._flip(y + height),
            width,
            height,
            fill=1 if fill_color else 0,
            stroke=1 if stroke_color else 0,
        )
        c.restoreState()

    def draw_rounded_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        radius: float,
        fill_color: str,
        opacity: float = 1.0,
    ) -> None:
        self._ensure_open()
        c = self._canvas
        c.saveState()
        self._apply_paint(fill_color, None, 1, opacity)
        c.roundRect(x, self._flip(y + height), width, height, radius, fill=1, stroke=0)
        c.restoreState()

    def draw_circle(
        self,
        cx: float,
        cy: float,
        radius: float,
        fill_color: str,
        opacity: float = 1.0,
    ) -> None:
        self._ensure_open()
        c = self._canvas
        c.saveState()
        self._apply_paint(fill_color, None, 1, opacity)
        c.circle(cx, self._flip(cy), radius, fill=1, stroke=0)
        c.restoreState()

    def draw_polygon(
        self,
        points: list[tuple[float, float]],
        fill_color: str,
        opacity: float = 1.0,
    ) -> None:
        """Fill the closed polygon through the given points."""
        self._ensure_open()
        if len(points) < 3:
            raise ValueError("A polygon needs at least three points")
        c = self._canvas
        c.saveState()
        self._apply_paint(fill_color, None, 1, opacity)
        path = c.beginPath()
        first_x, first_y = points[0]
        path.moveTo(first_x, self._flip(first_y))
        for px, py in points[1:]:
            path.lineTo(px, self._flip(py))
        path.close()
        c.drawPath(path, fill=1, stroke=0)
        c.restoreState()

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        stroke_color: str,
        line_width: float = 1,
    ) -> None:
        self._ensure_open()
        c = self._canvas
        c.saveState()
        self._apply_paint(None, stroke_color, line_width, 1.0)
        c.line(x1, self._flip(y1), x2, self._flip(y2))
        c.restoreState()

    def _apply_paint(
        self,
        fill_color: str | None,
        stroke_color: str | None,
        line_width: float,
        opacity: float,
    ) -> None:
        c = self._canvas
        if fill_color:
            c.setFillColor(HexColor(fill_color))
            c.setFillAlpha(opacity)
        if stroke_color:
            c.setStrokeColor(HexColor(stroke_color))
            c.setStrokeAlpha(opacity)
            c.setLineWidth(line_width)

    def resolve_style(self, content: str, style: TextStyle) -> TextStyle:
        """Swap in the unicode font when the content needs it."""
        font = resolve_font(content, style.font)
        return style if font == style.font else replace(style, font=font)

    def wrap_lines(self, content: str, style: TextStyle, width: float) -> list[str]:
        """Split content into the lines it occupies at the given width.

        Args:
            content (str): The text, possibly containing newlines.
            style (TextStyle): The font, size and wrapping settings.
            width (float): The available width in points.

        Returns:
            list[str]: One entry per drawn line. Blank input lines are kept as "".

        """
        style = self.resolve_style(content, style)
        text = printable(content, style.font)
        lines = []
        for paragraph in text.split("\n"):
            if not style.wrap or not paragraph.strip():
                lines.append(paragraph)
                continue
            wrapped = simpleSplit(paragraph, style.font, style.size, max(width, 1))
            lines.extend(wrapped or [""])
        return lines

    def line_height(self, style: TextStyle) -> float:
        return style.size * LINE_HEIGHT_FACTOR + style.line_gap

    def measure_text_width(
        self,
        content: str,
        font: str = "Helvetica",
        size: float = 12,
        character_spacing: float = 0,
    ) -> float:
        font = resolve_font(content, font)
        text = printable(content, font)
        return stringWidth(text, font, size) + character_spacing * len(text)

    def measure_text_height(
        self,
        content: str,
        width: float,
        font: str = "Helvetica",
        size: float = 12,
        line_gap: float = 0,
    ) -> float:
        """Return the vertical space a wrapped text block occupies."""
        if not content:
            return 0
        style = TextStyle(font=font, size=size, line_gap=line_gap)
        return len(self.wrap_lines(content, style, width)) * self.line_height(style)

    def draw_text(self, content: str, x: float, y: float, style: TextStyle) -> float:
        """Draw a block of text with its top-left corner at (x, y).

        Args:
            content (str): The text to draw. Newlines start new paragraphs.
            x (float): Left edge of the text box.
            y (float): Top edge of the text box.
            style (TextStyle): How to draw the text.

        Returns:
            float: The y position directly below the drawn block.

        Notes:
            1. Wrap each paragraph to the style width, or to the right page edge.
            2. Place every line according to the alignment; justified lines
               stretch word spacing except on the last line of a paragraph.
            3. Apply rotation around the rotation origin and the fill opacity.
            4. Return y advanced by one line height per drawn line.

        """
        self._ensure_open()
        if not content:
            return y
        style = self.resolve_style(content, style)
        width = style.width if style.width is not None else self.width - x
        lines = self.wrap_lines(content, style, width)
        leading = self.line_height(style)
        ascent, _ = getAscentDescent(style.font, style.size)

        c = self._canvas
        c.saveState()
        if style.rotation:
            ox, oy = style.rotation_origin or (x, y)
            c.translate(ox, self._flip(oy))
            c.rotate(-style.rotation)
            c.translate(-ox, -self._flip(oy))
        c.setFillColor(HexColor(style.color))
        c.setFillAlpha(style.opacity)

        paragraph_ends = self._paragraph_ends(content, style, width)
        line_top = y
        for index, line in enumerate(lines):
            if line:
                self._draw_line_of_text(
                    line,
                    x,
                    line_top + ascent,
                    width,
                    style,
                    last_in_paragraph=index in paragraph_ends,
                )
            line_top += leading
        c.restoreState()
        return line_top

    def _paragraph_ends(self, content: str, style: TextStyle, width: float) -> set[int]:
        ends = set()
        index = -1
        for paragraph in printable(content, style.font).split("\n"):
            index += len(self.wrap_lines(paragraph, style, width))
            ends.add(index)
        return ends

    def _draw_line_of_text(
        self,
        line: str,
        x: float,
        baseline: float,
        width: float,
        style: TextStyle,
        last_in_paragraph: bool,
    ) -> None:
        line_width = self.measure_text_width(
            line, style.font, style.size, style.character_spacing
        )
        word_space = 0.0
        start_x = x
        if style.align == "center":
            start_x = x + (width - line_width) / 2
        elif style.align == "right":
            start_x = x + width - line_width
        elif style.align == "justify" and not last_in_paragraph:
            gaps = line.count(" ")
            if gaps and line_width < width:
                word_space = (width - line_width) / gaps

        text = self._canvas.beginText()
        text.setTextOrigin(start_x, self._flip(baseline))
        text.setFont(style.font, style.size)
        text.setCharSpace(style.character_spacing)
        text.setWordSpace(word_space)
        text.textOut(line)
        self._canvas.drawText(text)

    def finalize(self) -> bytes:
        """Save the document and return its bytes.

        Returns:
            bytes: The complete PDF document.

        Notes:
            1. A document without pages gets one blank page so it is always valid.
            2. Calling finalize again returns the same bytes without redrawing.

        """
        if self.finalized:
            return self._buffer.getvalue()
        if not self.page_count:
            self.page_count = 1
        self._canvas.showPage()
        self._canvas.save()
        self.finalized = True
        _msg = f"Finalized PDF document with {self.page_count} page(s)"
        log.debug(_msg)
        return self._buffer.getvalue()
