"""Unit tests for the PageCanvas wrapper."""
from pathlib import Path

import pytest
import reportlab
from reportlab.pdfbase.pdfmetrics import stringWidth

from student_resume.app.pdf.canvas import (
    LINE_HEIGHT_FACTOR,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    PageCanvas,
    TextStyle,
    clear_unicode_font,
    needs_unicode_font,
    printable,
    register_unicode_font,
    resolve_font,
    unicode_font,
)
from student_resume.app.pdf.exceptions import CanvasClosedError


def test_page_size_is_a4():
    """Test that a canvas defaults to an A4 page."""
    canvas = PageCanvas()
    assert canvas.width == PAGE_WIDTH
    assert canvas.height == PAGE_HEIGHT
    assert round(canvas.width) == 595
    assert round(canvas.height) == 842


def test_finalize_returns_pdf_bytes():
    """Test that finalize produces a PDF document."""
    canvas = PageCanvas()
    canvas.new_page()
    canvas.draw_text("Hello", 50, 50, TextStyle())

    pdf = canvas.finalize()

    assert pdf.startswith(b"%PDF")
    assert canvas.finalized is True
    assert canvas.page_count == 1


def test_finalize_without_pages_still_produces_a_page():
    """Test that an untouched canvas still finalizes to a one-page document."""
    canvas = PageCanvas()

    pdf = canvas.finalize()

    assert pdf.startswith(b"%PDF")
    assert canvas.page_count == 1


def test_finalize_is_idempotent():
    """Test that finalizing twice returns the same bytes."""
    canvas = PageCanvas()
    canvas.new_page()

    first = canvas.finalize()
    second = canvas.finalize()

    assert first == second


def test_drawing_after_finalize_raises():
    """Test that the canvas rejects drawing once it is finalized."""
    canvas = PageCanvas()
    canvas.new_page()
    canvas.finalize()

    with pytest.raises(CanvasClosedError):
        canvas.draw_rect(0, 0, 10, 10, "#000000")
    with pytest.raises(CanvasClosedError):
        canvas.draw_text("late", 0, 0, TextStyle())


def test_draw_text_returns_y_below_single_line():
    """Test that draw_text advances the cursor by one line height."""
    canvas = PageCanvas()
    canvas.new_page()
    style = TextStyle(size=12)

    bottom = canvas.draw_text("Hello", 50, 100, style)

    assert bottom == pytest.approx(100 + 12 * LINE_HEIGHT_FACTOR)


def test_draw_text_adds_line_gap_per_line():
    """Test that the line gap is added after each line."""
    canvas = PageCanvas()
    canvas.new_page()
    style = TextStyle(size=10, line_gap=3)

    bottom = canvas.draw_text("one\ntwo", 50, 100, style)

    assert bottom == pytest.approx(100 + 2 * (10 * LINE_HEIGHT_FACTOR + 3))


def test_draw_text_empty_content_keeps_cursor():
    """Test that drawing empty text leaves the cursor unchanged."""
    canvas = PageCanvas()
    canvas.new_page()

    assert canvas.draw_text("", 50, 100, TextStyle()) == 100


def test_wrap_lines_splits_long_text():
    """Test that text wider than the box wraps onto several lines."""
    canvas = PageCanvas()
    style = TextStyle(size=12)
    text = "word " * 40

    lines = canvas.wrap_lines(text, style, 100)

    assert len(lines) > 1
    for line in lines:
        assert stringWidth(line, "Helvetica", 12) <= 100


def test_wrap_lines_keeps_blank_lines():
    """Test that blank lines in the input are kept as empty lines."""
    canvas = PageCanvas()

    lines = canvas.wrap_lines("a\n\nb", TextStyle(), 200)

    assert lines == ["a", "", "b"]


def test_wrap_lines_without_wrapping():
    """Test that wrap=False never splits a paragraph."""
    canvas = PageCanvas()
    text = "word " * 40

    lines = canvas.wrap_lines(text, TextStyle(wrap=False), 50)

    assert lines == [text]


def test_measure_text_height_matches_draw_text():
    """Test that the measured height equals the space draw_text uses."""
    canvas = PageCanvas()
    canvas.new_page()
    text = "The quick brown fox jumps over the lazy dog. " * 5

    height = canvas.measure_text_height(text, 200, "Helvetica", 10, 2)
    bottom = canvas.draw_text(text, 50, 0, TextStyle(size=10, width=200, line_gap=2))

    assert height == pytest.approx(bottom)


def test_measure_text_height_of_empty_text_is_zero():
    """Test that empty text takes no vertical space."""
    canvas = PageCanvas()
    assert canvas.measure_text_height("", 200) == 0


def test_measure_text_width_includes_character_spacing():
    """Test that character spacing widens the measured text."""
    canvas = PageCanvas()

    width = canvas.measure_text_width("abc", "Helvetica", 10, character_spacing=2)

    assert width == pytest.approx(stringWidth("abc", "Helvetica", 10) + 6)


def test_printable_drops_unencodable_characters():
    """Test that characters outside the standard font encoding are removed."""
    assert printable("Jane \U0001F393 Doe") == "Jane  Doe"
    assert printable("• bullet") == "• bullet"


def test_draw_polygon_requires_three_points():
    """Test that a polygon with fewer than three points is rejected."""
    canvas = PageCanvas()
    canvas.new_page()

    with pytest.raises(ValueError):
        canvas.draw_polygon([(0, 0), (10, 10)], "#000000")


@pytest.mark.parametrize("align", ["left", "center", "right", "justify"])
def test_draw_text_alignments(align):
    """Test that every alignment draws and returns the same cursor."""
    canvas = PageCanvas()
    canvas.new_page()
    style = TextStyle(size=11, width=150, align=align)

    bottom = canvas.draw_text("Alignment check across a few words of text", 40, 40, style)

    assert bottom == pytest.approx(40 + canvas.measure_text_height(
        "Alignment check across a few words of text", 150, "Helvetica", 11
    ))


def test_rotated_and_translucent_text_draws():
    """Test that rotation and opacity are accepted by draw_text."""
    canvas = PageCanvas()
    canvas.new_page()
    style = TextStyle(size=20, rotation=-90, rotation_origin=(40, 120), opacity=0.2, wrap=False)

    canvas.draw_text("LABEL", 20, 112, style)

    assert canvas.finalize().startswith(b"%PDF")


DEVANAGARI_NAME = "राम शर्मा"


@pytest.fixture
def bundled_font_path() -> str:
    """Fixture to provide the TrueType font that ships with ReportLab."""
    return str(Path(reportlab.__file__).parent / "fonts" / "Vera.ttf")


def test_needs_unicode_font():
    """Test which text falls outside the standard font encoding."""
    assert needs_unicode_font(DEVANAGARI_NAME) is True
    assert needs_unicode_font("José • Núñez") is False


def test_non_latin_name_is_dropped_without_unicode_font():
    """Test that without a unicode font the standard fonts lose the name."""
    canvas = PageCanvas()

    assert unicode_font() is None
    assert canvas.wrap_lines(DEVANAGARI_NAME, TextStyle(), 200) == [" "]


def test_register_unicode_font_keeps_non_latin_text(bundled_font_path):
    """Test that a registered TrueType font keeps text the standard fonts cannot encode."""
    name = register_unicode_font(bundled_font_path, "ResumeUnicodeTest")
    canvas = PageCanvas()

    assert unicode_font() == "ResumeUnicodeTest"
    assert resolve_font(DEVANAGARI_NAME, "Helvetica-Bold") == name
    assert resolve_font("Jane Doe", "Helvetica-Bold") == "Helvetica-Bold"
    assert printable(DEVANAGARI_NAME, name) == DEVANAGARI_NAME
    assert canvas.wrap_lines(DEVANAGARI_NAME, TextStyle(), 200) == [DEVANAGARI_NAME]
    assert canvas.measure_text_width(DEVANAGARI_NAME, "Helvetica", 12) > 0


def test_resolve_style_swaps_only_the_font(bundled_font_path):
    """Test that the resolved style keeps everything but the font."""
    name = register_unicode_font(bundled_font_path, "ResumeUnicodeTest")
    canvas = PageCanvas()
    style = TextStyle(font="Times-Bold", size=20, color="#123456", align="center")

    resolved = canvas.resolve_style(DEVANAGARI_NAME, style)

    assert resolved.font == name
    assert (resolved.size, resolved.color, resolved.align) == (20, "#123456", "center")
    assert canvas.resolve_style("Jane Doe", style) is style


def test_draw_non_latin_text_with_unicode_font(bundled_font_path):
    """Test that a document using the unicode font still finalizes."""
    register_unicode_font(bundled_font_path, "ResumeUnicodeTest")
    canvas = PageCanvas()
    canvas.new_page()

    bottom = canvas.draw_text(DEVANAGARI_NAME, 50, 50, TextStyle(font="Helvetica-Bold", size=20))

    assert bottom > 50
    assert canvas.finalize().startswith(b"%PDF")


def test_clear_unicode_font(bundled_font_path):
    """Test going back to the standard fonts only."""
    register_unicode_font(bundled_font_path, "ResumeUnicodeTest")

    clear_unicode_font()

    assert unicode_font() is None
    assert resolve_font(DEVANAGARI_NAME, "Helvetica") == "Helvetica"
