"""Unit tests for the layout helpers."""
from datetime import date

import pytest

from student_resume.app.pdf.canvas import TextStyle
from student_resume.app.pdf.layout import (
    ChipPlacement,
    LineKind,
    chips_bottom,
    classify_block,
    classify_line,
    draw_chips,
    draw_section_header,
    draw_timeline,
    flow_paragraph,
    footer_text,
    format_footer_date,
    non_blank_lines,
    pack_chips,
    split_tokens,
    strip_bullet,
)


def test_classify_block_experience_entry():
    """Test that a company, a date and two bullets are classified in order."""
    lines = classify_block("Acme Corp\n2019-2021\n• Did X\n• Did Y")

    assert [line.kind for line in lines] == [
        LineKind.HEADING,
        LineKind.HEADING,
        LineKind.BULLET,
        LineKind.BULLET,
    ]
    assert [line.text for line in lines] == ["Acme Corp", "2019-2021", "Did X", "Did Y"]


def test_classify_line_dash_bullet_and_blank():
    """Test that dash bullets and whitespace-only lines are recognised."""
    assert classify_line("  - Wrote tests ").kind is LineKind.BULLET
    assert classify_line("  - Wrote tests ").text == "Wrote tests"
    assert classify_line("   ").kind is LineKind.BLANK


def test_strip_bullet_removes_one_marker():
    """Test that only the leading marker is removed."""
    assert strip_bullet("• Python") == "Python"
    assert strip_bullet("-Go") == "Go"
    assert strip_bullet("C++ - advanced") == "C++ - advanced"


def test_non_blank_lines():
    """Test that blank lines are dropped and the rest trimmed."""
    assert non_blank_lines(" a \n\n  \nb") == ["a", "b"]


def test_split_tokens_mixed_separators():
    """Test splitting on newlines, commas and semicolons."""
    tokens = split_tokens("Python, SQL;Go\n• Rust\n\n , ")

    assert tokens == ["Python", "SQL", "Go", "Rust"]


def test_split_tokens_empty():
    """Test that an empty block has no tokens."""
    assert split_tokens("") == []


def test_pack_chips_wraps_and_preserves_order():
    """Test greedy row packing keeps the input order."""
    placements = pack_chips(
        ["a", "b", "c", "d"],
        lambda token: 50,
        start_x=0,
        start_y=10,
        max_x=150,
    )

    assert [p.text for p in placements] == ["a", "b", "c", "d"]
    assert [p.row for p in placements] == [0, 0, 1, 1]
    assert [p.x for p in placements] == [0, 76, 0, 76]
    assert [p.y for p in placements] == [10, 10, 32, 32]
    assert all(p.width == 68 for p in placements)


def test_pack_chips_oversized_chip_stays_on_first_row():
    """Test that a chip wider than the row does not leave an empty row."""
    placements = pack_chips(["a-very-long-skill"], lambda token: 500, 0, 0, 150)

    assert placements == [ChipPlacement("a-very-long-skill", 0, 0, 518, 0)]


def test_pack_chips_does_not_reorder_to_fill_gaps():
    """Test that a narrow later chip is not moved back into an earlier row."""
    widths = {"wide": 100, "wider": 120, "x": 5}
    placements = pack_chips(["wide", "wider", "x"], widths.__getitem__, 0, 0, 150)

    assert [p.text for p in placements] == ["wide", "wider", "x"]
    assert [p.row for p in placements] == [0, 1, 2]


def test_chips_bottom():
    """Test the y below the last chip row."""
    placements = pack_chips(["a", "b", "c"], lambda token: 50, 0, 10, 150)

    assert chips_bottom(placements, 10) == 54
    assert chips_bottom([], 10) == 10


def test_draw_chips_draws_one_rounded_rect_per_token(recording_canvas):
    """Test that every token becomes a chip."""
    recording_canvas.new_page()

    bottom = draw_chips(recording_canvas, ["Python", "SQL"], 30, 100, 160, "#b2dfdb", "#00695c")

    assert len(recording_canvas.shape_calls("rounded_rect")) == 2
    assert recording_canvas.texts == ["Python", "SQL"]
    assert bottom > 100


def test_draw_timeline_connects_consecutive_dots(recording_canvas):
    """Test that n entries get n dots and n - 1 connectors."""
    recording_canvas.new_page()

    bottom = draw_timeline(
        recording_canvas,
        ["one", "two", "three"],
        60,
        100,
        "#ff5722",
        TextStyle(size=11),
    )

    circles = recording_canvas.shape_calls("circle")
    connectors = recording_canvas.shape_calls("line")
    assert len(circles) == 3
    assert len(connectors) == 2
    assert [c[2] for c in circles] == [107, 137, 167]
    assert connectors[0][2] == 112
    assert connectors[0][4] == 132
    assert bottom == 190


def test_draw_timeline_single_entry_has_no_connector(recording_canvas):
    """Test that a lone entry is drawn without a connector."""
    recording_canvas.new_page()

    draw_timeline(recording_canvas, ["only"], 60, 100, "#000000", TextStyle())

    assert recording_canvas.shape_calls("line") == []


def test_draw_section_header_with_accent(recording_canvas):
    """Test that the accent bar is drawn before the title text."""
    recording_canvas.new_page()

    bottom = draw_section_header(
        recording_canvas, "SKILLS", 220, 60, TextStyle(size=16), accent_color="#3b82f6"
    )

    assert recording_canvas.calls[0][0] == "rect"
    assert recording_canvas.texts == ["SKILLS"]
    assert bottom >= 80


def test_flow_paragraph_skips_empty_text(recording_canvas):
    """Test that flowing an empty paragraph draws nothing."""
    recording_canvas.new_page()

    assert flow_paragraph(recording_canvas, "", 10, 10, TextStyle()) == 10
    assert recording_canvas.calls == []


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2025, 3, 7), "3/7/2025"),
        (date(2024, 12, 25), "12/25/2024"),
    ],
)
def test_format_footer_date(day, expected):
    """Test that the footer date has no zero padding."""
    assert format_footer_date(day) == expected


def test_footer_text():
    """Test the footer line layout."""
    assert (
        footer_text("Jane Doe", "Modern", date(2025, 3, 7))
        == "Jane Doe • Modern Resume • 3/7/2025"
    )
    assert (
        footer_text("Jane Doe", "Classic", date(2025, 3, 7), separator="-")
        == "Jane Doe - Classic Resume - 3/7/2025"
    )
