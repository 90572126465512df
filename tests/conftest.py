from datetime import date
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from student_resume.app.core.config import get_settings
from student_resume.app.main import create_app
from student_resume.app.models.resume import ResumeData, StudentInfo
from student_resume.app.pdf.canvas import PageCanvas, clear_unicode_font
from student_resume.app.pdf.templates import RenderContext

RENDER_DATE = date(2025, 3, 7)


class RecordingCanvas(PageCanvas):
    """A real canvas that also records every drawing call in order."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = []

    @property
    def texts(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "text"]

    def text_calls(self) -> list[tuple]:
        return [call for call in self.calls if call[0] == "text"]

    def shape_calls(self, kind: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == kind]

    def draw_text(self, content, x, y, style):
        self.calls.append(("text", content, x, y, style))
        return super().draw_text(content, x, y, style)

    def draw_rect(self, x, y, width, height, fill_color=None, stroke_color=None, line_width=1, opacity=1.0):
        self.calls.append(("rect", x, y, width, height, fill_color, stroke_color))
        super().draw_rect(x, y, width, height, fill_color, stroke_color, line_width, opacity)

    def draw_rounded_rect(self, x, y, width, height, radius, fill_color, opacity=1.0):
        self.calls.append(("rounded_rect", x, y, width, height, fill_color))
        super().draw_rounded_rect(x, y, width, height, radius, fill_color, opacity)

    def draw_circle(self, cx, cy, radius, fill_color, opacity=1.0):
        self.calls.append(("circle", cx, cy, radius, fill_color))
        super().draw_circle(cx, cy, radius, fill_color, opacity)

    def draw_polygon(self, points, fill_color, opacity=1.0):
        self.calls.append(("polygon", tuple(points), fill_color))
        super().draw_polygon(points, fill_color, opacity)

    def draw_line(self, x1, y1, x2, y2, stroke_color, line_width=1):
        self.calls.append(("line", x1, y1, x2, y2, stroke_color))
        super().draw_line(x1, y1, x2, y2, stroke_color, line_width)


@pytest.fixture
def recording_canvas() -> RecordingCanvas:
    """Fixture to provide a fresh recording canvas."""
    return RecordingCanvas()


@pytest.fixture
def recorded_canvases():
    """Fixture that makes the renderer draw on recording canvases.

    Yields the list of canvases created, in creation order.
    """
    canvases = []

    def _make_canvas(*args, **kwargs):
        canvas = RecordingCanvas(*args, **kwargs)
        canvases.append(canvas)
        return canvas

    with patch("student_resume.app.pdf.registry.PageCanvas", side_effect=_make_canvas):
        yield canvases


@pytest.fixture
def full_resume() -> ResumeData:
    """Fixture to provide a resume with every section filled in."""
    return ResumeData(
        objective="Final year student looking for a backend engineering role.",
        education="State University\nB.Tech Computer Science, 2021-2025\nCity College\nHigher Secondary, 2019-2021",
        skills="Python, SQL; Docker\nFastAPI",
        languages="English\nHindi",
        experience="Acme Corp\n2023-2024\n• Built the billing API\n• Cut report times by half\n\nGlobex\n2022\n- Wrote data pipelines",
        projects="Campus Portal\n• Task tracking for faculty\n\nResume Builder\n- PDF templates",
        certifications="AWS Cloud Practitioner",
        achievements="Winner, inter-college hackathon",
        references_info="Available on request",
        additional_info="Open to relocation",
        research="Graph neural networks",
        publications="A survey of GNN pooling, 2024",
        conferences="PyCon India 2024",
        teaching_experience="Teaching assistant, Data Structures",
    )


@pytest.fixture
def student() -> StudentInfo:
    """Fixture to provide the student printed on the resume."""
    return StudentInfo(name="Jane Doe", email="jane@example.edu", branch="Computer Science")


@pytest.fixture
def render_context(full_resume, student) -> RenderContext:
    """Fixture to provide a render context with a fixed render date."""
    return RenderContext(resume=full_resume, student=student, layout="single-column", today=RENDER_DATE)


@pytest.fixture
def empty_context(student) -> RenderContext:
    """Fixture to provide a render context whose resume has no content."""
    return RenderContext(resume=ResumeData(), student=student, layout="single-column", today=RENDER_DATE)


@pytest.fixture(autouse=True)
def mock_database_imports():
    """Auto-used fixture to prevent actual database connections."""
    with (
        patch("student_resume.app.database.database.create_engine"),
        patch("student_resume.app.database.database.sessionmaker"),
    ):
        yield


@pytest.fixture
def app() -> FastAPI:
    """Fixture to create a new app for each test."""
    # To ensure settings are fresh for each test, we clear the cache.
    get_settings.cache_clear()
    _app = create_app()
    yield _app
    # Clear dependency overrides after test
    _app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Fixture to create a test client for each test."""
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def reset_unicode_font():
    """Auto-used fixture so a font registered by one test does not leak into others."""
    yield
    clear_unicode_font()
