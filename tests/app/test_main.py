import logging
from unittest.mock import patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from student_resume.app.main import app as module_app
from student_resume.app.main import create_app

log = logging.getLogger(__name__)


def test_create_app():
    """Test that create_app returns a configured FastAPI instance."""
    app = create_app()

    assert isinstance(app, FastAPI)
    assert app.title == "Student Resume API"
    paths = {route.path for route in app.routes}
    assert "/health" in paths
    assert "/api/student/resume/public/{share_id}" in paths
    assert "/api/templates" in paths


def test_module_level_app():
    """Test that the module exposes an application for ASGI servers."""
    assert isinstance(module_app, FastAPI)


def test_health_check(client: TestClient):
    """Test the health check endpoint."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_cors_headers(client: TestClient):
    """Test that cross-origin requests are allowed."""
    response = client.get("/health", headers={"Origin": "http://portal.example.edu"})

    assert response.headers["access-control-allow-origin"] in ("*", "http://portal.example.edu")


def test_create_app_registers_configured_font():
    """Test that the configured unicode font is registered at startup."""
    with (
        patch("student_resume.app.main.get_settings") as mock_get_settings,
        patch("student_resume.app.main.configure_unicode_font") as mock_configure,
    ):
        mock_get_settings.return_value.pdf_unicode_font_path = "/fonts/NotoSans.ttf"
        create_app()

    mock_configure.assert_called_once_with("/fonts/NotoSans.ttf")
