"""PDF resume rendering engine.

The engine draws a student's resume onto a single page using one of nine
templates and writes the finished document to a caller-supplied sink.

Functions:
    render: Render a resume with the named template and layout.
    build_resume_filename: Build the download file name for a resume.

"""

from .registry import RenderResult, build_resume_filename, render, render_to_bytes

__all__ = ["RenderResult", "build_resume_filename", "render", "render_to_bytes"]
