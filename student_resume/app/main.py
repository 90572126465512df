import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_resume.app.api.routes.resume_share import router as resume_share_router
from student_resume.app.core.config import get_settings
from student_resume.app.pdf.registry import configure_unicode_font

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        None

    Returns:
        FastAPI: The configured FastAPI application instance.

    Notes:
        1. Initialize the FastAPI application with the title "Student Resume API".
        2. Register the configured unicode font for PDF text.
        3. Add CORS middleware to allow requests from any origin.
        4. Include the shared resume router.
        5. Define a health check endpoint at "/health" that returns a JSON object with status "ok".

    """
    _msg = "Creating FastAPI application"
    log.debug(_msg)

    app = FastAPI(title="Student Resume API")
    configure_unicode_font(get_settings().pdf_unicode_font_path)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(resume_share_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    _msg = "FastAPI application created successfully"
    log.debug(_msg)
    return app


app = create_app()
