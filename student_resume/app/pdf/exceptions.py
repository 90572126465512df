class ResumeRenderError(Exception):
    """Base class for errors raised while rendering a resume PDF."""


class CanvasClosedError(ResumeRenderError):
    """Raised when drawing on a canvas that has already been finalized."""


class RenderSinkError(ResumeRenderError):
    """Raised when the output sink cannot accept the finished document."""
