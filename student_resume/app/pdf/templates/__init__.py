"""Resume layout templates.

Each template subclasses ResumeTemplate and draws one visual identity onto a
single A4 page. The registry maps template names onto these classes.
"""

from .academic import AcademicTemplate
from .base import RenderContext, ResumeTemplate
from .classic import ClassicTemplate
from .creative import CreativeTemplate
from .elegant import ElegantTemplate
from .executive import ExecutiveTemplate
from .minimalist import MinimalistTemplate
from .modern import ModernTemplate
from .professional import ProfessionalTemplate
from .technical import TechnicalTemplate

__all__ = [
    "AcademicTemplate",
    "ClassicTemplate",
    "CreativeTemplate",
    "ElegantTemplate",
    "ExecutiveTemplate",
    "MinimalistTemplate",
    "ModernTemplate",
    "ProfessionalTemplate",
    "RenderContext",
    "ResumeTemplate",
    "TechnicalTemplate",
]
