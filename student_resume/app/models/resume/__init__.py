"""
This module serves as the initialization file for the resume value objects.

It exposes the request-scoped records consumed by the PDF renderer: the
free-text resume sections and the identity details of the student.

Notes:
1. Both records coerce missing or non-string input instead of rejecting it.
2. No disk, network, or database access is performed in this file.
"""

from .resume_data import ResumeData  # noqa
from .student_info import StudentInfo  # noqa
