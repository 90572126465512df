"""This module serves as the entry point for the student resume service.

It groups the PDF rendering engine, the read-only persistence models and the
HTTP surface that serves shared resumes.

Notes:
    1. This module does not contain any functions or classes of its own.
    2. The rendering engine lives in app.pdf, configuration in app.core and
       the FastAPI application in app.main.
    3. No disk, network, or database access occurs in this module directly.

"""
