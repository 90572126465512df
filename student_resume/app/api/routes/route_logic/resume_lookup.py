import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from student_resume.app.models.resume_model import Resume as DatabaseResume
from student_resume.app.models.student import Student

log = logging.getLogger(__name__)


def get_resume_by_student_id(db: Session, student_id: int) -> DatabaseResume:
    """Retrieve the resume belonging to a student.

    Args:
        db (Session): The SQLAlchemy database session used to query the database.
        student_id (int): The unique identifier of the student.

    Returns:
        DatabaseResume: The student's resume.

    Raises:
        HTTPException: 404 with detail "Resume not found" if the student has no resume.

    Notes:
        1. Query the resumes table for the row owned by student_id.
        2. Raise a 404 when no row is found.
        3. This function performs a single database query.

    """
    resume = db.query(DatabaseResume).filter(DatabaseResume.student_id == student_id).first()

    if not resume:
        _msg = f"Resume not found for student ID: {student_id}"
        log.error(_msg)
        raise HTTPException(status_code=404, detail="Resume not found")

    return resume


def get_student_by_id(db: Session, student_id: int) -> Student:
    """Retrieve a student by id.

    Args:
        db (Session): The SQLAlchemy database session used to query the database.
        student_id (int): The unique identifier of the student.

    Returns:
        Student: The student.

    Raises:
        HTTPException: 404 with detail "Student information not found" if no student matches.

    """
    student = db.query(Student).filter(Student.id == student_id).first()

    if not student:
        _msg = f"Student information not found for ID: {student_id}"
        log.error(_msg)
        raise HTTPException(status_code=404, detail="Student information not found")

    return student
