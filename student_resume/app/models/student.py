import logging

from sqlalchemy import Column, Integer, String

from student_resume.app.models import Base

log = logging.getLogger(__name__)


class Student(Base):
    """A student account in the portal.

    Only the columns the resume service reads are mapped.

    Attributes:
        id (int): Unique identifier for the student.
        name (str): The student's full name.
        email (str): The student's email address.
        branch (str | None): The student's branch of study.

    """

    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    branch = Column(String(255), nullable=True)
