"""Unit tests for the read-only ORM models."""
from datetime import datetime

from student_resume.app.models import Base, Resume, Student


def test_tables_are_registered():
    """Test that both tables are part of the metadata."""
    assert {"students", "resumes"} <= set(Base.metadata.tables)


def test_resume_columns_cover_every_section():
    """Test that the resume table stores each text section."""
    columns = set(Resume.__table__.columns.keys())

    for name in [
        "objective",
        "education",
        "skills",
        "languages",
        "experience",
        "projects",
        "certifications",
        "achievements",
        "references_info",
        "additional_info",
        "research",
        "publications",
        "conferences",
        "teaching_experience",
    ]:
        assert name in columns


def test_resume_to_dict_formats_timestamps():
    """Test that to_dict returns plain values."""
    created = datetime(2025, 3, 7, 10, 30)
    resume = Resume(id=1, student_id=2, skills="Python", created_at=created, updated_at=created)

    row = resume.to_dict()

    assert row["id"] == 1
    assert row["student_id"] == 2
    assert row["skills"] == "Python"
    assert row["objective"] is None
    assert row["created_at"] == "2025-03-07T10:30:00"


def test_student_model():
    """Test the student columns."""
    student = Student(id=3, name="Jane Doe", email="jane@example.edu", branch="CSE")

    assert Student.__tablename__ == "students"
    assert student.name == "Jane Doe"
    assert student.branch == "CSE"
