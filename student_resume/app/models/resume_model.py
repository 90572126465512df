import logging
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text

from student_resume.app.models import Base

log = logging.getLogger(__name__)


class Resume(Base):
    """A student's stored resume, one row per student.

    Attributes:
        id (int): Unique identifier for the resume.
        student_id (int): Foreign key to the owning student.
        objective (str | None): Career objective or summary.
        education (str | None): Education history, one entry per line.
        skills (str | None): Skills separated by newlines, commas or semicolons.
        languages (str | None): Spoken languages.
        experience (str | None): Work experience, company headings followed by bullets.
        projects (str | None): Projects, title headings followed by bullets.
        certifications (str | None): Certifications.
        achievements (str | None): Achievements.
        references_info (str | None): References.
        additional_info (str | None): Anything else.
        research (str | None): Research interests, shown by the academic template.
        publications (str | None): Publications, shown by the academic template.
        conferences (str | None): Conferences, shown by the academic template.
        teaching_experience (str | None): Teaching, shown by the academic template.
        created_at (datetime): Timestamp when the resume was created.
        updated_at (datetime): Timestamp when the resume was last updated.

    """

    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(
        Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True
    )
    objective = Column(Text, nullable=True)
    education = Column(Text, nullable=True)
    skills = Column(Text, nullable=True)
    languages = Column(Text, nullable=True)
    experience = Column(Text, nullable=True)
    projects = Column(Text, nullable=True)
    certifications = Column(Text, nullable=True)
    achievements = Column(Text, nullable=True)
    references_info = Column(Text, nullable=True)
    additional_info = Column(Text, nullable=True)
    research = Column(Text, nullable=True)
    publications = Column(Text, nullable=True)
    conferences = Column(Text, nullable=True)
    teaching_experience = Column(Text, nullable=True)
    created_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def to_dict(self) -> dict:
        """Return the row as a plain dict with ISO formatted timestamps."""
        row = {column.name: getattr(self, column.name) for column in self.__table__.columns}
        for key in ("created_at", "updated_at"):
            if isinstance(row[key], datetime):
                row[key] = row[key].isoformat()
        return row
