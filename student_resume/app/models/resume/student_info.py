import logging

from pydantic import BaseModel, ConfigDict, field_validator

log = logging.getLogger(__name__)

DEFAULT_STUDENT_NAME = "Student"


class StudentInfo(BaseModel):
    """Holds the identity details printed on a resume.

    Attributes:
        name (str): The student's full name. Defaults to a placeholder.
        email (str): The student's email address, or an empty string.
        branch (str): The student's branch of study, or an empty string.

    """

    model_config = ConfigDict(frozen=True)

    name: str = DEFAULT_STUDENT_NAME
    email: str = ""
    branch: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        """Validate the name field.

        Args:
            v: The name value to validate.

        Returns:
            str: The stripped name, or the placeholder name.

        Notes:
            1. Non-string values are replaced with the placeholder.
            2. Names that are empty after stripping are replaced with the placeholder.

        """
        if not isinstance(v, str) or not v.strip():
            return DEFAULT_STUDENT_NAME
        return v.strip()

    @field_validator("email", "branch", mode="before")
    @classmethod
    def validate_optional_text(cls, v):
        """Coerce a non-string email or branch to an empty string."""
        if not isinstance(v, str):
            return ""
        return v.strip()

    @classmethod
    def from_record(cls, record) -> "StudentInfo":
        """Build student info from a mapping, an ORM row or None.

        Args:
            record: A dict, an object with name/email/branch attributes, or None.

        Returns:
            StudentInfo: The coerced student info.

        """
        if record is None:
            return cls()
        if isinstance(record, StudentInfo):
            return record
        if isinstance(record, dict):
            return cls(
                name=record.get("name"),
                email=record.get("email"),
                branch=record.get("branch"),
            )
        return cls(
            name=getattr(record, "name", None),
            email=getattr(record, "email", None),
            branch=getattr(record, "branch", None),
        )
