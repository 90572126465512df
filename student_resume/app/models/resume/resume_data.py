import logging

from pydantic import BaseModel, ConfigDict, field_validator

log = logging.getLogger(__name__)

RESUME_SECTION_FIELDS = (
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
)

ACADEMIC_SECTION_FIELDS = (
    "research",
    "publications",
    "conferences",
    "teaching_experience",
)

_CAMEL_ALIASES = {
    "referencesInfo": "references_info",
    "additionalInfo": "additional_info",
    "teachingExperience": "teaching_experience",
}


def _coerce_text(v) -> str:
    """Return v when it is a string, otherwise an empty string."""
    if isinstance(v, str):
        return v
    return ""


class ResumeData(BaseModel):
    """Holds the free-text blocks of a student's resume.

    Each block is a sequence of lines: entry headings, bulleted details
    starting with "•" or "-", and blank separators.

    Attributes:
        objective (str): Career objective or professional summary.
        education (str): Education entries.
        skills (str): Skills, one per line or separated by commas or semicolons.
        languages (str): Spoken languages.
        experience (str): Work experience entries with responsibility bullets.
        projects (str): Project entries with detail bullets.
        certifications (str): Certifications.
        achievements (str): Achievements and awards.
        references_info (str): References.
        additional_info (str): Anything else.
        research (str): Research interests, used by the academic template.
        publications (str): Publications, used by the academic template.
        conferences (str): Conferences, used by the academic template.
        teaching_experience (str): Teaching experience, used by the academic template.

    """

    model_config = ConfigDict(frozen=True)

    objective: str = ""
    education: str = ""
    skills: str = ""
    languages: str = ""
    experience: str = ""
    projects: str = ""
    certifications: str = ""
    achievements: str = ""
    references_info: str = ""
    additional_info: str = ""
    research: str = ""
    publications: str = ""
    conferences: str = ""
    teaching_experience: str = ""

    @field_validator(
        *RESUME_SECTION_FIELDS,
        *ACADEMIC_SECTION_FIELDS,
        mode="before",
    )
    @classmethod
    def validate_section(cls, v):
        """Validate a resume section field.

        Args:
            v: The raw section value.

        Returns:
            str: The value if it is a string, otherwise an empty string.

        Notes:
            1. Missing, null or non-string values are coerced to "" rather than rejected.

        """
        return _coerce_text(v)

    @classmethod
    def from_record(cls, record) -> "ResumeData":
        """Build resume data from a mapping, an ORM row or None.

        Args:
            record: A dict, an object with section attributes, or None.

        Returns:
            ResumeData: The coerced resume data.

        Notes:
            1. None and unsupported objects produce an empty resume.
            2. Dict keys may use either snake_case or the camelCase aliases
               (referencesInfo, additionalInfo, teachingExperience).
            3. Attribute-style records are read field by field.

        """
        if record is None:
            return cls()
        if isinstance(record, ResumeData):
            return record
        if isinstance(record, dict):
            values = dict(record)
            for camel, snake in _CAMEL_ALIASES.items():
                if camel in values and snake not in values:
                    values[snake] = values.pop(camel)
            known = {
                k: values.get(k)
                for k in RESUME_SECTION_FIELDS + ACADEMIC_SECTION_FIELDS
            }
            return cls(**known)
        values = {
            k: getattr(record, k, None)
            for k in RESUME_SECTION_FIELDS + ACADEMIC_SECTION_FIELDS
        }
        return cls(**values)

    def is_empty(self) -> bool:
        """Return True when every section is blank."""
        return not any(
            getattr(self, k).strip()
            for k in RESUME_SECTION_FIELDS + ACADEMIC_SECTION_FIELDS
        )
