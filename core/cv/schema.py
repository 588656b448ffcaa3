"""
Pydantic models for structured CV data.

Field names are snake_case in Python and camelCase on the wire
(``personalInfo``, ``jobTitle``, ``isCurrent`` ...), matching the JSON the
CV builder stores. Both spellings are accepted on input.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CvModel(BaseModel):
    """Base for CV models: camelCase aliases, unknown keys ignored."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
    )


class PersonalInfo(CvModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""


class ExperienceEntry(CvModel):
    """A single work experience entry."""
    id: Optional[str] = None
    job_title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    bullets: List[str] = Field(default_factory=list)


class EducationEntry(CvModel):
    degree: str = ""
    school: str = ""
    year: str = ""
    details: str = ""


class ProjectEntry(CvModel):
    name: str = ""
    description: str = ""
    url: str = ""


class PublicationEntry(CvModel):
    title: str = ""
    authors: str = ""
    venue_or_journal: str = ""
    year: str = ""
    url: str = ""
    notes: str = ""


class CvData(CvModel):
    """Structured CV document.

    Every field is optional; an empty ``CvData()`` is a valid (empty) CV.
    The optional sections stay ``None`` when the user never touched them.
    """
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    projects: Optional[List[ProjectEntry]] = None
    languages: Optional[List[str]] = None
    certifications: Optional[List[str]] = None
    publications: Optional[List[PublicationEntry]] = None

    def to_wire(self) -> dict:
        """Dump using the camelCase keys the frontend expects."""
        return self.model_dump(by_alias=True)
