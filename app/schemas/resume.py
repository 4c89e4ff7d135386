"""Schemas for the resume document (data/resume.json). Immutable once loaded."""

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Contact(_Frozen):
    email: str
    phone: str
    linkedin: str
    github: str
    portfolio: str
    address: str
    date_of_birth: str = Field(..., alias="dateOfBirth")


class Education(_Frozen):
    degree: str
    institution: str


class TechnicalSkills(_Frozen):
    """Skill groups, each an ordered list of technologies."""

    backend: tuple[str, ...] = ()
    frontend: tuple[str, ...] = ()
    databases: tuple[str, ...] = ()
    cloud_and_devops: tuple[str, ...] = Field((), alias="cloudAndDevOps")
    real_time: tuple[str, ...] = Field((), alias="realTime")
    security: tuple[str, ...] = ()
    ci_cd_monitoring: tuple[str, ...] = Field((), alias="ciCdMonitoring")


class WorkExperience(_Frozen):
    role: str
    company: str
    duration: str


class Project(_Frozen):
    name: str
    description: str


class ResumeDocument(_Frozen):
    """Full resume. Sequences are tuples so the loaded document cannot be mutated."""

    contact: Contact
    objective: str
    education: Education
    certifications: tuple[str, ...] = ()
    technical_skills: TechnicalSkills = Field(..., alias="technicalSkills")
    work_experience: tuple[WorkExperience, ...] = Field((), alias="workExperience")
    projects: tuple[Project, ...] = ()
