"""
Structured job and resume schemas.

These are the shapes exchanged with the LLM (as structured-output schemas)
and with API callers. Unknown string fields are empty strings, never None.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

WorkLocation = Literal["remote", "in_person", "hybrid"]
EmploymentType = Literal["full_time", "part_time", "co_op", "internship", "contract"]


class SimplifiedJob(BaseModel):
    """A job listing as extracted from free text."""

    model_config = ConfigDict(extra="ignore")

    company_name: str = Field(default="", description="Hiring company, empty if unknown")
    position_title: str = Field(default="", description="Job title, empty if unknown")
    job_url: str = Field(default="", description="Posting URL, empty if unknown")
    description: str = Field(
        default="",
        description="3-5 markdown bullet points ('• ') of key responsibilities, then a clean paragraph",
    )
    location: str = Field(default="", description="City/region, empty if unknown")
    salary_range: str = Field(default="", description="Salary range as written, empty if unknown")
    keywords: list[str] = Field(default_factory=list, description="Skills, tools and requirements, deduplicated")
    work_location: WorkLocation | None = None
    employment_type: EmploymentType | None = None

    @field_validator(
        "company_name", "position_title", "job_url", "description", "location", "salary_range", mode="before"
    )
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("work_location", "employment_type", mode="before")
    @classmethod
    def _blank_enum_to_none(cls, value):
        # Models return "" for unknown enum fields
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("keywords", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return [] if value is None else value


class WorkExperience(BaseModel):
    company: str = ""
    position: str = ""
    location: str = ""
    date: str = ""
    description: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)


class Education(BaseModel):
    school: str = ""
    degree: str = ""
    field: str = ""
    location: str = ""
    date: str = ""
    gpa: str = ""
    achievements: list[str] = Field(default_factory=list)


class SkillGroup(BaseModel):
    category: str = ""
    items: list[str] = Field(default_factory=list)


class Project(BaseModel):
    name: str = ""
    description: list[str] = Field(default_factory=list)
    date: str = ""
    technologies: list[str] = Field(default_factory=list)
    url: str = ""
    github_url: str = ""


class SimplifiedResume(BaseModel):
    """Resume content as sent to and returned by the tailoring model."""

    model_config = ConfigDict(extra="ignore")

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""
    location: str = ""
    website: str = ""
    linkedin_url: str = ""
    github_url: str = ""
    work_experience: list[WorkExperience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[SkillGroup] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    target_role: str = Field(default="", description="Job title the resume targets. Always set it.")

    @field_validator("target_role", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value


# Structured-output envelopes
class TailoredResumeOutput(BaseModel):
    content: SimplifiedResume


class FormattedJobOutput(BaseModel):
    content: SimplifiedJob


class RephrasedJobOutput(BaseModel):
    content: str
