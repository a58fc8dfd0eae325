"""API request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from resumelm.agents.llm import AIConfig
from resumelm.models import EmploymentType, SimplifiedJob, SimplifiedResume, WorkLocation


# Job schemas
class JobResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    company_name: str | None
    position_title: str | None
    job_url: str | None
    description: str | None
    location: str | None
    salary_range: str | None
    keywords: list[str]
    work_location: WorkLocation | None
    employment_type: EmploymentType | None
    is_active: bool
    created_at: datetime


class JobListingResponse(BaseModel):
    jobs: list[JobResponse]
    total_count: int
    current_page: int
    total_pages: int


# Resume schemas
class ResumeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    job_id: str | None
    name: str
    target_role: str
    content: dict
    is_base_resume: bool
    created_at: datetime
    updated_at: datetime


class ResumeListResponse(BaseModel):
    resumes: list[ResumeResponse]


# AI schemas
class TailorResumeRequest(BaseModel):
    resume: SimplifiedResume
    job: SimplifiedJob
    config: AIConfig | None = None


class FormatJobRequest(BaseModel):
    job_listing: str = Field(..., min_length=1, description="Raw job posting text")
    config: AIConfig | None = None


class RephraseJobRequest(BaseModel):
    description: str = Field(..., min_length=1, description="Rough job description text")
    config: AIConfig | None = None


class RephraseJobResponse(BaseModel):
    content: str


# Subscription schemas
class SubscriptionResponse(BaseModel):
    plan: str
    status: str | None
    current_period_end: datetime | None
    trial_end: datetime | None
    stripe_customer_id: str | None
    stripe_subscription_id: str | None
