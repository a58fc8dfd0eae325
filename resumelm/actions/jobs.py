"""
Job listing actions.

All actions run for an authenticated user and only touch that user's rows.
Storage errors are logged, rolled back and re-raised as StorageError.
"""

import json
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import BaseModel, ValidationError
from sqlalchemy import String, and_, cast, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from resumelm.cache import revalidate_path
from resumelm.db import Job, Resume, User
from resumelm.errors import InvalidInputError, NotFoundError, StorageError
from resumelm.models import EmploymentType, SimplifiedJob, WorkLocation

logger = logging.getLogger(__name__)

UNTITLED_JOB = "Untitled Job"


class JobListingFilters(BaseModel):
    work_location: WorkLocation | None = None
    employment_type: EmploymentType | None = None
    keywords: list[str] | None = None


@dataclass
class JobListingPage:
    jobs: list[Job]
    total_count: int
    current_page: int
    total_pages: int


def _keywords_filter(db: Session, keywords: list[str]):
    """Match jobs whose keyword list contains every given keyword."""
    if db.get_bind().dialect.name == "postgresql":
        return cast(Job.keywords, JSONB).contains(keywords)
    # Other dialects store the list as JSON text; look for each quoted token
    text = cast(Job.keywords, String)
    return and_(*[func.instr(text, json.dumps(keyword)) > 0 for keyword in keywords])


def create_job(db: Session, user: User, job_listing: SimplifiedJob | Mapping) -> Job:
    """Store a job listing for `user`. An empty title becomes "Untitled Job"."""
    if not isinstance(job_listing, SimplifiedJob):
        if not isinstance(job_listing, Mapping):
            raise InvalidInputError("Job listing data is missing or invalid.")
        try:
            job_listing = SimplifiedJob.model_validate(dict(job_listing))
        except ValidationError as e:
            raise InvalidInputError(f"Job listing data is invalid: {e.errors()[0]['msg']}") from e

    job_data = {
        "user_id": user.id,
        "position_title": job_listing.position_title.strip() or UNTITLED_JOB,
        "company_name": job_listing.company_name,
        "description": job_listing.description,
        "job_url": job_listing.job_url,
        "location": job_listing.location,
        "salary_range": job_listing.salary_range,
        "keywords": list(job_listing.keywords),
        "work_location": job_listing.work_location,
        "employment_type": job_listing.employment_type,
        "is_active": True,
    }
    logger.debug(f"[create_job] Job data fields: {[(k, v, type(v).__name__) for k, v in job_data.items()]}")

    try:
        job = Job(**job_data)
        db.add(job)
        db.commit()
        db.refresh(job)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[create_job] Error creating job: {e}")
        logger.error(f"[create_job] Job data: {job_data}")
        raise StorageError(f"Failed to create job: {e}") from e

    revalidate_path("/", "layout")
    return job


def get_job(db: Session, user: User, job_id: str) -> Job:
    """Fetch one of the user's jobs, active or not."""
    job = db.query(Job).filter(Job.id == job_id, Job.user_id == user.id).first()
    if not job:
        raise NotFoundError("Job not found")
    return job


def delete_job(db: Session, user: User, job_id: str) -> None:
    """Hard-delete a job and revalidate every resume page that referenced it."""
    try:
        affected = (
            db.query(Resume.id)
            .filter(Resume.job_id == job_id, Resume.user_id == user.id)
            .all()
        )
        affected_ids = [row.id for row in affected]

        if affected_ids:
            db.query(Resume).filter(Resume.id.in_(affected_ids)).update(
                {Resume.job_id: None}, synchronize_session=False
            )
        deleted = db.query(Job).filter(Job.id == job_id, Job.user_id == user.id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"[delete_job] Delete error for {job_id}: {e}")
        raise StorageError("Failed to delete job") from e

    if not deleted:
        logger.warning(f"[delete_job] No job {job_id} for user {user.id}")

    for resume_id in affected_ids:
        revalidate_path(f"/resumes/{resume_id}")

    revalidate_path("/", "layout")
    revalidate_path("/resumes", "layout")


def deactivate_job(db: Session, user: User, job_id: str) -> None:
    """Soft-delete a tailored job: mark it inactive, keep the row."""
    try:
        updated = (
            db.query(Job)
            .filter(Job.id == job_id, Job.user_id == user.id)
            .update({Job.is_active: False}, synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"[deactivate_job] Update error for {job_id}: {e}")
        raise StorageError("Failed to delete job") from e

    if not updated:
        logger.warning(f"[deactivate_job] No job {job_id} for user {user.id}")

    revalidate_path("/", "layout")


def get_job_listings(
    db: Session,
    user: User,
    page: int = 1,
    page_size: int = 10,
    filters: JobListingFilters | None = None,
) -> JobListingPage:
    """Page through the user's active jobs, newest first."""
    if page < 1 or page_size < 1:
        raise InvalidInputError("page and page_size must be positive")

    offset = (page - 1) * page_size

    try:
        query = db.query(Job).filter(Job.user_id == user.id, Job.is_active.is_(True))

        if filters:
            if filters.work_location:
                query = query.filter(Job.work_location == filters.work_location)
            if filters.employment_type:
                query = query.filter(Job.employment_type == filters.employment_type)
            if filters.keywords:
                query = query.filter(_keywords_filter(db, filters.keywords))

        total_count = query.count()
        jobs = query.order_by(Job.created_at.desc(), Job.id).offset(offset).limit(page_size).all()
    except SQLAlchemyError as e:
        logger.error(f"[get_job_listings] Error fetching jobs: {e}")
        raise StorageError("Failed to fetch job listings") from e

    return JobListingPage(
        jobs=jobs,
        total_count=total_count,
        current_page=page,
        total_pages=math.ceil(total_count / page_size),
    )


def create_empty_job(db: Session, user: User) -> Job:
    """Insert a placeholder job for the user to fill in."""
    try:
        job = Job(
            user_id=user.id,
            company_name="New Company",
            position_title="New Position",
            job_url=None,
            description=None,
            location=None,
            salary_range=None,
            keywords=[],
            work_location=None,
            employment_type=None,
            is_active=True,
        )
        db.add(job)
        db.commit()
        db.refresh(job)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"[create_empty_job] Error creating job: {e}")
        raise StorageError("Failed to create job") from e

    revalidate_path("/", "layout")
    return job
