"""Job listing endpoints."""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from resumelm.actions import jobs as job_actions
from resumelm.api.schemas import JobListingResponse, JobResponse
from resumelm.auth import get_current_user
from resumelm.cache import page_cache
from resumelm.db import User, get_db
from resumelm.models import EmploymentType, SimplifiedJob, WorkLocation

router = APIRouter()


@router.post("", response_model=JobResponse)
def create_job(
    job: SimplifiedJob,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a job from a structured listing."""
    return JobResponse.model_validate(job_actions.create_job(db, user, job))


@router.post("/empty", response_model=JobResponse)
def create_empty_job(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a placeholder job."""
    return JobResponse.model_validate(job_actions.create_empty_job(db, user))


@router.get("", response_model=JobListingResponse)
def list_jobs(
    request: Request,
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    work_location: WorkLocation | None = None,
    employment_type: EmploymentType | None = None,
    keywords: list[str] | None = Query(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List active jobs, newest first."""
    # Listing data lives under the root layout
    cache_path = f"/jobs?user_id={user.id}&{request.url.query}"
    cached = page_cache.get(cache_path, "layout")
    if cached is not None:
        return cached

    result = job_actions.get_job_listings(
        db,
        user,
        page=page,
        page_size=page_size,
        filters=job_actions.JobListingFilters(
            work_location=work_location,
            employment_type=employment_type,
            keywords=keywords,
        ),
    )
    response = JobListingResponse(
        jobs=[JobResponse.model_validate(j) for j in result.jobs],
        total_count=result.total_count,
        current_page=result.current_page,
        total_pages=result.total_pages,
    )
    page_cache.set(cache_path, response, "layout")
    return response


@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get a job by id, including inactive ones."""
    return JobResponse.model_validate(job_actions.get_job(db, user, job_id))


@router.delete("/{job_id}")
def delete_job(
    job_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a job permanently."""
    job_actions.delete_job(db, user, job_id)
    return {"message": "Job deleted"}


@router.post("/{job_id}/deactivate")
def deactivate_job(
    job_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Mark a tailored job inactive without removing it."""
    job_actions.deactivate_job(db, user, job_id)
    return {"message": "Job deactivated"}
