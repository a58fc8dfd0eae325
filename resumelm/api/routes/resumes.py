"""Resume endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from resumelm.api.schemas import ResumeListResponse, ResumeResponse
from resumelm.auth import get_current_user
from resumelm.cache import page_cache
from resumelm.db import Resume, User, get_db

router = APIRouter()


@router.get("", response_model=ResumeListResponse)
def list_resumes(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List the caller's resumes, most recently updated first."""
    resumes = (
        db.query(Resume)
        .filter(Resume.user_id == user.id)
        .order_by(Resume.updated_at.desc())
        .all()
    )
    return ResumeListResponse(resumes=[ResumeResponse.model_validate(r) for r in resumes])


@router.get("/{resume_id}", response_model=ResumeResponse)
def get_resume(
    resume_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get a resume. Responses are cached until the page is revalidated."""
    path = f"/resumes/{resume_id}"
    cached = page_cache.get(path)
    if cached is not None and cached.user_id == user.id:
        return cached

    resume = db.query(Resume).filter(Resume.id == resume_id, Resume.user_id == user.id).first()
    if not resume:
        raise HTTPException(status_code=404, detail="Resume not found")

    response = ResumeResponse.model_validate(resume)
    page_cache.set(path, response)
    return response
