"""AI formatting and tailoring endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from resumelm.actions import ai as ai_actions
from resumelm.api.limiter import ai_route_limit
from resumelm.api.schemas import (
    FormatJobRequest,
    RephraseJobRequest,
    RephraseJobResponse,
    TailorResumeRequest,
)
from resumelm.auth import get_current_user
from resumelm.db import User, get_db
from resumelm.models import SimplifiedJob, SimplifiedResume
from resumelm.subscription import is_pro

router = APIRouter()


@router.post("/tailor-resume", response_model=SimplifiedResume)
@ai_route_limit
def tailor_resume(
    request: Request,
    data: TailorResumeRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Tailor a resume to a job description."""
    try:
        return ai_actions.tailor_resume_to_job(
            data.resume,
            data.job,
            user_id=user.id,
            is_pro=is_pro(db, user.id),
            config=data.config,
        )
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.post("/format-job", response_model=SimplifiedJob)
@ai_route_limit
def format_job(
    request: Request,
    data: FormatJobRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Extract a structured job from raw posting text."""
    try:
        return ai_actions.format_job_listing(
            data.job_listing,
            user_id=user.id,
            is_pro=is_pro(db, user.id),
            config=data.config,
        )
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.post("/rephrase-job", response_model=RephraseJobResponse)
@ai_route_limit
def rephrase_job(
    request: Request,
    data: RephraseJobRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Rewrite a rough job description with every field filled in."""
    try:
        content = ai_actions.rephrase_and_complete_job_description(
            data.description,
            user_id=user.id,
            is_pro=is_pro(db, user.id),
            config=data.config,
        )
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return RephraseJobResponse(content=content)
