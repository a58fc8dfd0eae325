"""
AI actions: job-listing extraction, job-description completion and resume
tailoring.

Each action resolves the model for the caller's tier, checks the rate
limiter, validates its input and runs a single structured-output
completion. Nothing is retried; upstream failures are logged and wrapped
in AIServiceError.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from resumelm.actions.jobs import UNTITLED_JOB
from resumelm.agents.job_formatter import (
    JOB_FORMATTER_PROMPT,
    build_format_prompt,
    dedupe_keywords,
    scrub_placeholders,
)
from resumelm.agents.job_rephraser import JOB_REPHRASER_PROMPT
from resumelm.agents.llm import AIConfig, generate_object, get_llm
from resumelm.agents.resume_tailor import RESUME_TAILOR_PROMPT, build_tailor_prompt
from resumelm.errors import AIServiceError, InvalidInputError
from resumelm.models import (
    FormattedJobOutput,
    RephrasedJobOutput,
    SimplifiedJob,
    SimplifiedResume,
    TailoredResumeOutput,
)
from resumelm.rate_limiter import check_rate_limit

logger = logging.getLogger(__name__)


def _wrap_upstream(action: str, error: Exception) -> AIServiceError:
    message = str(error)
    if message:
        return AIServiceError(f"Failed to {action}: {message}")
    return AIServiceError(f"Failed to {action} due to an unknown error.")


def _coerce(value: Any, model: type[BaseModel], missing_message: str) -> BaseModel:
    """Validate a model instance or mapping into `model`."""
    if isinstance(value, model):
        return value
    if isinstance(value, BaseModel):
        value = value.model_dump()
    if not isinstance(value, Mapping):
        logger.error(f"[{model.__name__}] Invalid input: {value!r}")
        raise InvalidInputError(missing_message)
    try:
        return model.model_validate(dict(value))
    except ValidationError as e:
        logger.error(f"[{model.__name__}] Invalid input: {e}")
        raise InvalidInputError(f"{missing_message} {e.errors()[0]['msg']}") from e


def _require_text(value: Any, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"{name} is missing or empty.")
    return value


def tailor_resume_to_job(
    resume: SimplifiedResume | Mapping,
    job_listing: SimplifiedJob | Mapping,
    *,
    user_id: str,
    is_pro: bool,
    config: AIConfig | None = None,
) -> SimplifiedResume:
    """Rewrite `resume` against `job_listing`. The result always has a target_role."""
    llm = get_llm(config, is_pro=is_pro)
    check_rate_limit(user_id)

    resume = _coerce(resume, SimplifiedResume, "Resume data is missing or invalid.")
    job = _coerce(job_listing, SimplifiedJob, "Job description data is missing or invalid.")

    resume_for_ai = resume.model_copy(update={"target_role": job.position_title})
    logger.debug(f"[tailor_resume_to_job] Resume: {resume_for_ai.model_dump()}")
    logger.debug(f"[tailor_resume_to_job] Job listing: {job.model_dump()}")
    if config:
        logger.debug(f"[tailor_resume_to_job] AI config model: {config.model}")

    try:
        result = generate_object(llm, TailoredResumeOutput, RESUME_TAILOR_PROMPT, build_tailor_prompt(resume_for_ai, job))
    except Exception as e:
        logger.exception(f"[tailor_resume_to_job] Error tailoring resume: {e}")
        logger.error(f"[tailor_resume_to_job] Resume input: {resume.model_dump()}")
        logger.error(f"[tailor_resume_to_job] Job listing input: {job.model_dump()}")
        raise _wrap_upstream("tailor resume", e) from e

    tailored = result.content
    if not tailored.target_role.strip():
        tailored.target_role = job.position_title.strip() or resume.target_role.strip() or UNTITLED_JOB
    return tailored


def format_job_listing(
    job_listing: str,
    *,
    user_id: str,
    is_pro: bool,
    config: AIConfig | None = None,
) -> SimplifiedJob:
    """Extract a structured job from raw posting text."""
    llm = get_llm(config, is_pro=is_pro)
    check_rate_limit(user_id)
    _require_text(job_listing, "Job listing text")

    try:
        result = generate_object(llm, FormattedJobOutput, JOB_FORMATTER_PROMPT, build_format_prompt(job_listing))
    except Exception as e:
        logger.exception(f"[format_job_listing] Error formatting job listing: {e}")
        logger.error(f"[format_job_listing] Job listing input: {job_listing}")
        raise _wrap_upstream("format job listing", e) from e

    job = scrub_placeholders(result.content)
    job.keywords = dedupe_keywords(job.keywords)
    return job


def rephrase_and_complete_job_description(
    raw_description: str,
    *,
    user_id: str,
    is_pro: bool,
    config: AIConfig | None = None,
) -> str:
    """Rewrite a rough description so every parser field is present."""
    llm = get_llm(config, is_pro=is_pro)
    check_rate_limit(user_id)
    _require_text(raw_description, "Job description text")

    try:
        result = generate_object(llm, RephrasedJobOutput, JOB_REPHRASER_PROMPT, raw_description)
    except Exception as e:
        logger.exception(f"[rephrase_and_complete_job_description] Error: {e}")
        logger.error(f"[rephrase_and_complete_job_description] Input: {raw_description}")
        raise _wrap_upstream("rephrase and complete job description", e) from e

    return result.content
