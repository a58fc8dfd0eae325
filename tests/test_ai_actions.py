"""AI action tests with a mocked chat model."""

from unittest.mock import patch

import pytest

from resumelm import rate_limiter
from resumelm.actions import ai as ai_actions
from resumelm.errors import AIServiceError, InvalidInputError, RateLimitError
from resumelm.models import (
    FormattedJobOutput,
    RephrasedJobOutput,
    SimplifiedJob,
    SimplifiedResume,
    TailoredResumeOutput,
)
from resumelm.rate_limiter import FixedWindowRateLimiter

RESUME = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "work_experience": [
        {"company": "Analytical Engines", "position": "Engineer", "description": ["Wrote programs"]}
    ],
    "target_role": "Mathematician",
}
JOB = {"company_name": "Acme", "position_title": "Backend Engineer", "keywords": ["Python"]}


@pytest.fixture
def llm(mock_llm):
    with patch("resumelm.actions.ai.get_llm", return_value=mock_llm) as factory:
        mock_llm.factory = factory
        yield mock_llm


def _messages(llm) -> list[tuple[str, str]]:
    return llm.structured.invoke.call_args.args[0]


class TestTailorResumeToJob:
    def test_missing_target_role_falls_back_to_position_title(self, llm):
        llm.structured.invoke.return_value = TailoredResumeOutput(content=SimplifiedResume(first_name="Ada"))

        result = ai_actions.tailor_resume_to_job(RESUME, JOB, user_id="u1", is_pro=True)

        assert result.target_role == "Backend Engineer"
        assert result.first_name == "Ada"

    def test_keeps_target_role_from_model(self, llm):
        llm.structured.invoke.return_value = TailoredResumeOutput(
            content=SimplifiedResume(target_role="Senior Backend Engineer")
        )
        result = ai_actions.tailor_resume_to_job(RESUME, JOB, user_id="u1", is_pro=True)
        assert result.target_role == "Senior Backend Engineer"

    def test_prompt_carries_job_title_as_target_role(self, llm):
        llm.structured.invoke.return_value = TailoredResumeOutput(content=SimplifiedResume())

        ai_actions.tailor_resume_to_job(RESUME, JOB, user_id="u1", is_pro=True)

        llm.with_structured_output.assert_called_once_with(TailoredResumeOutput)
        (system_role, system), (user_role, prompt) = _messages(llm)
        assert system_role == "system" and "target_role" in system
        assert user_role == "human"
        assert '"target_role": "Backend Engineer"' in prompt
        assert "This is the Job Description:" in prompt

    def test_untitled_job_falls_back_to_resume_target_role(self, llm):
        llm.structured.invoke.return_value = TailoredResumeOutput(content=SimplifiedResume(target_role="  "))

        result = ai_actions.tailor_resume_to_job(RESUME, {**JOB, "position_title": ""}, user_id="u1", is_pro=True)

        assert result.target_role == "Mathematician"

    def test_target_role_never_empty(self, llm):
        llm.structured.invoke.return_value = TailoredResumeOutput(content=SimplifiedResume())
        resume = {**RESUME, "target_role": ""}

        result = ai_actions.tailor_resume_to_job(resume, {**JOB, "position_title": ""}, user_id="u1", is_pro=True)

        assert result.target_role == "Untitled Job"

    def test_accepts_model_instances(self, llm):
        llm.structured.invoke.return_value = TailoredResumeOutput(content=SimplifiedResume())
        result = ai_actions.tailor_resume_to_job(
            SimplifiedResume(**RESUME), SimplifiedJob(**JOB), user_id="u1", is_pro=False
        )
        assert result.target_role == "Backend Engineer"

    @pytest.mark.parametrize("resume", [None, "not a resume", 42])
    def test_invalid_resume_fails_before_model_call(self, llm, resume):
        with pytest.raises(InvalidInputError, match="Resume data is missing or invalid."):
            ai_actions.tailor_resume_to_job(resume, JOB, user_id="u1", is_pro=True)
        llm.structured.invoke.assert_not_called()

    def test_invalid_job_fails_before_model_call(self, llm):
        with pytest.raises(InvalidInputError, match="Job description data is missing or invalid."):
            ai_actions.tailor_resume_to_job(RESUME, None, user_id="u1", is_pro=True)
        llm.structured.invoke.assert_not_called()

    def test_malformed_resume_fields_rejected(self, llm):
        with pytest.raises(InvalidInputError):
            ai_actions.tailor_resume_to_job({"work_experience": "oops"}, JOB, user_id="u1", is_pro=True)
        llm.structured.invoke.assert_not_called()

    def test_upstream_error_is_wrapped_with_message(self, llm):
        llm.structured.invoke.side_effect = RuntimeError("schema mismatch")

        with pytest.raises(AIServiceError) as exc_info:
            ai_actions.tailor_resume_to_job(RESUME, JOB, user_id="u1", is_pro=True)

        assert str(exc_info.value) == "Failed to tailor resume: schema mismatch"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_upstream_error_without_message(self, llm):
        llm.structured.invoke.side_effect = RuntimeError()

        with pytest.raises(AIServiceError, match="due to an unknown error"):
            ai_actions.tailor_resume_to_job(RESUME, JOB, user_id="u1", is_pro=True)

    def test_resolves_client_for_tier(self, llm):
        llm.structured.invoke.return_value = TailoredResumeOutput(content=SimplifiedResume())
        ai_actions.tailor_resume_to_job(RESUME, JOB, user_id="u1", is_pro=False)
        llm.factory.assert_called_once_with(None, is_pro=False)


class TestFormatJobListing:
    def test_returns_structured_job(self, llm):
        llm.structured.invoke.return_value = FormattedJobOutput(
            content=SimplifiedJob(
                company_name="Acme",
                position_title="Backend Engineer",
                keywords=["Python", "python", " SQL ", ""],
                work_location="",
            )
        )

        job = ai_actions.format_job_listing("Acme is hiring a Backend Engineer...", user_id="u1", is_pro=True)

        assert job.company_name == "Acme"
        assert job.keywords == ["Python", "SQL"]
        assert job.work_location is None
        assert job.salary_range == ""
        prompt = _messages(llm)[1][1]
        assert prompt.endswith("Acme is hiring a Backend Engineer...")

    def test_placeholders_become_empty_strings(self, llm):
        llm.structured.invoke.return_value = FormattedJobOutput(
            content=SimplifiedJob(
                company_name="Acme",
                position_title="SRE",
                salary_range="<UNKNOWN>",
                location="N/A",
                job_url="not specified",
                keywords=["Kubernetes", "unknown"],
            )
        )

        job = ai_actions.format_job_listing("Acme SRE", user_id="u1", is_pro=True)

        assert job.salary_range == ""
        assert job.location == ""
        assert job.job_url == ""
        assert job.company_name == "Acme"
        assert job.keywords == ["Kubernetes"]

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_text_rejected(self, llm, text):
        with pytest.raises(InvalidInputError):
            ai_actions.format_job_listing(text, user_id="u1", is_pro=True)
        llm.structured.invoke.assert_not_called()

    def test_upstream_error_is_wrapped(self, llm):
        llm.structured.invoke.side_effect = ConnectionError("timeout")
        with pytest.raises(AIServiceError, match="Failed to format job listing: timeout"):
            ai_actions.format_job_listing("listing", user_id="u1", is_pro=True)


class TestRephraseJobDescription:
    def test_returns_content_string(self, llm):
        llm.structured.invoke.return_value = RephrasedJobOutput(content="Job Title: Backend Engineer\nCompany: Acme")

        text = ai_actions.rephrase_and_complete_job_description("backend role at acme", user_id="u1", is_pro=True)

        assert text.startswith("Job Title: Backend Engineer")
        llm.with_structured_output.assert_called_once_with(RephrasedJobOutput)
        assert _messages(llm)[1] == ("human", "backend role at acme")

    def test_upstream_error_is_wrapped(self, llm):
        llm.structured.invoke.side_effect = RuntimeError("quota")
        with pytest.raises(AIServiceError, match="Failed to rephrase and complete job description: quota"):
            ai_actions.rephrase_and_complete_job_description("text", user_id="u1", is_pro=True)


def test_rate_limit_checked_before_model_call(llm, monkeypatch):
    monkeypatch.setattr(rate_limiter, "_limiter", FixedWindowRateLimiter(1, 60_000))
    llm.structured.invoke.return_value = RephrasedJobOutput(content="ok")

    ai_actions.rephrase_and_complete_job_description("text", user_id="u1", is_pro=True)
    with pytest.raises(RateLimitError):
        ai_actions.format_job_listing("text", user_id="u1", is_pro=True)

    assert llm.structured.invoke.call_count == 1


def test_missing_api_key_raises_before_rate_limit(monkeypatch):
    from resumelm.config import settings

    monkeypatch.setattr(settings, "deepseek_api_key", "")
    with pytest.raises(ValueError, match="DEEPSEEK_API_KEY not set"):
        ai_actions.format_job_listing("text", user_id="u1", is_pro=True)
    assert rate_limiter.get_rate_limiter().count("u1") == 0
