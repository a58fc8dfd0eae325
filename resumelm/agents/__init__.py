"""
Prompts and model access for the AI actions.

- llm: tier-aware chat model factory
- resume_tailor: tailors a resume to a job description
- job_formatter: extracts a structured job from posting text
- job_rephraser: completes a rough job description
"""

from resumelm.agents.llm import AIConfig, get_llm

__all__ = ["AIConfig", "get_llm"]
