"""
Job Formatter.

Extracts a structured job listing from pasted posting text.
"""

from resumelm.models import SimplifiedJob

JOB_FORMATTER_PROMPT = """You extract structured data from job listings and follow the provided schema exactly.

IMPORTANT: any missing or uncertain field is an empty string (""). Never return "<UNKNOWN>", "N/A" or any placeholder.

Read the whole listing for context (responsibilities, requirements, other details), then:
- Use the exact field names of the schema.
- Do not guess or fabricate anything absent from the listing.
- Return only the structured result, no reasoning.

description field:
1. Start with 3-5 markdown bullet points of the most important responsibilities, one per line, each starting with "• ".
2. Follow with the full job description as one clean paragraph, with unrelated content removed.
"""

JOB_FORMATTER_TASKS = """Analyze this job listing and extract structured information.

TASK 1 - ESSENTIAL INFORMATION
Company, position, URL, location, salary. Description starts with 3-5 key responsibilities as bullet points.

TASK 2 - KEYWORDS
Collect into "keywords":
1. Technical skills: languages, frameworks, tools
2. Soft skills
3. Industry knowledge
4. Required qualifications: education, experience level
5. Key responsibilities and deliverables

Rules:
- Keep keywords as written (e.g. "React.js" stays "React.js"), deduplicated.
- Infer seniority from context.
- work_location is one of remote, in_person, hybrid; employment_type is one of
  full_time, part_time, co_op, internship, contract. Use "" when unknown.
- Missing details (salary, location, ...) are "".

FORMAT THE FOLLOWING JOB LISTING AS A JSON OBJECT:
"""


def build_format_prompt(job_listing: str) -> str:
    return JOB_FORMATTER_TASKS + job_listing


def dedupe_keywords(keywords: list[str]) -> list[str]:
    """Drop blank and case-insensitive duplicate keywords, keeping first-seen order."""
    seen = set()
    result = []
    for keyword in keywords:
        cleaned = keyword.strip()
        if not cleaned or cleaned.lower() in seen:
            continue
        seen.add(cleaned.lower())
        result.append(cleaned)
    return result


# Values models emit for "unknown" despite the prompt; compared lowercased
PLACEHOLDERS = {"<unknown>", "unknown", "n/a", "na", "none", "null", "not specified", "not provided", "-"}

SCRUBBED_FIELDS = ("company_name", "position_title", "job_url", "description", "location", "salary_range")


def _is_placeholder(value: str) -> bool:
    return value.strip().lower() in PLACEHOLDERS


def scrub_placeholders(job: SimplifiedJob) -> SimplifiedJob:
    """Replace placeholder values with "" and drop placeholder keywords."""
    updates = {field: "" for field in SCRUBBED_FIELDS if _is_placeholder(getattr(job, field))}
    keywords = [keyword for keyword in job.keywords if not _is_placeholder(keyword)]
    return job.model_copy(update={**updates, "keywords": keywords})
