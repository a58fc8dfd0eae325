"""
Job Rephraser.

Rewrites a rough job description into a complete one that the job
formatter can parse field by field.
"""

JOB_REPHRASER_PROMPT = """You rewrite job descriptions into clear, structured English.

Fill in missing key information with your best reasonable guess. The output must contain ALL of:
- Job Title (line starting with "Job Title: ")
- Company Name (line starting with "Company: ")
- Location (if available or inferable)
- Key Responsibilities (bullet points)
- Key Requirements (bullet points)
- Description (one summary paragraph)
- Salary Range (if available or inferable)
- Work Location (remote, in_person or hybrid)
- Employment Type (full_time, part_time, co_op, internship or contract)
- Keywords (comma-separated skills, technologies and requirements)
- The job title again as target_role, for resume tailoring

Guesses must be plausible for the context. Do NOT invent unrealistic details.
Structure the text so that a parser can extract every field above.
"""
