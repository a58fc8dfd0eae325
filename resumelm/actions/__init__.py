"""
Server-side actions.

- jobs: job listing CRUD
- ai: job-listing extraction, description completion, resume tailoring
"""
