"""
Manual check of the job actions against a real database.

Requires: DATABASE_URL configured (tests directly against DB, server not needed).
Usage: python scripts/test_jobs_db.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv

load_dotenv()

from resumelm.actions import jobs as job_actions
from resumelm.db.base import get_db, init_db
from resumelm.db.tables import Job, Resume, User
from resumelm.models import SimplifiedJob


def test_job_lifecycle():
    """Create, list, deactivate and delete a job via the actions."""
    init_db()
    db = next(get_db())

    # 1. Create a user and a job
    user = User(email="check@example.com")
    db.add(user)
    db.commit()
    db.refresh(user)

    job = job_actions.create_job(
        db,
        user,
        SimplifiedJob(company_name="Acme", position_title="", keywords=["Python", "SQL"], work_location="remote"),
    )
    assert job.position_title == "Untitled Job", job.position_title
    print(f"[OK] Created job: {job.id}")

    # 2. Keyword filter
    page = job_actions.get_job_listings(
        db, user, filters=job_actions.JobListingFilters(keywords=["Python"], work_location="remote")
    )
    assert any(j.id == job.id for j in page.jobs), "Job not found by keyword filter"
    print(f"[OK] Listed {page.total_count} job(s) with keyword filter")

    # 3. Soft delete
    job_actions.deactivate_job(db, user, job.id)
    assert job_actions.get_job(db, user, job.id).is_active is False
    print("[OK] Job deactivated, row kept")

    # 4. Hard delete detaches resumes
    resume = Resume(user_id=user.id, job_id=job.id, target_role="Engineer", content={})
    db.add(resume)
    db.commit()
    job_actions.delete_job(db, user, job.id)
    db.refresh(resume)
    assert resume.job_id is None
    assert db.query(Job).filter(Job.id == job.id).first() is None
    print("[OK] Job deleted, resume detached")

    # Cleanup
    db.delete(resume)
    db.delete(user)
    db.commit()
    print("\nAll checks passed!")

    db.close()


if __name__ == "__main__":
    test_job_lifecycle()
