"""Database package."""

from resumelm.db.base import Base, get_db, init_db
from resumelm.db.tables import Job, Profile, Resume, User

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "User",
    "Profile",
    "Job",
    "Resume",
]
