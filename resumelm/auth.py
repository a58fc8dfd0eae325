"""Caller identity resolution."""

import logging

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from resumelm.db import User, get_db
from resumelm.errors import AuthenticationError

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: str | None) -> User:
    """Resolve a session's user id to a user row, or raise AuthenticationError."""
    if not user_id:
        raise AuthenticationError()
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        logger.warning(f"[auth] Unknown user id: {user_id}")
        raise AuthenticationError()
    return user


def get_current_user(
    x_user_id: str | None = Header(None, alias="X-User-ID"),
    db: Session = Depends(get_db),
) -> User:
    """FastAPI dependency for the authenticated caller."""
    return get_user(db, x_user_id)
