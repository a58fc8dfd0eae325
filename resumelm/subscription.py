"""
Subscription status lookup.

With `force_pro_plan` enabled (the demo build) every caller is pro and no
profile is read. Otherwise the plan comes from the caller's profile row,
which the billing provider keeps up to date.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from sqlalchemy.orm import Session

from resumelm.config import settings
from resumelm.db import Profile

ACTIVE_STATUSES = ("active", "trialing")


class Plan(str, Enum):
    FREE = "free"
    PRO = "pro"


@dataclass
class SubscriptionStatus:
    plan: Plan
    status: str | None = None
    current_period_end: datetime | None = None
    trial_end: datetime | None = None
    stripe_customer_id: str | None = None
    stripe_subscription_id: str | None = None

    @property
    def is_pro(self) -> bool:
        return self.plan is Plan.PRO


def get_subscription_status(db: Session, user_id: str, force_pro: bool | None = None) -> SubscriptionStatus:
    """Resolve the caller's plan tier."""
    if force_pro is None:
        force_pro = settings.force_pro_plan
    if force_pro:
        return SubscriptionStatus(plan=Plan.PRO, status="active")

    profile = db.query(Profile).filter(Profile.user_id == user_id).first()
    if not profile:
        return SubscriptionStatus(plan=Plan.FREE)

    is_pro = profile.subscription_plan == Plan.PRO.value and profile.subscription_status in ACTIVE_STATUSES
    return SubscriptionStatus(
        plan=Plan.PRO if is_pro else Plan.FREE,
        status=profile.subscription_status,
        current_period_end=profile.current_period_end,
        trial_end=profile.trial_end,
        stripe_customer_id=profile.stripe_customer_id,
        stripe_subscription_id=profile.stripe_subscription_id,
    )


def is_pro(db: Session, user_id: str) -> bool:
    return get_subscription_status(db, user_id).is_pro
