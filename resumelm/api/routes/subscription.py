"""Subscription status endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from resumelm.api.schemas import SubscriptionResponse
from resumelm.auth import get_current_user
from resumelm.db import User, get_db
from resumelm.subscription import get_subscription_status

router = APIRouter()


@router.get("", response_model=SubscriptionResponse)
def get_subscription(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get the caller's plan. Read-only: plan changes come from the billing provider."""
    status = get_subscription_status(db, user.id)
    return SubscriptionResponse(
        plan=status.plan.value,
        status=status.status,
        current_period_end=status.current_period_end,
        trial_end=status.trial_end,
        stripe_customer_id=status.stripe_customer_id,
        stripe_subscription_id=status.stripe_subscription_id,
    )
