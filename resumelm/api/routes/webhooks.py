"""Payment provider webhooks."""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/stripe")
async def stripe_webhook():
    """Disabled: no signature check, no event processing."""
    logger.info("[stripe_webhook] Received event while webhook is disabled")
    return PlainTextResponse("Stripe webhook endpoint is disabled.", status_code=501)
