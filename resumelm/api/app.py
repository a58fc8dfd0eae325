"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from resumelm.api.limiter import limiter
from resumelm.config import settings
from resumelm.db.base import init_db
from resumelm.errors import RateLimitError, ResumeLMError

logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = settings.cors_origins.split(",")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and initialize database on startup."""
    logging.basicConfig(level=settings.log_level)
    try:
        init_db()
    except ValueError:
        logger.warning("DATABASE_URL not set, skipping table creation")
    yield


app = FastAPI(
    title="ResumeLM API",
    description="Job listings, resumes and AI resume tailoring",
    version="0.1.0",
    lifespan=lifespan,
)

app.state.limiter = limiter


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Return 429 with a clear message when rate limit is exceeded."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
    )


@app.exception_handler(ResumeLMError)
async def action_error_handler(request: Request, exc: ResumeLMError):
    """Map action errors to their HTTP status."""
    headers = {"Retry-After": str(exc.retry_after)} if isinstance(exc, RateLimitError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization", "X-User-ID"],
)


# Import and include routers
from resumelm.api.routes import ai, jobs, resumes, subscription, webhooks  # noqa: E402

app.include_router(jobs.router, prefix="/jobs", tags=["Jobs"])
app.include_router(resumes.router, prefix="/resumes", tags=["Resumes"])
app.include_router(ai.router, prefix="/ai", tags=["AI"])
app.include_router(subscription.router, prefix="/subscription", tags=["Subscription"])
app.include_router(webhooks.router, prefix="/webhooks", tags=["Webhooks"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
