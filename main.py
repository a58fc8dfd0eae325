"""
ResumeLM - CLI Entry Point.

Commands:
    python main.py serve [--port N]      Run the API server
    python main.py init-db               Create database tables
    python main.py format-job <file>     Extract a structured job from a posting
    python main.py rephrase-job <file>   Complete a rough job description
"""

import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from resumelm.config import settings  # noqa: E402

CLI_USER_ID = "cli"


def _read_text(args: list[str]) -> str | None:
    """Read the file named by the remaining args (handles filenames with spaces)."""
    if not args:
        print("Error: missing file path")
        return None
    path = Path(" ".join(args))
    if not path.exists():
        print(f"Not found: {path}")
        return None
    return path.read_text(encoding="utf-8")


def serve(args: list[str]) -> None:
    import uvicorn

    port = 8000
    if len(args) >= 2 and args[0] == "--port":
        port = int(args[1])
    uvicorn.run("resumelm.api.app:app", host="0.0.0.0", port=port)


def init_database() -> None:
    from resumelm.db.base import init_db

    try:
        init_db()
    except ValueError as e:
        print(f"Error: {e}")
        return
    print("Database tables created")


def format_job(args: list[str]) -> None:
    from resumelm.actions.ai import format_job_listing
    from resumelm.errors import ResumeLMError

    text = _read_text(args)
    if text is None:
        return
    try:
        job = format_job_listing(text, user_id=CLI_USER_ID, is_pro=settings.force_pro_plan)
    except (ResumeLMError, ValueError) as e:
        print(f"Error: {e}")
        return
    print(json.dumps(job.model_dump(), indent=2))


def rephrase_job(args: list[str]) -> None:
    from resumelm.actions.ai import rephrase_and_complete_job_description
    from resumelm.errors import ResumeLMError

    text = _read_text(args)
    if text is None:
        return
    try:
        print(rephrase_and_complete_job_description(text, user_id=CLI_USER_ID, is_pro=settings.force_pro_plan))
    except (ResumeLMError, ValueError) as e:
        print(f"Error: {e}")


def main():
    """Dispatch a CLI command."""
    logging.basicConfig(level=settings.log_level)

    if len(sys.argv) < 2:
        print(__doc__)
        return

    command, args = sys.argv[1], sys.argv[2:]
    if command == "serve":
        serve(args)
    elif command == "init-db":
        init_database()
    elif command == "format-job":
        format_job(args)
    elif command == "rephrase-job":
        rephrase_job(args)
    else:
        print(f"Unknown command: {command}")
        print(__doc__)


if __name__ == "__main__":
    main()
