"""
ResumeLM Backend.

Core components:
- actions: job CRUD and AI actions
- agents: prompts and model access
- api: FastAPI routes
- db: SQLAlchemy tables and sessions
"""
