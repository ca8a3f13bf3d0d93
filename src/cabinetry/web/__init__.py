"""FastAPI REST API for schedule generation.

Usage:
    uvicorn cabinetry.web:app --reload
"""

from cabinetry.web.app import app, create_app

__all__ = ["app", "create_app"]
