"""FastAPI REST API for landscape takeoffs.

This module exposes the calculators, tier lookups and exporters over HTTP.

Usage:
    uvicorn takeoff.web:app --reload
"""

from takeoff.web.app import app, create_app

__all__ = ["app", "create_app"]
