"""REST API presentation layer for Staybook.

This package provides a FastAPI-based REST API for the Staybook backend.

Structure:
    api/
    ├── app.py               # FastAPI application factory
    ├── config.py            # API configuration
    ├── dependencies.py      # Dependency injection
    ├── exception_handlers.py
    ├── routers/             # API route handlers
    └── schemas/             # Pydantic request/response schemas
"""

from staybook.presentation.api.app import create_app

__all__ = ["create_app"]
