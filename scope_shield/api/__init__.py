"""
HTTP layer - FastAPI application and routes
"""

from scope_shield.api.app import HEALTH_TEXT, create_app, create_app_from_env

__all__ = [
    "HEALTH_TEXT",
    "create_app",
    "create_app_from_env",
]
