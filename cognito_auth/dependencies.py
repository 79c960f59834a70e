"""
FastAPI dependency functions.

These can be used in routes with Depends() to reach the shared context.
"""

from fastapi import Request

from .client import AppContext


def get_context(request: Request) -> AppContext:
    """
    Dependency that returns the application context built at startup.

    Args:
        request (Request): Automatically provided by FastAPI.

    Returns:
        AppContext: Cognito client plus pool and app client settings.
    """
    return request.app.state.context
