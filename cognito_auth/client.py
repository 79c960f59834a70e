"""
Identity provider client and shared application context.

The boto3 `cognito-idp` client is built once at startup and stored, together
with the user pool and app client settings, in a frozen `AppContext` that
every request handler receives read-only.
"""

from dataclasses import dataclass
from typing import Any, Optional

import boto3

from .config import Settings


@dataclass(frozen=True)
class AppContext:
    """Read-only state shared by all request handlers."""

    client: Any
    user_pool_id: str
    client_id: str
    client_secret: str = ""

    @property
    def has_secret(self) -> bool:
        return bool(self.client_secret)


def build_identity_client(region: str) -> Any:
    """Return a boto3 Cognito Identity Provider client bound to `region`."""
    return boto3.client("cognito-idp", region_name=region)


def build_context(settings: Settings, client: Optional[Any] = None) -> AppContext:
    """
    Build the application context from settings.

    Args:
        settings (Settings): Loaded settings.
        client (Optional[Any]): Pre-built Cognito client; a boto3 client for
            `settings.region` is created when omitted.

    Returns:
        AppContext: The shared, immutable context.
    """
    return AppContext(
        client=client if client is not None else build_identity_client(settings.region),
        user_pool_id=settings.user_pool_id,
        client_id=settings.app_client_id,
        client_secret=settings.app_client_secret,
    )
