"""
Exception types raised by the Cognito auth package.

Only two things can go wrong at runtime: the settings cannot be loaded at
startup, or the identity provider rejects a call. Request validation errors
are produced by pydantic/FastAPI and never reach this module.
"""

from typing import Optional


class AuthGatewayError(Exception):
    """Base class for errors raised by this package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(AuthGatewayError):
    """Raised when the settings file cannot be read at startup."""


class IdentityProviderError(AuthGatewayError):
    """
    Raised when a call to the identity provider fails.

    Attributes:
        message (str): The remote error text, passed through verbatim.
        operation (str): Name of the Cognito operation that failed.
        code (Optional[str]): Cognito error code (e.g. "NotAuthorizedException"), if known.
    """

    def __init__(self, message: str, operation: str, code: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
        self.code = code

    def to_dict(self) -> dict:
        """Response body relayed to the HTTP caller."""
        return {"error": self.message}
