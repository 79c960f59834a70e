"""
Pydantic schemas for request payloads accepted by the gateway.

Every field is a required, non-empty string. JSON keys are camelCase;
attributes are snake_case.
"""

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Username and password pair used by signup, signin and reset."""
    # Cognito also accepts the email or phone number here when the pool allows it.
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegistrationRequest(BaseModel):
    """Schema for signup request payload."""
    user: Credentials
    email: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class ConfirmationRequest(BaseModel):
    """Schema for the signup confirmation payload (code sent by email)."""
    username: str = Field(..., min_length=1)
    confirmation_code: str = Field(..., alias="confirmationCode", min_length=1)


class ForgotPasswordRequest(BaseModel):
    """Schema for requesting a password reset code."""
    username: str = Field(..., min_length=1)


class ResetPasswordRequest(BaseModel):
    """Schema for resetting a password with the code from forgot-password."""
    user: Credentials
    confirmation_code: str = Field(..., alias="confirmationCode", min_length=1)


class SignOutRequest(BaseModel):
    """Schema for global sign-out with the user's access token."""
    access_token: str = Field(..., alias="accessToken", min_length=1)
