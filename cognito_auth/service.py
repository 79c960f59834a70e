"""
Core identity operations.

Each function translates one request payload into the input of a single
Cognito API call, makes that call, and returns what the HTTP layer needs.
Fields are copied verbatim; nothing is hashed, normalized or cached locally.

Any failure reported by boto3/botocore is re-raised as
`IdentityProviderError` carrying the remote error text unchanged.
There are no retries beyond botocore's own defaults.
"""

import logging
from typing import Any, Dict

from botocore.exceptions import BotoCoreError, ClientError

from .client import AppContext
from .exceptions import IdentityProviderError
from .schemas import (
    ConfirmationRequest,
    Credentials,
    ForgotPasswordRequest,
    RegistrationRequest,
    ResetPasswordRequest,
    SignOutRequest,
)
from .utils import secret_hash

log = logging.getLogger(__name__)

USER_PASSWORD_AUTH = "USER_PASSWORD_AUTH"


def _call(context: AppContext, operation: str, **params: Any) -> Dict[str, Any]:
    """
    Invoke `operation` on the Cognito client and normalize its errors.

    Raises:
        IdentityProviderError: If the call fails for any reason.
    """
    try:
        return getattr(context.client, operation)(**params)
    except ClientError as exc:
        code = exc.response.get("Error", {}).get("Code")
        log.warning("Cognito %s failed: %s", operation, code)
        raise IdentityProviderError(str(exc), operation=operation, code=code) from exc
    except BotoCoreError as exc:
        log.warning("Cognito %s failed: %s", operation, type(exc).__name__)
        raise IdentityProviderError(str(exc), operation=operation) from exc


def _with_secret_hash(context: AppContext, username: str, params: Dict[str, Any]) -> Dict[str, Any]:
    # Clients without a secret must not send SecretHash at all.
    if context.has_secret:
        params["SecretHash"] = secret_hash(username, context.client_id, context.client_secret)
    return params


def register_user(context: AppContext, req: RegistrationRequest) -> None:
    """
    Sign up a new user in the pool.

    `email` is a required standard attribute in Cognito; `name` is optional
    there but required by this API. Both are sent as user attributes.
    """
    params = _with_secret_hash(context, req.user.username, {
        "ClientId": context.client_id,
        "Username": req.user.username,
        "Password": req.user.password,
        "UserAttributes": [
            {"Name": "email", "Value": req.email},
            {"Name": "name", "Value": req.name},
        ],
    })
    _call(context, "sign_up", **params)
    log.info("Registered user %s", req.user.username)


def confirm_registration(context: AppContext, req: ConfirmationRequest) -> None:
    """Confirm a signup with the verification code Cognito emailed to the user."""
    params = _with_secret_hash(context, req.username, {
        "ClientId": context.client_id,
        "Username": req.username,
        "ConfirmationCode": req.confirmation_code,
    })
    _call(context, "confirm_sign_up", **params)
    log.info("Confirmed user %s", req.username)


def login_user(context: AppContext, req: Credentials) -> Dict[str, str]:
    """
    Authenticate with USER_PASSWORD_AUTH.

    Returns:
        dict: `accessToken` and `idToken` from the authentication result.

    Raises:
        IdentityProviderError: If Cognito rejects the credentials, or answers
            with a challenge (e.g. NEW_PASSWORD_REQUIRED) instead of tokens.
    """
    auth_parameters = {
        "USERNAME": req.username,
        "PASSWORD": req.password,
    }
    if context.has_secret:
        auth_parameters["SECRET_HASH"] = secret_hash(
            req.username, context.client_id, context.client_secret
        )

    result = _call(
        context,
        "initiate_auth",
        AuthFlow=USER_PASSWORD_AUTH,
        AuthParameters=auth_parameters,
        ClientId=context.client_id,
    )

    tokens = result.get("AuthenticationResult")
    if not tokens:
        challenge = result.get("ChallengeName", "UNKNOWN")
        log.warning("Cognito initiate_auth returned challenge %s", challenge)
        raise IdentityProviderError(
            f"Authentication challenge required: {challenge}",
            operation="initiate_auth",
            code=challenge,
        )

    log.info("User %s logged in", req.username)
    return {
        "accessToken": tokens["AccessToken"],
        "idToken": tokens["IdToken"],
    }


def forgot_password(context: AppContext, req: ForgotPasswordRequest) -> None:
    """Ask Cognito to send a password reset code to the user."""
    params = _with_secret_hash(context, req.username, {
        "ClientId": context.client_id,
        "Username": req.username,
    })
    _call(context, "forgot_password", **params)
    log.info("Password reset code requested for %s", req.username)


def reset_password(context: AppContext, req: ResetPasswordRequest) -> None:
    params = _with_secret_hash(context, req.user.username, {
        "ClientId": context.client_id,
        "Username": req.user.username,
        "Password": req.user.password,
        "ConfirmationCode": req.confirmation_code,
    })
    _call(context, "confirm_forgot_password", **params)
    log.info("Password reset for %s", req.user.username)


def logout_user(context: AppContext, req: SignOutRequest) -> None:
    """Invalidate every token issued to the user owning `accessToken`."""
    _call(context, "global_sign_out", AccessToken=req.access_token)
    log.info("User signed out")
