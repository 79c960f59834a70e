"""
Main API module for the Cognito auth gateway.

Responsibilities:
    - Expose REST endpoints for signup, confirmation, signin, password reset and signout
    - Validate JSON payloads before anything is sent to Cognito
    - Relay Cognito errors to the caller verbatim

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - One frozen AppContext (boto3 client + pool settings) built at startup and
      shared read-only by every handler through a FastAPI dependency.
    - Handlers are sync functions; FastAPI runs each on its worker threadpool,
      so one blocking Cognito call never stalls other requests.
"""

import logging
from typing import Any, Dict, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cognito_auth import __version__
from cognito_auth import service
from cognito_auth.client import AppContext, build_context
from cognito_auth.config import Settings, load_settings
from cognito_auth.dependencies import get_context
from cognito_auth.exceptions import ConfigurationError, IdentityProviderError
from cognito_auth.schemas import (
    ConfirmationRequest,
    Credentials,
    ForgotPasswordRequest,
    RegistrationRequest,
    ResetPasswordRequest,
    SignOutRequest,
)

log = logging.getLogger("cognito_auth")


def _configure_logging(level: str = "INFO") -> None:
    # basic console logging unless the host process already set it up
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("boto3").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _validation_message(exc: RequestValidationError) -> str:
    """
    Flatten pydantic errors into one line, e.g. "user.username: Field required".
    """
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        parts.append(f"{'.'.join(loc) or 'body'}: {err.get('msg', 'invalid')}")
    return "; ".join(parts) or "Invalid request body"


def create_app(context: Optional[AppContext] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        context (Optional[AppContext]): Pre-built context. Tests inject one
            holding a fake Cognito client.
        settings (Optional[Settings]): Settings used to build the context when
            none is injected. Loaded from `.env` when both are omitted.

    Returns:
        FastAPI: A fully configured application instance.

    Raises:
        ConfigurationError: If settings must be loaded and the env file is unreadable.
    """
    if context is None:
        settings = settings or load_settings()
        _configure_logging(settings.log_level)
        context = build_context(settings)
        log.info(
            "Cognito client ready (region=%s, user_pool=%s)",
            settings.region,
            settings.user_pool_id,
        )

    app = FastAPI(
        title="Cognito Auth Gateway",
        description="Signup, signin and password flows backed by an AWS Cognito user pool",
        version=__version__,
    )
    app.state.context = context

    # ----------------------------------------------------------------
    # Error mapping
    # ----------------------------------------------------------------
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _validation_message(exc)
        log.warning("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(IdentityProviderError)
    async def identity_error_handler(request: Request, exc: IdentityProviderError) -> JSONResponse:
        return JSONResponse(status_code=500, content=exc.to_dict())

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/")
    def index() -> Dict[str, Any]:
        return {"message": "Learning AWS Cognito"}

    @app.post("/signup")
    def signup(req: RegistrationRequest, ctx: AppContext = Depends(get_context)) -> Dict[str, Any]:
        """
        Register a new user. Cognito emails a verification code afterwards.

        Raises:
            IdentityProviderError: If Cognito rejects the signup (500).
        """
        service.register_user(ctx, req)
        return {"message": "User Registered Successfully"}

    @app.post("/signup/confirmation")
    def confirm_signup(req: ConfirmationRequest, ctx: AppContext = Depends(get_context)) -> Dict[str, Any]:
        """Verify a registration with the code sent to the user's email."""
        service.confirm_registration(ctx, req)
        return {"message": "User is verified"}

    @app.post("/signin")
    def signin(req: Credentials, ctx: AppContext = Depends(get_context)) -> Dict[str, Any]:
        """
        Log a user in.

        Returns:
            dict: message, accessToken and idToken.
        """
        tokens = service.login_user(ctx, req)
        return {"message": "User Logged In Successfully", **tokens}

    @app.post("/password/forgot")
    def password_forgot(req: ForgotPasswordRequest, ctx: AppContext = Depends(get_context)) -> Dict[str, Any]:
        service.forgot_password(ctx, req)
        return {"message": "Code was sent to your email. Please use that code to reset your password."}

    @app.post("/password/reset")
    def password_reset(req: ResetPasswordRequest, ctx: AppContext = Depends(get_context)) -> Dict[str, Any]:
        service.reset_password(ctx, req)
        return {"message": "Password successfully reset."}

    @app.post("/signout")
    def signout(req: SignOutRequest, ctx: AppContext = Depends(get_context)) -> Dict[str, Any]:
        """Global sign-out: every token issued to the user is revoked."""
        service.logout_user(ctx, req)
        return {"message": "User logged out successfully."}

    return app


def run() -> None:
    """
    Process entry point: load settings, build the app and serve it.

    Exits with status 1 if the settings file cannot be loaded.
    """
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        _configure_logging()
        log.error("Could not load env: %s", exc.message)
        raise SystemExit(1) from exc

    app = create_app(settings=settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
