"""
Runtime configuration for the Cognito auth gateway
==================================================

Settings come from a `.env` file loaded into the process environment, then
read from the environment (only here). The rest of the codebase receives a
frozen `Settings` value and never touches `os.environ` itself.

Cognito
-------
- COGNITO_USER_POOL_ID      : user pool identifier
- COGNITO_APP_CLIENT_ID     : app client identifier
- COGNITO_APP_CLIENT_SECRET : app client secret (empty when the client has none)
- COGNITO_REGION            : region of the user pool (falls back to AWS_REGION, then "ap-south-1")

Server
------
- HOST      : listen address (default "0.0.0.0")
- PORT      : listen port (default 8080; clamped to [1, 65535])
- LOG_LEVEL : critical, error, warning, info or debug (default "INFO"; anything else falls back to it)

AWS credentials are not read here; boto3 resolves them through its own chain.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

DEFAULT_ENV_FILE = ".env"
DEFAULT_REGION = "ap-south-1"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

# Names understood by both `logging` and uvicorn's --log-level.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
DEFAULT_LOG_LEVEL = "INFO"


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _get_log_level(name: str, default: str = DEFAULT_LOG_LEVEL) -> str:
    raw = os.getenv(name, default).strip().upper()
    return raw if raw in LOG_LEVELS else default


@dataclass(frozen=True)
class Settings:
    user_pool_id: str
    app_client_id: str
    app_client_secret: str
    region: str = DEFAULT_REGION
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL


def read_settings() -> Settings:
    """
    Build a Settings value from the current process environment.

    Environment is read at call time, so tests can monkeypatch it freely.
    """
    region = (
        os.getenv("COGNITO_REGION")
        or os.getenv("AWS_REGION")
        or DEFAULT_REGION
    ).strip()

    return Settings(
        user_pool_id=os.getenv("COGNITO_USER_POOL_ID", ""),
        app_client_id=os.getenv("COGNITO_APP_CLIENT_ID", ""),
        app_client_secret=os.getenv("COGNITO_APP_CLIENT_SECRET", ""),
        region=region,
        host=os.getenv("HOST", DEFAULT_HOST),
        port=max(1, min(65535, _get_int("PORT", DEFAULT_PORT))),
        log_level=_get_log_level("LOG_LEVEL"),
    )


def load_settings(env_file: Optional[str] = DEFAULT_ENV_FILE) -> Settings:
    """
    Load the settings file into the environment and return the settings.

    Args:
        env_file (Optional[str]): Path of the dotenv file. Pass None to skip
            the file and read the environment as-is.

    Returns:
        Settings: Immutable settings for this process.

    Raises:
        ConfigurationError: If the settings file is missing or unreadable.
    """
    if env_file is not None:
        if not os.path.isfile(env_file):
            raise ConfigurationError(f"Could not load env file: {env_file} not found")
        try:
            # Values already present in the environment win over the file.
            load_dotenv(env_file, override=False)
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(f"Could not load env file: {exc}") from exc

    return read_settings()
