"""
Global pytest fixtures for the Cognito auth gateway test suite.

Responsibilities:
    - Provide a fake Cognito client (MagicMock) so no test touches AWS
    - Provide AppContext fixtures with and without an app client secret
    - Provide a fresh FastAPI TestClient via the app factory for integration tests

LLM Prompt Example:
    "Show how to inject a mocked boto3 client through an application factory
    so FastAPI endpoints can be tested without network access."
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError
from fastapi.testclient import TestClient

from main import create_app
from cognito_auth.client import AppContext

POOL_ID = "ap-south-1_TestPool"
CLIENT_ID = "test-app-client-id"
CLIENT_SECRET = "test-app-client-secret"


@pytest.fixture
def client_error():
    """Factory for botocore ClientErrors shaped like real Cognito failures."""
    def _make(code: str, message: str, operation: str) -> ClientError:
        return ClientError({"Error": {"Code": code, "Message": message}}, operation)
    return _make


@pytest.fixture
def cognito() -> MagicMock:
    """
    Fake `cognito-idp` client.

    initiate_auth answers with tokens by default; tests override
    return values or side effects as needed.
    """
    fake = MagicMock(name="cognito-idp")
    fake.sign_up.return_value = {"UserConfirmed": False, "UserSub": "sub-123"}
    fake.confirm_sign_up.return_value = {}
    fake.initiate_auth.return_value = {
        "AuthenticationResult": {
            "AccessToken": "access-token-abc",
            "IdToken": "id-token-xyz",
            "RefreshToken": "refresh-token",
            "ExpiresIn": 3600,
            "TokenType": "Bearer",
        }
    }
    fake.forgot_password.return_value = {"CodeDeliveryDetails": {"DeliveryMedium": "EMAIL"}}
    fake.confirm_forgot_password.return_value = {}
    fake.global_sign_out.return_value = {}
    return fake


@pytest.fixture
def context(cognito: MagicMock) -> AppContext:
    """Context for an app client without a secret."""
    return AppContext(client=cognito, user_pool_id=POOL_ID, client_id=CLIENT_ID)


@pytest.fixture
def secret_context(cognito: MagicMock) -> AppContext:
    """Context for an app client that has a secret (SecretHash required)."""
    return AppContext(
        client=cognito,
        user_pool_id=POOL_ID,
        client_id=CLIENT_ID,
        client_secret=CLIENT_SECRET,
    )


@pytest.fixture
def client(context: AppContext) -> TestClient:
    """
    Provide a fresh TestClient with a new app instance.

    Notes:
        - Uses the app factory with an injected context, so no .env is read.
    """
    app = create_app(context=context)
    return TestClient(app)
