"""
Unit tests for client construction and the shared context.
"""

import dataclasses
from unittest.mock import MagicMock, patch

import pytest

from cognito_auth.client import AppContext, build_context, build_identity_client
from cognito_auth.config import Settings


@pytest.fixture
def settings():
    return Settings(
        user_pool_id="ap-south-1_pool",
        app_client_id="client-1",
        app_client_secret="secret-1",
        region="ap-south-1",
    )


def test_build_identity_client_uses_region():
    with patch("cognito_auth.client.boto3.client") as boto_client:
        result = build_identity_client("eu-central-1")
    boto_client.assert_called_once_with("cognito-idp", region_name="eu-central-1")
    assert result is boto_client.return_value


def test_build_context_creates_client_for_settings_region(settings):
    with patch("cognito_auth.client.boto3.client") as boto_client:
        ctx = build_context(settings)
    boto_client.assert_called_once_with("cognito-idp", region_name="ap-south-1")
    assert ctx.client is boto_client.return_value
    assert ctx.user_pool_id == "ap-south-1_pool"
    assert ctx.client_id == "client-1"
    assert ctx.client_secret == "secret-1"
    assert ctx.has_secret is True


def test_build_context_keeps_injected_client(settings):
    fake = MagicMock()
    with patch("cognito_auth.client.boto3.client") as boto_client:
        ctx = build_context(settings, client=fake)
    boto_client.assert_not_called()
    assert ctx.client is fake


def test_context_without_secret():
    ctx = AppContext(client=MagicMock(), user_pool_id="p", client_id="c")
    assert ctx.has_secret is False


def test_context_is_read_only():
    ctx = AppContext(client=MagicMock(), user_pool_id="p", client_id="c")
    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.client_id = "other"
