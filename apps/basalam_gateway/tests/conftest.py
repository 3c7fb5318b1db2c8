"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Generator
from unittest.mock import AsyncMock

import pytest

from apps.basalam_gateway.application.oauth.dto import (
    OAuthClientConfig,
    TokenSet,
    UpstreamIdentity,
)
from apps.basalam_gateway.application.oauth.services import StateTokenIssuer
from apps.basalam_gateway.infrastructure.persistence_memory import InMemoryAttemptStore


# ============================================================
# Environment
# ============================================================


@pytest.fixture(scope="session", autouse=True)
def _test_env() -> Generator[None, None, None]:
    """Set test environment variables."""
    saved_env = os.environ.copy()
    os.environ.update(
        {
            "BASALAM_ENVIRONMENT": "test",
            "BASALAM_STATE_STORE_BACKEND": "memory",
        }
    )
    yield
    os.environ.clear()
    os.environ.update(saved_env)


# ============================================================
# Domain Fixtures
# ============================================================


@pytest.fixture
def now() -> datetime:
    """현재 시간 (UTC)."""
    return datetime.now(timezone.utc)


@pytest.fixture
def client_config() -> OAuthClientConfig:
    return OAuthClientConfig(
        client_id="client-123",
        client_secret="secret-xyz",
        redirect_uri="http://localhost:8000/api/v1/auth/callback",
    )


@pytest.fixture
def token_set() -> TokenSet:
    return TokenSet(
        access_token="access-token-abc",
        token_type="Bearer",
        scope="vendor.product.read vendor.product.write",
        raw={"access_token": "access-token-abc"},
    )


@pytest.fixture
def identity() -> UpstreamIdentity:
    return UpstreamIdentity(
        external_user_id="42",
        display_name="Sara",
        vendor_id="777",
        vendor_title="Sara Handmade",
    )


# ============================================================
# Store / Service Fixtures
# ============================================================


@pytest.fixture
def attempt_store() -> InMemoryAttemptStore:
    return InMemoryAttemptStore()


@pytest.fixture
def state_issuer(attempt_store: InMemoryAttemptStore) -> StateTokenIssuer:
    return StateTokenIssuer(attempt_store, ttl_seconds=600)


@pytest.fixture
def mock_token_exchanger(token_set: TokenSet) -> AsyncMock:
    """Mock TokenExchanger."""
    mock = AsyncMock()
    mock.exchange = AsyncMock(return_value=token_set)
    return mock


@pytest.fixture
def mock_identity_provider(identity: UpstreamIdentity) -> AsyncMock:
    """Mock IdentityProvider."""
    mock = AsyncMock()
    mock.fetch_identity = AsyncMock(return_value=identity)
    return mock


@pytest.fixture
def mock_session_store() -> AsyncMock:
    """Mock SessionStore."""
    mock = AsyncMock()
    mock.persist = AsyncMock(return_value=None)
    return mock
