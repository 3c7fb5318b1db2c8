"""AuthorizationAttemptStore 어댑터 단위 테스트.

Redis 클라이언트는 Mock하여 어댑터 로직만 테스트합니다.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from apps.basalam_gateway.application.oauth.dto import AuthorizationAttempt
from apps.basalam_gateway.infrastructure.persistence_memory import InMemoryAttemptStore
from apps.basalam_gateway.infrastructure.persistence_redis import RedisAttemptStore
from apps.basalam_gateway.infrastructure.persistence_redis.constants import STATE_KEY_PREFIX

CREATED_AT = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeMonotonic:
    def __init__(self) -> None:
        self.value = 1000.0

    def __call__(self) -> float:
        return self.value


class TestInMemoryAttemptStore:
    """InMemoryAttemptStore 테스트."""

    @pytest.mark.asyncio
    async def test_consume_returns_attempt_once(self) -> None:
        store = InMemoryAttemptStore()
        attempt = AuthorizationAttempt(state="s-1", created_at=CREATED_AT)

        await store.save(attempt, ttl_seconds=600)

        assert await store.consume("s-1") == attempt
        assert await store.consume("s-1") is None

    @pytest.mark.asyncio
    async def test_expired_attempt_is_not_returned(self) -> None:
        clock = FakeMonotonic()
        store = InMemoryAttemptStore(monotonic=clock)
        await store.save(AuthorizationAttempt(state="s-1", created_at=CREATED_AT), ttl_seconds=10)

        clock.value += 10

        assert await store.consume("s-1") is None

    @pytest.mark.asyncio
    async def test_save_evicts_expired_entries(self) -> None:
        clock = FakeMonotonic()
        store = InMemoryAttemptStore(monotonic=clock)
        await store.save(AuthorizationAttempt(state="old", created_at=CREATED_AT), ttl_seconds=10)

        clock.value += 11
        await store.save(AuthorizationAttempt(state="new", created_at=CREATED_AT), ttl_seconds=10)

        assert len(store) == 1


class TestRedisAttemptStore:
    """RedisAttemptStore 테스트."""

    @pytest.fixture
    def mock_redis(self) -> AsyncMock:
        return AsyncMock()

    @pytest.fixture
    def store(self, mock_redis: AsyncMock) -> RedisAttemptStore:
        return RedisAttemptStore(redis=mock_redis)

    @pytest.mark.asyncio
    async def test_save_uses_setex_with_ttl(
        self,
        store: RedisAttemptStore,
        mock_redis: AsyncMock,
    ) -> None:
        await store.save(AuthorizationAttempt(state="s-1", created_at=CREATED_AT), 600)

        mock_redis.setex.assert_awaited_once()
        key, ttl, value = mock_redis.setex.call_args[0]
        assert key == f"{STATE_KEY_PREFIX}s-1"
        assert ttl == 600
        assert json.loads(value) == {"created_at": CREATED_AT.isoformat()}

    @pytest.mark.asyncio
    async def test_consume_uses_atomic_getdel(
        self,
        store: RedisAttemptStore,
        mock_redis: AsyncMock,
    ) -> None:
        mock_redis.getdel.return_value = json.dumps({"created_at": CREATED_AT.isoformat()})

        result = await store.consume("s-1")

        mock_redis.getdel.assert_awaited_once_with(f"{STATE_KEY_PREFIX}s-1")
        mock_redis.get.assert_not_called()
        assert result == AuthorizationAttempt(state="s-1", created_at=CREATED_AT)

    @pytest.mark.asyncio
    async def test_consume_missing_state(
        self,
        store: RedisAttemptStore,
        mock_redis: AsyncMock,
    ) -> None:
        mock_redis.getdel.return_value = None

        assert await store.consume("missing") is None
