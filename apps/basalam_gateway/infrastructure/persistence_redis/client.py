"""Redis Client Provider.

OAuth state용과 세션용 클라이언트를 분리합니다.
두 용도 모두 요청 경로(로그인 콜백) 안에서 호출되므로 타임아웃과 재시도를 짧게 둡니다.
값은 BASALAM_REDIS_* 설정으로 조정합니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError, TimeoutError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

    from apps.basalam_gateway.setup.config import Settings

HEALTH_CHECK_INTERVAL = 60  # seconds
BACKOFF_CAP = 0.5  # seconds
RETRY_ON_ERROR = [ConnectionError, TimeoutError]


def _build_async_client(redis_url: str, settings: "Settings") -> "aioredis.Redis":
    """비동기 Redis 클라이언트 생성."""
    import redis.asyncio as aioredis

    retry = Retry(
        ExponentialBackoff(cap=BACKOFF_CAP, base=0.05),
        retries=settings.redis_max_retries,
    )

    return aioredis.from_url(
        redis_url,
        encoding="utf-8",
        decode_responses=True,
        health_check_interval=HEALTH_CHECK_INTERVAL,
        socket_connect_timeout=settings.redis_socket_timeout_seconds,
        socket_timeout=settings.redis_socket_timeout_seconds,
        max_connections=settings.redis_max_connections,
        retry=retry,
        retry_on_error=RETRY_ON_ERROR,
    )


@lru_cache
def get_oauth_state_redis() -> "aioredis.Redis":
    """OAuth state 저장용 Redis 클라이언트 (BASALAM_REDIS_OAUTH_STATE_URL)."""
    from apps.basalam_gateway.setup.config import get_settings

    settings = get_settings()
    return _build_async_client(settings.redis_oauth_state_url, settings)


@lru_cache
def get_session_redis() -> "aioredis.Redis":
    """세션 저장용 Redis 클라이언트 (BASALAM_REDIS_SESSION_URL)."""
    from apps.basalam_gateway.setup.config import get_settings

    settings = get_settings()
    return _build_async_client(settings.redis_session_url, settings)
