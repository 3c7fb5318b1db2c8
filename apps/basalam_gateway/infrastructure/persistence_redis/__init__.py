"""Redis Persistence Layer."""

from apps.basalam_gateway.infrastructure.persistence_redis.adapters import (
    RedisAttemptStore,
    RedisSessionStore,
)
from apps.basalam_gateway.infrastructure.persistence_redis.client import (
    get_oauth_state_redis,
    get_session_redis,
)

__all__ = [
    "get_oauth_state_redis",
    "get_session_redis",
    "RedisAttemptStore",
    "RedisSessionStore",
]
