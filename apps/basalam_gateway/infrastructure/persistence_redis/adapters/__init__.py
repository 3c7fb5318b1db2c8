"""Redis Adapters."""

from apps.basalam_gateway.infrastructure.persistence_redis.adapters.session_store_redis import (
    RedisSessionStore,
)
from apps.basalam_gateway.infrastructure.persistence_redis.adapters.state_store_redis import (
    RedisAttemptStore,
)

__all__ = ["RedisAttemptStore", "RedisSessionStore"]
