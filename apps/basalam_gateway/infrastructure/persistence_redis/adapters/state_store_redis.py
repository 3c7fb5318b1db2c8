"""Redis Attempt Store.

AuthorizationAttemptStore 포트의 구현체입니다.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import TYPE_CHECKING

from apps.basalam_gateway.application.oauth.dto import AuthorizationAttempt
from apps.basalam_gateway.infrastructure.persistence_redis.constants import STATE_KEY_PREFIX

if TYPE_CHECKING:
    import redis.asyncio as aioredis


class RedisAttemptStore:
    """Redis 기반 인증 시도 저장소.

    GETDEL로 조회와 삭제를 한 명령으로 처리하여
    여러 인스턴스에서 같은 state가 두 번 소비되지 않습니다.
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis

    async def save(self, attempt: AuthorizationAttempt, ttl_seconds: int) -> None:
        """인증 시도 저장."""
        key = f"{STATE_KEY_PREFIX}{attempt.state}"
        value = json.dumps({"created_at": attempt.created_at.isoformat()})
        await self._redis.setex(key, ttl_seconds, value)

    async def consume(self, state: str) -> AuthorizationAttempt | None:
        """인증 시도 조회 및 삭제."""
        key = f"{STATE_KEY_PREFIX}{state}"
        value = await self._redis.getdel(key)
        if not value:
            return None

        data = json.loads(value)
        return AuthorizationAttempt(
            state=state,
            created_at=datetime.fromisoformat(data["created_at"]),
        )
