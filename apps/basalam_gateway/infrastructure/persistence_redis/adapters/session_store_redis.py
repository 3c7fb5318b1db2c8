"""Redis Session Store.

SessionStore 포트의 구현체입니다.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from apps.basalam_gateway.application.oauth.dto import TokenSet, UpstreamIdentity
from apps.basalam_gateway.infrastructure.persistence_redis.constants import SESSION_KEY_PREFIX

if TYPE_CHECKING:
    import redis.asyncio as aioredis


class RedisSessionStore:
    """Redis 기반 세션 저장소.

    TTL은 토큰 만료 시각과 session_ttl_seconds 중 짧은 쪽을 따릅니다.
    """

    def __init__(self, redis: "aioredis.Redis", session_ttl_seconds: int) -> None:
        self._redis = redis
        self._session_ttl_seconds = session_ttl_seconds

    async def persist(self, token_set: TokenSet, identity: UpstreamIdentity) -> None:
        """로그인 세션 저장."""
        key = f"{SESSION_KEY_PREFIX}{identity.external_user_id}"
        value = json.dumps(
            {
                "access_token": token_set.access_token,
                "refresh_token": token_set.refresh_token,
                "token_type": token_set.token_type,
                "scope": token_set.scope,
                "expires_at": token_set.expires_at.isoformat() if token_set.expires_at else None,
                "external_user_id": identity.external_user_id,
                "display_name": identity.display_name,
                "vendor_id": identity.vendor_id,
                "vendor_title": identity.vendor_title,
            }
        )
        await self._redis.setex(key, self._ttl_for(token_set), value)

    async def read_current(self, external_user_id: str) -> UpstreamIdentity | None:
        """현재 세션의 사용자 조회."""
        value = await self._redis.get(f"{SESSION_KEY_PREFIX}{external_user_id}")
        if not value:
            return None

        data = json.loads(value)
        return UpstreamIdentity(
            external_user_id=data["external_user_id"],
            display_name=data.get("display_name"),
            vendor_id=data.get("vendor_id"),
            vendor_title=data.get("vendor_title"),
        )

    def _ttl_for(self, token_set: TokenSet) -> int:
        if token_set.expires_at is None:
            return self._session_ttl_seconds
        remaining = int((token_set.expires_at - datetime.now(timezone.utc)).total_seconds())
        return max(1, min(remaining, self._session_ttl_seconds))
