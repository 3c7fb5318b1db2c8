"""StateTokenIssuer - OAuth state 발급/검증 서비스.

CSRF 방지용 state를 발급하고, 콜백에서 한 번만 소비되도록 검증합니다.
"""

from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Callable

from apps.basalam_gateway.application.oauth.dto import AuthorizationAttempt
from apps.basalam_gateway.application.oauth.exceptions import InvalidStateError

if TYPE_CHECKING:
    from apps.basalam_gateway.application.oauth.ports import AuthorizationAttemptStore

logger = logging.getLogger(__name__)

DEFAULT_STATE_TTL_SECONDS = 600  # 10분


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StateTokenIssuer:
    """OAuth state 발급기.

    Collaborators:
        - AuthorizationAttemptStore: state 저장/원자적 소비
    """

    def __init__(
        self,
        store: "AuthorizationAttemptStore",
        ttl_seconds: int = DEFAULT_STATE_TTL_SECONDS,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._ttl_seconds = ttl_seconds
        self._clock = clock

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    async def issue(self) -> str:
        """예측 불가능한 state를 발급하고 저장합니다."""
        state = secrets.token_urlsafe(32)
        attempt = AuthorizationAttempt(state=state, created_at=self._clock())
        await self._store.save(attempt, self._ttl_seconds)
        return state

    async def consume(self, state: str | None) -> AuthorizationAttempt:
        """state를 소비합니다 (일회용).

        저장소 TTL과 별개로 created_at 기준 만료도 확인합니다.

        Raises:
            InvalidStateError: state가 없거나, 이미 소비되었거나, 만료됨
        """
        if not state:
            raise InvalidStateError("Missing state")

        attempt = await self._store.consume(state)
        if attempt is None:
            logger.warning("Unknown or replayed OAuth state", extra={"state": state[:8]})
            raise InvalidStateError("Invalid or expired state")

        if self._clock() - attempt.created_at > timedelta(seconds=self._ttl_seconds):
            logger.warning("Expired OAuth state", extra={"state": state[:8]})
            raise InvalidStateError("Expired state")

        return attempt
