"""In-Memory Attempt Store.

AuthorizationAttemptStore 포트의 단일 인스턴스용 구현체입니다.
"""

from __future__ import annotations

import threading
import time
from typing import Callable

from apps.basalam_gateway.application.oauth.dto import AuthorizationAttempt


class InMemoryAttemptStore:
    """프로세스 메모리 기반 인증 시도 저장소.

    만료 항목은 save/consume 시점에 정리됩니다.
    lock 안에서 조회와 삭제가 함께 일어나므로 consume은 원자적입니다.
    """

    def __init__(self, monotonic: Callable[[], float] = time.monotonic) -> None:
        self._entries: dict[str, tuple[AuthorizationAttempt, float]] = {}
        self._lock = threading.Lock()
        self._monotonic = monotonic

    async def save(self, attempt: AuthorizationAttempt, ttl_seconds: int) -> None:
        """인증 시도 저장."""
        with self._lock:
            self._evict_expired()
            self._entries[attempt.state] = (attempt, self._monotonic() + ttl_seconds)

    async def consume(self, state: str) -> AuthorizationAttempt | None:
        """인증 시도 조회 및 삭제."""
        with self._lock:
            entry = self._entries.pop(state, None)
        if entry is None:
            return None

        attempt, deadline = entry
        if self._monotonic() >= deadline:
            return None
        return attempt

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _evict_expired(self) -> None:
        now = self._monotonic()
        expired = [state for state, (_, deadline) in self._entries.items() if now >= deadline]
        for state in expired:
            del self._entries[state]
