"""AuthorizationAttemptStore Port.

OAuth state(인증 시도) 저장을 위한 Gateway 인터페이스입니다.
"""

from typing import Protocol

from apps.basalam_gateway.application.oauth.dto import AuthorizationAttempt


class AuthorizationAttemptStore(Protocol):
    """인증 시도 저장소 인터페이스.

    consume은 조회와 삭제가 원자적이어야 합니다.
    같은 state로 동시에 들어온 두 콜백 중 하나만 성공해야 합니다.

    구현체:
        - InMemoryAttemptStore (infrastructure/persistence_memory/)
        - RedisAttemptStore (infrastructure/persistence_redis/)
    """

    async def save(self, attempt: AuthorizationAttempt, ttl_seconds: int) -> None:
        """인증 시도 저장.

        Args:
            attempt: 인증 시도
            ttl_seconds: TTL
        """
        ...

    async def consume(self, state: str) -> AuthorizationAttempt | None:
        """인증 시도 조회 및 삭제 (일회용).

        Args:
            state: 상태 키

        Returns:
            인증 시도 또는 None (없거나 만료)
        """
        ...
