"""SessionStore Port.

세션 저장소는 이 서비스 외부의 협력자입니다. 콜백은 persist만 사용합니다.
"""

from typing import Protocol

from apps.basalam_gateway.application.oauth.dto import TokenSet, UpstreamIdentity


class SessionStore(Protocol):
    """세션 저장소 인터페이스.

    구현체:
        - RedisSessionStore (infrastructure/persistence_redis/)
    """

    async def persist(self, token_set: TokenSet, identity: UpstreamIdentity) -> None:
        """로그인 세션 저장."""
        ...

    async def read_current(self, external_user_id: str) -> UpstreamIdentity | None:
        """현재 세션의 사용자 조회 (대시보드 계층용)."""
        ...
