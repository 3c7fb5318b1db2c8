"""Upstream OAuth Ports.

토큰 교환 및 사용자 조회를 담당하는 Gateway 인터페이스입니다.
"""

from typing import Protocol

from apps.basalam_gateway.application.oauth.dto import TokenSet, UpstreamIdentity


class TokenExchanger(Protocol):
    """인증 코드 → 토큰 교환 인터페이스.

    구현체:
        - TokenExchangeClient (infrastructure/upstream/)
    """

    async def exchange(
        self,
        *,
        code: str,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
    ) -> TokenSet:
        """인증 코드 교환.

        Raises:
            TokenExchangeFailedError: 업스트림 거부 또는 전송 오류
        """
        ...


class IdentityProvider(Protocol):
    """현재 사용자 조회 인터페이스.

    구현체:
        - IdentityFetcher (infrastructure/upstream/)
    """

    async def fetch_identity(self, access_token: str) -> UpstreamIdentity:
        """사용자 조회.

        Raises:
            IdentityFetchFailedError: 업스트림 거부 또는 전송 오류
        """
        ...
