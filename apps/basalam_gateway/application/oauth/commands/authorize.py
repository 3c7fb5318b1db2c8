"""OAuthAuthorize Command.

SSO 인증 URL 생성 Use Case입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from apps.basalam_gateway.application.oauth.dto import OAuthAuthorizeResponse

if TYPE_CHECKING:
    from apps.basalam_gateway.application.oauth.services import (
        AuthorizationRequestBuilder,
        StateTokenIssuer,
    )


class OAuthAuthorizeInteractor:
    """OAuth 인증 URL 생성 Interactor (지휘자).

    Workflow:
        1. 설정 검증 (state 발급 전, 누락 시 ConfigurationMissingError)
        2. state 발급 및 저장 (StateTokenIssuer)
        3. 인증 URL 생성 (AuthorizationRequestBuilder)
    """

    def __init__(
        self,
        state_issuer: "StateTokenIssuer",
        url_builder: "AuthorizationRequestBuilder",
        *,
        client_id: str | None,
        redirect_uri: str | None,
        scopes: Sequence[str],
    ) -> None:
        self._state_issuer = state_issuer
        self._url_builder = url_builder
        self._client_id = client_id
        self._redirect_uri = redirect_uri
        self._scopes = tuple(scopes)

    async def execute(self) -> OAuthAuthorizeResponse:
        """OAuth 인증 URL을 생성합니다.

        Raises:
            ConfigurationMissingError: client_id 또는 redirect_uri 누락
        """
        self._url_builder.ensure_configured(self._client_id, self._redirect_uri)

        state = await self._state_issuer.issue()
        authorization_url = self._url_builder.build_authorization_url(
            self._client_id,
            self._redirect_uri,
            self._scopes,
            state,
        )
        return OAuthAuthorizeResponse(authorization_url=authorization_url, state=state)
