"""AuthorizationRequestBuilder - 업스트림 인증 URL 생성."""

from __future__ import annotations

from typing import Sequence
from urllib.parse import urlencode

from apps.basalam_gateway.application.oauth.exceptions import ConfigurationMissingError

DEFAULT_SSO_URL = "https://basalam.com/accounts/sso"


class AuthorizationRequestBuilder:
    """SSO 인증 URL 생성기.

    파라미터 순서와 스코프 순서가 고정되어 state를 제외하면 결과가 결정적입니다.
    """

    def __init__(self, sso_url: str = DEFAULT_SSO_URL) -> None:
        self._sso_url = sso_url

    def build_authorization_url(
        self,
        client_id: str | None,
        redirect_uri: str | None,
        scopes: Sequence[str],
        state: str,
    ) -> str:
        """인증 URL을 생성합니다.

        Raises:
            ConfigurationMissingError: client_id 또는 redirect_uri 누락
        """
        self.ensure_configured(client_id, redirect_uri)

        params = {
            "client_id": client_id,
            "redirect_uri": redirect_uri,
            "scope": " ".join(scopes),
            "state": state,
        }
        return f"{self._sso_url}?{urlencode(params)}"

    @staticmethod
    def ensure_configured(client_id: str | None, redirect_uri: str | None) -> None:
        missing = [
            name
            for name, value in (("client_id", client_id), ("redirect_uri", redirect_uri))
            if not value
        ]
        if missing:
            raise ConfigurationMissingError(missing)
