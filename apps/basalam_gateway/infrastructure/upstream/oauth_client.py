"""Upstream OAuth Clients.

TokenExchanger / IdentityProvider 포트의 httpx 구현체입니다.
두 호출 모두 재시도하지 않습니다 (사용된 인증 코드는 재시도해도 안전하지 않음).
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import httpx

from apps.basalam_gateway.application.oauth.dto import TokenSet, UpstreamIdentity
from apps.basalam_gateway.application.oauth.exceptions import (
    IdentityFetchFailedError,
    TokenExchangeFailedError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0
JSON_HEADERS = {"Accept": "application/json"}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenExchangeClient:
    """인증 코드 → 액세스 토큰 교환 클라이언트.

    client_secret과 응답 원문은 DEBUG 레벨 외에는 로그에 남기지 않습니다.
    """

    def __init__(
        self,
        token_url: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._token_url = token_url
        self._timeout = timeout_seconds
        self._transport = transport
        self._clock = clock

    async def exchange(
        self,
        *,
        code: str,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
    ) -> TokenSet:
        """인증 코드를 토큰으로 교환합니다.

        Raises:
            TokenExchangeFailedError: non-2xx, 전송 오류, access_token 누락
        """
        body = {
            "grant_type": "authorization_code",
            "client_id": client_id,
            "client_secret": client_secret,
            "redirect_uri": redirect_uri,
            "code": code,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(self._token_url, json=body, headers=JSON_HEADERS)
        except httpx.HTTPError as e:
            logger.warning(f"Token request failed: {type(e).__name__}")
            raise TokenExchangeFailedError(None, str(e)) from e

        if not response.is_success:
            logger.warning(f"Token endpoint returned {response.status_code}")
            raise TokenExchangeFailedError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise TokenExchangeFailedError(response.status_code, response.text) from e

        if not isinstance(data, dict) or not data.get("access_token"):
            raise TokenExchangeFailedError(response.status_code, "Response has no access_token")

        token_set = self._to_token_set(data)
        logger.info(
            "Tokens received",
            extra={
                "token_type": token_set.token_type,
                "expires_at": token_set.expires_at.isoformat() if token_set.expires_at else None,
                "access_token_length": len(token_set.access_token),
            },
        )
        return token_set

    def _to_token_set(self, data: dict[str, Any]) -> TokenSet:
        expires_at = None
        expires_in = data.get("expires_in")
        if expires_in is not None:
            try:
                expires_at = self._clock() + timedelta(seconds=int(expires_in))
            except (TypeError, ValueError):
                logger.warning("Ignoring non-numeric expires_in")

        return TokenSet(
            access_token=str(data["access_token"]),
            token_type=data.get("token_type") or "Bearer",
            expires_at=expires_at,
            refresh_token=data.get("refresh_token"),
            scope=data.get("scope"),
            raw=data,
        )


class IdentityFetcher:
    """현재 사용자 조회 클라이언트."""

    def __init__(
        self,
        identity_url: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._identity_url = identity_url
        self._timeout = timeout_seconds
        self._transport = transport

    async def fetch_identity(self, access_token: str) -> UpstreamIdentity:
        """Bearer 토큰으로 사용자 프로필을 조회합니다.

        Raises:
            IdentityFetchFailedError: non-2xx, 전송 오류, 사용자 ID 누락
        """
        headers = {**JSON_HEADERS, "Authorization": f"Bearer {access_token}"}

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(self._identity_url, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"Identity request failed: {type(e).__name__}")
            raise IdentityFetchFailedError(None, str(e)) from e

        if not response.is_success:
            logger.warning(f"Identity endpoint returned {response.status_code}")
            raise IdentityFetchFailedError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            raise IdentityFetchFailedError(response.status_code, response.text) from e

        if isinstance(payload, dict) and "id" not in payload and isinstance(payload.get("data"), dict):
            payload = payload["data"]
        if not isinstance(payload, dict) or payload.get("id") is None:
            raise IdentityFetchFailedError(response.status_code, "Response has no user id")

        return self._to_identity(payload)

    @staticmethod
    def _to_identity(payload: dict[str, Any]) -> UpstreamIdentity:
        vendor = payload.get("vendor")
        if not isinstance(vendor, dict):
            vendor = {}
        vendor_id = payload.get("vendor_id") or vendor.get("id")
        return UpstreamIdentity(
            external_user_id=str(payload["id"]),
            display_name=payload.get("name") or payload.get("username") or None,
            vendor_id=str(vendor_id) if vendor_id is not None else None,
            vendor_title=vendor.get("title"),
        )
