"""OAuth DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


@dataclass(frozen=True, slots=True)
class AuthorizationAttempt:
    """인증 시도 (state 1회용 레코드)."""

    state: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class TokenSet:
    """업스트림에서 받은 토큰.

    토큰 값과 원본 payload는 repr에서 제외되어 로그에 전체가 남지 않습니다.
    """

    access_token: str = field(repr=False)
    token_type: str = "Bearer"
    expires_at: datetime | None = None
    refresh_token: str | None = field(default=None, repr=False)
    scope: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def granted_scopes(self) -> frozenset[str]:
        return frozenset((self.scope or "").split())


@dataclass(frozen=True, slots=True)
class UpstreamIdentity:
    """업스트림 현재 사용자."""

    external_user_id: str
    display_name: str | None = None
    vendor_id: str | None = None
    vendor_title: str | None = None


@dataclass(frozen=True, slots=True)
class OAuthClientConfig:
    """OAuth 클라이언트 설정 (배포 시 주입)."""

    client_id: str | None
    client_secret: str | None
    redirect_uri: str | None

    def missing_fields(self) -> list[str]:
        values = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
        }
        return [name for name, value in values.items() if not value]


@dataclass(frozen=True, slots=True)
class OAuthAuthorizeResponse:
    """OAuth 인증 응답."""

    authorization_url: str
    state: str


@dataclass(frozen=True, slots=True)
class OAuthCallbackRequest:
    """OAuth 콜백 요청 (쿼리 파라미터 그대로)."""

    code: str | None = None
    state: str | None = None
    error: str | None = None
    error_description: str | None = None


class CallbackState(str, Enum):
    """콜백 처리의 종료 상태."""

    ERROR_FROM_UPSTREAM = "error_from_upstream"
    CODE_MISSING = "code_missing"
    CONFIG_MISSING = "config_missing"
    INVALID_STATE = "invalid_state"
    EXCHANGE_FAILED = "exchange_failed"
    INSUFFICIENT_SCOPE = "insufficient_scope"
    IDENTITY_FAILED = "identity_failed"
    UNEXPECTED = "unexpected"
    SUCCESS = "success"


# 프론트엔드가 의존하는 로그인 페이지 에러 코드
CALLBACK_ERROR_CODES: dict[CallbackState, str] = {
    CallbackState.ERROR_FROM_UPSTREAM: "oauth_error",
    CallbackState.CODE_MISSING: "no_code",
    CallbackState.CONFIG_MISSING: "config_error",
    CallbackState.INVALID_STATE: "invalid_state",
    CallbackState.EXCHANGE_FAILED: "token_exchange_failed",
    CallbackState.INSUFFICIENT_SCOPE: "insufficient_permissions",
    CallbackState.IDENTITY_FAILED: "user_info_failed",
    CallbackState.UNEXPECTED: "callback_error",
}


@dataclass(frozen=True, slots=True)
class OAuthCallbackOutcome:
    """콜백 처리 결과 (항상 리다이렉트)."""

    state: CallbackState
    redirect_url: str
    identity: UpstreamIdentity | None = None

    @property
    def error_code(self) -> str | None:
        return CALLBACK_ERROR_CODES.get(self.state)

    @property
    def succeeded(self) -> bool:
        return self.state is CallbackState.SUCCESS
