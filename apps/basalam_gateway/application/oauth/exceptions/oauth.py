"""OAuth Exceptions."""

from __future__ import annotations

from apps.basalam_gateway.application.common.exceptions.base import ApplicationError


class ConfigurationMissingError(ApplicationError):
    """OAuth 클라이언트 설정 누락 (배포 설정 오류).

    네트워크 호출 전에 검사되며, 런타임 상황이 아닌 배포 결함을 의미합니다.
    """

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"OAuth configuration is missing: {', '.join(self.missing)}")


class InvalidStateError(ApplicationError):
    """OAuth 상태 검증 실패 (없음, 만료, 재사용)."""

    def __init__(self, reason: str = "Invalid or expired state") -> None:
        super().__init__(reason)


class UpstreamCallError(ApplicationError):
    """업스트림이 요청을 거부했거나 통신에 실패한 경우.

    status_code가 None이면 응답을 받지 못한 전송 오류입니다.
    body는 진단용이며 사용자에게 노출하지 않습니다.
    """

    def __init__(self, message: str, status_code: int | None, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"{message} (status={status_code})")


class TokenExchangeFailedError(UpstreamCallError):
    """인증 코드 → 액세스 토큰 교환 실패."""

    def __init__(self, status_code: int | None, body: str) -> None:
        super().__init__("Token exchange failed", status_code, body)


class IdentityFetchFailedError(UpstreamCallError):
    """현재 사용자 프로필 조회 실패."""

    def __init__(self, status_code: int | None, body: str) -> None:
        super().__init__("Identity fetch failed", status_code, body)
