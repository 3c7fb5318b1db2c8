"""Application Settings.

env_prefix="BASALAM_" 사용으로 BASALAM_CLIENT_ID 등의 환경변수 매핑.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정.

    환경변수에서 자동으로 로드됩니다.

    예시:
        BASALAM_CLIENT_ID → client_id
        BASALAM_STATE_STORE_BACKEND → state_store_backend
    """

    # Service
    app_name: str = "Basalam Gateway"
    environment: str = "production"

    # OAuth client (배포 시 반드시 설정)
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    redirect_uri: Optional[str] = None

    # 스코프 순서는 인증 URL에 그대로 반영됩니다 (read → write → order)
    scopes: tuple[str, ...] = (
        "vendor.product.read",
        "vendor.product.write",
        "customer.order.read",
    )
    # 비어 있으면 콜백에서 scope 검증을 건너뜁니다
    required_scopes: tuple[str, ...] = ()

    # Upstream endpoints
    sso_url: str = "https://basalam.com/accounts/sso"
    token_url: str = "https://auth.basalam.com/oauth/token"
    identity_url: str = "https://api.basalam.com/api/user"
    catalog_api_base_url: str = "https://openapi.basalam.com"

    # Upstream timeouts
    oauth_timeout_seconds: float = 10.0
    catalog_request_timeout_seconds: float = 8.0

    # OAuth state
    oauth_state_ttl_seconds: int = 600
    state_store_backend: Literal["memory", "redis"] = "memory"

    # Redis
    redis_oauth_state_url: str = "redis://localhost:6379/3"
    redis_session_url: str = "redis://localhost:6379/4"
    session_ttl_seconds: int = 60 * 60 * 24
    # 콜백 요청 경로에서 사용
    redis_socket_timeout_seconds: float = 2.0
    redis_max_connections: int = 20
    redis_max_retries: int = 2

    # Frontend redirects
    frontend_url: str = "http://localhost:3000"
    login_path: str = "/fa/auth/login"
    dashboard_path: str = "/fa/dashboard"
    cors_origins: Optional[str] = None

    # 명시하면 environment와 무관하게 우선합니다
    log_level: Optional[str] = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="BASALAM_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("client_id", "client_secret", "redirect_uri", mode="before")
    @classmethod
    def _empty_string_to_none(cls, value: Optional[str]):
        """빈 문자열을 None으로 변환."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def effective_log_level(self) -> str:
        if self.log_level:
            return self.log_level
        return "DEBUG" if self.environment == "local" else "INFO"

    @property
    def login_url(self) -> str:
        return f"{self.frontend_url.rstrip('/')}{self.login_path}"

    @property
    def dashboard_url(self) -> str:
        return f"{self.frontend_url.rstrip('/')}{self.dashboard_path}"


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환 (FastAPI 공식 패턴)."""
    return Settings()
