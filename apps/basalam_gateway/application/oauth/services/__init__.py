"""OAuth Application Services.

OAuth 인증 플로우 관련 로직을 캡슐화합니다.
"""

from apps.basalam_gateway.application.oauth.services.authorization_url import (
    AuthorizationRequestBuilder,
)
from apps.basalam_gateway.application.oauth.services.redirects import (
    build_dashboard_success_url,
    build_login_error_url,
)
from apps.basalam_gateway.application.oauth.services.state_token_issuer import (
    StateTokenIssuer,
)

__all__ = [
    "AuthorizationRequestBuilder",
    "StateTokenIssuer",
    "build_dashboard_success_url",
    "build_login_error_url",
]
