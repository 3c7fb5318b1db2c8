"""OAuth Commands.

OAuth 인증 관련 유스케이스(Command)입니다.
"""

from apps.basalam_gateway.application.oauth.commands.authorize import (
    OAuthAuthorizeInteractor,
)
from apps.basalam_gateway.application.oauth.commands.callback import (
    OAuthCallbackInteractor,
)

__all__ = ["OAuthAuthorizeInteractor", "OAuthCallbackInteractor"]
