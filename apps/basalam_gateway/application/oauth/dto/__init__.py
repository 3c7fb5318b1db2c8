"""OAuth DTOs."""

from apps.basalam_gateway.application.oauth.dto.oauth import (
    CALLBACK_ERROR_CODES,
    AuthorizationAttempt,
    CallbackState,
    OAuthAuthorizeResponse,
    OAuthCallbackOutcome,
    OAuthCallbackRequest,
    OAuthClientConfig,
    TokenSet,
    UpstreamIdentity,
)

__all__ = [
    "CALLBACK_ERROR_CODES",
    "AuthorizationAttempt",
    "CallbackState",
    "OAuthAuthorizeResponse",
    "OAuthCallbackOutcome",
    "OAuthCallbackRequest",
    "OAuthClientConfig",
    "TokenSet",
    "UpstreamIdentity",
]
