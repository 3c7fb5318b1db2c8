"""OAuth domain ports."""

from apps.basalam_gateway.application.oauth.ports.provider_gateway import (
    IdentityProvider,
    TokenExchanger,
)
from apps.basalam_gateway.application.oauth.ports.session_store import SessionStore
from apps.basalam_gateway.application.oauth.ports.state_store import (
    AuthorizationAttemptStore,
)

__all__ = [
    "AuthorizationAttemptStore",
    "IdentityProvider",
    "SessionStore",
    "TokenExchanger",
]
