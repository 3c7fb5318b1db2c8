"""OAuth domain exceptions."""

from apps.basalam_gateway.application.oauth.exceptions.oauth import (
    ConfigurationMissingError,
    IdentityFetchFailedError,
    InvalidStateError,
    TokenExchangeFailedError,
    UpstreamCallError,
)

__all__ = [
    "ConfigurationMissingError",
    "IdentityFetchFailedError",
    "InvalidStateError",
    "TokenExchangeFailedError",
    "UpstreamCallError",
]
