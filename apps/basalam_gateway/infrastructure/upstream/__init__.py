"""Upstream (Basalam) HTTP clients."""

from apps.basalam_gateway.infrastructure.upstream.catalog_resolver import (
    EndpointFallbackResolver,
)
from apps.basalam_gateway.infrastructure.upstream.oauth_client import (
    IdentityFetcher,
    TokenExchangeClient,
)

__all__ = ["EndpointFallbackResolver", "IdentityFetcher", "TokenExchangeClient"]
