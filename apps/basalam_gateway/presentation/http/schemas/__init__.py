"""HTTP Schemas."""

from apps.basalam_gateway.presentation.http.schemas.auth import AuthorizeResponse
from apps.basalam_gateway.presentation.http.schemas.catalog import (
    CatalogResponse,
    EndpointAttemptSchema,
)

__all__ = ["AuthorizeResponse", "CatalogResponse", "EndpointAttemptSchema"]
