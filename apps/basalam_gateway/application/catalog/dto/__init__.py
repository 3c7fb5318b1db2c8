"""Catalog DTOs."""

from apps.basalam_gateway.application.catalog.dto.catalog import (
    CandidateEndpoint,
    CatalogQuery,
    CatalogResult,
    EndpointAttempt,
)

__all__ = ["CandidateEndpoint", "CatalogQuery", "CatalogResult", "EndpointAttempt"]
