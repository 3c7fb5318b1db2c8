"""Catalog queries."""

from apps.basalam_gateway.application.catalog.queries.resolve_catalog import (
    ResolveCatalogQueryService,
)

__all__ = ["ResolveCatalogQueryService"]
