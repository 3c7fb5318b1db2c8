"""Catalog ports."""

from apps.basalam_gateway.application.catalog.ports.catalog_resolver import CatalogResolver

__all__ = ["CatalogResolver"]
