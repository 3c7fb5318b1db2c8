"""Catalog exceptions."""

from apps.basalam_gateway.application.catalog.exceptions.catalog import (
    AllEndpointsFailedError,
)

__all__ = ["AllEndpointsFailedError"]
