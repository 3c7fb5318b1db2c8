"""HTTP Auth Dependencies."""

from apps.basalam_gateway.presentation.http.auth.dependencies import (
    get_upstream_access_token,
)

__all__ = ["get_upstream_access_token"]
