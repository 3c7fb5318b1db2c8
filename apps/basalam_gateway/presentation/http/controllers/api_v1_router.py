"""API v1 Router."""

from fastapi import APIRouter

from apps.basalam_gateway.presentation.http.controllers.auth.router import (
    router as auth_router,
)
from apps.basalam_gateway.presentation.http.controllers.catalog.router import (
    router as catalog_router,
)

router = APIRouter()

# Auth endpoints
router.include_router(auth_router, prefix="/auth", tags=["auth"])

# Catalog endpoints
router.include_router(catalog_router, prefix="/basalam", tags=["catalog"])
