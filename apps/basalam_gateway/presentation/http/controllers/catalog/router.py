"""Catalog Router."""

from fastapi import APIRouter

from apps.basalam_gateway.presentation.http.controllers.catalog.products import (
    router as products_router,
)

router = APIRouter()

router.include_router(products_router)
