"""Basalam Gateway Application Entry Point.

Basalam SSO 로그인과 벤더 카탈로그 조회를 담당하는 게이트웨이 서비스입니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.basalam_gateway.presentation.http.controllers import root_router
from apps.basalam_gateway.presentation.http.errors import register_exception_handlers
from apps.basalam_gateway.setup.config import get_settings
from apps.basalam_gateway.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    settings = get_settings()
    logger.info(
        "Starting Basalam Gateway",
        extra={
            "client_id_set": bool(settings.client_id),
            "redirect_uri_set": bool(settings.redirect_uri),
            "state_store_backend": settings.state_store_backend,
        },
    )
    yield
    logger.info("Shutting down Basalam Gateway")


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    setup_logging(settings.effective_log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Basalam SSO 및 카탈로그 게이트웨이",
        version="1.0.0",
        lifespan=lifespan,
    )

    cors_origins = (
        settings.cors_origins.split(",") if settings.cors_origins else [settings.frontend_url]
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(root_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.basalam_gateway.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
