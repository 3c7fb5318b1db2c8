"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
콜백 경로는 예외 대신 리다이렉트를 반환하므로 여기에 오지 않습니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.basalam_gateway.application.catalog.exceptions import AllEndpointsFailedError
from apps.basalam_gateway.application.common.exceptions import ApplicationError
from apps.basalam_gateway.application.oauth.exceptions import (
    ConfigurationMissingError,
    InvalidStateError,
    UpstreamCallError,
)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(ConfigurationMissingError)
    async def configuration_missing_handler(request: Request, exc: ConfigurationMissingError):
        return JSONResponse(
            status_code=500,
            content={"detail": exc.message, "code": "CONFIG_MISSING", "missing": exc.missing},
        )

    @app.exception_handler(AllEndpointsFailedError)
    async def all_endpoints_failed_handler(request: Request, exc: AllEndpointsFailedError):
        return JSONResponse(
            status_code=502,
            content={
                "detail": exc.message,
                "code": "ALL_ENDPOINTS_FAILED",
                "diagnostics": [attempt.to_dict() for attempt in exc.diagnostics],
            },
        )

    @app.exception_handler(InvalidStateError)
    async def invalid_state_handler(request: Request, exc: InvalidStateError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_STATE"},
        )

    @app.exception_handler(UpstreamCallError)
    async def upstream_call_handler(request: Request, exc: UpstreamCallError):
        return JSONResponse(
            status_code=502,
            content={"detail": exc.message, "code": "UPSTREAM_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
