"""Callback Controller.

OAuth 콜백 처리 엔드포인트입니다.
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from apps.basalam_gateway.application.oauth.commands import OAuthCallbackInteractor
from apps.basalam_gateway.application.oauth.dto import OAuthCallbackRequest
from apps.basalam_gateway.setup.dependencies import get_oauth_callback_interactor

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/callback",
    response_class=RedirectResponse,
    status_code=302,
    summary="OAuth 콜백 처리",
)
async def callback(
    code: str | None = Query(None, description="OAuth 인증 코드"),
    state: str | None = Query(None, description="상태 값"),
    error: str | None = Query(None, description="업스트림 OAuth 에러"),
    error_description: str | None = Query(None, description="업스트림 OAuth 에러 설명"),
    interactor: OAuthCallbackInteractor = Depends(get_oauth_callback_interactor),
) -> RedirectResponse:
    """OAuth 콜백을 처리합니다.

    성공이든 실패든 항상 프론트엔드로 리다이렉트합니다.
    실패 시 로그인 페이지의 error 쿼리 값으로 원인을 전달합니다.
    """
    outcome = await interactor.execute(
        OAuthCallbackRequest(
            code=code,
            state=state,
            error=error,
            error_description=error_description,
        )
    )
    logger.info(f"OAuth callback finished: state={outcome.state.value}")
    return RedirectResponse(url=outcome.redirect_url, status_code=302)
