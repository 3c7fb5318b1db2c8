"""Login Controller.

SSO 인증 시작 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from apps.basalam_gateway.application.oauth.commands import OAuthAuthorizeInteractor
from apps.basalam_gateway.presentation.http.schemas import AuthorizeResponse
from apps.basalam_gateway.setup.dependencies import get_oauth_authorize_interactor

router = APIRouter()


@router.get(
    "/basalam",
    response_class=RedirectResponse,
    status_code=302,
    summary="Basalam SSO 로그인",
)
async def login(
    interactor: OAuthAuthorizeInteractor = Depends(get_oauth_authorize_interactor),
) -> RedirectResponse:
    """state를 발급하고 Basalam SSO로 리다이렉트합니다.

    설정 누락 시 ConfigurationMissingError → 500 (CONFIG_MISSING).
    """
    result = await interactor.execute()
    return RedirectResponse(url=result.authorization_url, status_code=302)


@router.get(
    "/basalam/url",
    response_model=AuthorizeResponse,
    summary="Basalam SSO 인증 URL 생성",
    description="JSON 응답으로 authorization_url 반환. 프론트엔드가 직접 이동해야 함.",
)
async def authorization_url(
    interactor: OAuthAuthorizeInteractor = Depends(get_oauth_authorize_interactor),
) -> AuthorizeResponse:
    result = await interactor.execute()
    return AuthorizeResponse(authorization_url=result.authorization_url, state=result.state)
