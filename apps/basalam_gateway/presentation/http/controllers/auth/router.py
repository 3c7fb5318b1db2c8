"""Auth Router.

인증 관련 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.basalam_gateway.presentation.http.controllers.auth.callback import (
    router as callback_router,
)
from apps.basalam_gateway.presentation.http.controllers.auth.login import (
    router as login_router,
)

router = APIRouter()

router.include_router(login_router)
router.include_router(callback_router)
