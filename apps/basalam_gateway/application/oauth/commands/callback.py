"""OAuthCallback Command.

OAuth 콜백 처리 Use Case입니다.

콜백 한 번은 아래 상태 중 하나로 끝나는 단일 선형 처리입니다:

    Start ─┬─ ErrorFromUpstream        → login?error=oauth_error
           ├─ CodeMissing              → login?error=no_code
           ├─ ConfigMissing            → login?error=config_error
           ├─ InvalidState             → login?error=invalid_state
           └─ Exchanging ─┬─ ExchangeFailed     → login?error=token_exchange_failed
                          ├─ InsufficientScope  → login?error=insufficient_permissions
                          └─ FetchingIdentity ─┬─ IdentityFailed → login?error=user_info_failed
                                               └─ Success        → dashboard?login=success&user=...

그 밖의 예외는 Unexpected(login?error=callback_error)로 변환되며, execute는 예외를 던지지 않습니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from apps.basalam_gateway.application.oauth.dto import (
    CALLBACK_ERROR_CODES,
    CallbackState,
    OAuthCallbackOutcome,
    OAuthCallbackRequest,
    OAuthClientConfig,
)
from apps.basalam_gateway.application.oauth.exceptions import (
    IdentityFetchFailedError,
    InvalidStateError,
    TokenExchangeFailedError,
)
from apps.basalam_gateway.application.oauth.services.redirects import (
    build_dashboard_success_url,
    build_login_error_url,
)

if TYPE_CHECKING:
    from apps.basalam_gateway.application.oauth.ports import (
        IdentityProvider,
        SessionStore,
        TokenExchanger,
    )
    from apps.basalam_gateway.application.oauth.services import StateTokenIssuer

logger = logging.getLogger(__name__)


class OAuthCallbackInteractor:
    """OAuth 콜백 Interactor (지휘자).

    Workflow:
        1. 업스트림 error / code / 설정 / state 검증 (네트워크 호출 없음)
        2. 토큰 교환 (TokenExchanger)
        3. 필수 스코프 검증 (설정된 경우)
        4. 사용자 조회 (IdentityProvider)
        5. 세션 저장 (SessionStore - 외부 협력자)
        6. 대시보드 리다이렉트
    """

    def __init__(
        self,
        *,
        state_issuer: "StateTokenIssuer",
        token_exchanger: "TokenExchanger",
        identity_provider: "IdentityProvider",
        session_store: "SessionStore",
        client_config: OAuthClientConfig,
        login_url: str,
        dashboard_url: str,
        required_scopes: Sequence[str] = (),
    ) -> None:
        self._state_issuer = state_issuer
        self._token_exchanger = token_exchanger
        self._identity_provider = identity_provider
        self._session_store = session_store
        self._client_config = client_config
        self._login_url = login_url
        self._dashboard_url = dashboard_url
        self._required_scopes = frozenset(required_scopes)

    async def execute(self, request: OAuthCallbackRequest) -> OAuthCallbackOutcome:
        """OAuth 콜백을 처리합니다.

        Returns:
            항상 리다이렉트 결과. 실패도 예외 대신 에러 코드로 반환됩니다.
        """
        try:
            return await self._handle(request)
        except Exception as e:
            logger.error(
                f"OAuth callback failed unexpectedly: {type(e).__name__}: {e}",
                exc_info=True,
            )
            return self._fail(CallbackState.UNEXPECTED)

    async def _handle(self, request: OAuthCallbackRequest) -> OAuthCallbackOutcome:
        if request.error:
            logger.warning(
                "Upstream returned OAuth error",
                extra={"error": request.error, "description": request.error_description},
            )
            return self._fail(CallbackState.ERROR_FROM_UPSTREAM)

        if not request.code:
            logger.warning("No authorization code in callback")
            return self._fail(CallbackState.CODE_MISSING)

        missing = self._client_config.missing_fields()
        if missing:
            logger.error("Missing OAuth configuration", extra={"missing": missing})
            return self._fail(CallbackState.CONFIG_MISSING)

        try:
            await self._state_issuer.consume(request.state)
        except InvalidStateError as e:
            logger.warning(f"OAuth state rejected: {e.message}")
            return self._fail(CallbackState.INVALID_STATE)

        # Exchanging
        try:
            token_set = await self._token_exchanger.exchange(
                code=request.code,
                client_id=self._client_config.client_id,
                client_secret=self._client_config.client_secret,
                redirect_uri=self._client_config.redirect_uri,
            )
        except TokenExchangeFailedError as e:
            logger.warning("Token exchange failed", extra={"status_code": e.status_code})
            logger.debug("Token exchange error body: %s", e.body)
            return self._fail(CallbackState.EXCHANGE_FAILED)

        # scope를 보고하지 않는 토큰 응답은 검증하지 않습니다
        missing_scopes = (
            self._required_scopes - token_set.granted_scopes
            if token_set.scope is not None
            else frozenset()
        )
        if missing_scopes:
            logger.warning(
                "Granted scopes are insufficient",
                extra={"missing_scopes": sorted(missing_scopes)},
            )
            return self._fail(CallbackState.INSUFFICIENT_SCOPE)

        # FetchingIdentity
        try:
            identity = await self._identity_provider.fetch_identity(token_set.access_token)
        except IdentityFetchFailedError as e:
            logger.warning("Identity fetch failed", extra={"status_code": e.status_code})
            logger.debug("Identity error body: %s", e.body)
            return self._fail(CallbackState.IDENTITY_FAILED)

        if not identity.display_name:
            logger.warning(
                "Upstream identity has no display name",
                extra={"external_user_id": identity.external_user_id},
            )

        await self._session_store.persist(token_set, identity)

        logger.info(
            "OAuth login successful",
            extra={
                "external_user_id": identity.external_user_id,
                "vendor_id": identity.vendor_id,
            },
        )
        return OAuthCallbackOutcome(
            state=CallbackState.SUCCESS,
            redirect_url=build_dashboard_success_url(
                self._dashboard_url,
                identity.display_name,
                identity.vendor_title,
            ),
            identity=identity,
        )

    def _fail(self, state: CallbackState) -> OAuthCallbackOutcome:
        return OAuthCallbackOutcome(
            state=state,
            redirect_url=build_login_error_url(self._login_url, CALLBACK_ERROR_CODES[state]),
        )
