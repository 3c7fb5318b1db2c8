"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from apps.basalam_gateway.setup.config import Settings, get_settings


# ============================================================
# Store Dependencies
# ============================================================


@lru_cache
def _get_memory_state_store():
    """프로세스 전역 In-Memory 상태 저장소 (싱글톤)."""
    from apps.basalam_gateway.infrastructure.persistence_memory import InMemoryAttemptStore

    return InMemoryAttemptStore()


def get_state_store(settings: Settings = Depends(get_settings)):
    """AuthorizationAttemptStore 제공자.

    BASALAM_STATE_STORE_BACKEND=redis 이면 다중 인스턴스용 Redis 저장소를 사용합니다.
    """
    if settings.state_store_backend == "redis":
        from apps.basalam_gateway.infrastructure.persistence_redis import (
            RedisAttemptStore,
            get_oauth_state_redis,
        )

        return RedisAttemptStore(get_oauth_state_redis())
    return _get_memory_state_store()


def get_session_store(settings: Settings = Depends(get_settings)):
    """SessionStore 제공자 (세션용 Redis)."""
    from apps.basalam_gateway.infrastructure.persistence_redis import (
        RedisSessionStore,
        get_session_redis,
    )

    return RedisSessionStore(get_session_redis(), settings.session_ttl_seconds)


# ============================================================
# Service Dependencies
# ============================================================


def get_state_issuer(
    store=Depends(get_state_store),
    settings: Settings = Depends(get_settings),
):
    """StateTokenIssuer 제공자."""
    from apps.basalam_gateway.application.oauth.services import StateTokenIssuer

    return StateTokenIssuer(store, ttl_seconds=settings.oauth_state_ttl_seconds)


def get_url_builder(settings: Settings = Depends(get_settings)):
    """AuthorizationRequestBuilder 제공자."""
    from apps.basalam_gateway.application.oauth.services import AuthorizationRequestBuilder

    return AuthorizationRequestBuilder(settings.sso_url)


def get_token_exchanger(settings: Settings = Depends(get_settings)):
    """TokenExchangeClient 제공자."""
    from apps.basalam_gateway.infrastructure.upstream import TokenExchangeClient

    return TokenExchangeClient(settings.token_url, settings.oauth_timeout_seconds)


def get_identity_provider(settings: Settings = Depends(get_settings)):
    """IdentityFetcher 제공자."""
    from apps.basalam_gateway.infrastructure.upstream import IdentityFetcher

    return IdentityFetcher(settings.identity_url, settings.oauth_timeout_seconds)


def get_catalog_resolver(settings: Settings = Depends(get_settings)):
    """EndpointFallbackResolver 제공자."""
    from apps.basalam_gateway.infrastructure.upstream import EndpointFallbackResolver

    return EndpointFallbackResolver(
        base_url=settings.catalog_api_base_url,
        timeout_seconds=settings.catalog_request_timeout_seconds,
    )


# ============================================================
# Use Case Dependencies
# ============================================================


async def get_oauth_authorize_interactor(
    state_issuer=Depends(get_state_issuer),
    url_builder=Depends(get_url_builder),
    settings: Settings = Depends(get_settings),
):
    """OAuthAuthorizeInteractor 제공자."""
    from apps.basalam_gateway.application.oauth.commands import OAuthAuthorizeInteractor

    return OAuthAuthorizeInteractor(
        state_issuer,
        url_builder,
        client_id=settings.client_id,
        redirect_uri=settings.redirect_uri,
        scopes=settings.scopes,
    )


async def get_oauth_callback_interactor(
    state_issuer=Depends(get_state_issuer),
    token_exchanger=Depends(get_token_exchanger),
    identity_provider=Depends(get_identity_provider),
    session_store=Depends(get_session_store),
    settings: Settings = Depends(get_settings),
):
    """OAuthCallbackInteractor 제공자."""
    from apps.basalam_gateway.application.oauth.commands import OAuthCallbackInteractor
    from apps.basalam_gateway.application.oauth.dto import OAuthClientConfig

    return OAuthCallbackInteractor(
        state_issuer=state_issuer,
        token_exchanger=token_exchanger,
        identity_provider=identity_provider,
        session_store=session_store,
        client_config=OAuthClientConfig(
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            redirect_uri=settings.redirect_uri,
        ),
        login_url=settings.login_url,
        dashboard_url=settings.dashboard_url,
        required_scopes=settings.required_scopes,
    )


async def get_resolve_catalog_service(resolver=Depends(get_catalog_resolver)):
    """ResolveCatalogQueryService 제공자."""
    from apps.basalam_gateway.application.catalog.queries import ResolveCatalogQueryService

    return ResolveCatalogQueryService(resolver)
