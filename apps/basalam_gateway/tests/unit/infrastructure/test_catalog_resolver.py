"""EndpointFallbackResolver 단위 테스트."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from apps.basalam_gateway.application.catalog.candidates import DEFAULT_CATALOG_CANDIDATES
from apps.basalam_gateway.application.catalog.dto import CandidateEndpoint, CatalogQuery
from apps.basalam_gateway.application.catalog.exceptions import AllEndpointsFailedError
from apps.basalam_gateway.infrastructure.upstream import EndpointFallbackResolver

BASE_URL = "https://openapi.basalam.com"


def _resolver(handler, candidates=DEFAULT_CATALOG_CANDIDATES) -> EndpointFallbackResolver:
    return EndpointFallbackResolver(
        base_url=BASE_URL,
        candidates=candidates,
        transport=httpx.MockTransport(handler),
    )


class TestCandidateOrder:
    """후보 순서 자체가 계약입니다."""

    def test_default_candidate_order_is_stable(self) -> None:
        assert [c.template for c in DEFAULT_CATALOG_CANDIDATES] == [
            "/v1/vendors/{vendor_id}/products",
            "/v1/products",
            "/v1/vendor/products",
            "/v1/products/me",
            "/api_v2/vendors/{vendor_id}/products",
        ]

    def test_endpoints_with_vendor_id(self) -> None:
        resolver = EndpointFallbackResolver(base_url=BASE_URL + "/")

        assert resolver.build_endpoints("777") == [
            f"{BASE_URL}/v1/vendors/777/products",
            f"{BASE_URL}/v1/products",
            f"{BASE_URL}/v1/vendor/products",
            f"{BASE_URL}/v1/products/me",
            f"{BASE_URL}/api_v2/vendors/777/products",
        ]

    def test_vendor_templates_dropped_without_vendor_id(self) -> None:
        resolver = EndpointFallbackResolver(base_url=BASE_URL)

        assert resolver.build_endpoints(None) == [
            f"{BASE_URL}/v1/products",
            f"{BASE_URL}/v1/vendor/products",
            f"{BASE_URL}/v1/products/me",
        ]


class TestEndpointFallbackResolver:
    """EndpointFallbackResolver 테스트."""

    @pytest.mark.asyncio
    async def test_third_candidate_wins_after_two_404s(self) -> None:
        candidates = (
            CandidateEndpoint("first", "/first"),
            CandidateEndpoint("second", "/second"),
            CandidateEndpoint("third", "/third"),
        )

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/third":
                return httpx.Response(200, json={"id": 1})
            return httpx.Response(404, text="not found")

        result = await _resolver(handler, candidates).resolve_catalog(
            CatalogQuery(access_token="token")
        )

        assert result.succeeded_endpoint == f"{BASE_URL}/third"
        assert result.normalized_payload == {"id": 1}
        assert len(result.diagnostics) == 3
        assert [a.status for a in result.diagnostics] == [404, 404, 200]
        assert result.diagnostics[0].status_text == "Not Found"
        assert result.diagnostics[0].error == "not found"

    @pytest.mark.asyncio
    async def test_stops_at_first_success(self) -> None:
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url.path)
            return httpx.Response(200, json=[{"id": 1}, {"id": 2}])

        result = await _resolver(handler).resolve_catalog(
            CatalogQuery(access_token="token", vendor_id="777")
        )

        assert requested == ["/v1/vendors/777/products"]
        assert result.normalized_payload == [{"id": 1}, {"id": 2}]
        assert len(result.diagnostics) == 1

    @pytest.mark.asyncio
    async def test_sends_bearer_token_to_every_candidate(self) -> None:
        auth_headers: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            auth_headers.append(request.headers["Authorization"])
            return httpx.Response(403)

        with pytest.raises(AllEndpointsFailedError):
            await _resolver(handler).resolve_catalog(
                CatalogQuery(access_token="token-1", vendor_id="777")
            )

        assert auth_headers == ["Bearer token-1"] * 5

    @pytest.mark.asyncio
    async def test_all_failures_raise_with_full_diagnostics(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404)

        with pytest.raises(AllEndpointsFailedError) as exc_info:
            await _resolver(handler).resolve_catalog(
                CatalogQuery(access_token="token", vendor_id="777")
            )

        assert len(exc_info.value.diagnostics) == 5
        assert exc_info.value.statuses == [404] * 5

    @pytest.mark.asyncio
    async def test_skipped_vendor_candidates_not_in_diagnostics(self) -> None:
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url.path)
            return httpx.Response(404)

        with pytest.raises(AllEndpointsFailedError) as exc_info:
            await _resolver(handler).resolve_catalog(CatalogQuery(access_token="token"))

        assert len(exc_info.value.diagnostics) == 3
        assert all("{vendor_id}" not in a.endpoint for a in exc_info.value.diagnostics)
        assert all("/vendors/" not in path for path in requested)

    @pytest.mark.asyncio
    async def test_transport_error_is_recorded_and_cascade_continues(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/v1/products":
                raise httpx.ReadTimeout("timed out", request=request)
            if request.url.path == "/v1/vendor/products":
                return httpx.Response(200, json={"data": []})
            return httpx.Response(500)

        result = await _resolver(handler).resolve_catalog(CatalogQuery(access_token="token"))

        assert result.succeeded_endpoint == f"{BASE_URL}/v1/vendor/products"
        timeout_attempt = result.diagnostics[0]
        assert timeout_attempt.status is None
        assert timeout_attempt.status_text == "ReadTimeout"
        assert timeout_attempt.error == "timed out"

    @pytest.mark.asyncio
    async def test_non_json_success_body_counts_as_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/v1/products":
                return httpx.Response(200, text="<html>login</html>")
            return httpx.Response(200, json={"products": []})

        result = await _resolver(handler).resolve_catalog(CatalogQuery(access_token="token"))

        assert result.succeeded_endpoint == f"{BASE_URL}/v1/vendor/products"
        assert result.diagnostics[0].status == 200
        assert result.diagnostics[0].error == "Response body is not valid JSON"
        assert not result.diagnostics[0].ok

    @pytest.mark.asyncio
    async def test_long_error_body_is_truncated(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="x" * 2000)

        with pytest.raises(AllEndpointsFailedError) as exc_info:
            await _resolver(handler).resolve_catalog(CatalogQuery(access_token="token"))

        assert len(exc_info.value.diagnostics[0].error) == 503

    @pytest.mark.asyncio
    async def test_no_attemptable_candidates_raises_with_empty_diagnostics(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        candidates = (CandidateEndpoint("vendor_only", "/v1/vendors/{vendor_id}/products"),)

        with pytest.raises(AllEndpointsFailedError) as exc_info:
            await _resolver(handler, candidates).resolve_catalog(
                CatalogQuery(access_token="token")
            )

        assert exc_info.value.diagnostics == ()


class TestResolverCancellation:
    """호출자 취소 전파 테스트."""

    @pytest.mark.asyncio
    async def test_cancelled_error_propagates_and_stops_cascade(self) -> None:
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url.path)
            raise asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await _resolver(handler).resolve_catalog(CatalogQuery(access_token="token"))

        assert requested == ["/v1/products"]

    @pytest.mark.asyncio
    async def test_cancelling_caller_aborts_in_flight_request(self) -> None:
        requested: list[str] = []
        in_flight = asyncio.Event()

        async def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url.path)
            in_flight.set()
            await asyncio.sleep(60)
            return httpx.Response(200, json={"data": []})

        task = asyncio.create_task(
            _resolver(handler).resolve_catalog(CatalogQuery(access_token="token"))
        )
        await in_flight.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert requested == ["/v1/products"]
