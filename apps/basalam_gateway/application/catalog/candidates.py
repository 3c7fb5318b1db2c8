"""Catalog candidate endpoints.

순서는 선호 순위입니다 (가장 구체적인 것부터). 순서 자체가 테스트 대상입니다.
"""

from apps.basalam_gateway.application.catalog.dto import CandidateEndpoint

DEFAULT_CATALOG_CANDIDATES: tuple[CandidateEndpoint, ...] = (
    CandidateEndpoint("vendor_products", "/v1/vendors/{vendor_id}/products"),
    CandidateEndpoint("products", "/v1/products"),
    CandidateEndpoint("vendor_me_products", "/v1/vendor/products"),
    CandidateEndpoint("my_products", "/v1/products/me"),
    CandidateEndpoint("vendor_products_v2", "/api_v2/vendors/{vendor_id}/products"),
)
