"""Catalog HTTP Schemas."""

from typing import Any

from pydantic import BaseModel, Field


class EndpointAttemptSchema(BaseModel):
    """후보 엔드포인트 시도 기록."""

    endpoint: str
    status: int | None = None
    status_text: str
    error: str | None = None

    model_config = {"from_attributes": True}


class CatalogResponse(BaseModel):
    """카탈로그 조회 응답.

    data는 업스트림 응답 본문 그대로입니다.
    """

    success: bool = Field(default=True, description="성공 여부")
    endpoint: str = Field(..., description="성공한 엔드포인트")
    data: Any = Field(None, description="업스트림 응답 본문")
    diagnostics: list[EndpointAttemptSchema] = Field(default_factory=list)
