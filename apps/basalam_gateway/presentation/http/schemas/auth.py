"""Auth HTTP Schemas."""

from pydantic import BaseModel, Field


class AuthorizeResponse(BaseModel):
    """SSO 인증 URL 응답."""

    authorization_url: str = Field(..., description="SSO 인증 URL")
    state: str = Field(..., description="CSRF 방지용 상태 값")
