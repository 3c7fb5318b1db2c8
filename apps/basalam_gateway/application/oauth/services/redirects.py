"""Callback redirect URL helpers."""

from __future__ import annotations

from urllib.parse import urlencode


def build_login_error_url(login_url: str, error_code: str) -> str:
    """로그인 페이지 에러 리다이렉트 URL.

    예시: https://frontend/fa/auth/login?error=no_code
    """
    return f"{login_url}?{urlencode({'error': error_code})}"


def build_dashboard_success_url(
    dashboard_url: str,
    display_name: str | None,
    vendor_title: str | None = None,
) -> str:
    """대시보드 성공 리다이렉트 URL.

    display_name이 없으면 user 파라미터를 생략합니다 (대시보드는 기본 인사말 표시).
    """
    params = {"login": "success"}
    if display_name:
        params["user"] = display_name
    if vendor_title:
        params["vendor"] = vendor_title
    return f"{dashboard_url}?{urlencode(params)}"
