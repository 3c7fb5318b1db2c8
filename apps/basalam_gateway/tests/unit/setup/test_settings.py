"""Settings 단위 테스트."""

from __future__ import annotations

import pytest

from apps.basalam_gateway.setup.config import Settings


class TestEffectiveLogLevel:
    """로그 레벨 결정 테스트."""

    def test_default_deployment_logs_at_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("BASALAM_ENVIRONMENT", raising=False)
        monkeypatch.delenv("BASALAM_LOG_LEVEL", raising=False)

        assert Settings().effective_log_level == "INFO"

    def test_local_environment_logs_at_debug(self) -> None:
        assert Settings(environment="local").effective_log_level == "DEBUG"

    def test_explicit_log_level_wins_over_local(self) -> None:
        settings = Settings(environment="local", log_level="WARNING")

        assert settings.effective_log_level == "WARNING"
