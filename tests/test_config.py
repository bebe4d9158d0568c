"""Tests for environment-driven settings and logging setup."""

import pytest
import structlog

from projectspec.config import Settings
from projectspec.log_config import configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PROJECTSPEC_ENTRY_POINT_POLICY", raising=False)
        settings = Settings(_env_file=None)

        assert settings.ENTRY_POINT_POLICY == "any"
        assert settings.REPORT_REACHABILITY is True
        assert settings.DEBUG is False

    def test_environment_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROJECTSPEC_ENTRY_POINT_POLICY", "single")
        monkeypatch.setenv("PROJECTSPEC_REPORT_REACHABILITY", "false")

        settings = Settings(_env_file=None)

        assert settings.ENTRY_POINT_POLICY == "single"
        assert settings.REPORT_REACHABILITY is False

    def test_rejects_unknown_policy(self) -> None:
        with pytest.raises(ValueError):
            Settings(ENTRY_POINT_POLICY="some", _env_file=None)


class TestLogging:
    @pytest.mark.parametrize("debug", [True, False])
    def test_configure(self, debug: bool) -> None:
        try:
            configure_logging(Settings(DEBUG=debug, LOG_LEVEL="warning", _env_file=None))
            logger = structlog.get_logger()
            logger.info("suppressed_event")
            logger.warning("emitted_event")
        finally:
            structlog.reset_defaults()

    def test_unknown_level_falls_back_to_info(self) -> None:
        try:
            configure_logging(Settings(LOG_LEVEL="chatty", _env_file=None))
        finally:
            structlog.reset_defaults()
