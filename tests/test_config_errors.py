"""
Tests for configuration loading and the error model.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from date_tasks.config import AppConfig, load_config
from date_tasks.errors import (
    AppError,
    BadRequestError,
    NegativeTimeSpanError,
    ParseError,
    to_error_payload,
)


class TestLoadConfig:
    """Test environment-driven configuration."""

    def test_defaults(self) -> None:
        cfg = load_config()
        assert cfg.default_timezone == "UTC"
        assert cfg.negative_span == "error"
        assert cfg.tzinfo.key == "UTC"

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("DATE_TASKS_DEFAULT_TIMEZONE", "Europe/London")
        monkeypatch.setenv("DATE_TASKS_NEGATIVE_SPAN", "absolute")
        cfg = load_config()
        assert cfg.default_timezone == "Europe/London"
        assert cfg.negative_span == "absolute"

    def test_dotenv_file(self, tmp_path) -> None:
        """A .env file in the working directory is read."""
        (tmp_path / ".env").write_text("DATE_TASKS_DEFAULT_TIMEZONE=Asia/Tokyo\n")
        assert load_config().default_timezone == "Asia/Tokyo"

    def test_unknown_timezone_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig(default_timezone="Mars/Olympus_Mons")

    def test_unknown_policy_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("DATE_TASKS_NEGATIVE_SPAN", "wrap")
        with pytest.raises(ValidationError):
            load_config()

    def test_frozen(self) -> None:
        cfg = load_config()
        with pytest.raises(ValidationError):
            cfg.negative_span = "absolute"


class TestErrors:
    """Test error payloads."""

    def test_parse_error_payload(self) -> None:
        err = ParseError("bad date", {"value": "x", "format": "iso8601"})
        assert isinstance(err, AppError)
        assert isinstance(err, ValueError)
        assert str(err) == "bad date"
        assert to_error_payload(err) == {
            "code": "PARSE_ERROR",
            "message": "bad date",
            "details": {"value": "x", "format": "iso8601"},
        }

    def test_negative_span_is_bad_request(self) -> None:
        err = NegativeTimeSpanError("backwards")
        assert isinstance(err, BadRequestError)
        assert err.to_payload() == {"code": "BAD_REQUEST", "message": "backwards"}

    def test_unknown_exception(self) -> None:
        payload = to_error_payload(RuntimeError("boom"))
        assert payload == {"code": "INTERNAL", "message": "boom"}
