"""Tests for EnvReader class."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from ghostscript_transcoder.config.env import EnvReader


class TestEnvReaderGetStr:
    """Tests for EnvReader.get_str method."""

    def test_returns_value_when_set(self) -> None:
        """Should return the value when environment variable is set."""
        reader = EnvReader(env={"MY_VAR": "hello"})
        assert reader.get_str("MY_VAR") == "hello"

    def test_returns_default_when_not_set(self) -> None:
        """Should return default when environment variable is not set."""
        reader = EnvReader(env={})
        assert reader.get_str("MY_VAR", "default") == "default"

    def test_returns_empty_string_when_set_to_empty(self) -> None:
        """Should return empty string when variable is set to empty."""
        reader = EnvReader(env={"MY_VAR": ""})
        assert reader.get_str("MY_VAR", "default") == ""

    def test_uses_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read os.environ when no mapping is injected."""
        monkeypatch.setenv("GST_TEST_VAR", "from-env")
        assert EnvReader().get_str("GST_TEST_VAR") == "from-env"


class TestEnvReaderGetFloat:
    """Tests for EnvReader.get_float method."""

    def test_parses_float(self) -> None:
        """Should parse a float value."""
        reader = EnvReader(env={"GST_TIMEOUT": "12.5"})
        assert reader.get_float("GST_TIMEOUT") == 12.5

    def test_parses_integer_string(self) -> None:
        """Should parse an integer string as float."""
        reader = EnvReader(env={"GST_TIMEOUT": "60"})
        assert reader.get_float("GST_TIMEOUT", 300) == 60.0

    def test_returns_default_on_invalid(self, caplog: pytest.LogCaptureFixture) -> None:
        """Should log a warning and return default for invalid values."""
        reader = EnvReader(env={"GST_TIMEOUT": "soon"})
        with caplog.at_level(logging.WARNING):
            assert reader.get_float("GST_TIMEOUT", 300) == 300
        assert "Invalid float value for GST_TIMEOUT" in caplog.text


class TestEnvReaderGetPath:
    """Tests for EnvReader.get_path method."""

    def test_returns_existing_path(self, tmp_path: Path) -> None:
        """Should return the path when it exists."""
        reader = EnvReader(env={"GST_WORKING_DIR": str(tmp_path)})
        assert reader.get_path("GST_WORKING_DIR") == tmp_path

    def test_missing_path_returns_default(self, tmp_path: Path) -> None:
        """Should return default when the path must exist but doesn't."""
        reader = EnvReader(env={"GST_WORKING_DIR": str(tmp_path / "missing")})
        fallback = Path("/fallback")
        assert reader.get_path("GST_WORKING_DIR", default=fallback) == fallback

    def test_missing_path_allowed(self, tmp_path: Path) -> None:
        """Should return a missing path when must_exist is False."""
        missing = tmp_path / "missing"
        reader = EnvReader(env={"GST_LOG_FILE": str(missing)})
        assert reader.get_path("GST_LOG_FILE", must_exist=False) == missing


class TestEnvReaderGetStrList:
    """Tests for EnvReader.get_str_list method."""

    def test_splits_on_comma(self) -> None:
        """Should split on commas and keep order."""
        reader = EnvReader(env={"GST_BINARIES": "gswin64c,gs"})
        assert reader.get_str_list("GST_BINARIES") == ["gswin64c", "gs"]

    def test_strips_and_drops_empty(self) -> None:
        """Should strip whitespace and drop empty items."""
        reader = EnvReader(env={"GST_BINARIES": " gs , ,/opt/gs/bin/gs "})
        assert reader.get_str_list("GST_BINARIES") == ["gs", "/opt/gs/bin/gs"]

    def test_not_set_returns_empty(self) -> None:
        """Should return an empty list when not set."""
        assert EnvReader(env={}).get_str_list("GST_BINARIES") == []

    def test_custom_separator(self) -> None:
        """Should honor a custom separator."""
        reader = EnvReader(env={"MY_VAR": "a:b"})
        assert reader.get_str_list("MY_VAR", separator=":") == ["a", "b"]
