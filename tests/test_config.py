"""Unit tests for Config (fidlgen.config).

Tests cover:
- Defaults and validation
- save/load round trip
- from_env
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from fidlgen.config import Config


pytestmark = pytest.mark.unit


class TestConfigDefaults:
    def test_defaults(self):
        config = Config()
        assert config.output_dir == Path(".")
        assert config.include_base is None
        assert config.clang_format_path is None
        assert config.clang_format_style == "google"
        assert config.format_timeout == 60

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Config(format_timeout=0)

    def test_style_must_be_non_empty(self):
        with pytest.raises(ValidationError):
            Config(clang_format_style="")


class TestConfigPersistence:
    def test_save_and_load(self, tmp_path: Path):
        config = Config(
            output_dir=tmp_path / "out",
            include_base=tmp_path / "gen",
            clang_format_path="/usr/bin/clang-format",
            format_timeout=10,
        )
        path = config.save(tmp_path / "nested" / "config.json")
        assert path.exists()

        loaded = Config.load(path)
        assert loaded == config


class TestConfigFromEnv:
    def test_empty_env(self, clean_env):
        assert Config.from_env() == Config()

    def test_reads_variables(self, clean_env, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FIDLGEN_OUTPUT_DIR", "/tmp/out")
        monkeypatch.setenv("FIDLGEN_INCLUDE_BASE", "/tmp/gen")
        monkeypatch.setenv("FIDLGEN_CLANG_FORMAT", "clang-format-17")
        monkeypatch.setenv("FIDLGEN_CLANG_FORMAT_STYLE", "chromium")
        monkeypatch.setenv("FIDLGEN_FORMAT_TIMEOUT", "15")

        config = Config.from_env()
        assert config.output_dir == Path("/tmp/out")
        assert config.include_base == Path("/tmp/gen")
        assert config.clang_format_path == "clang-format-17"
        assert config.clang_format_style == "chromium"
        assert config.format_timeout == 15

    def test_invalid_timeout(self, clean_env, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FIDLGEN_FORMAT_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            Config.from_env()
