"""Tests for the employer sidecar loader and run parameter validation."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

from efw2.core.config import AppSettings
from efw2.core.exceptions import ConfigurationError
from efw2.ingest.config_loader import (
    SIDECAR_FILENAME,
    build_run_parameters,
    load_employer_config,
    load_settings,
    resolve_config_path,
)
from tests.fakes import write_config


class TestLoadEmployerConfig:
    def test_loads_and_normalizes(self, tmp_path):
        config = load_employer_config(write_config(tmp_path))
        assert config.ein == "123456789"
        assert config.user_id == "ABCDEFGH"
        assert config.zip5 == "62701"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_employer_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "efw2.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_employer_config(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "efw2.json"
        path.write_text("[]")
        with pytest.raises(ConfigurationError, match="JSON object"):
            load_employer_config(path)

    def test_bad_ein(self, tmp_path):
        with pytest.raises(ConfigurationError) as excinfo:
            load_employer_config(write_config(tmp_path, ein="12-345678"))
        assert "ein" in str(excinfo.value)
        assert "12-345678" not in str(excinfo.value)

    def test_bad_user_id(self, tmp_path):
        with pytest.raises(ConfigurationError, match="user_id"):
            load_employer_config(write_config(tmp_path, user_id="SHORT"))

    def test_missing_required_field(self, tmp_path):
        path = write_config(tmp_path)
        path.write_text('{"ein": "123456789", "user_id": "ABCDEFGH"}')
        with pytest.raises(ConfigurationError, match="company_name"):
            load_employer_config(path)

    def test_overrides_replace_file_values(self, tmp_path):
        config = load_employer_config(
            write_config(tmp_path),
            overrides={"ein": "98-7654321", "user_id": None, "vendor_code": "AB12"},
        )
        assert config.ein == "987654321"
        assert config.user_id == "ABCDEFGH"
        assert config.vendor_code == "AB12"


class TestResolveConfigPath:
    def test_explicit_path_wins(self, tmp_path):
        settings = AppSettings(config_file=tmp_path / "env.json")
        assert resolve_config_path(tmp_path / "cli.json", settings) == tmp_path / "cli.json"

    def test_settings_path(self, tmp_path):
        settings = AppSettings(config_file=tmp_path / "env.json")
        assert resolve_config_path(None, settings) == tmp_path / "env.json"

    def test_sidecar_beside_executable(self, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "argv", [str(tmp_path / "bin" / "efw2")])
        assert resolve_config_path(None, AppSettings()) == Path(tmp_path / "bin" / SIDECAR_FILENAME).resolve()


class TestBuildRunParameters:
    def test_none_values_use_defaults(self):
        params = build_run_parameters(tax_year=None, resub_wfid=None, final_year=False)
        assert params.tax_year == date.today().year - 1
        assert params.is_resubmission is False

    def test_explicit_values(self):
        params = build_run_parameters(tax_year=2023, resub_wfid="WF0001", final_year=True)
        assert params.tax_year == 2023
        assert params.resub_wfid == "WF0001"
        assert params.final_year is True

    def test_wfid_too_long(self):
        with pytest.raises(ConfigurationError, match="resub_wfid"):
            build_run_parameters(resub_wfid="TOOLONG1")


class TestLoadSettings:
    def test_defaults(self):
        assert load_settings().encoding.pad == "space"

    def test_bad_environment_is_a_configuration_error(self, monkeypatch):
        monkeypatch.setenv("EFW2_ENCODING_PAD", "tab")
        with pytest.raises(ConfigurationError, match="pad"):
            load_settings()
