"""Sidecar configuration loader for the employer identity."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from efw2.core.config import AppSettings
from efw2.core.exceptions import ConfigurationError
from efw2.models.employer import EmployerConfig
from efw2.models.run import RunParameters

logger = logging.getLogger(__name__)

SIDECAR_FILENAME = "efw2.json"


def default_config_path() -> Path:
    """``efw2.json`` in the directory of the running executable."""
    return Path(sys.argv[0]).resolve().parent / SIDECAR_FILENAME


def resolve_config_path(explicit: str | Path | None = None, settings: AppSettings | None = None) -> Path:
    if explicit:
        return Path(explicit)
    if settings is not None and settings.config_file is not None:
        return settings.config_file
    return default_config_path()


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}" for err in exc.errors()
    )


def load_employer_config(path: str | Path, overrides: dict[str, Any] | None = None) -> EmployerConfig:
    """Load and validate the employer sidecar file.

    ``overrides`` (e.g. an EIN given on the command line) replace file
    values before validation; ``None`` entries are ignored.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Configuration file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in configuration file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})

    try:
        config = EmployerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration in {path}: {_describe(exc)}") from exc
    logger.info("Loaded employer configuration from %s", path)
    return config


def build_run_parameters(**kwargs: Any) -> RunParameters:
    """Validate run parameters; ``None`` values fall back to their defaults."""
    try:
        return RunParameters.model_validate({k: v for k, v in kwargs.items() if v is not None})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid run parameters: {_describe(exc)}") from exc


def load_settings() -> AppSettings:
    """Read ``EFW2_*`` environment settings, failing as a ConfigurationError."""
    try:
        return AppSettings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid EFW2_* environment settings: {_describe(exc)}") from exc
