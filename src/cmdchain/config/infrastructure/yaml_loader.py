"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from cmdchain.config.domain.config import PipelineConfig
from cmdchain.config.domain.observer import ConfigObserver
from cmdchain.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from cmdchain.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from cmdchain.retry.domain.backoff import backoff_exceeds

# Worst-case cumulative backoff above which a loaded policy is flagged.
LONG_BACKOFF_THRESHOLD_MS = 60_000


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a PipelineConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> PipelineConfig:
        """
        Load, interpolate, validate, and return a PipelineConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the document is not a mapping or the schema is violated.
            yaml.YAMLError: if the file is not valid YAML.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(resolved=interpolate(raw))
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(
            name=cfg.name,
            max_retries=cfg.retry.max_retries,
            initial_wait_ms=cfg.retry.initial_wait_ms,
            backoff_factor=cfg.retry.backoff_factor,
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigLoadError(path)
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if not isinstance(raw, dict):
        raise ConfigValidationError(f"{path} must contain a YAML mapping")
    return raw


def _check_missing_env_vars(raw: Any) -> None:
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(resolved: Any) -> PipelineConfig:
    try:
        return PipelineConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: PipelineConfig, observer: ConfigObserver) -> None:
    if backoff_exceeds(cfg.retry, threshold_ms=LONG_BACKOFF_THRESHOLD_MS):
        observer.config_long_backoff_warning(threshold_ms=LONG_BACKOFF_THRESHOLD_MS)
