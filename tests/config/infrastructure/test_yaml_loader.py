"""Tests for YAML config loading infrastructure."""

from pathlib import Path

import pytest

from cmdchain.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from cmdchain.config.infrastructure.yaml_loader import YamlConfigLoader
from cmdchain.retry.domain.policy import RetryPolicy
from tests.config.fake_observer import FakeConfigObserver

# __file__ is tests/config/infrastructure/test_yaml_loader.py
FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


def _fixture(name: str) -> Path:
    return FIXTURES / name


class TestValidConfigLoading:
    """A valid YAML config loads correctly with all fields populated."""

    def test_loads_name(self) -> None:
        cfg = YamlConfigLoader(FakeConfigObserver()).load(_fixture("valid_config.yaml"))

        assert cfg.name == "order-service"

    def test_loads_retry_policy(self) -> None:
        cfg = YamlConfigLoader(FakeConfigObserver()).load(_fixture("valid_config.yaml"))

        assert cfg.retry == RetryPolicy(
            max_retries=4, initial_wait_ms=20, backoff_factor=3
        )

    def test_missing_retry_section_uses_defaults(self) -> None:
        cfg = YamlConfigLoader(FakeConfigObserver()).load(
            _fixture("defaults_config.yaml")
        )

        assert cfg.retry == RetryPolicy()

    def test_emits_config_loaded_event(self) -> None:
        observer = FakeConfigObserver()

        YamlConfigLoader(observer).load(_fixture("valid_config.yaml"))

        assert observer.loaded == [
            {
                "name": "order-service",
                "max_retries": 4,
                "initial_wait_ms": 20,
                "backoff_factor": 3,
            }
        ]
        assert observer.long_backoff_warnings == []


class TestEnvInterpolation:
    def test_env_vars_are_substituted_and_coerced(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PIPELINE_NAME", "billing")
        monkeypatch.setenv("ORDER_MAX_RETRIES", "6")
        monkeypatch.delenv("ORDER_INITIAL_WAIT_MS", raising=False)

        cfg = YamlConfigLoader(FakeConfigObserver()).load(_fixture("env_config.yaml"))

        assert cfg.name == "billing"
        assert cfg.retry.max_retries == 6
        assert cfg.retry.initial_wait_ms == 75

    def test_env_var_overrides_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIPELINE_NAME", "billing")
        monkeypatch.setenv("ORDER_MAX_RETRIES", "1")
        monkeypatch.setenv("ORDER_INITIAL_WAIT_MS", "5")

        cfg = YamlConfigLoader(FakeConfigObserver()).load(_fixture("env_config.yaml"))

        assert cfg.retry.initial_wait_ms == 5

    def test_all_missing_vars_are_reported(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("PIPELINE_NAME", raising=False)
        monkeypatch.delenv("ORDER_MAX_RETRIES", raising=False)
        monkeypatch.delenv("ORDER_INITIAL_WAIT_MS", raising=False)

        with pytest.raises(MissingEnvVarsError) as exc_info:
            YamlConfigLoader(FakeConfigObserver()).load(_fixture("env_config.yaml"))

        assert sorted(exc_info.value.missing_vars) == [
            "ORDER_MAX_RETRIES",
            "PIPELINE_NAME",
        ]


class TestInvalidConfig:
    def test_missing_file_raises_load_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError):
            YamlConfigLoader(FakeConfigObserver()).load(tmp_path / "absent.yaml")

    def test_out_of_range_values_raise_validation_error(self) -> None:
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(FakeConfigObserver()).load(_fixture("invalid_config.yaml"))

    def test_non_mapping_document_rejected(self) -> None:
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(FakeConfigObserver()).load(_fixture("not_a_mapping.yaml"))

    def test_no_event_emitted_on_failure(self) -> None:
        observer = FakeConfigObserver()

        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(observer).load(_fixture("invalid_config.yaml"))

        assert observer.loaded == []


class TestLongBackoffWarning:
    def test_warns_when_worst_case_backoff_exceeds_a_minute(self) -> None:
        observer = FakeConfigObserver()

        YamlConfigLoader(observer).load(_fixture("long_backoff_config.yaml"))

        # 100 + 500 + 2500 + 12500 + 62500 passes one minute on the fifth retry.
        assert observer.long_backoff_warnings == [60_000]
        assert len(observer.loaded) == 1

    def test_huge_retry_budget_loads_without_summing_the_whole_schedule(self) -> None:
        observer = FakeConfigObserver()

        cfg = YamlConfigLoader(observer).load(_fixture("huge_budget_config.yaml"))

        assert cfg.retry.max_retries == 1_000_000
        assert observer.long_backoff_warnings == [60_000]
