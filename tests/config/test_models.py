"""Tests for the recipectl.toml section models."""

import pytest
from pydantic import ValidationError

from recipectl.config.models import EngineConfig, RecipectlConfig, SuiteConfig, SuiteRun


class TestDefaults:
    def test_root_defaults(self) -> None:
        cfg = RecipectlConfig()
        assert cfg.engine.encoding == "utf-8"
        assert cfg.engine.default_delimiter == ","
        assert cfg.plugins.enabled is True
        assert cfg.suite.runs == []

    def test_frozen(self) -> None:
        cfg = EngineConfig()
        with pytest.raises(ValidationError):
            cfg.encoding = "latin-1"  # type: ignore[misc]


class TestEngineConfig:
    def test_custom_delimiter(self) -> None:
        assert EngineConfig(default_delimiter="|").default_delimiter == "|"

    def test_empty_delimiter_rejected(self) -> None:
        with pytest.raises(ValidationError, match="default_delimiter"):
            EngineConfig(default_delimiter="")


class TestSuiteConfig:
    def test_runs_from_dicts(self) -> None:
        cfg = SuiteConfig.model_validate(
            {"runs": [{"recipe": "recipe.yaml", "output": "testfile.txt"}]}
        )
        assert cfg.runs == [SuiteRun(recipe="recipe.yaml", output="testfile.txt")]

    def test_run_requires_both_paths(self) -> None:
        with pytest.raises(ValidationError):
            SuiteRun.model_validate({"recipe": "recipe.yaml"})
