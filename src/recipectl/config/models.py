"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, recipectl.toml only contains
overrides. A project needs no config file at all to validate a single
recipe/output pair.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

# --- recipectl.toml sections ---


class EngineConfig(BaseModel):
    """[engine] section."""

    model_config = {"frozen": True}

    encoding: str = "utf-8"
    default_delimiter: str = ","

    @field_validator("default_delimiter")
    @classmethod
    def _non_empty_delimiter(cls, value: str) -> str:
        if not value:
            raise ValueError("default_delimiter must not be empty")
        return value


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True


class SuiteRun(BaseModel):
    """One [[suite.runs]] entry: a recipe and the output it must describe."""

    model_config = {"frozen": True}

    recipe: str
    output: str


class SuiteConfig(BaseModel):
    """[suite] section."""

    model_config = {"frozen": True}

    runs: list[SuiteRun] = Field(default_factory=list)


class RecipectlConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    engine: EngineConfig = Field(default_factory=EngineConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
    suite: SuiteConfig = Field(default_factory=SuiteConfig)
