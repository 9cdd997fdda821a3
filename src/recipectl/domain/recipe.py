"""Recipe models — layouts, field specifications, and layout configs.

A recipe is an ordered sequence of layouts. Each layout describes a
contiguous block of rows sharing a kind (column-splitting strategy),
a name, a row count, and the ordered field specifications every row
must satisfy.

Serialized recipes use camelCase keys (``numberOfRows``); the models
accept both the alias and the Python field name. All models are frozen.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class SpecMode(StrEnum):
    """Which check a field specification performs."""

    LITERAL = "literal"
    LENGTH = "length"
    FREE_TEXT = "free_text"


class KeyValue(BaseModel):
    """One ``key``/``value`` pair from a layout's ``configs`` list."""

    model_config = _MODEL_CONFIG

    key: str
    value: str


class Specification(BaseModel):
    """Rule a single field (or fixed-width slice) must satisfy.

    Attributes:
        type: Field validator name (e.g. ``"string"``, ``"datetime"``).
        value: Exact literal the field must equal.
        format: Date/time pattern for ``datetime`` fields.
        length: Number of characters the field must provide.
    """

    model_config = _MODEL_CONFIG

    type: str
    value: str | None = None
    format: str | None = None
    length: int = Field(default=0, ge=0)

    @property
    def mode(self) -> SpecMode:
        """Active mode. Precedence: literal > fixed length > free text."""
        if self.value is not None:
            return SpecMode.LITERAL
        if self.length != 0:
            return SpecMode.LENGTH
        return SpecMode.FREE_TEXT


class Layout(BaseModel):
    """A block of ``number_of_rows`` rows validated with the same specs."""

    model_config = _MODEL_CONFIG

    kind: str
    name: str = ""
    number_of_rows: int = Field(default=0, ge=0)
    specs: tuple[Specification, ...] = ()
    configs: tuple[KeyValue, ...] = ()

    @field_validator("specs", "configs", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("configs")
    @classmethod
    def _unique_config_keys(cls, value: tuple[KeyValue, ...]) -> tuple[KeyValue, ...]:
        seen: set[str] = set()
        for item in value:
            folded = item.key.casefold()
            if folded in seen:
                msg = f"Duplicate config key: {item.key!r} (keys are case-insensitive)"
                raise ValueError(msg)
            seen.add(folded)
        return value

    def config_value(self, key: str) -> str | None:
        """Return the config value for *key* (case-insensitive), or None."""
        folded = key.casefold()
        for item in self.configs:
            if item.key.casefold() == folded:
                return item.value
        return None


class Recipe(BaseModel):
    """Ordered layouts describing the full expected file structure."""

    model_config = _MODEL_CONFIG

    layouts: tuple[Layout, ...] = ()

    @classmethod
    def from_layouts(cls, data: Any) -> Recipe:
        """Build a recipe from a deserialized top-level layout sequence."""
        return cls.model_validate({"layouts": data})

    @property
    def total_rows(self) -> int:
        return sum(layout.number_of_rows for layout in self.layouts)
