"""Tests for recipe models: aliases, spec mode precedence, configs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recipectl.domain.recipe import Layout, Recipe, Specification, SpecMode


class TestSpecificationMode:
    def test_value_is_literal(self) -> None:
        assert Specification(type="string", value="HDR").mode is SpecMode.LITERAL

    def test_length_is_fixed_length(self) -> None:
        assert Specification(type="string", length=3).mode is SpecMode.LENGTH

    def test_neither_is_free_text(self) -> None:
        assert Specification(type="string").mode is SpecMode.FREE_TEXT

    def test_value_wins_over_length(self) -> None:
        spec = Specification(type="string", value="AB", length=5)
        assert spec.mode is SpecMode.LITERAL

    def test_empty_value_is_still_literal(self) -> None:
        assert Specification(type="string", value="").mode is SpecMode.LITERAL

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(ValidationError, match="length"):
            Specification(type="string", length=-5)

    def test_frozen(self) -> None:
        spec = Specification(type="string")
        with pytest.raises(ValidationError):
            spec.value = "x"  # type: ignore[misc]


class TestLayout:
    def test_camel_case_aliases(self) -> None:
        layout = Layout.model_validate(
            {
                "kind": "fixed",
                "name": "header",
                "numberOfRows": 2,
                "specs": [{"type": "string", "value": "HDR"}],
                "configs": [{"key": "regex", "value": "[^|]*"}],
            }
        )
        assert layout.number_of_rows == 2
        assert layout.specs[0].value == "HDR"
        assert layout.configs[0].key == "regex"

    def test_python_field_names_accepted(self) -> None:
        layout = Layout(kind="fixed", number_of_rows=3)
        assert layout.number_of_rows == 3
        assert layout.specs == ()

    def test_negative_row_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Layout(kind="fixed", number_of_rows=-1)

    def test_null_specs_and_configs_are_empty(self) -> None:
        layout = Layout.model_validate({"kind": "fixed", "specs": None, "configs": None})
        assert layout.specs == ()
        assert layout.configs == ()

    def test_config_lookup_is_case_insensitive(self) -> None:
        layout = Layout(kind="regex", configs=[{"key": "ReGeX", "value": "[a-z]+"}])
        assert layout.config_value("regex") == "[a-z]+"
        assert layout.config_value("REGEX") == "[a-z]+"

    def test_missing_config_is_none(self) -> None:
        assert Layout(kind="regex").config_value("regex") is None

    def test_duplicate_config_keys_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate config key"):
            Layout(
                kind="regex",
                configs=[{"key": "regex", "value": "a"}, {"key": "REGEX", "value": "b"}],
            )


class TestRecipe:
    def test_from_layouts(self) -> None:
        recipe = Recipe.from_layouts(
            [
                {"kind": "fixed", "numberOfRows": 1},
                {"kind": "regex", "numberOfRows": 4},
            ]
        )
        assert [layout.kind for layout in recipe.layouts] == ["fixed", "regex"]
        assert recipe.total_rows == 5

    def test_empty_recipe(self) -> None:
        assert Recipe.from_layouts([]).total_rows == 0
