"""Tests for PluginManager — registration of plugin validators."""

from __future__ import annotations

from recipe_builders import layout, recipe, spec

from recipectl.domain.recipe import Layout, Specification
from recipectl.plugins import PluginManager, hookimpl
from recipectl.services.walker import RecipeWalker
from recipectl.validators import FieldResult, FieldValidator, LayoutValidator, default_registry
from recipectl.validators.registry import ValidatorRegistry


class DigitsFieldValidator(FieldValidator):
    """Accepts a field made only of ASCII digits."""

    @property
    def name(self) -> str:
        return "digits"

    def evaluate(self, field: str, offset: int, spec: Specification) -> FieldResult:
        return FieldResult(field.isascii() and field.isdigit(), offset)


class UpperLayoutValidator(LayoutValidator):
    @property
    def name(self) -> str:
        return "upper"

    def _validate_line(self, line: str, layout: Layout, registry: ValidatorRegistry) -> bool:
        return line.isupper()


class _DigitsPlugin:
    @hookimpl
    def register_field_validators(self) -> dict[str, FieldValidator]:
        return {"digits": DigitsFieldValidator()}


class _UpperPlugin:
    @hookimpl
    def register_layout_validators(self) -> dict[str, LayoutValidator]:
        return {"Upper": UpperLayoutValidator()}


class _BrokenPlugin:
    @hookimpl
    def register_field_validators(self) -> dict[str, FieldValidator]:
        raise RuntimeError("boom")


class _NotADictPlugin:
    @hookimpl
    def register_layout_validators(self) -> list[str]:
        return ["upper"]


class _WrongTypePlugin:
    @hookimpl
    def register_field_validators(self) -> dict[str, object]:
        return {"bogus": object(), "digits": DigitsFieldValidator()}


class TestPluginManager:
    def test_register_plugin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DigitsPlugin(), name="digits-plugin")
        assert "digits-plugin" in pm.list_plugin_names()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DigitsPlugin())
        assert "_DigitsPlugin" in pm.list_plugin_names()

    def test_discover_without_entry_points_keeps_builtins(self) -> None:
        registry = default_registry()
        pm = PluginManager()
        pm.register_plugin(_DigitsPlugin(), name="digits-plugin")
        names = pm.discover_and_load(registry)
        assert "digits-plugin" in names
        assert registry.layout_kinds() == ["delimited", "fixed", "regex"]
        assert registry.field_types() == ["datetime", "digits", "string"]


class TestRegisterValidators:
    def test_field_and_layout_validators_added(self) -> None:
        registry = default_registry()
        pm = PluginManager()
        pm.register_plugin(_DigitsPlugin())
        pm.register_plugin(_UpperPlugin())
        pm.register_validators(registry)
        assert "digits" in registry.field_types()
        assert "upper" in registry.layout_kinds()
        assert "fixed" in registry.layout_kinds()
        assert pm.warnings == []

    def test_failing_hook_is_a_warning(self) -> None:
        registry = default_registry()
        pm = PluginManager()
        pm.register_plugin(_BrokenPlugin(), name="broken")
        pm.register_plugin(_DigitsPlugin(), name="digits-plugin")
        pm.register_validators(registry)
        assert "digits" in registry.field_types()
        assert pm.warnings == ["Plugin broken failed in register_field_validators"]

    def test_non_dict_is_a_warning(self) -> None:
        registry = default_registry()
        pm = PluginManager()
        pm.register_plugin(_NotADictPlugin(), name="listy")
        pm.register_validators(registry)
        assert registry.layout_kinds() == ["delimited", "fixed", "regex"]
        assert len(pm.warnings) == 1
        assert "non-dict" in pm.warnings[0]

    def test_wrong_type_skipped_rest_registered(self) -> None:
        registry = default_registry()
        pm = PluginManager()
        pm.register_plugin(_WrongTypePlugin(), name="mixed")
        pm.register_validators(registry)
        assert "digits" in registry.field_types()
        assert "bogus" not in registry.field_types()
        assert pm.warnings == ["Skipped validator 'bogus' from plugin mixed"]

    def test_plugin_class_is_instantiated_on_discovery(self) -> None:
        registry = default_registry()
        pm = PluginManager()
        pm.register_plugin(_DigitsPlugin, name="digits-class")
        names = pm.discover_and_load(registry)
        assert "digits-class" in names
        assert "digits" in registry.field_types()


class TestPluginValidatorsInWalk:
    def test_walker_uses_plugin_validators(self) -> None:
        registry = default_registry()
        pm = PluginManager()
        pm.register_plugin(_DigitsPlugin())
        pm.register_plugin(_UpperPlugin())
        pm.register_validators(registry)

        walker = RecipeWalker(registry)
        rcp = recipe(
            layout("UPPER", spec(), name="title"),
            layout("delimited", spec("digits"), spec("DIGITS"), name="numbers", rows=2),
        )
        assert walker.run(rcp, ["HEADER", "1,22", "333,4"]).success is True

        verdict = walker.run(rcp, ["HEADER", "1,2x"])
        assert verdict.success is False
        assert verdict.failed_at_row == 2
        assert verdict.expected_name == "numbers"
