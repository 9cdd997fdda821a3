"""Pluggy hook specifications for recipectl validator plugins.

Two setup-time hooks let plugins add layout kinds and field types to
the validator registry without touching the engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from recipectl.validators.fields import FieldValidator
    from recipectl.validators.layouts import LayoutValidator

PROJECT_NAME = "recipectl"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)


class RecipectlHookSpec:
    """Hook specifications for the recipectl plugin system."""

    @hookspec
    def register_layout_validators(self) -> dict[str, LayoutValidator] | None:
        """Return kind -> LayoutValidator mappings to add to the registry."""

    @hookspec
    def register_field_validators(self) -> dict[str, FieldValidator] | None:
        """Return type -> FieldValidator mappings to add to the registry."""
