"""Validator registry — name-keyed lookup for layout kinds and field types.

Recipes name their validators with plain strings (``kind: fixed``,
``type: datetime``). The registry maps canonical lowercase names to
validator instances for both families. Lookups are case-insensitive and
an unknown name raises :class:`UnknownValidatorError`; it is never read
as a pass or a fail of the data.

New strategies are added by registering a name/implementation pair,
either directly or through a plugin (see :mod:`recipectl.plugins`).
"""

from __future__ import annotations

import logging

from recipectl.domain.errors import UnknownValidatorError, ValidatorFamily
from recipectl.validators.fields import (
    DateTimeFieldValidator,
    FieldValidator,
    StringFieldValidator,
)
from recipectl.validators.layouts import (
    DEFAULT_DELIMITER,
    DelimitedLayoutValidator,
    FixedLayoutValidator,
    LayoutValidator,
    RegexLayoutValidator,
)

logger = logging.getLogger(__name__)


def canonical_name(name: str) -> str:
    """Normalize a validator name for lookup."""
    return name.strip().lower()


class ValidatorRegistry:
    """Layout and field validators keyed by canonical name."""

    def __init__(self) -> None:
        self._layouts: dict[str, LayoutValidator] = {}
        self._fields: dict[str, FieldValidator] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_layout(self, name: str, validator: LayoutValidator) -> None:
        """Register *validator* for layout kind *name*, replacing any previous one."""
        if not isinstance(validator, LayoutValidator):
            msg = f"Layout validator for {name!r} must be a LayoutValidator"
            raise TypeError(msg)
        key = _checked_key(name)
        if key in self._layouts:
            logger.debug("Replacing layout validator %r", key)
        self._layouts[key] = validator

    def register_field(self, name: str, validator: FieldValidator) -> None:
        """Register *validator* for field type *name*, replacing any previous one."""
        if not isinstance(validator, FieldValidator):
            msg = f"Field validator for {name!r} must be a FieldValidator"
            raise TypeError(msg)
        key = _checked_key(name)
        if key in self._fields:
            logger.debug("Replacing field validator %r", key)
        self._fields[key] = validator

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_layout(self, name: str) -> LayoutValidator:
        """Return the layout validator for *name*.

        Raises:
            UnknownValidatorError: If no layout kind *name* is registered.
        """
        validator = self._layouts.get(canonical_name(name))
        if validator is None:
            raise UnknownValidatorError(ValidatorFamily.LAYOUT, name)
        return validator

    def resolve_field(self, name: str) -> FieldValidator:
        """Return the field validator for *name*.

        Raises:
            UnknownValidatorError: If no field type *name* is registered.
        """
        validator = self._fields.get(canonical_name(name))
        if validator is None:
            raise UnknownValidatorError(ValidatorFamily.FIELD, name)
        return validator

    def layout_kinds(self) -> list[str]:
        return sorted(self._layouts)

    def field_types(self) -> list[str]:
        return sorted(self._fields)


def _checked_key(name: str) -> str:
    key = canonical_name(name)
    if not key:
        raise ValueError("Validator name must not be empty")
    return key


def default_registry(*, default_delimiter: str = DEFAULT_DELIMITER) -> ValidatorRegistry:
    """Return a fresh registry holding the built-in validators."""
    registry = ValidatorRegistry()
    for layout in (
        FixedLayoutValidator(),
        RegexLayoutValidator(),
        DelimitedLayoutValidator(default_delimiter),
    ):
        registry.register_layout(layout.name, layout)
    for field in (StringFieldValidator(), DateTimeFieldValidator()):
        registry.register_field(field.name, field)
    return registry
