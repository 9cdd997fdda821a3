"""Exception types raised by recipectl.

Configuration problems (unknown validator names, unreadable recipes)
are exceptions. Data problems (a row that does not match its layout)
are never exceptions; they surface as a failed Verdict.
"""

from __future__ import annotations

from enum import StrEnum


class ValidatorFamily(StrEnum):
    """The two name-keyed validator families."""

    LAYOUT = "layout"
    FIELD = "field"


class RecipectlError(Exception):
    """Base class for all recipectl errors."""


class UnknownValidatorError(RecipectlError):
    """A layout kind or field type did not resolve in the registry."""

    def __init__(self, family: ValidatorFamily, name: str) -> None:
        self.family = family
        self.name = name
        label = "kind" if family is ValidatorFamily.LAYOUT else "type"
        super().__init__(f"Unknown {family} validator {label}: {name!r}")


class RecipeLoadError(RecipectlError):
    """A recipe document could not be read or does not match the schema."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid recipe {path}: {reason}")


class LayoutConfigError(RecipectlError):
    """A layout's configs cannot be applied (e.g. an invalid split regex)."""

    def __init__(self, layout_name: str, reason: str) -> None:
        self.layout_name = layout_name
        self.reason = reason
        super().__init__(f"Invalid configs for layout {layout_name!r}: {reason}")
