"""Validation engine — field validators, layout strategies, and the registry."""

from recipectl.validators.fields import FieldResult, FieldValidator
from recipectl.validators.layouts import LayoutValidator
from recipectl.validators.registry import ValidatorRegistry, default_registry

__all__ = [
    "FieldResult",
    "FieldValidator",
    "LayoutValidator",
    "ValidatorRegistry",
    "default_registry",
]
