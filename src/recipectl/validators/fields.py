"""Field validator ABC and the built-in field types.

A field validator checks one specification against a field string,
starting at a character offset. It returns the verdict together with the
offset the next specification should start from. The offset advances by
the width the specification claims, whether or not the check passed, so
positions stay aligned with the fixed-width record.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from recipectl.domain.recipe import Specification, SpecMode
from recipectl.validators.datetime_format import parse_exact


@dataclass(frozen=True)
class FieldResult:
    """Outcome of evaluating one specification."""

    valid: bool
    offset: int


class FieldValidator(ABC):
    """Abstract base class for field validators, keyed by ``Specification.type``."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Canonical type name (e.g. 'string', 'datetime')."""
        ...

    @abstractmethod
    def evaluate(self, field: str, offset: int, spec: Specification) -> FieldResult:
        """Check *spec* against *field* starting at *offset*."""
        ...


class StringFieldValidator(FieldValidator):
    """Literal, fixed-length, or non-empty text checks.

    Mode precedence follows :attr:`Specification.mode`:
    literal value, then fixed length, then free text.
    """

    @property
    def name(self) -> str:
        return "string"

    def evaluate(self, field: str, offset: int, spec: Specification) -> FieldResult:
        mode = spec.mode
        if mode is SpecMode.LITERAL:
            assert spec.value is not None
            end = offset + len(spec.value)
            valid = len(field) >= end and field[offset:end] == spec.value
            return FieldResult(valid=valid, offset=end)
        if mode is SpecMode.LENGTH:
            end = offset + spec.length
            return FieldResult(valid=len(field) >= end, offset=end)
        # Free text: the whole field must carry something.
        return FieldResult(valid=bool(field.strip()), offset=offset)


class DateTimeFieldValidator(FieldValidator):
    """Exact date/time match against ``Specification.format``.

    The window is as wide as the pattern text itself (``yyyyMMdd`` reads
    eight characters).
    """

    @property
    def name(self) -> str:
        return "datetime"

    def evaluate(self, field: str, offset: int, spec: Specification) -> FieldResult:
        if not spec.format:
            return FieldResult(valid=False, offset=offset)
        end = offset + len(spec.format)
        valid = len(field) >= end and parse_exact(field[offset:end], spec.format) is not None
        return FieldResult(valid=valid, offset=end)
