"""Layout validator ABC and the built-in column-splitting strategies.

A layout validator decides whether one line satisfies a layout. The
strategy, selected by ``Layout.kind``, determines how the line is cut
into fields:

- ``fixed``: one packed record; the offset threads through every spec.
- ``regex``: fields are the matches of a regular expression (the
  ``regex`` config key, or a quoted-CSV pattern by default).
- ``delimited``: fields are separated by a literal delimiter (the
  ``delimiter`` config key, or ``,`` by default).

Specs are evaluated strictly in declared order and evaluation stops at the
first failing spec.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from recipectl.domain.errors import LayoutConfigError

if TYPE_CHECKING:
    from recipectl.domain.recipe import Layout
    from recipectl.validators.registry import ValidatorRegistry

logger = logging.getLogger(__name__)

CONFIG_REGEX_KEY = "regex"
CONFIG_DELIMITER_KEY = "delimiter"

# Bare comma-separated tokens, or "quoted,tokens" with the quotes stripped.
QUOTED_CSV_PATTERN = r'((?<=")[^"]*(?="(?:,|$))|(?:(?<=,)|^)[^,"]*(?=,|$))'
DEFAULT_DELIMITER = ","


class LayoutValidator(ABC):
    """Abstract base class for layout validators, keyed by ``Layout.kind``."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Canonical kind name (e.g. 'fixed', 'regex')."""
        ...

    def validate(self, line: str | None, layout: Layout, registry: ValidatorRegistry) -> bool:
        """Return True if *line* satisfies every spec of *layout*.

        An absent line (input exhausted) never validates, and neither
        does a layout without specs.

        Raises:
            UnknownValidatorError: A spec type is not registered.
            LayoutConfigError: The layout's configs cannot be applied.
        """
        if line is None:
            return False
        if not layout.specs:
            logger.debug("Layout %r has no specs", layout.name)
            return False
        return self._validate_line(line, layout, registry)

    @abstractmethod
    def _validate_line(self, line: str, layout: Layout, registry: ValidatorRegistry) -> bool: ...


class FixedLayoutValidator(LayoutValidator):
    """Fixed-width packed records: every spec reads from the same line."""

    @property
    def name(self) -> str:
        return "fixed"

    def _validate_line(self, line: str, layout: Layout, registry: ValidatorRegistry) -> bool:
        offset = 0
        for index, spec in enumerate(layout.specs):
            result = registry.resolve_field(spec.type).evaluate(line, offset, spec)
            if not result.valid:
                logger.debug(
                    "Spec %d (%s) failed at offset %d in layout %r",
                    index,
                    spec.type,
                    offset,
                    layout.name,
                )
                return False
            offset = result.offset
        return True


class SplitLayoutValidator(LayoutValidator):
    """Base for strategies that cut the line into self-contained fields.

    Each field is checked against the spec at the same position with the
    offset starting at 0. A spec with no field left to check fails.
    """

    @abstractmethod
    def split(self, line: str, layout: Layout) -> list[str]:
        """Cut *line* into fields according to *layout*'s configs."""
        ...

    def _validate_line(self, line: str, layout: Layout, registry: ValidatorRegistry) -> bool:
        fields = self.split(line, layout)
        return _evaluate_fields(fields, layout, registry)


class RegexLayoutValidator(SplitLayoutValidator):
    """Fields are the successive matches of a regular expression."""

    @property
    def name(self) -> str:
        return "regex"

    def split(self, line: str, layout: Layout) -> list[str]:
        pattern = layout.config_value(CONFIG_REGEX_KEY) or QUOTED_CSV_PATTERN
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise LayoutConfigError(layout.name, f"invalid regex {pattern!r}: {exc}") from exc
        return [match.group(0) for match in compiled.finditer(line)]


class DelimitedLayoutValidator(SplitLayoutValidator):
    """Fields are separated by a literal delimiter string."""

    def __init__(self, default_delimiter: str = DEFAULT_DELIMITER) -> None:
        if not default_delimiter:
            raise ValueError("default_delimiter must not be empty")
        self._default_delimiter = default_delimiter

    @property
    def name(self) -> str:
        return "delimited"

    def split(self, line: str, layout: Layout) -> list[str]:
        delimiter = layout.config_value(CONFIG_DELIMITER_KEY)
        if delimiter is None:
            delimiter = self._default_delimiter
        if not delimiter:
            raise LayoutConfigError(layout.name, "delimiter must not be empty")
        return line.split(delimiter)


def _evaluate_fields(fields: Sequence[str], layout: Layout, registry: ValidatorRegistry) -> bool:
    for index, spec in enumerate(layout.specs):
        if index >= len(fields):
            logger.debug(
                "Layout %r expects %d fields, line has %d",
                layout.name,
                len(layout.specs),
                len(fields),
            )
            return False
        result = registry.resolve_field(spec.type).evaluate(fields[index], 0, spec)
        if not result.valid:
            logger.debug("Field %d (%s) failed in layout %r", index, spec.type, layout.name)
            return False
    return True
