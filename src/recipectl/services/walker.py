"""RecipeWalker — walks an output file's lines against a recipe.

Each layout consumes exactly ``number_of_rows`` lines, in recipe order.
The walk stops at the first failure and reports it as a :class:`Verdict`:

- the input ran out before a layout got all its rows (row shortfall);
- a present line did not satisfy its layout (content mismatch);
- a layout kind or spec type is not registered (unknown validator);
- a layout's configs cannot be applied (invalid config);
- a validator raised an unexpected exception (validator error).

Line numbers are absolute and 1-based, counted from the first line of the
file across all layouts.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from recipectl.domain.errors import LayoutConfigError, UnknownValidatorError
from recipectl.domain.recipe import Layout, Recipe
from recipectl.domain.verdict import FailureKind, Verdict
from recipectl.validators.registry import ValidatorRegistry

logger = logging.getLogger(__name__)


class RecipeWalker:
    """Single-pass, fail-fast recipe validation over a line sequence."""

    def __init__(self, registry: ValidatorRegistry) -> None:
        self._registry = registry

    def run(self, recipe: Recipe, lines: Iterable[str]) -> Verdict:
        """Validate *lines* against *recipe* and return the verdict.

        *lines* are consumed lazily and never past the last row the recipe
        asks for. Configuration errors are recovered into the verdict.
        """
        source = iter(lines)
        line_number = 0

        for layout in recipe.layouts:
            logger.debug(
                "Validating layout %r (%s): %d rows",
                layout.name,
                layout.kind,
                layout.number_of_rows,
            )
            consumed = 0
            remaining = layout.number_of_rows
            while remaining > 0:
                line = next(source, None)
                remaining -= 1
                if line is None:
                    return _shortfall(layout, consumed, line_number + 1, line_number)
                line_number += 1
                consumed += 1

                try:
                    validator = self._registry.resolve_layout(layout.kind)
                    valid = validator.validate(line, layout, self._registry)
                except UnknownValidatorError as exc:
                    logger.debug("Unresolved %s validator %r", exc.family, exc.name)
                    return Verdict(
                        success=False,
                        failure=FailureKind.UNKNOWN_VALIDATOR,
                        failed_at_row=line_number,
                        expected_kind=layout.kind,
                        expected_name=layout.name,
                        expected_row_count=layout.number_of_rows,
                        unknown_name=exc.name,
                        rows_validated=line_number - 1,
                        message=str(exc),
                    )
                except LayoutConfigError as exc:
                    return Verdict(
                        success=False,
                        failure=FailureKind.INVALID_CONFIG,
                        failed_at_row=line_number,
                        expected_kind=layout.kind,
                        expected_name=layout.name,
                        expected_row_count=layout.number_of_rows,
                        rows_validated=line_number - 1,
                        message=str(exc),
                    )
                except Exception as exc:
                    logger.warning(
                        "Validator for layout %r raised on line %d",
                        layout.name,
                        line_number,
                        exc_info=True,
                    )
                    return Verdict(
                        success=False,
                        failure=FailureKind.VALIDATOR_ERROR,
                        failed_at_row=line_number,
                        expected_kind=layout.kind,
                        expected_name=layout.name,
                        expected_row_count=layout.number_of_rows,
                        rows_validated=line_number - 1,
                        message=f"Validator raised {type(exc).__name__}: {exc}",
                    )

                if not valid:
                    logger.debug("Line %d does not match layout %r", line_number, layout.name)
                    return Verdict(
                        success=False,
                        failure=FailureKind.CONTENT_MISMATCH,
                        failed_at_row=line_number,
                        expected_kind=layout.kind,
                        expected_name=layout.name,
                        expected_row_count=layout.number_of_rows,
                        rows_validated=line_number - 1,
                        message=(
                            f"Invalid entry at line {line_number}, "
                            f"expecting kind {layout.kind}, name {layout.name}"
                        ),
                    )

        return Verdict.passed(line_number)


def _shortfall(layout: Layout, consumed: int, at_row: int, rows_validated: int) -> Verdict:
    return Verdict(
        success=False,
        failure=FailureKind.ROW_SHORTFALL,
        failed_at_row=at_row,
        expected_kind=layout.kind,
        expected_name=layout.name,
        expected_row_count=layout.number_of_rows,
        observed_row_count=consumed,
        rows_validated=rows_validated,
        message=(
            f"Layout {layout.name!r} expected {layout.number_of_rows}, "
            f"found {consumed} rows; input ended at line {at_row}"
        ),
    )
