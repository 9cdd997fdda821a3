"""ValidateService — validate output files against recipe files.

Two operations:

- ``validate``: one recipe/output pair.
- ``suite``: every ``[[suite.runs]]`` pair from ``recipectl.toml``.

The service owns the file boundary: it loads the recipe, opens the output
file as a scoped line source, runs the :class:`RecipeWalker`, and turns
the verdict (or a load failure) into a :class:`ServiceResult`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from recipectl.domain.errors import RecipeLoadError
from recipectl.domain.verdict import Verdict
from recipectl.infrastructure.line_source import open_line_source
from recipectl.infrastructure.recipe_loader import load_recipe
from recipectl.services.result import ServiceError, ServiceResult
from recipectl.services.walker import RecipeWalker

if TYPE_CHECKING:
    from recipectl.config.settings import RecipectlSettings
    from recipectl.validators.registry import ValidatorRegistry

log = structlog.get_logger(__name__)

# Error codes outside the verdict's failure kinds.
RECIPE_NOT_FOUND = "RECIPE_NOT_FOUND"
RECIPE_INVALID = "RECIPE_INVALID"
OUTPUT_NOT_FOUND = "OUTPUT_NOT_FOUND"
OUTPUT_UNREADABLE = "OUTPUT_UNREADABLE"
NO_SUITE_RUNS = "NO_SUITE_RUNS"
SUITE_FAILED = "SUITE_FAILED"


class ValidateService:
    """Runs recipe validations with a fixed validator registry."""

    def __init__(self, settings: RecipectlSettings, registry: ValidatorRegistry) -> None:
        self._settings = settings
        self._registry = registry

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, recipe_path: Path, output_path: Path) -> ServiceResult:
        """Validate *output_path* against the recipe at *recipe_path*."""
        op = "validate"
        paths = {"recipe": str(recipe_path), "output": str(output_path)}
        bound = log.bind(**paths)

        if not recipe_path.is_file():
            return _error(op, RECIPE_NOT_FOUND, f"Recipe not found: {recipe_path}", paths)
        if not output_path.is_file():
            return _error(op, OUTPUT_NOT_FOUND, f"Output file not found: {output_path}", paths)

        encoding = self._settings.engine.encoding
        try:
            recipe = load_recipe(recipe_path, encoding=encoding)
        except RecipeLoadError as exc:
            bound.warning("recipe.invalid", reason=exc.reason)
            return _error(op, RECIPE_INVALID, str(exc), paths)

        bound.debug("validate.start", layouts=len(recipe.layouts), rows=recipe.total_rows)
        walker = RecipeWalker(self._registry)
        try:
            with open_line_source(output_path, encoding=encoding) as lines:
                verdict = walker.run(recipe, lines)
        except (OSError, UnicodeDecodeError) as exc:
            bound.warning("output.unreadable", error=str(exc))
            return _error(op, OUTPUT_UNREADABLE, f"Cannot read {output_path}: {exc}", paths)

        bound.debug("validate.done", success=verdict.success, failure=verdict.failure)
        return _verdict_result(op, verdict, paths)

    def suite(self) -> ServiceResult:
        """Validate every configured ``[[suite.runs]]`` pair.

        Relative paths resolve against the project root. All pairs run;
        the result fails if any of them fails.
        """
        op = "suite"
        runs = self._settings.suite.runs
        if not runs:
            return _error(op, NO_SUITE_RUNS, "No [[suite.runs]] configured", {})

        root = self._settings.project_root
        reports: list[dict[str, Any]] = []
        for run in runs:
            result = self.validate(root / run.recipe, root / run.output)
            report: dict[str, Any] = {
                "recipe": run.recipe,
                "output": run.output,
                "ok": result.ok,
            }
            if result.error is not None:
                report["code"] = result.error.code
                report["message"] = result.error.message
            reports.append(report)

        failed = sum(1 for r in reports if not r["ok"])
        data = {"runs": reports, "count": len(reports), "failed": failed}
        if failed:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                error=ServiceError(
                    code=SUITE_FAILED,
                    message=f"{failed} of {len(reports)} runs failed",
                    detail=data,
                ),
            )
        return ServiceResult(ok=True, op=op, data=data)


def _error(op: str, code: str, message: str, data: dict[str, Any]) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        data=data,
        error=ServiceError(code=code, message=message),
    )


def _verdict_result(op: str, verdict: Verdict, paths: dict[str, str]) -> ServiceResult:
    fields = verdict.model_dump(mode="json", exclude_none=True)
    data = {**paths, **fields}
    if verdict.success:
        return ServiceResult(ok=True, op=op, data=data)
    assert verdict.failure is not None
    return ServiceResult(
        ok=False,
        op=op,
        data=data,
        error=ServiceError(
            code=verdict.failure.upper(),
            message=verdict.message,
            detail=fields,
        ),
    )
