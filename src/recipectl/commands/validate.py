"""Command: validate one output file against a recipe."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from recipectl.commands._base import RecipectlCommand

if TYPE_CHECKING:
    from recipectl.commands._context import AppContext


@click.command(
    cls=RecipectlCommand,
    examples="""\
  recipectl validate recipe.yaml testfile.txt
  recipectl --json validate recipe_csv.yaml testfile_csv.txt
  recipectl -v validate recipe_pipe.yaml testfile_pipe.txt""",
)
@click.argument("recipe", type=click.Path(path_type=Path))
@click.argument("output", type=click.Path(path_type=Path))
@click.pass_obj
def validate(app: AppContext, recipe: Path, output: Path) -> None:
    """Check that OUTPUT matches the layouts described in RECIPE."""
    from recipectl.services.validate import ValidateService

    app.emit(ValidateService(app.settings, app.registry).validate(recipe, output))
