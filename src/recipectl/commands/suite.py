"""Command: validate every recipe/output pair listed in recipectl.toml."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recipectl.commands._base import RecipectlCommand

if TYPE_CHECKING:
    from recipectl.commands._context import AppContext


@click.command(
    cls=RecipectlCommand,
    examples="""\
  recipectl suite
  recipectl -c ci/recipectl.toml suite
  recipectl --json suite""",
)
@click.pass_obj
def suite(app: AppContext) -> None:
    """Validate all [[suite.runs]] pairs from the config file."""
    from recipectl.services.validate import ValidateService

    app.emit(ValidateService(app.settings, app.registry).suite())
