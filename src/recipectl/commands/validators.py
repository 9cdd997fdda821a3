"""Command: list registered layout kinds and field types."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recipectl.commands._base import RecipectlCommand
from recipectl.services.result import ServiceResult

if TYPE_CHECKING:
    from recipectl.commands._context import AppContext


@click.command(
    cls=RecipectlCommand,
    examples="""\
  recipectl validators
  recipectl --json validators""",
)
@click.pass_obj
def validators(app: AppContext) -> None:
    """List the layout kinds and field types recipes may use."""
    registry = app.registry
    app.emit(
        ServiceResult(
            ok=True,
            op="validators",
            data={
                "layout_kinds": registry.layout_kinds(),
                "field_types": registry.field_types(),
                "plugins": app.plugin_names,
            },
        )
    )
