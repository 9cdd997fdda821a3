"""Subcommand modules for recipectl.

Provides register_commands() which uses deferred imports to keep
``recipectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from recipectl.commands.suite import suite
    from recipectl.commands.validate import validate
    from recipectl.commands.validators import validators

    cli.add_command(validate)
    cli.add_command(suite)
    cli.add_command(validators)
