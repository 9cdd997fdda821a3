"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy validator registry construction
(built-ins plus plugins) and centralized result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recipectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from recipectl.config.settings import RecipectlSettings
    from recipectl.services.result import ServiceResult
    from recipectl.validators.registry import ValidatorRegistry


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The registry is built on first use so ``--help`` and ``--version``
    never load plugins.
    """

    def __init__(self, settings: RecipectlSettings) -> None:
        self.settings = settings
        self._registry: ValidatorRegistry | None = None
        self.plugin_names: list[str] = []
        self.plugin_warnings: list[str] = []

        # Configure structured logging
        from recipectl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> ValidatorRegistry:
        """The validator registry (created lazily on first access)."""
        if self._registry is None:
            from recipectl.validators.registry import default_registry

            registry = default_registry(default_delimiter=self.settings.engine.default_delimiter)
            if self.settings.plugins.enabled:
                from recipectl.plugins.manager import PluginManager

                manager = PluginManager()
                self.plugin_names = manager.discover_and_load(registry)
                self.plugin_warnings = list(manager.warnings)
            self._registry = registry
        return self._registry

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        if self.plugin_warnings:
            result = result.model_copy(
                update={"warnings": [*result.warnings, *self.plugin_warnings]}
            )
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
