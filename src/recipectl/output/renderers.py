"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from recipectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from recipectl.services.result import ServiceResult

# Verdict fields shown for a failed validation, in display order.
_LOCUS_FIELDS = (
    "failure",
    "failed_at_row",
    "expected_kind",
    "expected_name",
    "expected_row_count",
    "observed_row_count",
    "unknown_name",
)


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
    else:
        renderer = _ERROR_RENDERERS.get(result.op, _render_error)
    renderer(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="rc.ok")
    op = Text(f"  {result.op}", style="rc.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="rc.key")
    if key in ("recipe", "output"):
        v = Text(str(value), style="rc.path")
    elif key == "failed_at_row":
        v = Text(str(value), style="rc.row")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="rc.warning"), Text(warning), sep="")


# ── Error renderers ───────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rc.error")
    op = Text(f"  {result.op}", style="rc.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="")
    if err is not None and verbose:
        _field(console, "code", err.code)


def _render_validate_error(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Failure line plus the verdict's failure locus."""
    _render_error(result, console, verbose=False)
    if result.error is not None:
        console.print(
            Text("  code: ", style="rc.key"), Text(result.error.code, style="rc.code"), sep=""
        )
    for key in ("recipe", "output", *_LOCUS_FIELDS):
        value = result.data.get(key)
        if value is not None:
            _field(console, key, value)
    if verbose:
        _field(console, "rows_validated", result.data.get("rows_validated", 0))


# ── Success renderers ─────────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "recipe", result.data.get("recipe", ""))
    _field(console, "output", result.data.get("output", ""))
    _field(console, "rows_validated", result.data.get("rows_validated", 0))
    _render_warnings(console, result)


def _render_suite(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Table of every run, then a pass/fail summary."""
    runs: list[dict[str, Any]] = result.data.get("runs", [])
    if result.ok:
        _status_line(console, result)
    else:
        _render_error(result, console, verbose=False)

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Recipe", style="rc.path")
    table.add_column("Output", style="rc.path")
    table.add_column("Result")
    if verbose or not result.ok:
        table.add_column("Detail")

    for run in runs:
        status = Text("pass", style="rc.ok") if run.get("ok") else Text("fail", style="rc.error")
        row = [Text(str(run.get("recipe", ""))), Text(str(run.get("output", ""))), status]
        if verbose or not result.ok:
            detail = f"{run['code']}: {run.get('message', '')}" if run.get("code") else ""
            row.append(Text(detail))
        table.add_row(*row)

    if runs:
        console.print(table)
    failed = result.data.get("failed", 0)
    console.print(f"{len(runs) - failed} passed, {failed} failed")


def _render_validators(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    console.print("\n[bold]layout kinds[/bold]")
    for name in result.data.get("layout_kinds", []):
        console.print(f"  {name}")
    console.print("\n[bold]field types[/bold]")
    for name in result.data.get("field_types", []):
        console.print(f"  {name}")
    plugins = result.data.get("plugins", [])
    if plugins:
        console.print("\n[bold]plugins[/bold]")
        for name in plugins:
            console.print(f"  {name}")
    _render_warnings(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    _render_warnings(console, result)


# ── Dispatch tables ───────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate": _render_validate,
    "suite": _render_suite,
    "validators": _render_validators,
}

_ERROR_RENDERERS: dict[str, Any] = {
    "validate": _render_validate_error,
    "suite": _render_suite,
}
