"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich markup) or machines
(--json). Quiet mode reduces human output to the status line.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from notifyctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from notifyctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags derived from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def _format_line(key: str, value: Any) -> str:
    """One ``key: value`` line; notification IDs get their own style."""
    text = escape(_format_value(value))
    if key == "id":
        text = f"[notify.id]{text}[/]"
    return f"  [notify.key]{escape(key)}[/]: {text}"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        console.print(f"[notify.ok]OK[/]: [notify.op]{escape(result.op)}[/]")
        if not settings.quiet:
            for key, value in result.data.items():
                console.print(_format_line(key, value))
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            f"[notify.error]ERROR[/]: [notify.op]{escape(result.op)}[/] - {escape(message)}"
        )
        if settings.verbose and result.error and result.error.detail:
            for key, value in result.error.detail.items():
                console.print(_format_line(key, value))
    return get_output(console).rstrip("\n")
