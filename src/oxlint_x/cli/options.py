"""Shared option parsing for CLI commands."""

import json
from typing import Any

import typer


def parse_options(raw: str | None) -> dict[str, Any] | None:
    """Parse the --options JSON object.

    Raises:
        typer.BadParameter: If raw is not a JSON object
    """
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"invalid JSON: {e}", param_hint="--options")
    if not isinstance(value, dict):
        raise typer.BadParameter("must be a JSON object", param_hint="--options")
    return value
