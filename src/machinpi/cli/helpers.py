"""Shared CLI output helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import click

from machinpi.core.config import ConfigError, MachinpiConfig, find_config, load_config


def json_error_obj(code: str, message: str) -> dict:
    """Build the error object carried in a failed JSON envelope."""
    return {"code": code, "message": message}


def json_envelope(ok: bool, data: object = None, error: dict | None = None) -> str:
    """Serialize a result as ``{"ok": ..., "data"|"error": ...}``."""
    envelope: dict = {"ok": ok}
    if ok:
        envelope["data"] = data
    else:
        envelope["error"] = error
    return json.dumps(envelope, sort_keys=True, indent=2)


def output_error(message: str, code: str, output_json: bool) -> NoReturn:
    """Report an error in the requested format and exit with status 1."""
    if output_json:
        click.echo(json_envelope(False, error=json_error_obj(code, message)))
    else:
        click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


def resolve_config(config_path: str | None, output_json: bool) -> MachinpiConfig:
    """Load the config named by ``--config`` or discovered on disk."""
    try:
        path = Path(config_path) if config_path else find_config()
        return load_config(path)
    except ConfigError as e:
        output_error(str(e), "CONFIG_ERROR", output_json)
