"""``machinpi config`` commands."""

from __future__ import annotations

from pathlib import Path

import click

from machinpi.cli.helpers import json_envelope, output_error, resolve_config
from machinpi.cli.main import cli
from machinpi.core.config import CONFIG_FILENAME, default_config, serialize_config
from machinpi.storage.fs import atomic_write


@cli.group("config")
def config_group() -> None:
    """Inspect or create machinpi.json."""


@config_group.command("show")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file (defaults to $MACHINPI_CONFIG or ./machinpi.json).",
)
@click.option("--json", "output_json", is_flag=True, help="Output structured JSON.")
def config_show(config_path: str | None, output_json: bool) -> None:
    """Print the effective configuration."""
    config = resolve_config(config_path, output_json)
    if output_json:
        click.echo(json_envelope(True, data=config))
    else:
        click.echo(serialize_config(config), nl=False)


@config_group.command("init")
@click.option(
    "--path",
    "target_path",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    default=".",
    help="Directory to write machinpi.json in (defaults to current directory).",
)
@click.option("--force", is_flag=True, help="Overwrite an existing machinpi.json.")
@click.option("--json", "output_json", is_flag=True, help="Output structured JSON.")
def config_init(target_path: str, force: bool, output_json: bool) -> None:
    """Write a default machinpi.json."""
    config_file = Path(target_path) / CONFIG_FILENAME

    if config_file.is_dir():
        output_error(
            f"Cannot write config: '{config_file}' exists but is a directory.",
            "CONFLICT",
            output_json,
        )
    if config_file.exists() and not force:
        output_error(
            f"{CONFIG_FILENAME} already exists in {target_path}. Use --force to overwrite.",
            "CONFLICT",
            output_json,
        )

    try:
        atomic_write(config_file, serialize_config(default_config()))
    except PermissionError:
        raise click.ClickException(f"Permission denied: cannot write {config_file}")
    except OSError as e:
        raise click.ClickException(f"Failed to write config: {e}")

    if output_json:
        click.echo(json_envelope(True, data={"path": str(config_file)}))
    else:
        click.echo(f"Wrote default config to {config_file}")
