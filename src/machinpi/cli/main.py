"""CLI entry point and the ``compute`` command."""

from __future__ import annotations

import time

import click

from machinpi.cli.helpers import json_envelope, output_error, resolve_config
from machinpi.core.digits import format_pi
from machinpi.core.machin import (
    AUTO_GUARD,
    InvalidDigitsError,
    InvalidGuardDigitsError,
    compute_pi,
    resolve_guard_digits,
)


class GuardDigitsType(click.ParamType):
    """A non-negative integer or the literal ``auto``."""

    name = "guard"

    def convert(self, value, param, ctx):
        if isinstance(value, int) and not isinstance(value, bool):
            guard = value
        elif str(value).strip().lower() == AUTO_GUARD:
            return AUTO_GUARD
        else:
            try:
                guard = int(value)
            except ValueError:
                self.fail(f"{value!r} is not an integer or '{AUTO_GUARD}'", param, ctx)
        if guard < 0:
            self.fail(f"guard digits must be >= 0, got {guard}", param, ctx)
        return guard


GUARD_DIGITS_TYPE = GuardDigitsType()


def parse_digits(raw: str | None, default: int, output_json: bool) -> int:
    """Turn the DIGITS argument into a count.

    Missing or unparsable input falls back to *default* (with a warning for
    the latter); a negative count is rejected.
    """
    if raw is None:
        return default
    try:
        digits = int(raw)
    except ValueError:
        click.echo(
            f"ignoring invalid number of digits: will display {default}",
            err=True,
        )
        return default
    if digits < 0:
        output_error(
            f"Invalid number of digits: {digits}. Must be >= 0.",
            "INVALID_ARGUMENT",
            output_json,
        )
    return digits


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """machinpi: digits of pi from Machin's formula."""


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("digits", required=False)
@click.option(
    "--guard",
    "guard_digits",
    type=GUARD_DIGITS_TYPE,
    default=None,
    help=(
        "Guard digits carried internally (integer or 'auto'). Overrides config. "
        "Values below the default of 10 can corrupt the trailing digits."
    ),
)
@click.option(
    "--parallel/--sequential",
    default=None,
    help="Evaluate the two arccot series in separate processes. Overrides config.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file (defaults to $MACHINPI_CONFIG or ./machinpi.json).",
)
@click.option("--verbose", "-v", is_flag=True, help="Report timing on stderr.")
@click.option("--json", "output_json", is_flag=True, help="Output structured JSON.")
def compute(
    digits: str | None,
    guard_digits: int | str | None,
    parallel: bool | None,
    config_path: str | None,
    verbose: bool,
    output_json: bool,
) -> None:
    """Print pi to DIGITS decimal places (default from config, 1000)."""
    config = resolve_config(config_path, output_json)

    places = parse_digits(digits, config["default_digits"], output_json)
    if guard_digits is None:
        guard_digits = config["guard_digits"]
    if parallel is None:
        parallel = config["parallel"]

    started = time.perf_counter()
    try:
        guard = resolve_guard_digits(places, guard_digits)
        scaled = compute_pi(places, guard_digits=guard, parallel=parallel)
    except (InvalidDigitsError, InvalidGuardDigitsError) as e:
        output_error(str(e), "INVALID_ARGUMENT", output_json)
    elapsed = time.perf_counter() - started

    text = format_pi(scaled, places)

    if verbose:
        mode = "parallel" if parallel else "sequential"
        click.echo(
            f"computed {places} digits in {elapsed:.3f}s "
            f"(guard={guard}, {mode})",
            err=True,
        )

    if output_json:
        click.echo(
            json_envelope(True, data={"digits": places, "guard_digits": guard, "pi": text})
        )
    else:
        click.echo(text)


# ---------------------------------------------------------------------------
# Register command modules (must be after cli group is defined)
# ---------------------------------------------------------------------------
from machinpi.cli import config_cmds as _config_cmds  # noqa: E402, F401
from machinpi.cli import series_cmds as _series_cmds  # noqa: E402, F401

if __name__ == "__main__":
    cli()
