"""``machinpi terms``: how much work a computation takes."""

from __future__ import annotations

import click

from machinpi.cli.helpers import json_envelope, output_error, resolve_config
from machinpi.cli.main import GUARD_DIGITS_TYPE, cli, parse_digits
from machinpi.core.machin import InvalidGuardDigitsError, series_terms


@cli.command("terms", context_settings={"ignore_unknown_options": True})
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
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file (defaults to $MACHINPI_CONFIG or ./machinpi.json).",
)
@click.option("--json", "output_json", is_flag=True, help="Output structured JSON.")
def terms_cmd(
    digits: str | None,
    guard_digits: int | str | None,
    config_path: str | None,
    output_json: bool,
) -> None:
    """Show the scale and series terms needed for DIGITS places."""
    config = resolve_config(config_path, output_json)
    places = parse_digits(digits, config["default_digits"], output_json)
    if guard_digits is None:
        guard_digits = config["guard_digits"]

    try:
        report = series_terms(places, guard_digits)
    except InvalidGuardDigitsError as e:
        output_error(str(e), "INVALID_ARGUMENT", output_json)

    if output_json:
        # JSON object keys must be strings.
        data = dict(report)
        data["terms"] = {str(x): n for x, n in report["terms"].items()}
        click.echo(json_envelope(True, data=data))
        return

    click.echo(f"Digits:       {report['digits']}")
    click.echo(f"Guard digits: {report['guard_digits']}")
    click.echo(f"Scale:        10^{report['scale_digits']}")
    for x, n in report["terms"].items():
        click.echo(f"arccot({x}): {n} terms")
