"""grantdiff command-line interface.

Usage::

    grantdiff diff primary.json replica.json
    grantdiff diff primary.json replica.json --format json
    grantdiff show primary.json

``diff`` exits 0 when the snapshots are consistent and 2 when discrepancies
were found.  Unreadable input exits 1.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from grantdiff import __version__
from grantdiff.config import load_config
from grantdiff.differ.orchestrator import collect_discrepancies
from grantdiff.errors import GrantDiffError
from grantdiff.grants.printable import permissions_string
from grantdiff.observability.logging import comparison_context, get_logger, setup_logging
from grantdiff.snapshot_io import load_snapshot

EXIT_DISCREPANCIES = 2

_SNAPSHOT_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.group()
@click.version_option(__version__, prog_name="grantdiff")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Compare grant snapshots taken from database replicas."""
    try:
        config = load_config()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    setup_logging(config.log.level)
    ctx.obj = config


@cli.command()
@click.argument("left", type=_SNAPSHOT_PATH)
@click.argument("right", type=_SNAPSHOT_PATH)
@click.option("--left-name", default=None, help="Label for LEFT in messages (default: file stem).")
@click.option("--right-name", default=None, help="Label for RIGHT in messages (default: file stem).")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Report format (default: GRANTDIFF_OUTPUT_FORMAT or text).",
)
@click.option("--check-order/--no-check-order", default=None, help="Verify inputs are sorted by key.")
@click.pass_context
def diff(
    ctx: click.Context,
    left: Path,
    right: Path,
    left_name: str | None,
    right_name: str | None,
    output_format: str | None,
    check_order: bool | None,
) -> None:
    """Report every grant that differs between LEFT and RIGHT."""
    config = ctx.obj
    left_name = left_name or left.stem
    right_name = right_name or right.stem
    output_format = output_format or config.diff.output_format
    if check_order is None:
        check_order = config.diff.check_order

    log = get_logger("cli")
    with comparison_context(left_name, right_name):
        try:
            left_snapshot = load_snapshot(left)
            right_snapshot = load_snapshot(right)
            discrepancies = collect_discrepancies(left_snapshot, right_snapshot, check_order=check_order)
        except GrantDiffError as exc:
            log.error("diff_failed", left_path=str(left), right_path=str(right), error=str(exc))
            raise click.ClickException(str(exc)) from exc

    if output_format == "json":
        report = {
            "left": left_name,
            "right": right_name,
            "consistent": not discrepancies,
            "discrepancies": [d.to_dict() for d in discrepancies],
        }
        click.echo(json.dumps(report, indent=2))
    else:
        for discrepancy in discrepancies:
            click.echo(discrepancy.message(left_name, right_name))
        if not discrepancies:
            click.echo(f"{left_name} and {right_name} have identical permissions")

    if discrepancies:
        ctx.exit(EXIT_DISCREPANCIES)


@cli.command()
@click.argument("snapshot", type=_SNAPSHOT_PATH)
def show(snapshot: Path) -> None:
    """Print every grant in SNAPSHOT, sorted by key."""
    try:
        loaded = load_snapshot(snapshot)
    except GrantDiffError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(permissions_string(loaded), nl=False)
