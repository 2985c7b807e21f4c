"""Command-line front end for the dice core.

Examples:
  dice-roller roll 2d6+3
  dice-roller roll 3d6 --seed 42 --detailed
  dice-roller roll 1d20 --json --show-metrics
  dice-roller validate 2d7
"""
from __future__ import annotations

import json
from dataclasses import asdict

import click
import structlog

from DiceRoller.config import load_settings
from DiceRoller.dice import (
    NotationError,
    RollOptions,
    get_legal_die_sizes,
    is_valid_notation,
    roll,
    roll_detailed,
)
from DiceRoller.logging import setup_logging
from DiceRoller.metrics import get_counters

log = structlog.get_logger()


def _render_detailed(res) -> str:
    mod = f" ({res.modifier:+d})" if res.modifier else ""
    return f"{res.notation} → rolls {list(res.rolls)}{mod} = {res.total}"


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Roll tabletop dice notation such as 2d6+3."""
    settings = load_settings()
    setup_logging(settings)
    ctx.obj = settings


@cli.command("roll")
@click.argument("notation")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible roll.")
@click.option("--detailed", is_flag=True, default=False, help="Show every die.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Emit JSON.")
@click.option("--show-metrics", is_flag=True, default=False, help="Dump counters to stderr.")
@click.pass_context
def roll_cmd(
    ctx: click.Context,
    notation: str,
    seed: int | None,
    detailed: bool,
    as_json: bool,
    show_metrics: bool,
) -> None:
    opts = RollOptions(seed=seed)
    try:
        res = roll_detailed(notation, opts) if detailed else roll(notation, opts)
    except NotationError as e:
        log.warning("cli.roll.failed", notation=notation, kind=e.kind, error=str(e))
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        ctx.exit(2)

    if as_json:
        payload = asdict(res)
        if "rolls" in payload:
            payload["rolls"] = list(payload["rolls"])
        click.echo(json.dumps(payload))
    elif detailed:
        click.echo(_render_detailed(res))
    else:
        click.echo(f"{res.notation} → {res.total}")

    if show_metrics:
        click.echo(json.dumps(get_counters(), sort_keys=True), err=True)


@cli.command("validate")
@click.argument("notation")
@click.pass_context
def validate_cmd(ctx: click.Context, notation: str) -> None:
    ok = is_valid_notation(notation)
    click.echo("valid" if ok else "invalid")
    ctx.exit(0 if ok else 1)


@cli.command("sizes")
def sizes_cmd() -> None:
    click.echo(" ".join(f"d{s}" for s in get_legal_die_sizes()))


@cli.command("presets")
@click.pass_obj
def presets_cmd(settings) -> None:
    for preset in settings.dice_presets:
        click.echo(preset)


def main() -> None:  # pragma: no cover
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
