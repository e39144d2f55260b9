"""CLI entry points (``pachost`` command) for trying primitives by hand."""

from __future__ import annotations

import json
import logging
import re
import sys
from typing import Any, Optional

import click

from .config import CONFIG_ENV_VAR, load_config
from .context import PacContext
from .errors import BadArgumentCount
from .functions import PRIMITIVE_NAMES, PacFunctions
from .local_address import UNDEFINED, candidate_addresses

_INTEGER = re.compile(r"[+-]?\d+")

# Only these take numbers; every other primitive takes its arguments as strings.
_NUMERIC_PRIMITIVES = frozenset({"weekdayRange", "dateRange", "timeRange"})


def _coerce(name: str, arg: str) -> Any:
    if name in _NUMERIC_PRIMITIVES and _INTEGER.fullmatch(arg):
        return int(arg)
    return arg


def _format(value: Any) -> str:
    """Render a primitive's result the way a script would print it."""
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value)
    return str(value)


@click.group()
@click.option(
    "--config", "-c",
    default=None,
    envvar=CONFIG_ENV_VAR,
    help="Path to pachost config YAML.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config: Optional[str], verbose: bool) -> None:
    """PAC host primitives -- evaluate PAC builtins from the shell."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    try:
        cfg = load_config(config)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.ensure_object(dict)
    ctx.obj["functions"] = PacFunctions(PacContext.from_config(cfg))


@main.command("list")
def list_primitives() -> None:
    """List the primitive names available to PAC scripts."""
    for name in PRIMITIVE_NAMES:
        click.echo(name)


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("name")
@click.argument("args", nargs=-1)
@click.pass_context
def call(ctx: click.Context, name: str, args: tuple[str, ...]) -> None:
    """Call primitive NAME with ARGS (range primitives get integers as numbers)."""
    if name not in PRIMITIVE_NAMES:
        click.echo(f"Unknown primitive: {name}", err=True)
        sys.exit(1)

    functions: PacFunctions = ctx.obj["functions"]
    try:
        result = functions.bindings()[name](*(_coerce(name, a) for a in args))
    except BadArgumentCount as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except TypeError as exc:
        click.echo(f"Error: {name}: {exc}", err=True)
        sys.exit(1)
    click.echo(_format(result))


@main.command()
@click.pass_context
def myip(ctx: click.Context) -> None:
    """Show myIpAddress() and the addresses it chose from."""
    functions: PacFunctions = ctx.obj["functions"]
    context = functions.context

    click.echo(f"myIpAddress: {_format(functions.myIpAddress())}")
    override = context.myip_override()
    click.echo(f"Override: {override if override else '(none)'}")
    candidates = candidate_addresses(context)
    if candidates:
        click.echo("Candidates (last wins):")
        for address in candidates:
            click.echo(f"  {address}")
    else:
        click.echo("Candidates: (none)")
