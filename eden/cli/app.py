# SPDX-License-Identifier: MIT
from __future__ import annotations

from pathlib import Path

import typer

from eden import __version__
from eden.cli.commands.check import CONFIG_HELP, check, run_check
from eden.cli.commands.init import init


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
    help="Developer onboarding preflight checks.",
)


# Commands
app.command()(check)
app.command()(init)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    config: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    # Subcommands read the global --config from ctx.obj.
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        run_check(config)


def main() -> None:
    app()
