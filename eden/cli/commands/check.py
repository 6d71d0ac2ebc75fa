# SPDX-License-Identifier: MIT
from __future__ import annotations

from pathlib import Path

import typer

from eden.cli.context import build_context
from eden.core.errors import ErrorCode
from eden.output.console import Style
from eden.output.report import print_summary, print_tally
from eden.services.check import CheckService

CONFIG_HELP = "Path to config file (auto-detects eden.toml/yaml/json if not specified)"


def check(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Run preflight checks (default)."""
    if config is None and isinstance(ctx.obj, Path):
        config = ctx.obj
    run_check(config)


def run_check(config_path: Path | None) -> None:
    ctx = build_context(config_path)
    console = ctx.console

    if ctx.config.source is not None:
        console.print(f"config: {_display_path(ctx.config.source)}", Style.DIM)

    report = CheckService().run(ctx.config)
    passed, failed = print_summary(report.results, console)
    print_tally(passed, failed, console)

    if failed > 0:
        raise typer.Exit(code=int(ErrorCode.CHECKS_FAILED))


def _display_path(path: Path) -> Path:
    """Show paths under the working directory relative to it."""
    cwd = Path.cwd()
    if path.is_absolute() and path.is_relative_to(cwd):
        return path.relative_to(cwd)
    return path
