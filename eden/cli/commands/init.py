# SPDX-License-Identifier: MIT
from __future__ import annotations

from pathlib import Path

import typer

from eden.core.errors import ErrorCode
from eden.core.result import Err, Ok
from eden.output.console import RichConsole, Style
from eden.services.init import InitErrorKind, InitService


def init(
    fmt: str = typer.Option("toml", "--format", "-f", help="Config format to generate (toml, yaml, json)."),
    # --config is global on the command line; init has nothing to load.
    _config: Path | None = typer.Option(None, "--config", "-c", hidden=True),
) -> None:
    """Initialize a new eden config file."""
    console = RichConsole()

    match InitService(root=Path.cwd()).init(fmt):
        case Ok(path):
            console.print(f"🌱 Planted {path.name}", Style.SUCCESS)
        case Err(error):
            console.error(error.message)
            raise typer.Exit(code=int(_exit_code(error.kind)))


def _exit_code(kind: InitErrorKind) -> ErrorCode:
    match kind:
        case InitErrorKind.UNSUPPORTED_FORMAT | InitErrorKind.EXISTS:
            return ErrorCode.USER_ERROR
        case InitErrorKind.WRITE:
            return ErrorCode.IO_ERROR
