# SPDX-License-Identifier: MIT
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from eden.core.config import Config, load_config
from eden.core.errors import ErrorCode
from eden.core.result import Err
from eden.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol


def build_context(config_path: Path | None = None) -> CLIContext:
    """Load the config (explicit path or auto-detected) or exit with CONFIG_ERROR."""
    console = RichConsole()

    config_result = load_config(config_path)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    return CLIContext(config=config_result.value, console=console)
