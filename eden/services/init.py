# SPDX-License-Identifier: MIT
"""Scaffold a starter eden config file."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from eden.core.result import Err, Ok, Result

__all__ = ["InitError", "InitErrorKind", "InitService", "SUPPORTED_FORMATS", "TEMPLATES_DIR"]

TEMPLATES_DIR = Path(__file__).parent.parent / "data" / "templates"

# format name -> file written (yml writes the .yaml file)
SUPPORTED_FORMATS: dict[str, str] = {
    "toml": "eden.toml",
    "yaml": "eden.yaml",
    "yml": "eden.yaml",
    "json": "eden.json",
}


class InitErrorKind(Enum):
    UNSUPPORTED_FORMAT = auto()
    EXISTS = auto()
    WRITE = auto()


@dataclass(frozen=True, slots=True)
class InitError:
    kind: InitErrorKind
    message: str


@dataclass(frozen=True, slots=True)
class InitService:
    """Writes a template config into ``root``.

    Attributes:
        root: Directory the config file is created in
        templates_dir: Directory holding the packaged templates
    """

    root: Path
    templates_dir: Path = TEMPLATES_DIR

    def init(self, fmt: str) -> Result[Path, InitError]:
        """Create the config file for ``fmt``.

        Returns:
            Ok(path) of the written file, or Err(InitError). An existing file
            is never overwritten.
        """
        filename = SUPPORTED_FORMATS.get(fmt)
        if filename is None:
            return Err(
                InitError(
                    InitErrorKind.UNSUPPORTED_FORMAT,
                    f"Unsupported format: {fmt}. Use toml, yaml, or json.",
                )
            )

        target = self.root / filename
        if target.exists():
            return Err(InitError(InitErrorKind.EXISTS, f"{filename} already exists"))

        try:
            content = (self.templates_dir / filename).read_text(encoding="utf-8")
            # "x" refuses to clobber a file created since the exists() check.
            with target.open("x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError:
            return Err(InitError(InitErrorKind.EXISTS, f"{filename} already exists"))
        except OSError as e:
            return Err(InitError(InitErrorKind.WRITE, f"Failed to create {filename}: {e}"))

        return Ok(target)
