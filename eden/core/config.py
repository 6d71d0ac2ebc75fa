# SPDX-License-Identifier: MIT
"""Typed configuration loading and access.

An eden config lists the binaries and environment variables a project needs:

    [checks]
    binaries = ["git", { name = "node", version = "18" }]
    environment = ["DATABASE_URL"]

The same structure can be written in TOML, YAML, JSON or JSONC; the format
is picked from the file extension.
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

import json5
import yaml

from .result import Err, Ok, Result
from .structured import StrDict, as_obj_list, as_str_dict

__all__ = [
    "CONFIG_FILES",
    "BinaryCheck",
    "Checks",
    "Config",
    "ConfigError",
    "ConfigErrorKind",
    "SimpleBinary",
    "VersionedBinary",
    "find_config",
    "load_config",
    "parse_config",
]

# Searched in this order in the working directory.
CONFIG_FILES: tuple[str, ...] = (
    "eden.toml",
    "eden.yaml",
    "eden.yml",
    "eden.json",
    "eden.jsonc",
)


class ConfigErrorKind(Enum):
    """Why a config could not be loaded."""

    NOT_FOUND = auto()
    READ = auto()
    PARSE = auto()
    UNSUPPORTED_FORMAT = auto()
    INVALID = auto()


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be found, read or parsed."""

    kind: ConfigErrorKind
    message: str
    path: Path | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class SimpleBinary:
    """A binary listed by name only (``"docker"``)."""

    name: str


@dataclass(frozen=True, slots=True)
class VersionedBinary:
    """A binary listed as a table (``{ name = "node", version = "18" }``).

    The version is kept as written; it is not enforced by the checker.
    """

    name: str
    version: str | None = None


type BinaryCheck = SimpleBinary | VersionedBinary


@dataclass(frozen=True, slots=True)
class Checks:
    """Configured checks, in file order."""

    binaries: tuple[BinaryCheck, ...] = ()
    environment: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.binaries) + len(self.environment)


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    checks: Checks = field(default_factory=Checks)
    source: Path | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object], *, source: Path | None = None) -> Config:
        """Create Config from a parsed mapping.

        Raises:
            ValueError: If the structure does not match the config schema.
        """
        raw_checks = data.get("checks")
        if raw_checks is None:
            return cls(source=source)

        checks = as_str_dict(raw_checks)
        if checks is None:
            raise ValueError("`checks` must be a table")

        return cls(
            checks=Checks(
                binaries=_parse_binaries(checks),
                environment=_parse_environment(checks),
            ),
            source=source,
        )


def _parse_binaries(checks: StrDict) -> tuple[BinaryCheck, ...]:
    raw = checks.get("binaries")
    if raw is None:
        return ()

    entries = as_obj_list(raw)
    if entries is None:
        raise ValueError("`checks.binaries` must be a list")

    return tuple(_parse_binary(entry, i) for i, entry in enumerate(entries))


def _parse_binary(entry: object, index: int) -> BinaryCheck:
    if isinstance(entry, str):
        return SimpleBinary(entry)

    table = as_str_dict(entry)
    if table is None:
        raise ValueError(f"`checks.binaries[{index}]` must be a string or a table with a name")

    name = table.get("name")
    if not isinstance(name, str):
        raise ValueError(f"`checks.binaries[{index}].name` must be a string")

    version = table.get("version")
    if version is not None and not isinstance(version, str):
        raise ValueError(f"`checks.binaries[{index}].version` must be a string")

    return VersionedBinary(name=name, version=version)


def _parse_environment(checks: StrDict) -> tuple[str, ...]:
    # `env_vars` is the legacy spelling of `environment`.
    if "environment" in checks and "env_vars" in checks:
        raise ValueError("`checks.environment` and `checks.env_vars` are both set")

    key = "env_vars" if "env_vars" in checks else "environment"
    raw = checks.get(key)
    if raw is None:
        return ()

    entries = as_obj_list(raw)
    if entries is None:
        raise ValueError(f"`checks.{key}` must be a list")

    names: list[str] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, str):
            raise ValueError(f"`checks.{key}[{i}]` must be a string")
        names.append(entry)
    return tuple(names)


# -----------------------------------------------------------------------------
# Format dispatch
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class _Format:
    label: str
    loads: Callable[[str], object]
    errors: tuple[type[Exception], ...]


_TOML = _Format("TOML", tomllib.loads, (tomllib.TOMLDecodeError,))
_YAML = _Format("YAML", yaml.safe_load, (yaml.YAMLError,))
_JSON = _Format("JSON", json.loads, (json.JSONDecodeError,))
_JSONC = _Format("JSONC", json5.loads, (ValueError,))

# Keyed by file extension, without the leading dot.
_FORMATS: dict[str, _Format] = {
    "toml": _TOML,
    "yaml": _YAML,
    "yml": _YAML,
    "json": _JSON,
    "jsonc": _JSONC,
}


def parse_config(path: Path, content: str) -> Result[Config, ConfigError]:
    """Parse config content using the format implied by ``path``'s extension.

    Args:
        path: Path the content was read from (only the extension is used)
        content: Raw file content

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    extension = path.suffix.removeprefix(".")
    fmt = _FORMATS.get(extension)
    if fmt is None:
        return Err(
            ConfigError(
                ConfigErrorKind.UNSUPPORTED_FORMAT,
                f"Unsupported config format: {extension}",
                path=path,
            )
        )

    try:
        data_obj = fmt.loads(content)
    except fmt.errors as e:
        return Err(ConfigError(ConfigErrorKind.PARSE, f"Failed to parse {fmt.label}: {e}", path=path))

    # An empty YAML document loads as None.
    if data_obj is None:
        data_obj = {}

    data = as_str_dict(data_obj)
    if data is None:
        return Err(
            ConfigError(ConfigErrorKind.INVALID, "Invalid config: root must be a table", path=path)
        )

    try:
        return Ok(Config.from_dict(data, source=path))
    except ValueError as e:
        return Err(ConfigError(ConfigErrorKind.INVALID, f"Invalid config: {e}", path=path))


def find_config(cwd: Path | None = None) -> Result[Path, ConfigError]:
    """Find the first known config file in ``cwd`` (default: current directory)."""
    base = cwd if cwd is not None else Path.cwd()
    for filename in CONFIG_FILES:
        candidate = base / filename
        if candidate.is_file():
            return Ok(candidate)
    return Err(
        ConfigError(
            ConfigErrorKind.NOT_FOUND,
            "No config file found. Run `eden init` to create one.",
        )
    )


def load_config(path: Path | None = None, *, cwd: Path | None = None) -> Result[Config, ConfigError]:
    """Load configuration from ``path``, or auto-detect it in ``cwd``.

    Args:
        path: Explicit config path; relative paths resolve against ``cwd``
        cwd: Directory to search (default: current directory)

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    if path is None:
        found = find_config(cwd)
        if isinstance(found, Err):
            return found
        config_path = found.value
    else:
        config_path = path if cwd is None or path.is_absolute() else cwd / path
        if not config_path.exists():
            return Err(
                ConfigError(
                    ConfigErrorKind.READ,
                    f"Failed to read config file: Config file not found: {path}",
                    path=config_path,
                )
            )

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return Err(
            ConfigError(ConfigErrorKind.READ, f"Failed to read config file: {e}", path=config_path)
        )

    return parse_config(config_path, content)
