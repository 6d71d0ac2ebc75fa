# SPDX-License-Identifier: MIT
"""Core domain types: configuration, results, exit codes."""

from .config import (
    BinaryCheck,
    Checks,
    Config,
    ConfigError,
    ConfigErrorKind,
    SimpleBinary,
    VersionedBinary,
    find_config,
    load_config,
    parse_config,
)
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
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
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
