# SPDX-License-Identifier: MIT
"""Environment variable checker.

Values are never printed verbatim: long values are truncated and short ones
are masked, so secrets do not end up in terminal scrollback or CI logs.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from eden.services.checkers.base import CheckResult, CheckType

__all__ = ["EnvChecker", "check_env_var", "display_value", "mask_value"]

# Values longer than this are truncated instead of masked.
_MAX_DISPLAY_LEN = 20


def _process_environ() -> Mapping[str, str]:
    return os.environ


@dataclass(frozen=True, slots=True)
class EnvChecker:
    """Check that environment variables are set.

    Attributes:
        environ: Environment to read (defaults to the process environment)
    """

    environ: Mapping[str, str] = field(default_factory=_process_environ)

    def check(self, name: str) -> CheckResult:
        """Check a single variable is set."""
        value = self.environ.get(name)
        if value is None:
            return CheckResult.failure(CheckType.ENV, name, "not set")
        return CheckResult.success(CheckType.ENV, name, f"set ({display_value(value)})")


def display_value(value: str) -> str:
    """Redact ``value`` for display."""
    if not value:
        return "(empty)"
    if len(value) > _MAX_DISPLAY_LEN:
        return f"{value[:_MAX_DISPLAY_LEN]}..."
    return mask_value(value)


def mask_value(value: str) -> str:
    """Mask a value, keeping only the first and last two characters.

    Values of four characters or fewer are masked entirely.
    """
    if len(value) <= 4:
        return "*" * len(value)
    return f"{value[:2]}{'*' * (len(value) - 4)}{value[-2:]}"


def check_env_var(name: str) -> CheckResult:
    """Check ``name`` against the process environment."""
    return EnvChecker().check(name)
