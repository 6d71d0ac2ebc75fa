# SPDX-License-Identifier: MIT
"""Checker modules for preflight checks.

Each checker handles one kind of configured check:
- BinaryChecker: Validates a command is on PATH and reports its version
- EnvChecker: Validates an environment variable is set
"""

from eden.services.checkers.base import CheckResult, CheckType
from eden.services.checkers.binary import BinaryChecker, check_binary
from eden.services.checkers.env import EnvChecker, check_env_var

__all__ = [
    # Result types
    "CheckResult",
    "CheckType",
    # Checkers
    "BinaryChecker",
    "EnvChecker",
    "check_binary",
    "check_env_var",
]
