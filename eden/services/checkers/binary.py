# SPDX-License-Identifier: MIT
"""Binary checker.

Validates that a configured command is on PATH and reports its version.
Version detection is best effort: tools disagree on which flag prints a
version and where they print it, so several flags are tried and the first
usable line wins.
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass, field

from eden.core.config import BinaryCheck
from eden.services.checkers.base import CheckResult, CheckType
from eden.services.checkers.common import (
    CommandRunner,
    DefaultCommandRunner,
    extract_version,
    first_line,
)

__all__ = ["BinaryChecker", "VERSION_FLAGS", "check_binary"]

# Tried in order; the first flag that yields a version line wins.
VERSION_FLAGS: tuple[str, ...] = ("--version", "-version", "-V", "version")

# Some tools print their version for -V but still exit non-zero.
_LENIENT_FLAGS = frozenset({"-V"})

DEFAULT_VERSION_TIMEOUT = 10.0

NOT_FOUND_MESSAGE = "not found in PATH"
UNKNOWN_VERSION = "unknown version"


@dataclass(frozen=True, slots=True)
class BinaryChecker:
    """Check that binaries are installed.

    Attributes:
        runner: Command runner for version probes
        timeout: Seconds each version probe may take
    """

    runner: CommandRunner = field(default_factory=DefaultCommandRunner)
    timeout: float | None = DEFAULT_VERSION_TIMEOUT

    def check(self, binary: BinaryCheck) -> CheckResult:
        """Check a binary is available in PATH."""
        name = binary.name
        path = shutil.which(name)
        if not path:
            return CheckResult.failure(CheckType.BINARY, name, NOT_FOUND_MESSAGE)

        version = self.get_version(name) or UNKNOWN_VERSION
        return CheckResult.success(CheckType.BINARY, name, f"{version} ({path})")

    def get_version(self, name: str) -> str | None:
        """Return a display version for ``name``, or None if none was found."""
        for flag in VERSION_FLAGS:
            version = self._try_version_flag(name, flag)
            if version is not None:
                return version
        return None

    def _try_version_flag(self, name: str, flag: str) -> str | None:
        try:
            result = self.runner.run([name, flag], timeout=self.timeout)
        except (OSError, UnicodeDecodeError, subprocess.TimeoutExpired):
            return None

        if result.returncode != 0 and flag not in _LENIENT_FLAGS:
            return None

        line = first_line(result.stdout or "", result.stderr or "")
        if line is None:
            return None
        return extract_version(line)


def check_binary(binary: BinaryCheck) -> CheckResult:
    """Check ``binary`` with the default subprocess runner."""
    return BinaryChecker().check(binary)
