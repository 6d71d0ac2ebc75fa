# SPDX-License-Identifier: MIT
"""Common utilities for checkers.

This module provides shared functionality used by the binary checker:
- CommandRunner protocol for subprocess abstraction
- Version-line helpers for heterogeneous ``--version`` output
"""

from __future__ import annotations

import re
import subprocess
from typing import Protocol

__all__ = [
    "CommandRunner",
    "DefaultCommandRunner",
    "first_line",
    "extract_version",
]

# Longest raw line shown when no version number can be found in it.
_MAX_RAW_VERSION_LEN = 50

# Leading/trailing characters that are neither ASCII digits nor dots.
_VERSION_EDGES_RE = re.compile(r"^[^0-9.]+|[^0-9.]+$")


class CommandRunner(Protocol):
    """Protocol for running commands.

    This abstraction allows mocking subprocess calls in tests.
    """

    def run(self, args: list[str], *, timeout: float | None = None) -> subprocess.CompletedProcess[str]:
        """Run a command with no stdin and return the captured result.

        Args:
            args: Command and arguments
            timeout: Seconds to wait before giving up (None waits forever)

        Returns:
            CompletedProcess with returncode, stdout, stderr

        Raises:
            OSError: The command could not be started
            UnicodeDecodeError: The output is not valid UTF-8
            subprocess.TimeoutExpired: The command did not exit in time
        """
        ...


class DefaultCommandRunner:
    """Default command runner using subprocess.run."""

    def run(self, args: list[str], *, timeout: float | None = None) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
            timeout=timeout,
        )


def first_line(*texts: str) -> str | None:
    """Return the first non-blank line across ``texts``, in order.

    The line is returned as printed (not stripped), so callers see the
    same text the tool wrote.
    """
    for text in texts:
        for line in text.splitlines():
            if line.strip():
                return line
    return None


def extract_version(line: str) -> str:
    """Extract a version from a line like ``"docker version 20.10.8"``.

    The first whitespace-separated token that, once stripped of everything
    but digits and dots at its edges, starts with a digit and contains a dot
    is returned as ``"v<token>"``. Without one, the raw line is returned,
    truncated to 50 characters.

    Example:
        extract_version("node v18.17.0") -> "v18.17.0"
        extract_version("Python 3.12.1") -> "v3.12.1"
    """
    for word in line.split():
        clean = _VERSION_EDGES_RE.sub("", word)
        if clean[:1].isdigit() and "." in clean:
            return f"v{clean}"

    if len(line) > _MAX_RAW_VERSION_LEN:
        return f"{line[:_MAX_RAW_VERSION_LEN]}..."
    return line
