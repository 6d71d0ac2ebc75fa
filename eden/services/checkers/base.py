# SPDX-License-Identifier: MIT
"""Base types for checkers."""

from dataclasses import dataclass
from enum import Enum


class CheckType(Enum):
    """Kind of probe that produced a result."""

    BINARY = "Binary"
    """A command looked up on PATH."""

    ENV = "Env"
    """An environment variable looked up in the process environment."""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a single check.

    Attributes:
        check_type: Which checker produced the result
        name: The probed identifier (e.g., "docker", "DATABASE_URL")
        passed: Whether the check passed
        message: Human-readable detail (version and path, or failure reason)
    """

    check_type: CheckType
    name: str
    passed: bool
    message: str

    @property
    def failed(self) -> bool:
        return not self.passed

    @classmethod
    def success(cls, check_type: CheckType, name: str, message: str) -> "CheckResult":
        """Create a passing check result."""
        return cls(check_type=check_type, name=name, passed=True, message=message)

    @classmethod
    def failure(cls, check_type: CheckType, name: str, message: str) -> "CheckResult":
        """Create a failing check result."""
        return cls(check_type=check_type, name=name, passed=False, message=message)
