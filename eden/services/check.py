# SPDX-License-Identifier: MIT
"""Run every configured check, in configuration order."""

from __future__ import annotations

from dataclasses import dataclass, field

from eden.core.config import Config
from eden.services.checkers import BinaryChecker, CheckResult, EnvChecker

__all__ = ["CheckReport", "CheckService", "run_checks"]


@dataclass(frozen=True, slots=True)
class CheckReport:
    results: list[CheckResult]

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.failed)

    def has_failures(self) -> bool:
        return any(r.failed for r in self.results)


@dataclass(frozen=True, slots=True)
class CheckService:
    """Runs binary checks, then environment checks.

    Every configured check runs and contributes exactly one result; a
    failure never stops the remaining checks.
    """

    binary_checker: BinaryChecker = field(default_factory=BinaryChecker)
    env_checker: EnvChecker = field(default_factory=EnvChecker)

    def run(self, config: Config) -> CheckReport:
        results: list[CheckResult] = []

        for binary in config.checks.binaries:
            results.append(self.binary_checker.check(binary))

        for var in config.checks.environment:
            results.append(self.env_checker.check(var))

        return CheckReport(results=results)


def run_checks(config: Config) -> list[CheckResult]:
    """Run all checks in ``config`` with the default checkers."""
    return CheckService().run(config).results
