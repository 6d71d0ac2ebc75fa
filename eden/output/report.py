# SPDX-License-Identifier: MIT
"""Render check results and the closing tally."""

from __future__ import annotations

from collections.abc import Sequence

from eden.output.console import ConsoleProtocol, Style
from eden.services.checkers import CheckResult

__all__ = ["print_summary", "print_tally"]

PASS_MARK = "🌱"
FAIL_MARK = "🥀"


def print_summary(results: Sequence[CheckResult], console: ConsoleProtocol) -> tuple[int, int]:
    """Print one line per result, in order, and return ``(passed, failed)``."""
    passed = 0
    failed = 0

    for result in results:
        if result.passed:
            passed += 1
            console.print_segments(
                (f"{PASS_MARK} ", Style.DEFAULT),
                (str(result.check_type), Style.DIM),
                (": ", Style.DEFAULT),
                (result.name, Style.SUCCESS),
                (" - ", Style.DEFAULT),
                (result.message, Style.DIM),
            )
        else:
            failed += 1
            console.print_segments(
                (f"{FAIL_MARK} ", Style.DEFAULT),
                (str(result.check_type), Style.DIM),
                (": ", Style.DEFAULT),
                (result.name, Style.ERROR),
                (" - ", Style.DEFAULT),
                (result.message, Style.WARNING),
            )

    return passed, failed


def print_tally(passed: int, failed: int, console: ConsoleProtocol) -> None:
    console.newline()
    if failed:
        verb = "needs" if failed == 1 else "need"
        console.print(f"{PASS_MARK} {passed} sprouted, {FAIL_MARK} {failed} {verb} water")
    else:
        console.print(f"🌻 The garden is flourishing! All {passed} checks passed", Style.BOLD)
