# SPDX-License-Identifier: MIT
"""Result type for expected failures.

Loaders and services return ``Ok(value)`` or ``Err(error)`` instead of
raising, so the CLI layer decides how a failure is printed and which exit
code it maps to.

Usage:
    match load_config(path):
        case Ok(config):
            run(config)
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Ok", "Err", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome carrying ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed outcome carrying ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
