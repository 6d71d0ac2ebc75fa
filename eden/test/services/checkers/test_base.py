# SPDX-License-Identifier: MIT
"""Tests for checker base types."""

import pytest

from eden.services.checkers.base import CheckResult, CheckType


class TestCheckType:
    def test_str(self) -> None:
        assert str(CheckType.BINARY) == "Binary"
        assert str(CheckType.ENV) == "Env"


class TestCheckResult:
    def test_success(self) -> None:
        result = CheckResult.success(CheckType.BINARY, "git", "v2.43.0 (/usr/bin/git)")
        assert result.passed
        assert not result.failed
        assert result.name == "git"

    def test_failure(self) -> None:
        result = CheckResult.failure(CheckType.ENV, "TOKEN", "not set")
        assert not result.passed
        assert result.failed
        assert result.check_type == CheckType.ENV

    def test_frozen(self) -> None:
        result = CheckResult.success(CheckType.ENV, "HOME", "set (/h*****)")
        with pytest.raises(AttributeError):
            result.passed = False  # type: ignore[misc]
