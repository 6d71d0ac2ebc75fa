from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from eden import __version__
from eden.cli.app import app
from eden.cli.context import CLIContext
from eden.core.config import Checks, Config
from eden.core.errors import ErrorCode
from eden.output.console import MockConsole
from eden.services.check import CheckReport
from eden.services.checkers import CheckResult, CheckType

runner = CliRunner()

SET_VAR = "EDEN_CLI_TEST_SET"
UNSET_VAR = "EDEN_CLI_TEST_UNSET"


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SET_VAR, "secret123")
    monkeypatch.delenv(UNSET_VAR, raising=False)


def _write_config(path: Path, environment: list[str]) -> Path:
    path.write_text(json.dumps({"checks": {"environment": environment}}), encoding="utf-8")
    return path


class TestCheckCommand:
    def test_no_config_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, [])
        assert result.exit_code == int(ErrorCode.CONFIG_ERROR)
        assert "No config file found" in result.output

    def test_default_invocation_all_pass(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, env: None
    ) -> None:
        _write_config(tmp_path / "eden.json", [SET_VAR])
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, [])

        assert result.exit_code == 0, result.output
        assert f"{SET_VAR} - set (se*****23)" in result.output
        assert "All 1 checks passed" in result.output

    def test_config_source_shown_relative_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, env: None
    ) -> None:
        _write_config(tmp_path / "eden.json", [SET_VAR])
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, [])

        assert result.output.splitlines()[0] == "config: eden.json"

    def test_explicit_config_source_shown_as_given(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, env: None
    ) -> None:
        (tmp_path / "conf").mkdir()
        _write_config(tmp_path / "conf" / "custom.json", [SET_VAR])
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["--config", str(Path("conf") / "custom.json")])

        assert result.output.splitlines()[0] == f"config: {Path('conf') / 'custom.json'}"

    def test_failure_exits_nonzero(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, env: None) -> None:
        _write_config(tmp_path / "eden.json", [SET_VAR, UNSET_VAR])
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["check"])

        assert result.exit_code == int(ErrorCode.CHECKS_FAILED)
        assert f"{UNSET_VAR} - not set" in result.output
        assert "1 sprouted" in result.output
        assert "1 needs water" in result.output

    def test_results_printed_in_config_order(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, env: None
    ) -> None:
        (tmp_path / "eden.toml").write_text(
            f'[checks]\nbinaries = ["definitely-not-a-real-binary-12345"]\nenvironment = ["{UNSET_VAR}", "{SET_VAR}"]\n',
            encoding="utf-8",
        )
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, [])

        binary = result.output.index("definitely-not-a-real-binary-12345")
        unset = result.output.index(UNSET_VAR)
        set_ = result.output.index(f"{SET_VAR} -")
        assert binary < unset < set_

    @pytest.mark.parametrize(
        "args",
        [
            ["--config", "conf/custom.json"],
            ["-c", "conf/custom.json", "check"],
            ["check", "--config", "conf/custom.json"],
        ],
    )
    def test_explicit_config(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, env: None, args: list[str]
    ) -> None:
        (tmp_path / "conf").mkdir()
        _write_config(tmp_path / "conf" / "custom.json", [SET_VAR])
        # Auto-detected config would fail; --config must win.
        _write_config(tmp_path / "eden.json", [UNSET_VAR])
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, args)

        assert result.exit_code == 0, result.output

    def test_explicit_config_missing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["--config", "missing.toml"])
        assert result.exit_code == int(ErrorCode.CONFIG_ERROR)
        assert "Config file not found" in result.output

    def test_parse_error(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "eden.toml").write_text("[checks\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, [])
        assert result.exit_code == int(ErrorCode.CONFIG_ERROR)
        assert "Failed to parse TOML" in result.output

    def test_unsupported_format(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "eden.ini").write_text("", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["--config", "eden.ini"])
        assert result.exit_code == int(ErrorCode.CONFIG_ERROR)
        assert "Unsupported config format: ini" in result.output


class TestRunCheckWithFakeService:
    """run_check with the service and context swapped out."""

    def _patch(self, monkeypatch: pytest.MonkeyPatch, report: CheckReport) -> MockConsole:
        import eden.cli.commands.check as check_cmd

        console = MockConsole()

        class FakeCheckService:
            def run(self, config: Config) -> CheckReport:
                return report

        monkeypatch.setattr(
            check_cmd,
            "build_context",
            lambda path: CLIContext(config=Config(checks=Checks()), console=console),
        )
        monkeypatch.setattr(check_cmd, "CheckService", FakeCheckService)
        return console

    def test_exits_on_failures(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import eden.cli.commands.check as check_cmd

        console = self._patch(
            monkeypatch,
            CheckReport(
                results=[
                    CheckResult.success(CheckType.BINARY, "git", "v2.43.0 (/usr/bin/git)"),
                    CheckResult.failure(CheckType.ENV, "TOKEN", "not set"),
                ]
            ),
        )

        with pytest.raises(typer.Exit) as exc:
            check_cmd.run_check(None)

        assert exc.value.exit_code == int(ErrorCode.CHECKS_FAILED)
        assert console.messages[-1] == "🌱 1 sprouted, 🥀 1 needs water"

    def test_succeeds_when_clean(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import eden.cli.commands.check as check_cmd

        console = self._patch(
            monkeypatch,
            CheckReport(results=[CheckResult.success(CheckType.ENV, "HOME", "set (/h****ev)")]),
        )

        check_cmd.run_check(None)

        assert console.messages[-1] == "🌻 The garden is flourishing! All 1 checks passed"


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == __version__
