"""
Tests for the cmdrepair command-line tool.
"""

import json
from unittest.mock import MagicMock

import pytest

from cmdrepair.cli_run import main
from cmdrepair.container import DependencyContainer
from cmdrepair.entities.LaunchPlan import LaunchPlan
from cmdrepair.entities.ResolvedTarget import ResolvedTarget, TargetKind
from cmdrepair.exceptions import LaunchError


@pytest.fixture
def deps():
    deps = MagicMock(spec=DependencyContainer)
    deps.get_settings.return_value.log_level = "WARNING"
    return deps


class TestCli:
    """Test cases for cli_run.main."""

    def test_run_success(self, deps):
        deps.get_command_runner.return_value.run.return_value = True

        assert main(["run", "echo", "1", "2"], deps) == 0
        deps.get_command_runner.return_value.run.assert_called_once_with(
            "echo", "1", "2"
        )

    def test_run_failure(self, deps):
        deps.get_command_runner.return_value.run.return_value = False

        assert main(["run", ""], deps) == 1

    def test_run_with_forced_runner(self, deps):
        deps.get_native_runner.return_value.run.return_value = True

        assert main(["--runner", "native", "run", "echo 1"], deps) == 0
        deps.get_native_runner.return_value.run.assert_called_once_with("echo 1")
        deps.get_command_runner.assert_not_called()

    def test_capture_prints_output_and_returns_status(self, deps, capsys):
        runner = deps.get_repaired_runner.return_value
        runner.capture.return_value = "1 2\n"
        runner.last_status = 3

        assert main(["--runner", "repaired", "capture", "echo 1 2"], deps) == 3
        assert capsys.readouterr().out == "1 2\n"

    @pytest.mark.parametrize("status,expected", [(-15, 143), (-9, 137), (None, 1)])
    def test_capture_exit_code_for_killed_or_unstarted_child(
        self, deps, capsys, status, expected
    ):
        runner = deps.get_command_runner.return_value
        runner.capture.return_value = ""
        runner.last_status = status

        assert main(["capture", "sleep 60"], deps) == expected

    def test_capture_json(self, deps, capsys):
        runner = deps.get_command_runner.return_value
        runner.capture.return_value = "x\n"
        runner.last_status = 0

        assert main(["--json", "capture", "echo x"], deps) == 0
        assert json.loads(capsys.readouterr().out) == {"output": "x\n", "exit_status": 0}

    def test_capture_launch_error(self, deps, capsys):
        deps.get_command_runner.return_value.capture.side_effect = LaunchError("boom")

        assert main(["capture", "echo"], deps) == 2
        assert "boom" in capsys.readouterr().err

    def test_resolve(self, deps, capsys):
        deps.get_command_repairer.return_value.resolve.return_value = ResolvedTarget(
            "d/e.bat", TargetKind.BATCH_FILE
        )

        assert main(["resolve", "d/e"], deps) == 0
        out = capsys.readouterr().out
        assert "path: d/e.bat" in out
        assert "kind: batch_file" in out

    def test_repair(self, deps, capsys):
        deps.get_command_repairer.return_value.repair.return_value = '"d\\e.exe" 1'

        assert main(["repair", "d/e 1"], deps) == 0
        assert capsys.readouterr().out == '"d\\e.exe" 1\n'

    def test_plan_pretty(self, deps, capsys):
        deps.get_repaired_runner.return_value.plan.return_value = LaunchPlan.with_argv(
            "C:\\prog.exe", "1"
        )

        assert main(["--pretty", "plan", "prog", "1"], deps) == 0
        out = capsys.readouterr().out
        assert "argv" in out
        assert "prog.exe" in out
