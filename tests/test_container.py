"""
Tests for the DependencyContainer runner selection.
"""

import pytest

from cmdrepair.adapters.command.native_command_runner import NativeCommandRunner
from cmdrepair.container import DependencyContainer
from cmdrepair.exceptions import ConfigurationError
from cmdrepair.use_cases.command.dispatch_command import RepairedCommandRunner


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for key in ("CMDREPAIR_RUNNER", "CMDREPAIR_BUILTIN_ARGS", "COMSPEC"):
        monkeypatch.delenv(key, raising=False)


class TestDependencyContainer:
    """Test cases for the DependencyContainer."""

    def test_auto_selects_repaired_runner_on_windows(self):
        container = DependencyContainer(platform="win32")

        assert isinstance(container.get_command_runner(), RepairedCommandRunner)
        assert container.get_runner_name() == "repaired"
        assert container.get_shell_config().call_prefix == "call "

    def test_auto_selects_native_runner_elsewhere(self):
        container = DependencyContainer(platform="linux")

        assert isinstance(container.get_command_runner(), NativeCommandRunner)
        assert container.get_runner_name() == "native"

    @pytest.mark.parametrize("platform", ["linux", "win32"])
    def test_default_runner_fails_empty_command(self, platform):
        runner = DependencyContainer(platform=platform).get_command_runner()

        assert runner.run("") is False
        assert runner.run("", "") is False

    def test_runner_can_be_forced(self, monkeypatch):
        monkeypatch.setenv("CMDREPAIR_RUNNER", "repaired")
        container = DependencyContainer(platform="linux")

        assert isinstance(container.get_command_runner(), RepairedCommandRunner)

    def test_comspec_is_read_from_settings(self, monkeypatch):
        monkeypatch.setenv("COMSPEC", r"C:\COMMAND.COM")
        container = DependencyContainer(platform="win32")

        assert container.get_shell_config().batch_exts == ("bat",)

    def test_instances_are_shared(self, dependency_container):
        repaired = dependency_container.get_repaired_runner()

        assert dependency_container.get_repaired_runner() is repaired
        assert dependency_container.get_native_launcher() is (
            dependency_container.get_native_launcher()
        )
        assert dependency_container.get_command_repairer() is (
            dependency_container.get_command_repairer()
        )

    def test_selection_is_logged_once(self, dependency_container, mock_logger):
        dependency_container.get_command_runner()
        dependency_container.get_command_runner()

        assert mock_logger.info.call_count == 1

    def test_reset(self, dependency_container):
        runner = dependency_container.get_command_runner()
        dependency_container.reset()

        assert dependency_container.get_command_runner() is not runner

    def test_invalid_settings_surface_on_use(self, monkeypatch):
        monkeypatch.setenv("CMDREPAIR_RUNNER", "zsh")
        container = DependencyContainer(platform="linux")

        with pytest.raises(ConfigurationError):
            container.get_command_runner()
