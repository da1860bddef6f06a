"""
Dependency injection container for managing application dependencies.
"""

import logging
import sys
from typing import Optional

from cmdrepair.adapters.command.native_command_runner import NativeCommandRunner
from cmdrepair.adapters.command.subprocess_launcher import SubprocessLauncher
from cmdrepair.adapters.files.local_file_probe import LocalFileProbe
from cmdrepair.config.settings import Settings
from cmdrepair.config.shell_config import ShellConfig
from cmdrepair.ports.command.command_runner_port import CommandRunnerPort
from cmdrepair.ports.command.native_launcher_port import NativeLauncherPort
from cmdrepair.ports.files.file_probe_port import FileProbePort
from cmdrepair.use_cases.command.dispatch_command import RepairedCommandRunner
from cmdrepair.use_cases.command.repair_command import CommandRepairer


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, platform: Optional[str] = None):
        self._instances = {}
        self._logger = logging.getLogger(__name__)
        self._platform = platform or sys.platform

    def get_settings(self) -> Settings:
        """
        Get application settings, read from the environment once.

        Returns:
            Settings instance
        """
        if "settings" not in self._instances:
            self._instances["settings"] = Settings()
        return self._instances["settings"]

    def get_shell_config(self) -> ShellConfig:
        """
        Get the shell configuration for the running platform.

        Returns:
            Immutable ShellConfig shared by the repairer and the dispatcher
        """
        if "shell_config" not in self._instances:
            settings = self.get_settings()
            self._instances["shell_config"] = ShellConfig.from_environment(
                comspec=settings.comspec,
                builtin_arguments=settings.builtin_arguments,
                platform=self._platform,
            )
        return self._instances["shell_config"]

    def get_file_probe(self) -> FileProbePort:
        if "file_probe" not in self._instances:
            self._instances["file_probe"] = LocalFileProbe(self._logger)
        return self._instances["file_probe"]

    def get_native_launcher(self) -> NativeLauncherPort:
        """
        Get native launcher adapter instance.

        Returns:
            NativeLauncherPort implementation
        """
        if "native_launcher" not in self._instances:
            self._instances["native_launcher"] = SubprocessLauncher(self._logger)
        return self._instances["native_launcher"]

    def get_command_repairer(self) -> CommandRepairer:
        """
        Get command repairer with injected dependencies.

        Returns:
            Configured CommandRepairer
        """
        if "command_repairer" not in self._instances:
            self._instances["command_repairer"] = CommandRepairer(
                self.get_shell_config(), self.get_file_probe(), self._logger
            )
        return self._instances["command_repairer"]

    def get_native_runner(self) -> NativeCommandRunner:
        if "native_runner" not in self._instances:
            self._instances["native_runner"] = NativeCommandRunner(
                self.get_native_launcher(), self._logger
            )
        return self._instances["native_runner"]

    def get_repaired_runner(self) -> RepairedCommandRunner:
        """
        Get the repairing dispatcher with injected dependencies.

        Returns:
            Configured RepairedCommandRunner
        """
        if "repaired_runner" not in self._instances:
            self._instances["repaired_runner"] = RepairedCommandRunner(
                self.get_command_repairer(), self.get_native_launcher(), self._logger
            )
        return self._instances["repaired_runner"]

    def get_runner_name(self) -> str:
        """Name of the runner variant selected by settings ("native" or "repaired")."""
        name = self.get_settings().runner
        if name == "auto":
            name = "repaired" if self._platform.startswith("win") else "native"
        return name

    def get_command_runner(self) -> CommandRunnerPort:
        """
        Get the command runner selected for this process.

        Returns:
            CommandRunnerPort implementation
        """
        if "command_runner" not in self._instances:
            name = self.get_runner_name()
            if name == "repaired":
                runner: CommandRunnerPort = self.get_repaired_runner()
            else:
                runner = self.get_native_runner()
            self._logger.info(f"Using {name} command runner")
            self._instances["command_runner"] = runner
        return self._instances["command_runner"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
