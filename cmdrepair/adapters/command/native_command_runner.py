"""
Passthrough command runner: hands every call to the native launcher unchanged.
"""

import logging
from typing import Optional

from typing_extensions import override

from cmdrepair.entities.Invocation import Invocation
from cmdrepair.ports.command.command_runner_port import CommandRunnerPort
from cmdrepair.ports.command.native_launcher_port import NativeLauncherPort


class NativeCommandRunner(CommandRunnerPort):
    """Runner for platforms whose launcher already has correct argv semantics."""

    def __init__(
        self,
        launcher: NativeLauncherPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._launcher = launcher
        self._logger = logger or logging.getLogger(__name__)

    @property
    @override
    def last_status(self) -> Optional[int]:
        return self._launcher.last_status

    @override
    def run(self, command: str, *arguments: str) -> bool:
        invocation = Invocation(command, arguments)
        if invocation.is_empty():
            self._logger.info(f"Not launching {command!r}: nothing to run")
            return False
        self._logger.debug(f"Passthrough run: {invocation}")
        if invocation.has_arguments():
            return self._launcher.launch_argv([command, *invocation.arguments])
        return self._launcher.launch_string(command)

    @override
    def capture(self, command: str) -> str:
        return self._launcher.capture(command)
