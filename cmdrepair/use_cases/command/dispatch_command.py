"""
Use case for dispatching repaired invocations to the native launcher.
"""

import logging
from typing import Optional

from typing_extensions import override

from cmdrepair.config.shell_config import BuiltinArgumentsPolicy
from cmdrepair.entities.Invocation import Invocation
from cmdrepair.entities.LaunchPlan import LaunchForm, LaunchPlan
from cmdrepair.entities.ResolvedTarget import TargetKind
from cmdrepair.ports.command.command_runner_port import CommandRunnerPort
from cmdrepair.ports.command.native_launcher_port import NativeLauncherPort
from cmdrepair.use_cases.command.repair_command import CommandRepairer


class RepairedCommandRunner(CommandRunnerPort):
    """
    Dispatcher choosing between the argv and the shell launch forms.

    Resolved binaries are started directly with their argument vector. Batch
    files, built-ins and anything unresolved go through the shell as a single
    string, since only the shell splits their arguments correctly.
    """

    def __init__(
        self,
        repairer: CommandRepairer,
        launcher: NativeLauncherPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            repairer: Parser/repairer for command names and command lines
            launcher: Native launcher receiving the final invocation
            logger: Logger instance to use for logging
        """
        self._repairer = repairer
        self._launcher = launcher
        self._logger = logger or logging.getLogger(__name__)

    @property
    @override
    def last_status(self) -> Optional[int]:
        return self._launcher.last_status

    def plan(self, command: str, *arguments: str) -> LaunchPlan:
        """
        Decide how an invocation is handed to the native launcher.

        Args:
            command: Program name or full command line
            *arguments: Explicit argument vector (may be empty)

        Returns:
            LaunchPlan describing the launch, NONE for an empty command

        Raises:
            InvocationError: If the command is not a string
        """
        invocation = Invocation(command, arguments)
        if invocation.is_empty():
            return LaunchPlan.none()

        config = self._repairer.config
        if not invocation.has_arguments():
            return LaunchPlan.with_shell(
                config.call_prefix + self._repairer.repair(invocation.command)
            )

        args = invocation.arguments
        file = self._repairer.unquote(invocation.command.strip())
        target = self._repairer.resolve(file, args)

        if target.kind is TargetKind.BINARY:
            return LaunchPlan.with_argv(self._repairer.expand_path(target.path), *args)

        if target.kind is TargetKind.BATCH_FILE:
            return LaunchPlan.with_shell(
                config.call_prefix + self._repairer.join_command(target.path, *args)
            )

        if target.kind is TargetKind.INTERNAL_COMMAND:
            policy = config.builtin_arguments
            if policy is BuiltinArgumentsPolicy.REJECT:
                self._logger.warning(
                    f"Refusing explicit arguments for shell built-in {file!r}"
                )
                return LaunchPlan.none()
            if policy is BuiltinArgumentsPolicy.QUOTE:
                args = tuple(self._repairer.quote(a) for a in args)

        # unresolved names may still work once the shell expands variables
        return LaunchPlan.with_shell(
            config.call_prefix + self._repairer.join_command(file, *args)
        )

    @override
    def run(self, command: str, *arguments: str) -> bool:
        launch = self.plan(command, *arguments)
        self._logger.debug(f"Dispatching {Invocation(command, arguments)} as {launch}")
        if launch.form is LaunchForm.ARGV:
            return self._launcher.launch_argv(launch.argv or ())
        if launch.form is LaunchForm.SHELL:
            return self._launcher.launch_string(launch.command or "")
        self._logger.info(f"Not launching {command!r}: nothing to run")
        return False

    @override
    def capture(self, command: str) -> str:
        return self._launcher.capture(self._repairer.repair(command))
