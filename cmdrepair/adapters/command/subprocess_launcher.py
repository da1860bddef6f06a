"""
Native launcher adapter built on the subprocess module.
"""

import logging
import subprocess
from typing import Optional, Sequence

from typing_extensions import override

from cmdrepair.exceptions import LaunchError
from cmdrepair.ports.command.native_launcher_port import NativeLauncherPort


class SubprocessLauncher(NativeLauncherPort):
    """
    Launch processes with subprocess.run.

    The single-string form goes through the system shell (COMSPEC /c on
    Windows, /bin/sh -c elsewhere); the argv form starts the program directly.
    The child inherits the caller's stdout/stderr except in capture().
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._last_status: Optional[int] = None

    @property
    @override
    def last_status(self) -> Optional[int]:
        return self._last_status

    @override
    def launch_argv(self, argv: Sequence[str]) -> bool:
        argv = [str(a) for a in argv]
        self._logger.info(f"Launching argv: {argv}")
        try:
            completed = subprocess.run(argv, shell=False)
        except OSError as e:
            # Same outcome as the shell reporting an unknown command
            self._last_status = None
            self._logger.warning(f"Could not start {argv[0] if argv else ''!r}: {e}")
            return False
        return self._record(completed.returncode)

    @override
    def launch_string(self, command: str) -> bool:
        self._logger.info(f"Launching through shell: {command}")
        try:
            completed = subprocess.run(command, shell=True)
        except OSError as e:
            self._last_status = None
            self._logger.warning(f"Could not start shell for {command!r}: {e}")
            return False
        return self._record(completed.returncode)

    @override
    def capture(self, command: str) -> str:
        self._logger.info(f"Capturing output of: {command}")
        try:
            completed = subprocess.run(
                command, shell=True, stdout=subprocess.PIPE, text=True
            )
        except OSError as e:
            self._last_status = None
            self._logger.error(f"Failed to capture output of {command!r}: {e}")
            raise LaunchError(f"Failed to run {command!r}: {e}") from e
        self._record(completed.returncode)
        return completed.stdout or ""

    def _record(self, returncode: int) -> bool:
        self._last_status = returncode
        if returncode != 0:
            self._logger.debug(f"Process exited with status {returncode}")
        return returncode == 0
