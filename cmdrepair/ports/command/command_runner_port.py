"""
Command runner port: the capability that replaces the native "system"/"backticks" pair.
"""

from abc import ABC, abstractmethod
from typing import Optional


class CommandRunnerPort(ABC):
    """Port interface for running commands and capturing their output."""

    @abstractmethod
    def run(self, command: str, *arguments: str) -> bool:
        """
        Run a command, letting the child write to the caller's streams.

        Args:
            command: Program name or full command line
            *arguments: Explicit argument vector (may be empty)

        Returns:
            True if the command ran and exited with status 0, False otherwise
        """
        pass

    @abstractmethod
    def capture(self, command: str) -> str:
        """
        Run a command line and return its standard output.

        Args:
            command: Full command line

        Returns:
            The captured output text; the exit status is available via last_status

        Raises:
            LaunchError: If the shell itself could not be spawned
        """
        pass

    @property
    @abstractmethod
    def last_status(self) -> Optional[int]:
        """Exit status of the most recent launch, None if it never started."""
        pass
