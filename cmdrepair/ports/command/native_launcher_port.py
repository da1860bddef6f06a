from abc import ABC, abstractmethod
from typing import Optional, Sequence


class NativeLauncherPort(ABC):
    """Port for the platform's own process launcher."""

    @abstractmethod
    def launch_argv(self, argv: Sequence[str]) -> bool:
        """Start argv[0] directly with the remaining items as arguments, no shell."""
        pass

    @abstractmethod
    def launch_string(self, command: str) -> bool:
        """Run a single command string through the system shell."""
        pass

    @abstractmethod
    def capture(self, command: str) -> str:
        """Run a command string through the system shell and return its stdout."""
        pass

    @property
    @abstractmethod
    def last_status(self) -> Optional[int]:
        """Exit status of the most recent launch, None if it never started."""
        pass
