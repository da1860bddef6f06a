"""
File probe port interface used by command resolution.
"""

from abc import ABC, abstractmethod


class FileProbePort(ABC):
    """Port interface for the filesystem checks made while resolving commands."""

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """
        Check whether a regular file exists at the given path.

        Args:
            path: Absolute or relative path

        Returns:
            True if a regular file exists there
        """
        pass

    @abstractmethod
    def absolute_path(self, path: str) -> str:
        """
        Expand a path to an absolute one, relative to the current directory.

        Args:
            path: Absolute or relative path

        Returns:
            The absolute path
        """
        pass
