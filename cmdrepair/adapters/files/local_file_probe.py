"""
Local file system adapter implementation for command resolution probes.
"""

import logging
import os

from typing_extensions import override

from cmdrepair.ports.files.file_probe_port import FileProbePort


class LocalFileProbe(FileProbePort):
    """Local file system implementation of the file probe port."""

    def __init__(self, logger: logging.Logger | None = None):
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def is_file(self, path: str) -> bool:
        found = os.path.isfile(path)
        self._logger.debug(f"Probe {path!r}: {'found' if found else 'missing'}")
        return found

    @override
    def absolute_path(self, path: str) -> str:
        return os.path.abspath(os.path.expanduser(path))
