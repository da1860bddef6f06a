"""
Pytest configuration and shared fixtures.
"""

import os
import stat
import tempfile
from unittest.mock import MagicMock

import pytest

from cmdrepair.config.shell_config import ShellConfig
from cmdrepair.container import DependencyContainer
from cmdrepair.ports.command.native_launcher_port import NativeLauncherPort
from cmdrepair.ports.files.file_probe_port import FileProbePort


def write_script(path: str, body: str) -> str:
    """Write an executable /bin/sh script, creating parent directories."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w") as f:
        f.write("#!/bin/sh\n" + body)
    os.chmod(path, os.stat(path).st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory holding runnable files.

    Layout:
        prog.exe, tool.com, both.exe, both.bat, script.bat, legacy.cmd,
        sub dir/spaced.bat, readme.txt

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        for name in (
            "prog.exe",
            "tool.com",
            "both.exe",
            "both.bat",
            "script.bat",
            "legacy.cmd",
            os.path.join("sub dir", "spaced.bat"),
            "readme.txt",
        ):
            write_script(os.path.join(temp_dir, name), "exit 0\n")
        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def windows_config():
    """cmd.exe configuration, independent of the platform running the tests."""
    return ShellConfig.for_windows(comspec=r"C:\Windows\system32\cmd.exe")


@pytest.fixture
def posix_config():
    return ShellConfig.for_posix()


@pytest.fixture
def fake_probe():
    """
    File probe backed by an in-memory set of existing files.

    Add paths to ``fake_probe.files`` to make them exist.
    """
    probe = MagicMock(spec=FileProbePort)
    probe.files = set()
    probe.is_file.side_effect = lambda path: path in probe.files
    probe.absolute_path.side_effect = lambda path: "C:\\work\\" + path
    return probe


@pytest.fixture
def mock_launcher():
    """Native launcher mock reporting success and status 0."""
    launcher = MagicMock(spec=NativeLauncherPort)
    launcher.launch_argv.return_value = True
    launcher.launch_string.return_value = True
    launcher.capture.return_value = ""
    launcher.last_status = 0
    return launcher


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def script_writer():
    """Return the helper that writes executable /bin/sh scripts."""
    return write_script
