"""
Shell configuration: runnable extensions, cmd.exe built-ins and quoting conventions.

Built once at startup and shared read-only by the repairer and the dispatcher.
"""

import os
import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

# Commands cmd.exe runs itself, with no file on disk.
INTERNAL_COMMANDS = frozenset(
    [
        "assoc",
        "break",
        "call",
        "cd",
        "chcp",
        "chdir",
        "cls",
        "color",
        "copy",
        "ctty",
        "date",
        "del",
        "dir",
        "echo",
        "endlocal",
        "erase",
        "exit",
        "for",
        "ftype",
        "goto",
        "if",
        "lfnfor",
        "lh",
        "lock",
        "md",
        "mkdir",
        "move",
        "path",
        "pause",
        "popd",
        "prompt",
        "pushd",
        "rd",
        "rem",
        "ren",
        "rename",
        "rmdir",
        "set",
        "setlocal",
        "shift",
        "start",
        "time",
        "title",
        "truename",
        "type",
        "unlock",
        "ver",
        "verify",
        "vol",
    ]
)

BINARY_EXTS = ("com", "exe")

# command.com has no .cmd support
_LEGACY_INTERPRETER = re.compile(r"command\.(com|exe)\Z", re.IGNORECASE)


class BuiltinArgumentsPolicy(str, Enum):
    """How explicit arguments to a shell built-in are delivered."""

    JOIN = "join"
    QUOTE = "quote"
    REJECT = "reject"


def _extension_pattern(exts: tuple[str, ...]) -> "re.Pattern[str]":
    return re.compile(r"\.(" + "|".join(re.escape(e) for e in exts) + r")\Z", re.IGNORECASE)


@dataclass(frozen=True)
class ShellConfig:
    """Immutable description of the native shell the commands are repaired for."""

    binary_exts: tuple[str, ...] = BINARY_EXTS
    batch_exts: tuple[str, ...] = ("bat", "cmd")
    internal_commands: frozenset[str] = INTERNAL_COMMANDS
    native_separator: str = "\\"
    call_prefix: str = "call "
    builtin_arguments: BuiltinArgumentsPolicy = BuiltinArgumentsPolicy.JOIN
    _patterns: dict[str, "re.Pattern[str]"] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not self.binary_exts and not self.batch_exts:
            raise ValueError("At least one runnable extension is required")
        patterns: dict[str, re.Pattern[str]] = {}
        if self.binary_exts:
            patterns["binary"] = _extension_pattern(self.binary_exts)
        if self.batch_exts:
            patterns["batch"] = _extension_pattern(self.batch_exts)
        patterns["runnable"] = _extension_pattern(self.runnable_exts)
        object.__setattr__(self, "_patterns", patterns)

    @property
    def runnable_exts(self) -> tuple[str, ...]:
        """Binary extensions first, so binaries win over scripts of the same stem."""
        return self.binary_exts + self.batch_exts

    def is_binary_name(self, name: str) -> bool:
        pattern = self._patterns.get("binary")
        return bool(pattern and pattern.search(name))

    def is_batch_name(self, name: str) -> bool:
        pattern = self._patterns.get("batch")
        return bool(pattern and pattern.search(name))

    def is_runnable_name(self, name: str) -> bool:
        return bool(self._patterns["runnable"].search(name))

    def is_internal_command(self, name: str) -> bool:
        return name.strip().lower() in self.internal_commands

    @classmethod
    def for_windows(
        cls,
        comspec: Optional[str] = None,
        builtin_arguments: BuiltinArgumentsPolicy = BuiltinArgumentsPolicy.JOIN,
    ) -> "ShellConfig":
        """
        Configuration for cmd.exe (or command.com when COMSPEC names it).

        Args:
            comspec: Value of the COMSPEC environment variable, if any
            builtin_arguments: Policy for built-ins called with explicit arguments

        Returns:
            ShellConfig for the Windows command interpreter
        """
        batch_exts: tuple[str, ...] = ("bat",)
        if not (comspec and _LEGACY_INTERPRETER.search(comspec)):
            batch_exts += ("cmd",)
        return cls(
            batch_exts=batch_exts,
            native_separator="\\",
            call_prefix="call ",
            builtin_arguments=builtin_arguments,
        )

    @classmethod
    def for_posix(
        cls,
        builtin_arguments: BuiltinArgumentsPolicy = BuiltinArgumentsPolicy.JOIN,
    ) -> "ShellConfig":
        """Configuration for /bin/sh: same extension sets, native separator, no call prefix."""
        return cls(
            native_separator="/",
            call_prefix="",
            builtin_arguments=builtin_arguments,
        )

    @classmethod
    def from_environment(
        cls,
        comspec: Optional[str] = None,
        builtin_arguments: BuiltinArgumentsPolicy = BuiltinArgumentsPolicy.JOIN,
        platform: Optional[str] = None,
    ) -> "ShellConfig":
        """Build the configuration matching the running platform."""
        platform = platform or sys.platform
        if platform.startswith("win"):
            if comspec is None:
                comspec = os.environ.get("COMSPEC")
            return cls.for_windows(comspec, builtin_arguments)
        return cls.for_posix(builtin_arguments)
