"""
Use case for resolving command names and repairing command lines for the native shell.
"""

import logging
import re
from typing import Optional, Sequence

from cmdrepair.config.shell_config import ShellConfig
from cmdrepair.entities.ResolvedTarget import ResolvedTarget, TargetKind
from cmdrepair.ports.files.file_probe_port import FileProbePort

_QUOTED_TOKEN = re.compile(r'\A(\s*)"(.*?)"')
_LEADING_TOKEN = re.compile(r"\A(\s*)(\S+)")
_WHITESPACE = re.compile(r"\s+")


class CommandRepairer:
    """
    Parser/repairer for command names and whole command lines.

    Knows the runnable extensions and built-ins of the target shell (from the
    injected ShellConfig) and asks the file probe which candidates exist.
    """

    def __init__(
        self,
        config: ShellConfig,
        file_probe: FileProbePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the repairer.

        Args:
            config: Shell configuration (extensions, built-ins, separator)
            file_probe: Filesystem probe used to find candidate files
            logger: Logger instance to use for logging
        """
        self._config = config
        self._file_probe = file_probe
        self._logger = logger or logging.getLogger(__name__)

    @property
    def config(self) -> ShellConfig:
        return self._config

    def find_runnable(self, file_stem: str) -> Optional[str]:
        """
        Find the runnable file a name refers to.

        A name that already carries a runnable extension is returned as is,
        without touching the filesystem. Otherwise each extension is tried in
        priority order (binaries before batch files) and the first existing
        file wins.

        Args:
            file_stem: Command name, with or without extension

        Returns:
            The runnable file name, or None if no candidate exists
        """
        if not file_stem.strip():
            return None
        if self._config.is_runnable_name(file_stem):
            return file_stem
        for ext in self._config.runnable_exts:
            candidate = f"{file_stem}.{ext}"
            if self._file_probe.is_file(candidate):
                self._logger.debug(f"Resolved {file_stem!r} to {candidate!r}")
                return candidate
        return None

    def resolve(self, file_stem: str, args: Sequence[str] = ()) -> ResolvedTarget:
        """
        Classify a command name for dispatch.

        Args:
            file_stem: Command name, with or without extension
            args: Arguments the command will receive; they do not change the result

        Returns:
            ResolvedTarget: runnable file with its kind, or the original stem
            tagged INTERNAL_COMMAND or UNRESOLVED
        """
        runnable = self.find_runnable(file_stem)
        if runnable is not None:
            if self._config.is_binary_name(runnable):
                return ResolvedTarget(runnable, TargetKind.BINARY)
            return ResolvedTarget(runnable, TargetKind.BATCH_FILE)
        if self._config.is_internal_command(file_stem):
            return ResolvedTarget(file_stem, TargetKind.INTERNAL_COMMAND)
        self._logger.debug(
            f"No runnable file for {file_stem!r} (args={list(args)}); leaving it to the shell"
        )
        return ResolvedTarget(file_stem, TargetKind.UNRESOLVED)

    def repair(self, command: str) -> str:
        """
        Repair a whole command line so the shell runs the intended file.

        The program token (quoted or the first whitespace-delimited word) is
        resolved; when it names a runnable file it is replaced by that file's
        quoted path with native separators. Everything else is preserved.
        Unresolvable commands (built-ins, names the shell finds itself) come
        back unchanged.

        Args:
            command: Full command line

        Returns:
            The repaired command line
        """
        quoted = _QUOTED_TOKEN.match(command)
        if quoted:
            runnable = self.find_runnable(quoted.group(2))
            if runnable is None:
                return command
            return self._replace_token(command, quoted.group(1), runnable, quoted.end())

        leading = _LEADING_TOKEN.match(command)
        if not leading:
            # blank
            return command

        runnable = self.find_runnable(leading.group(2))
        end = leading.end()
        if runnable is None:
            spaced = self._find_spaced_runnable(command, leading.start(2), leading.end(2))
            if spaced is None:
                return command
            runnable, end = spaced
        return self._replace_token(command, leading.group(1), runnable, end)

    def join_command(self, command: str, *args: str) -> str:
        """
        Join a program and its arguments into a single shell command line.

        Args:
            command: Program name or path
            *args: Arguments, passed through verbatim

        Returns:
            The command line, with the program quoted if it contains whitespace
        """
        first = command
        if _WHITESPACE.search(command) and not self._is_quoted(command):
            first = self.quote(command)
        return " ".join([self.to_native_separators(first), *args])

    def to_native_separators(self, text: str) -> str:
        # cmd.exe reads an unquoted "/y" as a switch
        return text.replace("/", self._config.native_separator)

    def quote(self, text: str) -> str:
        return f'"{text}"'

    def unquote(self, text: str) -> str:
        if self._is_quoted(text):
            return text[1:-1]
        return text

    def expand_path(self, path: str) -> str:
        return self._file_probe.absolute_path(path)

    def _is_quoted(self, text: str) -> bool:
        return len(text) >= 2 and text.startswith('"') and text.endswith('"')

    def _replace_token(self, command: str, lead: str, runnable: str, end: int) -> str:
        repaired = lead + self.quote(self.to_native_separators(runnable)) + command[end:]
        self._logger.debug(f"Repaired {command!r} -> {repaired!r}")
        return repaired

    def _find_spaced_runnable(
        self, command: str, start: int, token_end: int
    ) -> Optional[tuple[str, int]]:
        """
        Look for an unquoted runnable path containing spaces, e.g. ``dir/b c.bat 1``.

        Only prefixes ending at a word boundary that carry a runnable extension
        and exist on disk are accepted, shortest first.
        """
        ends = [m.start() for m in _WHITESPACE.finditer(command, start)]
        ends.append(len(command.rstrip()))
        for end in dict.fromkeys(e for e in ends if e > token_end):
            candidate = command[start:end]
            if self._config.is_runnable_name(candidate) and self._file_probe.is_file(
                candidate
            ):
                return candidate, end
        return None
