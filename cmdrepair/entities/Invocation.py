"""
Invocation domain entity.
"""

from dataclasses import dataclass

from cmdrepair.exceptions import InvocationError


@dataclass(frozen=True)
class Invocation:
    """
    What the caller wants to run: a command plus an ordered argument list.

    The command may be empty, start with whitespace, or be already quoted.
    """

    command: str
    arguments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.command, str):
            raise InvocationError(
                f"Command must be a string, got {type(self.command).__name__}"
            )
        object.__setattr__(self, "arguments", tuple(str(a) for a in self.arguments))

    def is_empty(self) -> bool:
        """True when there is nothing to launch (blank command)."""
        return not self.command.strip()

    def has_arguments(self) -> bool:
        return len(self.arguments) > 0

    def __str__(self) -> str:
        if not self.arguments:
            return repr(self.command)
        return ", ".join(repr(part) for part in (self.command, *self.arguments))
