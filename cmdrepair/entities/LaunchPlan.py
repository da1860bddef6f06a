"""
LaunchPlan domain entity: the native launch the dispatcher decided on.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class LaunchForm(str, Enum):
    NONE = "none"
    ARGV = "argv"
    SHELL = "shell"


@dataclass(frozen=True)
class LaunchPlan:
    """
    A single native launch.

    Exactly one of ``argv`` (ARGV form) or ``command`` (SHELL form) is set;
    the NONE form carries neither and means "report failure, spawn nothing".
    """

    form: LaunchForm
    argv: Optional[tuple[str, ...]] = None
    command: Optional[str] = None

    def __post_init__(self) -> None:
        if self.form is LaunchForm.ARGV and not self.argv:
            raise ValueError("ARGV launch plan requires a non-empty argv")
        if self.form is LaunchForm.SHELL and self.command is None:
            raise ValueError("SHELL launch plan requires a command string")

    @classmethod
    def none(cls) -> "LaunchPlan":
        return cls(LaunchForm.NONE)

    @classmethod
    def with_argv(cls, *argv: str) -> "LaunchPlan":
        return cls(LaunchForm.ARGV, argv=tuple(argv))

    @classmethod
    def with_shell(cls, command: str) -> "LaunchPlan":
        return cls(LaunchForm.SHELL, command=command)

    def get_details(self) -> dict[str, Any]:
        return {
            "form": self.form.value,
            "argv": list(self.argv) if self.argv is not None else None,
            "command": self.command,
        }

    def __str__(self) -> str:
        if self.form is LaunchForm.ARGV:
            return f"argv: {list(self.argv or ())}"
        if self.form is LaunchForm.SHELL:
            return f"shell: {self.command}"
        return "none"
