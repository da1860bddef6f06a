"""
ResolvedTarget domain entity.
"""

from dataclasses import dataclass
from enum import Enum


class TargetKind(str, Enum):
    """Dispatch-relevant classification of a command name."""

    BINARY = "binary"
    BATCH_FILE = "batch_file"
    INTERNAL_COMMAND = "internal_command"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class ResolvedTarget:
    """
    Result of resolving a command name against the runnable extensions.

    Attributes:
        path: Path of the runnable file, or the original stem when nothing was found
        kind: How the target must be dispatched
    """

    path: str
    kind: TargetKind

    def is_runnable(self) -> bool:
        """True for targets backed by a file (binary or batch file)."""
        return self.kind in (TargetKind.BINARY, TargetKind.BATCH_FILE)

    def get_details(self) -> dict[str, str]:
        return {"path": self.path, "kind": self.kind.value}

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.path}"
