"""
Pydantic models for API requests and responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ResolveRequest(BaseModel):
    """Schema for command name resolution."""

    stem: str = Field(..., description="Command name, with or without extension")


class ResolveResponse(BaseModel):
    """Schema for a resolved target."""

    path: str = Field(..., description="Runnable file, or the original stem")
    kind: str = Field(
        ..., description="binary, batch_file, internal_command or unresolved"
    )

    @classmethod
    def from_entity(cls, target):
        """Create a ResolveResponse schema from a ResolvedTarget entity."""
        details = target.get_details()
        return cls(path=details["path"], kind=details["kind"])


class RepairRequest(BaseModel):
    """Schema for command line repair."""

    command: str = Field(..., description="Full command line")


class RepairResponse(BaseModel):
    """Schema for a repaired command line."""

    command: str = Field(..., description="Command line as received")
    repaired: str = Field(..., description="Command line as the shell will receive it")


class InvocationRequest(BaseModel):
    """Schema for a command with an optional argument vector."""

    command: str = Field(..., description="Program name or full command line")
    arguments: List[str] = Field(
        default_factory=list, description="Explicit argument vector"
    )


class PlanResponse(BaseModel):
    """Schema for the launch the dispatcher would perform."""

    form: str = Field(..., description="none, argv or shell")
    argv: Optional[List[str]] = Field(None, description="Argument vector (argv form)")
    command: Optional[str] = Field(None, description="Shell command line (shell form)")

    @classmethod
    def from_entity(cls, plan):
        """Create a PlanResponse schema from a LaunchPlan entity."""
        details = plan.get_details()
        return cls(form=details["form"], argv=details["argv"], command=details["command"])


class RunResponse(BaseModel):
    """Schema for a run result."""

    succeeded: bool = Field(..., description="True if the command exited with status 0")
    exit_status: Optional[int] = Field(
        None, description="Exit status, null if the process never started"
    )


class CaptureRequest(BaseModel):
    """Schema for output capture."""

    command: str = Field(..., description="Full command line")


class CaptureResponse(BaseModel):
    """Schema for captured output."""

    output: str = Field(..., description="Captured standard output")
    exit_status: Optional[int] = Field(
        None, description="Exit status, null if the process never started"
    )


class ConfigResponse(BaseModel):
    """Schema for the active shell configuration."""

    runner: str = Field(..., description="Selected runner variant")
    binary_exts: List[str] = Field(..., description="Binary extensions, by priority")
    batch_exts: List[str] = Field(..., description="Batch file extensions, by priority")
    builtin_arguments: str = Field(..., description="Policy for built-ins with arguments")
    allow_exec: bool = Field(..., description="Whether run/capture endpoints are enabled")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
