"""
FastAPI router definitions for the API endpoints.
"""

from fastapi import APIRouter, HTTPException

from cmdrepair.api.dependencies import (
    get_command_repairer,
    get_command_runner,
    get_dispatcher,
    get_settings,
)
from cmdrepair.api.schemas import (
    CaptureRequest,
    CaptureResponse,
    ConfigResponse,
    ErrorResponse,
    InvocationRequest,
    PlanResponse,
    RepairRequest,
    RepairResponse,
    ResolveRequest,
    ResolveResponse,
    RunResponse,
)
from cmdrepair.container import container
from cmdrepair.exceptions import BaseAppError, LaunchError

router = APIRouter()


def _require_exec() -> None:
    if not get_settings().allow_exec:
        raise HTTPException(
            status_code=403,
            detail="Command execution is disabled (set CMDREPAIR_ALLOW_EXEC=1)",
        )


@router.post(
    "/commands/resolve",
    response_model=ResolveResponse,
    responses={400: {"model": ErrorResponse}},
)
def resolve_command(body: ResolveRequest):
    """
    Resolve a command name to the file the shell would run.

    Args:
        body: Request body containing the command name

    Returns:
        ResolveResponse: Resolved path and its kind
    """
    try:
        target = get_command_repairer().resolve(body.stem)
        return ResolveResponse.from_entity(target)
    except BaseAppError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post(
    "/commands/repair",
    response_model=RepairResponse,
    responses={400: {"model": ErrorResponse}},
)
def repair_command(body: RepairRequest):
    """Repair a full command line for the native shell."""
    try:
        repaired = get_command_repairer().repair(body.command)
        return RepairResponse(command=body.command, repaired=repaired)
    except BaseAppError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post(
    "/commands/plan",
    response_model=PlanResponse,
    responses={400: {"model": ErrorResponse}},
)
def plan_command(body: InvocationRequest):
    """
    Show how the repairing dispatcher would launch an invocation, without launching it.

    Args:
        body: Command and optional argument vector

    Returns:
        PlanResponse: The launch form and its payload
    """
    try:
        plan = get_dispatcher().plan(body.command, *body.arguments)
        return PlanResponse.from_entity(plan)
    except BaseAppError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post(
    "/commands/run",
    response_model=RunResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def run_command(body: InvocationRequest):
    """
    Run a command with the selected runner.

    The child's output goes to the server's own streams; only the outcome is returned.
    """
    _require_exec()
    runner = get_command_runner()
    try:
        succeeded = runner.run(body.command, *body.arguments)
    except LaunchError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except BaseAppError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return RunResponse(succeeded=succeeded, exit_status=runner.last_status)


@router.post(
    "/commands/capture",
    response_model=CaptureResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def capture_command(body: CaptureRequest):
    """Run a command line with the selected runner and return its standard output."""
    _require_exec()
    runner = get_command_runner()
    try:
        output = runner.capture(body.command)
    except LaunchError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except BaseAppError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CaptureResponse(output=output, exit_status=runner.last_status)


@router.get("/config", response_model=ConfigResponse)
def show_config():
    """Active runner and shell configuration."""
    config = container.get_shell_config()
    settings = get_settings()
    return ConfigResponse(
        runner=container.get_runner_name(),
        binary_exts=list(config.binary_exts),
        batch_exts=list(config.batch_exts),
        builtin_arguments=config.builtin_arguments.value,
        allow_exec=settings.allow_exec,
    )
