"""
FastAPI dependency functions for retrieving components from the container.
"""

from cmdrepair.config.settings import Settings
from cmdrepair.container import container
from cmdrepair.ports.command.command_runner_port import CommandRunnerPort
from cmdrepair.use_cases.command.dispatch_command import RepairedCommandRunner
from cmdrepair.use_cases.command.repair_command import CommandRepairer


def get_settings() -> Settings:
    return container.get_settings()


def get_command_repairer() -> CommandRepairer:
    """
    Get the command repairer from the container.

    Returns:
        CommandRepairer: The command repairer instance
    """
    return container.get_command_repairer()


def get_dispatcher() -> RepairedCommandRunner:
    """
    Get the repairing dispatcher from the container.

    Returns:
        RepairedCommandRunner: The dispatcher instance
    """
    return container.get_repaired_runner()


def get_command_runner() -> CommandRunnerPort:
    """
    Get the command runner selected for this process.

    Returns:
        CommandRunnerPort: The runner instance
    """
    return container.get_command_runner()
